from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.actor import ActorContext
from ..common.datetime_utils import now_utc, parse_iso_date, week_dates
from ..common.validators import require_enum, require_non_empty
from ..core.enums import ApprovalState, Role, ShiftType
from ..core.exceptions import (
    AuthorizationError,
    DuplicateEntryError,
    DuplicateRecordError,
    NotFoundError,
)
from ..employees.model import visible_to_manager
from ..employees.repository import EmployeeRepository
from .model import ShiftEntry
from .repository import ShiftEntryRepository

logger = logging.getLogger(__name__)


class ShiftEntryService:
    """Shift entry lifecycle: PENDING -> APPROVED | REJECTED.

    The one-entry-per-employee-per-date rule is a read-then-write pre-check;
    the schema's unique key catches what slips past it under concurrency.
    """

    def __init__(self, entries: ShiftEntryRepository, employees: EmployeeRepository):
        self._entries = entries
        self._employees = employees

    def _require_submitter(self, actor: ActorContext):
        if actor.role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can submit shift entries")

        employee = self._employees.get_by_id(actor.actor_id)
        if employee is None or not employee.can_submit_shifts():
            raise AuthorizationError("Your registration is pending approval from the administrator")
        return employee

    @staticmethod
    def _require_manager(actor: ActorContext) -> None:
        if actor.role != Role.MANAGER:
            raise AuthorizationError("Only managers can approve or reject shift entries")

    def _in_section(self, actor: ActorContext, employee_id: str, cache: Optional[dict] = None) -> bool:
        cache = {} if cache is None else cache
        if employee_id not in cache:
            cache[employee_id] = self._employees.get_by_id(employee_id)
        return visible_to_manager(actor, cache[employee_id])

    def submit(
        self,
        *,
        actor: ActorContext,
        work_date,
        shift_type,
        other_remark: Optional[str] = None,
    ) -> ShiftEntry:
        employee = self._require_submitter(actor)
        work_date = parse_iso_date(work_date)
        shift_type = require_enum(ShiftType, shift_type, "Shift type")

        if self._entries.get_for_employee_and_date(employee.employee_id, work_date) is not None:
            raise DuplicateEntryError(f"You have already submitted an entry for {work_date.isoformat()}")

        if shift_type == ShiftType.OTHER:
            remark = require_non_empty(other_remark, "Remark for other shift type")
        else:
            remark = None

        try:
            entry = self._entries.create(
                employee_id=employee.employee_id,
                work_date=work_date,
                shift_type=shift_type,
                other_remark=remark,
            )
        except DuplicateRecordError:
            raise DuplicateEntryError(f"You have already submitted an entry for {work_date.isoformat()}")

        logger.info(
            "Employee %s submitted %s for %s (entry=%s)",
            employee.code or employee.employee_id,
            shift_type.value,
            work_date.isoformat(),
            entry.entry_id,
        )
        return entry

    def _decide(
        self,
        *,
        actor: ActorContext,
        entry_id: str,
        state: ApprovalState,
        remark: Optional[str],
        now: Optional[datetime],
    ) -> ShiftEntry:
        entry = self._entries.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError("Shift entry does not exist")

        if not self._in_section(actor, entry.employee_id):
            logger.warning(
                "Manager %s (section=%s) refused on entry %s of another section",
                actor.actor_id,
                actor.section,
                entry.entry_id,
            )
            raise AuthorizationError("This entry belongs to another section")

        if not entry.is_pending:
            # Known gap: a decided entry can be decided again; kept as observed behaviour.
            logger.warning(
                "Entry %s is already %s; manager %s is re-deciding it as %s",
                entry.entry_id,
                entry.state.value,
                actor.actor_id,
                state.value,
            )

        decided_at = now or now_utc()
        if not self._entries.decide(
            entry_id=entry.entry_id,
            state=state,
            decided_by=actor.actor_id,
            decided_at=decided_at,
            remark=remark,
        ):
            raise NotFoundError("Shift entry does not exist")

        logger.info("Manager %s marked entry %s as %s", actor.actor_id, entry.entry_id, state.value)
        return self._entries.get_by_id(entry.entry_id) or entry

    def approve(self, *, actor: ActorContext, entry_id: str, now: Optional[datetime] = None) -> ShiftEntry:
        self._require_manager(actor)
        return self._decide(actor=actor, entry_id=entry_id, state=ApprovalState.APPROVED, remark=None, now=now)

    def reject(
        self,
        *,
        actor: ActorContext,
        entry_id: str,
        justification: str,
        now: Optional[datetime] = None,
    ) -> ShiftEntry:
        """Reject an entry. The justification overwrites any remark on the entry."""
        self._require_manager(actor)
        justification = require_non_empty(justification, "Rejection reason")
        return self._decide(
            actor=actor,
            entry_id=entry_id,
            state=ApprovalState.REJECTED,
            remark=justification,
            now=now,
        )

    def list_entries(self, *, actor: ActorContext, employee_id: Optional[str] = None) -> Sequence[ShiftEntry]:
        if actor.role == Role.EMPLOYEE:
            if employee_id is not None and str(employee_id) != actor.actor_id:
                raise AuthorizationError("You can only view your own entries")
            employee_id = actor.actor_id
        entries = self._entries.list_entries(employee_id=employee_id)
        if actor.role == Role.MANAGER:
            seen: dict = {}
            entries = [e for e in entries if self._in_section(actor, e.employee_id, seen)]
        return entries

    def week_overview(self, *, actor: ActorContext, anchor: Optional[date] = None, today: Optional[date] = None) -> dict:
        """Dates of the week around ``anchor`` with the ones already used flagged."""
        employee = self._require_submitter(actor)
        today = today or date.today()
        anchor = parse_iso_date(anchor) if anchor else today

        used = {e.work_date for e in self._entries.list_entries(employee_id=employee.employee_id)}
        days = [
            {
                "date": d.isoformat(),
                "weekday": d.strftime("%A"),
                "used": d in used,
                "is_today": d == today,
                "is_past": d < today,
            }
            for d in week_dates(anchor)
        ]
        tomorrow = today + timedelta(days=1)
        return {
            "today": {"date": today.isoformat(), "used": today in used},
            "tomorrow": {"date": tomorrow.isoformat(), "used": tomorrow in used},
            "week": days,
        }
