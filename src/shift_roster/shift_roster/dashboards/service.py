from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..common.actor import ActorContext
from ..core.constants import RECENT_REJECTED_LIMIT
from ..core.enums import ApprovalState, Role
from ..core.exceptions import AuthorizationError
from ..employees.model import Employee, employee_to_dict, visible_to_manager
from ..employees.repository import EmployeeRepository
from ..shift_entries.model import ShiftEntry, entry_to_dict
from ..shift_entries.repository import ShiftEntryRepository


@dataclass(frozen=True)
class ManagerView:
    pending: list[dict] = field(default_factory=list)
    approved: list[dict] = field(default_factory=list)
    rejected: list[dict] = field(default_factory=list)
    recent_rejected: list[dict] = field(default_factory=list)


@dataclass(frozen=True)
class OverviewView:
    employees: list[dict] = field(default_factory=list)
    entries: list[dict] = field(default_factory=list)


def matches_search(employee: Employee, term: Optional[str]) -> bool:
    term = (term or "").strip().lower()
    if not term:
        return True
    return term in employee.full_name.lower() or term in (employee.code or "").lower() or term in employee.employee_id


def _decided_at_key(entry: ShiftEntry) -> float:
    return entry.approved_at.timestamp() if entry.approved_at else 0.0


class DashboardService:
    """Role-scoped views over identities and shift entries."""

    def __init__(self, entries: ShiftEntryRepository, employees: EmployeeRepository):
        self._entries = entries
        self._employees = employees

    def _employees_by_id(self) -> Mapping[str, Employee]:
        return {e.employee_id: e for e in self._employees.list_all(role=Role.EMPLOYEE)}

    @staticmethod
    def _rows(entries: Iterable[ShiftEntry], employees: Mapping[str, Employee]) -> list[dict]:
        return [entry_to_dict(e, employees.get(e.employee_id)) for e in entries]

    @staticmethod
    def _require_manager(actor: ActorContext) -> None:
        if actor.role != Role.MANAGER:
            raise AuthorizationError("You do not have permission")

    def _visible(
        self, actor: ActorContext, employees: Mapping[str, Employee], search: Optional[str]
    ) -> list[ShiftEntry]:
        out: list[ShiftEntry] = []
        for entry in self._entries.list_entries():
            employee = employees.get(entry.employee_id)
            if visible_to_manager(actor, employee) and matches_search(employee, search):
                out.append(entry)
        return out

    def manager_view(self, *, actor: ActorContext, search: Optional[str] = None) -> ManagerView:
        self._require_manager(actor)
        employees = self._employees_by_id()
        entries = self._visible(actor, employees, search)

        pending = [e for e in entries if e.state == ApprovalState.PENDING]
        approved = [e for e in entries if e.state == ApprovalState.APPROVED]
        rejected = [e for e in entries if e.state == ApprovalState.REJECTED]
        recent = sorted(rejected, key=_decided_at_key, reverse=True)[:RECENT_REJECTED_LIMIT]

        return ManagerView(
            pending=self._rows(pending, employees),
            approved=self._rows(approved, employees),
            rejected=self._rows(rejected, employees),
            recent_rejected=self._rows(recent, employees),
        )

    def hr_view(self, *, actor: ActorContext) -> OverviewView:
        # All HR subtypes get the same unfiltered view.
        if actor.role != Role.HR:
            raise AuthorizationError("You do not have permission")

        employees = self._employees_by_id()
        return OverviewView(
            employees=[employee_to_dict(e) for e in employees.values()],
            entries=self._rows(self._entries.list_entries(), employees),
        )

    def admin_view(self, *, actor: ActorContext) -> OverviewView:
        if actor.role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        employees = list(self._employees.list_all(role=Role.EMPLOYEE))
        # Registrations awaiting a decision first; sorted() keeps newest-first within each group.
        employees = sorted(employees, key=lambda e: e.is_approved)
        return OverviewView(employees=[employee_to_dict(e) for e in employees])
