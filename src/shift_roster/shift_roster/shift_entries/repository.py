from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ApprovalState, ShiftType
from .model import ShiftEntry


class ShiftEntryRepository(Protocol):
    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        shift_type: ShiftType,
        other_remark: Optional[str],
    ) -> ShiftEntry:
        """Persist a new pending entry."""

        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[ShiftEntry]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[ShiftEntry]:
        raise NotImplementedError

    def list_entries(self, *, employee_id: Optional[str] = None) -> Sequence[ShiftEntry]:
        """Newest date first."""

        raise NotImplementedError

    def decide(
        self,
        *,
        entry_id: str,
        state: ApprovalState,
        decided_by: str,
        decided_at: datetime,
        remark: Optional[str] = None,
    ) -> bool:
        """Record an approve/reject decision. ``remark`` (when given) replaces the stored remark."""

        raise NotImplementedError
