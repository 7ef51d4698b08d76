from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import ApprovalState, ShiftType
from ..database.record_store import Record, RecordStore
from .model import ShiftEntry
from .repository import ShiftEntryRepository

COLLECTION = "shift_entries"


def _to_entry(r: Record) -> ShiftEntry:
    return ShiftEntry(
        entry_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=parse_iso_date(r["date"]),
        shift_type=ShiftType(r["shift_type"]),
        state=ApprovalState.from_flag(r.get("approved")),
        other_remark=r.get("other_remark") or None,
        approved_by=r.get("approved_by") or None,
        approved_at=r.get("approved_at"),
        created_at=r.get("created_at"),
    )


class StoreShiftEntryRepository(ShiftEntryRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        shift_type: ShiftType,
        other_remark: Optional[str],
    ) -> ShiftEntry:
        r = self._store.insert(
            COLLECTION,
            {
                "id": str(uuid.uuid4()),
                "employee_id": str(employee_id),
                "date": work_date,
                "shift_type": shift_type.value,
                "other_remark": other_remark,
                "approved": ApprovalState.PENDING.to_flag(),
            },
        )
        return _to_entry(r)

    def get_by_id(self, entry_id: str) -> Optional[ShiftEntry]:
        r = self._store.find_one(COLLECTION, {"id": str(entry_id)})
        return _to_entry(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[ShiftEntry]:
        r = self._store.find_one(COLLECTION, {"employee_id": str(employee_id), "date": work_date})
        return _to_entry(r) if r else None

    def list_entries(self, *, employee_id: Optional[str] = None) -> Sequence[ShiftEntry]:
        filters = {"employee_id": str(employee_id)} if employee_id is not None else None
        rows = self._store.find(COLLECTION, filters, order_by="date", descending=True)
        return [_to_entry(r) for r in rows]

    def decide(
        self,
        *,
        entry_id: str,
        state: ApprovalState,
        decided_by: str,
        decided_at: datetime,
        remark: Optional[str] = None,
    ) -> bool:
        patch = {
            "approved": state.to_flag(),
            "approved_by": decided_by,
            "approved_at": decided_at,
        }
        if remark is not None:
            patch["other_remark"] = remark
        return self._store.update(COLLECTION, {"id": str(entry_id)}, patch) > 0
