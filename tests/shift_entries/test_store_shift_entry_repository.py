from __future__ import annotations

from datetime import date, datetime

from src.shift_roster.shift_roster.core.enums import ApprovalState, ShiftType
from src.shift_roster.shift_roster.shift_entries.store_repository import StoreShiftEntryRepository


def test_pending_is_stored_as_null_flag(store):
    repo = StoreShiftEntryRepository(store)

    entry = repo.create(employee_id="u-1", work_date=date(2025, 3, 10), shift_type=ShiftType.LEAVE, other_remark=None)

    assert store.rows("shift_entries")[0]["approved"] is None
    assert entry.state == ApprovalState.PENDING
    assert repo.get_for_employee_and_date("u-1", date(2025, 3, 10)).entry_id == entry.entry_id


def test_decide_maps_state_to_flag_and_keeps_remark_unless_given(store):
    repo = StoreShiftEntryRepository(store)
    entry = repo.create(
        employee_id="u-1", work_date=date(2025, 3, 10), shift_type=ShiftType.OTHER, other_remark="Training"
    )
    at = datetime(2025, 3, 10, 9, 0)

    assert repo.decide(entry_id=entry.entry_id, state=ApprovalState.APPROVED, decided_by="ENG-QC", decided_at=at)
    approved = repo.get_by_id(entry.entry_id)
    assert store.rows("shift_entries")[0]["approved"] is True
    assert approved.other_remark == "Training"

    repo.decide(
        entry_id=entry.entry_id, state=ApprovalState.REJECTED, decided_by="ENG-QC", decided_at=at, remark="No"
    )
    rejected = repo.get_by_id(entry.entry_id)
    assert rejected.state == ApprovalState.REJECTED
    assert rejected.other_remark == "No"


def test_tinyint_flags_from_mysql_map_to_states(store):
    repo = StoreShiftEntryRepository(store)
    for n, flag in enumerate((0, 1, None), start=1):
        store.insert(
            "shift_entries",
            {"id": f"e{n}", "employee_id": "u-1", "date": date(2025, 3, n), "shift_type": "leave", "approved": flag},
        )

    states = {e.entry_id: e.state for e in repo.list_entries(employee_id="u-1")}

    assert states == {"e1": ApprovalState.REJECTED, "e2": ApprovalState.APPROVED, "e3": ApprovalState.PENDING}


def test_decide_unknown_entry_reports_false(store):
    repo = StoreShiftEntryRepository(store)
    assert not repo.decide(
        entry_id="missing", state=ApprovalState.APPROVED, decided_by="x", decided_at=datetime(2025, 3, 10)
    )
