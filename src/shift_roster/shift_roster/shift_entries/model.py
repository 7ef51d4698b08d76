from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ApprovalState, ShiftType


@dataclass(frozen=True)
class ShiftEntry:
    """One day's shift / leave / overtime declaration by an employee."""

    entry_id: str
    employee_id: str
    work_date: date
    shift_type: ShiftType
    state: ApprovalState = ApprovalState.PENDING
    other_remark: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.state == ApprovalState.PENDING


@dataclass(frozen=True)
class ShiftTypeInfo:
    value: ShiftType
    label: str
    description: str


SHIFT_TYPE_CATALOG: tuple[ShiftTypeInfo, ...] = (
    ShiftTypeInfo(ShiftType.FIRST_SHIFT, "1st Shift", "6:00 AM - 2:00 PM"),
    ShiftTypeInfo(ShiftType.SECOND_SHIFT, "2nd Shift", "2:00 PM - 10:00 PM"),
    ShiftTypeInfo(ShiftType.THIRD_SHIFT, "3rd Shift", "10:00 PM - 6:00 AM"),
    ShiftTypeInfo(ShiftType.LEAVE, "Leave", "Full Day Leave"),
    ShiftTypeInfo(ShiftType.MEDICAL, "Medical Leave", "Medical Emergency/Appointment"),
    ShiftTypeInfo(ShiftType.OT_OFF_DAY, "OT (Off Day)", "Overtime on Regular Off Day"),
    ShiftTypeInfo(ShiftType.OT_WEEK_OFF, "OT (Week Off)", "Overtime on Weekly Off"),
    ShiftTypeInfo(ShiftType.OT_PUBLIC_HOLIDAY, "OT (Public Holiday)", "Overtime on Public Holiday"),
    ShiftTypeInfo(ShiftType.OTHER, "Other", "Other Types (Please Specify)"),
)

SHIFT_TYPE_LABELS = {info.value: info.label for info in SHIFT_TYPE_CATALOG}


def entry_to_dict(entry: ShiftEntry, employee=None) -> dict:
    """Serialize an entry, optionally joined with its owner's identity."""
    return {
        "entry_id": entry.entry_id,
        "employee_id": entry.employee_id,
        "employee_code": employee.code if employee else None,
        "employee_name": employee.full_name if employee else None,
        "section": employee.section if employee else None,
        "date": entry.work_date.isoformat(),
        "shift_type": entry.shift_type.value,
        "shift_label": SHIFT_TYPE_LABELS.get(entry.shift_type, entry.shift_type.value),
        "remark": entry.other_remark,
        "state": entry.state.value,
        "approved_by": entry.approved_by,
        "approved_at": entry.approved_at.isoformat() if entry.approved_at else None,
    }
