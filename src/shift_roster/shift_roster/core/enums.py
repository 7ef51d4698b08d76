from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Actor roles used for access checks."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    HR = "hr"
    ADMIN = "admin"


class ApprovalState(str, Enum):
    """Lifecycle state of a shift entry.

    Stored as a nullable boolean column: NULL = pending, 1 = approved,
    0 = rejected.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def from_flag(cls, flag: Optional[bool]) -> "ApprovalState":
        if flag is None:
            return cls.PENDING
        return cls.APPROVED if bool(flag) else cls.REJECTED

    def to_flag(self) -> Optional[bool]:
        if self is ApprovalState.PENDING:
            return None
        return self is ApprovalState.APPROVED


class ShiftType(str, Enum):
    FIRST_SHIFT = "1st_shift"
    SECOND_SHIFT = "2nd_shift"
    THIRD_SHIFT = "3rd_shift"
    LEAVE = "leave"
    MEDICAL = "medical"
    OT_OFF_DAY = "ot_off_day"
    OT_WEEK_OFF = "ot_week_off"
    OT_PUBLIC_HOLIDAY = "ot_public_holiday"
    OTHER = "other"


class Department(str, Enum):
    OPERATIONS = "Operations"
    ENGINEERING = "Engineering"
    HUMAN_RESOURCE = "Human Resource"
    COMMERCIAL = "Commercial"
    FINANCE = "Finance"
    PURCHASE = "Purchase"
    SERVICE = "Service"
    SAFETY = "Safety"
    IT = "IT"
    SECURITY = "Security"
    PLANNING = "Planning"
    MEDICAL_INSURANCE_TRAINING = "Staff Medical Insurance and Training"
    OTHERS = "Others"


class ShiftSystem(str, Enum):
    NORMAL = "Normal"
    TWO_SHIFT = "TwoShift"
    THREE_SHIFT = "ThreeShift"


class HRType(str, Enum):
    """HR login subtypes. They share the same (unfiltered) view."""

    HR = "hr"
    HR_ENG = "hr-eng"
    OP_LOGISTIC = "op-logistic"
