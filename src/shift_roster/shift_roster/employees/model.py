from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..common.actor import ActorContext
from ..core.enums import Department, Role


@dataclass(frozen=True)
class Employee:
    """Identity record ("profile").

    ``employee_id`` is the system-assigned key; ``code`` is the human-chosen
    display code used for lookup.
    """

    employee_id: str
    code: Optional[str]
    full_name: str
    department: Department
    role: Role
    is_approved: bool = False
    section: Optional[str] = None
    shift_group: Optional[str] = None
    created_at: Optional[datetime] = None

    def can_submit_shifts(self) -> bool:
        return self.role == Role.EMPLOYEE and self.is_approved


class IdentityStatus(str, Enum):
    NEW = "NEW"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"


@dataclass(frozen=True)
class IdentityResolution:
    status: IdentityStatus
    employee: Optional[Employee] = None
    created: bool = False


def employee_to_dict(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "code": e.code,
        "full_name": e.full_name,
        "department": e.department.value,
        "section": e.section,
        "shift_group": e.shift_group,
        "role": e.role.value,
        "is_approved": e.is_approved,
        "created_at": e.created_at.isoformat() if e.created_at else None,
    }


def visible_to_manager(manager: ActorContext, employee: Optional[Employee]) -> bool:
    """Entries of unknown employees are never shown; a manager without a section sees every section."""
    if employee is None:
        return False
    if manager.section and employee.section != manager.section:
        return False
    return True
