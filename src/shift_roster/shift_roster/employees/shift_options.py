"""Shift-system menus offered at registration.

Only Engineering and Operations pick a shift system. The option a
registrant picks is stored as their ``section`` and is what manager views
are scoped by.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import optional_text, require_enum
from ..core.enums import Department, ShiftSystem
from ..core.exceptions import ValidationError

SHIFT_SYSTEM_DEPARTMENTS = (Department.ENGINEERING, Department.OPERATIONS)

NORMAL_OPTIONS = ("Admin", "Others")
TWO_SHIFT_OPTIONS = ("QC", "RTG", "MES")
OPERATIONS_TWO_SHIFT_OPTIONS = ("QC-Senior Equipment", "RTG-Senior Equipment", "MES-Senior Equipment")
THREE_SHIFT_OPTIONS = ("A", "B", "C", "D")
THREE_SHIFT_GROUPS = ("Shift Incharge", "Store", "Planning")


@dataclass(frozen=True)
class ShiftSelection:
    section: Optional[str] = None
    shift_group: Optional[str] = None


def requires_shift_system(department: Department) -> bool:
    return department in SHIFT_SYSTEM_DEPARTMENTS


def options_for(department: Department, system: ShiftSystem) -> tuple[str, ...]:
    if system == ShiftSystem.NORMAL:
        return NORMAL_OPTIONS
    if system == ShiftSystem.TWO_SHIFT:
        return OPERATIONS_TWO_SHIFT_OPTIONS if department == Department.OPERATIONS else TWO_SHIFT_OPTIONS
    return THREE_SHIFT_OPTIONS


def groups_for(department: Department, system: ShiftSystem) -> tuple[str, ...]:
    if system == ShiftSystem.THREE_SHIFT and department == Department.ENGINEERING:
        return THREE_SHIFT_GROUPS
    return ()


def registration_menu() -> dict:
    """Menus per department/system, for the registration form."""
    menu: dict = {}
    for department in SHIFT_SYSTEM_DEPARTMENTS:
        menu[department.value] = {
            system.value: {
                "options": list(options_for(department, system)),
                "groups": list(groups_for(department, system)),
            }
            for system in ShiftSystem
        }
    return {
        "departments": [d.value for d in Department],
        "shift_systems": [s.value for s in ShiftSystem],
        "menus": menu,
    }


def validate_selection(
    department: Department,
    shift_system: Optional[str],
    shift_option: Optional[str],
    shift_group: Optional[str],
) -> ShiftSelection:
    """Check the department-conditional shift fields.

    Departments without a shift system ignore whatever was sent.
    """
    if not requires_shift_system(department):
        return ShiftSelection()

    if not optional_text(shift_system):
        raise ValidationError(f"Shift system is required for {department.value} department")
    system = require_enum(ShiftSystem, shift_system.strip(), "Shift system")

    option = optional_text(shift_option)
    if not option:
        raise ValidationError("Shift option is required")
    if option not in options_for(department, system):
        raise ValidationError("Shift option is not valid")

    group = optional_text(shift_group)
    groups = groups_for(department, system)
    if groups:
        if not group:
            raise ValidationError("Shift group is required")
        if group not in groups:
            raise ValidationError("Shift group is not valid")
    else:
        group = None

    return ShiftSelection(section=option, shift_group=group)
