from __future__ import annotations

import pytest

from src.shift_roster.shift_roster.core.enums import Department
from src.shift_roster.shift_roster.core.exceptions import ValidationError
from src.shift_roster.shift_roster.employees.shift_options import registration_menu, validate_selection


def test_departments_without_shift_system_ignore_selection():
    selection = validate_selection(Department.FINANCE, "TwoShift", "QC", None)
    assert selection.section is None
    assert selection.shift_group is None


def test_operations_two_shift_uses_senior_equipment_options():
    selection = validate_selection(Department.OPERATIONS, "TwoShift", "RTG-Senior Equipment", None)
    assert selection.section == "RTG-Senior Equipment"

    with pytest.raises(ValidationError):
        validate_selection(Department.OPERATIONS, "TwoShift", "RTG", None)


def test_engineering_two_shift_has_no_group():
    selection = validate_selection(Department.ENGINEERING, "TwoShift", "QC", "Store")
    assert selection.section == "QC"
    assert selection.shift_group is None


@pytest.mark.parametrize(
    "department,system,option,group",
    [
        (Department.ENGINEERING, None, "QC", None),
        (Department.OPERATIONS, "Rotating", "A", None),
        (Department.OPERATIONS, "ThreeShift", "", None),
        (Department.OPERATIONS, "ThreeShift", "E", None),
        (Department.ENGINEERING, "ThreeShift", "A", None),
        (Department.ENGINEERING, "ThreeShift", "A", "Canteen"),
    ],
)
def test_invalid_selection_is_rejected(department, system, option, group):
    with pytest.raises(ValidationError):
        validate_selection(department, system, option, group)


def test_operations_three_shift_does_not_need_group():
    selection = validate_selection(Department.OPERATIONS, "ThreeShift", "D", None)
    assert selection.section == "D"


def test_registration_menu_lists_conditional_departments():
    menu = registration_menu()

    assert "IT" in menu["departments"]
    assert set(menu["menus"]) == {"Engineering", "Operations"}
    assert menu["menus"]["Engineering"]["ThreeShift"]["groups"] == ["Shift Incharge", "Store", "Planning"]
    assert menu["menus"]["Operations"]["ThreeShift"]["groups"] == []
    assert menu["menus"]["Operations"]["Normal"]["options"] == ["Admin", "Others"]
