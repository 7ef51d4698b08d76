from __future__ import annotations

import pytest

from src.shift_roster.shift_roster.core.enums import HRType, Role
from src.shift_roster.shift_roster.core.exceptions import AuthenticationError
from src.shift_roster.shift_roster.credentials.service import INVALID_CREDENTIALS


def test_manager_login_carries_section(container):
    actor = container.auth_service.authenticate_manager("ENG-QC", "QC@Eng2025!")

    assert actor.role == Role.MANAGER
    assert actor.actor_id == "ENG-QC"
    assert actor.department == "Engineering"
    assert actor.section == "QC"


@pytest.mark.parametrize(
    "manager_id,password",
    [
        ("ENG-QC", "wrong"),
        ("ENG-QC", "qc@eng2025!"),
        ("ENG-XX", "QC@Eng2025!"),
        ("", "QC@Eng2025!"),
        ("ENG-QC", ""),
    ],
)
def test_manager_login_failures_share_one_message(container, manager_id, password):
    with pytest.raises(AuthenticationError) as exc:
        container.auth_service.authenticate_manager(manager_id, password)
    assert str(exc.value) == INVALID_CREDENTIALS


def test_hr_code_selects_subtype(container):
    assert container.auth_service.authenticate_hr("Main123*").hr_type == HRType.HR
    eng = container.auth_service.authenticate_hr("ENG123*")
    assert eng.role == Role.HR
    assert eng.hr_type == HRType.HR_ENG


@pytest.mark.parametrize("code", ["", "main123*", "nope"])
def test_hr_bad_code_fails(container, code):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate_hr(code)


def test_admin_code(container):
    assert container.auth_service.authenticate_admin("ADMIN123").role == Role.ADMIN
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate_admin("admin123")


def test_manager_groups_follow_sort_order_and_hide_passwords(container):
    groups = container.auth_service.list_manager_groups()

    assert [g.name for g in groups] == ["Operations Managers", "Engineering Managers", "IT Managers"]
    assert [s.manager_id for s in groups[0].slots] == ["OPS-SM1", "OPS-SMGA"]
    assert not hasattr(groups[1].slots[0], "password")
