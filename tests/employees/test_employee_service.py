from __future__ import annotations

import pytest

from src.shift_roster.shift_roster.common.actor import ActorContext
from src.shift_roster.shift_roster.core.enums import Department, Role
from src.shift_roster.shift_roster.core.exceptions import (
    AuthorizationError,
    DataAccessError,
    NotFoundError,
    ValidationError,
)
from src.shift_roster.shift_roster.employees.model import IdentityStatus


def register_jane(container, **overrides):
    fields = dict(code="e100", full_name="Jane Doe", department="IT")
    fields.update(overrides)
    return container.employee_service.register(**fields)


def test_unknown_code_resolves_to_new(container):
    assert container.employee_service.resolve_identity("E100").status == IdentityStatus.NEW


def test_short_code_is_not_looked_up(container):
    assert container.employee_service.resolve_identity("E1").status == IdentityStatus.NEW


def test_register_creates_pending_identity_with_upper_cased_code(container, store):
    resolution = register_jane(container)

    assert resolution.status == IdentityStatus.PENDING_APPROVAL
    assert resolution.created
    assert resolution.employee.code == "E100"
    assert resolution.employee.department == Department.IT
    assert resolution.employee.section is None
    assert [r["custom_id"] for r in store.rows("profiles")] == ["E100"]


def test_register_existing_code_returns_resolution_without_creating(container, store):
    register_jane(container)
    again = register_jane(container, full_name="Someone Else")

    assert not again.created
    assert again.status == IdentityStatus.PENDING_APPROVAL
    assert again.employee.full_name == "Jane Doe"
    assert len(store.rows("profiles")) == 1


def test_resolve_falls_back_to_system_id(container):
    employee = register_jane(container).employee
    resolution = container.employee_service.resolve_identity(employee.employee_id)
    assert resolution.employee.employee_id == employee.employee_id


@pytest.mark.parametrize(
    "overrides",
    [
        {"code": ""},
        {"code": "E1"},
        {"full_name": "  "},
        {"department": "Marketing"},
    ],
)
def test_register_rejects_invalid_input(container, store, overrides):
    with pytest.raises(ValidationError):
        register_jane(container, **overrides)
    assert store.rows("profiles") == []


def test_engineering_registration_stores_option_as_section(container):
    employee = register_jane(
        container,
        department="Engineering",
        shift_system="ThreeShift",
        shift_option="B",
        shift_group="Store",
    ).employee

    assert employee.section == "B"
    assert employee.shift_group == "Store"


def test_store_failure_during_lookup_does_not_register(container, store):
    store.fail_next = True
    with pytest.raises(DataAccessError):
        register_jane(container)
    assert store.rows("profiles") == []


def test_admin_approves_identity(container, admin):
    employee = register_jane(container).employee

    approved = container.employee_service.approve(actor=admin, employee_id=employee.employee_id)

    assert approved.is_approved
    assert container.employee_service.resolve_identity("E100").status == IdentityStatus.APPROVED


def test_approving_unknown_identity_fails_without_mutation(container, store, admin):
    register_jane(container)
    before = store.rows("profiles")

    with pytest.raises(NotFoundError):
        container.employee_service.approve(actor=admin, employee_id="no-such-id")
    assert store.rows("profiles") == before


def test_only_admin_can_approve(container, hr):
    employee = register_jane(container).employee
    with pytest.raises(AuthorizationError):
        container.employee_service.approve(actor=hr, employee_id=employee.employee_id)


def test_rejecting_identity_deletes_it(container, store, admin):
    employee = register_jane(container).employee

    container.employee_service.reject(actor=admin, employee_id=employee.employee_id)

    assert store.rows("profiles") == []
    assert container.employee_service.resolve_identity("E100").status == IdentityStatus.NEW


def test_login_requires_approval(container, admin):
    employee = register_jane(container).employee
    with pytest.raises(AuthorizationError):
        container.employee_service.login("E100")

    container.employee_service.approve(actor=admin, employee_id=employee.employee_id)
    actor = container.employee_service.login("e100")

    assert actor.role == Role.EMPLOYEE
    assert actor.actor_id == employee.employee_id
    assert actor.is_approved


def test_login_unknown_code_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.employee_service.login("E999")


def test_list_employees_requires_staff_role(container, hr):
    register_jane(container)
    assert [e.code for e in container.employee_service.list_employees(actor=hr)] == ["E100"]

    employee_actor = ActorContext(role=Role.EMPLOYEE, actor_id="u-1")
    with pytest.raises(AuthorizationError):
        container.employee_service.list_employees(actor=employee_actor)
