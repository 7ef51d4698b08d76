from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.actor import ActorContext
from ..common.validators import require_enum, require_non_empty
from ..core.constants import MIN_CODE_LENGTH
from ..core.enums import Department, Role
from ..core.exceptions import AuthorizationError, DuplicateRecordError, NotFoundError, ValidationError
from .model import Employee, IdentityResolution, IdentityStatus
from .repository import EmployeeRepository
from .shift_options import validate_selection

logger = logging.getLogger(__name__)


def normalize_code(code: Optional[str]) -> str:
    code = require_non_empty(code, "Employee code").upper()
    if len(code) < MIN_CODE_LENGTH:
        raise ValidationError(f"Employee code must be at least {MIN_CODE_LENGTH} characters")
    return code


class EmployeeService:
    """Use cases around identity records: resolve, register, admin approval."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _find(self, code: str) -> Optional[Employee]:
        raw = (code or "").strip()
        if len(raw) < MIN_CODE_LENGTH:
            return None
        employee = self._employees.get_by_code(raw.upper())
        if employee is None:
            employee = self._employees.get_by_id(raw)
        return employee

    @staticmethod
    def _resolution(employee: Optional[Employee]) -> IdentityResolution:
        if employee is None:
            return IdentityResolution(status=IdentityStatus.NEW)
        if employee.is_approved:
            return IdentityResolution(status=IdentityStatus.APPROVED, employee=employee)
        return IdentityResolution(status=IdentityStatus.PENDING_APPROVAL, employee=employee)

    def resolve_identity(self, code: str) -> IdentityResolution:
        """Look up by display code, then by system id.

        Store failures propagate; only a clean "not found" yields NEW.
        """
        return self._resolution(self._find(code))

    def register(
        self,
        *,
        code: str,
        full_name: str,
        department,
        shift_system: Optional[str] = None,
        shift_option: Optional[str] = None,
        shift_group: Optional[str] = None,
    ) -> IdentityResolution:
        code = normalize_code(code)
        full_name = require_non_empty(full_name, "Full name")
        dept = require_enum(Department, department, "Department")
        selection = validate_selection(dept, shift_system, shift_option, shift_group)

        existing = self._find(code)
        if existing is not None:
            # Already registered: hand back where they stand instead of creating.
            return self._resolution(existing)

        try:
            employee = self._employees.create(
                code=code,
                full_name=full_name,
                department=dept,
                section=selection.section,
                shift_group=selection.shift_group,
            )
        except DuplicateRecordError:
            raise ValidationError(f"Employee code {code} is already registered")

        logger.info("Registered employee code=%s id=%s dept=%s", code, employee.employee_id, dept.value)
        return IdentityResolution(status=IdentityStatus.PENDING_APPROVAL, employee=employee, created=True)

    def login(self, code: str) -> ActorContext:
        """Resolve an approved employee into a request actor."""
        resolution = self.resolve_identity(code)
        if resolution.status == IdentityStatus.NEW:
            raise NotFoundError("Employee is not registered")
        if resolution.status == IdentityStatus.PENDING_APPROVAL:
            raise AuthorizationError("Your registration is pending approval from the administrator")

        employee = resolution.employee
        return ActorContext(
            role=Role.EMPLOYEE,
            actor_id=employee.employee_id,
            display_name=employee.full_name,
            department=employee.department.value,
            section=employee.section,
            is_approved=True,
        )

    def list_employees(self, *, actor: ActorContext) -> Sequence[Employee]:
        if actor.role not in {Role.MANAGER, Role.HR, Role.ADMIN}:
            raise AuthorizationError("You do not have permission")
        return self._employees.list_all(role=Role.EMPLOYEE)

    def approve(self, *, actor: ActorContext, employee_id: str) -> Employee:
        if actor.role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee does not exist")

        if not self._employees.set_approved(employee.employee_id):
            raise NotFoundError("Employee does not exist")

        logger.info("Admin %s approved employee %s (%s)", actor.actor_id, employee.employee_id, employee.code)
        return self._employees.get_by_id(employee.employee_id) or employee

    def reject(self, *, actor: ActorContext, employee_id: str) -> None:
        """Reject a registration. This deletes the identity record."""
        if actor.role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee does not exist")
        if employee.role != Role.EMPLOYEE:
            raise ValidationError("Only employee registrations can be rejected")

        if not self._employees.delete_by_id(employee.employee_id):
            raise NotFoundError("Employee does not exist")

        logger.info("Admin %s rejected (deleted) employee %s (%s)", actor.actor_id, employee.employee_id, employee.code)
