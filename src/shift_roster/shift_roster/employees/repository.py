from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Department, Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for identity records.

    Services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        code: str,
        full_name: str,
        department: Department,
        section: Optional[str],
        shift_group: Optional[str],
        role: Role = Role.EMPLOYEE,
    ) -> Employee:
        raise NotImplementedError

    def set_approved(self, employee_id: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def list_all(self, *, role: Optional[Role] = None) -> Sequence[Employee]:
        raise NotImplementedError
