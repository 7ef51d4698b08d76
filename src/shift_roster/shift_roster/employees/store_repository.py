from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.enums import Department, Role
from ..database.record_store import Record, RecordStore
from .model import Employee
from .repository import EmployeeRepository

COLLECTION = "profiles"


def _to_employee(r: Record) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        code=r.get("custom_id"),
        full_name=r["full_name"],
        department=Department(r["department"]),
        role=Role(r.get("role") or Role.EMPLOYEE.value),
        is_approved=bool(r.get("is_approved")),
        section=r.get("section") or None,
        shift_group=r.get("shift_group") or None,
        created_at=r.get("created_at"),
    )


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        r = self._store.find_one(COLLECTION, {"id": str(employee_id)})
        return _to_employee(r) if r else None

    def get_by_code(self, code: str) -> Optional[Employee]:
        r = self._store.find_one(COLLECTION, {"custom_id": code})
        return _to_employee(r) if r else None

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
        r = self._store.insert(
            COLLECTION,
            {
                "id": str(uuid.uuid4()),
                "custom_id": code,
                "full_name": full_name,
                "department": department.value,
                "section": section,
                "shift_group": shift_group,
                "role": role.value,
                "is_approved": False,
            },
        )
        return _to_employee(r)

    def set_approved(self, employee_id: str) -> bool:
        return self._store.update(COLLECTION, {"id": str(employee_id)}, {"is_approved": True}) > 0

    def delete_by_id(self, employee_id: str) -> bool:
        return self._store.delete(COLLECTION, {"id": str(employee_id)}) > 0

    def list_all(self, *, role: Optional[Role] = None) -> Sequence[Employee]:
        filters = {"role": role.value} if role is not None else None
        rows = self._store.find(COLLECTION, filters, order_by="created_at", descending=True)
        return [_to_employee(r) for r in rows]
