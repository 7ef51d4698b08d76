from __future__ import annotations

import copy
from datetime import datetime, timedelta

import pytest

from src.shift_roster.shift_roster.common.actor import ActorContext
from src.shift_roster.shift_roster.container import build_container_from_store
from src.shift_roster.shift_roster.core.enums import HRType, Role
from src.shift_roster.shift_roster.core.exceptions import DataAccessError, DuplicateRecordError
from src.shift_roster.shift_roster.database.record_store import COLLECTIONS

# (collection, columns) pairs that must be unique, mirroring database/schema.sql.
UNIQUE_KEYS = {
    "profiles": (("id",), ("custom_id",)),
    "shift_entries": (("id",), ("employee_id", "date")),
    "managers": (("id",),),
    "hr_users": (("id",),),
    "admin_credentials": (("id",),),
}


class InMemoryRecordStore:
    """Dict-backed RecordStore with the same unique keys as the MySQL schema."""

    def __init__(self):
        self._rows: dict[str, list[dict]] = {name: [] for name in COLLECTIONS}
        self._clock = datetime(2025, 3, 1, 8, 0, 0)
        self.fail_next = False

    def _collection(self, collection):
        if collection not in self._rows:
            raise DataAccessError(f"Unknown collection: {collection}")
        if self.fail_next:
            self.fail_next = False
            raise DataAccessError("store unavailable")
        return self._rows[collection]

    @staticmethod
    def _matches(row, filters):
        return all(row.get(k) == v for k, v in (filters or {}).items())

    def find(self, collection, filters=None, *, order_by=None, descending=False, limit=None):
        rows = [copy.deepcopy(r) for r in self._collection(collection) if self._matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by) is None, r.get(order_by)), reverse=descending)
        if limit is not None:
            rows = rows[: int(limit)]
        return rows

    def find_one(self, collection, filters):
        rows = self.find(collection, filters, limit=1)
        return rows[0] if rows else None

    def insert(self, collection, record):
        rows = self._collection(collection)
        if "id" not in record:
            raise DataAccessError(f"Record for {collection} has no id")

        row = {c: None for c in COLLECTIONS[collection]}
        row.update(record)
        if "created_at" in row and row["created_at"] is None:
            self._clock += timedelta(minutes=1)
            row["created_at"] = self._clock

        for key in UNIQUE_KEYS[collection]:
            if any(all(r.get(c) == row.get(c) for c in key) for r in rows):
                raise DuplicateRecordError(f"Duplicate entry for {collection}.{'+'.join(key)}")

        rows.append(row)
        return copy.deepcopy(row)

    def update(self, collection, filters, patch):
        if not filters:
            raise DataAccessError("Refusing to update without a filter")
        matched = [r for r in self._collection(collection) if self._matches(r, filters)]
        for r in matched:
            r.update(patch)
        return len(matched)

    def delete(self, collection, filters):
        if not filters:
            raise DataAccessError("Refusing to delete without a filter")
        rows = self._collection(collection)
        keep = [r for r in rows if not self._matches(r, filters)]
        removed = len(rows) - len(keep)
        rows[:] = keep
        return removed

    def rows(self, collection):
        return [copy.deepcopy(r) for r in self._rows[collection]]


def seed_credentials(store: InMemoryRecordStore) -> None:
    managers = [
        ("OPS-SM1", "Senior Manager (x1)", "Operations", None, "Ops$enior2025!", "Operations Managers", 10),
        ("OPS-SMGA", "Shift Manager G-A", "Operations", "A", "Sh1ftGA@2025!", "Operations Managers", 13),
        ("ENG-QC", "QC Manager", "Engineering", "QC", "QC@Eng2025!", "Engineering Managers", 21),
        ("ENG-RTG", "RTG Manager", "Engineering", "RTG", "RTG@Eng2025!", "Engineering Managers", 22),
        ("IT-M", "IT Manager", "IT", None, "IT@M@nager2025!", "IT Managers", 70),
    ]
    for manager_id, name, dept, section, password, group, order in managers:
        store.insert(
            "managers",
            {
                "id": manager_id,
                "full_name": name,
                "department": dept,
                "section": section,
                "password": password,
                "group_name": group,
                "title": name,
                "sort_order": order,
            },
        )
    store.insert("hr_users", {"id": "hr-main", "username": "HR (Main)", "password": "Main123*", "type": "hr"})
    store.insert("hr_users", {"id": "hr-eng", "username": "HR (Engineering)", "password": "ENG123*", "type": "hr-eng"})
    store.insert("admin_credentials", {"id": "admin", "code": "ADMIN123"})


@pytest.fixture
def store():
    s = InMemoryRecordStore()
    seed_credentials(s)
    return s


@pytest.fixture
def container(store):
    return build_container_from_store(store)


@pytest.fixture
def admin():
    return ActorContext(role=Role.ADMIN, actor_id="admin", display_name="Administrator")


@pytest.fixture
def hr():
    return ActorContext(role=Role.HR, actor_id="hr-main", display_name="HR (Main)", hr_type=HRType.HR)
