from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.exceptions import DataAccessError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone

Record = dict

# Collections the application is allowed to touch, with their columns.
# Column names are interpolated into SQL, so anything not listed here is rejected.
COLLECTIONS: dict[str, tuple[str, ...]] = {
    "profiles": (
        "id",
        "custom_id",
        "full_name",
        "department",
        "section",
        "shift_group",
        "role",
        "is_approved",
        "created_at",
    ),
    "shift_entries": (
        "id",
        "employee_id",
        "date",
        "shift_type",
        "other_remark",
        "approved",
        "approved_by",
        "approved_at",
        "created_at",
    ),
    "managers": ("id", "full_name", "department", "section", "password", "group_name", "title", "sort_order"),
    "hr_users": ("id", "username", "password", "type"),
    "admin_credentials": ("id", "code"),
}


class RecordStore(Protocol):
    """Generic CRUD over named collections with equality filters."""

    def find(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[Record]:
        raise NotImplementedError

    def find_one(self, collection: str, filters: Mapping[str, Any]) -> Optional[Record]:
        raise NotImplementedError

    def insert(self, collection: str, record: Mapping[str, Any]) -> Record:
        """Insert ``record`` (which must carry its ``id``) and return the stored row."""

        raise NotImplementedError

    def update(self, collection: str, filters: Mapping[str, Any], patch: Mapping[str, Any]) -> int:
        """Return the number of matched records."""

        raise NotImplementedError

    def delete(self, collection: str, filters: Mapping[str, Any]) -> int:
        raise NotImplementedError


def _columns(collection: str) -> tuple[str, ...]:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise DataAccessError(f"Unknown collection: {collection}")


def _check_fields(collection: str, fields) -> None:
    allowed = _columns(collection)
    for f in fields:
        if f not in allowed:
            raise DataAccessError(f"Unknown field {f!r} for {collection}")


def _where(collection: str, filters: Optional[Mapping[str, Any]]) -> tuple[str, list[object]]:
    if not filters:
        return "1=1", []
    _check_fields(collection, filters)
    clauses: list[str] = []
    params: list[object] = []
    for col, value in filters.items():
        if value is None:
            clauses.append(f"`{col}` IS NULL")
        else:
            clauses.append(f"`{col}`=%s")
            params.append(value)
    return " AND ".join(clauses), params


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[Record]:
        columns = _columns(collection)
        where, params = _where(collection, filters)

        sql = f"SELECT {', '.join(f'`{c}`' for c in columns)} FROM `{collection}` WHERE {where}"
        if order_by:
            _check_fields(collection, [order_by])
            sql += f" ORDER BY `{order_by}` {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return fetchall(cur)

    def find_one(self, collection: str, filters: Mapping[str, Any]) -> Optional[Record]:
        rows = self.find(collection, filters, limit=1)
        return rows[0] if rows else None

    def insert(self, collection: str, record: Mapping[str, Any]) -> Record:
        if "id" not in record:
            raise DataAccessError(f"Record for {collection} has no id")
        _check_fields(collection, record)
        cols = list(record.keys())
        columns = _columns(collection)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{collection}`({', '.join(f'`{c}`' for c in cols)}) "
                f"VALUES({', '.join(['%s'] * len(cols))})",
                tuple(record[c] for c in cols),
            )
            cur.execute(
                f"SELECT {', '.join(f'`{c}`' for c in columns)} FROM `{collection}` WHERE `id`=%s",
                (record["id"],),
            )
            row = fetchone(cur)
            if not row:
                raise DataAccessError(f"Inserted {collection} record could not be read back")
            return row

    def update(self, collection: str, filters: Mapping[str, Any], patch: Mapping[str, Any]) -> int:
        if not filters:
            raise DataAccessError("Refusing to update without a filter")
        if not patch:
            return 0
        _check_fields(collection, patch)
        where, where_params = _where(collection, filters)
        assignments = ", ".join(f"`{c}`=%s" for c in patch)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE `{collection}` SET {assignments} WHERE {where}",
                tuple(list(patch.values()) + where_params),
            )
            return int(cur.rowcount)

    def delete(self, collection: str, filters: Mapping[str, Any]) -> int:
        if not filters:
            raise DataAccessError("Refusing to delete without a filter")
        where, params = _where(collection, filters)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{collection}` WHERE {where}", tuple(params))
            return int(cur.rowcount)
