from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import HRType
from ..database.record_store import Record, RecordStore
from .model import AdminCredential, HRAccount, ManagerAccount
from .repository import CredentialRepository


def _to_manager(r: Record) -> ManagerAccount:
    return ManagerAccount(
        manager_id=str(r["id"]),
        full_name=r["full_name"],
        department=r["department"],
        group_name=r.get("group_name") or r["department"],
        title=r.get("title") or r["full_name"],
        password=r["password"],
        section=r.get("section") or None,
        sort_order=int(r.get("sort_order") or 0),
    )


class StoreCredentialRepository(CredentialRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_manager(self, manager_id: str) -> Optional[ManagerAccount]:
        r = self._store.find_one("managers", {"id": manager_id})
        return _to_manager(r) if r else None

    def list_managers(self) -> Sequence[ManagerAccount]:
        return [_to_manager(r) for r in self._store.find("managers", order_by="sort_order")]

    def find_hr_by_secret(self, secret: str) -> Optional[HRAccount]:
        r = self._store.find_one("hr_users", {"password": secret})
        if not r:
            return None
        return HRAccount(
            hr_id=str(r["id"]),
            username=r["username"],
            password=r["password"],
            hr_type=HRType(r["type"]),
        )

    def find_admin_by_code(self, code: str) -> Optional[AdminCredential]:
        r = self._store.find_one("admin_credentials", {"code": code})
        return AdminCredential(admin_id=str(r["id"]), code=r["code"]) if r else None
