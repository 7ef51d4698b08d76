from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AdminCredential, HRAccount, ManagerAccount


class CredentialRepository(Protocol):
    """Read-only access to manager, HR and admin credential records."""

    def get_manager(self, manager_id: str) -> Optional[ManagerAccount]:
        raise NotImplementedError

    def list_managers(self) -> Sequence[ManagerAccount]:
        raise NotImplementedError

    def find_hr_by_secret(self, secret: str) -> Optional[HRAccount]:
        raise NotImplementedError

    def find_admin_by_code(self, code: str) -> Optional[AdminCredential]:
        raise NotImplementedError
