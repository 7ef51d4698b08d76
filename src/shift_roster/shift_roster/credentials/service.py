from __future__ import annotations

import hmac
import logging
from typing import Optional, Sequence

from ..common.actor import ActorContext
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import ManagerGroup, ManagerSlot
from .repository import CredentialRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid code or password"


def _same_secret(given: Optional[str], stored: Optional[str]) -> bool:
    # Shared secrets are stored in plaintext; compare exactly (the DB collation may not be case-sensitive).
    if not given or stored is None:
        return False
    return hmac.compare_digest(given.encode("utf-8"), stored.encode("utf-8"))


class AuthService:
    """Use case: authenticate managers, HR and admin by shared secret.

    Every failure raises the same message so callers cannot tell an unknown
    id from a wrong password.
    """

    def __init__(self, credentials: CredentialRepository):
        self._credentials = credentials

    def list_manager_groups(self) -> Sequence[ManagerGroup]:
        groups: dict[str, list[ManagerSlot]] = {}
        for m in self._credentials.list_managers():
            groups.setdefault(m.group_name, []).append(ManagerSlot(manager_id=m.manager_id, title=m.title))
        return [ManagerGroup(name=name, slots=tuple(slots)) for name, slots in groups.items()]

    def authenticate_manager(self, manager_id: str, password: str) -> ActorContext:
        manager_id = (manager_id or "").strip()
        manager = self._credentials.get_manager(manager_id) if manager_id else None
        if manager is None or manager.manager_id != manager_id or not _same_secret(password, manager.password):
            logger.warning("Failed manager login for id=%s", manager_id or "-")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Manager %s logged in (section=%s)", manager.manager_id, manager.section or "*")
        return ActorContext(
            role=Role.MANAGER,
            actor_id=manager.manager_id,
            display_name=manager.full_name,
            department=manager.department,
            section=manager.section,
        )

    def authenticate_hr(self, code: str) -> ActorContext:
        account = self._credentials.find_hr_by_secret(code) if code else None
        if account is None or not _same_secret(code, account.password):
            logger.warning("Failed HR login")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("HR user %s logged in (type=%s)", account.hr_id, account.hr_type.value)
        return ActorContext(
            role=Role.HR,
            actor_id=account.hr_id,
            display_name=account.username,
            hr_type=account.hr_type,
        )

    def authenticate_admin(self, code: str) -> ActorContext:
        credential = self._credentials.find_admin_by_code(code) if code else None
        if credential is None or not _same_secret(code, credential.code):
            logger.warning("Failed admin login")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Admin %s logged in", credential.admin_id)
        return ActorContext(role=Role.ADMIN, actor_id=credential.admin_id, display_name="Administrator")
