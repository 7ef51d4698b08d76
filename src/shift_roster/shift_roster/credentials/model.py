from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import HRType


@dataclass(frozen=True)
class ManagerAccount:
    """A titled manager slot inside a named group (e.g. "Engineering Managers")."""

    manager_id: str
    full_name: str
    department: str
    group_name: str
    title: str
    password: str
    section: Optional[str] = None
    sort_order: int = 0


@dataclass(frozen=True)
class HRAccount:
    hr_id: str
    username: str
    password: str
    hr_type: HRType


@dataclass(frozen=True)
class ManagerSlot:
    """Login picker entry. Carries no secret."""

    manager_id: str
    title: str


@dataclass(frozen=True)
class ManagerGroup:
    name: str
    slots: tuple[ManagerSlot, ...]


@dataclass(frozen=True)
class AdminCredential:
    admin_id: str
    code: str
