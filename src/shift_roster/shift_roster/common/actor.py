from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import HRType, Role


@dataclass(frozen=True)
class ActorContext:
    """Who is making the current request.

    Built once per request (from the Flask session) and passed into every
    service call; services never read ambient login state.
    """

    role: Role
    actor_id: str
    display_name: str = ""
    department: Optional[str] = None
    section: Optional[str] = None
    hr_type: Optional[HRType] = None
    is_approved: bool = False

    def to_session(self) -> dict:
        return {
            "role": self.role.value,
            "actor_id": self.actor_id,
            "name": self.display_name,
            "department": self.department,
            "section": self.section,
            "hr_type": self.hr_type.value if self.hr_type else None,
            "is_approved": self.is_approved,
        }

    @classmethod
    def from_session(cls, data) -> Optional["ActorContext"]:
        if not data or not data.get("role") or not data.get("actor_id"):
            return None
        try:
            role = Role(data["role"])
            hr_type = HRType(data["hr_type"]) if data.get("hr_type") else None
        except ValueError:
            return None
        return cls(
            role=role,
            actor_id=str(data["actor_id"]),
            display_name=data.get("name") or "",
            department=data.get("department"),
            section=data.get("section"),
            hr_type=hr_type,
            is_approved=bool(data.get("is_approved")),
        )
