"""The caller identity derived from a validated bearer token."""

from __future__ import annotations

from dataclasses import dataclass

from beanie import PydanticObjectId

from ..models import User, UserRole


@dataclass(frozen=True, slots=True)
class Identity:
    """Who is calling. Passed explicitly as ``Identity | None`` to every query."""

    user_id: PydanticObjectId
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        if user.id is None:
            raise ValueError("User must be persisted before it can act as an identity.")
        return cls(user_id=user.id, email=user.email, role=user.role)


__all__ = ["Identity"]
