"""User-facing schemas."""

from __future__ import annotations

from beanie import PydanticObjectId

from ..models import UserRole
from .common import APIModel, UTCDateTime


class UserPublic(APIModel):
    """A user record without its password hash."""

    id: PydanticObjectId
    email: str
    role: UserRole
    recently_viewed_tasks: list[PydanticObjectId] = []
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserRef(APIModel):
    """Minimal reference to a user, as embedded in tasks and reports."""

    id: PydanticObjectId
    email: str


__all__ = ["UserPublic", "UserRef"]
