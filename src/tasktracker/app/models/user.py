"""User documents."""

from enum import Enum

from beanie import Indexed, PydanticObjectId
from pydantic import Field, field_validator

from .common import TimestampedDocument


class UserRole(str, Enum):
    """Roles supported by the authentication system."""

    USER = "user"
    ADMIN = "admin"


class User(TimestampedDocument):
    """An account able to sign in; ``recently_viewed_tasks`` is most-recent-first."""

    email: Indexed(str, unique=True)  # type: ignore[valid-type]
    hashed_password: str
    role: UserRole = UserRole.USER
    recently_viewed_tasks: list[PydanticObjectId] = Field(default_factory=list)

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, value: object) -> object:
        # Trimmed only: addresses stay case-sensitive as stored.
        if isinstance(value, str):
            return value.strip()
        return value

    class Settings:
        name = "users"


__all__ = ["User", "UserRole"]
