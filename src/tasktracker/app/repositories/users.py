"""Repository for user documents."""

from __future__ import annotations

from beanie import PydanticObjectId

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Credential store access."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive lookup."""
        return await User.find_one({"email": email})

    async def set_recently_viewed(self, user: User, task_ids: list[PydanticObjectId]) -> User:
        """Write only the history field so concurrent profile changes survive."""
        await user.set({User.recently_viewed_tasks: task_ids})
        return user

    async def delete_all(self) -> int:
        result = await User.find_all().delete()
        return result.deleted_count if result is not None else 0


__all__ = ["UserRepository"]
