"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from beanie import PydanticObjectId
from pymongo.errors import DuplicateKeyError

from ..core.security import hash_password_async
from ..errors import ConflictError
from ..models import User, UserRole
from ..repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` documents."""

    def __init__(self, repository: UserRepository | None = None) -> None:
        self._repository = repository or UserRepository()

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Hash ``password`` and persist a new account."""
        hashed_password = await hash_password_async(password)
        user = User(email=email, hashed_password=hashed_password, role=role)
        try:
            await self._repository.add(user)
        except DuplicateKeyError as exc:
            raise ConflictError("Email already in use") from exc
        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.value})
        return user

    async def get_user(self, user_id: PydanticObjectId | str) -> User | None:
        return await self._repository.get(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def list_users(self) -> list[User]:
        return await self._repository.list(sort=("_id",))

    async def set_password(self, user: User, password: str) -> User:
        user.hashed_password = await hash_password_async(password)
        user.touch()
        return await self._repository.save(user)


__all__ = ["UserService"]
