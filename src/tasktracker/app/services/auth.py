"""Authentication service: registration, login and token validation."""

from __future__ import annotations

import logging

from beanie import PydanticObjectId
from bson.errors import InvalidId

from ..core.config import Settings
from ..core.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    verify_password_async,
)
from ..errors import AuthError, ConflictError, ForbiddenError, ValidationError
from ..models import User, UserRole
from .identity import Identity
from .users import UserService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def require_admin(identity: Identity | None) -> Identity:
    """Gate for admin-only operations."""

    if identity is None:
        raise AuthError()
    if not identity.is_admin:
        raise ForbiddenError()
    return identity


def require_identity(identity: Identity | None) -> Identity:
    if identity is None:
        raise AuthError()
    return identity


class AuthService:
    """Credential checks and bearer token issuance."""

    def __init__(self, settings: Settings, user_service: UserService | None = None) -> None:
        self._settings = settings
        self._user_service = user_service or UserService()

    async def register(
        self,
        *,
        email: str | None,
        password: str | None,
        role: UserRole | None = None,
        actor: Identity | None = None,
    ) -> User:
        """Create an account; only an admin caller may create another admin."""

        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")
        requested_role = role or UserRole.USER
        if requested_role is UserRole.ADMIN and (actor is None or not actor.is_admin):
            raise ForbiddenError("Only administrators can create admin accounts")

        if await self._user_service.get_user_by_email(email) is not None:
            raise ConflictError("Email already in use")
        return await self._user_service.create_user(email=email, password=password, role=requested_role)

    async def login(self, *, email: str | None, password: str | None) -> tuple[User, str]:
        """Return the user and a signed token.

        Unknown email and wrong password fail identically.
        """

        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self._user_service.get_user_by_email(email)
        if user is None or not await verify_password_async(password, user.hashed_password):
            raise AuthError(INVALID_CREDENTIALS)

        issued = create_access_token(user_id=str(user.id), role=user.role.value, settings=self._settings)
        logger.info("Login successful", extra={"email": user.email, "role": user.role.value})
        return user, issued.token

    async def authenticate(self, token: str | None) -> Identity | None:
        """Resolve a bearer token to an identity, or ``None`` if it is unusable."""

        if not token:
            return None
        try:
            claims = decode_access_token(token, self._settings)
            user_id = PydanticObjectId(str(claims["id"]))
        except (JWTError, KeyError, InvalidId, TypeError):
            logger.debug("Rejected bearer token")
            return None

        user = await self._user_service.get_user(user_id)
        if user is None:
            return None
        return Identity.from_user(user)

    async def change_password(
        self,
        identity: Identity | None,
        *,
        current_password: str,
        new_password: str,
    ) -> None:
        identity = require_identity(identity)
        if not new_password:
            raise ValidationError("New password is required")
        user = await self._user_service.get_user(identity.user_id)
        if user is None or not await verify_password_async(current_password, user.hashed_password):
            raise AuthError(INVALID_CREDENTIALS)
        await self._user_service.set_password(user, new_password)
        logger.info("Password changed", extra={"user_id": str(identity.user_id)})


__all__ = ["INVALID_CREDENTIALS", "AuthService", "require_admin", "require_identity"]
