"""Password hashing and bearer token helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from .config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(slots=True)
class IssuedToken:
    """A signed access token and the moment it stops being valid."""

    token: str
    expires_at: datetime


def get_password_hash(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored hash."""

    return pwd_context.verify(plain_password, hashed_password)


async def hash_password_async(password: str) -> str:
    """Hash off the event loop; bcrypt is deliberately slow."""

    return await run_in_threadpool(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)


def create_access_token(
    *,
    user_id: str,
    role: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> IssuedToken:
    """Sign a token carrying ``{id, role}`` that expires after ``expires_delta``."""

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = now + expires_delta
    payload: dict[str, Any] = {
        "id": user_id,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return IssuedToken(token=token, expires_at=expire)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """Verify signature and expiry, returning the claims.

    Raises ``JWTError`` (``ExpiredSignatureError`` included) on failure.
    """

    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


__all__ = [
    "IssuedToken",
    "JWTError",
    "create_access_token",
    "decode_access_token",
    "get_password_hash",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
