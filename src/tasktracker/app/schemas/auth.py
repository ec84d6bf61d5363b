"""Schemas describing authentication payloads."""

from __future__ import annotations

from pydantic import Field

from ..models import UserRole
from .common import APIModel
from .user import UserPublic


class RegisterRequest(APIModel):
    """Incoming payload for registering a new account."""

    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1)
    role: UserRole | None = None


class RegisterResponse(APIModel):
    user: UserPublic


class LoginRequest(APIModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(APIModel):
    """Bearer token plus the role, so clients can pick a view."""

    token: str
    role: UserRole


class PasswordChangeRequest(APIModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


__all__ = [
    "LoginRequest",
    "LoginResponse",
    "PasswordChangeRequest",
    "RegisterRequest",
    "RegisterResponse",
]
