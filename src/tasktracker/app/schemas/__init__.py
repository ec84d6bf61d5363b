"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import (
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
    RegisterRequest,
    RegisterResponse,
)
from .category import CategoryCreate, CategoryRead, CategoryUpdate
from .report import ReportCreate, ReportRead
from .system import ErrorResponse, HealthCheckResponse, MessageResponse, RootResponse
from .task import Pagination, TaskCreate, TaskListResponse, TaskRead, TaskRef, TaskUpdate
from .user import UserPublic, UserRef

__all__ = [
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Pagination",
    "PasswordChangeRequest",
    "RegisterRequest",
    "RegisterResponse",
    "ReportCreate",
    "ReportRead",
    "RootResponse",
    "TaskCreate",
    "TaskListResponse",
    "TaskRead",
    "TaskRef",
    "TaskUpdate",
    "UserPublic",
    "UserRef",
]
