"""Reusable FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from .core.config import Settings, get_settings
from .services import (
    AuthService,
    CategoryService,
    Identity,
    RecentlyViewedTracker,
    ReportService,
    TaskService,
    UserService,
    require_admin,
    require_identity,
)

SettingsDependency = Annotated[Settings, Depends(get_settings)]

# ``auto_error=False``: a missing header means "anonymous", not an error.
_bearer_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def get_user_service() -> UserService:
    return UserService()


def get_auth_service(
    settings: SettingsDependency,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> AuthService:
    return AuthService(settings, user_service)


def get_task_service(settings: SettingsDependency) -> TaskService:
    return TaskService(tracker=RecentlyViewedTracker(limit=settings.recently_viewed_limit))


def get_report_service() -> ReportService:
    return ReportService()


def get_category_service() -> CategoryService:
    return CategoryService()


AuthServiceDependency = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDependency = Annotated[UserService, Depends(get_user_service)]
TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]
ReportServiceDependency = Annotated[ReportService, Depends(get_report_service)]
CategoryServiceDependency = Annotated[CategoryService, Depends(get_category_service)]


async def get_optional_identity(
    auth_service: AuthServiceDependency,
    token: Annotated[str | None, Depends(_bearer_scheme)] = None,
) -> Identity | None:
    """Resolve the bearer token if present; invalid tokens fall back to anonymous."""

    return await auth_service.authenticate(token)


OptionalIdentityDependency = Annotated[Identity | None, Depends(get_optional_identity)]


async def get_current_identity(identity: OptionalIdentityDependency) -> Identity:
    return require_identity(identity)


async def get_admin_identity(identity: OptionalIdentityDependency) -> Identity:
    return require_admin(identity)


CurrentIdentityDependency = Annotated[Identity, Depends(get_current_identity)]
AdminIdentityDependency = Annotated[Identity, Depends(get_admin_identity)]


__all__ = [
    "AdminIdentityDependency",
    "AuthServiceDependency",
    "CategoryServiceDependency",
    "CurrentIdentityDependency",
    "OptionalIdentityDependency",
    "ReportServiceDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "UserServiceDependency",
    "get_admin_identity",
    "get_auth_service",
    "get_current_identity",
    "get_optional_identity",
    "get_task_service",
]
