"""User administration routes."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import AdminIdentityDependency, UserServiceDependency
from ...schemas import UserPublic

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublic], summary="List all users (admin)")
async def list_users(service: UserServiceDependency, _: AdminIdentityDependency) -> list[UserPublic]:
    return [UserPublic.model_validate(user) for user in await service.list_users()]
