"""Routes handling registration, login and password changes."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AuthServiceDependency, CurrentIdentityDependency, OptionalIdentityDependency
from ...schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordChangeRequest,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
)
async def register(
    payload: RegisterRequest,
    auth_service: AuthServiceDependency,
    actor: OptionalIdentityDependency,
) -> RegisterResponse:
    user = await auth_service.register(
        email=payload.email,
        password=payload.password,
        role=payload.role,
        actor=actor,
    )
    return RegisterResponse(user=UserPublic.model_validate(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Exchange email and password for a bearer token",
)
async def login(payload: LoginRequest, auth_service: AuthServiceDependency) -> LoginResponse:
    user, token = await auth_service.login(email=payload.email, password=payload.password)
    return LoginResponse(token=token, role=user.role)


@router.post(
    "/password",
    response_model=MessageResponse,
    summary="Change the caller's password",
)
async def change_password(
    payload: PasswordChangeRequest,
    auth_service: AuthServiceDependency,
    identity: CurrentIdentityDependency,
) -> MessageResponse:
    await auth_service.change_password(
        identity,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Password updated")
