from __future__ import annotations

import os

os.environ.setdefault("TASKTRACKER_ENVIRONMENT", "test")
os.environ.setdefault("TASKTRACKER_JWT_SECRET_KEY", "test-secret-key")

from collections.abc import AsyncIterator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from tasktracker.app.core.config import get_settings  # noqa: E402
from tasktracker.app.core.security import create_access_token  # noqa: E402
from tasktracker.app.db import init_database, set_database_client  # noqa: E402
from tasktracker.app.main import create_app  # noqa: E402
from tasktracker.app.models import Task, TaskPriority, TaskStatus, User, UserRole  # noqa: E402
from tasktracker.app.services import UserService  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture()
async def database() -> AsyncIterator[None]:
    await init_database(client=AsyncMongoMockClient(), force=True)
    try:
        yield
    finally:
        set_database_client(None)


@pytest.fixture()
def app(database: None) -> FastAPI:
    return create_app()


@pytest.fixture()
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


async def create_account(email: str, role: UserRole = UserRole.USER) -> User:
    return await UserService().create_user(email=email, password=PASSWORD, role=role)


@pytest.fixture()
async def admin(database: None) -> User:
    return await create_account("admin@example.com", UserRole.ADMIN)


@pytest.fixture()
async def alice(database: None) -> User:
    return await create_account("alice@example.com")


@pytest.fixture()
async def bob(database: None) -> User:
    return await create_account("bob@example.com")


def auth_headers(user: User) -> dict[str, str]:
    issued = create_access_token(user_id=str(user.id), role=user.role.value, settings=get_settings())
    return {"Authorization": f"Bearer {issued.token}"}


TaskFactory = Callable[..., Awaitable[Task]]


@pytest.fixture()
def make_task(database: None) -> TaskFactory:
    async def _make(
        *,
        creator: User,
        assigned_to: str,
        title: str = "Task",
        status: TaskStatus = TaskStatus.PENDING,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Task:
        assert creator.id is not None
        task = Task(
            title=title,
            description=f"{title} details",
            assigned_to=assigned_to,
            created_by=creator.id,
            priority=priority,
            status=status,
        )
        await task.insert()
        return task

    return _make


@pytest.fixture()
def headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers
