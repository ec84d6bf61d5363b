"""Routes for task listing, lookup and admin CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, status

from ...deps import (
    AdminIdentityDependency,
    CurrentIdentityDependency,
    OptionalIdentityDependency,
    SettingsDependency,
    TaskServiceDependency,
)
from ...models import TaskStatus
from ...schemas import (
    CategoryRead,
    MessageResponse,
    Pagination,
    TaskCreate,
    TaskListResponse,
    TaskRead,
    TaskUpdate,
    UserRef,
)
from ...services import TaskDetail, TaskListFilters

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Kept as raw strings so junk like ``page=abc`` clamps to 1 instead of failing.
PageQuery = Annotated[str | None, Query(description="1-based page number; values below 1 count as 1.")]
LimitQuery = Annotated[str | None, Query(description="Page size; values below 1 count as 1.")]
StatusQuery = Annotated[TaskStatus | None, Query(description="Only tasks in this status.")]
SearchQuery = Annotated[
    str | None,
    Query(description="Case-insensitive substring of the title or assignee email."),
]


def _map_task(detail: TaskDetail) -> TaskRead:
    task = detail.task
    return TaskRead(
        id=task.id,
        title=task.title,
        description=task.description,
        assigned_to=task.assigned_to,
        created_by=UserRef.model_validate(detail.creator) if detail.creator is not None else None,
        priority=task.priority,
        status=task.status,
        deadline=task.deadline,
        category=CategoryRead.from_document(detail.category) if detail.category is not None else None,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List visible tasks with filtering, search and pagination",
)
async def list_tasks(
    service: TaskServiceDependency,
    identity: OptionalIdentityDependency,
    settings: SettingsDependency,
    status: StatusQuery = None,
    search: SearchQuery = None,
    page: PageQuery = None,
    limit: LimitQuery = None,
) -> TaskListResponse:
    filters = TaskListFilters.from_query(
        status=status,
        search=search,
        page=page,
        limit=limit,
        default_limit=settings.default_page_size,
    )
    result = await service.list_tasks(identity, filters)
    return TaskListResponse(
        tasks=[_map_task(detail) for detail in result.items],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            pages=result.pages,
        ),
    )


@router.get(
    "/recently-viewed/list",
    response_model=list[TaskRead],
    summary="The caller's recently viewed tasks, most recent first",
)
async def list_recently_viewed(
    service: TaskServiceDependency,
    identity: CurrentIdentityDependency,
) -> list[TaskRead]:
    details = await service.list_recently_viewed(identity)
    return [_map_task(detail) for detail in details]


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Retrieve a task by id",
)
async def get_task(
    task_id: str,
    service: TaskServiceDependency,
    identity: OptionalIdentityDependency,
) -> TaskRead:
    return _map_task(await service.get_task(task_id, identity))


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task (admin)",
)
async def create_task(
    payload: TaskCreate,
    service: TaskServiceDependency,
    identity: AdminIdentityDependency,
) -> TaskRead:
    detail = await service.create_task(identity, payload.model_dump())
    return _map_task(detail)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Partially update a task (admin)",
)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    service: TaskServiceDependency,
    _: AdminIdentityDependency,
) -> TaskRead:
    detail = await service.update_task(task_id, payload.changes())
    return _map_task(detail)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete a task (admin)",
)
async def delete_task(
    task_id: str,
    service: TaskServiceDependency,
    _: AdminIdentityDependency,
) -> MessageResponse:
    await service.delete_task(task_id)
    return MessageResponse(message="Task deleted")
