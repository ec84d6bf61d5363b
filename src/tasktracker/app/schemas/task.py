"""Task-related schemas."""

from __future__ import annotations

from beanie import PydanticObjectId
from pydantic import ConfigDict, Field, model_validator

from ..models import TaskPriority, TaskStatus
from .category import CategoryRead
from .common import APIModel, UTCDateTime
from .user import UserRef

TASK_READ_EXAMPLE = {
    "id": "6650c0ffee0000000000a001",
    "title": "Prepare quarterly inventory",
    "description": "Count stock in the east warehouse.",
    "assignedTo": "employee@example.com",
    "createdBy": {"id": "6650c0ffee0000000000b001", "email": "admin@example.com"},
    "priority": TaskPriority.HIGH.value,
    "status": TaskStatus.PENDING.value,
    "deadline": "2026-11-01T00:00:00Z",
    "category": None,
    "createdAt": "2026-10-01T12:00:00Z",
    "updatedAt": "2026-10-02T08:30:00Z",
}

# Fields that may be cleared with an explicit ``null``; the rest must keep a value.
_NULLABLE_UPDATE_FIELDS = frozenset({"deadline", "category"})


class TaskCreate(APIModel):
    """Payload for creating a task; ``createdBy`` is never accepted from clients."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    assigned_to: str = Field(min_length=1, max_length=320)
    priority: TaskPriority
    status: TaskStatus = TaskStatus.PENDING
    deadline: UTCDateTime | None = None
    category: PydanticObjectId | None = None


class TaskUpdate(APIModel):
    """Partial update; unknown keys such as ``createdBy`` are dropped."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    assigned_to: str | None = Field(default=None, min_length=1, max_length=320)
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    deadline: UTCDateTime | None = None
    category: PydanticObjectId | None = None

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "TaskUpdate":
        for name in self.model_fields_set - _NULLABLE_UPDATE_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null.")
        return self

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class TaskRead(APIModel):
    """A task with its category and creator resolved."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_READ_EXAMPLE})

    id: PydanticObjectId
    title: str
    description: str
    assigned_to: str
    created_by: UserRef | None = None
    priority: TaskPriority
    status: TaskStatus
    deadline: UTCDateTime | None = None
    category: CategoryRead | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class TaskRef(APIModel):
    id: PydanticObjectId
    title: str


class Pagination(APIModel):
    page: int
    limit: int
    total: int
    pages: int


class TaskListResponse(APIModel):
    tasks: list[TaskRead]
    pagination: Pagination


__all__ = [
    "Pagination",
    "TaskCreate",
    "TaskListResponse",
    "TaskRead",
    "TaskRef",
    "TaskUpdate",
]
