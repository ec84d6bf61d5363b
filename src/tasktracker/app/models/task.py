"""Task documents."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from beanie import PydanticObjectId
from pydantic import field_validator
from pymongo import ASCENDING, DESCENDING, IndexModel

from .common import TimestampedDocument


class TaskStatus(str, Enum):
    """Lifecycle states of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(TimestampedDocument):
    """A unit of work assigned to an employee by email.

    ``assigned_to`` is a plain address, not a reference; ``created_by`` is set
    once from the creating identity and never changes.
    """

    title: str
    description: str
    assigned_to: str
    created_by: PydanticObjectId
    priority: TaskPriority
    status: TaskStatus = TaskStatus.PENDING
    deadline: datetime | None = None
    category: PydanticObjectId | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    class Settings:
        name = "tasks"
        indexes = [
            IndexModel([("assigned_to", ASCENDING)], name="tasks_assigned_to"),
            IndexModel([("created_by", ASCENDING)], name="tasks_created_by"),
            IndexModel([("status", ASCENDING), ("_id", DESCENDING)], name="tasks_status_recent"),
        ]


__all__ = ["Task", "TaskPriority", "TaskStatus"]
