"""Service layer for task listing, lookup and CRUD."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..errors import NotFoundError
from ..models import Category, Task, TaskStatus, User
from ..repositories import CategoryRepository, TaskRepository, UserRepository, build_task_filter
from .auth import require_identity
from .identity import Identity
from .recently_viewed import RecentlyViewedTracker

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5
# Keeps skip = (page - 1) * limit inside a signed 64-bit BSON integer.
MAX_PAGE_VALUE = 2**31 - 1

# Server-owned fields a client payload can never set.
_PROTECTED_FIELDS = frozenset({"id", "_id", "created_by", "created_at", "updated_at"})


def coerce_positive_int(raw: Any, default: int) -> int:
    """Parse a page/limit value: absent → ``default``, junk or < 1 → 1.

    Values above ``MAX_PAGE_VALUE`` are capped to it.
    """

    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return min(max(default, 1), MAX_PAGE_VALUE)
    try:
        value = int(str(raw).strip())
    except ValueError:
        return 1
    return min(max(value, 1), MAX_PAGE_VALUE)


@dataclass(slots=True)
class TaskListFilters:
    """Normalised query options for listing tasks."""

    status: TaskStatus | None = None
    search: str | None = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(
        cls,
        *,
        status: TaskStatus | None = None,
        search: str | None = None,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_PAGE_SIZE,
    ) -> "TaskListFilters":
        return cls(
            status=status,
            search=search or None,
            page=coerce_positive_int(page, 1),
            limit=coerce_positive_int(limit, default_limit),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(slots=True)
class TaskDetail:
    """A task together with the documents it references."""

    task: Task
    category: Category | None = None
    creator: User | None = None


@dataclass(slots=True)
class TaskPage:
    page: int
    limit: int
    total: int
    items: list[TaskDetail] = field(default_factory=list)

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class TaskService:
    """High-level orchestration for ``Task`` documents."""

    def __init__(
        self,
        *,
        tracker: RecentlyViewedTracker | None = None,
        repository: TaskRepository | None = None,
        category_repository: CategoryRepository | None = None,
        user_repository: UserRepository | None = None,
    ) -> None:
        self._repository = repository or TaskRepository()
        self._categories = category_repository or CategoryRepository()
        self._users = user_repository or UserRepository()
        self._tracker = tracker or RecentlyViewedTracker(user_repository=self._users)

    async def resolve(self, tasks: Sequence[Task]) -> list[TaskDetail]:
        """Attach category and creator documents; dangling references become ``None``."""

        categories = await self._categories.get_many(task.category for task in tasks)
        creators = await self._users.get_many(task.created_by for task in tasks)
        return [
            TaskDetail(
                task=task,
                category=categories.get(task.category) if task.category is not None else None,
                creator=creators.get(task.created_by),
            )
            for task in tasks
        ]

    async def list_tasks(self, identity: Identity | None, filters: TaskListFilters) -> TaskPage:
        """List tasks visible to ``identity``; anonymous callers get an empty page."""

        if identity is None:
            return TaskPage(page=1, limit=filters.limit, total=0)

        expression = build_task_filter(identity, status=filters.status, search=filters.search)
        tasks = await self._repository.find_page(expression, skip=filters.skip, limit=filters.limit)
        total = await self._repository.count(expression)
        return TaskPage(
            page=filters.page,
            limit=filters.limit,
            total=total,
            items=await self.resolve(tasks),
        )

    async def _get_or_404(self, task_id: Any) -> Task:
        task = await self._repository.get(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def get_task(self, task_id: Any, identity: Identity | None = None) -> TaskDetail:
        """Fetch one task; an authenticated caller's view is recorded."""

        task = await self._get_or_404(task_id)
        if identity is not None and task.id is not None:
            await self._tracker.record_view(identity.user_id, task.id)
        [detail] = await self.resolve([task])
        return detail

    async def list_recently_viewed(self, identity: Identity | None) -> list[TaskDetail]:
        """Tasks from the caller's history in stored order, skipping deleted ones."""

        identity = require_identity(identity)
        task_ids = await self._tracker.recent_task_ids(identity.user_id)
        found = await self._repository.get_many(task_ids)
        ordered = [found[task_id] for task_id in task_ids if task_id in found]
        return await self.resolve(ordered)

    async def create_task(self, identity: Identity, fields: Mapping[str, Any]) -> TaskDetail:
        """Create a task owned by ``identity`` regardless of the payload."""

        data = {key: value for key, value in fields.items() if key not in _PROTECTED_FIELDS}
        task = Task(**data, created_by=identity.user_id)
        await self._repository.add(task)
        logger.info("Task created", extra={"task_id": str(task.id), "assigned_to": task.assigned_to})
        [detail] = await self.resolve([task])
        return detail

    async def update_task(self, task_id: Any, changes: Mapping[str, Any]) -> TaskDetail:
        """Apply a partial update; ``created_by`` and timestamps are ignored."""

        task = await self._get_or_404(task_id)
        applied = {key: value for key, value in changes.items() if key not in _PROTECTED_FIELDS}
        for key, value in applied.items():
            setattr(task, key, value)
        task.touch()
        await self._repository.save(task)
        logger.info("Task updated", extra={"task_id": str(task.id), "fields": sorted(applied)})
        [detail] = await self.resolve([task])
        return detail

    async def delete_task(self, task_id: Any) -> None:
        task = await self._get_or_404(task_id)
        await self._repository.delete(task)
        logger.info("Task deleted", extra={"task_id": str(task.id)})


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_VALUE",
    "TaskDetail",
    "TaskListFilters",
    "TaskPage",
    "TaskService",
    "coerce_positive_int",
]
