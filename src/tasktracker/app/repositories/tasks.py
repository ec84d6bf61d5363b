"""Repository for task documents and the task visibility query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Task, TaskStatus
from .base import BaseRepository
from .filters import AllOf, AnyOf, Expression, FieldContains, FieldEquals, compile_filter

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..services.identity import Identity


def visibility_clause(identity: "Identity") -> Expression | None:
    """Tasks a non-admin may see: assigned to their email or created by them.

    Returns ``None`` for admins, who see everything.
    """

    if identity.is_admin:
        return None
    return AnyOf(
        FieldEquals("assigned_to", identity.email),
        FieldEquals("created_by", identity.user_id),
    )


def build_task_filter(
    identity: "Identity",
    *,
    status: TaskStatus | None = None,
    search: str | None = None,
) -> Expression:
    """AND together visibility, status and the title/assignee search."""

    clauses: list[Expression] = []
    visibility = visibility_clause(identity)
    if visibility is not None:
        clauses.append(visibility)
    if status is not None:
        clauses.append(FieldEquals("status", status.value))
    if search:
        clauses.append(
            AnyOf(
                FieldContains("title", search),
                FieldContains("assigned_to", search),
            )
        )
    return AllOf(*clauses)


class TaskRepository(BaseRepository[Task]):
    """Persistence helpers for ``Task`` documents."""

    def __init__(self) -> None:
        super().__init__(Task)

    async def find_page(self, expression: Expression, *, skip: int, limit: int) -> list[Task]:
        return (
            await Task.find(compile_filter(expression))
            .sort("-_id")
            .skip(skip)
            .limit(limit)
            .to_list()
        )


__all__ = ["TaskRepository", "build_task_filter", "visibility_clause"]
