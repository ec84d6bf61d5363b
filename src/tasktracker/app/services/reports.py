"""Services supporting report workflows."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from beanie import PydanticObjectId

from ..errors import NotFoundError, ValidationError
from ..models import Report, ReportCategory, Task, User
from ..repositories import ReportRepository, TaskRepository, UserRepository
from .auth import require_admin, require_identity
from .identity import Identity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportDetail:
    report: Report
    creator: User | None = None
    related_task: Task | None = None


class ReportService:
    """Reports are private to their creator; admins see and delete all of them."""

    def __init__(
        self,
        *,
        repository: ReportRepository | None = None,
        task_repository: TaskRepository | None = None,
        user_repository: UserRepository | None = None,
    ) -> None:
        self._repository = repository or ReportRepository()
        self._tasks = task_repository or TaskRepository()
        self._users = user_repository or UserRepository()

    async def _resolve(self, reports: Sequence[Report]) -> list[ReportDetail]:
        creators = await self._users.get_many(report.created_by for report in reports)
        tasks = await self._tasks.get_many(report.related_task for report in reports)
        return [
            ReportDetail(
                report=report,
                creator=creators.get(report.created_by),
                related_task=tasks.get(report.related_task) if report.related_task is not None else None,
            )
            for report in reports
        ]

    async def list_reports(self, identity: Identity | None) -> list[ReportDetail]:
        identity = require_identity(identity)
        expression = self._repository.visibility_filter(None if identity.is_admin else identity.user_id)
        reports = await self._repository.list(expression, sort=("-created_at", "-_id"))
        return await self._resolve(reports)

    async def create_report(
        self,
        identity: Identity | None,
        *,
        title: str | None,
        description: str | None,
        category: ReportCategory | None,
        related_task: PydanticObjectId | None = None,
    ) -> ReportDetail:
        identity = require_identity(identity)
        if not (title or "").strip() or not (description or "").strip() or category is None:
            raise ValidationError("Title, description, and category are required")

        report = Report(
            title=title,
            description=description,
            category=category,
            created_by=identity.user_id,
            related_task=related_task,
        )
        await self._repository.add(report)
        logger.info("Report filed", extra={"report_id": str(report.id), "category": report.category.value})
        [detail] = await self._resolve([report])
        return detail

    async def delete_report(self, identity: Identity | None, report_id: Any) -> None:
        require_admin(identity)
        report = await self._repository.get(report_id)
        if report is None:
            raise NotFoundError("Report not found")
        await self._repository.delete(report)
        logger.info("Report deleted", extra={"report_id": str(report.id)})


__all__ = ["ReportDetail", "ReportService"]
