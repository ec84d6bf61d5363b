"""Repositories encapsulating document persistence."""

from __future__ import annotations

from .base import BaseRepository, parse_object_id
from .categories import CategoryRepository
from .reports import ReportRepository
from .tasks import TaskRepository, build_task_filter, visibility_clause
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ReportRepository",
    "TaskRepository",
    "UserRepository",
    "build_task_filter",
    "parse_object_id",
    "visibility_clause",
]
