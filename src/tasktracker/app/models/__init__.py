"""Document models persisted in MongoDB."""

from __future__ import annotations

from .category import Category
from .common import TimestampedDocument, ensure_tzaware, utcnow
from .report import Report, ReportCategory
from .task import Task, TaskPriority, TaskStatus
from .user import User, UserRole

DOCUMENT_MODELS = [User, Task, Category, Report]

__all__ = [
    "Category",
    "DOCUMENT_MODELS",
    "Report",
    "ReportCategory",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TimestampedDocument",
    "User",
    "UserRole",
    "ensure_tzaware",
    "utcnow",
]
