"""Domain service layer package."""

from __future__ import annotations

from .auth import AuthService, require_admin, require_identity
from .categories import CategoryService
from .identity import Identity
from .recently_viewed import RecentlyViewedTracker, push_recent
from .reports import ReportDetail, ReportService
from .tasks import TaskDetail, TaskListFilters, TaskPage, TaskService
from .users import UserService

__all__ = [
    "AuthService",
    "CategoryService",
    "Identity",
    "RecentlyViewedTracker",
    "ReportDetail",
    "ReportService",
    "TaskDetail",
    "TaskListFilters",
    "TaskPage",
    "TaskService",
    "UserService",
    "push_recent",
    "require_admin",
    "require_identity",
]
