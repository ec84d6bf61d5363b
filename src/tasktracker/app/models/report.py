"""Report documents filed by users."""

from __future__ import annotations

from enum import Enum

from beanie import PydanticObjectId
from pydantic import field_validator
from pymongo import ASCENDING, DESCENDING, IndexModel

from .common import TimestampedDocument


class ReportCategory(str, Enum):
    WORK = "work"
    COMPLAINT = "complaint"


class Report(TimestampedDocument):
    """A short note about work or a complaint, optionally tied to a task."""

    title: str
    description: str
    category: ReportCategory
    created_by: PydanticObjectId
    related_task: PydanticObjectId | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    class Settings:
        name = "reports"
        indexes = [
            IndexModel([("created_by", ASCENDING), ("created_at", DESCENDING)], name="reports_creator_recent"),
        ]


__all__ = ["Report", "ReportCategory"]
