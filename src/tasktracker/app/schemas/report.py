"""Report schemas."""

from __future__ import annotations

from beanie import PydanticObjectId
from pydantic import Field

from ..models import ReportCategory
from .common import APIModel, UTCDateTime
from .task import TaskRef
from .user import UserRef


class ReportCreate(APIModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    category: ReportCategory
    related_task: PydanticObjectId | None = None


class ReportRead(APIModel):
    """A report with creator email and related task title resolved."""

    id: PydanticObjectId
    title: str
    description: str
    category: ReportCategory
    created_by: UserRef | None = None
    related_task: TaskRef | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


__all__ = ["ReportCreate", "ReportRead"]
