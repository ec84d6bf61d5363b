"""Repository for report documents."""

from __future__ import annotations

from beanie import PydanticObjectId

from ..models import Report
from .base import BaseRepository
from .filters import MATCH_ALL, Expression, FieldEquals


class ReportRepository(BaseRepository[Report]):
    """Persistence helpers for ``Report`` documents."""

    def __init__(self) -> None:
        super().__init__(Report)

    @staticmethod
    def visibility_filter(creator_id: PydanticObjectId | None) -> Expression:
        """``None`` means unrestricted (admin view)."""
        if creator_id is None:
            return MATCH_ALL
        return FieldEquals("created_by", creator_id)


__all__ = ["ReportRepository"]
