"""Shared document base and utilities."""

from __future__ import annotations

from datetime import datetime, timezone

from beanie import Document
from pydantic import Field


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(timezone.utc)


def ensure_tzaware(value: datetime | None) -> datetime | None:
    """Treat naive datetimes read back from the store as UTC."""

    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class TimestampedDocument(Document):
    """Document base carrying ``created_at``/``updated_at`` timestamps."""

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def touch(self) -> None:
        self.updated_at = utcnow()


__all__ = ["TimestampedDocument", "ensure_tzaware", "utcnow"]
