"""Category schemas.

Categories are free-form: unknown keys pass through create, update and read.
"""

from __future__ import annotations

from typing import Any

from beanie import PydanticObjectId
from pydantic import ConfigDict, Field

from ..models import Category
from .common import APIModel, UTCDateTime


class CategoryCreate(APIModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1, max_length=120)
    description: str | None = None


class CategoryUpdate(APIModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None


class CategoryRead(APIModel):
    model_config = ConfigDict(extra="allow")

    id: PydanticObjectId
    name: str
    description: str | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    @classmethod
    def from_document(cls, category: Category) -> "CategoryRead":
        data: dict[str, Any] = dict(category.model_extra or {})
        data.update(category.model_dump(include=set(cls.model_fields)))
        return cls.model_validate(data)


__all__ = ["CategoryCreate", "CategoryRead", "CategoryUpdate"]
