"""Category reference data."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import NotFoundError
from ..models import Category
from ..repositories import CategoryRepository

logger = logging.getLogger(__name__)

_PROTECTED_FIELDS = frozenset({"id", "_id", "created_at", "updated_at", "createdAt", "updatedAt"})


class CategoryService:
    def __init__(self, repository: CategoryRepository | None = None) -> None:
        self._repository = repository or CategoryRepository()

    async def list_categories(self) -> list[Category]:
        return await self._repository.list(sort=("_id",))

    async def get_category(self, category_id: Any) -> Category:
        category = await self._repository.get(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def create_category(self, fields: Mapping[str, Any]) -> Category:
        data = {key: value for key, value in fields.items() if key not in _PROTECTED_FIELDS}
        category = await self._repository.add(Category(**data))
        logger.info("Category created", extra={"category_id": str(category.id)})
        return category

    async def update_category(self, category_id: Any, changes: Mapping[str, Any]) -> Category:
        category = await self.get_category(category_id)
        for key, value in changes.items():
            if key not in _PROTECTED_FIELDS:
                setattr(category, key, value)
        category.touch()
        return await self._repository.save(category)

    async def delete_category(self, category_id: Any) -> None:
        category = await self.get_category(category_id)
        await self._repository.delete(category)
        logger.info("Category deleted", extra={"category_id": str(category.id)})


__all__ = ["CategoryService"]
