"""Repository for category documents."""

from __future__ import annotations

from ..models import Category
from .base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self) -> None:
        super().__init__(Category)


__all__ = ["CategoryRepository"]
