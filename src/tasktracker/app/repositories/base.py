"""Base repository implementation over Beanie documents."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from beanie import Document, PydanticObjectId
from bson import ObjectId
from bson.errors import InvalidId

from ..errors import InvalidIdError
from .filters import MATCH_ALL, Expression, compile_filter

DocumentType = TypeVar("DocumentType", bound=Document)


def parse_object_id(raw: Any) -> PydanticObjectId:
    """Coerce ``raw`` to an ObjectId or raise ``InvalidIdError``."""

    if isinstance(raw, ObjectId):
        return PydanticObjectId(raw)
    try:
        return PydanticObjectId(str(raw))
    except (InvalidId, TypeError) as exc:
        raise InvalidIdError() from exc


class BaseRepository(Generic[DocumentType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, document_type: type[DocumentType]) -> None:
        self._document_type = document_type

    async def get(self, entity_id: Any) -> DocumentType | None:
        """Fetch by id; malformed ids raise ``InvalidIdError``."""
        return await self._document_type.get(parse_object_id(entity_id))

    async def get_many(self, ids: Iterable[PydanticObjectId | None]) -> dict[PydanticObjectId, DocumentType]:
        """Fetch several documents at once, keyed by id; unknown ids are absent."""
        wanted = list({entity_id for entity_id in ids if entity_id is not None})
        if not wanted:
            return {}
        found = await self._document_type.find({"_id": {"$in": wanted}}).to_list()
        return {document.id: document for document in found if document.id is not None}

    async def list(
        self,
        expression: Expression = MATCH_ALL,
        *,
        sort: tuple[str, ...] = ("-_id",),
    ) -> list[DocumentType]:
        """Return matching documents, newest first unless ``sort`` says otherwise."""
        return await self._document_type.find(compile_filter(expression)).sort(*sort).to_list()

    async def count(self, expression: Expression = MATCH_ALL) -> int:
        return await self._document_type.find(compile_filter(expression)).count()

    async def add(self, instance: DocumentType) -> DocumentType:
        await instance.insert()
        return instance

    async def save(self, instance: DocumentType) -> DocumentType:
        await instance.save()
        return instance

    async def delete(self, instance: DocumentType) -> None:
        await instance.delete()


__all__ = ["BaseRepository", "DocumentType", "parse_object_id"]
