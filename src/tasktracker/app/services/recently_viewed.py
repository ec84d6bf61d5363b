"""Bounded per-user history of viewed tasks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from beanie import PydanticObjectId

from ..repositories import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RECENTLY_VIEWED_LIMIT = 5


def push_recent(history: Sequence[T], item: T, limit: int = DEFAULT_RECENTLY_VIEWED_LIMIT) -> list[T]:
    """Move ``item`` to the front of ``history`` and cap it at ``limit`` entries.

    >>> push_recent(["b", "a"], "a")
    ['a', 'b']
    """

    updated = [entry for entry in history if entry != item]
    updated.insert(0, item)
    return updated[: max(limit, 1)]


class RecentlyViewedTracker:
    """Keeps ``User.recently_viewed_tasks`` most-recent-first and de-duplicated.

    Each view reads the history and then updates only that field; two
    simultaneous views by the same user may lose one entry.
    """

    def __init__(
        self,
        *,
        limit: int = DEFAULT_RECENTLY_VIEWED_LIMIT,
        user_repository: UserRepository | None = None,
    ) -> None:
        self._limit = max(limit, 1)
        self._users = user_repository or UserRepository()

    async def record_view(self, user_id: PydanticObjectId, task_id: PydanticObjectId) -> list[PydanticObjectId]:
        user = await self._users.get(user_id)
        if user is None:
            logger.debug("Skipping view for unknown user", extra={"user_id": str(user_id)})
            return []
        updated = push_recent(user.recently_viewed_tasks, task_id, self._limit)
        await self._users.set_recently_viewed(user, updated)
        return updated

    async def recent_task_ids(self, user_id: PydanticObjectId) -> list[PydanticObjectId]:
        user = await self._users.get(user_id)
        if user is None:
            return []
        return list(user.recently_viewed_tasks)


__all__ = ["DEFAULT_RECENTLY_VIEWED_LIMIT", "RecentlyViewedTracker", "push_recent"]
