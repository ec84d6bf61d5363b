"""MongoDB client lifecycle and Beanie initialisation."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from ..core.config import get_settings
from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_initialized = False
_lock = asyncio.Lock()


def set_database_client(client: AsyncIOMotorClient | None) -> None:
    """Inject a custom motor client instance (primarily for tests)."""

    global _client, _initialized
    _client = client
    _initialized = False


async def init_database(
    *,
    client: AsyncIOMotorClient | None = None,
    force: bool = False,
    verify: bool = False,
) -> None:
    """Bind every document model to the configured database.

    With ``verify`` the server is pinged first so an unreachable database
    fails loudly instead of on the first request.
    """

    global _client, _initialized

    async with _lock:
        if client is not None:
            set_database_client(client)

        if _initialized and not force:
            return

        settings = get_settings()
        if _client is None:
            _client = AsyncIOMotorClient(settings.mongo_url, tz_aware=True, uuidRepresentation="standard")
        database = _client[settings.mongo_database]

        if verify:
            await _client.admin.command("ping")

        await init_beanie(database=database, document_models=DOCUMENT_MODELS)
        _initialized = True
        logger.info("Database initialised", extra={"database": settings.mongo_database})


async def close_database() -> None:
    """Dispose the MongoDB client."""

    global _client, _initialized
    client = _client
    if client is not None:
        client.close()
    _client = None
    _initialized = False


__all__ = ["close_database", "init_database", "set_database_client"]
