"""Database lifecycle helpers."""

from __future__ import annotations

from .connection import close_database, init_database, set_database_client

__all__ = ["close_database", "init_database", "set_database_client"]
