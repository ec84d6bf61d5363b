"""Category lookup documents."""

from __future__ import annotations

from pydantic import ConfigDict

from .common import TimestampedDocument


class Category(TimestampedDocument):
    """Reference data used to group tasks.

    Only ``name`` is fixed; any other keys a client sends are stored as-is.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    description: str | None = None

    class Settings:
        name = "categories"


__all__ = ["Category"]
