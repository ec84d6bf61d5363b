"""Base schema and field types shared by the JSON API."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models import ensure_tzaware

# The store may hand back naive datetimes; the API always emits UTC offsets.
UTCDateTime = Annotated[datetime, AfterValidator(ensure_tzaware)]


class APIModel(BaseModel):
    """Schemas speak camelCase on the wire and accept snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


__all__ = ["APIModel", "UTCDateTime"]
