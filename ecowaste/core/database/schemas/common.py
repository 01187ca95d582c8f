"""
Shared building blocks for the API schemas.

Payloads use camelCase keys on the wire while the Python attributes stay
snake_case. Datetimes are stored as naive UTC, so aware inputs are converted
on the way in.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(as_naive_utc)]


class CamelModel(BaseModel):
    """Base schema with camelCase aliases, accepting either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
