"""
Schema models for pickup schedule requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ...models.domain.enums import PickupStatus
from .common import CamelModel, UtcDatetime


class PickupScheduleCreate(CamelModel):
    """Schema for booking a pickup."""

    scheduled_date: UtcDatetime
    address: str = Field(min_length=1, max_length=512)
    waste_types: List[str] = Field(default_factory=list)
    notes: Optional[str] = None


class PickupScheduleRead(CamelModel):
    """Schema for reading a pickup."""

    id: int
    user_id: str
    scheduled_date: datetime
    address: str
    waste_types: List[str]
    notes: Optional[str] = None
    status: str
    created_at: datetime
    completed_at: Optional[datetime] = None


class PickupStatusUpdate(CamelModel):
    """Schema for changing a pickup's status."""

    status: PickupStatus
