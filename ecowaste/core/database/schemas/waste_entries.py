"""
Schema models for waste entry requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class WasteEntryCreate(CamelModel):
    """Schema for logging a waste entry."""

    waste_type: str = Field(min_length=1, max_length=64, description="Waste category, e.g. 'plastic'")
    quantity: float = Field(ge=0)
    unit: str = Field(default="kg", max_length=16)
    disposal_method: Optional[str] = Field(default=None, max_length=64)
    image_url: Optional[str] = Field(default=None, max_length=512)
    eco_points_earned: int = Field(default=0, ge=0)


class WasteEntryRead(CamelModel):
    """Schema for reading a waste entry."""

    id: int
    user_id: str
    waste_type: str
    quantity: float
    unit: str
    disposal_method: Optional[str] = None
    image_url: Optional[str] = None
    eco_points_earned: int
    created_at: datetime
