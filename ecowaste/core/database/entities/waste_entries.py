"""
Waste entry entity models.

This module contains the database entity for logged waste. Creating an entry
credits ``eco_points_earned`` to the owning user's balance.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class WasteEntry(Base, table=True):
    """Entity for a single logged quantity of waste.

    Table: waste_entries
    """

    __tablename__ = "waste_entries"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)

    # What was disposed of
    waste_type: str = Field(max_length=64, index=True)
    quantity: float = Field()
    unit: str = Field(default="kg", max_length=16)
    disposal_method: Optional[str] = Field(default=None, max_length=64)
    image_url: Optional[str] = Field(default=None, max_length=512)

    # Points credited for this entry
    eco_points_earned: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"WasteEntry(id={self.id}, user_id={self.user_id}, waste_type={self.waste_type})"
