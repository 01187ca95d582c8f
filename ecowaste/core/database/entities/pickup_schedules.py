"""
Pickup schedule entity models.

This module contains the database entity for scheduled waste pickups.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class PickupSchedule(Base, table=True):
    """Entity for a scheduled waste pickup.

    ``completed_at`` is stamped when the status moves to ``completed``.

    Table: pickup_schedules
    """

    __tablename__ = "pickup_schedules"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)

    scheduled_date: datetime = Field(index=True, sa_type=DateTime)
    address: str = Field(max_length=512)
    waste_types: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    notes: Optional[str] = Field(default=None)

    status: str = Field(default="scheduled", max_length=32, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"PickupSchedule(id={self.id}, user_id={self.user_id}, status={self.status})"
