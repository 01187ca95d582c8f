"""
Schema models for cleanup event requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, UtcDatetime


class CleanupEventCreate(CamelModel):
    """Schema for organizing a cleanup event. The organizer is the current user."""

    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    location: str = Field(min_length=1, max_length=512)
    event_date: UtcDatetime
    duration: int = Field(default=120, ge=1, description="Duration in minutes")
    max_participants: Optional[int] = Field(default=None, ge=1, description="Omit for an uncapped event")
    eco_points_reward: int = Field(default=0, ge=0)


class CleanupEventRead(CamelModel):
    """Schema for reading a cleanup event."""

    id: int
    organizer_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    location: str
    event_date: datetime
    duration: int
    max_participants: Optional[int] = None
    current_participants: int
    eco_points_reward: int
    status: str
    created_at: datetime


class JoinEventResult(CamelModel):
    """Outcome of a join request; ``joined`` is False when the user was already in."""

    event_id: int
    joined: bool
    message: str
