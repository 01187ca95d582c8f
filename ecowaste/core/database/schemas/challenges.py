"""
Schema models for eco challenge requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class EcoChallengeRead(CamelModel):
    """Schema for reading a challenge."""

    id: int
    title: str
    description: Optional[str] = None
    challenge_type: str
    target_value: int
    eco_points_reward: int
    start_date: datetime
    end_date: datetime
    is_active: bool


class ChallengeProgressRead(CamelModel):
    """Schema for reading a user's progress on a challenge."""

    id: int
    user_id: str
    challenge_id: int
    current_progress: int
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime


class ChallengeProgressUpdate(CamelModel):
    """Schema for reporting progress; the amount is added to the stored counter."""

    progress: int = Field(ge=0)
