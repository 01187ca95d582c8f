"""
Schema models for rewards and redemptions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .common import CamelModel


class RewardRead(CamelModel):
    """Schema for reading a catalogue reward."""

    id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    eco_points_cost: int
    is_active: bool
    valid_until: Optional[datetime] = None
    created_at: datetime


class UserRewardRead(CamelModel):
    """Schema for reading a redemption."""

    id: int
    user_id: str
    reward_id: int
    redemption_code: str
    redeemed_at: datetime
    expires_at: Optional[datetime] = None
    is_used: bool
