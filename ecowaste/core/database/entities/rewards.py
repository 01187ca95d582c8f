"""
Reward entity models.

This module contains the database entities for the rewards catalogue and the
redemptions users make against it with their EcoPoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class Reward(Base, table=True):
    """Entity for a redeemable reward.

    Table: rewards
    """

    __tablename__ = "rewards"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None, max_length=64)
    eco_points_cost: int = Field(ge=0)
    is_active: bool = Field(default=True, index=True)
    valid_until: Optional[datetime] = Field(default=None, sa_type=DateTime)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"Reward(id={self.id}, title={self.title}, cost={self.eco_points_cost})"


class UserReward(Base, table=True):
    """A reward redeemed by a user.

    Table: user_rewards
    """

    __tablename__ = "user_rewards"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)
    reward_id: int = Field(foreign_key="rewards.id", index=True)
    redemption_code: str = Field(max_length=64, unique=True)
    redeemed_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    expires_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    is_used: bool = Field(default=False)

    def __repr__(self) -> str:
        return f"UserReward(id={self.id}, user_id={self.user_id}, code={self.redemption_code})"
