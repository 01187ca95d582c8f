"""
Eco challenge entity models.

This module contains the database entities for time-boxed eco challenges and
the per-user progress counters against them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class EcoChallenge(Base, table=True):
    """Entity for an eco challenge.

    Table: eco_challenges
    """

    __tablename__ = "eco_challenges"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None)
    challenge_type: str = Field(max_length=64)
    target_value: int = Field()
    eco_points_reward: int = Field(default=0)
    start_date: datetime = Field(sa_type=DateTime)
    end_date: datetime = Field(index=True, sa_type=DateTime)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"EcoChallenge(id={self.id}, title={self.title}, active={self.is_active})"


class UserChallengeProgress(Base, table=True):
    """Accumulated progress of one user on one challenge.

    Table: user_challenge_progress
    """

    __tablename__ = "user_challenge_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "challenge_id", name="uq_user_challenge_progress_user_challenge"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)
    challenge_id: int = Field(foreign_key="eco_challenges.id", index=True)
    current_progress: int = Field(default=0)
    is_completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    def __repr__(self) -> str:
        return (
            f"UserChallengeProgress(user_id={self.user_id}, challenge_id={self.challenge_id}, "
            f"progress={self.current_progress})"
        )
