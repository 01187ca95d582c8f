"""
User entity models.

This module contains the database entity for application users. The user row
carries the two running totals the rest of the system adjusts: the EcoPoints
balance and the accumulated carbon footprint.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class User(Base, table=True):
    """Entity for an application user.

    The primary key is the subject identifier issued by the identity
    provider, so rows are created through upserts on first sign-in.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    # Primary identifier (identity provider subject)
    id: str = Field(primary_key=True, max_length=128)

    # Profile
    email: Optional[str] = Field(default=None, max_length=255, unique=True)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_image_url: Optional[str] = Field(default=None, max_length=512)

    # Running totals
    eco_points: int = Field(default=0)
    carbon_footprint: float = Field(default=0.0)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"User(id={self.id}, eco_points={self.eco_points})"
