"""
Schema models for user profile requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class UserRead(CamelModel):
    """Schema for reading a user profile and balance."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    eco_points: int
    carbon_footprint: float
    created_at: datetime
    updated_at: datetime


class UserUpsert(CamelModel):
    """Schema for creating or updating the current user's profile.

    Only fields present in the request are written; the balance is never set
    through this schema.
    """

    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_image_url: Optional[str] = Field(default=None, max_length=512)
