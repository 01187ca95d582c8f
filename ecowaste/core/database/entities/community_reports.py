"""
Community report entity models.

This module contains the database entity for user-filed issue tickets such as
illegal dumping or overflowing bins. Reports move through
reported -> investigating -> resolved.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CommunityReport(Base, table=True):
    """Entity for a community issue report.

    ``resolved_at`` is stamped when the status moves to ``resolved``.

    Table: community_reports
    """

    __tablename__ = "community_reports"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)

    report_type: str = Field(max_length=64)
    description: str = Field()
    location: str = Field(max_length=512)
    priority: str = Field(default="medium", max_length=16)
    status: str = Field(default="reported", max_length=32, index=True)
    image_url: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    resolved_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"CommunityReport(id={self.id}, report_type={self.report_type}, status={self.status})"
