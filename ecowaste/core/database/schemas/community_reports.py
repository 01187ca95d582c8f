"""
Schema models for community report requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from ...models.domain.enums import ReportPriority, ReportStatus
from .common import CamelModel


class CommunityReportCreate(CamelModel):
    """Schema for filing a community report."""

    report_type: str = Field(min_length=1, max_length=64, description="e.g. 'illegal_dumping', 'overflowing_bin'")
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=512)
    priority: ReportPriority = ReportPriority.medium
    image_url: Optional[str] = Field(default=None, max_length=512)


class CommunityReportRead(CamelModel):
    """Schema for reading a community report."""

    id: int
    user_id: str
    report_type: str
    description: str
    location: str
    priority: str
    status: str
    image_url: Optional[str] = None
    created_at: datetime
    resolved_at: Optional[datetime] = None


class ReportStatusUpdate(CamelModel):
    """Schema for moving a report through its lifecycle."""

    status: ReportStatus
