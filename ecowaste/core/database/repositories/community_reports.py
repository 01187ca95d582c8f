"""
Community report repository implementation.

This module provides data access operations for community issue reports.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from ...models.domain.enums import ReportStatus
from ..base import utc_now
from ..entities.community_reports import CommunityReport
from .base import AsyncBaseRepository


class CommunityReportRepository(AsyncBaseRepository[CommunityReport]):
    """Repository for community report data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CommunityReport)

    async def list_recent(self, limit: int = 50) -> List[CommunityReport]:
        """Get the most recent reports, newest first.

        Args:
            limit: Maximum number of reports

        Returns:
            List of CommunityReport instances
        """
        return await self.list(limit=limit)

    async def update_status(self, report_id: int, status: str) -> Optional[CommunityReport]:
        """Set a report's status, stamping ``resolved_at`` on resolution.

        Args:
            report_id: Report to update
            status: New status value

        Returns:
            Updated CommunityReport, or None if the id is unknown
        """
        report = await self.get_by_id(report_id)
        if report is None:
            return None
        report.status = status
        if status == ReportStatus.resolved.value:
            report.resolved_at = utc_now()
        return await self.update(report)
