"""
Pickup schedule repository implementation.

This module provides data access operations for scheduled waste pickups.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from ...models.domain.enums import PickupStatus
from ..base import utc_now
from ..entities.pickup_schedules import PickupSchedule
from .base import AsyncBaseRepository


class PickupScheduleRepository(AsyncBaseRepository[PickupSchedule]):
    """Repository for pickup schedule data access operations using SQLModel."""

    default_order_by = "scheduled_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PickupSchedule)

    async def list_for_user(self, user_id: str) -> List[PickupSchedule]:
        """Get a user's pickups, latest scheduled date first."""
        return await self.list(filters={"user_id": user_id})

    async def update_status(self, schedule_id: int, status: str) -> Optional[PickupSchedule]:
        """Set a pickup's status, stamping ``completed_at`` on completion.

        Args:
            schedule_id: Pickup to update
            status: New status value

        Returns:
            Updated PickupSchedule, or None if the id is unknown
        """
        schedule = await self.get_by_id(schedule_id)
        if schedule is None:
            return None
        schedule.status = status
        if status == PickupStatus.completed.value:
            schedule.completed_at = utc_now()
        return await self.update(schedule)
