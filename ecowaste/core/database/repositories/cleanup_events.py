"""
Cleanup event repository implementation.

This module provides data access operations for cleanup events and the
idempotent, capacity-checked join operation.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ...errors import CleanupEventNotFoundError, EventFullError
from ...models.domain.enums import EventStatus
from ..base import utc_now
from ..entities.cleanup_events import CleanupEvent, EventParticipant
from .base import AsyncBaseRepository, dialect_insert


class CleanupEventRepository(AsyncBaseRepository[CleanupEvent]):
    """Repository for cleanup event data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CleanupEvent)

    async def list_upcoming(self, now: datetime) -> List[CleanupEvent]:
        """Get events still marked upcoming whose date has not passed, soonest first.

        Args:
            now: Reference time (naive UTC)

        Returns:
            List of CleanupEvent instances
        """
        stmt = (
            select(CleanupEvent)
            .where(CleanupEvent.status == EventStatus.upcoming.value, CleanupEvent.event_date >= now)
            .order_by(CleanupEvent.event_date.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def join(self, event_id: int, user_id: str) -> bool:
        """Add a user to an event.

        The participant insert skips on conflict, and the participant counter is
        only incremented when a new row was inserted. The increment itself is
        conditional on the event not being full. Everything commits together.

        Args:
            event_id: Event to join
            user_id: Joining user

        Returns:
            True for a new participant, False if the user had already joined

        Raises:
            CleanupEventNotFoundError: If the event does not exist
            EventFullError: If the event has reached ``max_participants``
            IntegrityError: If the user does not exist
        """
        if await self.session.get(CleanupEvent, event_id) is None:
            raise CleanupEventNotFoundError(event_id)

        insert_stmt = (
            dialect_insert(self.session, EventParticipant)
            .values(event_id=event_id, user_id=user_id, joined_at=utc_now())
            .on_conflict_do_nothing(index_elements=["event_id", "user_id"])
            .returning(EventParticipant.__table__.c.id)
        )
        try:
            inserted = (await self.session.exec(insert_stmt)).first()
        except IntegrityError:
            await self.session.rollback()
            raise
        if inserted is None:
            await self.session.rollback()
            return False

        increment = (
            update(CleanupEvent)
            .where(
                CleanupEvent.id == event_id,
                or_(
                    CleanupEvent.max_participants.is_(None),
                    CleanupEvent.current_participants < CleanupEvent.max_participants,
                ),
            )
            .values(current_participants=CleanupEvent.current_participants + 1)
        )
        result = await self.session.exec(increment)
        if result.rowcount != 1:
            await self.session.rollback()
            raise EventFullError(event_id)

        await self._commit()
        return True

    async def list_participants(self, event_id: int) -> List[EventParticipant]:
        """Get the participant rows of an event in join order."""
        stmt = (
            select(EventParticipant)
            .where(EventParticipant.event_id == event_id)
            .order_by(EventParticipant.joined_at.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
