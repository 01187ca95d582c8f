"""
Waste entry repository implementation.

This module provides data access operations for logged waste, including the
combined "insert entry and credit points" transaction.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ...errors import UserNotFoundError
from ..entities.waste_entries import WasteEntry
from .base import AsyncBaseRepository
from .users import UserRepository


class WasteEntryRepository(AsyncBaseRepository[WasteEntry]):
    """Repository for waste entry data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLModel AsyncSession for database operations
        """
        super().__init__(session, WasteEntry)
        self._users = UserRepository(session)

    async def create_with_points(self, entry: WasteEntry) -> WasteEntry:
        """Insert a waste entry and credit its points to the owner.

        Both writes commit together; nothing is written for an unknown user.

        Args:
            entry: WasteEntry to persist

        Returns:
            Persisted WasteEntry

        Raises:
            UserNotFoundError: If ``entry.user_id`` has no user row
        """
        points = entry.eco_points_earned or 0
        entry.eco_points_earned = points
        if not await self._users.add_eco_points(entry.user_id, points):
            await self.session.rollback()
            raise UserNotFoundError(entry.user_id)
        self.session.add(entry)
        await self._commit()
        await self.session.refresh(entry)
        return entry

    async def list_for_user(self, user_id: str) -> List[WasteEntry]:
        """Get all entries of a user, newest first.

        Args:
            user_id: Owner of the entries

        Returns:
            List of WasteEntry instances
        """
        return await self.list(filters={"user_id": user_id})

    async def list_for_user_between(self, user_id: str, start: datetime, end: datetime) -> List[WasteEntry]:
        """Get a user's entries created within ``[start, end]``, newest first.

        Args:
            user_id: Owner of the entries
            start: Inclusive lower bound on ``created_at``
            end: Inclusive upper bound on ``created_at``

        Returns:
            List of WasteEntry instances
        """
        stmt = (
            select(WasteEntry)
            .where(
                WasteEntry.user_id == user_id,
                WasteEntry.created_at >= start,
                WasteEntry.created_at <= end,
            )
            .order_by(WasteEntry.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
