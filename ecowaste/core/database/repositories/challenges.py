"""
Eco challenge repository implementation.

This module provides data access operations for challenges and the additive
per-user progress upsert.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import utc_now
from ..entities.challenges import EcoChallenge, UserChallengeProgress
from .base import AsyncBaseRepository, dialect_insert


class EcoChallengeRepository(AsyncBaseRepository[EcoChallenge]):
    """Repository for eco challenge data access operations using SQLModel."""

    default_order_by = "end_date"
    default_descending = False

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, EcoChallenge)

    async def list_active(self) -> List[EcoChallenge]:
        """Get active challenges, earliest deadline first."""
        return await self.list(filters={"is_active": True})

    async def progress_for_user(self, user_id: str) -> List[UserChallengeProgress]:
        """Get a user's progress rows, newest first.

        Rows are reloaded so counters changed by upserts are current.
        """
        stmt = (
            select(UserChallengeProgress)
            .where(UserChallengeProgress.user_id == user_id)
            .order_by(UserChallengeProgress.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def add_progress(self, user_id: str, challenge_id: int, progress: int) -> None:
        """Add ``progress`` to the user's counter for a challenge.

        Creates the row with ``progress`` as its value on first use; later calls
        add to the stored value in the same statement.

        Args:
            user_id: User making progress
            challenge_id: Challenge the progress counts towards
            progress: Amount to add

        Raises:
            IntegrityError: If the user or the challenge does not exist
        """
        table = UserChallengeProgress.__table__  # type: ignore[attr-defined]
        stmt = dialect_insert(self.session, UserChallengeProgress).values(
            user_id=user_id,
            challenge_id=challenge_id,
            current_progress=progress,
            is_completed=False,
            created_at=utc_now(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "challenge_id"],
            set_={"current_progress": table.c.current_progress + stmt.excluded.current_progress},
        )
        try:
            await self.session.exec(stmt)
        except IntegrityError:
            await self.session.rollback()
            raise
        await self._commit()
