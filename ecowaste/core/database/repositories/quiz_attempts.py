"""
Quiz attempt repository implementation.
"""

from __future__ import annotations

from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.quiz_attempts import QuizAttempt
from .base import AsyncBaseRepository


class QuizAttemptRepository(AsyncBaseRepository[QuizAttempt]):
    """Repository for quiz attempt data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, QuizAttempt)

    async def list_for_user(self, user_id: str) -> List[QuizAttempt]:
        """Get a user's attempts, newest first."""
        stmt = (
            select(QuizAttempt)
            .where(QuizAttempt.user_id == user_id)
            .order_by(QuizAttempt.created_at.desc(), QuizAttempt.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
