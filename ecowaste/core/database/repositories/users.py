"""
User repository implementation.

This module provides data access operations for users, including the
identity-provider upsert and the EcoPoints balance adjustments.
Built on SQLModel with SQL increment expressions for balance changes.
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import utc_now
from ..entities.users import User
from .base import AsyncBaseRepository, dialect_insert


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLModel AsyncSession for database operations
        """
        super().__init__(session, User)

    async def upsert(self, data: Dict[str, Any]) -> User:
        """Insert a user or update every given field of the existing row.

        ``updated_at`` is always refreshed. Fields not present in ``data`` keep
        their stored values.

        Args:
            data: Column values; must contain ``id``

        Returns:
            The stored User row
        """
        now = utc_now()
        changes = {key: value for key, value in data.items() if key != "id"}
        changes["updated_at"] = now
        # Core insert: entity defaults are spelled out for the insert branch only
        values = {"eco_points": 0, "carbon_footprint": 0.0, "created_at": now, **data, "updated_at": now}
        stmt = dialect_insert(self.session, User).values(**values)
        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_=changes)
        await self.session.exec(stmt)
        await self._commit()
        return await self.get_by_id(data["id"])

    async def add_eco_points(self, user_id: str, points: int) -> bool:
        """Increment a user's balance with a SQL expression (no commit).

        Args:
            user_id: User whose balance changes
            points: Points to add

        Returns:
            True if the user row exists
        """
        stmt = update(User).where(User.id == user_id).values(eco_points=User.eco_points + points)
        result = await self.session.exec(stmt)
        return result.rowcount == 1

    async def deduct_eco_points(self, user_id: str, points: int) -> bool:
        """Decrement a user's balance only if it covers ``points`` (no commit).

        The balance check and the deduction are one conditional ``UPDATE``, so
        two concurrent deductions cannot both pass the check.

        Args:
            user_id: User whose balance changes
            points: Points to remove

        Returns:
            True if the deduction was applied, False for an unknown user or a low balance
        """
        stmt = (
            update(User)
            .where(User.id == user_id, User.eco_points >= points)
            .values(eco_points=User.eco_points - points)
        )
        result = await self.session.exec(stmt)
        return result.rowcount == 1
