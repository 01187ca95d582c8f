"""
Reward repository implementation.

This module provides data access operations for the rewards catalogue and the
redemption transaction, plus the redemption code format.
"""

from __future__ import annotations

import secrets
import string
import time
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ...errors import InsufficientEcoPointsError
from ..entities.rewards import Reward, UserReward
from .base import AsyncBaseRepository
from .users import UserRepository

REDEMPTION_CODE_PREFIX = "ECO"
_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_redemption_code() -> str:
    """Return ``ECO-<epoch millis>-<6 uppercase alphanumerics>``."""
    suffix = "".join(secrets.choice(_CODE_ALPHABET) for _ in range(6))
    return f"{REDEMPTION_CODE_PREFIX}-{int(time.time() * 1000)}-{suffix}"


class RewardRepository(AsyncBaseRepository[Reward]):
    """Repository for reward data access operations using SQLModel."""

    default_order_by = "eco_points_cost"
    default_descending = False

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Reward)
        self._users = UserRepository(session)

    async def list_available(self) -> List[Reward]:
        """Get active rewards, cheapest first."""
        return await self.list(filters={"is_active": True})

    async def redeem(self, user_id: str, reward: Reward) -> UserReward:
        """Spend a user's points on a reward.

        The balance check and deduction are one conditional update; the
        redemption row is inserted in the same transaction.

        Args:
            user_id: Redeeming user
            reward: Reward being redeemed

        Returns:
            The persisted UserReward with its redemption code

        Raises:
            InsufficientEcoPointsError: For an unknown user or a balance below the cost
        """
        cost = reward.eco_points_cost
        if not await self._users.deduct_eco_points(user_id, cost):
            await self.session.rollback()
            raise InsufficientEcoPointsError(user_id, cost)

        user_reward = UserReward(
            user_id=user_id,
            reward_id=reward.id,
            redemption_code=generate_redemption_code(),
            expires_at=reward.valid_until,
        )
        self.session.add(user_reward)
        await self._commit()
        await self.session.refresh(user_reward)
        return user_reward

    async def redemptions_for_user(self, user_id: str) -> List[UserReward]:
        """Get a user's redemptions, most recent first."""
        stmt = select(UserReward).where(UserReward.user_id == user_id).order_by(UserReward.redeemed_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
