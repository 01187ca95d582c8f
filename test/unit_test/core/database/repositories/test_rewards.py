"""Unit tests for the reward repository and redemption codes."""

from __future__ import annotations

import re

import pytest

from ecowaste.core.database.entities import Reward
from ecowaste.core.database.repositories import RewardRepository, UserRepository, generate_redemption_code
from ecowaste.core.errors import InsufficientEcoPointsError

CODE_PATTERN = re.compile(r"^ECO-\d{13,}-[A-Z0-9]{6}$")


class TestRedemptionCode:
    def test_format(self):
        assert CODE_PATTERN.match(generate_redemption_code())

    def test_codes_differ(self):
        assert len({generate_redemption_code() for _ in range(50)}) == 50


class TestRewardRepository:
    async def test_list_available_cheapest_first(self, in_memory_session):
        repo = RewardRepository(in_memory_session)
        await repo.create(Reward(title="Tree", eco_points_cost=500))
        await repo.create(Reward(title="Coffee", eco_points_cost=100))
        await repo.create(Reward(title="Retired", eco_points_cost=1, is_active=False))

        rewards = await repo.list_available()

        assert [r.title for r in rewards] == ["Coffee", "Tree"]

    async def test_redeem_deducts_and_issues_code(self, in_memory_session, user, reward):
        repo = RewardRepository(in_memory_session)

        user_reward = await repo.redeem(user.id, reward)

        assert CODE_PATTERN.match(user_reward.redemption_code)
        assert user_reward.expires_at == reward.valid_until
        assert user_reward.is_used is False
        assert (await UserRepository(in_memory_session).get_by_id(user.id)).eco_points == 40

    async def test_redeem_with_low_balance_changes_nothing(self, in_memory_session, user):
        repo = RewardRepository(in_memory_session)
        user_id = user.id
        expensive = await repo.create(Reward(title="Bike", eco_points_cost=1000))

        with pytest.raises(InsufficientEcoPointsError, match="Insufficient EcoPoints"):
            await repo.redeem(user_id, expensive)

        assert (await UserRepository(in_memory_session).get_by_id(user_id)).eco_points == 100
        assert await repo.redemptions_for_user(user_id) == []
