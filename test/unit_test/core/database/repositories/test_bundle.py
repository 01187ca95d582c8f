"""Unit tests for the repository bundle."""

from __future__ import annotations

import dataclasses

import pytest

from ecowaste.core.database.repositories import (
    CleanupEventRepository,
    RewardRepository,
    UserRepository,
    build_sql_repos_from_session,
)


class TestBuildSqlRepos:
    async def test_all_repositories_share_the_session(self, in_memory_session):
        repos = build_sql_repos_from_session(session=in_memory_session)

        assert isinstance(repos.users, UserRepository)
        assert isinstance(repos.events, CleanupEventRepository)
        assert isinstance(repos.rewards, RewardRepository)
        for field in dataclasses.fields(repos):
            assert getattr(repos, field.name).session is in_memory_session

    async def test_bundle_is_frozen(self, in_memory_session):
        repos = build_sql_repos_from_session(session=in_memory_session)
        with pytest.raises(dataclasses.FrozenInstanceError):
            repos.users = None  # type: ignore[misc]
