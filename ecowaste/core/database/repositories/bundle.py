"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and application components.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .challenges import EcoChallengeRepository
from .cleanup_events import CleanupEventRepository
from .community_reports import CommunityReportRepository
from .pickup_schedules import PickupScheduleRepository
from .quiz_attempts import QuizAttemptRepository
from .rewards import RewardRepository
from .users import UserRepository
from .waste_entries import WasteEntryRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    waste_entries: WasteEntryRepository
    pickups: PickupScheduleRepository
    reports: CommunityReportRepository
    events: CleanupEventRepository
    challenges: EcoChallengeRepository
    rewards: RewardRepository
    quiz_attempts: QuizAttemptRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        waste_entries=WasteEntryRepository(session),
        pickups=PickupScheduleRepository(session),
        reports=CommunityReportRepository(session),
        events=CleanupEventRepository(session),
        challenges=EcoChallengeRepository(session),
        rewards=RewardRepository(session),
        quiz_attempts=QuizAttemptRepository(session),
    )
