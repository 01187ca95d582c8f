"""
Database storage facade.

``DatabaseStorage`` is the single entry point the API uses for persistence.
It composes the per-table repositories over one ``AsyncSession`` and exposes
one typed operation per use case. Operations that touch more than one row
(points crediting, redemption, joining an event, challenge progress) run in a
single transaction inside the repositories and never read-modify-write a
counter in Python.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from .database.base import utc_now
from .database.entities import (
    CleanupEvent,
    CommunityReport,
    EcoChallenge,
    PickupSchedule,
    QuizAttempt,
    Reward,
    User,
    UserChallengeProgress,
    UserReward,
    WasteEntry,
)
from .database.repositories import build_sql_repos_from_session
from .database.schemas import LearningProgress, QuizAttemptRead, UserAnalytics
from .errors import RewardNotFoundError
from .logging_config import get_logger
from .models.domain.enums import PickupStatus, ReportStatus
from .monitoring import log_points_change

logger = get_logger(__name__)

RECENT_ATTEMPTS_LIMIT = 5


class StorageProtocol(Protocol):
    """Operations the application needs from persistent storage."""

    async def get_user(self, user_id: str) -> Optional[User]: ...

    async def upsert_user(self, data: Dict[str, Any]) -> User: ...

    async def create_waste_entry(self, entry: WasteEntry) -> WasteEntry: ...

    async def get_user_waste_entries(self, user_id: str) -> List[WasteEntry]: ...

    async def get_waste_entries_by_date_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[WasteEntry]: ...

    async def create_pickup_schedule(self, schedule: PickupSchedule) -> PickupSchedule: ...

    async def get_user_pickup_schedules(self, user_id: str) -> List[PickupSchedule]: ...

    async def update_pickup_schedule_status(
        self, schedule_id: int, status: Union[PickupStatus, str]
    ) -> Optional[PickupSchedule]: ...

    async def create_community_report(self, report: CommunityReport) -> CommunityReport: ...

    async def get_community_reports(self, limit: int = 50) -> List[CommunityReport]: ...

    async def update_community_report_status(
        self, report_id: int, status: Union[ReportStatus, str]
    ) -> Optional[CommunityReport]: ...

    async def create_cleanup_event(self, event: CleanupEvent) -> CleanupEvent: ...

    async def get_upcoming_cleanup_events(self) -> List[CleanupEvent]: ...

    async def join_cleanup_event(self, event_id: int, user_id: str) -> bool: ...

    async def get_active_challenges(self) -> List[EcoChallenge]: ...

    async def get_user_challenge_progress(self, user_id: str) -> List[UserChallengeProgress]: ...

    async def update_challenge_progress(self, user_id: str, challenge_id: int, progress: int) -> None: ...

    async def get_available_rewards(self) -> List[Reward]: ...

    async def redeem_reward(self, user_id: str, reward_id: int) -> UserReward: ...

    async def get_user_rewards(self, user_id: str) -> List[UserReward]: ...

    async def get_user_analytics(self, user_id: str) -> UserAnalytics: ...

    async def record_quiz_attempt(self, attempt: QuizAttempt) -> QuizAttempt: ...

    async def get_learning_progress(self, user_id: str) -> LearningProgress: ...


class DatabaseStorage:
    """SQL implementation of ``StorageProtocol`` over one async session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repos = build_sql_repos_from_session(session=session)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.repos.users.get_by_id(user_id)

    async def upsert_user(self, data: Dict[str, Any]) -> User:
        """Insert the user, or update every given field when ``data["id"]`` exists."""
        user = await self.repos.users.upsert(data)
        logger.debug(f"Upserted user {user.id}")
        return user

    # ------------------------------------------------------------------
    # Waste entries
    # ------------------------------------------------------------------

    async def create_waste_entry(self, entry: WasteEntry) -> WasteEntry:
        """Persist an entry and credit its points to the owner in one transaction.

        Raises:
            UserNotFoundError: If the owner has no user row
        """
        created = await self.repos.waste_entries.create_with_points(entry)
        if created.eco_points_earned:
            log_points_change(created.user_id, created.eco_points_earned, "waste_entry")
        return created

    async def get_user_waste_entries(self, user_id: str) -> List[WasteEntry]:
        return await self.repos.waste_entries.list_for_user(user_id)

    async def get_waste_entries_by_date_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[WasteEntry]:
        """Entries created within ``[start, end]``, newest first."""
        return await self.repos.waste_entries.list_for_user_between(user_id, start, end)

    # ------------------------------------------------------------------
    # Pickups
    # ------------------------------------------------------------------

    async def create_pickup_schedule(self, schedule: PickupSchedule) -> PickupSchedule:
        return await self.repos.pickups.create(schedule)

    async def get_user_pickup_schedules(self, user_id: str) -> List[PickupSchedule]:
        return await self.repos.pickups.list_for_user(user_id)

    async def update_pickup_schedule_status(
        self, schedule_id: int, status: Union[PickupStatus, str]
    ) -> Optional[PickupSchedule]:
        """Change a pickup's status; completing it stamps ``completed_at``.

        Raises:
            ValueError: If ``status`` is not a pickup status
        """
        return await self.repos.pickups.update_status(schedule_id, PickupStatus(status).value)

    # ------------------------------------------------------------------
    # Community reports
    # ------------------------------------------------------------------

    async def create_community_report(self, report: CommunityReport) -> CommunityReport:
        return await self.repos.reports.create(report)

    async def get_community_reports(self, limit: int = 50) -> List[CommunityReport]:
        return await self.repos.reports.list_recent(limit)

    async def update_community_report_status(
        self, report_id: int, status: Union[ReportStatus, str]
    ) -> Optional[CommunityReport]:
        """Change a report's status; resolving it stamps ``resolved_at``.

        Raises:
            ValueError: If ``status`` is not a report status
        """
        return await self.repos.reports.update_status(report_id, ReportStatus(status).value)

    # ------------------------------------------------------------------
    # Cleanup events
    # ------------------------------------------------------------------

    async def create_cleanup_event(self, event: CleanupEvent) -> CleanupEvent:
        return await self.repos.events.create(event)

    async def get_upcoming_cleanup_events(self) -> List[CleanupEvent]:
        return await self.repos.events.list_upcoming(utc_now())

    async def join_cleanup_event(self, event_id: int, user_id: str) -> bool:
        """Join an event once; repeats are no-ops that return False.

        Raises:
            CleanupEventNotFoundError: If the event does not exist
            EventFullError: If the event is at capacity
        """
        joined = await self.repos.events.join(event_id, user_id)
        if joined:
            logger.info(f"User {user_id} joined cleanup event {event_id}")
        return joined

    # ------------------------------------------------------------------
    # Challenges
    # ------------------------------------------------------------------

    async def get_active_challenges(self) -> List[EcoChallenge]:
        return await self.repos.challenges.list_active()

    async def get_user_challenge_progress(self, user_id: str) -> List[UserChallengeProgress]:
        return await self.repos.challenges.progress_for_user(user_id)

    async def update_challenge_progress(self, user_id: str, challenge_id: int, progress: int) -> None:
        """Add ``progress`` to the user's counter, creating it on first use."""
        await self.repos.challenges.add_progress(user_id, challenge_id, progress)

    # ------------------------------------------------------------------
    # Rewards
    # ------------------------------------------------------------------

    async def get_available_rewards(self) -> List[Reward]:
        return await self.repos.rewards.list_available()

    async def redeem_reward(self, user_id: str, reward_id: int) -> UserReward:
        """Spend the reward's cost and issue a redemption code.

        Raises:
            RewardNotFoundError: If the reward does not exist
            InsufficientEcoPointsError: If the user cannot cover the cost
        """
        reward = await self.repos.rewards.get_by_id(reward_id)
        if reward is None:
            raise RewardNotFoundError(reward_id)

        user_reward = await self.repos.rewards.redeem(user_id, reward)
        log_points_change(user_id, -reward.eco_points_cost, "reward_redemption")
        return user_reward

    async def get_user_rewards(self, user_id: str) -> List[UserReward]:
        return await self.repos.rewards.redemptions_for_user(user_id)

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    async def get_user_analytics(self, user_id: str) -> UserAnalytics:
        """Summarize a user's waste entries; a missing user yields zero totals."""
        entries = await self.repos.waste_entries.list_for_user(user_id)
        user = await self.repos.users.get_by_id(user_id)

        waste_by_type: Dict[str, float] = defaultdict(float)
        for entry in entries:
            waste_by_type[entry.waste_type] += entry.quantity

        return UserAnalytics(
            total_waste_entries=len(entries),
            total_eco_points=user.eco_points if user else 0,
            waste_by_type=dict(waste_by_type),
            carbon_footprint=user.carbon_footprint if user else 0.0,
        )

    # ------------------------------------------------------------------
    # Learning
    # ------------------------------------------------------------------

    async def record_quiz_attempt(self, attempt: QuizAttempt) -> QuizAttempt:
        return await self.repos.quiz_attempts.create(attempt)

    async def get_learning_progress(self, user_id: str) -> LearningProgress:
        """Aggregate the user's quiz attempts."""
        attempts = await self.repos.quiz_attempts.list_for_user(user_id)
        if not attempts:
            return LearningProgress()

        topics: List[str] = []
        for attempt in attempts:
            if attempt.topic not in topics:
                topics.append(attempt.topic)

        return LearningProgress(
            quizzes_taken=len(attempts),
            average_score=round(sum(a.score for a in attempts) / len(attempts), 1),
            best_score=max(a.score for a in attempts),
            total_correct=sum(a.correct_answers for a in attempts),
            total_questions=sum(a.total_questions for a in attempts),
            topics=topics,
            recent_attempts=[QuizAttemptRead.model_validate(a) for a in attempts[:RECENT_ATTEMPTS_LIMIT]],
        )
