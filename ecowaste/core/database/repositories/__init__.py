"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain
and table relationships. Each module provides type-safe data access operations
for its corresponding SQLModel entity models.

All repositories are built on SQLModel for:
- Type-safe ORM operations with Pydantic validation
- Async-first database access patterns
- Consistent CRUD interface via AsyncBaseRepository
- Dialect-aware ``ON CONFLICT`` inserts for idempotent joins and upserts

Modules:
- base: AsyncBaseRepository, AsyncQueryBuilder and dialect_insert
- users: User upsert and EcoPoints balance updates
- waste_entries: Waste logging with point crediting
- pickup_schedules: Pickup scheduling and status transitions
- community_reports: Community report filing and status transitions
- cleanup_events: Cleanup events and idempotent joins
- challenges: Challenges and additive progress upserts
- rewards: Rewards catalogue and redemptions
- quiz_attempts: Scored quiz submissions
- bundle: SqlRepoBundle for dependency injection
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .challenges import EcoChallengeRepository
from .cleanup_events import CleanupEventRepository
from .community_reports import CommunityReportRepository
from .pickup_schedules import PickupScheduleRepository
from .quiz_attempts import QuizAttemptRepository
from .rewards import RewardRepository, generate_redemption_code
from .users import UserRepository
from .waste_entries import WasteEntryRepository

__all__ = [
    "CleanupEventRepository",
    "CommunityReportRepository",
    "EcoChallengeRepository",
    "PickupScheduleRepository",
    "QuizAttemptRepository",
    "RewardRepository",
    "SqlRepoBundle",
    "UserRepository",
    "WasteEntryRepository",
    "build_sql_repos_from_session",
    "generate_redemption_code",
]
