"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships. Each module represents either:

1. A single database table and its related logic
2. A business domain that spans multiple related tables

Modules:
- users: Application users and their EcoPoints balance
- waste_entries: Logged waste
- pickup_schedules: Scheduled waste pickups
- community_reports: User-filed issue reports
- cleanup_events: Cleanup events and their participants
- challenges: Eco challenges and per-user progress
- rewards: Rewards catalogue and redemptions
- quiz_attempts: Scored quiz submissions
"""

from .challenges import EcoChallenge, UserChallengeProgress
from .cleanup_events import CleanupEvent, EventParticipant
from .community_reports import CommunityReport
from .pickup_schedules import PickupSchedule
from .quiz_attempts import QuizAttempt
from .rewards import Reward, UserReward
from .users import User
from .waste_entries import WasteEntry

__all__ = [
    "CleanupEvent",
    "CommunityReport",
    "EcoChallenge",
    "EventParticipant",
    "PickupSchedule",
    "QuizAttempt",
    "Reward",
    "User",
    "UserChallengeProgress",
    "UserReward",
    "WasteEntry",
]
