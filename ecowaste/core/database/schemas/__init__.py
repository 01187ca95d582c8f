"""
API schema models.

Request and response models for the REST API, kept separate from the entity
models so the wire contract (camelCase keys) can evolve independently.
"""

from .analytics import UserAnalytics
from .challenges import ChallengeProgressRead, ChallengeProgressUpdate, EcoChallengeRead
from .cleanup_events import CleanupEventCreate, CleanupEventRead, JoinEventResult
from .common import CamelModel, UtcDatetime, as_naive_utc
from .community_reports import CommunityReportCreate, CommunityReportRead, ReportStatusUpdate
from .learning import LearningProgress, QuizAttemptRead, QuizGenerateRequest, QuizSubmitRequest
from .pickup_schedules import PickupScheduleCreate, PickupScheduleRead, PickupStatusUpdate
from .rewards import RewardRead, UserRewardRead
from .users import UserRead, UserUpsert
from .waste_entries import WasteEntryCreate, WasteEntryRead

__all__ = [
    "CamelModel",
    "ChallengeProgressRead",
    "ChallengeProgressUpdate",
    "CleanupEventCreate",
    "CleanupEventRead",
    "CommunityReportCreate",
    "CommunityReportRead",
    "EcoChallengeRead",
    "JoinEventResult",
    "LearningProgress",
    "PickupScheduleCreate",
    "PickupScheduleRead",
    "PickupStatusUpdate",
    "QuizAttemptRead",
    "QuizGenerateRequest",
    "QuizSubmitRequest",
    "ReportStatusUpdate",
    "RewardRead",
    "UserAnalytics",
    "UserRead",
    "UserRewardRead",
    "UserUpsert",
    "UtcDatetime",
    "as_naive_utc",
]
