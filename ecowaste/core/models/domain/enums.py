"""Domain enums for EcoWaste models."""

from __future__ import annotations

from enum import Enum


class PickupStatus(str, Enum):
    """Lifecycle status of a scheduled waste pickup."""

    scheduled = "scheduled"
    completed = "completed"  # Stamps ``completed_at``.
    cancelled = "cancelled"


class ReportStatus(str, Enum):
    """
    Lifecycle status of a community report.

    Reports move reported -> investigating -> resolved.
    """

    reported = "reported"
    investigating = "investigating"
    resolved = "resolved"  # Stamps ``resolved_at``.


class ReportPriority(str, Enum):
    """Triage priority of a community report."""

    low = "low"
    medium = "medium"
    high = "high"


class EventStatus(str, Enum):
    """Lifecycle status of a cleanup event."""

    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"


class QuizDifficulty(str, Enum):
    """Difficulty requested for a generated quiz."""

    easy = "easy"
    medium = "medium"
    hard = "hard"
