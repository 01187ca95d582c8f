"""Core domain models shared by the storage layer and the API."""

from __future__ import annotations

from .domain import (
    EventStatus,
    PickupStatus,
    QuizDifficulty,
    ReportPriority,
    ReportStatus,
)

__all__ = [
    "EventStatus",
    "PickupStatus",
    "QuizDifficulty",
    "ReportPriority",
    "ReportStatus",
]
