"""Domain enums for the EcoWaste core models package.

These vocabularies are shared between:

- the SQL entities (stored as plain strings),
- the API schemas (validated on input),
- the storage facade (status transitions with side effects).
"""

from .enums import (
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
