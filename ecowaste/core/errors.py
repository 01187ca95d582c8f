"""Error types for the EcoWaste domain.

Defines a small hierarchy of exceptions raised by the storage layer and the
learning services. Messages are human-readable and are returned to clients
as the ``detail`` of the HTTP error response.
"""

from __future__ import annotations


class EcoWasteError(Exception):
    """Base error for all EcoWaste domain exceptions."""


class NotFoundError(EcoWasteError):
    """Raised when a referenced record does not exist."""


class RewardNotFoundError(NotFoundError):
    """Raised when redeeming a reward id that does not exist."""

    def __init__(self, reward_id: int) -> None:
        self.reward_id = reward_id
        super().__init__("Reward not found")


class CleanupEventNotFoundError(NotFoundError):
    """Raised when joining a cleanup event id that does not exist."""

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__("Cleanup event not found")


class UserNotFoundError(NotFoundError):
    """Raised when an operation needs a user row that does not exist."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class InsufficientEcoPointsError(EcoWasteError):
    """Raised when a user's balance cannot cover a reward's cost."""

    def __init__(self, user_id: str, cost: int) -> None:
        self.user_id = user_id
        self.cost = cost
        super().__init__("Insufficient EcoPoints")


class EventFullError(EcoWasteError):
    """Raised when a cleanup event has reached its participant cap."""

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__("Cleanup event is full")


class QuizValidationError(EcoWasteError):
    """Raised for malformed quiz submissions."""


class QuizGenerationError(EcoWasteError):
    """Raised when the language model fails to produce a usable quiz."""
