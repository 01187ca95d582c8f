"""Unit tests for domain error types."""

import pytest

from ecowaste.core.errors import (
    CleanupEventNotFoundError,
    EcoWasteError,
    EventFullError,
    InsufficientEcoPointsError,
    NotFoundError,
    RewardNotFoundError,
    UserNotFoundError,
)


class TestErrorMessages:
    @pytest.mark.parametrize(
        "error,message",
        [
            (RewardNotFoundError(1), "Reward not found"),
            (CleanupEventNotFoundError(2), "Cleanup event not found"),
            (UserNotFoundError("u"), "User not found"),
            (InsufficientEcoPointsError("u", 50), "Insufficient EcoPoints"),
            (EventFullError(3), "Cleanup event is full"),
        ],
    )
    def test_messages(self, error, message):
        assert str(error) == message
        assert isinstance(error, EcoWasteError)

    def test_not_found_family(self):
        assert issubclass(RewardNotFoundError, NotFoundError)
        assert not issubclass(InsufficientEcoPointsError, NotFoundError)

    def test_context_attributes(self):
        error = InsufficientEcoPointsError("u-1", 80)
        assert (error.user_id, error.cost) == ("u-1", 80)
