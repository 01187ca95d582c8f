"""
Unit tests for Pydantic Logfire monitoring module.

This test suite covers:
- Logfire initialization with various configurations
- Feature flag handling
- Custom logging helpers (API requests, EcoPoints changes, quiz generation)
"""

from unittest.mock import patch

import pytest

from ecowaste.core import monitoring
from ecowaste.server.core.config import LogfireConfig


@pytest.fixture(autouse=True)
def _reset_configured():
    monitoring._configured = False
    yield
    monitoring._configured = False


def _settings_with(config: LogfireConfig):
    class _Settings:
        logfire = config

    return _Settings()


class TestInitializeLogfire:
    def test_disabled_does_not_configure(self):
        with patch.object(monitoring, "settings", _settings_with(LogfireConfig(enabled=False))):
            with patch.object(monitoring.logfire, "configure") as mock_configure:
                monitoring.initialize_logfire()

        mock_configure.assert_not_called()
        assert monitoring.is_enabled() is False

    def test_enabled_without_token_does_not_configure(self):
        with patch.object(monitoring, "settings", _settings_with(LogfireConfig(enabled=True))):
            with patch.object(monitoring.logfire, "configure") as mock_configure:
                monitoring.initialize_logfire()

        mock_configure.assert_not_called()
        assert monitoring.is_enabled() is False

    def test_enabled_with_token_configures_and_instruments(self):
        config = LogfireConfig(enabled=True, token="tok", environment="test", trace_fastapi=True)
        app = object()
        with patch.object(monitoring, "settings", _settings_with(config)):
            with (
                patch.object(monitoring.logfire, "configure") as mock_configure,
                patch.object(monitoring.logfire, "instrument_sqlalchemy") as mock_sqla,
                patch.object(monitoring.logfire, "instrument_pydantic_ai") as mock_pai,
                patch.object(monitoring.logfire, "instrument_fastapi") as mock_fastapi,
            ):
                monitoring.initialize_logfire(app)

        mock_configure.assert_called_once_with(token="tok", service_name="ecowaste-server", environment="test")
        mock_sqla.assert_called_once()
        mock_pai.assert_called_once()
        mock_fastapi.assert_called_once_with(app=app)
        assert monitoring.is_enabled() is True

    def test_instrumentation_failure_is_logged(self):
        config = LogfireConfig(enabled=True, token="tok", trace_pydantic_ai=False, trace_fastapi=False)
        with patch.object(monitoring, "settings", _settings_with(config)):
            with (
                patch.object(monitoring.logfire, "configure"),
                patch.object(monitoring.logfire, "instrument_sqlalchemy", side_effect=RuntimeError("boom")),
                patch.object(monitoring, "logger") as mock_logger,
            ):
                monitoring.initialize_logfire()

        assert any("SQLAlchemy" in call.args[0] for call in mock_logger.warning.call_args_list)


class TestLogHelpers:
    def test_helpers_skip_logfire_when_not_configured(self):
        with patch.object(monitoring.logfire, "info") as mock_info:
            monitoring.log_api_request("GET", "/api/rewards", 200, 1.5)
            monitoring.log_points_change("u1", 10, "waste_entry")
            monitoring.log_quiz_generated("plastics", "easy", 5, None)

        mock_info.assert_not_called()

    def test_helpers_forward_to_logfire_when_configured(self):
        monitoring._configured = True
        with patch.object(monitoring.logfire, "info") as mock_info:
            monitoring.log_points_change("u1", -60, "reward_redemption")
            monitoring.log_quiz_generated("plastics", "easy", 5, None)

        assert mock_info.call_count == 2
        first, second = mock_info.call_args_list
        assert first.kwargs == {"user_id": "u1", "delta": -60, "reason": "reward_redemption"}
        assert second.kwargs["model"] == "builtin"

    def test_points_change_always_logged(self):
        with patch.object(monitoring, "logger") as mock_logger:
            monitoring.log_points_change("u1", 25, "waste_entry")

        assert "delta=+25" in mock_logger.info.call_args[0][0]
