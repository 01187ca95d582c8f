"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds environment variables from the
.env.example file and that the grouped configuration models are derived from
the flat settings.
"""

from pathlib import Path

import pytest

from ecowaste.server.core.config import CORSConfig, LogfireConfig, QuizConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


@pytest.fixture
def example_settings(env_example_vars: dict[str, str], monkeypatch) -> Settings:
    for key, value in env_example_vars.items():
        monkeypatch.setenv(key, value)
    return Settings(_env_file=None)


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_binding(self, example_settings: Settings):
        assert example_settings.server_host == "0.0.0.0"
        assert example_settings.server_port == 5000

    def test_database_url_binding(self, example_settings: Settings):
        assert example_settings.database_url.startswith("postgresql+asyncpg://")

    def test_logging_binding(self, example_settings: Settings):
        assert example_settings.log_level == "INFO"
        assert example_settings.enable_file_logging is False

    def test_port_override(self, monkeypatch):
        monkeypatch.setenv("ECOWASTE_SERVER_PORT", "8080")
        assert Settings(_env_file=None).server_port == 8080


class TestGroupedConfigs:
    """Test the grouped configuration properties."""

    def test_cors(self, example_settings: Settings):
        cors = example_settings.cors
        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["http://localhost:5173"]
        assert cors.allow_methods == ["*"]

    def test_logfire(self, example_settings: Settings):
        logfire = example_settings.logfire
        assert isinstance(logfire, LogfireConfig)
        assert logfire.enabled is False
        assert logfire.environment == "development"

    def test_quiz_defaults_to_builtin_bank(self, example_settings: Settings):
        quiz = example_settings.quiz
        assert isinstance(quiz, QuizConfig)
        assert not quiz.model
        assert quiz.question_count == 5

    def test_quiz_model(self, monkeypatch):
        monkeypatch.setenv("QUIZ_MODEL", "openai:gpt-4o")
        monkeypatch.setenv("QUIZ_QUESTION_COUNT", "8")
        quiz = Settings(_env_file=None).quiz
        assert quiz.model == "openai:gpt-4o"
        assert quiz.question_count == 8
