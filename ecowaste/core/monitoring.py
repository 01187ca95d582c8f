"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
EcoWaste service, including:
- API endpoint tracing
- Database operation monitoring
- Pydantic AI quiz generation calls
- EcoPoints balance changes

Instrumentation is opt-in through ``LOGFIRE_ENABLED``. The ``log_*`` helpers are
always safe to call: when Logfire is not configured they only emit debug logs.
"""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from ecowaste.server.core.config import settings

logger = logging.getLogger(__name__)

_configured = False


def initialize_logfire(app: FastAPI | None = None) -> None:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Sets up Logfire with automatic instrumentation for:
    - SQLAlchemy database operations
    - Pydantic AI model calls
    - FastAPI endpoints (when ``app`` is given)

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).
    """
    global _configured
    config = settings.logfire

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return

    logfire.configure(
        token=config.token,
        service_name=config.service_name,
        environment=config.environment,
    )
    _configured = True

    if config.trace_sqlalchemy:
        try:
            logfire.instrument_sqlalchemy()
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if config.trace_pydantic_ai:
        try:
            logfire.instrument_pydantic_ai()
            logger.info("Logfire: Pydantic AI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument Pydantic AI: {e}")

    if config.trace_fastapi and app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")

    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )


def is_enabled() -> bool:
    """Return True once Logfire has been configured for this process."""
    return _configured


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _configured:
        logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_points_change(user_id: str, delta: int, reason: str) -> None:
    """
    Record an EcoPoints balance change.

    Args:
        user_id: The user whose balance changed
        delta: Signed number of points added (negative when spent)
        reason: Short machine-readable reason, e.g. ``waste_entry`` or ``reward_redemption``
    """
    logger.info(f"EcoPoints change: user={user_id} delta={delta:+d} reason={reason}")
    if _configured:
        logfire.info("EcoPoints changed", user_id=user_id, delta=delta, reason=reason)


def log_quiz_generated(topic: str, difficulty: str, question_count: int, model: Optional[str]) -> None:
    """
    Log a generated quiz.

    Args:
        topic: Quiz topic
        difficulty: Requested difficulty
        question_count: Number of questions returned
        model: Model name, or None for the built-in question bank
    """
    logger.debug(
        f"Quiz generated: topic={topic!r} difficulty={difficulty} questions={question_count} model={model or 'builtin'}"
    )
    if _configured:
        logfire.info(
            "Quiz generated",
            topic=topic,
            difficulty=difficulty,
            question_count=question_count,
            model=model or "builtin",
        )
