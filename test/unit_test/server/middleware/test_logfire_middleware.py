"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Duration header injection
- Slow request detection
- Failed request logging
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from ecowaste.server.middleware.logfire_middleware import LogfireMiddleware

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_request():
    request = AsyncMock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/rewards"
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    async def test_middleware_processes_successful_request(self, mock_request):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("ecowaste.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = await middleware.dispatch(mock_request, call_next)

            assert response.status_code == 200
            mock_log.assert_called_once()
            kwargs = mock_log.call_args[1]
            assert kwargs["method"] == "GET"
            assert kwargs["path"] == "/api/rewards"
            assert kwargs["status_code"] == 200
            assert kwargs["duration_ms"] >= 0

    async def test_middleware_adds_process_time_header(self, mock_request):
        async def call_next(request):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("ecowaste.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(mock_request, call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    async def test_middleware_warns_on_slow_request(self, mock_request):
        async def call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("ecowaste.server.middleware.logfire_middleware.log_api_request"),
            patch("ecowaste.server.middleware.logfire_middleware.SLOW_REQUEST_MS", -1),
            patch("ecowaste.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            await middleware.dispatch(mock_request, call_next)

            mock_logger.warning.assert_called_once()
            assert "Slow API request" in mock_logger.warning.call_args[0][0]

    async def test_middleware_logs_and_reraises_failures(self, mock_request):
        async def call_next(request):
            raise RuntimeError("handler crashed")

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("ecowaste.server.middleware.logfire_middleware.log_api_request") as mock_log,
            patch("ecowaste.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            with pytest.raises(RuntimeError, match="handler crashed"):
                await middleware.dispatch(mock_request, call_next)

            mock_logger.error.assert_called_once()
            assert mock_log.call_args[1]["status_code"] == 500
