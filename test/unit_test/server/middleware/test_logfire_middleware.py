"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Duration reporting and the X-Process-Time header
- Error handling
- Slow request detection
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from starlette.responses import Response
from starlette.testclient import TestClient

from swat_manager.server.middleware.logfire_middleware import LogfireMiddleware


def _request(method: str = "GET", path: str = "/api/v1/agencies"):
    mock_request = AsyncMock(spec=Request)
    mock_request.method = method
    mock_request.url.path = path
    mock_request.state = MagicMock()
    return mock_request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        mock_response = Response(content="ok", status_code=200)

        async def mock_call_next(request):
            return mock_response

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("swat_manager.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = await middleware.dispatch(_request(), mock_call_next)

        assert response.status_code == 200
        mock_log.assert_called_once()
        call_args = mock_log.call_args
        assert call_args[1]["method"] == "GET"
        assert call_args[1]["path"] == "/api/v1/agencies"
        assert call_args[1]["status_code"] == 200
        assert call_args[1]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_middleware_adds_process_time_header(self):
        async def mock_call_next(request):
            return Response(content="created", status_code=201)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("swat_manager.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(_request("POST", "/api/v1/events"), mock_call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_middleware_stores_start_time(self):
        request = _request()

        async def mock_call_next(req):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("swat_manager.server.middleware.logfire_middleware.log_api_request"):
            await middleware.dispatch(request, mock_call_next)

        assert isinstance(request.state.start_time, float)

    @pytest.mark.asyncio
    async def test_middleware_logs_failed_request_and_reraises(self):
        async def mock_call_next(request):
            raise RuntimeError("handler crashed")

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("swat_manager.server.middleware.logfire_middleware.log_api_request") as mock_log,
            patch("swat_manager.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            with pytest.raises(RuntimeError, match="handler crashed"):
                await middleware.dispatch(_request(), mock_call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"]["error"] == "handler crashed"

    @pytest.mark.asyncio
    async def test_middleware_warns_on_slow_request(self):
        async def mock_call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("swat_manager.server.middleware.logfire_middleware.log_api_request"),
            patch("swat_manager.server.middleware.logfire_middleware.logger") as mock_logger,
            patch("swat_manager.server.middleware.logfire_middleware.time") as mock_time,
        ):
            mock_time.time.side_effect = [100.0, 102.5]
            await middleware.dispatch(_request(), mock_call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]
        assert mock_logger.warning.call_args[1]["extra"]["duration_ms"] == 2500.0

    @pytest.mark.asyncio
    async def test_middleware_quiet_on_fast_request(self):
        async def mock_call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("swat_manager.server.middleware.logfire_middleware.log_api_request"),
            patch("swat_manager.server.middleware.logfire_middleware.logger") as mock_logger,
            patch("swat_manager.server.middleware.logfire_middleware.time") as mock_time,
        ):
            mock_time.time.side_effect = [100.0, 100.05]
            await middleware.dispatch(_request(), mock_call_next)

        mock_logger.warning.assert_not_called()


class TestLogfireMiddlewareInApp:
    def test_header_on_real_route(self):
        app = FastAPI()
        app.add_middleware(LogfireMiddleware)

        @app.get("/ping")
        async def ping():
            return {"pong": True}

        with patch("swat_manager.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = TestClient(app, base_url="http://localhost").get("/ping")

        assert response.status_code == 200
        assert "x-process-time" in response.headers
        mock_log.assert_called_once()
        assert mock_log.call_args[1]["path"] == "/ping"
