"""
Unit tests for server exception handlers.

Tests cover the mapping of domain errors to HTTP responses and the global
handler for unexpected errors.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from swat_manager.core.errors import (
    AssessmentIncompleteError,
    InvalidTokenError,
    NotFoundError,
    PermissionDeniedError,
    ReportFileMissingError,
    SwatError,
)
from swat_manager.server.exception_handlers import setup_exception_handlers
from swat_manager.server.exception_handlers.domain_handler import domain_exception_handler, status_for
from swat_manager.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/v1/agencies"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestDomainExceptionHandler:
    @pytest.mark.parametrize(
        "exc, expected",
        [
            (NotFoundError("Assessment"), 404),
            (ReportFileMissingError("/reports/missing.pdf"), 404),
            (PermissionDeniedError(), 403),
            (AssessmentIncompleteError(50, 90, "tier report"), 400),
            (InvalidTokenError(), 401),
            (SwatError("Something specific"), 400),
        ],
    )
    def test_status_for(self, exc, expected):
        assert status_for(exc) == expected

    @pytest.mark.asyncio
    async def test_not_found_detail(self, mock_request):
        response = await domain_exception_handler(mock_request, NotFoundError("Report", "r-1"))

        assert response.status_code == 404
        assert json.loads(response.body.decode()) == {"detail": "Report not found"}

    @pytest.mark.asyncio
    async def test_incomplete_assessment_detail(self, mock_request):
        response = await domain_exception_handler(mock_request, AssessmentIncompleteError(74, 75, "gap analysis report"))

        body = json.loads(response.body.decode())
        assert body["detail"] == "Assessment must be at least 75% complete to generate a gap analysis report"

    @pytest.mark.asyncio
    async def test_unauthorized_sets_authenticate_header(self, mock_request):
        response = await domain_exception_handler(mock_request, InvalidTokenError())

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_forbidden_has_no_authenticate_header(self, mock_request):
        response = await domain_exception_handler(mock_request, PermissionDeniedError("Access denied to this agency"))

        assert "www-authenticate" not in response.headers

    @pytest.mark.asyncio
    async def test_logs_mapping(self, mock_request):
        with patch("swat_manager.server.exception_handlers.domain_handler.logger") as mock_logger:
            await domain_exception_handler(mock_request, PermissionDeniedError())

        message = mock_logger.info.call_args[0][0]
        assert "PermissionDeniedError" in message
        assert "/api/v1/agencies" in message
        assert "403" in message


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("swat_manager.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "Unhandled exception" in call_args[0][0]
        assert call_args[1]["exc_info"] is True
        extra = call_args[1]["extra"]
        assert extra["error_type"] == "ValueError"
        assert extra["method"] == "GET"
        assert extra["path"] == "/api/v1/agencies"
        assert extra["client"] == "127.0.0.1"
        assert isinstance(extra["traceback"], str)

    @pytest.mark.asyncio
    async def test_exception_handler_response(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("swat_manager.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert isinstance(body["error_id"], int)

    @pytest.mark.asyncio
    async def test_exception_handler_handles_missing_client(self, mock_request):
        mock_request.client = None

        with patch("swat_manager.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("Test error"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    @pytest.mark.asyncio
    async def test_exception_handler_logs_query_params(self, mock_request):
        mock_request.query_params = {"view": "week"}

        with patch("swat_manager.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("Test error"))

        assert mock_logger.error.call_args[1]["extra"]["query_params"] == {"view": "week"}

    @pytest.mark.asyncio
    async def test_exception_handler_records_error(self, mock_request):
        with (
            patch("swat_manager.server.exception_handlers.global_handler.logger"),
            patch("swat_manager.server.exception_handlers.global_handler.log_error") as mock_log_error,
        ):
            await global_exception_handler(mock_request, KeyError("missing"))

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][0] == "KeyError"


class TestSetupExceptionHandlers:
    @pytest.fixture
    def app(self) -> FastAPI:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Agency")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("unexpected")

        return app

    def test_handlers_registered(self, app: FastAPI):
        assert SwatError in app.exception_handlers
        assert Exception in app.exception_handlers

    @pytest.mark.asyncio
    async def test_domain_error_through_app(self, app: FastAPI):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Agency not found"}

    @pytest.mark.asyncio
    async def test_unexpected_error_through_app(self, app: FastAPI):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error_type"] == "RuntimeError"
