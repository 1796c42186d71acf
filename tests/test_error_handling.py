"""
Unit tests for the error handling system.

Tests custom exceptions, service error message extraction and the error
response middleware.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vidscrape.core.exceptions import (
    FALLBACK_ERROR_MESSAGE,
    ErrorCode,
    VidScrapeException,
    SubmissionValidationError,
    MissingInputError,
    PlatformMismatchError,
    ScrapeRequestError,
    NetworkError,
    ServiceError,
    InternalError,
    extract_service_error_message,
)
from vidscrape.middleware.error_handler import ErrorHandlingMiddleware


class TestVidScrapeExceptions:
    """Test custom VidScrape exception classes."""

    def test_base_exception_creation(self):
        exc = VidScrapeException(
            message="Test error",
            error_code=ErrorCode.INTERNAL_ERROR,
            status_code=500,
            suggestion="Try again",
            details={"key": "value"},
            retryable=True
        )

        assert exc.message == "Test error"
        assert str(exc) == "Test error"
        assert exc.error_code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 500
        assert exc.suggestion == "Try again"
        assert exc.details == {"key": "value"}
        assert exc.retryable is True

    def test_exception_to_dict(self):
        exc = MissingInputError()

        result = exc.to_dict()

        assert result["success"] is False
        assert result["error"] == "missing_input"
        assert result["message"] == "Please provide a video URL and select a platform"
        assert result["retryable"] is False
        assert "suggestion" in result
        assert result["details"] == {}

    def test_default_suggestions(self):
        assert "youtube" in MissingInputError().suggestion.lower()
        assert "reachable" in NetworkError().suggestion.lower()

    def test_hierarchy(self):
        assert issubclass(MissingInputError, SubmissionValidationError)
        assert issubclass(PlatformMismatchError, SubmissionValidationError)
        assert issubclass(NetworkError, ScrapeRequestError)
        assert issubclass(ServiceError, ScrapeRequestError)
        assert not issubclass(SubmissionValidationError, ScrapeRequestError)

    def test_platform_mismatch_message(self):
        exc = PlatformMismatchError(platform="tiktok", expected_label="TikTok", alternative_label="YouTube")
        assert exc.message == "The URL is not a TikTok link, please check the URL or select YouTube platform."
        assert exc.status_code == 422

    def test_network_error_uses_fallback(self):
        exc = NetworkError(reason="DNS failure")
        assert exc.message == FALLBACK_ERROR_MESSAGE
        assert exc.details == {"reason": "DNS failure"}
        assert exc.retryable is True

    def test_service_error_message(self):
        assert ServiceError(message="quota exceeded").message == "quota exceeded"
        assert ServiceError().message == FALLBACK_ERROR_MESSAGE
        assert ServiceError(message="").message == FALLBACK_ERROR_MESSAGE


class TestExtractServiceErrorMessage:
    """Test picking the message from error bodies."""

    def test_error_field(self):
        assert extract_service_error_message({"error": "Invalid TikTok URL"}) == "Invalid TikTok URL"

    @pytest.mark.parametrize("body", [
        None,
        "plain text",
        [],
        {},
        {"error": None},
        {"error": "   "},
        {"error": 42},
        {"message": "wrong key"},
    ])
    def test_fallback(self, body):
        assert extract_service_error_message(body) == FALLBACK_ERROR_MESSAGE


class TestErrorHandlingMiddleware:
    """Test the error response middleware."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        app.add_middleware(ErrorHandlingMiddleware)

        @app.get("/known")
        async def known():
            raise ServiceError(message="upstream said no", status_code=500)

        @app.get("/unexpected")
        async def unexpected():
            raise RuntimeError("kaboom")

        @app.get("/ok")
        async def ok():
            return {"ok": True}

        return TestClient(app)

    def test_passes_through_success(self, client):
        response = client.get("/ok")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_known_exception(self, client):
        response = client.get("/known")

        assert response.status_code == 502
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "service_error"
        assert data["message"] == "upstream said no"
        assert "response_time_ms" in data

    def test_unexpected_exception(self, client):
        response = client.get("/unexpected")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "internal_error"
        assert data["message"] == FALLBACK_ERROR_MESSAGE
        assert data["details"]["reason"] == "kaboom"

    def test_internal_error_defaults(self):
        exc = InternalError()
        assert exc.status_code == 500
        assert exc.retryable is False
