"""
Error handling system for VidScrape.

This module provides the exception taxonomy used across the submission
cycle: validation errors raised before a request is dispatched, request
errors raised by the scrape service client, and the generic fallback
message shown when nothing better is available.
"""

import logging
from typing import Dict, Any, Optional
from enum import Enum


logger = logging.getLogger(__name__)


FALLBACK_ERROR_MESSAGE = "Something went wrong"
MISSING_INPUT_MESSAGE = "Please provide a video URL and select a platform"


class ErrorCode(str, Enum):
    """Standardized error codes for consistent error handling."""

    # Validation errors
    MISSING_INPUT = "missing_input"
    PLATFORM_MISMATCH = "platform_mismatch"
    VALIDATION_ERROR = "validation_error"

    # Platform errors
    UNSUPPORTED_PLATFORM = "unsupported_platform"

    # Scrape service errors
    NETWORK_ERROR = "network_error"
    SERVICE_ERROR = "service_error"

    # System errors
    INTERNAL_ERROR = "internal_error"


class VidScrapeException(Exception):
    """
    Base exception class for all VidScrape errors.

    Provides structured error information including error codes,
    user-friendly messages, and actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 400,
        suggestion: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retryable: bool = False
    ):
        """
        Initialize VidScrape exception.

        Args:
            message: Human-readable error message, shown to the user verbatim
            error_code: Standardized error code
            status_code: HTTP status code
            suggestion: Actionable suggestion for the user
            details: Additional error details
            retryable: Whether the operation can be retried
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.suggestion = suggestion or self._get_default_suggestion()
        self.details = details or {}
        self.retryable = retryable

    def _get_default_suggestion(self) -> str:
        """Get default suggestion based on error code."""
        suggestions = {
            ErrorCode.MISSING_INPUT: "Enter the video URL and choose YouTube or TikTok",
            ErrorCode.PLATFORM_MISMATCH: "Check the URL or select the other platform",
            ErrorCode.UNSUPPORTED_PLATFORM: "Choose either YouTube or TikTok",
            ErrorCode.NETWORK_ERROR: "Check that the scrape service is reachable and submit again",
            ErrorCode.SERVICE_ERROR: "Submit again, or try a different video",
        }
        return suggestions.get(self.error_code, "Please try again or contact support if the problem persists")

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.error_code.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "retryable": self.retryable,
            "details": self.details
        }


# Validation Errors
class SubmissionValidationError(VidScrapeException):
    """Raised when the URL/platform pair fails validation."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.VALIDATION_ERROR, **kwargs):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=422,
            **kwargs
        )


class MissingInputError(SubmissionValidationError):
    """Raised when the URL is empty or no platform is selected."""

    def __init__(self, **kwargs):
        super().__init__(
            message=MISSING_INPUT_MESSAGE,
            error_code=ErrorCode.MISSING_INPUT,
            **kwargs
        )


class PlatformMismatchError(SubmissionValidationError):
    """Raised when the URL does not belong to the selected platform."""

    def __init__(self, platform: str, expected_label: str, alternative_label: str, **kwargs):
        super().__init__(
            message=(
                f"The URL is not a {expected_label} link, please check the URL "
                f"or select {alternative_label} platform."
            ),
            error_code=ErrorCode.PLATFORM_MISMATCH,
            **kwargs
        )
        self.details["platform"] = platform


# Platform Errors
class UnsupportedPlatformError(VidScrapeException):
    """Raised when a platform name is not one of the supported choices."""

    def __init__(self, platform: str, **kwargs):
        super().__init__(
            message=f"Platform '{platform}' is not supported",
            error_code=ErrorCode.UNSUPPORTED_PLATFORM,
            status_code=400,
            **kwargs
        )
        self.details["platform"] = platform


# Scrape service errors
class ScrapeRequestError(VidScrapeException):
    """Base class for failures talking to the scrape service."""


class NetworkError(ScrapeRequestError):
    """Raised when no response was received from the scrape service."""

    def __init__(self, reason: Optional[str] = None, **kwargs):
        super().__init__(
            message=FALLBACK_ERROR_MESSAGE,
            error_code=ErrorCode.NETWORK_ERROR,
            status_code=503,
            retryable=True,
            **kwargs
        )
        if reason:
            self.details["reason"] = reason


class ServiceError(ScrapeRequestError):
    """Raised when the scrape service answers with a failure."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, **kwargs):
        super().__init__(
            message=message or FALLBACK_ERROR_MESSAGE,
            error_code=ErrorCode.SERVICE_ERROR,
            status_code=502,
            **kwargs
        )
        if status_code is not None:
            self.details["service_status_code"] = status_code


class InternalError(VidScrapeException):
    """Raised for unexpected internal errors."""

    def __init__(self, reason: Optional[str] = None, **kwargs):
        super().__init__(
            message=FALLBACK_ERROR_MESSAGE,
            error_code=ErrorCode.INTERNAL_ERROR,
            status_code=500,
            retryable=False,
            **kwargs
        )
        if reason:
            self.details["reason"] = reason


def extract_service_error_message(body: Any) -> str:
    """
    Pick the user-facing message out of a scrape service error body.

    Args:
        body: Decoded JSON body of the failed response (any shape)

    Returns:
        The body's ``error`` string when present and non-empty, otherwise
        the generic fallback message
    """
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message.strip():
            return message
    return FALLBACK_ERROR_MESSAGE
