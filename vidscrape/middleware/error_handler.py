"""
Error handling middleware for VidScrape.

This module turns exceptions escaping the API into consistent JSON error
responses with logging. Submission failures never reach it: the controller
keeps those in the form state.
"""

import time
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from vidscrape.core.exceptions import VidScrapeException, InternalError, ErrorCode


logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for handling application errors with consistent formatting.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any errors that occur.

        Args:
            request: FastAPI request object
            call_next: Next middleware/endpoint in the chain

        Returns:
            Response object with error handling applied
        """
        start_time = time.time()

        try:
            return await call_next(request)

        except VidScrapeException as e:
            return self._handle_vidscrape_exception(request, e, start_time)

        except Exception as e:
            return self._handle_unexpected_exception(request, e, start_time)

    def _handle_vidscrape_exception(
        self,
        request: Request,
        exc: VidScrapeException,
        start_time: float
    ) -> JSONResponse:
        """Handle VidScrape custom exceptions."""
        response_time = (time.time() - start_time) * 1000

        log_data = {
            "error_code": exc.error_code.value,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
            "response_time_ms": round(response_time, 2),
            "retryable": exc.retryable
        }

        if exc.status_code >= 500:
            logger.error(f"VidScrape error: {exc.message}", extra=log_data)
        else:
            logger.warning(f"VidScrape error: {exc.message}", extra=log_data)

        response_data = exc.to_dict()
        response_data["response_time_ms"] = round(response_time, 2)

        return JSONResponse(
            status_code=exc.status_code,
            content=response_data
        )

    def _handle_unexpected_exception(
        self,
        request: Request,
        exc: Exception,
        start_time: float
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        response_time = (time.time() - start_time) * 1000

        logger.exception(
            f"Unexpected error: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "response_time_ms": round(response_time, 2)
            }
        )

        internal_error = InternalError(reason=str(exc))
        response_data = internal_error.to_dict()
        response_data["response_time_ms"] = round(response_time, 2)

        return JSONResponse(
            status_code=500,
            content=response_data
        )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body validation errors in the common error format."""
    errors = exc.errors()
    error_detail = errors[0] if errors else {}
    field_name = error_detail.get('loc', ['unknown'])[-1] if error_detail.get('loc') else 'unknown'
    error_msg = error_detail.get('msg', 'Validation error')

    logger.warning(
        f"Validation error: {error_msg}",
        extra={
            "field": field_name,
            "path": request.url.path,
            "method": request.method
        }
    )

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": ErrorCode.VALIDATION_ERROR.value,
            "message": f"Invalid {field_name}: {error_msg}",
            "suggestion": "Please check your input and try again",
            "retryable": False,
            "details": {"field": str(field_name)}
        }
    )
