"""
Middleware package for VidScrape API.

This package contains error handling for request processing.
"""

from .error_handler import ErrorHandlingMiddleware, validation_exception_handler

__all__ = ['ErrorHandlingMiddleware', 'validation_exception_handler']
