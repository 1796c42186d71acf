"""
Services package for VidScrape.

This package contains the submission cycle: URL/platform validation, the
scrape service client, and the controller that ties them together.
"""

from .validator import (
    SubmissionValidator,
    validate_submission,
    is_valid_submission,
)

from .request_client import ScrapeServiceClient

from .submission_controller import SubmissionController

__all__ = [
    # Validation
    'SubmissionValidator',
    'validate_submission',
    'is_valid_submission',
    # Scrape service
    'ScrapeServiceClient',
    # Submission cycle
    'SubmissionController',
]
