"""
Data models package for VidScrape.

This package contains Pydantic models for form submissions and scrape results.
"""

from .submission import (
    Platform,
    SubmissionPhase,
    SubmissionRequest,
    ScrapeResult,
    SubmissionState,
)

__all__ = [
    'Platform',
    'SubmissionPhase',
    'SubmissionRequest',
    'ScrapeResult',
    'SubmissionState',
]
