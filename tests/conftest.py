"""
Pytest configuration and fixtures for VidScrape test suite.

This module provides shared fixtures for the scrape service client and the
submission controller. The scrape service is simulated with
``httpx.MockTransport`` so no network is touched.
"""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from vidscrape.models.submission import SubmissionState
from vidscrape.services.request_client import ScrapeServiceClient
from vidscrape.services.submission_controller import SubmissionController


SERVICE_URL = "http://scrape.test/scrape"


class FakeScrapeService:
    """
    Scriptable stand-in for the scrape service.

    Holds the response to send and records every request received.
    """

    def __init__(self):
        self.status_code = 200
        self.body: Any = {"videoData": {"title": "Test Video", "views": "100"}}
        self.raw_content: bytes = b""
        self.error: Exception = None
        self.requests: List[httpx.Request] = []

    def respond(self, status_code: int = 200, body: Any = None, raw_content: bytes = b""):
        self.status_code = status_code
        self.body = body
        self.raw_content = raw_content
        self.error = None

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_content:
            return httpx.Response(self.status_code, content=self.raw_content)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def scrape_service() -> FakeScrapeService:
    """Fake scrape service answering with a small YouTube payload."""
    return FakeScrapeService()


@pytest.fixture
def scrape_client(scrape_service) -> ScrapeServiceClient:
    """ScrapeServiceClient wired to the fake service."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(scrape_service.handler))
    return ScrapeServiceClient(endpoint=SERVICE_URL, http_client=http_client)


@pytest.fixture
def controller(scrape_client) -> SubmissionController:
    """Submission controller using the fake service."""
    return SubmissionController(client=scrape_client)


@pytest.fixture
def recorded_states(controller) -> List[SubmissionState]:
    """Every state snapshot the controller publishes."""
    states: List[SubmissionState] = []
    controller.subscribe(states.append)
    return states


@pytest.fixture
def youtube_payload() -> Dict[str, Any]:
    """Typical YouTube videoData payload."""
    return {
        "title": "Never Gonna Give You Up",
        "views": "1,500,000,000",
        "likes": "16M",
        "comments": "2.3M",
        "channelName": "Rick Astley",
        "subscribers": "4M",
        "description": "The official video",
        "videoUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "thumbnail": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
    }


@pytest.fixture
def tiktok_payload() -> Dict[str, Any]:
    """Typical TikTok videoData payload."""
    return {
        "title": "dance challenge",
        "views": 120000,
        "likes": 5400,
        "comments": 230,
        "shares": 88,
        "bookmark": 41,
        "follower": "12.5K",
        "date": "2024-03-02",
        "videoUrl": "https://www.tiktok.com/@user/video/7340000000000000000",
        "image": "https://p16-sign.tiktokcdn.com/cover.jpeg",
    }
