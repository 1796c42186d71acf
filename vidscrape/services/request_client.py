"""
HTTP client for the external scrape service.

This module issues the single GET request of a submission cycle and turns
the service's answer into either a ScrapeResult or a ScrapeRequestError.
There is no retry and, unless configured, no timeout.
"""

import logging
import time
from typing import Any, Optional

import httpx

from vidscrape.core.config import settings
from vidscrape.core.exceptions import (
    NetworkError,
    ServiceError,
    extract_service_error_message,
)
from vidscrape.models.submission import Platform, ScrapeResult


logger = logging.getLogger(__name__)


class ScrapeServiceClient:
    """
    Async client for the scrape service endpoint.

    The endpoint is taken from settings unless given explicitly. An
    ``httpx.AsyncClient`` may be injected; the client then does not own it
    and ``aclose`` leaves it open.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the scrape service client.

        Args:
            endpoint: Full URL of the scrape endpoint
            timeout: Request timeout in seconds (None waits indefinitely)
            http_client: Pre-built httpx client to send requests with
        """
        self.endpoint = endpoint or settings.scrape_service_url
        self.timeout = timeout if timeout is not None else settings.scrape_service_timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

        logger.info(f"Initialized ScrapeServiceClient with endpoint: {self.endpoint}")

    async def fetch_metadata(self, url: str, platform: Platform) -> ScrapeResult:
        """
        Fetch video metadata from the scrape service.

        Args:
            url: Target video URL
            platform: Platform the URL belongs to

        Returns:
            ScrapeResult holding the service's ``videoData`` payload

        Raises:
            NetworkError: If no response was received
            ServiceError: If the service answered with a failure or an
                unreadable body
        """
        params = {"url": url, "platform": Platform.parse(platform).value}
        start_time = time.time()

        try:
            logger.debug(f"GET {self.endpoint} params={params}")
            response = await self._client.get(self.endpoint, params=params)
        except httpx.TransportError as e:
            logger.warning(f"Scrape service unreachable: {e}")
            raise NetworkError(reason=str(e)) from e

        response_time = (time.time() - start_time) * 1000
        body = self._decode_body(response)

        if not response.is_success:
            message = extract_service_error_message(body)
            logger.warning(
                f"Scrape service returned HTTP {response.status_code} "
                f"in {response_time:.2f}ms: {message}"
            )
            raise ServiceError(message=message, status_code=response.status_code)

        video_data = body.get("videoData") if isinstance(body, dict) else None
        if not isinstance(video_data, dict):
            logger.warning("Scrape service response has no videoData object")
            raise ServiceError(status_code=response.status_code)

        result = ScrapeResult.model_validate(video_data)
        logger.info(f"Fetched metadata for {url} ({params['platform']}) in {response_time:.2f}ms")
        return result

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Decode a JSON body, returning None when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return None

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ScrapeServiceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
