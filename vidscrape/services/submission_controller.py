"""
Submission controller for the VidScrape form.

The controller owns the form state and runs each submission cycle:
validate the URL/platform pair, dispatch one request to the scrape service,
then resolve the state to a result or an error. Every transition publishes
a new immutable SubmissionState snapshot to subscribers.
"""

import logging
from typing import Any, Callable, List, Optional, Union

from vidscrape.core.exceptions import (
    FALLBACK_ERROR_MESSAGE,
    ScrapeRequestError,
    SubmissionValidationError,
)
from vidscrape.models.submission import (
    Platform,
    ScrapeResult,
    SubmissionPhase,
    SubmissionRequest,
    SubmissionState,
)
from vidscrape.services.request_client import ScrapeServiceClient
from vidscrape.services.validator import validate_submission


logger = logging.getLogger(__name__)


StateListener = Callable[[SubmissionState], Any]


class SubmissionController:
    """
    State machine behind the submission form.

    Phases run IDLE -> VALIDATING -> LOADING -> SUCCESS | FAILED. Overlapping
    submissions are not blocked; each dispatch takes a sequence number and a
    response is applied only if its number is still the latest one issued.
    """

    def __init__(self, client: ScrapeServiceClient, initial_state: Optional[SubmissionState] = None):
        """
        Initialize the controller.

        Args:
            client: Scrape service client used to dispatch requests
            initial_state: Starting snapshot (defaults to an empty form)
        """
        self.client = client
        self._state = initial_state or SubmissionState()
        self._listeners: List[StateListener] = []
        self._sequence = 0

    @property
    def state(self) -> SubmissionState:
        """Current state snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every new state snapshot.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_url(self, url: str) -> SubmissionState:
        """Update the URL text without submitting."""
        return self._transition(url=url)

    async def select_platform(self, platform: Union[Platform, str]) -> SubmissionState:
        """
        Select a platform and immediately run a submission cycle.

        Raises:
            UnsupportedPlatformError: If the platform name is unknown
        """
        platform = Platform.parse(platform)
        self._transition(platform=platform)
        logger.debug(f"Platform selected: {platform.value or '<unset>'}, submitting")
        return await self.submit()

    async def submit(self) -> SubmissionState:
        """
        Run one full submission cycle with the current URL and platform.

        Errors never escape: they end the cycle in the FAILED phase with
        the message stored in ``state.error``.

        Returns:
            State snapshot after this call's cycle (or after it was superseded)
        """
        self._transition(phase=SubmissionPhase.VALIDATING, result=None, error=None)

        try:
            validate_submission(self._state.url, self._state.platform)
        except SubmissionValidationError as e:
            logger.info(f"Submission rejected: {e.message}")
            # A superseded in-flight request must not keep the spinner on
            self._sequence += 1
            return self._transition(phase=SubmissionPhase.FAILED, loading=False, error=e.message)

        request = SubmissionRequest(url=self._state.url, platform=self._state.platform)
        self._sequence += 1
        token = self._sequence
        self._transition(phase=SubmissionPhase.LOADING, loading=True)
        logger.info(f"Dispatching submission #{token}: {request.url} ({request.platform.value})")

        try:
            result: Optional[ScrapeResult] = None
            error: Optional[str] = None
            try:
                result = await self.client.fetch_metadata(request.url, request.platform)
            except ScrapeRequestError as e:
                logger.warning(f"Submission #{token} failed: {e.message}")
                error = e.message
            except Exception:
                logger.exception(f"Unexpected error during submission #{token}")
                error = FALLBACK_ERROR_MESSAGE

            if token != self._sequence:
                logger.info(f"Discarding stale response for submission #{token} (latest is #{self._sequence})")
                return self._state

            if error is not None:
                self._transition(phase=SubmissionPhase.FAILED, error=error)
            else:
                logger.info(f"Submission #{token} succeeded")
                self._transition(phase=SubmissionPhase.SUCCESS, result=result, error=None)
        finally:
            # Runs on every exit path, cancellation included
            if token == self._sequence:
                if self._state.phase == SubmissionPhase.LOADING:
                    logger.info(f"Submission #{token} cancelled before an outcome was applied")
                    self._transition(phase=SubmissionPhase.IDLE, loading=False)
                else:
                    self._transition(loading=False)

        return self._state

    def _transition(self, **changes: Any) -> SubmissionState:
        """Replace the state snapshot and notify listeners."""
        self._state = self._state.evolve(**changes)
        logger.debug(f"State -> {self._state.phase.value} loading={self._state.loading}")

        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener failed")

        return self._state
