"""
Form API endpoints for VidScrape.

This module exposes the submission controller to a browser presentation
layer: the page pushes URL edits, platform clicks and submit clicks here and
renders the returned state. Submission failures are part of the state and
come back with HTTP 200; only malformed requests produce HTTP errors.
"""

import time
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vidscrape.models.submission import SubmissionState
from vidscrape.services.request_client import ScrapeServiceClient
from vidscrape.services.submission_controller import SubmissionController


# Configure logging
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(prefix="/api/v1/form", tags=["form"])

_controller: Optional[SubmissionController] = None


class UrlUpdateRequest(BaseModel):
    """Request model for URL text updates."""

    url: str = Field(..., description="URL text as currently typed", max_length=2048)


class PlatformSelectRequest(BaseModel):
    """Request model for platform selection."""

    platform: str = Field(..., description="Platform name: youtube or tiktok", max_length=32)


def get_submission_controller() -> SubmissionController:
    """Dependency returning the shared submission controller."""
    global _controller
    if _controller is None:
        _controller = SubmissionController(client=ScrapeServiceClient())
        logger.info("Submission controller created")
    return _controller


async def close_submission_controller() -> None:
    """Close the shared controller's HTTP client and drop the controller."""
    global _controller
    if _controller is not None:
        await _controller.client.aclose()
        _controller = None
        logger.info("Submission controller closed")


def build_state_response(state: SubmissionState, start_time: float) -> Dict[str, Any]:
    """Serialize a state snapshot for the presentation layer."""
    fields = state.result.display_fields() if state.result is not None else []
    return {
        "success": state.error is None,
        "state": state.to_dict(),
        "fields": [{"label": label, "value": value} for label, value in fields],
        "response_time_ms": round((time.time() - start_time) * 1000, 2),
    }


@router.get("", summary="Get current form state")
async def get_form_state(
    controller: SubmissionController = Depends(get_submission_controller)
) -> JSONResponse:
    """Return the current state snapshot."""
    start_time = time.time()
    return JSONResponse(content=build_state_response(controller.state, start_time))


@router.put("/url", summary="Update the URL text")
async def update_url(
    request: UrlUpdateRequest,
    controller: SubmissionController = Depends(get_submission_controller)
) -> JSONResponse:
    """Store the URL text. Does not submit."""
    start_time = time.time()
    state = controller.set_url(request.url)
    return JSONResponse(content=build_state_response(state, start_time))


@router.post("/platform", summary="Select a platform and submit")
async def select_platform(
    request: PlatformSelectRequest,
    controller: SubmissionController = Depends(get_submission_controller)
) -> JSONResponse:
    """
    Select a platform, which immediately runs a submission cycle with the
    current URL text.
    """
    start_time = time.time()
    logger.info(f"Platform selection: {request.platform}")
    state = await controller.select_platform(request.platform)
    return JSONResponse(content=build_state_response(state, start_time))


@router.post("/submit", summary="Submit the form")
async def submit_form(
    controller: SubmissionController = Depends(get_submission_controller)
) -> JSONResponse:
    """Run a submission cycle with the current URL and platform."""
    start_time = time.time()
    state = await controller.submit()
    return JSONResponse(content=build_state_response(state, start_time))
