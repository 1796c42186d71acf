"""
Submission-related data models for VidScrape.

This module contains the platform enum, the immutable submission request,
the open-ended scrape result returned by the scrape service, and the
controller state snapshot published to the presentation layer.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vidscrape.core.exceptions import UnsupportedPlatformError


class Platform(str, Enum):
    """Target video platform chosen by the user."""

    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    UNSET = ""

    @property
    def label(self) -> str:
        """Human-readable platform name."""
        return {
            Platform.YOUTUBE: "YouTube",
            Platform.TIKTOK: "TikTok",
        }.get(self, "")

    @classmethod
    def parse(cls, value: Union["Platform", str, None]) -> "Platform":
        """
        Parse user input into a Platform.

        Empty input maps to UNSET; names are matched case-insensitively.

        Raises:
            UnsupportedPlatformError: If the name is not a known platform
        """
        if isinstance(value, Platform):
            return value
        if value is None:
            return cls.UNSET
        name = value.strip().lower()
        if not name:
            return cls.UNSET
        for platform in cls:
            if platform.value == name:
                return platform
        raise UnsupportedPlatformError(platform=value)

    @classmethod
    def choices(cls) -> List[str]:
        """Selectable platform names."""
        return [platform.value for platform in cls if platform is not cls.UNSET]


class SubmissionPhase(str, Enum):
    """Where the controller is in the current submission cycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class SubmissionRequest(BaseModel):
    """One URL/platform pair handed to the scrape service."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Target video URL")
    platform: Platform = Field(..., description="Selected platform")


# Field name -> display label, in display order
DISPLAY_LABELS: Tuple[Tuple[str, str], ...] = (
    ("title", "Title"),
    ("views", "Views"),
    ("likes", "Likes"),
    ("comments", "Comments"),
    ("shares", "Shares"),
    ("date", "Date"),
    ("bookmark", "Bookmarks"),
    ("channel_name", "Channel Name"),
    ("subscribers", "Subscribers"),
    ("follower", "Followers"),
    ("duration", "Duration"),
    ("description", "Description"),
)


class ScrapeResult(BaseModel):
    """
    Metadata returned by the scrape service.

    Every field is optional; a missing field means it does not apply to the
    platform. Values are stored as sent, whatever their type, and keys the
    model does not know about are kept as extras so the payload round-trips
    unmodified through ``as_dict``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    title: Optional[Any] = Field(None, description="Video title")
    views: Optional[Any] = Field(None, description="View count")
    likes: Optional[Any] = Field(None, description="Like count")
    comments: Optional[Any] = Field(None, description="Comment count")
    shares: Optional[Any] = Field(None, description="Share count (TikTok)")
    date: Optional[Any] = Field(None, description="Publish date")
    bookmark: Optional[Any] = Field(None, description="Bookmark count (TikTok)")
    channel_name: Optional[Any] = Field(None, alias="channelName", description="Channel or author name")
    subscribers: Optional[Any] = Field(None, description="Channel subscriber count (YouTube)")
    description: Optional[Any] = Field(None, description="Video description")
    follower: Optional[Any] = Field(None, description="Author follower count (TikTok)")
    duration: Optional[Any] = Field(None, description="Video duration")
    video_url: Optional[Any] = Field(None, alias="videoUrl", description="Link to watch the video")
    thumbnail: Optional[Any] = Field(None, description="Thumbnail URL")
    image: Optional[Any] = Field(None, description="Alternate thumbnail URL")

    @property
    def thumbnail_url(self) -> Optional[str]:
        """Thumbnail URL, falling back to ``image``. Non-string values are ignored."""
        for candidate in (self.thumbnail, self.image):
            if isinstance(candidate, str) and candidate:
                return candidate
        return None

    def as_dict(self) -> Dict[str, Any]:
        """Return the payload exactly as the service sent it."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def display_fields(self) -> List[Tuple[str, Any]]:
        """Ordered (label, value) pairs for the truthy fields."""
        return [
            (label, getattr(self, name))
            for name, label in DISPLAY_LABELS
            if getattr(self, name)
        ]


class SubmissionState(BaseModel):
    """
    Snapshot of the controller state visible to the presentation layer.

    Snapshots are immutable; every transition produces a new one.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field("", description="Current URL text")
    platform: Platform = Field(Platform.UNSET, description="Selected platform")
    phase: SubmissionPhase = Field(SubmissionPhase.IDLE, description="Submission cycle phase")
    loading: bool = Field(False, description="True while a request is in flight")
    result: Optional[ScrapeResult] = Field(None, description="Metadata from the last successful cycle")
    error: Optional[str] = Field(None, description="Message from the last failed cycle")

    @model_validator(mode="after")
    def check_result_error_exclusive(self):
        """A snapshot never carries both a result and an error."""
        if self.result is not None and self.error is not None:
            raise ValueError("result and error cannot both be set")
        return self

    def evolve(self, **changes: Any) -> "SubmissionState":
        """Return a validated copy with ``changes`` applied."""
        return SubmissionState.model_validate({**dict(self), **changes})

    def to_dict(self) -> Dict[str, Any]:
        """Convert the snapshot to a JSON-friendly dictionary."""
        return {
            "url": self.url,
            "platform": self.platform.value,
            "phase": self.phase.value,
            "loading": self.loading,
            "result": self.result.as_dict() if self.result is not None else None,
            "error": self.error,
        }
