"""
URL/platform validation for the submission form.

Matching is a plain case-sensitive substring check against each platform's
domain fragment, not a structured URL parse: any text containing
``youtube.com`` passes for YouTube, any text containing ``tiktok.com``
passes for TikTok.
"""

from typing import Dict, Optional, Union

from vidscrape.core.exceptions import (
    MissingInputError,
    PlatformMismatchError,
    SubmissionValidationError,
)
from vidscrape.models.submission import Platform


class SubmissionValidator:
    """Validator for URL/platform pairs entered in the form."""

    PLATFORM_PATTERNS: Dict[Platform, str] = {
        Platform.YOUTUBE: "youtube.com",
        Platform.TIKTOK: "tiktok.com",
    }

    ALTERNATIVES: Dict[Platform, Platform] = {
        Platform.YOUTUBE: Platform.TIKTOK,
        Platform.TIKTOK: Platform.YOUTUBE,
    }

    @classmethod
    def validate(cls, url: Optional[str], platform: Union[Platform, str, None]) -> None:
        """
        Validate a URL against the selected platform.

        Args:
            url: URL text as typed by the user
            platform: Selected platform (UNSET or None when nothing is selected)

        Raises:
            MissingInputError: If the URL is empty or no platform is selected
            PlatformMismatchError: If the URL lacks the platform's domain fragment
        """
        platform = Platform.parse(platform)
        if not url or platform is Platform.UNSET:
            raise MissingInputError()

        pattern = cls.PLATFORM_PATTERNS[platform]
        if pattern not in url:
            raise PlatformMismatchError(
                platform=platform.value,
                expected_label=platform.label,
                alternative_label=cls.ALTERNATIVES[platform].label,
            )

    @classmethod
    def is_valid(cls, url: Optional[str], platform: Union[Platform, str, None]) -> bool:
        """Check a URL/platform pair without raising."""
        try:
            cls.validate(url, platform)
        except SubmissionValidationError:
            return False
        return True


def validate_submission(url: Optional[str], platform: Union[Platform, str, None]) -> None:
    """Convenience function to validate a URL/platform pair."""
    SubmissionValidator.validate(url, platform)


def is_valid_submission(url: Optional[str], platform: Union[Platform, str, None]) -> bool:
    """Convenience function returning whether a URL/platform pair is valid."""
    return SubmissionValidator.is_valid(url, platform)
