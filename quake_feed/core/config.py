"""Feed configuration.

The program reads no environment variables: the defaults are the
configuration.  ``FeedConfig`` carries the endpoint and header wording
through the pipeline as explicit values.

Fail-fast validation:
    ``validate()`` raises ``ConfigValidationError`` if a value is
    unusable, before any network traffic happens.
"""

from __future__ import annotations

from dataclasses import dataclass

from quake_feed.core.constants import DEFAULT_FEED_PERIOD, SIGNIFICANT_MONTH_URL
from quake_feed.core.exceptions import PermanentError


class ConfigValidationError(PermanentError):
    """Raised when configuration values are invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class FeedConfig:
    """Immutable feed configuration.

    Attributes:
        feed_url: GeoJSON summary feed to fetch.
        feed_period: Time window the feed covers, used in the report header.
    """

    feed_url: str = SIGNIFICANT_MONTH_URL
    feed_period: str = DEFAULT_FEED_PERIOD

    def validate(self) -> FeedConfig:
        """Validate and return ``self``.  Raises ``ConfigValidationError``."""
        if not self.feed_url.startswith(("http://", "https://")):
            raise ConfigValidationError(
                "feed_url",
                self.feed_url,
                "must be an http:// or https:// URL",
            )

        if not self.feed_period.strip():
            raise ConfigValidationError(
                "feed_period",
                self.feed_period,
                "must not be empty",
            )

        return self
