"""
Errors raised while turning a provider payload into forecast records.

The numeric core never raises; these only come out of feed parsing so
the API layer can tell "no feed", "no data" and "bad data" apart.
"""

from typing import Optional


class ForecastFeedError(ValueError):
    """Base class for forecast feed problems."""


class FeedUnavailableError(ForecastFeedError):
    """The feed payload is missing or has no record list."""


class FeedEmptyError(ForecastFeedError):
    """The feed was delivered but holds no records."""


class MalformedRecordError(ForecastFeedError):
    """A record lacks a required field or carries an unusable value."""

    def __init__(self, index: int, field: str, reason: Optional[str] = None):
        self.index = index
        self.field = field
        message = f"Forecast record {index}: invalid or missing '{field}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
