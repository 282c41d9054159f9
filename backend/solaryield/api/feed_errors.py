"""
Mapping of forecast feed errors onto HTTP responses, shared by the routers.
"""

import logging

from fastapi import HTTPException

from solaryield.engine.errors import (
    FeedEmptyError,
    FeedUnavailableError,
    ForecastFeedError,
    MalformedRecordError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (FeedUnavailableError, 502),
    (FeedEmptyError, 404),
    (MalformedRecordError, 422),
)


def feed_error_to_http(e: ForecastFeedError) -> HTTPException:
    """Map a forecast feed error onto an HTTP status; unknown kinds become 500."""
    status = next((code for kind, code in _STATUS_BY_ERROR if isinstance(e, kind)), 500)
    logger.warning(
        "Forecast feed rejected: %s",
        e,
        extra={"feed_error": type(e).__name__, "status_code": status},
    )
    return HTTPException(status_code=status, detail=str(e))
