"""
Forecast feed parser.

Converts an already-fetched 5-day / 3-hour forecast payload into
ForecastRecord values. Expected shape (OpenWeatherMap forecast API):

    {
      "list": [
        {
          "dt_txt": "2024-06-21 12:00:00",
          "main": {"temp": 21.4, "humidity": 58},
          "clouds": {"all": 40},
          "weather": [{"description": "Mäßig bewölkt"}]
        },
        ...
      ]
    }
"""

import datetime as dt
import logging
from typing import Any, Optional

from solaryield.config import FEED_TIMESTAMP_FORMAT
from solaryield.engine.errors import (
    FeedEmptyError,
    FeedUnavailableError,
    MalformedRecordError,
)
from solaryield.models.forecast import ForecastRecord

logger = logging.getLogger(__name__)


def parse_forecast_feed(
    payload: Optional[dict[str, Any]],
    require_records: bool = False,
) -> list[ForecastRecord]:
    """
    Parse a forecast payload into records, in feed order.

    Args:
        payload: Decoded provider JSON, or None when nothing was fetched.
        require_records: Raise FeedEmptyError instead of returning [].

    Raises:
        FeedUnavailableError: payload is None or has no "list".
        FeedEmptyError: the list is empty and require_records is set.
        MalformedRecordError: a record cannot be read.
    """
    if payload is None:
        raise FeedUnavailableError("No forecast data was received.")

    items = payload.get("list")
    if items is None:
        raise FeedUnavailableError("Forecast payload contains no record list.")
    if not isinstance(items, list):
        raise FeedUnavailableError("Forecast record list has an unexpected type.")

    if not items:
        if require_records:
            raise FeedEmptyError("Forecast feed contains no records.")
        logger.info("Forecast feed is empty")
        return []

    records = [_parse_item(idx, item) for idx, item in enumerate(items)]
    logger.debug("Parsed %d forecast records", len(records))
    return records


def _parse_item(idx: int, item: Any) -> ForecastRecord:
    if not isinstance(item, dict):
        raise MalformedRecordError(idx, "record", "not an object")

    timestamp = _parse_timestamp(idx, item.get("dt_txt"))
    main = item.get("main")
    if not isinstance(main, dict):
        raise MalformedRecordError(idx, "main")
    clouds = item.get("clouds")
    if not isinstance(clouds, dict):
        raise MalformedRecordError(idx, "clouds")

    return ForecastRecord(
        timestamp=timestamp,
        cloud_cover=_number(idx, "clouds.all", clouds.get("all")),
        temperature=_number(idx, "main.temp", main.get("temp")),
        humidity=_number(idx, "main.humidity", main.get("humidity")),
        description=_description(idx, item.get("weather")),
    )


def _parse_timestamp(idx: int, value: Any) -> dt.datetime:
    if not isinstance(value, str):
        raise MalformedRecordError(idx, "dt_txt")
    try:
        return dt.datetime.strptime(value, FEED_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise MalformedRecordError(idx, "dt_txt", str(e)) from e


def _number(idx: int, field: str, value: Any) -> float:
    # bool is an int subclass; a flag is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRecordError(idx, field)
    return float(value)


def _description(idx: int, weather: Any) -> str:
    """First weather entry's description; empty when the feed omits it."""
    if weather is None or weather == []:
        return ""
    if not isinstance(weather, list) or not isinstance(weather[0], dict):
        raise MalformedRecordError(idx, "weather")
    description = weather[0].get("description", "")
    if not isinstance(description, str):
        raise MalformedRecordError(idx, "weather.description")
    return description
