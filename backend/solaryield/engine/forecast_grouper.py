"""
Forecast grouper.

Buckets a flat, irregularly spaced forecast series into calendar days and
condenses each day into temperature range, mean cloud cover and humidity,
and the dominant weather description.
"""

from collections import Counter

import numpy as np

from solaryield.config import FORECAST_HORIZON_DAYS
from solaryield.models.forecast import (
    DailyForecastBucket,
    DailyWeatherSummary,
    ForecastRecord,
)


def group_by_day(records: list[ForecastRecord]) -> list[DailyForecastBucket]:
    """
    Group records by the local date of their timestamp, earliest day first.

    Records keep their feed order inside a bucket. An empty feed gives no buckets.
    """
    by_date: dict = {}
    for record in records:
        by_date.setdefault(record.timestamp.date(), []).append(record)

    return [
        DailyForecastBucket(date=date, records=by_date[date])
        for date in sorted(by_date)
    ]


def forecast_horizon(
    buckets: list[DailyForecastBucket],
    days: int = FORECAST_HORIZON_DAYS,
) -> list[DailyForecastBucket]:
    """The first `days` buckets; fewer when the feed is short."""
    return buckets[:days]


def dominant_description(records: list[ForecastRecord]) -> str:
    """Most frequent description; ties go to the one seen first."""
    counts = Counter(record.description for record in records)
    if not counts:
        return ""
    # most_common keeps first-insertion order among equal counts
    return counts.most_common(1)[0][0]


def summarize_bucket(bucket: DailyForecastBucket) -> DailyWeatherSummary:
    """Condense one day's records into a weather summary."""
    records = bucket.records
    if not records:
        return DailyWeatherSummary(
            date=bucket.date,
            avg_cloud_cover=0.0,
            avg_humidity=0.0,
            min_temperature=0.0,
            max_temperature=0.0,
            description="",
            record_count=0,
        )

    clouds = np.array([r.cloud_cover for r in records], dtype=np.float64)
    humidity = np.array([r.humidity for r in records], dtype=np.float64)
    temps = np.array([r.temperature for r in records], dtype=np.float64)

    return DailyWeatherSummary(
        date=bucket.date,
        avg_cloud_cover=float(clouds.mean()),
        avg_humidity=float(humidity.mean()),
        min_temperature=float(temps.min()),
        max_temperature=float(temps.max()),
        description=dominant_description(records),
        record_count=len(records),
        entries=list(records),
    )
