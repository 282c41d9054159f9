"""
Pydantic models for forecast records and per-day weather summaries.
"""

import datetime as dt

from pydantic import BaseModel, Field


class ForecastRecord(BaseModel):
    """A single forecast step as delivered by the weather feed."""
    timestamp: dt.datetime
    cloud_cover: float   # percent
    temperature: float   # °C
    humidity: float      # percent
    description: str = ""


class DailyForecastBucket(BaseModel):
    """All forecast records that fall on one calendar date, in feed order."""
    date: dt.date
    records: list[ForecastRecord] = Field(default_factory=list)


class DailyWeatherSummary(BaseModel):
    """Weather figures condensed from one day's forecast records."""
    date: dt.date
    avg_cloud_cover: float
    avg_humidity: float
    min_temperature: float
    max_temperature: float
    description: str
    record_count: int
    entries: list[ForecastRecord] = Field(default_factory=list)  # feed order
