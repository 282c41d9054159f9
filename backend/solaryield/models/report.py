"""
Pydantic models for the solar yield report and current-conditions endpoints.
"""

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field

from solaryield.config import (
    DEFAULT_AZIMUTH_1,
    DEFAULT_AZIMUTH_2,
    DEFAULT_CAPACITY_KWP,
    DEFAULT_EFFICIENCY_PCT,
    DEFAULT_LOSSES_PCT,
    DEFAULT_TILT,
    FORECAST_HORIZON_DAYS,
)
from solaryield.models.forecast import DailyWeatherSummary
from solaryield.models.solar import ArrayConfig, GeoCoordinate, HourlyDetail


class ArrayConfigInput(ArrayConfig):
    """Array settings as submitted by a client; rejects impossible values.

    Tilt and azimuth are not range-checked.
    """
    capacity_kwp: float = Field(DEFAULT_CAPACITY_KWP, gt=0)
    azimuth: float = DEFAULT_AZIMUTH_1
    tilt: float = DEFAULT_TILT
    efficiency_pct: float = Field(DEFAULT_EFFICIENCY_PCT, gt=0)
    losses_pct: float = Field(DEFAULT_LOSSES_PCT, ge=0, le=100)


class WestArrayInput(ArrayConfigInput):
    """Second array; defaults to the west-facing half of the roof."""
    azimuth: float = DEFAULT_AZIMUTH_2


class SolarReportInput(BaseModel):
    """Input for the multi-day yield report."""
    latitude: float
    longitude: float
    array1: ArrayConfigInput = Field(default_factory=ArrayConfigInput)
    array2: WestArrayInput = Field(default_factory=WestArrayInput)
    forecast_feed: Optional[dict[str, Any]] = Field(
        None,
        description="Forecast payload as returned by the weather provider.",
    )
    reference_date: Optional[dt.date] = None  # Defaults to today
    horizon_days: int = Field(FORECAST_HORIZON_DAYS, ge=1, le=16)

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(latitude=self.latitude, longitude=self.longitude)


class CurrentEstimateInput(BaseModel):
    """Input for the current-hour estimate."""
    latitude: float
    longitude: float
    array1: ArrayConfigInput = Field(default_factory=ArrayConfigInput)
    array2: WestArrayInput = Field(default_factory=WestArrayInput)
    client_time: Optional[dt.datetime] = None   # Defaults to server time
    client_offset_minutes: int = 0
    cloud_cover: float = 0.0                    # percent

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(latitude=self.latitude, longitude=self.longitude)


class ForecastDaysInput(BaseModel):
    """Input for the per-day weather summary."""
    forecast_feed: Optional[dict[str, Any]] = None
    horizon_days: int = Field(FORECAST_HORIZON_DAYS, ge=1, le=16)


class DailySummary(DailyWeatherSummary):
    """Weather, irradiance and yield figures for one forecast day."""
    min_irradiance: float
    avg_irradiance: float
    max_irradiance: float
    daylight_hours: int
    yield_array1: float
    yield_array2: float
    total_yield: float
    peak_sun_elevation: float
    stc_max_hourly_yield: float
    day_max_hourly_yield: float
    hours: list[HourlyDetail] = Field(default_factory=list)


class SolarReport(BaseModel):
    """Multi-day yield report for one location and array pair."""
    coordinate: GeoCoordinate
    array1: ArrayConfig
    array2: ArrayConfig
    reference_date: dt.date
    stc_max_hourly_yield: float       # kWh
    peak_sun_elevation: float         # degrees, on the reference date
    peak_clear_sky_irradiance: float  # W/m², at that elevation
    day_max_hourly_yield: float       # kWh
    days: list[DailySummary]
    warnings: list[str] = Field(default_factory=list)
