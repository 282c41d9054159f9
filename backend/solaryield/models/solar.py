"""
Pydantic models for sun geometry, PV array configuration and yield results.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict


class GeoCoordinate(BaseModel):
    """A location in WGS84 degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class ArrayConfig(BaseModel):
    """Physical parameters of one PV array. Not validated by the engine."""
    model_config = ConfigDict(frozen=True)

    capacity_kwp: float
    azimuth: float          # degrees, 180 = south
    tilt: float             # degrees from horizontal
    efficiency_pct: float   # module efficiency, percent
    losses_pct: float       # system losses, percent


class SunPositionSample(BaseModel):
    """Sun position for one local solar hour."""
    elevation: float  # degrees, <= 0 means below the horizon
    azimuth: float    # degrees, 0 when below the horizon


class DailyYield(BaseModel):
    """Irradiance and yield statistics for one calendar day."""
    date: dt.date
    avg_cloud_cover: float
    min_irradiance: float   # W/m², daylight hours, array 1 orientation
    avg_irradiance: float
    max_irradiance: float
    daylight_hours: int
    yield_array1: float     # kWh
    yield_array2: float     # kWh
    total_yield: float      # kWh
    peak_sun_elevation: float
    stc_max_hourly_yield: float   # kWh, both arrays at 1000 W/m²
    day_max_hourly_yield: float   # kWh, both arrays at the day's peak clear-sky irradiance


class HourlyDetail(BaseModel):
    """One daylight hour of the hour-by-hour breakdown."""
    hour: int
    sun_elevation: float
    sun_azimuth: float
    cloud_cover: float

    irradiance_array1: float
    irradiance_array2: float
    min_irradiance: float
    max_irradiance: float
    avg_irradiance: float

    yield_per_kwp_array1: float
    yield_per_kwp_array2: float
    yield_array1: float
    yield_array2: float
    total_yield: float

    hour_max_yield: float   # clear sky, ideal orientation at this hour's elevation
    day_max_yield: float    # clear sky, ideal orientation at the day's peak elevation

    # Fractions of the STC maximum, for chart scaling
    current_fraction: float
    hour_max_fraction: float
    day_max_fraction: float


class ArrayEstimate(BaseModel):
    """Current-hour figures for a single array."""
    irradiance: float     # W/m²
    power_kw: float
    yield_so_far: float   # kWh since local midnight, current hour included


class CurrentEstimate(BaseModel):
    """Current-hour estimate for both arrays at the client's local time."""
    local_time: dt.datetime
    date: dt.date
    hour: int
    cloud_cover: float
    sun: SunPositionSample
    array1: ArrayEstimate
    array2: ArrayEstimate
    total_power_kw: float
    total_yield_so_far: float
