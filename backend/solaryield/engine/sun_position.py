"""
Sun position engine.

Closed-form solar geometry for an integer local solar hour:

  Declination:  δ = 23.45 × sin(360/365 × (doy − 81))
  Hour angle:   ω = (hour − 12) × 15
  Elevation:    α = asin(sin φ·sin δ + cos φ·cos δ·cos ω)
  Azimuth:      A = acos((sin δ − sin φ·sin α) / (cos φ·cos α)),
                mirrored to 360 − A after solar noon

All angles are degrees at the interface and radians internally.
"""

import datetime as dt
import math

from solaryield.config import (
    AXIAL_TILT_DEG,
    DECLINATION_DAY_OFFSET,
    DEGREES_PER_HOUR,
    SOLAR_NOON_HOUR,
)
from solaryield.models.solar import SunPositionSample


def day_of_year(date: dt.date) -> int:
    """Gregorian day of year, 1-366."""
    return date.timetuple().tm_yday


def solar_declination(date: dt.date) -> float:
    """Solar declination in degrees for the given date."""
    doy = day_of_year(date)
    return AXIAL_TILT_DEG * math.sin(
        math.radians((360.0 / 365.0) * (doy - DECLINATION_DAY_OFFSET))
    )


def hour_angle(hour: int) -> float:
    """Hour angle in degrees; negative before solar noon."""
    return (hour - SOLAR_NOON_HOUR) * DEGREES_PER_HOUR


def _sin_elevation(lat_rad: float, dec_rad: float, hour: int) -> float:
    """sin(elevation), clamped to [-1, 1]; rounding overshoots it with the sun at the zenith."""
    value = (
        math.sin(lat_rad) * math.sin(dec_rad)
        + math.cos(lat_rad) * math.cos(dec_rad) * math.cos(math.radians(hour_angle(hour)))
    )
    return max(-1.0, min(1.0, value))


def sun_elevation(latitude: float, date: dt.date, hour: int) -> float:
    """Solar elevation in degrees. Values <= 0 mean the sun is below the horizon."""
    lat_rad = math.radians(latitude)
    dec_rad = math.radians(solar_declination(date))
    return math.degrees(math.asin(_sin_elevation(lat_rad, dec_rad, hour)))


def sun_azimuth(latitude: float, date: dt.date, hour: int) -> float:
    """
    Solar azimuth in degrees (180 = south).

    Returns 0 while the sun is below the horizon. The cosine is clamped
    to [-1, 1] so near-horizon and polar geometry never leave acos' domain.
    """
    lat_rad = math.radians(latitude)
    dec_rad = math.radians(solar_declination(date))
    sin_elev = _sin_elevation(lat_rad, dec_rad, hour)
    elev_rad = math.asin(sin_elev)

    if math.degrees(elev_rad) <= 0:
        return 0.0

    denominator = math.cos(lat_rad) * math.cos(elev_rad)
    if denominator == 0.0:
        # Sun at the zenith or observer at a pole: bearing is undefined
        cos_azimuth = -1.0
    else:
        cos_azimuth = (math.sin(dec_rad) - math.sin(lat_rad) * sin_elev) / denominator
    cos_azimuth = max(-1.0, min(1.0, cos_azimuth))

    azimuth = math.degrees(math.acos(cos_azimuth))
    if hour > SOLAR_NOON_HOUR:
        azimuth = 360.0 - azimuth
    return azimuth


def elevation_azimuth(latitude: float, date: dt.date, hour: int) -> SunPositionSample:
    """Sun elevation and azimuth for one local solar hour."""
    return SunPositionSample(
        elevation=sun_elevation(latitude, date, hour),
        azimuth=sun_azimuth(latitude, date, hour),
    )
