"""
Hourly irradiance model.

Plane-of-array irradiance for one local hour as a product of four factors:

  G = 1000 × sin(α)                      clear-sky base (W/m²)
      × (1 − cloud/100 × 0.70)            cloud attenuation
      × max(0, cos θ)                     angle of incidence on the panel
      × 0.90 | 1.00                       heat derate, hours 10-16 inclusive

This is a calibrated heuristic, not a transposition model: there is no
diffuse or rear-side contribution and the heat derate is a fixed step.
"""

import datetime as dt
import math

from solaryield.config import (
    CLOUD_ATTENUATION,
    HEAT_DERATE_END_HOUR,
    HEAT_DERATE_FACTOR,
    HEAT_DERATE_START_HOUR,
    STC_IRRADIANCE,
)
from solaryield.engine.sun_position import elevation_azimuth


def clear_sky_irradiance(elevation: float) -> float:
    """Clear-sky irradiance (W/m²) for a sun elevation in degrees."""
    return STC_IRRADIANCE * math.sin(math.radians(elevation))


def cloud_factor(cloud_cover_pct: float) -> float:
    """Attenuation for the given cloud cover; full overcast leaves 30%."""
    return 1.0 - (cloud_cover_pct / 100.0) * CLOUD_ATTENUATION


def orientation_factor(
    sun_elevation: float,
    sun_azimuth: float,
    panel_azimuth: float,
    panel_tilt: float,
) -> float:
    """
    Cosine of the angle of incidence between the sun and the panel normal.

    Clamped to >= 0: a panel facing away from the sun receives nothing.
    Returns 0 when the sun is below the horizon.
    """
    if sun_elevation <= 0:
        return 0.0

    elev_rad = math.radians(sun_elevation)
    tilt_rad = math.radians(panel_tilt)
    cos_incidence = (
        math.sin(elev_rad) * math.cos(tilt_rad)
        + math.cos(elev_rad) * math.sin(tilt_rad)
        * math.cos(math.radians(sun_azimuth) - math.radians(panel_azimuth))
    )
    return max(0.0, cos_incidence)


def temperature_factor(hour: int) -> float:
    """Step derate for module heating during the hottest hours."""
    if HEAT_DERATE_START_HOUR <= hour <= HEAT_DERATE_END_HOUR:
        return HEAT_DERATE_FACTOR
    return 1.0


def hourly_irradiance(
    latitude: float,
    date: dt.date,
    hour: int,
    cloud_cover_pct: float,
    panel_azimuth: float,
    panel_tilt: float,
) -> float:
    """Plane-of-array irradiance (W/m²) for one hour; 0 below the horizon."""
    sun = elevation_azimuth(latitude, date, hour)
    if sun.elevation <= 0:
        return 0.0

    return (
        clear_sky_irradiance(sun.elevation)
        * cloud_factor(cloud_cover_pct)
        * orientation_factor(sun.elevation, sun.azimuth, panel_azimuth, panel_tilt)
        * temperature_factor(hour)
    )
