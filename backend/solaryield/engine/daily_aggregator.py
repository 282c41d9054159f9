"""
Daily aggregation engine.

Runs the hourly irradiance and yield models over the 24 local hours of one
calendar day and condenses them into:
  - per-array and combined daily yield
  - min / avg / max irradiance over daylight hours (array 1 orientation)
  - peak sun elevation and the theoretical maxima derived from it
  - an hour-by-hour breakdown for charting
"""

import datetime as dt

from solaryield.config import HOURS_OF_DAY, STC_IRRADIANCE
from solaryield.engine.array_yield import array_hourly_yield, hourly_yield
from solaryield.engine.irradiance import clear_sky_irradiance, hourly_irradiance
from solaryield.engine.sun_position import elevation_azimuth, sun_elevation
from solaryield.models.solar import (
    ArrayConfig,
    DailyYield,
    GeoCoordinate,
    HourlyDetail,
)


def peak_sun_elevation(latitude: float, date: dt.date) -> float:
    """Highest hourly sun elevation of the day, floored at 0 for polar night."""
    peak = 0.0
    for hour in HOURS_OF_DAY:
        peak = max(peak, sun_elevation(latitude, date, hour))
    return peak


def theoretical_max(irradiance: float, array1: ArrayConfig, array2: ArrayConfig) -> float:
    """Combined hourly yield (kWh) of both arrays at the given irradiance."""
    return array_hourly_yield(irradiance, array1) + array_hourly_yield(irradiance, array2)


def stc_theoretical_max(array1: ArrayConfig, array2: ArrayConfig) -> float:
    """Absolute hourly ceiling (kWh) at 1000 W/m², independent of geometry."""
    return theoretical_max(STC_IRRADIANCE, array1, array2)


def day_theoretical_max(
    peak_elevation: float, array1: ArrayConfig, array2: ArrayConfig
) -> float:
    """Best hourly yield (kWh) of the day: clear sky, ideal orientation, peak sun."""
    return theoretical_max(clear_sky_irradiance(peak_elevation), array1, array2)


def array_hour_yield(
    coordinate: GeoCoordinate,
    date: dt.date,
    hour: int,
    cloud_cover_pct: float,
    array: ArrayConfig,
) -> float:
    """Absolute yield (kWh) of one array for one hour."""
    irradiance = hourly_irradiance(
        coordinate.latitude, date, hour, cloud_cover_pct, array.azimuth, array.tilt
    )
    return array_hourly_yield(irradiance, array)


def daily_array_yield(
    coordinate: GeoCoordinate,
    date: dt.date,
    cloud_cover_pct: float,
    array: ArrayConfig,
) -> float:
    """Sum of the 24 hourly yields (kWh) of one array."""
    total = 0.0
    for hour in HOURS_OF_DAY:
        total += array_hour_yield(coordinate, date, hour, cloud_cover_pct, array)
    return total


def yield_so_far(
    coordinate: GeoCoordinate,
    date: dt.date,
    up_to_hour: int,
    cloud_cover_pct: float,
    array: ArrayConfig,
) -> float:
    """Yield (kWh) of one array from midnight through `up_to_hour` inclusive."""
    total = 0.0
    for hour in HOURS_OF_DAY:
        if hour > up_to_hour:
            break
        total += array_hour_yield(coordinate, date, hour, cloud_cover_pct, array)
    return total


def summarize_day(
    coordinate: GeoCoordinate,
    date: dt.date,
    avg_cloud_cover_pct: float,
    array1: ArrayConfig,
    array2: ArrayConfig,
) -> DailyYield:
    """
    Irradiance and yield statistics for one day.

    Night hours contribute zero yield and are left out of the irradiance
    statistics entirely; a day with no daylight reports zeros.
    """
    yield1 = 0.0
    yield2 = 0.0
    irradiance_sum = 0.0
    min_irradiance = None
    max_irradiance = None
    daylight_hours = 0

    for hour in HOURS_OF_DAY:
        irradiance1 = hourly_irradiance(
            coordinate.latitude, date, hour, avg_cloud_cover_pct, array1.azimuth, array1.tilt
        )
        irradiance2 = hourly_irradiance(
            coordinate.latitude, date, hour, avg_cloud_cover_pct, array2.azimuth, array2.tilt
        )
        yield1 += array_hourly_yield(irradiance1, array1)
        yield2 += array_hourly_yield(irradiance2, array2)

        if sun_elevation(coordinate.latitude, date, hour) > 0:
            daylight_hours += 1
            irradiance_sum += irradiance1
            min_irradiance = irradiance1 if min_irradiance is None else min(min_irradiance, irradiance1)
            max_irradiance = irradiance1 if max_irradiance is None else max(max_irradiance, irradiance1)

    peak = peak_sun_elevation(coordinate.latitude, date)

    return DailyYield(
        date=date,
        avg_cloud_cover=avg_cloud_cover_pct,
        min_irradiance=min_irradiance if min_irradiance is not None else 0.0,
        avg_irradiance=irradiance_sum / daylight_hours if daylight_hours > 0 else 0.0,
        max_irradiance=max_irradiance if max_irradiance is not None else 0.0,
        daylight_hours=daylight_hours,
        yield_array1=yield1,
        yield_array2=yield2,
        total_yield=yield1 + yield2,
        peak_sun_elevation=peak,
        stc_max_hourly_yield=stc_theoretical_max(array1, array2),
        day_max_hourly_yield=day_theoretical_max(peak, array1, array2),
    )


def _fraction(value: float, ceiling: float) -> float:
    return value / ceiling if ceiling > 0 else 0.0


def hourly_breakdown(
    coordinate: GeoCoordinate,
    date: dt.date,
    avg_cloud_cover_pct: float,
    array1: ArrayConfig,
    array2: ArrayConfig,
    peak_elevation: float,
) -> list[HourlyDetail]:
    """
    Hour-by-hour rows for the daylight hours of one day.

    `peak_elevation` sets the day maximum shown on every row; the report
    passes the reference day's peak so all forecast days share one scale.
    """
    stc_max = stc_theoretical_max(array1, array2)
    day_max = day_theoretical_max(peak_elevation, array1, array2)

    rows = []
    for hour in HOURS_OF_DAY:
        sun = elevation_azimuth(coordinate.latitude, date, hour)
        if sun.elevation <= 0:
            continue

        irradiance1 = hourly_irradiance(
            coordinate.latitude, date, hour, avg_cloud_cover_pct, array1.azimuth, array1.tilt
        )
        irradiance2 = hourly_irradiance(
            coordinate.latitude, date, hour, avg_cloud_cover_pct, array2.azimuth, array2.tilt
        )
        per_kwp1 = hourly_yield(irradiance1, array1.efficiency_pct, array1.losses_pct)
        per_kwp2 = hourly_yield(irradiance2, array2.efficiency_pct, array2.losses_pct)
        total = per_kwp1 * array1.capacity_kwp + per_kwp2 * array2.capacity_kwp

        hour_max = theoretical_max(clear_sky_irradiance(max(0.0, sun.elevation)), array1, array2)

        rows.append(HourlyDetail(
            hour=hour,
            sun_elevation=sun.elevation,
            sun_azimuth=sun.azimuth,
            cloud_cover=avg_cloud_cover_pct,
            irradiance_array1=irradiance1,
            irradiance_array2=irradiance2,
            min_irradiance=min(irradiance1, irradiance2),
            max_irradiance=max(irradiance1, irradiance2),
            avg_irradiance=(irradiance1 + irradiance2) / 2.0,
            yield_per_kwp_array1=per_kwp1,
            yield_per_kwp_array2=per_kwp2,
            yield_array1=per_kwp1 * array1.capacity_kwp,
            yield_array2=per_kwp2 * array2.capacity_kwp,
            total_yield=total,
            hour_max_yield=hour_max,
            day_max_yield=day_max,
            current_fraction=_fraction(total, stc_max),
            hour_max_fraction=_fraction(hour_max, stc_max),
            day_max_fraction=_fraction(day_max, stc_max),
        ))
    return rows
