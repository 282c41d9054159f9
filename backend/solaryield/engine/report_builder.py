"""
Report builder.

Assembles the multi-day yield report, the per-day weather summaries and the
current-hour estimate from the forecast grouper and the daily aggregator.
"""

import datetime as dt
import logging

from solaryield.config import FORECAST_HORIZON_DAYS
from solaryield.engine.array_yield import current_power
from solaryield.engine.daily_aggregator import (
    day_theoretical_max,
    hourly_breakdown,
    peak_sun_elevation,
    stc_theoretical_max,
    summarize_day,
    yield_so_far,
)
from solaryield.engine.forecast_grouper import (
    forecast_horizon,
    group_by_day,
    summarize_bucket,
)
from solaryield.engine.irradiance import clear_sky_irradiance, hourly_irradiance
from solaryield.engine.sun_position import elevation_azimuth
from solaryield.models.forecast import DailyWeatherSummary, ForecastRecord
from solaryield.models.report import DailySummary, SolarReport
from solaryield.models.solar import (
    ArrayConfig,
    ArrayEstimate,
    CurrentEstimate,
    GeoCoordinate,
)

logger = logging.getLogger(__name__)


def build_weather_summaries(
    records: list[ForecastRecord],
    horizon_days: int = FORECAST_HORIZON_DAYS,
) -> list[DailyWeatherSummary]:
    """Weather summaries for the first `horizon_days` calendar days of the feed."""
    buckets = forecast_horizon(group_by_day(records), horizon_days)
    return [summarize_bucket(bucket) for bucket in buckets]


def build_solar_report(
    coordinate: GeoCoordinate,
    array1: ArrayConfig,
    array2: ArrayConfig,
    records: list[ForecastRecord],
    reference_date: dt.date,
    horizon_days: int = FORECAST_HORIZON_DAYS,
) -> SolarReport:
    """
    Multi-day yield report.

    The theoretical maxima at the top of the report belong to
    `reference_date` (normally today); every forecast day is then
    aggregated with its own mean cloud cover. A feed with fewer days
    than requested yields a shorter report, never an error.
    """
    stc_max = stc_theoretical_max(array1, array2)
    peak = peak_sun_elevation(coordinate.latitude, reference_date)

    warnings = []
    summaries = build_weather_summaries(records, horizon_days)
    if not summaries:
        warnings.append("Forecast feed contains no records; no daily yields computed.")
    elif len(summaries) < horizon_days:
        warnings.append(
            f"Forecast covers {len(summaries)} of {horizon_days} requested days."
        )

    days = []
    for weather in summaries:
        day = summarize_day(coordinate, weather.date, weather.avg_cloud_cover, array1, array2)
        hours = hourly_breakdown(
            coordinate, weather.date, weather.avg_cloud_cover, array1, array2, peak
        )
        days.append(DailySummary(
            **weather.model_dump(),
            min_irradiance=day.min_irradiance,
            avg_irradiance=day.avg_irradiance,
            max_irradiance=day.max_irradiance,
            daylight_hours=day.daylight_hours,
            yield_array1=day.yield_array1,
            yield_array2=day.yield_array2,
            total_yield=day.total_yield,
            peak_sun_elevation=day.peak_sun_elevation,
            stc_max_hourly_yield=day.stc_max_hourly_yield,
            day_max_hourly_yield=day.day_max_hourly_yield,
            hours=hours,
        ))

    total_yield = sum(d.total_yield for d in days)
    logger.info(
        "Solar report for (%.4f, %.4f): %d day(s), %.2f kWh total",
        coordinate.latitude,
        coordinate.longitude,
        len(days),
        total_yield,
        extra={
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "forecast_days": len(days),
            "total_yield_kwh": round(total_yield, 3),
        },
    )

    return SolarReport(
        coordinate=coordinate,
        array1=array1,
        array2=array2,
        reference_date=reference_date,
        stc_max_hourly_yield=stc_max,
        peak_sun_elevation=peak,
        peak_clear_sky_irradiance=clear_sky_irradiance(peak),
        day_max_hourly_yield=day_theoretical_max(peak, array1, array2),
        days=days,
        warnings=warnings,
    )


def client_local_time(client_time: dt.datetime, client_offset_minutes: int) -> dt.datetime:
    """Shift the client's clock reading by its offset and drop any timezone."""
    return client_time.replace(tzinfo=None) + dt.timedelta(minutes=client_offset_minutes)


def _array_estimate(
    coordinate: GeoCoordinate,
    date: dt.date,
    hour: int,
    cloud_cover_pct: float,
    array: ArrayConfig,
) -> ArrayEstimate:
    irradiance = hourly_irradiance(
        coordinate.latitude, date, hour, cloud_cover_pct, array.azimuth, array.tilt
    )
    return ArrayEstimate(
        irradiance=irradiance,
        power_kw=current_power(irradiance, array.capacity_kwp),
        yield_so_far=yield_so_far(coordinate, date, hour, cloud_cover_pct, array),
    )


def build_current_estimate(
    coordinate: GeoCoordinate,
    array1: ArrayConfig,
    array2: ArrayConfig,
    client_time: dt.datetime,
    client_offset_minutes: int,
    cloud_cover_pct: float,
) -> CurrentEstimate:
    """Irradiance, power and yield so far at the client's local hour."""
    local_time = client_local_time(client_time, client_offset_minutes)
    date = local_time.date()
    hour = local_time.hour

    estimate1 = _array_estimate(coordinate, date, hour, cloud_cover_pct, array1)
    estimate2 = _array_estimate(coordinate, date, hour, cloud_cover_pct, array2)

    return CurrentEstimate(
        local_time=local_time,
        date=date,
        hour=hour,
        cloud_cover=cloud_cover_pct,
        sun=elevation_azimuth(coordinate.latitude, date, hour),
        array1=estimate1,
        array2=estimate2,
        total_power_kw=estimate1.power_kw + estimate2.power_kw,
        total_yield_so_far=estimate1.yield_so_far + estimate2.yield_so_far,
    )
