"""
API routes for solar yield reports and current-hour estimates.
"""

import datetime as dt

from fastapi import APIRouter

from solaryield.api.feed_errors import feed_error_to_http
from solaryield.engine.errors import ForecastFeedError
from solaryield.engine.forecast_parser import parse_forecast_feed
from solaryield.engine.report_builder import build_current_estimate, build_solar_report
from solaryield.models.report import CurrentEstimateInput, SolarReport, SolarReportInput
from solaryield.models.solar import CurrentEstimate

router = APIRouter(prefix="/api/v1", tags=["solar"])


@router.post("/solar/report", response_model=SolarReport)
def solar_report(body: SolarReportInput):
    """Daily yield report for the forecast days of the supplied feed."""
    try:
        records = parse_forecast_feed(body.forecast_feed)
    except ForecastFeedError as e:
        raise feed_error_to_http(e)

    return build_solar_report(
        coordinate=body.coordinate,
        array1=body.array1,
        array2=body.array2,
        records=records,
        reference_date=body.reference_date or dt.date.today(),
        horizon_days=body.horizon_days,
    )


@router.post("/solar/current", response_model=CurrentEstimate)
def current_estimate(body: CurrentEstimateInput):
    """Irradiance, power and yield so far at the client's local hour."""
    return build_current_estimate(
        coordinate=body.coordinate,
        array1=body.array1,
        array2=body.array2,
        client_time=body.client_time or dt.datetime.now(),
        client_offset_minutes=body.client_offset_minutes,
        cloud_cover_pct=body.cloud_cover,
    )
