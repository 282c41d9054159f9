"""
API routes for the per-day weather forecast summary.
"""

from fastapi import APIRouter

from solaryield.api.feed_errors import feed_error_to_http
from solaryield.engine.errors import ForecastFeedError
from solaryield.engine.forecast_parser import parse_forecast_feed
from solaryield.engine.report_builder import build_weather_summaries
from solaryield.models.forecast import DailyWeatherSummary
from solaryield.models.report import ForecastDaysInput

router = APIRouter(prefix="/api/v1", tags=["forecast"])


@router.post("/forecast/days", response_model=list[DailyWeatherSummary])
def forecast_days(body: ForecastDaysInput):
    """Temperature range, cloud cover, humidity and description per forecast day."""
    try:
        records = parse_forecast_feed(body.forecast_feed, require_records=True)
    except ForecastFeedError as e:
        raise feed_error_to_http(e)

    return build_weather_summaries(records, body.horizon_days)
