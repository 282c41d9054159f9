"""
SolarYield configuration and constants.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Deployment settings read from SOLARYIELD_* environment variables."""

    model_config = {"env_prefix": "SOLARYIELD_", "case_sensitive": False}

    app_name: str = "SolarYield"
    log_level: str = "INFO"
    log_json: bool = False

    # CORS: local frontend dev servers
    cors_origins: list[str] = [
        "http://localhost:5173",  # Vite default
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]


settings = Settings()


# Local solar hours evaluated for every calendar day
HOURS_OF_DAY = range(0, 24)

# Standard Test Conditions irradiance (W/m²)
STC_IRRADIANCE = 1000.0

# Declination model: 23.45 × sin(360/365 × (doy − 81))
AXIAL_TILT_DEG = 23.45
DECLINATION_DAY_OFFSET = 81
DEGREES_PER_HOUR = 15.0
SOLAR_NOON_HOUR = 12

# Full overcast leaves 30% of clear-sky irradiance
CLOUD_ATTENUATION = 0.70

# Discrete heat derate applied during the hottest hours (inclusive)
HEAT_DERATE_FACTOR = 0.90
HEAT_DERATE_START_HOUR = 10
HEAT_DERATE_END_HOUR = 16

# Module area needed for one installed kWp
M2_PER_KWP = 5.0

# Instantaneous output estimate: kW = irradiance/1000 × kWp × factor
CURRENT_POWER_FACTOR = 0.96

# Number of forecast days included in a report
FORECAST_HORIZON_DAYS = 5

# Default array settings (east/west split roof)
DEFAULT_CAPACITY_KWP = 4.8
DEFAULT_AZIMUTH_1 = 90.0
DEFAULT_AZIMUTH_2 = 270.0
DEFAULT_TILT = 18.0
DEFAULT_EFFICIENCY_PCT = 20.0
DEFAULT_LOSSES_PCT = 14.0

# Timestamp format of the provider's forecast records
FEED_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
