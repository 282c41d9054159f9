"""
Tests for the hourly irradiance model.
"""

import datetime as dt
import math

import pytest

from solaryield.config import HOURS_OF_DAY
from solaryield.engine.irradiance import (
    clear_sky_irradiance,
    cloud_factor,
    hourly_irradiance,
    orientation_factor,
    temperature_factor,
)
from solaryield.engine.sun_position import elevation_azimuth, sun_elevation

BERLIN_LAT = 52.52
SOLSTICE = dt.date(2024, 6, 21)


class TestClearSky:
    def test_zenith_sun_gives_stc(self):
        assert clear_sky_irradiance(90.0) == pytest.approx(1000.0)

    def test_thirty_degrees_gives_half(self):
        assert clear_sky_irradiance(30.0) == pytest.approx(500.0)

    def test_berlin_solstice_noon(self):
        """1000·sin(60.93°) ≈ 874 W/m²."""
        elev = sun_elevation(BERLIN_LAT, SOLSTICE, 12)
        assert clear_sky_irradiance(elev) == pytest.approx(874.0, abs=1.0)


class TestCloudFactor:
    def test_clear_sky(self):
        assert cloud_factor(0.0) == 1.0

    def test_full_overcast_keeps_thirty_percent(self):
        assert cloud_factor(100.0) == pytest.approx(0.30)

    def test_half_cover(self):
        assert cloud_factor(50.0) == pytest.approx(0.65)

    def test_monotonic(self):
        values = [cloud_factor(c) for c in range(0, 101, 10)]
        assert values == sorted(values, reverse=True)


class TestOrientationFactor:
    def test_berlin_noon_south_35_tilt_near_ideal(self):
        sun = elevation_azimuth(BERLIN_LAT, SOLSTICE, 12)
        factor = orientation_factor(sun.elevation, sun.azimuth, 180.0, 35.0)
        assert 0.98 <= factor <= 1.0

    def test_flat_panel_equals_sin_elevation(self):
        factor = orientation_factor(40.0, 135.0, 180.0, 0.0)
        assert factor == pytest.approx(math.sin(math.radians(40.0)))

    def test_panel_facing_sun_directly(self):
        # Tilt = 90 − elevation with matching azimuth → normal incidence
        assert orientation_factor(30.0, 200.0, 200.0, 60.0) == pytest.approx(1.0)

    def test_panel_facing_away_clamped_to_zero(self):
        # Vertical north-facing panel, low southern sun
        assert orientation_factor(10.0, 180.0, 0.0, 90.0) == 0.0

    def test_sun_below_horizon(self):
        assert orientation_factor(0.0, 0.0, 180.0, 35.0) == 0.0
        assert orientation_factor(-5.0, 0.0, 180.0, 35.0) == 0.0

    def test_tilt_beyond_ninety_is_computed_not_rejected(self):
        factor = orientation_factor(45.0, 180.0, 180.0, 120.0)
        assert factor >= 0.0


class TestTemperatureFactor:
    @pytest.mark.parametrize("hour", [10, 11, 12, 13, 14, 15, 16])
    def test_derate_window(self, hour):
        assert temperature_factor(hour) == 0.90

    @pytest.mark.parametrize("hour", [0, 5, 9, 17, 23])
    def test_outside_window(self, hour):
        assert temperature_factor(hour) == 1.0


class TestHourlyIrradiance:
    def test_zero_whenever_sun_is_down(self):
        for hour in HOURS_OF_DAY:
            if sun_elevation(BERLIN_LAT, SOLSTICE, hour) <= 0:
                assert hourly_irradiance(BERLIN_LAT, SOLSTICE, hour, 0.0, 180.0, 35.0) == 0.0

    def test_product_of_factors(self):
        sun = elevation_azimuth(BERLIN_LAT, SOLSTICE, 12)
        expected = (
            clear_sky_irradiance(sun.elevation)
            * cloud_factor(40.0)
            * orientation_factor(sun.elevation, sun.azimuth, 180.0, 35.0)
            * 0.90
        )
        result = hourly_irradiance(BERLIN_LAT, SOLSTICE, 12, 40.0, 180.0, 35.0)
        assert result == pytest.approx(expected, rel=1e-12)

    def test_berlin_noon_clear_south(self):
        result = hourly_irradiance(BERLIN_LAT, SOLSTICE, 12, 0.0, 180.0, 35.0)
        # ≈ 874 W/m² × 0.995 orientation × 0.90 heat derate
        assert result == pytest.approx(782.0, abs=3.0)

    def test_overcast_reduces_to_thirty_percent(self):
        clear = hourly_irradiance(BERLIN_LAT, SOLSTICE, 9, 0.0, 180.0, 35.0)
        overcast = hourly_irradiance(BERLIN_LAT, SOLSTICE, 9, 100.0, 180.0, 35.0)
        assert overcast == pytest.approx(clear * 0.30)

    def test_never_negative(self):
        for azimuth in (0.0, 90.0, 180.0, 270.0):
            for hour in HOURS_OF_DAY:
                assert hourly_irradiance(BERLIN_LAT, SOLSTICE, hour, 50.0, azimuth, 60.0) >= 0.0

    def test_east_array_favours_morning(self):
        morning = hourly_irradiance(BERLIN_LAT, SOLSTICE, 8, 0.0, 90.0, 18.0)
        afternoon = hourly_irradiance(BERLIN_LAT, SOLSTICE, 16, 0.0, 90.0, 18.0)
        assert morning > afternoon
