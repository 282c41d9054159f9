"""
Tests for the array yield model.
"""

import pytest

from solaryield.engine.array_yield import array_hourly_yield, current_power, hourly_yield
from solaryield.models.solar import ArrayConfig


def make_array(**overrides) -> ArrayConfig:
    params = dict(capacity_kwp=4.8, azimuth=180.0, tilt=35.0, efficiency_pct=20.0, losses_pct=14.0)
    params.update(overrides)
    return ArrayConfig(**params)


class TestHourlyYield:
    def test_stc_closed_form(self):
        """1000/1000 × 5 × 0.20 × 0.86 = 0.86 kWh/kWp."""
        assert hourly_yield(1000.0, 20.0, 14.0) == pytest.approx(0.86, abs=1e-12)

    def test_zero_irradiance(self):
        assert hourly_yield(0.0, 20.0, 14.0) == 0.0

    @pytest.mark.parametrize("irradiance, expected", [
        (100.0, 0.086),
        (500.0, 0.43),
        (874.0, 0.75164),
    ])
    def test_linear_in_irradiance(self, irradiance, expected):
        assert hourly_yield(irradiance, 20.0, 14.0) == pytest.approx(expected, abs=1e-6)

    def test_monotonic_in_irradiance(self):
        values = [hourly_yield(g, 20.0, 14.0) for g in range(0, 1001, 50)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_monotonic_in_efficiency(self):
        values = [hourly_yield(800.0, eff, 14.0) for eff in (5.0, 10.0, 18.5, 22.0, 25.0)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_antitonic_in_losses(self):
        values = [hourly_yield(800.0, 20.0, loss) for loss in (0.0, 5.0, 14.0, 50.0, 100.0)]
        assert all(b <= a for a, b in zip(values, values[1:]))

    def test_total_losses_give_nothing(self):
        assert hourly_yield(1000.0, 20.0, 100.0) == 0.0


class TestArrayHourlyYield:
    def test_scales_with_capacity(self):
        small = array_hourly_yield(600.0, make_array(capacity_kwp=1.0))
        large = array_hourly_yield(600.0, make_array(capacity_kwp=10.0))
        assert large == pytest.approx(small * 10.0)

    def test_stc_for_default_array(self):
        assert array_hourly_yield(1000.0, make_array()) == pytest.approx(0.86 * 4.8)


class TestCurrentPower:
    def test_stc(self):
        assert current_power(1000.0, 4.8) == pytest.approx(4.8 * 0.96)

    def test_zero_irradiance(self):
        assert current_power(0.0, 4.8) == 0.0
