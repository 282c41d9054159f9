"""
Array yield model: converts plane-of-array irradiance into energy.

  kWh/kWp = G/1000 × 5 m²/kWp × η/100 × (1 − losses/100)
"""

from solaryield.config import CURRENT_POWER_FACTOR, M2_PER_KWP, STC_IRRADIANCE
from solaryield.models.solar import ArrayConfig


def hourly_yield(irradiance: float, efficiency_pct: float, losses_pct: float) -> float:
    """
    Energy per installed kWp (kWh/kWp) for one hour at the given irradiance.

    Multiply by the array capacity for absolute kWh.
    """
    kwh_per_m2 = irradiance / STC_IRRADIANCE
    kwh_per_kwp = kwh_per_m2 * M2_PER_KWP
    return kwh_per_kwp * (efficiency_pct / 100.0) * (1.0 - losses_pct / 100.0)


def array_hourly_yield(irradiance: float, array: ArrayConfig) -> float:
    """Absolute energy (kWh) produced by one array in one hour."""
    return hourly_yield(irradiance, array.efficiency_pct, array.losses_pct) * array.capacity_kwp


def current_power(irradiance: float, capacity_kwp: float) -> float:
    """Instantaneous output estimate (kW) for the current conditions panel."""
    return (irradiance / STC_IRRADIANCE) * capacity_kwp * CURRENT_POWER_FACTOR
