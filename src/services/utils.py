"""
Shared utility functions for energy services.

These utilities are used across multiple service modules to handle common
operations like rounding, date normalization, and energy banding.
"""
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from src.models.energy import EnergyBand
from src.services.constants import (
    ENERGY_BAND_THRESHOLDS,
    TIME_OF_DAY_BOUNDARIES,
    NIGHT
)

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    The exact binary value of the float is rounded, so products such as
    0.3 * 0.85 * 100 (stored slightly below 25.5) round down.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -3
    """
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def normalize_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value

def get_energy_band(energy: float) -> EnergyBand:
    """
    Map an energy score to its band.

    Example:
        >>> get_energy_band(80)
        <EnergyBand.PEAK: 'peak'>
        >>> get_energy_band(39)
        <EnergyBand.LOW: 'low'>
    """
    for lower_bound, band in ENERGY_BAND_THRESHOLDS:
        if energy >= lower_bound:
            return band
    return EnergyBand.LOW

def get_time_of_day(hour: int) -> str:
    """Name the part of the day an hour belongs to."""
    for upper_bound, name in TIME_OF_DAY_BOUNDARIES:
        if hour < upper_bound:
            return name
    return NIGHT
