"""
Service module for estimating hourly energy levels.

The estimate combines the chronotype circadian curve with the energy
modifier of the cycle phase the target day falls in.

Typical usage:
    >>> levels = calculate_energy_levels(profile, cycle_baseline, date.today())
    >>> baseline = calculate_baseline_energy(levels)
"""
from typing import List, Optional, Sequence, Union
from datetime import date, datetime

from src.models.energy import EnergyLevel
from src.models.profile import CircadianProfile, MenstrualCycleBaseline
from src.services.circadian import get_circadian_curve_value
from src.services.constants import HOURS_PER_DAY
from src.services.phase import get_cycle_phase
from src.services.utils import round_half_up

MAX_ENERGY = 100

def calculate_energy_levels(
    profile: CircadianProfile,
    cycle: Optional[MenstrualCycleBaseline],
    target_date: Union[date, datetime]
) -> List[EnergyLevel]:
    """
    Estimate energy for every hour of a calendar day.

    Args:
        profile: Circadian profile providing the chronotype
        cycle: Optional menstrual cycle baseline
        target_date: Day to estimate; datetimes are truncated to the day

    Returns:
        24 EnergyLevel entries for hours 0..23, all sharing the day's phase

    Example:
        >>> levels = calculate_energy_levels(profile, None, date(2024, 1, 1))
        >>> len(levels)
        24
    """
    phase, modifier = get_cycle_phase(cycle, target_date)

    hourly_levels = []
    for hour in range(HOURS_PER_DAY):
        circadian_energy = get_circadian_curve_value(profile.chronotype, hour)
        combined_energy = min(MAX_ENERGY, round_half_up(circadian_energy * modifier * 100))
        hourly_levels.append(EnergyLevel(hour=hour, energy=combined_energy, phase=phase))

    return hourly_levels

def calculate_baseline_energy(levels: Sequence[EnergyLevel]) -> int:
    """Rounded mean energy of a day's hourly levels."""
    if not levels:
        raise ValueError("No energy levels provided")
    return round_half_up(sum(level.energy for level in levels) / len(levels))
