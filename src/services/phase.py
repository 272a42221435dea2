"""
Service module for placing a calendar day within the menstrual cycle.

This module maps a day offset from the last period start onto one of the
four cycle phases and the energy modifier that phase applies to the
circadian curve.

Typical usage:
    >>> phase, modifier = get_cycle_phase(cycle_baseline, target_date)
    >>> advice = get_phase_advice(phase)
"""
from typing import Optional, Tuple, Union
from datetime import date, datetime

from src.models.energy import CyclePhase
from src.models.profile import MenstrualCycleBaseline
from src.services.constants import (
    CYCLE_PHASE_MAPPING,
    CYCLE_ENERGY_MODIFIERS,
    DEFAULT_ENERGY_MODIFIER,
    PHASE_ADVICE
)
from src.services.exceptions import InvalidCycleLengthError
from src.services.utils import normalize_date

def calculate_days_since_last_period(
    last_period_start: Union[date, datetime],
    target_date: Union[date, datetime]
) -> int:
    """
    Count whole calendar days from the last period start to the target date.

    Both values are truncated to their calendar day first, so the result is
    negative when the target date precedes the recorded period start.

    Example:
        >>> calculate_days_since_last_period(date(2024, 1, 4), date(2024, 1, 1))
        -3
    """
    return (normalize_date(target_date) - normalize_date(last_period_start)).days

def determine_cycle_phase(days_since_last_period: int, cycle_length: int) -> Tuple[CyclePhase, float]:
    """
    Map a day offset within the cycle to its phase and energy modifier.

    Args:
        days_since_last_period: Days since the last period started (may be negative)
        cycle_length: Average cycle length in days

    Returns:
        Tuple of (phase, energy modifier)

    Raises:
        InvalidCycleLengthError: If cycle_length is not positive

    Example:
        >>> determine_cycle_phase(0, 28)
        (<CyclePhase.MENSTRUAL: 'menstrual'>, 0.7)
        >>> determine_cycle_phase(-3, 28)  # Day 25 of the previous cycle
        (<CyclePhase.LUTEAL: 'luteal'>, 0.85)
    """
    if cycle_length <= 0:
        raise InvalidCycleLengthError(f"Cycle length must be positive, got {cycle_length}")

    # phase_day stays in [0, cycle_length) for negative offsets too
    phase_day = ((days_since_last_period % cycle_length) + cycle_length) % cycle_length

    phase = CyclePhase.LUTEAL
    for start, end, mapped_phase in CYCLE_PHASE_MAPPING:
        if start <= phase_day < end:
            phase = mapped_phase
            break

    return phase, CYCLE_ENERGY_MODIFIERS[phase]

def get_cycle_phase(
    cycle: Optional[MenstrualCycleBaseline],
    target_date: Union[date, datetime]
) -> Tuple[CyclePhase, float]:
    """
    Get the cycle phase and energy modifier for a calendar day.

    Args:
        cycle: Cycle baseline, or None when the user has no cycle data
        target_date: Day to evaluate

    Returns:
        Tuple of (phase, energy modifier); (NEUTRAL, 1.0) without a baseline
    """
    if cycle is None:
        return CyclePhase.NEUTRAL, DEFAULT_ENERGY_MODIFIER

    days_since = calculate_days_since_last_period(cycle.last_period_start, target_date)
    return determine_cycle_phase(days_since, cycle.cycle_length)

def get_phase_advice(phase: Union[CyclePhase, str]) -> str:
    """Short explanation of what a phase means for energy and self-care."""
    return PHASE_ADVICE.get(phase, PHASE_ADVICE[CyclePhase.NEUTRAL])
