"""
Service module for hourly activity recommendations.

Each hour's energy score selects a base set of activities, the cycle phase
may add one extra suggestion, and time-of-day routines are placed first.

Typical usage:
    >>> slots = generate_time_slot_recommendations(energy_levels)
    >>> current = slots[datetime.now().hour]
"""
from typing import List, Sequence, Union

from src.models.energy import CyclePhase, EnergyLevel
from src.models.recommendation import Activity, TimeSlot
from src.services.constants import (
    HOURLY_ACTIVITIES,
    PHASE_ACTIVITY_EXTRAS,
    MORNING_ROUTINE,
    MORNING_ROUTINE_HOURS,
    SLEEP_PREPARATION,
    SLEEP_PREPARATION_HOURS,
    MAX_ACTIVITIES_PER_SLOT,
    RATIONALE_TEMPLATES
)
from src.services.utils import get_energy_band, get_time_of_day

def get_activities_for_hour(
    hour: int,
    energy: int,
    phase: Union[CyclePhase, str]
) -> List[Activity]:
    """
    Build the ordered activity list for one hour.

    Args:
        hour: Hour of the day (0-23)
        energy: Energy score for the hour (0-100)
        phase: Cycle phase of the day

    Returns:
        Between 1 and 4 activities. Time-of-day routines always come first;
        phase extras may be cut off by the final truncation.

    Example:
        >>> [a.name for a in get_activities_for_hour(6, 90, CyclePhase.NEUTRAL)]
        ['Morning Routine', 'Deep Work', 'Strategic Planning', 'Learning New Skills']
    """
    band = get_energy_band(energy)
    activities = list(HOURLY_ACTIVITIES[band])

    for extra_band, phases, extra in PHASE_ACTIVITY_EXTRAS:
        if band == extra_band and phase in phases:
            activities.append(extra)

    if hour in MORNING_ROUTINE_HOURS:
        activities.insert(0, MORNING_ROUTINE)

    if hour in SLEEP_PREPARATION_HOURS:
        activities.insert(0, SLEEP_PREPARATION)

    return activities[:MAX_ACTIVITIES_PER_SLOT]

def get_rationale(hour: int, energy: int) -> str:
    """Explain why the hour's activities were suggested."""
    template = RATIONALE_TEMPLATES[get_energy_band(energy)]
    return template.format(time_of_day=get_time_of_day(hour))

def recommend_time_slot(hour: int, energy: float, phase: Union[CyclePhase, str]) -> TimeSlot:
    """Activities and rationale for a single hour."""
    return TimeSlot(
        hour=hour,
        energy_level=energy,
        activities=get_activities_for_hour(hour, energy, phase),
        rationale=get_rationale(hour, energy)
    )

def generate_time_slot_recommendations(levels: Sequence[EnergyLevel]) -> List[TimeSlot]:
    """Map every hourly energy level of a day to its time slot."""
    return [
        recommend_time_slot(level.hour, level.energy, level.phase)
        for level in levels
    ]
