"""
Service module for day-level food and activity recommendations.

Foods follow the cycle phase when it is known and the energy band when it
is not. Activities follow the energy band, then the phase overrides them
(menstrual days only trim and extend the energy-based list).
"""
from typing import Union

from src.models.energy import CyclePhase
from src.models.recommendation import DailyRecommendation
from src.services.constants import (
    DAILY_ACTIVITIES_BY_ENERGY,
    DAILY_ACTIVITIES_BY_PHASE,
    DAILY_FOODS_BY_ENERGY,
    DAILY_FOODS_BY_PHASE,
    DEFAULT_DAILY_FOODS,
    MENSTRUAL_EXCLUDED_ACTIVITY,
    MENSTRUAL_RECOVERY_ACTIVITIES
)
from src.services.utils import get_energy_band

def get_daily_recommendations(
    average_energy: float,
    phase: Union[CyclePhase, str]
) -> DailyRecommendation:
    """
    Get food and activity suggestions for a day.

    Args:
        average_energy: Baseline energy of the day (0-100)
        phase: Cycle phase of the day

    Returns:
        DailyRecommendation with foods and activities

    Example:
        >>> rec = get_daily_recommendations(85, CyclePhase.MENSTRUAL)
        >>> rec.activities
        ['Team sports', 'Complex projects', 'Gentle stretching', 'Restorative yoga']
    """
    band = get_energy_band(average_energy)
    activities = list(DAILY_ACTIVITIES_BY_ENERGY[band])

    if phase == CyclePhase.MENSTRUAL:
        activities = [
            activity for activity in activities
            if MENSTRUAL_EXCLUDED_ACTIVITY not in activity
        ]
        activities.extend(MENSTRUAL_RECOVERY_ACTIVITIES)
    elif phase in DAILY_ACTIVITIES_BY_PHASE:
        activities = list(DAILY_ACTIVITIES_BY_PHASE[phase])

    if phase in DAILY_FOODS_BY_PHASE:
        foods = list(DAILY_FOODS_BY_PHASE[phase])
    elif phase == CyclePhase.NEUTRAL:
        foods = list(DAILY_FOODS_BY_ENERGY[band])
    else:
        foods = list(DEFAULT_DAILY_FOODS)

    return DailyRecommendation(foods=foods, activities=activities)
