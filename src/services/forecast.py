"""
Service module for multi-day energy forecasts.
"""
from typing import List, Optional, Union
from datetime import date, datetime, timedelta

from aws_lambda_powertools import Logger

from src.models.energy import DayPrediction, EnergyTrend
from src.models.profile import CircadianProfile, MenstrualCycleBaseline
from src.services.constants import FORECAST_DAYS, ENERGY_TREND_THRESHOLD
from src.services.energy import calculate_energy_levels, calculate_baseline_energy
from src.services.utils import normalize_date

logger = Logger()

def get_energy_trend(current: int, previous: Optional[int]) -> Optional[EnergyTrend]:
    """
    Compare a day's baseline energy with the previous day.

    Example:
        >>> get_energy_trend(70, 60)
        <EnergyTrend.UP: 'up'>
        >>> get_energy_trend(70, 68)
        <EnergyTrend.STEADY: 'steady'>
    """
    if previous is None:
        return None

    diff = current - previous
    if diff > ENERGY_TREND_THRESHOLD:
        return EnergyTrend.UP
    if diff < -ENERGY_TREND_THRESHOLD:
        return EnergyTrend.DOWN
    return EnergyTrend.STEADY

def generate_forecast(
    profile: CircadianProfile,
    cycle: Optional[MenstrualCycleBaseline],
    today: Union[date, datetime]
) -> List[DayPrediction]:
    """
    Generate a 7-day energy forecast starting today.

    Each day is estimated independently from its own offset to the last
    period start.

    Args:
        profile: Circadian profile providing the chronotype
        cycle: Optional menstrual cycle baseline
        today: First forecast day, supplied by the caller

    Returns:
        List of DayPrediction for today through today + 6
    """
    start_date = normalize_date(today)
    predictions: List[DayPrediction] = []
    previous_energy = None

    for offset in range(FORECAST_DAYS):
        day = start_date + timedelta(days=offset)
        hourly_levels = calculate_energy_levels(profile, cycle, day)
        baseline_energy = calculate_baseline_energy(hourly_levels)

        predictions.append(DayPrediction(
            date=day,
            cycle_phase=hourly_levels[0].phase,
            baseline_energy=baseline_energy,
            hourly_levels=hourly_levels,
            trend=get_energy_trend(baseline_energy, previous_energy)
        ))
        previous_energy = baseline_energy

    logger.debug("Forecast generated", extra={
        "start_date": start_date.isoformat(),
        "chronotype": profile.chronotype.value,
        "has_cycle": cycle is not None,
        "phases": [p.cycle_phase.value for p in predictions]
    })

    return predictions
