"""
Service module for chronotype-based circadian curves.

Typical usage:
    >>> chronotype = determine_chronotype(survey)
    >>> value = get_circadian_curve_value(chronotype, 9)
"""
from typing import Union

from src.models.profile import Chronotype, ChronotypeSurvey
from src.services.constants import (
    CIRCADIAN_CURVES,
    CHRONOTYPE_LABELS,
    DEFAULT_CIRCADIAN_VALUE,
    MORNING_MAX_WAKE_HOUR,
    MORNING_MAX_PEAK_HOUR,
    EVENING_MIN_WAKE_HOUR,
    EVENING_MIN_PEAK_HOUR
)

def get_circadian_curve_value(chronotype: Union[Chronotype, str], hour: int) -> float:
    """
    Get the circadian intensity for an hour of the day.

    Args:
        chronotype: Chronotype of the user
        hour: Hour of the day (0-23)

    Returns:
        Fraction of peak alertness between 0.3 and 1.0, or 0.5 when the
        chronotype or hour is not recognised

    Example:
        >>> get_circadian_curve_value(Chronotype.MORNING, 7)
        1.0
        >>> get_circadian_curve_value("unknown", 7)
        0.5
    """
    curve = CIRCADIAN_CURVES.get(chronotype)
    if curve is None or isinstance(hour, bool) or not isinstance(hour, int):
        return DEFAULT_CIRCADIAN_VALUE
    if not 0 <= hour < len(curve):
        return DEFAULT_CIRCADIAN_VALUE
    return curve[hour]

def determine_chronotype(survey: ChronotypeSurvey) -> Chronotype:
    """
    Classify a chronotype from survey answers.

    Early wakers who peak before noon are morning types, late wakers who
    peak in the late afternoon are evening types, everyone else is
    intermediate.

    Args:
        survey: Completed chronotype survey

    Returns:
        Chronotype derived from wake and peak hours
    """
    if survey.wake_hour <= MORNING_MAX_WAKE_HOUR and survey.peak_hour <= MORNING_MAX_PEAK_HOUR:
        return Chronotype.MORNING
    if survey.wake_hour >= EVENING_MIN_WAKE_HOUR and survey.peak_hour >= EVENING_MIN_PEAK_HOUR:
        return Chronotype.EVENING
    return Chronotype.INTERMEDIATE

def get_chronotype_label(chronotype: Union[Chronotype, str]) -> str:
    """Human-friendly name for a chronotype."""
    label = CHRONOTYPE_LABELS.get(chronotype)
    if label is None:
        return chronotype.value if isinstance(chronotype, Chronotype) else str(chronotype)
    return label
