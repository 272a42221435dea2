"""
Tests for circadian curves and chronotype classification.
"""
import pytest
from pydantic import ValidationError

from src.models.profile import Chronotype, ChronotypeSurvey
from src.services.circadian import (
    get_circadian_curve_value,
    determine_chronotype,
    get_chronotype_label
)

@pytest.mark.parametrize("chronotype", list(Chronotype))
def test_curve_values_stay_within_floor_and_peak(chronotype):
    """Every hour of every chronotype falls between the 0.3 floor and 1.0."""
    values = [get_circadian_curve_value(chronotype, hour) for hour in range(24)]

    assert all(0.3 <= value <= 1.0 for value in values)
    assert min(values) == 0.3
    assert max(values) == 1.0

@pytest.mark.parametrize("chronotype,peak_hour", [
    (Chronotype.MORNING, 7),
    (Chronotype.INTERMEDIATE, 9),
    (Chronotype.EVENING, 13),
])
def test_curve_peaks(chronotype, peak_hour):
    """Each chronotype peaks at its characteristic hour."""
    values = [get_circadian_curve_value(chronotype, hour) for hour in range(24)]

    assert values.index(1.0) == peak_hour
    assert values.count(1.0) == 1

def test_curve_accepts_plain_strings():
    """Chronotypes stored as plain strings resolve to the same curve."""
    assert get_circadian_curve_value("morning", 7) == 1.0
    assert get_circadian_curve_value("evening", 13) == 1.0

@pytest.mark.parametrize("chronotype,hour", [
    ("unknown", 7),
    (None, 7),
    (Chronotype.MORNING, 24),
    (Chronotype.MORNING, -1),
    (Chronotype.EVENING, 100),
    (Chronotype.INTERMEDIATE, 7.5),
])
def test_curve_falls_back_to_default(chronotype, hour):
    """Unknown chronotypes and hours outside the day get the 0.5 default."""
    assert get_circadian_curve_value(chronotype, hour) == 0.5

@pytest.mark.parametrize("wake,peak,expected", [
    ("06:00", "10:00", Chronotype.MORNING),
    ("5:30", "12:00", Chronotype.MORNING),
    ("09:30", "17:00", Chronotype.EVENING),
    ("10:00", "16:00", Chronotype.EVENING),
    ("07:00", "10:00", Chronotype.INTERMEDIATE),
    ("05:00", "16:00", Chronotype.INTERMEDIATE),
    ("09:00", "14:00", Chronotype.INTERMEDIATE),
])
def test_determine_chronotype(wake, peak, expected):
    """Survey wake and peak hours map to a chronotype."""
    survey = ChronotypeSurvey(natural_wake_time=wake, energy_peak_time=peak)

    assert determine_chronotype(survey) == expected

def test_survey_rejects_invalid_times():
    """Survey times must be valid HH:MM values."""
    with pytest.raises(ValidationError):
        ChronotypeSurvey(natural_wake_time="25:00", energy_peak_time="10:00")

    with pytest.raises(ValidationError):
        ChronotypeSurvey(natural_wake_time="", energy_peak_time="10:00")

def test_chronotype_labels():
    """Chronotypes have friendly labels, unknown values pass through."""
    assert get_chronotype_label(Chronotype.MORNING) == "Early Bird"
    assert get_chronotype_label(Chronotype.INTERMEDIATE) == "Intermediate"
    assert get_chronotype_label("evening") == "Night Owl"
    assert get_chronotype_label("biphasic") == "biphasic"
