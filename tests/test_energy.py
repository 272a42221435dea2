"""
Tests for hourly energy estimation.
"""
from datetime import date, datetime, timedelta
import pytest

from src.models.energy import CyclePhase, EnergyLevel
from src.models.profile import Chronotype, CircadianProfile, MenstrualCycleBaseline
from src.services.energy import calculate_energy_levels, calculate_baseline_energy
from src.services.utils import round_half_up

MORNING_NEUTRAL_ENERGY = [
    30, 30, 30, 40, 50, 70, 90, 100, 95, 90, 85, 80,
    75, 70, 65, 60, 55, 50, 45, 40, 35, 30, 30, 30,
]

def test_day_has_24_ordered_hours(morning_profile, regular_cycle, target_date):
    """A day always yields 24 levels for hours 0..23 sharing one phase."""
    levels = calculate_energy_levels(morning_profile, regular_cycle, target_date)

    assert len(levels) == 24
    assert [level.hour for level in levels] == list(range(24))
    assert {level.phase for level in levels} == {CyclePhase.MENSTRUAL}

def test_morning_peak_without_cycle(morning_profile, target_date):
    """Morning types reach full energy at 7am when no cycle data exists."""
    levels = calculate_energy_levels(morning_profile, None, target_date)

    assert levels[7].energy == 100
    assert levels[7].phase == CyclePhase.NEUTRAL
    assert [level.energy for level in levels] == MORNING_NEUTRAL_ENERGY

def test_menstrual_phase_lowers_energy(intermediate_profile, regular_cycle, target_date):
    """On the first period day the curve is scaled by 0.7."""
    levels = calculate_energy_levels(intermediate_profile, regular_cycle, target_date)

    assert levels[9].energy == 70
    assert levels[0].energy == 21
    assert all(level.phase == CyclePhase.MENSTRUAL for level in levels)

def test_ovulatory_phase_is_clamped_to_100(evening_profile, target_date):
    """The ovulatory boost never pushes energy above 100."""
    cycle = MenstrualCycleBaseline(
        last_period_start=target_date - timedelta(days=12),
        cycle_length=28
    )
    levels = calculate_energy_levels(evening_profile, cycle, target_date)

    assert levels[0].phase == CyclePhase.OVULATORY
    assert levels[13].energy == 100
    assert levels[12].energy == 100
    assert max(level.energy for level in levels) == 100

@pytest.mark.parametrize("chronotype", list(Chronotype))
@pytest.mark.parametrize("cycle_length", [21, 28, 35])
def test_energy_stays_in_range(chronotype, cycle_length, target_date):
    """Energy stays within 0-100 for every phase of the cycle."""
    profile = CircadianProfile(chronotype=chronotype)

    for offset in range(-cycle_length, cycle_length):
        cycle = MenstrualCycleBaseline(
            last_period_start=target_date + timedelta(days=offset),
            cycle_length=cycle_length
        )
        for level in calculate_energy_levels(profile, cycle, target_date):
            assert 0 <= level.energy <= 100
            assert level.energy >= 21

def test_datetime_target_matches_calendar_day(morning_profile, regular_cycle, target_date):
    """A datetime target is treated as its calendar day."""
    afternoon = datetime(target_date.year, target_date.month, target_date.day, 15, 30)

    assert calculate_energy_levels(morning_profile, regular_cycle, afternoon) == \
        calculate_energy_levels(morning_profile, regular_cycle, target_date)

def test_energy_calculation_is_idempotent(evening_profile, regular_cycle, target_date):
    """Identical inputs always produce identical output."""
    first = calculate_energy_levels(evening_profile, regular_cycle, target_date)
    second = calculate_energy_levels(evening_profile, regular_cycle, target_date)

    assert first == second
    assert first is not second

def test_round_half_up():
    """Halves round away from zero instead of to even."""
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -3

def test_baseline_energy_is_rounded_mean():
    """Daily baseline is the mean of hourly values, halves rounded up."""
    levels = [EnergyLevel(hour=hour, energy=50, phase=CyclePhase.NEUTRAL) for hour in range(23)]
    levels.append(EnergyLevel(hour=23, energy=62, phase=CyclePhase.NEUTRAL))

    assert calculate_baseline_energy(levels) == 51

def test_baseline_energy_requires_levels():
    """An empty day has no baseline."""
    with pytest.raises(ValueError, match="No energy levels provided"):
        calculate_baseline_energy([])
