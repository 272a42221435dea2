"""
Pytest configuration and shared fixtures.
"""
import os

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "energy_forecast_test")

import pytest
from dataclasses import dataclass
from datetime import date, timedelta

from src.models.profile import Chronotype, CircadianProfile, MenstrualCycleBaseline

@pytest.fixture
def target_date() -> date:
    """Fixed reference day used across tests."""
    return date(2024, 3, 15)

@pytest.fixture
def morning_profile() -> CircadianProfile:
    """Create a morning chronotype profile."""
    return CircadianProfile(chronotype=Chronotype.MORNING, gender="female")

@pytest.fixture
def intermediate_profile() -> CircadianProfile:
    """Create an intermediate chronotype profile."""
    return CircadianProfile(chronotype=Chronotype.INTERMEDIATE, gender="female")

@pytest.fixture
def evening_profile() -> CircadianProfile:
    """Create an evening chronotype profile."""
    return CircadianProfile(chronotype=Chronotype.EVENING, gender="male")

@pytest.fixture
def regular_cycle(target_date) -> MenstrualCycleBaseline:
    """Create a 28-day cycle whose period started on the target date."""
    return MenstrualCycleBaseline(
        last_period_start=target_date,
        cycle_length=28,
        next_period_expected=target_date + timedelta(days=28)
    )

@dataclass
class LambdaContext:
    """Minimal Lambda context for handler tests."""
    function_name: str = "energy-forecast-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:energy-forecast-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context() -> LambdaContext:
    """Create a fake Lambda context."""
    return LambdaContext()
