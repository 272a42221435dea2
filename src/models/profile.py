"""
Input records for energy estimation: chronotype profile and cycle baseline.
"""
from enum import Enum
from datetime import date, datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

class Chronotype(str, Enum):
    """
    Natural circadian disposition derived from the onboarding survey.
    """
    MORNING = "morning"
    INTERMEDIATE = "intermediate"
    EVENING = "evening"

class CircadianProfile(BaseModel):
    """
    Represents a user's circadian profile. Only the chronotype drives the model.
    """
    chronotype: Chronotype
    gender: Optional[str] = Field(None, pattern="^(male|female)$")
    natural_wake_time: Optional[str] = None
    peak_energy_time: Optional[str] = None
    survey_responses: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class MenstrualCycleBaseline(BaseModel):
    """
    Represents the menstrual cycle data collected during onboarding.
    """
    last_period_start: date
    cycle_length: int = Field(..., ge=21, le=35)
    next_period_expected: Optional[date] = None  # Informational only

class ChronotypeSurvey(BaseModel):
    """
    Answers to the sleep and alertness survey.
    """
    gender: Optional[str] = Field(None, pattern="^(male|female)$")
    natural_wake_time: str = Field(..., pattern=r"^([01]?\d|2[0-3]):[0-5]\d$")
    energy_peak_time: str = Field(..., pattern=r"^([01]?\d|2[0-3]):[0-5]\d$")
    bed_time: Optional[str] = None
    preferred_work_time: Optional[str] = None
    weekend_wake_time: Optional[str] = None
    alertness_level: Optional[str] = None

    @property
    def wake_hour(self) -> int:
        """Hour component of the natural wake time."""
        return int(self.natural_wake_time.split(":")[0])

    @property
    def peak_hour(self) -> int:
        """Hour component of the energy peak time."""
        return int(self.energy_peak_time.split(":")[0])
