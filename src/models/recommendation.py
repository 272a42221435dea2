"""
Recommendation models for hourly activities and daily guidance.
"""
from enum import Enum
from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field

class ActivityCategory(str, Enum):
    """
    Broad kind of an activity suggestion.
    """
    FOCUS = "focus"
    CREATIVE = "creative"
    SOCIAL = "social"
    REST = "rest"
    EXERCISE = "exercise"
    ROUTINE = "routine"

class Activity(BaseModel):
    """
    A suggested activity. The icon is an identifier for the presentation layer.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    category: ActivityCategory
    icon: str

class TimeSlot(BaseModel):
    """
    Activity recommendations for a single hour.
    """
    model_config = ConfigDict(frozen=True)

    hour: int
    energy_level: Union[int, float]
    activities: List[Activity] = Field(..., min_length=1, max_length=4)
    rationale: str

class DailyRecommendation(BaseModel):
    """
    Day-level food and activity suggestions.

    Lists are returned in full; menstrual days can carry up to five
    activities, so callers showing three should slice them.
    """
    model_config = ConfigDict(frozen=True)

    foods: List[str]
    activities: List[str]
