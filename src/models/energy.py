"""
Energy model definitions for hourly levels and daily forecasts.
"""
from enum import Enum
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases as seen by the energy model.

    NEUTRAL is used when no cycle baseline is available.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"
    NEUTRAL = "neutral"

class EnergyTrend(str, Enum):
    """
    Direction of the daily baseline energy compared with the previous day.
    """
    UP = "up"
    DOWN = "down"
    STEADY = "steady"

class EnergyBand(str, Enum):
    """
    Energy thresholds shared by hourly and daily recommendations.
    """
    PEAK = "peak"          # >= 80
    HIGH = "high"          # >= 60
    MODERATE = "moderate"  # >= 40
    LOW = "low"

class EnergyLevel(BaseModel):
    """
    Estimated energy for one hour of a day.
    """
    model_config = ConfigDict(frozen=True)

    hour: int = Field(..., ge=0, le=23)
    energy: int = Field(..., ge=0, le=100)
    phase: CyclePhase

class DayPrediction(BaseModel):
    """
    Forecast for a single day with its hourly breakdown.
    """
    model_config = ConfigDict(frozen=True)

    date: date
    cycle_phase: CyclePhase
    baseline_energy: int = Field(..., ge=0, le=100)
    hourly_levels: List[EnergyLevel]
    trend: Optional[EnergyTrend] = None
