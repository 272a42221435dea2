"""
Lambda handler for daily energy estimates, recommendations and the weekly forecast.
"""
from typing import Dict, List, Optional
from datetime import date
import json

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, Field, ValidationError

from src.utils.logging import logger
from src.models.profile import CircadianProfile, MenstrualCycleBaseline
from src.models.energy import CyclePhase, DayPrediction, EnergyLevel
from src.models.recommendation import DailyRecommendation, TimeSlot
from src.services.circadian import get_chronotype_label
from src.services.daily import get_daily_recommendations
from src.services.forecast import generate_forecast
from src.services.phase import get_phase_advice
from src.services.recommendation import generate_time_slot_recommendations

tracer = Tracer()

class EnergyRequest(BaseModel):
    """Energy report request model."""
    profile: CircadianProfile
    cycle: Optional[MenstrualCycleBaseline] = None
    today: date = Field(..., alias="date")
    hour: Optional[int] = Field(None, ge=0, le=23)

class EnergyResponse(BaseModel):
    """Energy report for the requested day and the following week."""
    date: date
    chronotype_label: str
    cycle_phase: CyclePhase
    phase_advice: str
    baseline_energy: int
    hourly_levels: List[EnergyLevel]
    time_slots: List[TimeSlot]
    current_slot: Optional[TimeSlot] = None
    daily_recommendation: DailyRecommendation
    forecast: List[DayPrediction]

def _response(status_code: int, body: str) -> Dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body
    }

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle energy report requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        body = event.get("body") or "{}"
        if isinstance(body, str):
            body = json.loads(body)
        request = EnergyRequest(**body)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        logger.warning("Invalid energy request", extra={
            "error": str(e),
            "error_type": e.__class__.__name__
        })
        return _response(400, json.dumps({"error": "Invalid request", "details": str(e)}))

    try:
        response = build_energy_report(request)
        return _response(200, response.model_dump_json())
    except Exception:
        logger.exception("Failed to build energy report")
        return _response(500, json.dumps({"error": "Internal error"}))

@tracer.capture_method
def build_energy_report(request: EnergyRequest) -> EnergyResponse:
    """
    Assemble the energy report for a request.

    The first forecast day is the requested day, so its hourly levels double
    as the day's detailed estimate.
    """
    forecast = generate_forecast(request.profile, request.cycle, request.today)
    today = forecast[0]

    time_slots = generate_time_slot_recommendations(today.hourly_levels)
    current_slot = time_slots[request.hour] if request.hour is not None else None

    logger.info("Energy report generated", extra={
        "date": today.date.isoformat(),
        "cycle_phase": today.cycle_phase.value,
        "baseline_energy": today.baseline_energy
    })

    return EnergyResponse(
        date=today.date,
        chronotype_label=get_chronotype_label(request.profile.chronotype),
        cycle_phase=today.cycle_phase,
        phase_advice=get_phase_advice(today.cycle_phase),
        baseline_energy=today.baseline_energy,
        hourly_levels=today.hourly_levels,
        time_slots=time_slots,
        current_slot=current_slot,
        daily_recommendation=get_daily_recommendations(today.baseline_energy, today.cycle_phase),
        forecast=forecast
    )
