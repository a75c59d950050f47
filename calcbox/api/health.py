"""
Health and fitness endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from calcbox.calculations import health
from calcbox.calculations.errors import InvalidInput

router = APIRouter()


class BmiInput(BaseModel):
    weight_kg: Optional[float] = None
    height_m: Optional[float] = None
    pounds: Optional[float] = None
    feet: Optional[float] = None
    inches: float = 0.0


class CalorieBurnInput(BaseModel):
    weight_kg: float
    duration_minutes: float
    activity: str
    intensity: str = "moderate"


class OneRepMaxInput(BaseModel):
    weight: float
    reps: int
    formula: health.OneRepMaxFormula = health.OneRepMaxFormula.EPLEY


class DailyCaloriesInput(BaseModel):
    weight_kg: float
    height_cm: float
    age: float
    sex: health.Sex
    activity_level: health.ActivityLevel = health.ActivityLevel.MODERATELY_ACTIVE
    goal: health.WeightGoal = health.WeightGoal.MAINTAIN
    formula: health.BmrFormula = health.BmrFormula.MIFFLIN_ST_JEOR
    body_fat_percent: Optional[float] = None


class PregnancyInput(BaseModel):
    last_period: date
    today: Optional[date] = None
    cycle_length: int = 28


@router.post("/bmi")
async def bmi(inputs: BmiInput):
    """Metric weight and height, or pounds with feet and inches."""
    if inputs.pounds is not None or inputs.feet is not None:
        if inputs.pounds is None or inputs.feet is None:
            raise InvalidInput("imperial input needs both pounds and feet")
        weight_kg, height_m = health.imperial_to_metric(inputs.pounds, inputs.feet, inputs.inches)
    else:
        weight_kg, height_m = inputs.weight_kg, inputs.height_m
    return health.calculate_bmi(weight_kg, height_m)


@router.post("/calorie-burn")
async def calorie_burn(inputs: CalorieBurnInput):
    return health.calories_burned(**inputs.model_dump())


@router.post("/one-rep-max")
async def one_rep_max(inputs: OneRepMaxInput):
    """Selected estimate, every formula side by side, and training loads."""
    estimate = health.one_rep_max(inputs.weight, inputs.reps, inputs.formula)
    return {
        "formula": inputs.formula,
        "one_rep_max": estimate,
        "all_formulas": health.all_one_rep_maxes(inputs.weight, inputs.reps),
        "training_percentages": [
            {"percentage": pct, "weight": load}
            for pct, load in health.training_percentages(estimate)
        ],
    }


@router.post("/daily-calories")
async def daily_calories(inputs: DailyCaloriesInput):
    return health.daily_calories(**inputs.model_dump())


@router.post("/pregnancy")
async def pregnancy(inputs: PregnancyInput):
    return health.pregnancy_timeline(
        inputs.last_period, inputs.today or date.today(), inputs.cycle_length
    )
