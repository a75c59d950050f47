"""
Health and Fitness Formulas

BMI, MET-based calorie burn, one-rep-max estimates, basal metabolic rate
and daily calorie targets, and the pregnancy due-date timeline.

All body measurements are metric (kg, m, cm); use imperial_to_metric to
convert pounds and feet/inches first.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from calcbox.calculations.errors import InvalidInput, OutOfRange, UnknownUnit
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_positive,
    require_whole,
)

POUNDS_TO_KG = 0.45359237
INCHES_TO_M = 0.0254

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

# (upper bound exclusive, category)
BMI_CATEGORIES = (
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
)

MAX_ONE_REP_MAX_REPS = 20
TRAINING_PERCENTAGES = (95, 90, 85, 80, 75, 70, 65, 60)

MINIMUM_DAILY_CALORIES = 1200.0

PREGNANCY_DAYS = 280
FIRST_TRIMESTER_END_DAYS = 84
SECOND_TRIMESTER_END_DAYS = 189


@dataclass(frozen=True)
class BmiResult:
    bmi: float
    category: str
    healthy_weight_min: float
    healthy_weight_max: float
    weight_to_change: float  # kg to gain (+) or lose (-) to reach the healthy range


def imperial_to_metric(pounds: float, feet: float, inches: float = 0.0) -> Tuple[float, float]:
    """Convert (pounds, feet, inches) to (kilograms, meters)."""
    pounds = require_positive(pounds, "pounds")
    total_inches = require_non_negative(feet, "feet") * 12 + require_non_negative(inches, "inches")
    if total_inches <= 0:
        raise InvalidInput("height must be greater than 0")
    kilograms = require_finite(pounds * POUNDS_TO_KG, "weight_kg")
    return kilograms, require_finite(total_inches * INCHES_TO_M, "height_m")


def bmi_category(bmi: float) -> str:
    for upper, label in BMI_CATEGORIES:
        if bmi < upper:
            return label
    return "Obese"


def calculate_bmi(weight_kg: float, height_m: float) -> BmiResult:
    """
    Body mass index with category and healthy weight range.

    Args:
        weight_kg: Body weight in kilograms
        height_m: Height in meters

    Returns:
        BmiResult
    """
    weight_kg = require_positive(weight_kg, "weight_kg")
    height_m = require_positive(height_m, "height_m")

    area = height_m * height_m
    if area <= 0:
        raise OutOfRange("height_m is too small to compute a bmi")

    bmi = require_finite(weight_kg / area, "bmi")
    healthy_min = require_finite(HEALTHY_BMI_MIN * area, "healthy weight")
    healthy_max = require_finite(HEALTHY_BMI_MAX * area, "healthy weight")

    if weight_kg < healthy_min:
        weight_to_change = healthy_min - weight_kg
    elif weight_kg > healthy_max:
        weight_to_change = healthy_max - weight_kg
    else:
        weight_to_change = 0.0

    return BmiResult(
        bmi=bmi,
        category=bmi_category(bmi),
        healthy_weight_min=healthy_min,
        healthy_weight_max=healthy_max,
        weight_to_change=weight_to_change,
    )


# --- Calorie burn ---------------------------------------------------------


@dataclass(frozen=True)
class MetTable:
    """Activity MET constants and intensity multipliers."""

    activities: Mapping[str, float]
    intensities: Mapping[str, float]
    version: str = "unversioned"

    def met(self, activity: str, intensity: str) -> float:
        try:
            base = self.activities[activity]
        except KeyError:
            raise UnknownUnit(f"unknown activity: {activity}") from None
        try:
            multiplier = self.intensities[intensity]
        except KeyError:
            raise UnknownUnit(f"unknown intensity: {intensity}") from None
        return base * multiplier


DEFAULT_MET_TABLE = MetTable(
    activities={
        "running": 8.0,
        "walking": 3.8,
        "cycling": 6.8,
        "swimming": 8.3,
        "weight_lifting": 6.0,
        "yoga": 2.5,
        "dancing": 4.8,
        "hiking": 6.0,
        "basketball": 8.0,
        "tennis": 7.3,
    },
    intensities={"light": 0.8, "moderate": 1.0, "vigorous": 1.3},
    version="compendium-approx",
)


@dataclass(frozen=True)
class CalorieBurnResult:
    calories: float
    calories_per_minute: float
    met: float


def calories_burned(
    weight_kg: float,
    duration_minutes: float,
    activity: str,
    intensity: str = "moderate",
    table: MetTable = DEFAULT_MET_TABLE,
) -> CalorieBurnResult:
    """Calories = MET * weight(kg) * hours, MET scaled by intensity."""
    weight_kg = require_positive(weight_kg, "weight_kg")
    duration_minutes = require_positive(duration_minutes, "duration_minutes")

    met = table.met(activity, intensity)
    calories = require_finite(met * weight_kg * (duration_minutes / 60.0), "calories")

    return CalorieBurnResult(
        calories=calories,
        calories_per_minute=calories / duration_minutes,
        met=met,
    )


# --- One-rep max ----------------------------------------------------------


class OneRepMaxFormula(str, Enum):
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    LANDER = "lander"
    OCONNER = "oconner"


def _epley(weight: float, reps: int) -> float:
    return weight * (1 + reps / 30)


def _brzycki(weight: float, reps: int) -> float:
    # Singular at 37 reps and unstable well before it
    return weight * 36 / (37 - reps)


def _lander(weight: float, reps: int) -> float:
    return weight * 100 / (101.3 - 2.67123 * reps)


def _oconner(weight: float, reps: int) -> float:
    return weight * (1 + reps / 40)


ONE_REP_MAX_FORMULAS: Dict[OneRepMaxFormula, Callable[[float, int], float]] = {
    OneRepMaxFormula.EPLEY: _epley,
    OneRepMaxFormula.BRZYCKI: _brzycki,
    OneRepMaxFormula.LANDER: _lander,
    OneRepMaxFormula.OCONNER: _oconner,
}


def one_rep_max(weight: float, reps: int, formula: OneRepMaxFormula = OneRepMaxFormula.EPLEY) -> float:
    """
    Estimate a one-rep max from a submaximal set.

    Args:
        weight: Weight lifted
        reps: Repetitions completed, 1 to 20
        formula: Estimation formula

    Returns:
        Estimated maximum for a single repetition

    Raises:
        InvalidInput: If weight <= 0 or reps is not a positive whole number
        OutOfRange: If reps > 20, where the formulas stop being reliable
    """
    weight = require_positive(weight, "weight")
    reps = require_whole(reps, "reps")
    if reps > MAX_ONE_REP_MAX_REPS:
        raise OutOfRange(f"reps must be at most {MAX_ONE_REP_MAX_REPS}, got {reps}")

    formula = require_choice(OneRepMaxFormula, formula, "one-rep max formula")
    estimate = ONE_REP_MAX_FORMULAS[formula](weight, reps)
    return require_finite(estimate, "one-rep max")


def all_one_rep_maxes(weight: float, reps: int) -> Dict[OneRepMaxFormula, float]:
    return {formula: one_rep_max(weight, reps, formula) for formula in OneRepMaxFormula}


def training_percentages(one_rm: float) -> List[Tuple[int, float]]:
    """Working weights at 95%..60% of a one-rep max."""
    one_rm = require_positive(one_rm, "one_rm")
    return [(pct, require_finite(one_rm * pct / 100, "training weight")) for pct in TRAINING_PERCENTAGES]


# --- Daily calories -------------------------------------------------------


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class BmrFormula(str, Enum):
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"
    HARRIS_BENEDICT = "harris_benedict"
    KATCH_MCARDLE = "katch_mcardle"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class WeightGoal(str, Enum):
    MAINTAIN = "maintain"
    MILD_LOSS = "mild_loss"
    MODERATE_LOSS = "moderate_loss"
    AGGRESSIVE_LOSS = "aggressive_loss"
    MILD_GAIN = "mild_gain"
    MODERATE_GAIN = "moderate_gain"


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

GOAL_ADJUSTMENTS = {
    WeightGoal.MAINTAIN: 0.0,
    WeightGoal.MILD_LOSS: -250.0,
    WeightGoal.MODERATE_LOSS: -500.0,
    WeightGoal.AGGRESSIVE_LOSS: -750.0,
    WeightGoal.MILD_GAIN: 250.0,
    WeightGoal.MODERATE_GAIN: 500.0,
}


@dataclass(frozen=True)
class DailyCaloriesResult:
    bmr: float
    tdee: float
    target_calories: float


def basal_metabolic_rate(
    weight_kg: float,
    height_cm: float,
    age: float,
    sex: Sex,
    formula: BmrFormula = BmrFormula.MIFFLIN_ST_JEOR,
    body_fat_percent: Optional[float] = None,
) -> float:
    """Resting energy expenditure in kcal/day."""
    weight_kg = require_positive(weight_kg, "weight_kg")
    height_cm = require_positive(height_cm, "height_cm")
    age = require_positive(age, "age")
    sex = require_choice(Sex, sex, "sex")
    formula = require_choice(BmrFormula, formula, "bmr formula")

    if formula is BmrFormula.MIFFLIN_ST_JEOR:
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return require_finite(base + 5 if sex is Sex.MALE else base - 161, "bmr")

    if formula is BmrFormula.HARRIS_BENEDICT:
        if sex is Sex.MALE:
            bmr = 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
        else:
            bmr = 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age
        return require_finite(bmr, "bmr")

    if body_fat_percent is None:
        raise InvalidInput("body_fat_percent is required for Katch-McArdle")
    body_fat_percent = require_non_negative(body_fat_percent, "body_fat_percent")
    if body_fat_percent >= 100:
        raise OutOfRange("body_fat_percent must be below 100")
    lean_mass = weight_kg * (1 - body_fat_percent / 100)
    return require_finite(370 + 21.6 * lean_mass, "bmr")


def daily_calories(
    weight_kg: float,
    height_cm: float,
    age: float,
    sex: Sex,
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE,
    goal: WeightGoal = WeightGoal.MAINTAIN,
    formula: BmrFormula = BmrFormula.MIFFLIN_ST_JEOR,
    body_fat_percent: Optional[float] = None,
) -> DailyCaloriesResult:
    """BMR, total daily energy expenditure, and a goal-adjusted target (floored at 1200)."""
    bmr = basal_metabolic_rate(weight_kg, height_cm, age, sex, formula, body_fat_percent)
    activity_level = require_choice(ActivityLevel, activity_level, "activity level")
    goal = require_choice(WeightGoal, goal, "weight goal")
    tdee = require_finite(bmr * ACTIVITY_MULTIPLIERS[activity_level], "tdee")
    target = max(MINIMUM_DAILY_CALORIES, tdee + GOAL_ADJUSTMENTS[goal])
    return DailyCaloriesResult(bmr=bmr, tdee=tdee, target_calories=target)


# --- Pregnancy ------------------------------------------------------------


@dataclass(frozen=True)
class PregnancyTimeline:
    due_date: date
    conception_date: date
    current_week: int
    days_remaining: int
    trimester: int
    first_trimester_end: date
    second_trimester_end: date


def _days_after(start: date, days: int) -> date:
    try:
        return start + timedelta(days=days)
    except OverflowError:
        raise OutOfRange("date is past the end of the calendar") from None


def due_date(last_period: date) -> date:
    """Naegele's rule: 280 days after the first day of the last period."""
    return _days_after(last_period, PREGNANCY_DAYS)


def pregnancy_timeline(last_period: date, today: date, cycle_length: int = 28) -> PregnancyTimeline:
    """
    Due date, estimated conception, progress and trimester.

    Args:
        last_period: First day of the last menstrual period
        today: Reference date for progress
        cycle_length: Cycle length in days; ovulation is taken at its midpoint

    Returns:
        PregnancyTimeline
    """
    if not isinstance(last_period, date) or not isinstance(today, date):
        raise InvalidInput("last_period and today must be dates")
    if today < last_period:
        raise InvalidInput("today must not be before last_period")
    cycle_length = require_whole(cycle_length, "cycle_length")

    elapsed = (today - last_period).days
    week = elapsed // 7
    if week <= 12:
        trimester = 1
    elif week <= 27:
        trimester = 2
    else:
        trimester = 3

    due = due_date(last_period)
    return PregnancyTimeline(
        due_date=due,
        conception_date=_days_after(last_period, cycle_length // 2),
        current_week=week,
        days_remaining=(due - today).days,
        trimester=trimester,
        first_trimester_end=_days_after(last_period, FIRST_TRIMESTER_END_DAYS),
        second_trimester_end=_days_after(last_period, SECOND_TRIMESTER_END_DAYS),
    )
