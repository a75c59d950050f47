"""
GPA Calculations

Credit-weighted grade point average on the unweighted 4.0 scale or the
weighted 5.0 scale, where honors/AP courses earn one extra point.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from calcbox.calculations.errors import InvalidInput, UnknownUnit
from calcbox.calculations.rounding import require_choice, require_finite, require_positive

HONORS_BONUS = 1.0

GRADE_POINTS = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
}


class GpaScale(str, Enum):
    FOUR_POINT = "4.0"
    FIVE_POINT = "5.0"

    @property
    def max_value(self) -> float:
        return 4.0 if self is GpaScale.FOUR_POINT else 5.0


@dataclass(frozen=True)
class Course:
    name: str
    grade: str
    credits: float
    honors: bool = False


@dataclass(frozen=True)
class GpaResult:
    gpa: float
    total_credits: float
    quality_points: float
    scale: GpaScale


def grade_points(grade: str, scale: GpaScale = GpaScale.FOUR_POINT, honors: bool = False) -> float:
    """Points for one letter grade; failing grades never get the honors bonus."""
    try:
        base = GRADE_POINTS[grade.strip().upper()]
    except (KeyError, AttributeError):
        raise UnknownUnit(f"unknown grade: {grade!r}") from None

    scale = require_choice(GpaScale, scale, "gpa scale")
    if scale is GpaScale.FIVE_POINT and honors and base > 0:
        return min(base + HONORS_BONUS, scale.max_value)
    return base


def calculate_gpa(courses: Sequence[Course], scale: GpaScale = GpaScale.FOUR_POINT) -> GpaResult:
    """Credit-weighted average of grade points across courses."""
    if not courses:
        raise InvalidInput("at least one course is required")
    scale = require_choice(GpaScale, scale, "gpa scale")

    total_points = 0.0
    total_credits = 0.0
    for course in courses:
        credits = require_positive(course.credits, f"{course.name or 'course'} credits")
        total_points += grade_points(course.grade, scale, course.honors) * credits
        total_credits += credits

    return GpaResult(
        gpa=require_finite(total_points / total_credits, "gpa"),
        total_credits=require_finite(total_credits, "total credits"),
        quality_points=require_finite(total_points, "quality points"),
        scale=scale,
    )
