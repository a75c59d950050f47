"""
Calculation Library

Pure, stateless calculator functions grouped by domain. Every module
depends only on the shared rounding and errors leaves; none depend on
each other except retirement and ownership, which reuse the growth and
amortization formulas.
"""

from calcbox.calculations import (
    amortization,
    budget,
    commute,
    conversions,
    dates,
    debt_payoff,
    gpa,
    growth,
    health,
    ownership,
    percentages,
    retirement,
    savings,
)
from calcbox.calculations.errors import (
    CalculationError,
    DivisionByZero,
    InvalidInput,
    NonConvergent,
    OutOfRange,
    UnknownUnit,
)

__all__ = [
    "amortization",
    "budget",
    "commute",
    "conversions",
    "dates",
    "debt_payoff",
    "gpa",
    "growth",
    "health",
    "ownership",
    "percentages",
    "retirement",
    "savings",
    "CalculationError",
    "DivisionByZero",
    "InvalidInput",
    "NonConvergent",
    "OutOfRange",
    "UnknownUnit",
]
