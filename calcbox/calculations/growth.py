"""
Growth and Time-Value-of-Money Calculations

Compound growth, contribution annuities, annualized returns and
inflation adjustment. Rates are percentages (7 means 7%).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from calcbox.calculations.errors import InvalidInput
from calcbox.calculations.rounding import (
    RATE_TOLERANCE,
    power,
    require_choice,
    require_finite,
    require_non_negative,
    require_number,
    require_positive,
)


class CompoundingFrequency(int, Enum):
    ANNUALLY = 1
    SEMI_ANNUALLY = 2
    QUARTERLY = 4
    MONTHLY = 12
    DAILY = 365


class TimeUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"


_YEARS_PER_UNIT = {
    TimeUnit.YEARS: 1.0,
    TimeUnit.MONTHS: 1.0 / 12.0,
    TimeUnit.DAYS: 1.0 / 365.0,
}

# (upper bound exclusive, label) on annualized return %
RETURN_RATINGS = (
    (0.0, "Loss"),
    (3.0, "Poor"),
    (7.0, "Below Average"),
    (10.0, "Good"),
    (15.0, "Excellent"),
)


@dataclass(frozen=True)
class YearlyGrowth:
    year: int
    contributions: float
    interest: float
    balance: float


@dataclass(frozen=True)
class CompoundInterestResult:
    total_amount: float
    total_contributions: float
    total_interest: float
    yearly_breakdown: Tuple[YearlyGrowth, ...]


@dataclass(frozen=True)
class InvestmentReturnsResult:
    total_invested: float
    total_return: float
    return_percentage: float
    annualized_return: float
    rating: str


def future_value(
    present_value: float,
    annual_rate: float,
    years: float,
    periods_per_year: int = 1,
) -> float:
    """
    Compound a present value forward.

    FV = PV * (1 + r/100/k)^(k*t) for k compounding periods per year; k=1 is
    the simple annual form PV * (1 + r/100)^t.
    """
    present_value = require_non_negative(present_value, "present_value")
    annual_rate = require_number(annual_rate, "annual_rate")
    years = require_non_negative(years, "years")
    periods_per_year = int(require_positive(periods_per_year, "periods_per_year"))
    if annual_rate <= -100:
        raise InvalidInput("annual_rate must be greater than -100%")

    rate = annual_rate / 100 / periods_per_year
    growth = power(1 + rate, periods_per_year * years, "growth factor")
    return require_finite(present_value * growth, "future value")


def contribution_future_value(contribution: float, periodic_rate: float, periods: float) -> float:
    """
    Future value of a level contribution made at the end of every period.

    FV = C * ((1 + i)^m - 1) / i with i the per-period rate in percent; a
    rate below RATE_TOLERANCE collapses to C * m.
    """
    contribution = require_non_negative(contribution, "contribution")
    periodic_rate = require_number(periodic_rate, "periodic_rate")
    periods = require_non_negative(periods, "periods")
    if periodic_rate <= -100:
        raise InvalidInput("periodic_rate must be greater than -100%")

    i = periodic_rate / 100
    if abs(i) < RATE_TOLERANCE:
        return require_finite(contribution * periods, "contribution future value")
    growth = power(1 + i, periods, "growth factor")
    return require_finite(contribution * (growth - 1) / i, "contribution future value")


def compound_interest(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
    frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY,
) -> CompoundInterestResult:
    """
    Grow a starting principal plus monthly contributions.

    The principal compounds at ``frequency``; contributions are deposited at
    the end of every month and compound monthly.

    Args:
        principal: Starting balance
        monthly_contribution: Amount added every month
        annual_rate: Annual rate in percent
        years: Whole years to project
        frequency: Compounding frequency for the principal

    Returns:
        CompoundInterestResult with totals and a year-by-year breakdown
    """
    principal = require_non_negative(principal, "principal")
    monthly_contribution = require_non_negative(monthly_contribution, "monthly_contribution")
    annual_rate = require_non_negative(annual_rate, "annual_rate")
    years = require_positive(years, "years")
    frequency = require_choice(CompoundingFrequency, frequency, "compounding frequency")

    def balance_at(t: float) -> float:
        return require_finite(
            future_value(principal, annual_rate, t, frequency.value)
            + contribution_future_value(monthly_contribution, annual_rate / 12, t * 12),
            "balance",
        )

    breakdown = []
    whole_years = int(years)
    for year in range(1, whole_years + 1):
        balance = balance_at(year)
        contributions = principal + monthly_contribution * 12 * year
        breakdown.append(
            YearlyGrowth(
                year=year,
                contributions=contributions,
                interest=balance - contributions,
                balance=balance,
            )
        )

    total_amount = balance_at(years)
    total_contributions = require_finite(
        principal + monthly_contribution * 12 * years, "total contributions"
    )

    return CompoundInterestResult(
        total_amount=total_amount,
        total_contributions=total_contributions,
        total_interest=total_amount - total_contributions,
        yearly_breakdown=tuple(breakdown),
    )


def annualized_return(present_value: float, future_value: float, years: float) -> float:
    """
    Compound annual growth rate in percent: ((FV/PV)^(1/years) - 1) * 100.

    Raises:
        InvalidInput: If present_value <= 0, years <= 0 or future_value < 0
    """
    present_value = require_positive(present_value, "present_value")
    future_value = require_non_negative(future_value, "future_value")
    years = require_positive(years, "years")
    ratio = require_finite(future_value / present_value, "growth ratio")
    growth = power(ratio, 1 / years, "annualized return")
    return require_finite((growth - 1) * 100, "annualized return")


def rate_return(annualized: float) -> str:
    """Label an annualized return percentage."""
    for upper, label in RETURN_RATINGS:
        if annualized < upper:
            return label
    return "Outstanding"


def investment_returns(
    initial_investment: float,
    additional_contributions: float,
    current_value: float,
    time_held: float,
    time_unit: TimeUnit = TimeUnit.YEARS,
) -> InvestmentReturnsResult:
    """Total and annualized performance of a holding."""
    initial_investment = require_non_negative(initial_investment, "initial_investment")
    additional_contributions = require_non_negative(
        additional_contributions, "additional_contributions"
    )
    current_value = require_non_negative(current_value, "current_value")
    time_held = require_positive(time_held, "time_held")

    total_invested = require_finite(initial_investment + additional_contributions, "total invested")
    if total_invested <= 0:
        raise InvalidInput("total invested must be greater than 0")

    years = time_held * _YEARS_PER_UNIT[require_choice(TimeUnit, time_unit, "time unit")]
    total_return = current_value - total_invested
    annualized = annualized_return(total_invested, current_value, years)

    return InvestmentReturnsResult(
        total_invested=total_invested,
        total_return=total_return,
        return_percentage=require_finite(total_return / total_invested * 100, "return percentage"),
        annualized_return=annualized,
        rating=rate_return(annualized),
    )


def _inflation_multiplier(rate: float, years: float) -> float:
    rate = require_non_negative(rate, "inflation_rate")
    years = require_non_negative(years, "years")
    return power(1 + rate / 100, years, "inflation multiplier")


def future_purchasing_power(amount: float, rate: float, years: float) -> float:
    """What ``amount`` today will buy after ``years`` of inflation, in today's money."""
    amount = require_non_negative(amount, "amount")
    return amount / _inflation_multiplier(rate, years)


def past_value_in_todays_dollars(amount: float, rate: float, years: float) -> float:
    """What ``amount`` from ``years`` ago is worth in today's money."""
    amount = require_non_negative(amount, "amount")
    return require_finite(amount * _inflation_multiplier(rate, years), "inflation-adjusted amount")


def amount_needed_to_maintain_value(amount: float, rate: float, years: float) -> float:
    """Nominal amount needed after ``years`` to match today's ``amount``."""
    amount = require_non_negative(amount, "amount")
    return require_finite(amount * _inflation_multiplier(rate, years), "inflation-adjusted amount")


def cumulative_inflation(rate: float, years: float) -> float:
    """Total price increase over the period, in percent."""
    return require_finite((_inflation_multiplier(rate, years) - 1) * 100, "cumulative inflation")

