"""
Retirement Calculations

Accumulation up to retirement (current savings plus monthly contributions)
and drawdown of a nest egg under a percentage or fixed withdrawal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from calcbox.calculations.errors import InvalidInput
from calcbox.calculations.growth import contribution_future_value, future_value
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_number,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)

DEFAULT_WITHDRAWAL_RATE = 4.0
DEFAULT_MAX_YEARS = 100


class WithdrawalMode(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class RetirementProjection:
    years_until_retirement: float
    total_at_retirement: float
    monthly_income: float
    shortfall: float
    additional_savings_needed: float


@dataclass(frozen=True)
class DrawdownYear:
    year: int
    starting_balance: float
    gains: float
    withdrawal: float
    ending_balance: float


@dataclass(frozen=True)
class DrawdownResult:
    years_lasted: int
    depleted: bool
    breakdown: Tuple[DrawdownYear, ...]


def project_retirement(
    current_age: float,
    retirement_age: float,
    current_savings: float,
    monthly_contribution: float,
    employer_match: float,
    expected_return: float,
    desired_monthly_income: float = 0.0,
    withdrawal_rate: float = DEFAULT_WITHDRAWAL_RATE,
) -> RetirementProjection:
    """
    Project savings at retirement and the income they support.

    Current savings compound annually at ``expected_return``; the employee
    contribution and employer match are deposited monthly. Sustainable
    income follows the withdrawal-rate rule (4% of the balance per year).

    Args:
        current_age: Age today
        retirement_age: Planned retirement age
        current_savings: Balance today
        monthly_contribution: Employee deposit per month
        employer_match: Employer deposit per month
        expected_return: Annual return in percent
        desired_monthly_income: Target income in retirement
        withdrawal_rate: Annual withdrawal as a percent of the balance

    Returns:
        RetirementProjection
    """
    current_age = require_non_negative(current_age, "current_age")
    retirement_age = require_non_negative(retirement_age, "retirement_age")
    withdrawal_rate = require_positive(withdrawal_rate, "withdrawal_rate")
    desired_monthly_income = require_non_negative(desired_monthly_income, "desired_monthly_income")
    if retirement_age < current_age:
        raise InvalidInput("retirement_age must not be before current_age")

    years = retirement_age - current_age
    monthly_total = require_non_negative(monthly_contribution, "monthly_contribution") + (
        require_non_negative(employer_match, "employer_match")
    )
    expected_return = require_number(expected_return, "expected_return")

    total = require_finite(
        future_value(current_savings, expected_return, years)
        + contribution_future_value(monthly_total, expected_return / 12, years * 12),
        "total at retirement",
    )
    monthly_income = require_finite(total * withdrawal_rate / 100 / 12, "monthly income")
    shortfall = max(0.0, desired_monthly_income - monthly_income)

    return RetirementProjection(
        years_until_retirement=years,
        total_at_retirement=total,
        monthly_income=monthly_income,
        shortfall=shortfall,
        additional_savings_needed=require_finite(
            shortfall * 12 / (withdrawal_rate / 100), "additional savings needed"
        ),
    )


def simulate_drawdown(
    savings: float,
    annual_return: float,
    withdrawal: float,
    mode: WithdrawalMode = WithdrawalMode.PERCENTAGE,
    max_years: int = DEFAULT_MAX_YEARS,
) -> DrawdownResult:
    """
    Year-by-year drawdown of a retirement balance.

    Gains accrue on the opening balance, then the withdrawal is taken. In
    percentage mode ``withdrawal`` is a percent of each year's opening
    balance; in fixed mode it is a flat amount, capped at what is available.
    The run stops when the balance is exhausted or after ``max_years``.
    """
    savings = require_positive(savings, "savings")
    annual_return = require_number(annual_return, "annual_return")
    withdrawal = require_positive(withdrawal, "withdrawal")
    mode = require_choice(WithdrawalMode, mode, "withdrawal mode")
    max_years = require_whole(max_years, "max_years")
    if annual_return <= -100:
        raise InvalidInput("annual_return must be greater than -100%")

    breakdown = []
    balance = savings
    depleted = False

    for year in range(1, max_years + 1):
        gains = require_finite(balance * annual_return / 100, "gains")
        wanted = balance * withdrawal / 100 if mode is WithdrawalMode.PERCENTAGE else withdrawal
        taken = min(wanted, balance + gains)
        ending = require_finite(balance + gains - taken, "ending balance")

        breakdown.append(
            DrawdownYear(
                year=year,
                starting_balance=balance,
                gains=gains,
                withdrawal=taken,
                ending_balance=max(0.0, ending),
            )
        )

        balance = max(0.0, ending)
        if balance <= 0:
            depleted = True
            break

    logger.debug(f"drawdown {mode.value}: {len(breakdown)} years, depleted={depleted}")

    return DrawdownResult(
        years_lasted=len(breakdown),
        depleted=depleted,
        breakdown=tuple(breakdown),
    )
