"""
Emergency Fund and Net Worth

Savings-goal progress with month-by-month accrual toward an emergency
fund target, and a categorized assets-minus-liabilities snapshot.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from calcbox.calculations.errors import NonConvergent
from calcbox.calculations.rounding import (
    RATE_TOLERANCE,
    require_finite,
    require_non_negative,
    require_number,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_MONTHS = 600
DEFAULT_TARGET_MONTHS = 6
HIGH_EXPENSE_THRESHOLD = 3000.0

# (upper bound exclusive, label) on net worth
NET_WORTH_RATINGS = (
    (0.0, "Needs Improvement"),
    (10_000.0, "Getting Started"),
    (50_000.0, "Building Wealth"),
    (100_000.0, "Strong Position"),
    (500_000.0, "Excellent"),
)


@dataclass(frozen=True)
class EmergencyFundResult:
    target_amount: float
    remaining_amount: float
    progress_percentage: float
    months_to_goal: int
    monthly_savings_for_1_year: float
    monthly_savings_for_2_years: float
    monthly_savings_for_3_years: float
    recommended_months: int
    annual_interest_earnings: float
    milestones: Dict[int, float] = field(default_factory=dict)


def months_to_goal(
    current_savings: float,
    target_amount: float,
    monthly_savings: float,
    annual_rate: float = 0.0,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> int:
    """
    Whole months of saving until the balance reaches the target.

    Each month the balance earns annual_rate / 12 percent, then the
    monthly deposit is added.

    Raises:
        NonConvergent: If nothing is saved and the target is not met, or
            the target is not reached within ``max_months``
    """
    current_savings = require_non_negative(current_savings, "current_savings")
    target_amount = require_non_negative(target_amount, "target_amount")
    monthly_savings = require_non_negative(monthly_savings, "monthly_savings")
    annual_rate = require_non_negative(annual_rate, "annual_rate")
    max_months = require_whole(max_months, "max_months")

    if current_savings >= target_amount:
        return 0

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate < RATE_TOLERANCE:
        if monthly_savings <= 0:
            raise NonConvergent("monthly_savings must be greater than 0 to reach the target")
        months = math.ceil(
            require_finite((target_amount - current_savings) / monthly_savings, "months to goal")
        )
    else:
        if monthly_savings <= 0 and current_savings <= 0:
            raise NonConvergent("nothing saved and no balance to grow")
        balance = current_savings
        months = 0
        while balance < target_amount and months <= max_months:
            balance = balance * (1 + monthly_rate) + monthly_savings
            months += 1

    if months > max_months:
        logger.warning(f"emergency fund target not reached within {max_months} months")
        raise NonConvergent(f"target not reached within {max_months} months")
    return months


def emergency_fund(
    monthly_expenses: float,
    current_savings: float,
    monthly_savings: float = 0.0,
    annual_rate: float = 0.0,
    target_months: float = DEFAULT_TARGET_MONTHS,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> EmergencyFundResult:
    """
    Emergency fund target, progress and time to reach it.

    Args:
        monthly_expenses: Essential spending per month
        current_savings: Amount already set aside
        monthly_savings: Deposit per month; 0 skips the time-to-goal estimate
        annual_rate: Savings account rate in percent
        target_months: Months of expenses to cover
        max_months: Iteration bound for the time-to-goal estimate

    Returns:
        EmergencyFundResult; months_to_goal is 0 when the goal is met or
        no monthly deposit is given
    """
    monthly_expenses = require_non_negative(monthly_expenses, "monthly_expenses")
    current_savings = require_non_negative(current_savings, "current_savings")
    monthly_savings = require_non_negative(monthly_savings, "monthly_savings")
    annual_rate = require_non_negative(annual_rate, "annual_rate")
    target_months = require_positive(target_months, "target_months")

    target = require_finite(monthly_expenses * target_months, "target amount")
    remaining = max(0.0, target - current_savings)

    months = 0
    if remaining > 0 and monthly_savings > 0:
        months = months_to_goal(current_savings, target, monthly_savings, annual_rate, max_months)

    return EmergencyFundResult(
        target_amount=target,
        remaining_amount=remaining,
        progress_percentage=current_savings / target * 100 if target > 0 else 0.0,
        months_to_goal=months,
        monthly_savings_for_1_year=remaining / 12,
        monthly_savings_for_2_years=remaining / 24,
        monthly_savings_for_3_years=remaining / 36,
        recommended_months=6 if monthly_expenses >= HIGH_EXPENSE_THRESHOLD else 3,
        annual_interest_earnings=require_finite(target * annual_rate / 100, "annual interest"),
        milestones={n: require_finite(monthly_expenses * n, "milestone") for n in (3, 6, 12)},
    )


@dataclass(frozen=True)
class BalanceItem:
    name: str
    value: float
    category: str = "other"


@dataclass(frozen=True)
class NetWorthResult:
    total_assets: float
    total_liabilities: float
    net_worth: float
    rating: str
    assets_by_category: Tuple[Tuple[str, float], ...]
    liabilities_by_category: Tuple[Tuple[str, float], ...]


def _by_category(items: Sequence[BalanceItem], label: str) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for item in items:
        value = require_non_negative(item.value, f"{label} {item.name or item.category}")
        totals[item.category] = totals.get(item.category, 0.0) + value
    return totals


def rate_net_worth(net_worth: float) -> str:
    net_worth = require_number(net_worth, "net_worth")
    for upper, label in NET_WORTH_RATINGS:
        if net_worth < upper:
            return label
    return "Outstanding"


def net_worth(assets: Sequence[BalanceItem], liabilities: Sequence[BalanceItem]) -> NetWorthResult:
    """Assets minus liabilities, with per-category totals in first-seen order."""
    asset_totals = _by_category(assets, "asset")
    liability_totals = _by_category(liabilities, "liability")

    total_assets = require_finite(sum(asset_totals.values()), "total assets")
    total_liabilities = require_finite(sum(liability_totals.values()), "total liabilities")
    worth = require_finite(total_assets - total_liabilities, "net worth")

    return NetWorthResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=worth,
        rating=rate_net_worth(worth),
        assets_by_category=tuple((k, v) for k, v in asset_totals.items() if v > 0),
        liabilities_by_category=tuple((k, v) for k, v in liability_totals.items() if v > 0),
    )
