"""
Budget Split and Paycheck Calculations

Rule-based needs/wants/savings splits and a take-home pay estimate.

The paycheck estimate is a flat deduction chain: every withholding
category is its own percentage of gross pay for the period. It does not
model marginal brackets, wage-base caps or pre-tax deductions reducing
taxable income.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from calcbox.calculations.errors import InvalidInput
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_positive,
)

PERCENT_SUM_TOLERANCE = 1e-9


class BudgetRule(str, Enum):
    FIFTY_THIRTY_TWENTY = "50/30/20"
    SIXTY_TWENTY_TWENTY = "60/20/20"
    SEVENTY_TWENTY_TEN = "70/20/10"
    CUSTOM = "custom"


# (needs %, wants %, savings %)
BUDGET_RULES = {
    BudgetRule.FIFTY_THIRTY_TWENTY: (50.0, 30.0, 20.0),
    BudgetRule.SIXTY_TWENTY_TWENTY: (60.0, 20.0, 20.0),
    BudgetRule.SEVENTY_TWENTY_TEN: (70.0, 20.0, 10.0),
}

# Suggested share of each bucket, summing to 1.0 per bucket
NEEDS_SHARES = (("Housing", 0.60), ("Transportation", 0.20), ("Food/Groceries", 0.15), ("Healthcare", 0.05))
WANTS_SHARES = (("Entertainment", 0.30), ("Dining Out", 0.25), ("Shopping", 0.25), ("Personal Care", 0.20))
SAVINGS_SHARES = (
    ("Emergency Fund", 0.40),
    ("Retirement", 0.35),
    ("Short-term Goals", 0.15),
    ("Debt Repayment", 0.10),
)


@dataclass(frozen=True)
class BudgetSplit:
    needs: float
    wants: float
    savings: float
    annual_savings: float
    percentages: Tuple[float, float, float]


def rule_percentages(
    rule: BudgetRule, custom: Optional[Tuple[float, float, float]] = None
) -> Tuple[float, float, float]:
    """Needs/wants/savings percentages for a rule; custom splits must total 100."""
    rule = require_choice(BudgetRule, rule, "budget rule")
    if rule is not BudgetRule.CUSTOM:
        return BUDGET_RULES[rule]

    if custom is None or len(custom) != 3:
        raise InvalidInput("custom budget requires needs, wants and savings percentages")
    needs, wants, savings = (
        require_non_negative(value, name) for value, name in zip(custom, ("needs", "wants", "savings"))
    )
    if abs(needs + wants + savings - 100) > PERCENT_SUM_TOLERANCE:
        raise InvalidInput(f"custom percentages must total 100, got {needs + wants + savings}")
    return needs, wants, savings


def split_budget(
    monthly_income: float,
    rule: BudgetRule = BudgetRule.FIFTY_THIRTY_TWENTY,
    custom: Optional[Tuple[float, float, float]] = None,
) -> BudgetSplit:
    """Divide monthly income into needs, wants and savings."""
    monthly_income = require_non_negative(monthly_income, "monthly_income")
    needs_pct, wants_pct, savings_pct = rule_percentages(rule, custom)

    savings = monthly_income * savings_pct / 100
    return BudgetSplit(
        needs=monthly_income * needs_pct / 100,
        wants=monthly_income * wants_pct / 100,
        savings=savings,
        annual_savings=require_finite(savings * 12, "annual savings"),
        percentages=(needs_pct, wants_pct, savings_pct),
    )


def suggest_categories(split: BudgetSplit) -> Dict[str, List[Tuple[str, float]]]:
    """Suggested spending per category within each bucket."""
    return {
        "needs": [(name, split.needs * share) for name, share in NEEDS_SHARES],
        "wants": [(name, split.wants * share) for name, share in WANTS_SHARES],
        "savings": [(name, split.savings * share) for name, share in SAVINGS_SHARES],
    }


class PayFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"


PERIODS_PER_YEAR = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.SEMIMONTHLY: 24,
    PayFrequency.MONTHLY: 12,
}


@dataclass(frozen=True)
class Withholdings:
    """Flat withholding percentages applied to gross pay."""

    federal: float = 22.0
    state: float = 5.0
    social_security: float = 6.2
    medicare: float = 1.45

    def as_dict(self) -> Dict[str, float]:
        return {
            "federal": self.federal,
            "state": self.state,
            "social_security": self.social_security,
            "medicare": self.medicare,
        }


@dataclass(frozen=True)
class PaycheckResult:
    gross_pay: float
    total_taxes: float
    total_deductions: float
    net_pay: float
    annual_net_pay: float
    effective_tax_rate: float
    taxes: Dict[str, float] = field(default_factory=dict)
    deductions: Dict[str, float] = field(default_factory=dict)


def calculate_paycheck(
    annual_salary: float,
    frequency: PayFrequency = PayFrequency.BIWEEKLY,
    withholdings: Optional[Withholdings] = None,
    health_insurance: float = 0.0,
    retirement_percent: float = 0.0,
    other_deductions: float = 0.0,
) -> PaycheckResult:
    """
    Estimate take-home pay per pay period.

    Args:
        annual_salary: Gross yearly salary
        frequency: Pay schedule
        withholdings: Flat tax percentages, defaults to Withholdings()
        health_insurance: Flat premium per paycheck
        retirement_percent: 401(k) contribution as a percent of gross
        other_deductions: Flat amount per paycheck

    Returns:
        PaycheckResult; net pay can be negative if deductions exceed gross
    """
    annual_salary = require_positive(annual_salary, "annual_salary")
    periods = PERIODS_PER_YEAR[require_choice(PayFrequency, frequency, "pay frequency")]
    withholdings = withholdings or Withholdings()

    gross = annual_salary / periods
    taxes = {
        name: gross * require_non_negative(pct, f"{name} withholding") / 100
        for name, pct in withholdings.as_dict().items()
    }
    deductions = {
        "health_insurance": require_non_negative(health_insurance, "health_insurance"),
        "retirement": gross * require_non_negative(retirement_percent, "retirement_percent") / 100,
        "other": require_non_negative(other_deductions, "other_deductions"),
    }

    total_taxes = require_finite(sum(taxes.values()), "total taxes")
    total_deductions = require_finite(sum(deductions.values()), "total deductions")
    net = require_finite(gross - total_taxes - total_deductions, "net pay")

    return PaycheckResult(
        gross_pay=gross,
        total_taxes=total_taxes,
        total_deductions=total_deductions,
        net_pay=net,
        annual_net_pay=require_finite(net * periods, "annual net pay"),
        effective_tax_rate=total_taxes / gross * 100,
        taxes=taxes,
        deductions=deductions,
    )
