"""
Debt Payoff Simulation

Month-by-month avalanche and snowball payoff of several debts under a
fixed monthly budget (sum of minimum payments plus an extra amount).
Minimums freed by paid-off debts roll into the budget for the remaining
debts, so the monthly outlay stays constant until the last debt clears.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from calcbox.calculations.errors import InvalidInput, NonConvergent
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_MONTHS = 600  # 50 years
PAID_OFF_EPSILON = 1e-9


class PayoffStrategy(str, Enum):
    AVALANCHE = "avalanche"  # highest rate first
    SNOWBALL = "snowball"  # smallest balance first


@dataclass(frozen=True)
class Debt:
    name: str
    balance: float
    annual_rate: float
    minimum_payment: float

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 100 / 12


@dataclass(frozen=True)
class DebtPayment:
    month: int
    debt_name: str
    payment: float
    interest: float
    principal: float
    remaining_balance: float


@dataclass(frozen=True)
class PayoffResult:
    strategy: PayoffStrategy
    months: int
    total_interest: float
    total_paid: float
    payoff_order: Tuple[str, ...]
    payments: Tuple[DebtPayment, ...]

    @property
    def years(self) -> float:
        return self.months / 12


@dataclass(frozen=True)
class PayoffComparison:
    avalanche: PayoffResult
    snowball: PayoffResult
    interest_saved: float
    months_saved: int


def _validate_debts(debts: Sequence[Debt]) -> List[Debt]:
    if not debts:
        raise InvalidInput("at least one debt is required")
    validated = []
    for debt in debts:
        validated.append(
            Debt(
                name=debt.name,
                balance=require_positive(debt.balance, f"{debt.name} balance"),
                annual_rate=require_non_negative(debt.annual_rate, f"{debt.name} annual_rate"),
                minimum_payment=require_positive(
                    debt.minimum_payment, f"{debt.name} minimum_payment"
                ),
            )
        )
    return validated


def order_debts(debts: Sequence[Debt], strategy: PayoffStrategy) -> List[Debt]:
    """Priority order for extra payments; ties fall back to input order."""
    strategy = require_choice(PayoffStrategy, strategy, "payoff strategy")
    if strategy is PayoffStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: (-d.annual_rate, d.balance))
    return sorted(debts, key=lambda d: (d.balance, -d.annual_rate))


def simulate_payoff(
    debts: Sequence[Debt],
    extra_payment: float,
    strategy: PayoffStrategy,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> PayoffResult:
    """
    Simulate paying off every debt with one strategy.

    Each month, every open debt accrues interest and receives its minimum
    payment (never more than it owes). Whatever is left of the monthly
    budget goes to open debts in strategy order.

    Args:
        debts: Debts to pay off
        extra_payment: Amount paid on top of the sum of minimums each month
        strategy: Avalanche or snowball ordering
        max_months: Iteration bound

    Returns:
        PayoffResult with month count, totals and per-debt payment rows

    Raises:
        InvalidInput: If there are no debts or a debt field is invalid
        NonConvergent: If the budget never outpaces interest, or the payoff
            does not finish within max_months
    """
    strategy = require_choice(PayoffStrategy, strategy, "payoff strategy")
    debts = order_debts(_validate_debts(debts), strategy)
    extra_payment = require_non_negative(extra_payment, "extra_payment")
    max_months = require_whole(max_months, "max_months")

    budget = require_finite(sum(d.minimum_payment for d in debts) + extra_payment, "monthly budget")
    first_interest = require_finite(sum(d.balance * d.monthly_rate for d in debts), "monthly interest")
    if budget <= first_interest:
        raise NonConvergent(
            f"monthly payment {budget:.2f} does not exceed monthly interest "
            f"{first_interest:.2f}; balances would never shrink"
        )

    balances = [d.balance for d in debts]
    total_interest = 0.0
    total_paid = 0.0
    payoff_order: List[str] = []
    payments: List[DebtPayment] = []
    month = 0

    while any(b > PAID_OFF_EPSILON for b in balances):
        if month >= max_months:
            logger.warning(
                f"{strategy.value} payoff still open after {max_months} months"
            )
            raise NonConvergent(f"debts not paid off within {max_months} months")
        month += 1

        open_idx = [i for i, b in enumerate(balances) if b > PAID_OFF_EPSILON]
        interest = {}
        paid = {}
        for i in open_idx:
            interest[i] = balances[i] * debts[i].monthly_rate
            balances[i] += interest[i]
            total_interest += interest[i]

        remaining = budget
        for i in open_idx:
            paid[i] = min(debts[i].minimum_payment, balances[i], remaining)
            remaining -= paid[i]
        for i in open_idx:
            if remaining <= 0:
                break
            top_up = min(remaining, balances[i] - paid[i])
            paid[i] += top_up
            remaining -= top_up

        for i in open_idx:
            balances[i] -= paid[i]
            if balances[i] <= PAID_OFF_EPSILON:
                balances[i] = 0.0
                payoff_order.append(debts[i].name)
            total_paid += paid[i]
            payments.append(
                DebtPayment(
                    month=month,
                    debt_name=debts[i].name,
                    payment=paid[i],
                    interest=interest[i],
                    principal=paid[i] - interest[i],
                    remaining_balance=balances[i],
                )
            )

    logger.debug(
        f"{strategy.value} payoff: {month} months, "
        f"interest {total_interest:.2f}"
    )

    return PayoffResult(
        strategy=strategy,
        months=month,
        total_interest=total_interest,
        total_paid=total_paid,
        payoff_order=tuple(payoff_order),
        payments=tuple(payments),
    )


def compare_strategies(
    debts: Sequence[Debt],
    extra_payment: float,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> PayoffComparison:
    """Run both strategies; savings are snowball minus avalanche."""
    avalanche = simulate_payoff(debts, extra_payment, PayoffStrategy.AVALANCHE, max_months)
    snowball = simulate_payoff(debts, extra_payment, PayoffStrategy.SNOWBALL, max_months)
    return PayoffComparison(
        avalanche=avalanche,
        snowball=snowball,
        interest_saved=snowball.total_interest - avalanche.total_interest,
        months_saved=snowball.months - avalanche.months,
    )
