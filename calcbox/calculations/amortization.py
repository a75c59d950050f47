"""
Loan Amortization Calculations

Level-payment loan math: monthly payment via the annuity formula,
remaining balance, full amortization schedules, yearly summaries and the
mortgage (PITI) breakdown.

Rates are nominal annual percentages (6.5 means 6.5%), terms are months.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from calcbox.calculations.errors import InvalidInput
from calcbox.calculations.rounding import (
    RATE_TOLERANCE,
    power,
    require_choice,
    require_finite,
    require_non_negative,
    require_positive,
    require_whole,
)

PMI_DOWN_PAYMENT_THRESHOLD = 20.0


class TermUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"


class LoanType(str, Enum):
    PERSONAL = "personal"
    AUTO = "auto"
    HOME = "home"
    STUDENT = "student"


# Reference ranges shown next to the rate input, (low %, high %)
TYPICAL_RATES_VERSION = "2024-01"
TYPICAL_RATES = {
    LoanType.PERSONAL: (8.0, 15.0),
    LoanType.AUTO: (3.0, 7.0),
    LoanType.HOME: (6.0, 8.0),
    LoanType.STUDENT: (4.0, 7.0),
}


@dataclass(frozen=True)
class AmortizationPeriod:
    """One month of an amortization schedule."""

    period: int
    payment: float
    interest: float
    principal: float
    remaining_balance: float


@dataclass(frozen=True)
class YearSummary:
    year: int
    interest: float
    principal: float
    ending_balance: float


@dataclass(frozen=True)
class LoanSummary:
    monthly_payment: float
    total_paid: float
    total_interest: float
    interest_percentage: float
    schedule: Tuple[AmortizationPeriod, ...]


@dataclass(frozen=True)
class MortgageSummary:
    loan_amount: float
    down_payment_percentage: float
    principal_and_interest: float
    property_tax: float
    insurance: float
    hoa: float
    pmi: float
    total_monthly_payment: float
    total_interest: float


def _validate_loan(principal, annual_rate, months) -> Tuple[float, float, int]:
    principal = require_positive(principal, "principal")
    annual_rate = require_non_negative(annual_rate, "annual_rate")
    months = require_whole(months, "months")
    return principal, annual_rate, months


def _monthly_rate(annual_rate: float) -> float:
    return annual_rate / 100 / 12


def term_in_months(term: float, unit: TermUnit = TermUnit.YEARS) -> int:
    """Convert a loan term in years or months to a whole number of months."""
    term = require_positive(term, "term")
    months = term * 12 if require_choice(TermUnit, unit, "term unit") is TermUnit.YEARS else term
    return require_whole(round(months, 9), "term")


def calculate_payment(principal: float, annual_rate: float, months: int) -> float:
    """
    Calculate the level monthly loan payment.

    M = P * i / (1 - (1 + i)^-n), with i = annual_rate / 100 / 12.
    A rate below RATE_TOLERANCE uses the straight-line P / n branch.

    Args:
        principal: Loan principal amount
        annual_rate: Nominal annual rate in percent (e.g., 6.5)
        months: Number of monthly payments

    Returns:
        Monthly payment amount

    Raises:
        InvalidInput: If principal <= 0, months <= 0 or annual_rate < 0
    """
    principal, annual_rate, months = _validate_loan(principal, annual_rate, months)
    monthly_rate = _monthly_rate(annual_rate)

    if monthly_rate < RATE_TOLERANCE:
        return principal / months

    discount = power(1 + monthly_rate, -months, "discount factor")
    payment = principal * monthly_rate / (1 - discount)
    return require_finite(payment, "monthly payment")


def calculate_remaining_balance(
    principal: float,
    annual_rate: float,
    months: int,
    payments_made: int,
) -> float:
    """Calculate remaining loan balance after N payments."""
    principal, annual_rate, months = _validate_loan(principal, annual_rate, months)
    payments_made = require_whole(payments_made, "payments_made", minimum=0)
    if payments_made >= months:
        return 0.0

    monthly_rate = _monthly_rate(annual_rate)
    payment = calculate_payment(principal, annual_rate, months)

    if monthly_rate < RATE_TOLERANCE:
        return principal - payment * payments_made

    growth = power(1 + monthly_rate, payments_made, "balance growth")
    balance = principal * growth - payment * (growth - 1) / monthly_rate
    return max(0.0, require_finite(balance, "remaining balance"))


def generate_amortization_schedule(
    principal: float, annual_rate: float, months: int
) -> List[AmortizationPeriod]:
    """
    Generate a full amortization schedule.

    Each row splits the level payment into interest on the opening balance
    and principal. The last row retires whatever balance is left, so the
    schedule always ends at exactly zero and principal portions sum to the
    original principal.

    Args:
        principal: Loan principal amount
        annual_rate: Nominal annual rate in percent
        months: Number of monthly payments

    Returns:
        List of amortization periods, one per month
    """
    payment = calculate_payment(principal, annual_rate, months)
    principal = float(principal)
    monthly_rate = _monthly_rate(float(annual_rate))
    if monthly_rate < RATE_TOLERANCE:
        monthly_rate = 0.0

    schedule = []
    balance = principal

    for period in range(1, int(months) + 1):
        interest = balance * monthly_rate

        if period == months:
            # Final payment absorbs accumulated float drift
            principal_pmt = balance
        else:
            principal_pmt = min(payment - interest, balance)

        balance = balance - principal_pmt
        if period == months:
            balance = 0.0

        schedule.append(
            AmortizationPeriod(
                period=period,
                payment=interest + principal_pmt,
                interest=interest,
                principal=principal_pmt,
                remaining_balance=max(0.0, balance),
            )
        )

    return schedule


def calculate_loan(principal: float, annual_rate: float, months: int) -> LoanSummary:
    """Payment, totals and schedule for a level-payment loan."""
    payment = calculate_payment(principal, annual_rate, months)
    schedule = generate_amortization_schedule(principal, annual_rate, months)

    total_paid = require_finite(payment * int(months), "total paid")
    total_interest = total_paid - float(principal)

    return LoanSummary(
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_interest,
        interest_percentage=total_interest / float(principal) * 100,
        schedule=tuple(schedule),
    )


def calculate_total_interest(schedule: List[AmortizationPeriod]) -> float:
    """Calculate total interest paid over loan term."""
    return sum(row.interest for row in schedule)


def summarize_by_year(schedule: List[AmortizationPeriod]) -> List[YearSummary]:
    """Roll a monthly schedule up into 12-month blocks (last block may be short)."""
    summaries = []
    for start in range(0, len(schedule), 12):
        block = schedule[start : start + 12]
        summaries.append(
            YearSummary(
                year=start // 12 + 1,
                interest=sum(row.interest for row in block),
                principal=sum(row.principal for row in block),
                ending_balance=block[-1].remaining_balance,
            )
        )
    return summaries


def calculate_mortgage(
    home_price: float,
    down_payment: float,
    annual_rate: float,
    years: int,
    annual_property_tax: float = 0.0,
    annual_insurance: float = 0.0,
    monthly_hoa: float = 0.0,
    monthly_pmi: float = 0.0,
) -> MortgageSummary:
    """
    Calculate the full monthly housing payment.

    Principal and interest come from the annuity formula on the financed
    amount; tax and insurance are spread evenly across 12 months. PMI is
    only charged when the down payment is under 20% of the price.

    Args:
        home_price: Purchase price
        down_payment: Cash paid up front
        annual_rate: Nominal annual rate in percent
        years: Loan term in years
        annual_property_tax: Yearly property tax
        annual_insurance: Yearly homeowner's insurance
        monthly_hoa: Monthly HOA dues
        monthly_pmi: Monthly private mortgage insurance premium

    Returns:
        MortgageSummary with each monthly component and the total
    """
    home_price = require_positive(home_price, "home_price")
    down_payment = require_non_negative(down_payment, "down_payment")
    if down_payment >= home_price:
        raise InvalidInput("down_payment must be less than home_price")

    loan_amount = home_price - down_payment
    months = term_in_months(years, TermUnit.YEARS)
    summary = calculate_loan(loan_amount, annual_rate, months)

    down_payment_percentage = down_payment / home_price * 100
    property_tax = require_non_negative(annual_property_tax, "annual_property_tax") / 12
    insurance = require_non_negative(annual_insurance, "annual_insurance") / 12
    hoa = require_non_negative(monthly_hoa, "monthly_hoa")
    pmi = require_non_negative(monthly_pmi, "monthly_pmi")
    if down_payment_percentage >= PMI_DOWN_PAYMENT_THRESHOLD:
        pmi = 0.0

    return MortgageSummary(
        loan_amount=loan_amount,
        down_payment_percentage=down_payment_percentage,
        principal_and_interest=summary.monthly_payment,
        property_tax=property_tax,
        insurance=insurance,
        hoa=hoa,
        pmi=pmi,
        total_monthly_payment=require_finite(
            summary.monthly_payment + property_tax + insurance + hoa + pmi, "total monthly payment"
        ),
        total_interest=summary.total_interest,
    )
