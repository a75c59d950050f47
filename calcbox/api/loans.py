"""
Loan, mortgage, debt payoff and ownership comparison endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from calcbox.calculations import amortization, debt_payoff, ownership
from calcbox.config import Settings, get_settings

router = APIRouter()


class LoanInput(BaseModel):
    """Input for a level-payment loan."""

    principal: float
    annual_rate: float
    term: float
    term_unit: amortization.TermUnit = amortization.TermUnit.YEARS
    include_schedule: bool = True


class MortgageInput(BaseModel):
    home_price: float
    down_payment: float
    annual_rate: float
    years: int = 30
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0
    monthly_pmi: float = 0.0


class DebtInput(BaseModel):
    name: str
    balance: float
    annual_rate: float
    minimum_payment: float


class PayoffInput(BaseModel):
    debts: List[DebtInput]
    extra_payment: float = 0.0


class LeaseVsBuyInput(BaseModel):
    car_price: float
    down_payment: float
    loan_rate: float
    loan_months: int = 60
    monthly_lease: float
    lease_months: int = 36
    lease_down_payment: float = 0.0
    buy_maintenance: float = 0.0
    lease_maintenance: float = 0.0
    depreciation_rate: float = ownership.DEFAULT_DEPRECIATION_RATE


class RentVsBuyInput(BaseModel):
    home_price: float
    down_payment: float
    mortgage_rate: float
    mortgage_years: int = 30
    monthly_rent: float
    years: int = ownership.DEFAULT_ANALYSIS_YEARS
    monthly_property_tax: float = 0.0
    monthly_insurance: float = 0.0
    monthly_pmi: float = 0.0
    monthly_hoa: float = 0.0
    monthly_maintenance: float = 0.0
    rent_increase: float = ownership.DEFAULT_RENT_INCREASE
    monthly_renters_insurance: float = 0.0
    appreciation_rate: float = ownership.DEFAULT_APPRECIATION_RATE


@router.post("/loan")
async def calculate_loan(inputs: LoanInput):
    """Monthly payment, totals, and the schedule with yearly roll-up."""
    months = amortization.term_in_months(inputs.term, inputs.term_unit)
    summary = amortization.calculate_loan(inputs.principal, inputs.annual_rate, months)

    return {
        "months": months,
        "monthly_payment": summary.monthly_payment,
        "total_paid": summary.total_paid,
        "total_interest": summary.total_interest,
        "interest_percentage": summary.interest_percentage,
        "yearly": amortization.summarize_by_year(list(summary.schedule)),
        "schedule": summary.schedule if inputs.include_schedule else [],
    }


@router.post("/mortgage")
async def calculate_mortgage(inputs: MortgageInput):
    return amortization.calculate_mortgage(**inputs.model_dump())


@router.post("/payoff")
async def compare_payoff(inputs: PayoffInput, settings: Settings = Depends(get_settings)):
    """Avalanche vs snowball under the same monthly budget."""
    debts = [debt_payoff.Debt(**debt.model_dump()) for debt in inputs.debts]
    comparison = debt_payoff.compare_strategies(
        debts, inputs.extra_payment, max_months=settings.max_payoff_months
    )
    return {
        "avalanche": _payoff_summary(comparison.avalanche),
        "snowball": _payoff_summary(comparison.snowball),
        "interest_saved": comparison.interest_saved,
        "months_saved": comparison.months_saved,
    }


@router.post("/lease-vs-buy")
async def lease_vs_buy(inputs: LeaseVsBuyInput):
    return ownership.lease_vs_buy(**inputs.model_dump())


@router.post("/rent-vs-buy")
async def rent_vs_buy(inputs: RentVsBuyInput):
    """Owning versus renting a home over the analysis period."""
    return ownership.rent_vs_buy(**inputs.model_dump())

def _payoff_summary(result: debt_payoff.PayoffResult) -> dict:
    return {
        "strategy": result.strategy,
        "months": result.months,
        "years": result.years,
        "total_interest": result.total_interest,
        "total_paid": result.total_paid,
        "payoff_order": list(result.payoff_order),
    }
