"""
Growth, inflation and retirement endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from calcbox.calculations import growth, retirement
from calcbox.config import Settings, get_settings

router = APIRouter()


class CompoundInput(BaseModel):
    principal: float
    monthly_contribution: float = 0.0
    annual_rate: float
    years: int
    frequency: growth.CompoundingFrequency = growth.CompoundingFrequency.MONTHLY


class AnnualizedReturnInput(BaseModel):
    present_value: float
    future_value: float
    years: float


class InvestmentReturnsInput(BaseModel):
    initial_investment: float
    additional_contributions: float = 0.0
    current_value: float
    time_held: float
    time_unit: growth.TimeUnit = growth.TimeUnit.YEARS


class InflationInput(BaseModel):
    amount: float
    rate: float = 3.0
    years: float


class RetirementInput(BaseModel):
    current_age: float
    retirement_age: float = 65
    current_savings: float
    monthly_contribution: float
    employer_match: float = 0.0
    expected_return: float = 7.0
    desired_monthly_income: float = 0.0
    withdrawal_rate: float = retirement.DEFAULT_WITHDRAWAL_RATE


class DrawdownInput(BaseModel):
    savings: float
    annual_return: float
    withdrawal: float
    mode: retirement.WithdrawalMode = retirement.WithdrawalMode.PERCENTAGE


@router.post("/compound")
async def compound_interest(inputs: CompoundInput):
    return growth.compound_interest(**inputs.model_dump())


@router.post("/annualized-return")
async def annualized_return(inputs: AnnualizedReturnInput):
    return {"annualized_return": growth.annualized_return(**inputs.model_dump())}


@router.post("/investment-returns")
async def investment_returns(inputs: InvestmentReturnsInput):
    return growth.investment_returns(**inputs.model_dump())


@router.post("/inflation")
async def inflation(inputs: InflationInput):
    """All three inflation views of the same amount, plus cumulative inflation."""
    args = (inputs.amount, inputs.rate, inputs.years)
    return {
        "future_purchasing_power": growth.future_purchasing_power(*args),
        "past_value_in_todays_dollars": growth.past_value_in_todays_dollars(*args),
        "amount_needed_to_maintain_value": growth.amount_needed_to_maintain_value(*args),
        "cumulative_inflation": growth.cumulative_inflation(inputs.rate, inputs.years),
    }


@router.post("/retirement")
async def project_retirement(inputs: RetirementInput):
    return retirement.project_retirement(**inputs.model_dump())


@router.post("/drawdown")
async def drawdown(inputs: DrawdownInput, settings: Settings = Depends(get_settings)):
    return retirement.simulate_drawdown(
        **inputs.model_dump(), max_years=settings.max_drawdown_years
    )
