"""
Everyday money endpoints: percentages, sales tax, tips, budgets,
paychecks, savings goals, net worth, commute costs and GPA.
"""

from enum import Enum
from typing import List, Optional, Tuple

from fastapi import APIRouter
from pydantic import BaseModel, Field

from calcbox.calculations import budget, commute, gpa, percentages, savings

router = APIRouter()


class PercentageOperation(str, Enum):
    PERCENT_OF = "percent_of"
    WHAT_PERCENT = "what_percent"
    CHANGE = "change"
    INCREASE = "increase"
    DECREASE = "decrease"


class PercentageInput(BaseModel):
    operation: PercentageOperation
    a: float
    b: float


class SalesTaxInput(BaseModel):
    amount: float
    rate: float
    direction: percentages.TaxDirection = percentages.TaxDirection.ADD


class TipInput(BaseModel):
    bill: float
    tip_percent: float = 18.0
    people: int = 1


class BudgetInput(BaseModel):
    monthly_income: float
    rule: budget.BudgetRule = budget.BudgetRule.FIFTY_THIRTY_TWENTY
    custom: Optional[Tuple[float, float, float]] = None


class WithholdingsInput(BaseModel):
    federal: float = 22.0
    state: float = 5.0
    social_security: float = 6.2
    medicare: float = 1.45


class PaycheckInput(BaseModel):
    annual_salary: float
    frequency: budget.PayFrequency = budget.PayFrequency.BIWEEKLY
    withholdings: WithholdingsInput = Field(default_factory=WithholdingsInput)
    health_insurance: float = 0.0
    retirement_percent: float = 0.0
    other_deductions: float = 0.0


class EmergencyFundInput(BaseModel):
    monthly_expenses: float
    current_savings: float = 0.0
    monthly_savings: float = 0.0
    annual_rate: float = 0.0
    target_months: float = savings.DEFAULT_TARGET_MONTHS


class BalanceItemInput(BaseModel):
    name: str = ""
    value: float
    category: str = "other"


class NetWorthInput(BaseModel):
    assets: List[BalanceItemInput] = []
    liabilities: List[BalanceItemInput] = []


class CommuteInput(BaseModel):
    daily_miles: float
    work_days: float = 5
    mpg: float = 25.0
    gas_price: float = 3.5
    miles_per_kwh: float = commute.TYPICAL_MILES_PER_KWH
    electricity_rate: float = commute.TYPICAL_ELECTRICITY_RATE
    charging_efficiency: float = commute.TYPICAL_CHARGING_EFFICIENCY


class CourseInput(BaseModel):
    name: str = ""
    grade: str
    credits: float
    honors: bool = False


class GpaInput(BaseModel):
    courses: List[CourseInput]
    scale: gpa.GpaScale = gpa.GpaScale.FOUR_POINT


# operation -> function(a, b)
PERCENTAGE_OPERATIONS = {
    PercentageOperation.PERCENT_OF: percentages.percent_of,
    PercentageOperation.WHAT_PERCENT: percentages.what_percent,
    PercentageOperation.CHANGE: percentages.percentage_change,
    PercentageOperation.INCREASE: percentages.increase_by_percent,
    PercentageOperation.DECREASE: percentages.decrease_by_percent,
}


@router.post("/percentage")
async def percentage(inputs: PercentageInput):
    """
    a and b by operation: percent_of (percent, number), what_percent
    (part, whole), change (original, new), increase/decrease (value, percent).
    """
    result = PERCENTAGE_OPERATIONS[inputs.operation](inputs.a, inputs.b)
    return {"operation": inputs.operation, "result": result}


@router.post("/sales-tax")
async def sales_tax(inputs: SalesTaxInput):
    return percentages.tax_breakdown(inputs.amount, inputs.rate, inputs.direction)


@router.post("/tip")
async def tip(inputs: TipInput):
    return percentages.split_tip(inputs.bill, inputs.tip_percent, inputs.people)


@router.post("/budget")
async def budget_split(inputs: BudgetInput):
    split = budget.split_budget(inputs.monthly_income, inputs.rule, inputs.custom)
    return {
        "split": split,
        "categories": {
            bucket: [{"category": name, "amount": amount} for name, amount in items]
            for bucket, items in budget.suggest_categories(split).items()
        },
    }


@router.post("/paycheck")
async def paycheck(inputs: PaycheckInput):
    return budget.calculate_paycheck(
        inputs.annual_salary,
        inputs.frequency,
        budget.Withholdings(**inputs.withholdings.model_dump()),
        inputs.health_insurance,
        inputs.retirement_percent,
        inputs.other_deductions,
    )


@router.post("/gpa")
async def calculate_gpa(inputs: GpaInput):
    courses = [gpa.Course(**course.model_dump()) for course in inputs.courses]
    return gpa.calculate_gpa(courses, inputs.scale)


@router.post("/emergency-fund")
async def emergency_fund(inputs: EmergencyFundInput):
    return savings.emergency_fund(**inputs.model_dump())


@router.post("/net-worth")
async def net_worth(inputs: NetWorthInput):
    return savings.net_worth(
        [savings.BalanceItem(**item.model_dump()) for item in inputs.assets],
        [savings.BalanceItem(**item.model_dump()) for item in inputs.liabilities],
    )


@router.post("/commute")
async def compare_commute(inputs: CommuteInput):
    """Gas and electric costs for the same commute."""
    gas = commute.gas_commute(inputs.daily_miles, inputs.work_days, inputs.mpg, inputs.gas_price)
    electric = commute.electric_commute(
        inputs.daily_miles,
        inputs.work_days,
        inputs.miles_per_kwh,
        inputs.electricity_rate,
        inputs.charging_efficiency,
    )
    return {
        "gas": gas,
        "electric": electric,
        "yearly_savings": gas.yearly_cost - electric.yearly_cost,
    }
