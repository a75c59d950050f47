"""
Calculator Catalog

Static list of the calculators the library backs, with search and
category filtering for list screens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    FINANCIAL = "financial"
    HEALTH = "health"
    LIFESTYLE = "lifestyle"
    EDUCATION = "education"
    TIME = "time"
    TRAVEL = "travel"


@dataclass(frozen=True)
class CalculatorInfo:
    id: str
    name: str
    description: str
    category: Category


CALCULATORS = (
    CalculatorInfo("compound-interest", "Compound Interest", "Calculate investment growth over time", Category.FINANCIAL),
    CalculatorInfo("mortgage", "Mortgage Calculator", "Calculate monthly payments and total interest", Category.FINANCIAL),
    CalculatorInfo("paycheck", "Paycheck Info", "Calculate take-home pay after taxes", Category.FINANCIAL),
    CalculatorInfo("investment-returns", "Investment Returns", "Track portfolio performance", Category.FINANCIAL),
    CalculatorInfo("retirement-planning", "Retirement Planning", "401k and IRA calculations", Category.FINANCIAL),
    CalculatorInfo("retirement-savings", "Retirement Savings", "How long will your savings last", Category.FINANCIAL),
    CalculatorInfo("loan", "Loan Calculator", "Calculate loan payments and interest", Category.FINANCIAL),
    CalculatorInfo("budget", "Budget Planner", "Plan your monthly budget", Category.FINANCIAL),
    CalculatorInfo("debt-payoff", "Debt Payoff", "Compare snowball and avalanche strategies", Category.FINANCIAL),
    CalculatorInfo("inflation", "Inflation Calculator", "Calculate purchasing power over time", Category.FINANCIAL),
    CalculatorInfo("emergency-fund", "Emergency Fund", "Plan your safety net savings", Category.FINANCIAL),
    CalculatorInfo("net-worth", "Net Worth", "Add up assets and liabilities", Category.FINANCIAL),
    CalculatorInfo("lease-vs-buy", "Lease vs Buy", "Compare leasing and financing a car", Category.FINANCIAL),
    CalculatorInfo("rent-vs-buy", "Rent vs Buy Home", "Compare renting and owning a home", Category.FINANCIAL),
    CalculatorInfo("bmi", "BMI Calculator", "Calculate body mass index", Category.HEALTH),
    CalculatorInfo("calorie-burn", "Calorie Burn", "Calories burned during exercise", Category.HEALTH),
    CalculatorInfo("daily-calories", "Daily Calories", "Daily calorie needs for your goal", Category.HEALTH),
    CalculatorInfo("one-rep-max", "One Rep Max", "Estimate your maximum lift", Category.HEALTH),
    CalculatorInfo("pregnancy", "Pregnancy Due Date", "Calculate estimated due date", Category.HEALTH),
    CalculatorInfo("tip", "Tip Calculator", "Calculate tips and split bills", Category.LIFESTYLE),
    CalculatorInfo("unit-converter", "Unit Converter", "Convert between units of measurement", Category.LIFESTYLE),
    CalculatorInfo("currency-converter", "Currency Converter", "Convert between currencies", Category.LIFESTYLE),
    CalculatorInfo("sales-tax", "Sales Tax", "Calculate tax on purchases", Category.LIFESTYLE),
    CalculatorInfo("percentage", "Percentage Calculator", "Calculate percentages and changes", Category.LIFESTYLE),
    CalculatorInfo("gpa", "GPA Calculator", "Calculate your grade point average", Category.EDUCATION),
    CalculatorInfo("date", "Date Calculator", "Calculate days between dates", Category.TIME),
    CalculatorInfo("age", "Age Calculator", "Calculate exact age", Category.TIME),
    CalculatorInfo("time-zone", "Time Zone Converter", "Convert between time zones", Category.TIME),
    CalculatorInfo("drive-to-work", "Drive to Work", "Compare gas and electric commute costs", Category.TRAVEL),
    CalculatorInfo("ev-charging", "EV Charging Cost", "Cost and time to charge an electric car", Category.TRAVEL),
    CalculatorInfo("mpg", "MPG Calculator", "Measure fuel economy and cost per mile", Category.TRAVEL),
    CalculatorInfo("trip-time", "Trip Time", "Estimate driving time with stops", Category.TRAVEL),
)

_BY_ID = {calc.id: calc for calc in CALCULATORS}


def get(calculator_id: str) -> CalculatorInfo:
    """Look up a calculator by id; raises KeyError if unknown."""
    return _BY_ID[calculator_id]


def search(query: str = "", category: Optional[Category] = None) -> List[CalculatorInfo]:
    """Case-insensitive match on name or description, optionally within one category."""
    needle = query.strip().lower()
    results = []
    for calc in CALCULATORS:
        if category is not None and calc.category is not Category(category):
            continue
        if needle and needle not in calc.name.lower() and needle not in calc.description.lower():
            continue
        results.append(calc)
    return results
