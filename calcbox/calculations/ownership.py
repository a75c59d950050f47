"""
Lease vs Buy and Rent vs Buy

Side-by-side ownership costs. Both comparisons reuse the loan payment
and balance formulas from amortization and the compounding formulas from
growth, so the figures agree with the loan and mortgage calculators.
"""

from dataclasses import dataclass
from enum import Enum

from calcbox.calculations.amortization import calculate_payment, calculate_remaining_balance
from calcbox.calculations.errors import InvalidInput, OutOfRange
from calcbox.calculations.growth import contribution_future_value, future_value
from calcbox.calculations.rounding import (
    require_finite,
    require_non_negative,
    require_positive,
    require_whole,
)

DEFAULT_DEPRECIATION_RATE = 15.0  # percent of value lost per year
DEFAULT_APPRECIATION_RATE = 3.0
DEFAULT_RENT_INCREASE = 3.0
DEFAULT_ANALYSIS_YEARS = 5


class Recommendation(str, Enum):
    BUY = "buy"
    LEASE = "lease"
    RENT = "rent"


def _financed_payment(price: float, down_payment: float, annual_rate: float, months: int) -> float:
    if down_payment > price:
        raise InvalidInput("down_payment must not exceed the price")
    loan_amount = price - down_payment
    if loan_amount <= 0:
        return 0.0
    return calculate_payment(loan_amount, annual_rate, months)


# --- Lease vs buy ---------------------------------------------------------


@dataclass(frozen=True)
class BuyingCosts:
    monthly_payment: float
    down_payment: float
    total_interest: float
    total_maintenance: float
    final_value: float
    total_cost: float
    net_cost: float  # total_cost less what the car is still worth


@dataclass(frozen=True)
class LeasingCosts:
    monthly_payment: float
    down_payment: float
    total_payments: float
    total_maintenance: float
    total_cost: float


@dataclass(frozen=True)
class LeaseVsBuyResult:
    buying: BuyingCosts
    leasing: LeasingCosts
    recommendation: Recommendation
    savings: float


def lease_vs_buy(
    car_price: float,
    down_payment: float,
    loan_rate: float,
    loan_months: int,
    monthly_lease: float,
    lease_months: int,
    lease_down_payment: float = 0.0,
    buy_maintenance: float = 0.0,
    lease_maintenance: float = 0.0,
    depreciation_rate: float = DEFAULT_DEPRECIATION_RATE,
) -> LeaseVsBuyResult:
    """
    Compare financing a car against leasing it.

    Buying costs the down payment, every loan payment and monthly
    maintenance over the loan term; the car keeps a resale value that
    declines by ``depreciation_rate`` percent a year. Leasing costs the
    down payment, every lease payment and maintenance over the lease term.
    Buying wins when its cost net of resale value is lower.

    Args:
        car_price: Purchase price
        down_payment: Cash paid up front when buying
        loan_rate: Loan APR in percent
        loan_months: Loan term in months
        monthly_lease: Lease payment per month
        lease_months: Lease term in months
        lease_down_payment: Cash due at lease signing
        buy_maintenance: Monthly upkeep when owning
        lease_maintenance: Monthly upkeep when leasing
        depreciation_rate: Yearly loss of resale value in percent

    Returns:
        LeaseVsBuyResult; savings is how much the recommended option saves
    """
    car_price = require_positive(car_price, "car_price")
    down_payment = require_non_negative(down_payment, "down_payment")
    loan_rate = require_non_negative(loan_rate, "loan_rate")
    loan_months = require_whole(loan_months, "loan_months")
    monthly_lease = require_non_negative(monthly_lease, "monthly_lease")
    lease_months = require_whole(lease_months, "lease_months")
    lease_down_payment = require_non_negative(lease_down_payment, "lease_down_payment")
    buy_maintenance = require_non_negative(buy_maintenance, "buy_maintenance")
    lease_maintenance = require_non_negative(lease_maintenance, "lease_maintenance")
    depreciation_rate = require_non_negative(depreciation_rate, "depreciation_rate")
    if depreciation_rate >= 100:
        raise OutOfRange("depreciation_rate must be below 100 percent")

    payment = _financed_payment(car_price, down_payment, loan_rate, loan_months)
    total_payments = require_finite(payment * loan_months, "total loan payments")
    buy_upkeep = require_finite(buy_maintenance * loan_months, "maintenance")
    final_value = future_value(car_price, -depreciation_rate, loan_months / 12)
    buy_total = require_finite(down_payment + total_payments + buy_upkeep, "buying cost")
    buying = BuyingCosts(
        monthly_payment=payment,
        down_payment=down_payment,
        total_interest=max(0.0, total_payments - (car_price - down_payment)),
        total_maintenance=buy_upkeep,
        final_value=final_value,
        total_cost=buy_total,
        net_cost=buy_total - final_value,
    )

    lease_payments = require_finite(monthly_lease * lease_months, "total lease payments")
    lease_upkeep = require_finite(lease_maintenance * lease_months, "maintenance")
    leasing = LeasingCosts(
        monthly_payment=monthly_lease,
        down_payment=lease_down_payment,
        total_payments=lease_payments,
        total_maintenance=lease_upkeep,
        total_cost=require_finite(lease_down_payment + lease_payments + lease_upkeep, "leasing cost"),
    )

    if buying.net_cost < leasing.total_cost:
        recommendation = Recommendation.BUY
    else:
        recommendation = Recommendation.LEASE

    return LeaseVsBuyResult(
        buying=buying,
        leasing=leasing,
        recommendation=recommendation,
        savings=abs(leasing.total_cost - buying.net_cost),
    )


# --- Rent vs buy ----------------------------------------------------------


@dataclass(frozen=True)
class HomeBuyingCosts:
    monthly_mortgage: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_pmi: float
    monthly_hoa: float
    monthly_maintenance: float
    total_monthly_payment: float
    down_payment: float
    principal_paid: float
    appreciation: float
    total_cost: float
    final_equity: float


@dataclass(frozen=True)
class RentingCosts:
    initial_rent: float
    final_rent: float
    monthly_insurance: float
    average_monthly_payment: float
    total_cost: float


@dataclass(frozen=True)
class RentVsBuyResult:
    years: int
    buying: HomeBuyingCosts
    renting: RentingCosts
    net_advantage: float  # positive favors buying
    recommendation: Recommendation
    break_even_years: float


def rent_vs_buy(
    home_price: float,
    down_payment: float,
    mortgage_rate: float,
    mortgage_years: int,
    monthly_rent: float,
    years: int = DEFAULT_ANALYSIS_YEARS,
    monthly_property_tax: float = 0.0,
    monthly_insurance: float = 0.0,
    monthly_pmi: float = 0.0,
    monthly_hoa: float = 0.0,
    monthly_maintenance: float = 0.0,
    rent_increase: float = DEFAULT_RENT_INCREASE,
    monthly_renters_insurance: float = 0.0,
    appreciation_rate: float = DEFAULT_APPRECIATION_RATE,
) -> RentVsBuyResult:
    """
    Compare owning a home against renting over ``years`` whole years.

    Owning pays the mortgage until it is retired and the monthly carrying
    costs for the whole period; equity is the down payment, the principal
    repaid and compound appreciation. Renting pays rent that rises by
    ``rent_increase`` percent each year, plus renters insurance. The net
    advantage compares equity minus owning costs against renting costs.

    Break-even is the years of the monthly cost gap it takes to equal the
    down payment; 0 when owning is no more expensive per month.
    """
    home_price = require_positive(home_price, "home_price")
    down_payment = require_non_negative(down_payment, "down_payment")
    mortgage_rate = require_non_negative(mortgage_rate, "mortgage_rate")
    mortgage_years = require_whole(mortgage_years, "mortgage_years")
    monthly_rent = require_non_negative(monthly_rent, "monthly_rent")
    years = require_whole(years, "years")
    carrying = {
        name: require_non_negative(value, name)
        for name, value in (
            ("monthly_property_tax", monthly_property_tax),
            ("monthly_insurance", monthly_insurance),
            ("monthly_pmi", monthly_pmi),
            ("monthly_hoa", monthly_hoa),
            ("monthly_maintenance", monthly_maintenance),
        )
    }
    rent_increase = require_non_negative(rent_increase, "rent_increase")
    renters_insurance = require_non_negative(monthly_renters_insurance, "monthly_renters_insurance")
    appreciation_rate = require_non_negative(appreciation_rate, "appreciation_rate")

    term_months = mortgage_years * 12
    analysis_months = years * 12
    mortgage = _financed_payment(home_price, down_payment, mortgage_rate, term_months)
    loan_amount = home_price - down_payment
    months_paid = min(analysis_months, term_months)
    if loan_amount > 0:
        balance = calculate_remaining_balance(loan_amount, mortgage_rate, term_months, months_paid)
        principal_paid = loan_amount - balance
    else:
        principal_paid = 0.0

    monthly_carrying = require_finite(sum(carrying.values()), "monthly carrying costs")
    appreciation = future_value(home_price, appreciation_rate, years) - home_price
    buy_total = require_finite(
        mortgage * months_paid + monthly_carrying * analysis_months, "buying cost"
    )
    buying = HomeBuyingCosts(
        monthly_mortgage=mortgage,
        monthly_property_tax=carrying["monthly_property_tax"],
        monthly_insurance=carrying["monthly_insurance"],
        monthly_pmi=carrying["monthly_pmi"],
        monthly_hoa=carrying["monthly_hoa"],
        monthly_maintenance=carrying["monthly_maintenance"],
        total_monthly_payment=require_finite(mortgage + monthly_carrying, "total monthly payment"),
        down_payment=down_payment,
        principal_paid=principal_paid,
        appreciation=appreciation,
        total_cost=buy_total,
        final_equity=require_finite(down_payment + principal_paid + appreciation, "final equity"),
    )

    # Rent steps up once a year: sum of 12 * rent * (1 + g)^y for y in [0, years)
    rent_total = require_finite(
        contribution_future_value(monthly_rent * 12, rent_increase, years)
        + renters_insurance * analysis_months,
        "renting cost",
    )
    renting = RentingCosts(
        initial_rent=monthly_rent,
        final_rent=future_value(monthly_rent, rent_increase, years),
        monthly_insurance=renters_insurance,
        average_monthly_payment=rent_total / analysis_months,
        total_cost=rent_total,
    )

    net_advantage = require_finite(
        (buying.final_equity - buying.total_cost) + renting.total_cost, "net advantage"
    )
    gap = buying.total_monthly_payment - monthly_rent
    break_even = 0.0 if gap <= 0 else require_finite(down_payment / gap / 12, "break-even years")

    return RentVsBuyResult(
        years=years,
        buying=buying,
        renting=renting,
        net_advantage=net_advantage,
        recommendation=Recommendation.BUY if net_advantage > 0 else Recommendation.RENT,
        break_even_years=break_even,
    )
