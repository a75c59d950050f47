"""
Tests for lease-vs-buy and rent-vs-buy comparisons.
"""

import pytest

from calcbox.calculations.amortization import calculate_payment, calculate_remaining_balance
from calcbox.calculations.errors import InvalidInput, OutOfRange
from calcbox.calculations.ownership import Recommendation, lease_vs_buy, rent_vs_buy


@pytest.fixture
def car():
    return lease_vs_buy(
        car_price=30000,
        down_payment=5000,
        loan_rate=6.5,
        loan_months=60,
        monthly_lease=399,
        lease_months=36,
        lease_down_payment=2000,
        buy_maintenance=150,
        lease_maintenance=50,
    )


@pytest.fixture
def home():
    return rent_vs_buy(
        home_price=400000,
        down_payment=80000,
        mortgage_rate=7,
        mortgage_years=30,
        monthly_rent=2500,
        years=5,
        monthly_property_tax=500,
        monthly_insurance=150,
        monthly_pmi=200,
        monthly_maintenance=300,
        monthly_renters_insurance=25,
    )


class TestLeaseVsBuy:
    """Test car lease against loan purchase."""

    def test_buying_uses_loan_payment(self, car):
        assert car.buying.monthly_payment == pytest.approx(calculate_payment(25000, 6.5, 60))
        assert car.buying.total_interest == pytest.approx(4349.2, abs=1.0)
        assert car.buying.total_maintenance == 9000

    def test_resale_value_depreciates(self, car):
        assert car.buying.final_value == pytest.approx(30000 * 0.85**5)
        assert car.buying.net_cost == pytest.approx(car.buying.total_cost - car.buying.final_value)

    def test_leasing_totals(self, car):
        assert car.leasing.total_payments == pytest.approx(399 * 36)
        assert car.leasing.total_cost == pytest.approx(18164)

    def test_recommends_cheaper_option(self, car):
        assert car.recommendation is Recommendation.LEASE
        assert car.savings == pytest.approx(car.buying.net_cost - car.leasing.total_cost)

    def test_cash_purchase(self):
        result = lease_vs_buy(20000, 20000, 5, 36, monthly_lease=500, lease_months=36, depreciation_rate=10)
        assert result.buying.monthly_payment == 0
        assert result.buying.total_interest == 0
        assert result.buying.final_value == pytest.approx(14580)
        assert result.recommendation is Recommendation.BUY
        assert result.savings == pytest.approx(18000 - (20000 - 14580))

    def test_down_payment_above_price(self):
        with pytest.raises(InvalidInput):
            lease_vs_buy(20000, 25000, 5, 36, monthly_lease=300, lease_months=36)

    def test_total_depreciation_rejected(self):
        with pytest.raises(OutOfRange):
            lease_vs_buy(20000, 0, 5, 36, monthly_lease=300, lease_months=36, depreciation_rate=100)


class TestRentVsBuy:
    """Test home ownership against renting."""

    def test_buying_costs(self, home):
        mortgage = calculate_payment(320000, 7, 360)
        assert home.buying.monthly_mortgage == pytest.approx(mortgage)
        assert home.buying.total_monthly_payment == pytest.approx(mortgage + 1150)
        assert home.buying.total_cost == pytest.approx((mortgage + 1150) * 60)

    def test_equity(self, home):
        repaid = 320000 - calculate_remaining_balance(320000, 7, 360, 60)
        assert home.buying.principal_paid == pytest.approx(repaid)
        assert home.buying.appreciation == pytest.approx(400000 * (1.03**5 - 1))
        assert home.buying.final_equity == pytest.approx(80000 + repaid + home.buying.appreciation)

    def test_rent_steps_up_yearly(self, home):
        yearly = [2500 * 12 * 1.03**year for year in range(5)]
        assert home.renting.total_cost == pytest.approx(sum(yearly) + 25 * 60)
        assert home.renting.final_rent == pytest.approx(2500 * 1.03**5)
        assert home.renting.average_monthly_payment == pytest.approx(home.renting.total_cost / 60)

    def test_net_advantage_and_break_even(self, home):
        expected = home.buying.final_equity - home.buying.total_cost + home.renting.total_cost
        assert home.net_advantage == pytest.approx(expected)
        gap = home.buying.total_monthly_payment - 2500
        assert home.break_even_years == pytest.approx(80000 / gap / 12)

    def test_horizon_past_loan_term(self):
        result = rent_vs_buy(120000, 0, 0, 1, 1000, years=2)
        assert result.buying.principal_paid == pytest.approx(120000)
        assert result.buying.total_cost == pytest.approx(120000)
        assert result.recommendation is Recommendation.BUY

    def test_cheaper_to_own_breaks_even_immediately(self):
        result = rent_vs_buy(100000, 100000, 5, 30, 2000, years=3)
        assert result.buying.monthly_mortgage == 0
        assert result.break_even_years == 0

    @pytest.mark.parametrize("years", [0, 2.5])
    def test_invalid_horizon(self, years):
        with pytest.raises(InvalidInput):
            rent_vs_buy(300000, 60000, 6, 30, 1800, years=years)
