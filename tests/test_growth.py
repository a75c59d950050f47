"""
Tests for compound growth, investment returns, inflation and retirement.
"""

import pytest

from calcbox.calculations.errors import InvalidInput, OutOfRange, UnknownUnit
from calcbox.calculations.growth import (
    CompoundingFrequency,
    TimeUnit,
    amount_needed_to_maintain_value,
    annualized_return,
    compound_interest,
    contribution_future_value,
    cumulative_inflation,
    future_purchasing_power,
    future_value,
    investment_returns,
    past_value_in_todays_dollars,
    rate_return,
)
from calcbox.calculations.retirement import (
    WithdrawalMode,
    project_retirement,
    simulate_drawdown,
)


class TestTimeValue:
    """Test future value formulas."""

    def test_future_value_annual(self):
        assert future_value(1000, 10, 2) == pytest.approx(1210)

    def test_future_value_monthly_compounding(self):
        assert future_value(1000, 12, 1, 12) == pytest.approx(1126.825, abs=0.001)

    def test_zero_rate_contributions(self):
        assert contribution_future_value(100, 0, 12) == 1200

    def test_contributions_with_rate(self):
        # 100/month at 1%/month for 12 months
        assert contribution_future_value(100, 1, 12) == pytest.approx(1268.25, abs=0.01)

    def test_rate_at_minus_hundred_rejected(self):
        with pytest.raises(InvalidInput):
            future_value(1000, -100, 1)

    def test_future_value_overflow(self):
        with pytest.raises(OutOfRange):
            future_value(1000, 100, 2000)

    def test_contribution_overflow(self):
        with pytest.raises(OutOfRange):
            contribution_future_value(100, 50, 5000)


class TestCompoundInterest:
    """Test principal plus contributions projection."""

    def test_annual_compounding_without_contributions(self):
        result = compound_interest(1000, 0, 10, 2, CompoundingFrequency.ANNUALLY)
        assert result.total_amount == pytest.approx(1210)
        assert result.total_contributions == 1000
        assert result.total_interest == pytest.approx(210)
        assert [y.year for y in result.yearly_breakdown] == [1, 2]
        assert result.yearly_breakdown[0].balance == pytest.approx(1100)

    def test_zero_rate_is_sum_of_deposits(self):
        result = compound_interest(5000, 200, 0, 3)
        assert result.total_amount == pytest.approx(5000 + 200 * 36)
        assert result.total_interest == pytest.approx(0)

    def test_breakdown_ends_at_total(self):
        result = compound_interest(10000, 500, 7, 10)
        assert result.yearly_breakdown[-1].balance == pytest.approx(result.total_amount)

    def test_unknown_frequency(self):
        with pytest.raises(UnknownUnit):
            compound_interest(1000, 0, 5, 2, 7)

    def test_runaway_growth_out_of_range(self):
        with pytest.raises(OutOfRange):
            compound_interest(1000, 100, 1000, 500)


class TestReturns:
    """Test annualized and investment return calculations."""

    def test_annualized_return(self):
        assert annualized_return(100, 121, 2) == pytest.approx(10)

    @pytest.mark.parametrize("pv,fv,years", [(0, 100, 1), (100, -1, 1), (100, 110, 0)])
    def test_annualized_return_invalid(self, pv, fv, years):
        with pytest.raises(InvalidInput):
            annualized_return(pv, fv, years)

    @pytest.mark.parametrize(
        "annualized,label",
        [(-1, "Loss"), (2, "Poor"), (5, "Below Average"), (8, "Good"), (12, "Excellent"), (20, "Outstanding")],
    )
    def test_rating_bands(self, annualized, label):
        assert rate_return(annualized) == label

    def test_investment_returns(self):
        result = investment_returns(10000, 0, 12000, 12, TimeUnit.MONTHS)
        assert result.total_invested == 10000
        assert result.total_return == 2000
        assert result.return_percentage == pytest.approx(20)
        assert result.annualized_return == pytest.approx(20)
        assert result.rating == "Outstanding"

    def test_investment_returns_requires_money_in(self):
        with pytest.raises(InvalidInput):
            investment_returns(0, 0, 100, 1)

    def test_tenfold_in_a_day_out_of_range(self):
        # annualizing 10x over one day is 10 ** 365
        with pytest.raises(OutOfRange):
            investment_returns(100, 0, 1000, 1, TimeUnit.DAYS)

    def test_unknown_time_unit(self):
        with pytest.raises(UnknownUnit):
            investment_returns(100, 0, 110, 1, "fortnights")


class TestInflation:
    """Test inflation views."""

    def test_purchasing_power_shrinks(self):
        assert future_purchasing_power(100, 3, 1) == pytest.approx(97.087, abs=0.001)

    def test_past_value_and_maintenance_grow(self):
        assert past_value_in_todays_dollars(100, 3, 1) == pytest.approx(103)
        assert amount_needed_to_maintain_value(100, 3, 1) == pytest.approx(103)

    def test_cumulative_inflation(self):
        assert cumulative_inflation(3, 2) == pytest.approx(6.09)

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidInput):
            future_purchasing_power(100, -2, 5)

    @pytest.mark.parametrize(
        "view",
        [past_value_in_todays_dollars, amount_needed_to_maintain_value],
    )
    def test_runaway_inflation_out_of_range(self, view):
        with pytest.raises(OutOfRange):
            view(100, 50, 2000)
        with pytest.raises(OutOfRange):
            cumulative_inflation(50, 2000)


class TestRetirement:
    """Test retirement projection and drawdown."""

    def test_projection_without_growth(self):
        result = project_retirement(
            current_age=30,
            retirement_age=65,
            current_savings=10000,
            monthly_contribution=500,
            employer_match=0,
            expected_return=0,
            desired_monthly_income=2000,
        )
        assert result.years_until_retirement == 35
        assert result.total_at_retirement == pytest.approx(220000)
        assert result.monthly_income == pytest.approx(733.33, abs=0.01)
        assert result.shortfall == pytest.approx(1266.67, abs=0.01)
        assert result.additional_savings_needed == pytest.approx(380000, abs=1)

    def test_no_shortfall_when_income_covered(self):
        result = project_retirement(40, 67, 500000, 1000, 500, 6, desired_monthly_income=1000)
        assert result.shortfall == 0
        assert result.additional_savings_needed == 0

    def test_retirement_before_current_age(self):
        with pytest.raises(InvalidInput):
            project_retirement(50, 45, 0, 100, 0, 5)

    def test_projection_overflow(self):
        with pytest.raises(OutOfRange):
            project_retirement(0, 2000, 1000, 100, 0, 100)

    def test_unknown_withdrawal_mode(self):
        with pytest.raises(UnknownUnit):
            simulate_drawdown(100000, 5, 4, "lump_sum")

    def test_fixed_drawdown_depletes(self):
        result = simulate_drawdown(100000, 0, 10000, WithdrawalMode.FIXED)
        assert result.depleted
        assert result.years_lasted == 10
        assert result.breakdown[-1].ending_balance == 0

    def test_percentage_drawdown_below_return_lasts(self):
        result = simulate_drawdown(100000, 5, 4, WithdrawalMode.PERCENTAGE, max_years=30)
        assert not result.depleted
        assert result.years_lasted == 30
        assert result.breakdown[-1].ending_balance > 100000

    def test_fixed_withdrawal_capped_at_balance(self):
        result = simulate_drawdown(15000, 0, 10000, WithdrawalMode.FIXED)
        assert [row.withdrawal for row in result.breakdown] == [10000, 5000]
