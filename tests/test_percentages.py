"""
Tests for percentage, sales tax and tip arithmetic.
"""

import pytest

from calcbox.calculations.errors import DivisionByZero, InvalidInput, OutOfRange, UnknownUnit
from calcbox.calculations.percentages import (
    TaxDirection,
    add_tax,
    decrease_by_percent,
    increase_by_percent,
    percent_of,
    percentage_change,
    remove_tax,
    split_tip,
    tax_breakdown,
    what_percent,
)


class TestPercentages:
    """Test percentage operations."""

    def test_percent_of(self):
        assert percent_of(15, 200) == pytest.approx(30)

    def test_percent_of_overflow(self):
        with pytest.raises(OutOfRange):
            percent_of(1e308, 1e308)

    def test_what_percent(self):
        assert what_percent(30, 200) == pytest.approx(15)

    def test_what_percent_of_zero(self):
        with pytest.raises(DivisionByZero):
            what_percent(5, 0)

    def test_percentage_change(self):
        assert percentage_change(100, 120) == pytest.approx(20)
        assert percentage_change(100, 0) == pytest.approx(-100)

    def test_percentage_change_from_zero(self):
        with pytest.raises(DivisionByZero):
            percentage_change(0, 100)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            percentage_change(0, 1)

    def test_increase_and_decrease(self):
        assert increase_by_percent(100, 10) == pytest.approx(110)
        assert decrease_by_percent(100, 10) == pytest.approx(90)


class TestSalesTax:
    """Test adding and removing sales tax."""

    @pytest.mark.parametrize("amount,rate", [(100, 8.25), (19.99, 7), (0, 5), (1234.56, 0)])
    def test_remove_undoes_add(self, amount, rate):
        assert remove_tax(add_tax(amount, rate), rate) == pytest.approx(amount, abs=1e-9)

    def test_breakdown_add(self):
        result = tax_breakdown(100, 8.25, TaxDirection.ADD)
        assert result.pre_tax == 100
        assert result.tax == pytest.approx(8.25)
        assert result.total == pytest.approx(108.25)

    def test_breakdown_remove(self):
        result = tax_breakdown(108.25, 8.25, TaxDirection.REMOVE)
        assert result.pre_tax == pytest.approx(100)
        assert result.tax == pytest.approx(8.25)

    def test_negative_rate(self):
        with pytest.raises(InvalidInput):
            add_tax(100, -1)

    def test_unknown_direction(self):
        with pytest.raises(UnknownUnit):
            tax_breakdown(100, 5, "sideways")

    def test_total_overflow(self):
        with pytest.raises(OutOfRange):
            tax_breakdown(1e308, 100, TaxDirection.ADD)


class TestTip:
    """Test tip splitting."""

    def test_split(self):
        result = split_tip(100, 20, 4)
        assert result.tip == pytest.approx(20)
        assert result.total == pytest.approx(120)
        assert result.per_person == pytest.approx(30)
        assert result.tip_per_person == pytest.approx(5)

    @pytest.mark.parametrize("people", [0, 2.5])
    def test_invalid_people(self, people):
        with pytest.raises(InvalidInput):
            split_tip(100, 20, people)

    @pytest.mark.parametrize("bill,tip_percent", [(1e308, 100), (1e308, 90)])
    def test_overflow(self, bill, tip_percent):
        with pytest.raises(OutOfRange):
            split_tip(bill, tip_percent)
