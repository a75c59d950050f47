"""
Percentage, Sales Tax and Tip Arithmetic
"""

from dataclasses import dataclass
from enum import Enum

from calcbox.calculations.errors import DivisionByZero
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_number,
    require_whole,
)


class TaxDirection(str, Enum):
    ADD = "add"  # amount is pre-tax
    REMOVE = "remove"  # amount already includes tax


@dataclass(frozen=True)
class SalesTaxResult:
    pre_tax: float
    tax: float
    total: float


@dataclass(frozen=True)
class TipResult:
    tip: float
    total: float
    per_person: float
    tip_per_person: float


def percent_of(percent: float, number: float) -> float:
    """What is X% of Y."""
    percent = require_number(percent, "percent")
    return require_finite(percent / 100 * require_number(number, "number"), "result")


def what_percent(part: float, whole: float) -> float:
    """X is what percent of Y."""
    part = require_number(part, "part")
    whole = require_number(whole, "whole")
    if whole == 0:
        raise DivisionByZero("cannot express a value as a percent of 0")
    return require_finite(part / whole * 100, "percentage")


def percentage_change(original: float, new: float) -> float:
    """
    Relative change from ``original`` to ``new``, in percent.

    Raises:
        DivisionByZero: If ``original`` is 0
    """
    original = require_number(original, "original")
    new = require_number(new, "new")
    if original == 0:
        raise DivisionByZero("percentage change from 0 is undefined")
    return require_finite((new - original) / original * 100, "percentage change")


def increase_by_percent(value: float, percent: float) -> float:
    return require_finite(
        require_number(value, "value") * (1 + require_number(percent, "percent") / 100), "result"
    )


def decrease_by_percent(value: float, percent: float) -> float:
    return require_finite(
        require_number(value, "value") * (1 - require_number(percent, "percent") / 100), "result"
    )


def add_tax(amount: float, rate: float) -> float:
    """Total after adding ``rate`` percent tax to a pre-tax amount."""
    amount = require_non_negative(amount, "amount")
    rate = require_non_negative(rate, "rate")
    return require_finite(amount * (1 + rate / 100), "total")


def remove_tax(total: float, rate: float) -> float:
    """Pre-tax amount contained in a tax-inclusive total; inverse of add_tax."""
    total = require_non_negative(total, "total")
    rate = require_non_negative(rate, "rate")
    return require_finite(total / (1 + rate / 100), "pre-tax amount")


def tax_breakdown(amount: float, rate: float, direction: TaxDirection = TaxDirection.ADD) -> SalesTaxResult:
    """Split an amount into pre-tax, tax and total for either direction."""
    if require_choice(TaxDirection, direction, "tax direction") is TaxDirection.ADD:
        pre_tax = require_non_negative(amount, "amount")
        total = add_tax(pre_tax, rate)
    else:
        total = require_non_negative(amount, "amount")
        pre_tax = remove_tax(total, rate)
    return SalesTaxResult(pre_tax=pre_tax, tax=require_finite(total - pre_tax, "tax"), total=total)


def split_tip(bill: float, tip_percent: float, people: int = 1) -> TipResult:
    """Tip and per-person share of a bill."""
    bill = require_non_negative(bill, "bill")
    tip_percent = require_non_negative(tip_percent, "tip_percent")
    people = require_whole(people, "people")

    tip = require_finite(bill * tip_percent / 100, "tip")
    total = require_finite(bill + tip, "total")
    return TipResult(
        tip=tip,
        total=total,
        per_person=total / people,
        tip_per_person=tip / people,
    )
