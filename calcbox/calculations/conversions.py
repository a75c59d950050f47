"""
Unit and Currency Conversions

Every category converts through a single base unit. Linear categories
store one factor per unit (value in base = value * factor) and divide by
the same factor on the way out, so A -> B -> A returns the input.
Temperature is affine and handled by its own table.

Currency rates are priced against a reference currency: one unit of a
currency is worth ``rate`` units of the reference. Converting multiplies
by the source rate and divides by the target rate.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Tuple

from calcbox.calculations.errors import InvalidInput, OutOfRange, UnknownUnit
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_number,
    require_positive,
)

ABSOLUTE_ZERO_K = 0.0


class UnitCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    AREA = "area"
    SPEED = "speed"


@dataclass(frozen=True)
class ConversionTable:
    """Multiplicative factors from each unit to the category's base unit."""

    category: UnitCategory
    base_unit: str
    factors: Mapping[str, float]

    def __post_init__(self):
        if self.base_unit not in self.factors:
            raise InvalidInput(f"base unit {self.base_unit} missing from {self.category.value} table")
        for unit, factor in self.factors.items():
            require_positive(factor, f"{self.category.value} factor for {unit}")

    def units(self) -> List[str]:
        return list(self.factors)

    def _factor(self, unit: str) -> float:
        try:
            return self.factors[unit]
        except KeyError:
            raise UnknownUnit(f"unknown {self.category.value} unit: {unit}") from None

    def to_base(self, value: float, unit: str) -> float:
        value = require_non_negative(value, "value")
        return require_finite(value * self._factor(unit), "value in base units")

    def from_base(self, value: float, unit: str) -> float:
        value = require_non_negative(value, "value")
        return value / self._factor(unit)

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        return self.from_base(self.to_base(value, from_unit), to_unit)


class TemperatureTable:
    """Affine conversions through kelvin; values may be negative above absolute zero."""

    category = UnitCategory.TEMPERATURE
    base_unit = "K"

    def units(self) -> List[str]:
        return ["C", "F", "K"]

    def to_base(self, value: float, unit: str) -> float:
        value = require_number(value, "value")
        if unit == "C":
            kelvin = value + 273.15
        elif unit == "F":
            kelvin = (value - 32) * 5 / 9 + 273.15
        elif unit == "K":
            kelvin = value
        else:
            raise UnknownUnit(f"unknown temperature unit: {unit}")

        if kelvin < ABSOLUTE_ZERO_K - 1e-9:
            raise OutOfRange(f"{value} {unit} is below absolute zero")
        return require_finite(max(kelvin, ABSOLUTE_ZERO_K), "temperature")

    def from_base(self, value: float, unit: str) -> float:
        kelvin = require_number(value, "value")
        if kelvin < ABSOLUTE_ZERO_K:
            raise OutOfRange(f"{kelvin} K is below absolute zero")

        if unit == "C":
            return kelvin - 273.15
        if unit == "F":
            return (kelvin - 273.15) * 9 / 5 + 32
        if unit == "K":
            return kelvin
        raise UnknownUnit(f"unknown temperature unit: {unit}")

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        return self.from_base(self.to_base(value, from_unit), to_unit)


DEFAULT_TABLES = {
    UnitCategory.LENGTH: ConversionTable(
        UnitCategory.LENGTH,
        "m",
        {
            "mm": 0.001,
            "cm": 0.01,
            "m": 1.0,
            "km": 1000.0,
            "in": 0.0254,
            "ft": 0.3048,
            "yd": 0.9144,
            "mi": 1609.344,
        },
    ),
    UnitCategory.WEIGHT: ConversionTable(
        UnitCategory.WEIGHT,
        "kg",
        {
            "g": 0.001,
            "kg": 1.0,
            "oz": 0.028349523125,
            "lb": 0.45359237,
            "st": 6.35029318,
            "t": 1000.0,
            "ton": 907.18474,
        },
    ),
    UnitCategory.TEMPERATURE: TemperatureTable(),
    UnitCategory.VOLUME: ConversionTable(
        UnitCategory.VOLUME,
        "L",
        {
            "ml": 0.001,
            "L": 1.0,
            "fl_oz": 0.0295735295625,
            "cup": 0.2365882365,
            "pt": 0.473176473,
            "qt": 0.946352946,
            "gal": 3.785411784,
        },
    ),
    UnitCategory.AREA: ConversionTable(
        UnitCategory.AREA,
        "m2",
        {
            "m2": 1.0,
            "km2": 1_000_000.0,
            "ft2": 0.09290304,
            "yd2": 0.83612736,
            "acre": 4046.8564224,
            "ha": 10_000.0,
        },
    ),
    UnitCategory.SPEED: ConversionTable(
        UnitCategory.SPEED,
        "m/s",
        {
            "m/s": 1.0,
            "km/h": 1 / 3.6,
            "mph": 0.44704,
            "kn": 1852 / 3600,
            "ft/s": 0.3048,
        },
    ),
}


def _table_for(category, tables):
    try:
        category = UnitCategory(category)
    except ValueError:
        raise UnknownUnit(f"unknown unit category: {category}") from None
    try:
        return tables[category]
    except KeyError:
        raise UnknownUnit(f"no table configured for {category.value}") from None


def list_units(category: UnitCategory, tables=DEFAULT_TABLES) -> List[str]:
    """Unit identifiers supported for a category."""
    return _table_for(category, tables).units()


def convert_units(
    value: float,
    from_unit: str,
    to_unit: str,
    category: UnitCategory,
    tables=DEFAULT_TABLES,
) -> float:
    """
    Convert a value between two units of the same category.

    Args:
        value: Amount in ``from_unit`` (non-negative except for temperature)
        from_unit: Source unit identifier
        to_unit: Target unit identifier
        category: Conversion category
        tables: Category -> table mapping, DEFAULT_TABLES unless injected

    Returns:
        Amount in ``to_unit``

    Raises:
        UnknownUnit: If the category or either unit is not in the table
    """
    table = _table_for(category, tables)
    return require_finite(table.convert(value, from_unit, to_unit), "converted value")


@dataclass(frozen=True)
class CurrencyTable:
    """Static exchange rates, each quoted in the reference currency."""

    rates: Mapping[str, float]
    reference: str = "USD"
    version: str = "unversioned"
    _normalized: Dict[str, float] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        normalized = {}
        for code, rate in self.rates.items():
            normalized[code.upper()] = require_positive(rate, f"rate for {code}")
        if self.reference.upper() not in normalized:
            raise InvalidInput(f"reference currency {self.reference} missing from rates")
        object.__setattr__(self, "_normalized", normalized)

    def currencies(self) -> List[str]:
        return list(self._normalized)

    def rate(self, code: str) -> float:
        try:
            return self._normalized[str(code).upper()]
        except KeyError:
            raise UnknownUnit(f"unknown currency: {code}") from None

    def exchange_rate(self, from_code: str, to_code: str) -> float:
        """Units of ``to_code`` received per one unit of ``from_code``."""
        return require_finite(self.rate(from_code) / self.rate(to_code), "exchange rate")

    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        amount = require_non_negative(amount, "amount")
        return require_finite(
            amount * self.rate(from_code) / self.rate(to_code), "converted amount"
        )


# Illustrative rates only; callers should inject a current table
DEFAULT_CURRENCY_TABLE = CurrencyTable(
    rates={
        "USD": 1.0,
        "EUR": 1.08,
        "GBP": 1.27,
        "JPY": 0.0067,
        "CAD": 0.74,
        "AUD": 0.66,
        "CHF": 1.11,
        "CNY": 0.14,
        "INR": 0.012,
        "KRW": 0.00076,
    },
    reference="USD",
    version="2024-01-illustrative",
)


def convert_currency(
    amount: float,
    from_code: str,
    to_code: str,
    table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
) -> Tuple[float, float]:
    """Convert an amount; returns (converted amount, exchange rate used)."""
    return table.convert(amount, from_code, to_code), table.exchange_rate(from_code, to_code)
