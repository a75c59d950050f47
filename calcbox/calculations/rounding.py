"""
Rounding and Formatting Helpers

Shared leaf utilities for every calculator: input guards, finite-result
checks, half-up money rounding and display formatting.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real

from calcbox.calculations.errors import InvalidInput, OutOfRange, UnknownUnit

# Rates below this are treated as zero to avoid catastrophic cancellation
RATE_TOLERANCE = 1e-12
SCHEDULE_TOLERANCE = 1e-6


def require_number(value, name: str) -> float:
    """
    Coerce an input to float, rejecting sentinels.

    Args:
        value: Raw numeric input
        name: Field name used in the error message

    Returns:
        The value as a float

    Raises:
        InvalidInput: If the value is missing, boolean, non-numeric, NaN or infinite
    """
    if value is None or isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return number


def require_positive(value, name: str) -> float:
    """Coerce an input and require it to be strictly positive."""
    number = require_number(value, name)
    if number <= 0:
        raise InvalidInput(f"{name} must be greater than 0, got {number}")
    return number


def require_non_negative(value, name: str) -> float:
    """Coerce an input and require it to be zero or more."""
    number = require_number(value, name)
    if number < 0:
        raise InvalidInput(f"{name} must not be negative, got {number}")
    return number


def require_whole(value, name: str, minimum: int = 1) -> int:
    """Require an integral count (periods, reps, people) of at least ``minimum``."""
    number = require_number(value, name)
    if not number.is_integer():
        raise InvalidInput(f"{name} must be a whole number, got {number}")
    if number < minimum:
        raise InvalidInput(f"{name} must be at least {minimum}, got {int(number)}")
    return int(number)


def require_finite(value: float, name: str) -> float:
    """Reject NaN or infinite results at a function boundary."""
    if math.isnan(value) or math.isinf(value):
        raise OutOfRange(f"{name} is not a finite number")
    return value


def power(base: float, exponent: float, name: str) -> float:
    """
    ``base ** exponent`` as a finite float.

    Overflow, a zero base with a negative exponent and a complex result
    raise OutOfRange.
    """
    try:
        result = base**exponent
    except (OverflowError, ZeroDivisionError):
        raise OutOfRange(f"{name} is too large to represent") from None
    if isinstance(result, complex):
        raise OutOfRange(f"{name} has no real value")
    return require_finite(result, name)


def require_choice(enum_cls, value, name: str):
    """Coerce a name or value to ``enum_cls``, raising UnknownUnit if it is not a member."""
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownUnit(f"unknown {name}: {value!r}") from None


def round_money(value: float, places: int = 2) -> float:
    """Round half-up to ``places`` decimals (display rounding, not banker's)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(value: float, symbol: str = "$", places: int = 2) -> str:
    """Format as currency, e.g. 1234.5 -> '$1,234.50', -3 -> '-$3.00'."""
    rounded = round_money(abs(value), places)
    sign = "-" if value < 0 and rounded != 0 else ""
    return f"{sign}{symbol}{rounded:,.{places}f}"


def format_percent(value: float, places: int = 2) -> str:
    """Format a percentage value, e.g. 12.5 -> '12.50%'."""
    return f"{round_money(value, places):.{places}f}%"


def format_signed_percent(value: float, places: int = 2) -> str:
    """Format a percentage change with an explicit sign, e.g. '+20.00%'."""
    rounded = round_money(value, places)
    sign = "+" if rounded > 0 else ""
    return f"{sign}{rounded:.{places}f}%"
