"""
Calculation Errors

Typed failures raised by the calculation library. Every error is a
ValueError so callers can catch the whole family at once, and carries a
stable ``code`` for transport layers.
"""


class CalculationError(ValueError):
    """Base class for all calculation failures."""

    code = "CalculationError"


class InvalidInput(CalculationError):
    """Input is missing, non-numeric, or outside the formula's domain."""

    code = "InvalidInput"


class OutOfRange(CalculationError):
    """Input is numeric but outside the range a formula is reliable for."""

    code = "OutOfRange"


class UnknownUnit(CalculationError):
    """Unit, currency, activity, or zone identifier is not in the table."""

    code = "UnknownUnit"


class DivisionByZero(CalculationError, ZeroDivisionError):
    """A ratio was requested against a zero denominator."""

    code = "DivisionByZero"


class NonConvergent(CalculationError):
    """An iterative simulation cannot reach its terminal state."""

    code = "NonConvergent"
