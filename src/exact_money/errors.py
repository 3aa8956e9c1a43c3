"""Errors raised by the money value type and the currency registry.

Each error derives from `MoneyError` and from the builtin exception class
callers would naturally catch, so `except MoneyError` and e.g. `except TypeError`
both work.
"""


class MoneyError(Exception):
    """Base class for all errors raised by this package."""


class InvalidCurrency(MoneyError, TypeError):
    """Raised when a currency identifier cannot be resolved from the registry."""


class InvalidAmount(MoneyError, TypeError):
    """Raised when an amount or scalar operand is not a finite number."""


class NonIntegerAmount(MoneyError, TypeError):
    """Raised when an amount in minor units is not a whole number."""


class TooManyDecimalPlaces(MoneyError, ValueError):
    """Raised when a decimal amount is more precise than its currency allows."""


class AmountOutOfRange(MoneyError, OverflowError):
    """Raised when an amount does not fit into a signed 64-bit integer."""


class InvalidOperand(MoneyError, TypeError):
    """Raised when an operation expects `Money` but receives something else."""


class CurrencyMismatch(MoneyError, ValueError):
    """Raised when an operation requires both operands to share one currency."""


class DivisionByZero(MoneyError, ZeroDivisionError):
    pass
