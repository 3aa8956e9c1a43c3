"""Exact money arithmetic on integer minor units.

`Money` stores an amount as an integer count of minor units (e.g. cents) together
with a currency from the ISO 4217 registry in `exact_money.currency_registry`.
"""

__version__ = "0.1.0"

from exact_money.currency import Currency
from exact_money.currency_registry import (
    AUD,
    CAD,
    CHF,
    CNY,
    CURRENCIES,
    EUR,
    GBP,
    JPY,
    USD,
    CurrencyLike,
    all_currencies,
    is_known,
    numeric_code_of,
    resolve,
)
from exact_money.errors import (
    AmountOutOfRange,
    CurrencyMismatch,
    DivisionByZero,
    InvalidAmount,
    InvalidCurrency,
    InvalidOperand,
    MoneyError,
    NonIntegerAmount,
    TooManyDecimalPlaces,
)
from exact_money.money import Money
from exact_money.rounding import RoundingMode

__all__ = [
    "Money",
    "Currency",
    "CurrencyLike",
    "RoundingMode",
    "CURRENCIES",
    "all_currencies",
    "is_known",
    "numeric_code_of",
    "resolve",
    "AUD",
    "CAD",
    "CHF",
    "CNY",
    "EUR",
    "GBP",
    "JPY",
    "USD",
    "MoneyError",
    "InvalidCurrency",
    "InvalidAmount",
    "NonIntegerAmount",
    "TooManyDecimalPlaces",
    "AmountOutOfRange",
    "InvalidOperand",
    "CurrencyMismatch",
    "DivisionByZero",
]
