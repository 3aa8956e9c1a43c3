from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal, localcontext
from typing import Any

from exact_money.currency import Currency
from exact_money.currency_registry import CurrencyLike, resolve
from exact_money.errors import (
    AmountOutOfRange,
    CurrencyMismatch,
    DivisionByZero,
    InvalidAmount,
    InvalidOperand,
    NonIntegerAmount,
    TooManyDecimalPlaces,
)
from exact_money.rounding import DEFAULT_ROUNDING, Rounding, apply_rounding
from exact_money.utils.decimal_tools import DecimalLike, as_finite_decimal, as_fraction, fraction_digits

logger = logging.getLogger(__name__)

# Precision for Decimal results (`to_decimal`, Money / Money ratio); minor-unit math is exact
DECIMAL_PRECISION = 28


class Money:
    """Immutable monetary amount stored as an integer count of minor units.

    The amount of `Money(1050, "EUR")` is 1050 cents, i.e. 10.50 EUR. All arithmetic
    works on integers (or exact `Fraction` intermediates), so there is
    no floating-point rounding error. Every operation returns a new instance.

    Supports amounts between `MIN_AMOUNT` and `MAX_AMOUNT` (signed 64-bit range).
    """

    __slots__ = ("_amount", "_currency")

    # Value limits
    MIN_AMOUNT = -(2**63)
    MAX_AMOUNT = 2**63 - 1

    def __init__(self, amount: int, currency: CurrencyLike):
        """Initialize Money with an amount in minor units and a currency.

        Args:
            amount: Whole number of minor units. Whole floats / Decimals are accepted.
            currency: `Currency`, currency code or numeric currency code.

        Raises:
            InvalidCurrency: If $currency cannot be resolved.
            InvalidAmount: If $amount is not a finite number.
            NonIntegerAmount: If $amount has a fractional part.
            AmountOutOfRange: If $amount does not fit into 64 bits.
        """
        currency_obj = resolve(currency)
        minor_units = self._as_minor_units(amount)

        object.__setattr__(self, "_amount", minor_units)
        object.__setattr__(self, "_currency", currency_obj)

    @classmethod
    def _as_minor_units(cls, amount: Any) -> int:
        if isinstance(amount, int) and not isinstance(amount, bool):
            result = amount
        else:
            # Raise: minor units are never parsed from text
            if isinstance(amount, str):
                raise InvalidAmount(f"$amount in minor units must be a number, but provided value is: {amount!r}")

            amount_fraction = as_fraction(as_finite_decimal(amount, "amount"), "amount")
            if amount_fraction.denominator != 1:
                raise NonIntegerAmount(f"$amount in minor units must be a whole number, but provided value is: {amount!r}")
            result = amount_fraction.numerator

        # Raise: amount must fit into the signed 64-bit range
        if not cls.MIN_AMOUNT <= result <= cls.MAX_AMOUNT:
            raise AmountOutOfRange(f"$amount must be between {cls.MIN_AMOUNT} and {cls.MAX_AMOUNT}, but provided value is: {result}")

        return result

    # region Factories

    @classmethod
    def from_minor_units(cls, amount: int, currency: CurrencyLike) -> Money:
        """Create Money from a whole number of minor units. Same as `Money(amount, currency)`."""
        return cls(amount, currency)

    @classmethod
    def from_integer(cls, amount: int | Mapping[str, Any], currency: CurrencyLike | None = None) -> Money:
        """Create Money from minor units, given positionally or as one record.

        Args:
            amount: Whole number of minor units, or a mapping
                `{"amount": <int>, "currency": <code or Currency>}`.
            currency: Currency, required unless $amount is a mapping.

        Returns:
            Money: New instance.

        Examples:
            >>> Money.from_integer(1151, "EUR").amount
            1151
            >>> Money.from_integer({"amount": 1151, "currency": "EUR"}).currency
            'EUR'
        """
        amount, currency = cls._unpack_record(amount, currency, "from_integer")
        return cls(amount, currency)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Money:
        """Create Money from its serialized form `{"amount": ..., "currency": ...}`.

        Raises:
            InvalidOperand: If $record is not a mapping or misses a key.
        """
        if not isinstance(record, Mapping):
            raise InvalidOperand(f"Cannot call `from_dict` because $record must be a mapping, but provided value is: {record!r}")
        return cls.from_integer(record)

    @classmethod
    def from_json(cls, text: str | bytes) -> Money:
        """Parse Money from JSON produced by `to_json`."""
        return cls.from_dict(json.loads(text))

    @classmethod
    def from_decimal(
        cls,
        amount: DecimalLike | Mapping[str, Any],
        currency: CurrencyLike | None = None,
        rounding: Rounding | None = None,
    ) -> Money:
        """Create Money from an amount in major units (e.g. euros, not cents).

        The amount is scaled by `10 ** decimal_digits` of the currency. The conversion
        must be exact unless $rounding is given: 10.42 EUR is fine, 10.421 EUR is not.

        Args:
            amount: Major-unit number or numeric string, or a mapping
                `{"amount": <number>, "currency": <code or Currency>}`.
            currency: Currency, required unless $amount is a mapping.
            rounding: Optional strategy used to round excess decimal places.
                If None, excess decimal places raise `TooManyDecimalPlaces`.

        Returns:
            Money: New instance.

        Raises:
            InvalidCurrency: If the currency cannot be resolved.
            InvalidAmount: If the amount is not a finite number.
            TooManyDecimalPlaces: If the amount is too precise and $rounding is None.
            AmountOutOfRange: If the amount does not fit into 64-bit minor units.

        Examples:
            >>> Money.from_decimal(10.01, "EUR").amount
            1001
            >>> Money.from_decimal({"amount": "11.5", "currency": "EUR"}).amount
            1150
        """
        amount, currency = cls._unpack_record(amount, currency, "from_decimal")
        currency_obj = resolve(currency)
        amount_decimal = as_finite_decimal(amount, "amount")

        # Raise: conversion must be exact unless a rounding strategy is given
        if rounding is None and fraction_digits(amount_decimal) > currency_obj.decimal_digits:
            raise TooManyDecimalPlaces(
                f"Cannot call `from_decimal` because $amount ({amount}) has more than {currency_obj.decimal_digits} decimal places allowed for {currency_obj.code}",
            )

        scaled = as_fraction(amount_decimal, "amount") * currency_obj.minor_unit_scale
        if scaled.denominator == 1:
            minor_units = scaled.numerator
        else:
            minor_units = apply_rounding(scaled, rounding)
            logger.debug(f"Rounded decimal amount {amount} {currency_obj.code} to {minor_units} minor units")

        return cls(minor_units, currency_obj)

    @classmethod
    def zero(cls, currency: CurrencyLike) -> Money:
        """Create Money with zero amount in $currency."""
        return cls(0, currency)

    @staticmethod
    def _unpack_record(amount: Any, currency: Any, operation: str) -> tuple[Any, Any]:
        if not isinstance(amount, Mapping):
            return amount, currency

        # Raise: currency is given either in the record or as argument, not both
        if currency is not None:
            raise InvalidOperand(f"Cannot call `{operation}` with a record and a separate $currency ({currency!r})")

        try:
            return amount["amount"], amount["currency"]
        except KeyError as e:
            raise InvalidOperand(f"Cannot call `{operation}` because the record has no key {e}") from e

    # endregion

    # region Properties

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency.code

    @property
    def currency_info(self) -> Currency:
        """Get the full `Currency` descriptor."""
        return self._currency

    # endregion

    # region Arithmetic

    def _with_amount(self, amount: int) -> Money:
        return self.__class__(amount, self._currency)

    def _check_operand(self, other: Any, operation: str) -> None:
        """Check that $other is Money in the same currency.

        Raises:
            InvalidOperand: If $other is not Money.
            CurrencyMismatch: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise InvalidOperand(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")
        if self._currency != other._currency:
            raise CurrencyMismatch(f"Cannot call `{operation}` on different currencies: {self.currency} and {other.currency}")

    def add(self, other: Money) -> Money:
        """Return the sum of two amounts in the same currency."""
        self._check_operand(other, "add")
        return self._with_amount(self._amount + other._amount)

    def subtract(self, other: Money) -> Money:
        """Return this amount minus $other, both in the same currency."""
        self._check_operand(other, "subtract")
        return self._with_amount(self._amount - other._amount)

    def multiply(self, factor: DecimalLike, rounding: Rounding = DEFAULT_ROUNDING) -> Money:
        """Multiply the amount by $factor and round the result to whole minor units.

        Args:
            factor: Any finite number; floats are taken by their shortest repr.
            rounding: `RoundingMode` or callable such as `math.ceil`. Defaults to
                rounding to nearest with ties away from zero.

        Returns:
            Money: New instance in the same currency.

        Examples:
            >>> Money(1000, "EUR").multiply(1.2234).amount
            1223
            >>> Money(1000, "EUR").multiply(1.2234, math.ceil).amount
            1224
        """
        factor_fraction = as_fraction(as_finite_decimal(factor, "factor"), "factor")

        product = self._amount * factor_fraction
        return self._with_amount(apply_rounding(product, rounding))

    def divide(self, divisor: DecimalLike, rounding: Rounding = DEFAULT_ROUNDING) -> Money:
        """Divide the amount by $divisor and round the result to whole minor units.

        Args:
            divisor: Any finite non-zero number.
            rounding: `RoundingMode` or callable such as `math.floor`.

        Returns:
            Money: New instance in the same currency.

        Raises:
            DivisionByZero: If $divisor is zero.
        """
        divisor_decimal = as_finite_decimal(divisor, "divisor")

        # Raise: divisor must not be zero
        if divisor_decimal == 0:
            raise DivisionByZero(f"Cannot call `divide` on {self!r} because $divisor is zero")

        quotient = self._amount / as_fraction(divisor_decimal, "divisor")
        return self._with_amount(apply_rounding(quotient, rounding))

    def allocate(self, ratios: Iterable[DecimalLike]) -> list[Money]:
        """Split the amount into parts proportional to $ratios without losing a minor unit.

        Each part first gets its proportional share rounded down. The leftover minor
        units are then given out one by one, starting with the first part.

        Args:
            ratios: Non-negative finite numbers with a positive sum.

        Returns:
            list[Money]: One part per ratio, in the same order. Parts sum to this amount.

        Raises:
            InvalidAmount: If a ratio is not a finite number.
            ValueError: If $ratios is empty, has a negative entry, or sums to zero.

        Examples:
            >>> [part.amount for part in Money(1000, "EUR").allocate([1, 1, 1])]
            [334, 333, 333]
        """
        # Fractions keep every share exact regardless of amount size
        ratio_values = [as_fraction(as_finite_decimal(ratio, "ratio"), "ratio") for ratio in ratios]

        # Raise: ratios must describe a non-degenerate split
        if not ratio_values:
            raise ValueError("Cannot call `allocate` because $ratios is empty")
        if any(ratio < 0 for ratio in ratio_values):
            raise ValueError(f"Cannot call `allocate` because $ratios contains a negative value: {[str(ratio) for ratio in ratio_values]}")
        total = sum(ratio_values)
        if total == 0:
            raise ValueError("Cannot call `allocate` because $ratios sum to zero")

        shares = [math.floor(self._amount * ratio / total) for ratio in ratio_values]

        remainder = self._amount - sum(shares)
        for index in range(remainder):
            shares[index] += 1

        logger.debug(f"Allocated {self!r} into {len(shares)} parts, {remainder} leftover minor unit(s) given by index order")
        return [self._with_amount(share) for share in shares]

    def negate(self) -> Money:
        """Return the amount with opposite sign."""
        return self._with_amount(-self._amount)

    def absolute(self) -> Money:
        """Return the absolute amount."""
        return self._with_amount(abs(self._amount))

    # endregion

    # region Comparison

    def equals(self, other: Any) -> bool:
        """Check whether $other is Money with the same amount and currency. Never raises."""
        if not isinstance(other, Money):
            return False
        return self._amount == other._amount and self._currency == other._currency

    def compare(self, other: Money) -> int:
        """Compare with Money in the same currency.

        Returns:
            int: -1 if this amount is smaller, 0 if equal, 1 if greater.

        Raises:
            InvalidOperand: If $other is not Money.
            CurrencyMismatch: If currencies don't match.
        """
        self._check_operand(other, "compare")
        return (self._amount > other._amount) - (self._amount < other._amount)

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Conversion

    def to_decimal(self) -> Decimal:
        """Return the amount in major units, e.g. `Decimal("10.10")` for 1010 cents.

        The result carries exactly `decimal_digits` fractional digits and compares
        equal to the natural value (`Decimal("10.1")`).
        """
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            return Decimal(self._amount).scaleb(-self._currency.decimal_digits)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form `{"amount": <int>, "currency": "<CODE>"}`."""
        return {"amount": self._amount, "currency": self._currency.code}

    def to_json(self) -> str:
        """Return compact JSON, e.g. `{"amount":1000,"currency":"EUR"}`."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    # endregion

    # region Python protocol

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        return self.equals(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    # Arithmetic operators
    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money), rounding to nearest."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        try:
            return self.multiply(other)
        except InvalidAmount:
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal ratio)."""
        if isinstance(other, Money):
            self._check_operand(other, "divide")
            if other._amount == 0:
                raise DivisionByZero("Cannot divide by zero Money")
            with localcontext() as ctx:
                ctx.prec = DECIMAL_PRECISION
                return Decimal(self._amount) / Decimal(other._amount)
        try:
            return self.divide(other)
        except InvalidAmount:
            return NotImplemented

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.absolute()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete attribute '{name}'")

    def __reduce__(self):
        return self.__class__, (self._amount, self._currency.code)

    # String representations
    def __str__(self) -> str:
        """Return fixed-point amount without currency, like '10.00'."""
        return f"{self.to_decimal():f}"

    def __repr__(self) -> str:
        """Return string like "Money(1000, 'EUR')"."""
        return f"{self.__class__.__name__}({self._amount}, '{self._currency.code}')"

    # endregion
