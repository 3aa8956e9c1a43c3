from __future__ import annotations

import math
from enum import Enum
from fractions import Fraction
from typing import Callable, TypeAlias

from exact_money.errors import InvalidAmount, NonIntegerAmount
from exact_money.utils.decimal_tools import as_finite_decimal, as_fraction


class RoundingMode(Enum):
    """Strategies for turning a fractional minor-unit amount into an integer."""

    NEAREST = "NEAREST"  # ties away from zero
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_EVEN = "HALF_EVEN"
    DOWN = "DOWN"  # towards zero


# A `RoundingMode` or any callable like `math.ceil` / `math.floor`
Rounding: TypeAlias = RoundingMode | Callable[[Fraction], int]

DEFAULT_ROUNDING = RoundingMode.NEAREST


def _round_with_mode(value: Fraction, mode: RoundingMode) -> int:
    floor = math.floor(value)
    remainder = value - floor
    if remainder == 0:
        return floor

    # 0 < remainder < 1 from here on
    if mode is RoundingMode.FLOOR:
        return floor
    if mode is RoundingMode.CEILING:
        return floor + 1
    if mode is RoundingMode.DOWN:
        return floor if value > 0 else floor + 1

    doubled = remainder * 2
    if doubled != 1:
        return floor + 1 if doubled > 1 else floor

    # Exact tie
    if mode is RoundingMode.NEAREST:
        return floor + 1 if value > 0 else floor
    return floor if floor % 2 == 0 else floor + 1


def apply_rounding(value: Fraction, rounding: Rounding = DEFAULT_ROUNDING) -> int:
    """Round the exact $value to an integer using $rounding.

    Args:
        value: Exact fractional amount in minor units.
        rounding: `RoundingMode` member or a callable returning a whole number.
            The callable receives the exact `Fraction`, so `math.ceil` / `math.floor` work.

    Returns:
        int: Rounded amount.

    Raises:
        TypeError: If $rounding is neither a `RoundingMode` nor callable.
        NonIntegerAmount: If a callable $rounding returns a fractional number.
    """
    value = Fraction(value)

    if isinstance(rounding, RoundingMode):
        return _round_with_mode(value, rounding)

    if not callable(rounding):
        raise TypeError(f"$rounding must be a RoundingMode or a callable, but provided value is: {rounding!r}")

    result = rounding(value)
    if isinstance(result, int) and not isinstance(result, bool):
        return result

    if isinstance(result, str):
        raise NonIntegerAmount(f"$rounding must return a number, but returned: {result!r}")

    # Accept whole Fractions / floats / Decimals from custom rounding functions
    try:
        result_fraction = result if isinstance(result, Fraction) else as_fraction(as_finite_decimal(result, "rounding result"))
    except InvalidAmount as e:
        raise NonIntegerAmount(f"$rounding must return a whole number, but returned: {result!r}") from e

    if result_fraction.denominator != 1:
        raise NonIntegerAmount(f"$rounding must return a whole number, but returned: {result!r}")

    return result_fraction.numerator
