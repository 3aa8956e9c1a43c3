from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction
from numbers import Real
from typing import TypeAlias

from exact_money.errors import AmountOutOfRange, InvalidAmount

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Largest decimal exponent (in either direction) accepted for exact arithmetic
MAX_EXPONENT = 1000


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `10.01`
    becomes `Decimal("10.01")` and not its binary approximation.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def as_finite_decimal(value: object, name: str = "value") -> Decimal:
    """Convert $value to a finite `Decimal` or raise `InvalidAmount`.

    Booleans are rejected even though `bool` is a subclass of `int`. Strings are
    accepted only when they hold a plain numeric literal.

    Args:
        value: Candidate number (int, float, Decimal, other `Real`, or numeric str).
        name: Parameter name used in the error message.

    Returns:
        Finite `Decimal` equal to $value.

    Raises:
        InvalidAmount: If $value is not numeric or is NaN/infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal, str)):
        raise InvalidAmount(f"${name} must be a number, but provided value is: {value!r}")

    try:
        result = as_decimal(value if isinstance(value, (Decimal, int, float, str)) else float(value))
    except (ValueError, InvalidOperation) as e:
        raise InvalidAmount(f"${name} must be a number, but provided value is: {value!r}") from e

    if not result.is_finite():
        raise InvalidAmount(f"${name} must be finite, but provided value is: {value!r}")

    return result


def as_fraction(value: Decimal, name: str = "value") -> Fraction:
    """Convert a finite Decimal to an exact `Fraction`.

    No decimal context is involved, so nothing is rounded. The magnitude is bounded
    by `MAX_EXPONENT` to keep the numerator and denominator reasonably small.

    Args:
        value: Finite Decimal.
        name: Parameter name used in the error message.

    Returns:
        Fraction: Exactly the value of $value.

    Raises:
        AmountOutOfRange: If $value is larger than `10 ** MAX_EXPONENT`.
        InvalidAmount: If $value is non-zero and smaller than `10 ** -MAX_EXPONENT`.
    """
    if value.is_zero():
        return Fraction(0)

    # Raise: magnitude must stay within the supported exponent range
    if value.adjusted() > MAX_EXPONENT:
        raise AmountOutOfRange(f"${name} is too large, its decimal exponent exceeds {MAX_EXPONENT}: {value}")
    if value.adjusted() < -MAX_EXPONENT:
        raise InvalidAmount(f"${name} is too small, its decimal exponent is below -{MAX_EXPONENT}: {value}")

    return Fraction(value)


def fraction_digits(value: Decimal) -> int:
    """Count significant fractional digits of a finite Decimal, ignoring trailing zeros.

    Works on the digit tuple only, so it never rounds and costs nothing for huge exponents.

    Examples:
        >>> fraction_digits(Decimal("10.100"))
        1
        >>> fraction_digits(Decimal("1E+3"))
        0
    """
    _, digits, exponent = value.as_tuple()
    if exponent >= 0 or not any(digits):
        return 0

    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(0, -(exponent + trailing_zeros))
