from __future__ import annotations


class Currency:
    """Represents a currency with code, minor-unit precision, and metadata.

    Instances are immutable. Two currencies are equal when their codes are equal.

    Attributes:
        code (str): ISO 4217 alphabetic code (e.g., "USD", "EUR").
        decimal_digits (int): Number of decimal places of the minor unit (0-8).
        name (str): Full currency name.
        symbol (str): Display symbol (e.g., "$", "€").
        numeric_code (str): ISO 4217 three-digit numeric code (e.g., "978").
    """

    __slots__ = ("_code", "_decimal_digits", "_name", "_symbol", "_numeric_code")

    def __init__(self, code: str, decimal_digits: int, name: str, symbol: str, numeric_code: str):
        """Initialize a Currency instance.

        Args:
            code (str): Alphabetic currency code.
            decimal_digits (int): Number of decimal places (0-8).
            name (str): Full currency name.
            symbol (str): Display symbol.
            numeric_code (str): Three-digit numeric code.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Raise: $code must be alphabetic
        if not isinstance(code, str) or not code.strip().isalpha():
            raise ValueError(f"$code must be a non-empty alphabetic string, but provided value is: '{code}'")

        # Raise: $decimal_digits must be a small non-negative integer
        if isinstance(decimal_digits, bool) or not isinstance(decimal_digits, int) or not 0 <= decimal_digits <= 8:
            raise ValueError(f"$decimal_digits must be an integer between 0 and 8, but provided value is: {decimal_digits}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        # Raise: $numeric_code must be exactly three digits
        if not isinstance(numeric_code, str) or len(numeric_code) != 3 or not numeric_code.isdigit():
            raise ValueError(f"$numeric_code must be a three-digit string, but provided value is: '{numeric_code}'")

        object.__setattr__(self, "_code", code.upper().strip())
        object.__setattr__(self, "_decimal_digits", decimal_digits)
        object.__setattr__(self, "_name", name.strip())
        object.__setattr__(self, "_symbol", symbol)
        object.__setattr__(self, "_numeric_code", numeric_code)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def decimal_digits(self) -> int:
        """Get the number of decimal places of the minor unit."""
        return self._decimal_digits

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def numeric_code(self) -> str:
        """Get the ISO 4217 numeric code."""
        return self._numeric_code

    @property
    def minor_unit_scale(self) -> int:
        """Number of minor units in one major unit, i.e. `10 ** decimal_digits`."""
        return 10**self._decimal_digits

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete attribute '{name}'")

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.decimal_digits}, '{self.name}', '{self.symbol}', '{self.numeric_code}')"

    def __reduce__(self):
        # Slots are read-only, so copy/pickle must go through __init__
        return self.__class__, (self._code, self._decimal_digits, self._name, self._symbol, self._numeric_code)
