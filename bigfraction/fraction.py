"""Arbitrary-precision decimal fraction.

BigFraction stores an exact base-10 value as three parts:
- whole_number: the integer part, carrying the sign
- numerator: the whole value scaled by 10^len(decimal_string)
- decimal_string: fractional digits, unsigned, never ending in "0"

Every value is kept in canonical form, so equality and hashing compare the
stored parts directly instead of normalizing on each call. All arithmetic
results pass through a single normalizing constructor.

Usage pattern:
    from bigfraction import BigFraction

    price = BigFraction("1.37")
    qty = BigFraction("0.13")
    total = price * qty + 2    # BigFraction('2.1781')
    str(total.truncate(2))     # '2.17'

There is deliberately no ``/`` operator: decimal division is not exact in
general. Use divide_pow10 for exact division by a power of ten.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import ClassVar

from bigfraction.config import DEFAULT_FRACTION_CONFIG, FractionConfig
from bigfraction.constants import MAX_POWER_OF_TEN
from bigfraction.errors import (
    CanonicalFormError,
    DecimalCountError,
    FractionFormatError,
    PowerOutOfRangeError,
)
from bigfraction.formatting import format_fraction, format_truncated, try_write_chars
from bigfraction.math.digits import digits_to_int, div_trunc, int_to_digits
from bigfraction.math.powers import POWERS_OF_TEN, get_power_of_ten

__all__ = [
    "BigFraction",
    "ZERO",
    "divide_pow10",
]


def _pow10(power: int) -> int:
    """10**power, using the shared cache whenever power is within its ceiling."""
    if power > POWERS_OF_TEN.max_power:
        return 10**power
    return get_power_of_ten(power)


class BigFraction:
    """Exact decimal fraction with arbitrary precision.

    Values are immutable and safe to share between threads. Integers and
    finite Decimals mix freely with fractions in arithmetic and comparisons;
    such an operand is promoted to a BigFraction first.

    Attributes:
        whole_number: Integer part, with the value's sign (read-only)
        numerator: Value times denominator (read-only)
        decimal_string: Fractional digits without trailing zeros (read-only)
        denominator: 10^len(decimal_string) (read-only)
    """

    MAX_POWER_OF_TEN: ClassVar[int] = MAX_POWER_OF_TEN
    ZERO: ClassVar[BigFraction]

    __slots__ = ("_decimals", "_whole", "_numerator")
    _decimals: str
    _whole: int
    _numerator: int

    def __init__(self, value: int | str | Decimal | BigFraction = 0) -> None:
        """Create a BigFraction from an int, text, Decimal or another BigFraction.

        Args:
            value: Value to convert (default: zero)

        Raises:
            TypeError: If value is a float or another unsupported type
            FractionFormatError: If value is text that does not parse
        """
        if isinstance(value, BigFraction):
            source = value
        elif isinstance(value, int):
            source = BigFraction.from_int(value)
        elif isinstance(value, str):
            source = BigFraction.parse(value)
        elif isinstance(value, Decimal):
            source = BigFraction.from_decimal(value)
        elif isinstance(value, float):
            raise TypeError("BigFraction does not convert floats implicitly; use BigFraction.from_float")
        else:
            raise TypeError(f"BigFraction requires int, str or Decimal, got {type(value).__name__}")
        self._decimals = source._decimals
        self._whole = source._whole
        self._numerator = source._numerator

    # --- Canonical constructors ---

    @classmethod
    def _create(cls, decimal_string: str, whole_number: int, numerator: int) -> BigFraction:
        """Build a value from parts that are already canonical.

        Raises:
            CanonicalFormError: If decimal_string ends in "0"
            PowerOutOfRangeError: If decimal_string is longer than MAX_POWER_OF_TEN
        """
        if decimal_string and decimal_string[-1] == "0":
            raise CanonicalFormError(f"Decimal digits must not end in zero: {decimal_string!r}")
        POWERS_OF_TEN.ensure(len(decimal_string))

        fraction = object.__new__(cls)
        fraction._decimals = decimal_string
        fraction._whole = whole_number
        fraction._numerator = numerator
        return fraction

    @classmethod
    def _from_scaled(cls, numerator: int, denominator_power: int) -> BigFraction:
        """Build the canonical value of numerator / 10^denominator_power.

        Trailing zeros of the fractional part are stripped and the numerator
        is reduced to match.
        """
        if numerator == 0:
            return ZERO

        negative = numerator < 0
        magnitude = -numerator if negative else numerator
        digits = int_to_digits(magnitude)

        whole_length = len(digits) - denominator_power
        if whole_length < 0:
            digits = digits.zfill(denominator_power)
            whole_length = 0

        decimal_string = digits[whole_length:].rstrip("0")
        trailing_zeros = len(digits) - whole_length - len(decimal_string)
        if trailing_zeros:
            magnitude //= _pow10(trailing_zeros)

        whole = digits_to_int(digits[:whole_length]) if whole_length else 0
        if negative:
            return cls._create(decimal_string, -whole, -magnitude)
        return cls._create(decimal_string, whole, magnitude)

    @classmethod
    def from_int(cls, value: int) -> BigFraction:
        """Create a whole-number fraction from an integer."""
        cached = _SMALL_WHOLES.get(value)
        if cached is not None:
            return cached
        return cls._create("", value, value)

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigFraction:
        """Create from a Decimal via its fixed-notation text.

        Raises:
            FractionFormatError: If value is NaN or infinite
        """
        if not value.is_finite():
            raise FractionFormatError(f"Cannot convert non-finite Decimal {value} to BigFraction")
        return cls.parse(format(value, "f"))

    @classmethod
    def from_float(cls, value: float, config: FractionConfig | None = None) -> BigFraction:
        """Create from a binary float via fixed-notation text.

        The float is rendered with config.float_format_digits fractional
        digits, so the result is the float's value truncated at that
        precision, never its shortest repr.

        Raises:
            FractionFormatError: If value is NaN or infinite
        """
        if not math.isfinite(value):
            raise FractionFormatError(f"Cannot convert non-finite float {value} to BigFraction")
        config = config or DEFAULT_FRACTION_CONFIG
        return cls.parse(format(value, f".{config.float_format_digits}f"))

    # --- Parsing ---

    @classmethod
    def parse(cls, text: str) -> BigFraction:
        """Parse text such as "-12.034" or ".5".

        Raises:
            TypeError: If text is None
            FractionFormatError: If text is not a valid decimal fraction
            PowerOutOfRangeError: If text has more than MAX_POWER_OF_TEN decimals
        """
        from bigfraction.parsing import parse

        return parse(text)

    @classmethod
    def try_parse(cls, text: str | None) -> tuple[bool, BigFraction]:
        """Parse text, returning (False, ZERO) instead of raising."""
        from bigfraction.parsing import try_parse

        return try_parse(text)

    @classmethod
    def try_parse_default(cls, text: str | None, default: BigFraction | None = None) -> BigFraction:
        """Parse text, returning default (ZERO if omitted) on failure."""
        from bigfraction.parsing import try_parse_default

        return try_parse_default(text, default)

    # --- Accessors ---

    @property
    def whole_number(self) -> int:
        return self._whole

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def decimal_string(self) -> str:
        return self._decimals

    @property
    def denominator(self) -> int:
        return get_power_of_ten(len(self._decimals))

    @property
    def is_zero(self) -> bool:
        return self._numerator == 0

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return (self._numerator > 0) - (self._numerator < 0)

    @staticmethod
    def get_power_of_ten(power: int) -> int:
        """Return 10^power from the shared cache.

        Raises:
            PowerOutOfRangeError: If power is negative or above MAX_POWER_OF_TEN
        """
        return get_power_of_ten(power)

    # --- Formatting ---

    def __repr__(self) -> str:
        return f"BigFraction('{format_fraction(self)}')"

    def __str__(self) -> str:
        return format_fraction(self)

    def to_string(self, max_decimals: int | None = None) -> str:
        """Return canonical text, optionally truncated to max_decimals digits.

        Raises:
            DecimalCountError: If max_decimals is negative
        """
        if max_decimals is None:
            return format_fraction(self)
        return format_truncated(self, max_decimals)

    def try_write(self, buffer: bytearray | memoryview) -> tuple[bool, int]:
        """Write canonical text into buffer; (False, 0) if it does not fit."""
        return try_write_chars(self, buffer)

    def __hash__(self) -> int:
        # Must match hash() of an equal int or Decimal
        if not self._decimals:
            return hash(self._whole)
        return hash(Fraction(self._numerator, self.denominator))

    # --- Arithmetic operations ---

    def _add(self, other: BigFraction) -> BigFraction:
        if self.is_zero:
            return other
        if other.is_zero:
            return self

        power = len(self._decimals)
        other_power = len(other._decimals)
        if power == other_power:
            numerator = self._numerator + other._numerator
        elif power < other_power:
            numerator = other._numerator + self._numerator * get_power_of_ten(other_power - power)
            power = other_power
        else:
            numerator = self._numerator + other._numerator * get_power_of_ten(power - other_power)

        if numerator == 0:
            return ZERO
        return BigFraction._from_scaled(numerator, power)

    def _mul(self, other: BigFraction) -> BigFraction:
        if self.is_zero or other.is_zero:
            return ZERO
        return BigFraction._from_scaled(
            self._numerator * other._numerator,
            len(self._decimals) + len(other._decimals),
        )

    def __add__(self, other: BigFraction | int | Decimal) -> BigFraction:
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return self._add(other_fraction)

    def __radd__(self, other: int | Decimal) -> BigFraction:
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return other_fraction._add(self)

    def __sub__(self, other: BigFraction | int | Decimal) -> BigFraction:
        """Subtract other from self (addition of the negation)."""
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return self._add(-other_fraction)

    def __rsub__(self, other: int | Decimal) -> BigFraction:
        """Subtract self from other (other - self)."""
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return other_fraction._add(-self)

    def __mul__(self, other: BigFraction | int | Decimal) -> BigFraction:
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return self._mul(other_fraction)

    def __rmul__(self, other: int | Decimal) -> BigFraction:
        other_fraction = _promote(other)
        if other_fraction is None:
            return NotImplemented
        return other_fraction._mul(self)

    def __neg__(self) -> BigFraction:
        """Negate the value. Negating zero returns ZERO."""
        if self.is_zero:
            return ZERO
        return BigFraction._create(self._decimals, -self._whole, -self._numerator)

    def __pos__(self) -> BigFraction:
        """Unary positive (returns self)."""
        return self

    def __abs__(self) -> BigFraction:
        """Absolute value."""
        return self if self._numerator >= 0 else -self

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigFraction):
            return self._numerator == other._numerator and self._decimals == other._decimals
        if isinstance(other, int):
            return not self._decimals and self._whole == other
        if isinstance(other, Decimal):
            if not other.is_finite():
                return False
            try:
                return self == BigFraction.from_decimal(other)
            except PowerOutOfRangeError:
                # More fractional digits than any BigFraction can hold
                return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def compare_to(self, other: BigFraction | int | Decimal) -> int:
        """Three-way comparison: -1, 0 or 1.

        Raises:
            TypeError: If other is not a BigFraction, int or finite Decimal
        """
        if isinstance(other, BigFraction):
            return self._compare_fraction(other)
        if isinstance(other, int):
            return self._compare_int(other)
        if isinstance(other, Decimal) and other.is_finite():
            return self._compare_fraction(BigFraction.from_decimal(other))
        raise TypeError(f"Cannot compare BigFraction with {type(other).__name__}")

    def _compare_fraction(self, other: BigFraction) -> int:
        if self._whole != other._whole:
            return -1 if self._whole < other._whole else 1

        # Same whole part of zero: -0.5 and 0.5 differ only in sign
        if self._whole == 0:
            sign, other_sign = self.sign, other.sign
            if sign != other_sign:
                return -1 if sign < other_sign else 1

        if self._decimals == other._decimals:
            return 0
        # Digit strings compare lexicographically; a longer string that shares
        # the shorter one as a prefix has the larger magnitude.
        result = 1 if self._decimals > other._decimals else -1
        return result if self._numerator >= 0 else -result

    def _compare_int(self, other: int) -> int:
        if self._whole != other:
            return -1 if self._whole < other else 1
        if self._decimals:
            return 1 if self._numerator >= 0 else -1
        return 0

    def __lt__(self, other: BigFraction | int | Decimal) -> bool:
        if not isinstance(other, (BigFraction, int, Decimal)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: BigFraction | int | Decimal) -> bool:
        if not isinstance(other, (BigFraction, int, Decimal)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: BigFraction | int | Decimal) -> bool:
        if not isinstance(other, (BigFraction, int, Decimal)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: BigFraction | int | Decimal) -> bool:
        if not isinstance(other, (BigFraction, int, Decimal)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._numerator != 0

    def __int__(self) -> int:
        """Whole part (truncates toward zero)."""
        return self._whole

    def __trunc__(self) -> int:
        return self._whole

    def __float__(self) -> float:
        return self.to_approximate_float()

    def to_approximate_float(self) -> float:
        """Nearest float, as chosen by float()'s own parser."""
        return float(format_fraction(self))

    def to_approximate_decimal(self) -> Decimal:
        """Decimal built from the canonical text."""
        return Decimal(format_fraction(self))

    def __copy__(self) -> BigFraction:
        return self

    def __deepcopy__(self, memo: dict) -> BigFraction:
        return self

    # --- Named operations ---

    def truncate(self, decimal_count: int) -> BigFraction:
        """Drop all fractional digits after the first decimal_count.

        Truncates toward zero: -1.26 truncated to 1 digit is -1.2.

        Raises:
            DecimalCountError: If decimal_count is negative
        """
        if decimal_count < 0:
            raise DecimalCountError(f"decimal_count must be non-negative, got {decimal_count}")
        if decimal_count >= len(self._decimals):
            return self

        kept = self._decimals[:decimal_count].rstrip("0")
        if not kept:
            return BigFraction.from_int(self._whole)
        dropped = len(self._decimals) - len(kept)
        return BigFraction._create(kept, self._whole, div_trunc(self._numerator, get_power_of_ten(dropped)))

    def divide_pow10(self, power: int) -> BigFraction:
        """Exact division by 10^power (moves the decimal point left).

        Raises:
            PowerOutOfRangeError: If power is negative, or the result would
                need more than MAX_POWER_OF_TEN fractional digits
        """
        if power < 0:
            raise PowerOutOfRangeError(f"Power must be non-negative, got {power}")
        if power == 0:
            return self
        if self.is_zero:
            return ZERO
        return BigFraction._from_scaled(self._numerator, len(self._decimals) + power)


def _promote(value: object) -> BigFraction | None:
    """Promote an int or finite Decimal operand to BigFraction, or None if it is not supported."""
    if isinstance(value, BigFraction):
        return value
    if isinstance(value, int):
        return BigFraction.from_int(value)
    if isinstance(value, Decimal) and value.is_finite():
        return BigFraction.from_decimal(value)
    return None


def divide_pow10(value: BigFraction | int | Decimal, power: int) -> BigFraction:
    """Exact division of an integer, Decimal or fraction by 10^power.

    Example:
        divide_pow10(-1010, 3) == BigFraction("-1.01")

    Raises:
        PowerOutOfRangeError: If power is negative
        TypeError: If value is not a BigFraction, int or finite Decimal
    """
    fraction = _promote(value)
    if fraction is None:
        raise TypeError(f"divide_pow10 requires BigFraction, int or Decimal, got {type(value).__name__}")
    return fraction.divide_pow10(power)


ZERO = BigFraction._create("", 0, 0)
BigFraction.ZERO = ZERO

_SMALL_WHOLES: dict[int, BigFraction] = {ZERO.numerator: ZERO}
for _digit in range(1, 10):
    _SMALL_WHOLES[_digit] = BigFraction._create("", _digit, _digit)
    _SMALL_WHOLES[-_digit] = BigFraction._create("", -_digit, -_digit)
del _digit
