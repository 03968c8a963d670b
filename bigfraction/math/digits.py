"""Integer helpers for decimal digit handling.

Python caps ``int(str)`` and ``str(int)`` at 4300 digits by default. A
BigFraction may carry up to MAX_POWER_OF_TEN fractional digits and a whole part
of any length, so long digit runs are converted in fixed-size chunks using the
shared power-of-ten cache instead of changing interpreter settings.
"""

from __future__ import annotations

from bigfraction.constants import DIGIT_CHUNK_SIZE
from bigfraction.math.powers import get_power_of_ten

__all__ = [
    "div_trunc",
    "int_to_digits",
    "digits_to_int",
    "format_int",
]


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity, which differs from
    truncation whenever the operands have different signs.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        -7 // 3 = -3, div_trunc(-7, 3) = -2
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def int_to_digits(value: int) -> str:
    """Render a non-negative integer as base-10 digits.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"int_to_digits requires a non-negative value, got {value}")

    chunk = get_power_of_ten(DIGIT_CHUNK_SIZE)
    if value < chunk:
        return str(value)

    parts: list[str] = []
    while value >= chunk:
        value, low = divmod(value, chunk)
        parts.append(str(low).zfill(DIGIT_CHUNK_SIZE))
    parts.append(str(value))
    parts.reverse()
    return "".join(parts)


def digits_to_int(digits: str) -> int:
    """Parse a run of ASCII digits (no sign) into an integer.

    The caller is responsible for validating the characters.
    """
    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    chunk = get_power_of_ten(DIGIT_CHUNK_SIZE)
    head = len(digits) % DIGIT_CHUNK_SIZE or DIGIT_CHUNK_SIZE
    value = int(digits[:head])
    for start in range(head, len(digits), DIGIT_CHUNK_SIZE):
        value = value * chunk + int(digits[start : start + DIGIT_CHUNK_SIZE])
    return value


def format_int(value: int) -> str:
    """Render a signed integer in base 10."""
    if value < 0:
        return "-" + int_to_digits(-value)
    return int_to_digits(value)
