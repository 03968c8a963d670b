"""Text output for BigFraction values.

Every formatter produces the canonical, round-trippable form: no leading zero
padding on the whole part (other than a single "0"), no trailing zero on the
fractional part, and a "-0" whole part when a negative value is smaller than
one in magnitude. Output never depends on locale and only uses the characters
``-0123456789.``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bigfraction.errors import DecimalCountError
from bigfraction.math.digits import format_int

if TYPE_CHECKING:
    from bigfraction.fraction import BigFraction

__all__ = [
    "format_fraction",
    "format_truncated",
    "try_write_chars",
]


def _whole_part(value: BigFraction) -> str:
    """Whole part text for a value that has fractional digits."""
    if value.whole_number == 0:
        return "-0" if value.numerator < 0 else "0"
    return format_int(value.whole_number)


def format_fraction(value: BigFraction) -> str:
    """Return the full canonical text of value."""
    if value.is_zero:
        return "0"
    decimals = value.decimal_string
    if not decimals:
        return format_int(value.whole_number)
    return f"{_whole_part(value)}.{decimals}"


def format_truncated(value: BigFraction, max_decimals: int) -> str:
    """Return value's text with at most max_decimals fractional digits.

    Digits beyond max_decimals are dropped (not rounded), along with any
    zeros the cut leaves at the end.

    Args:
        value: Value to format
        max_decimals: Maximum number of fractional digits to keep

    Returns:
        Canonical text of the truncated value

    Raises:
        DecimalCountError: If max_decimals is negative
    """
    if max_decimals < 0:
        raise DecimalCountError(f"max_decimals must be non-negative, got {max_decimals}")
    if value.is_zero:
        return "0"

    kept = value.decimal_string[:max_decimals].rstrip("0")
    if not kept:
        return format_int(value.whole_number)
    return f"{_whole_part(value)}.{kept}"


def try_write_chars(value: BigFraction, buffer: bytearray | memoryview) -> tuple[bool, int]:
    """Write value's canonical text into a caller-supplied buffer as ASCII.

    The buffer is left untouched unless the whole text fits.

    Args:
        value: Value to format
        buffer: Writable byte buffer (bytearray or writable memoryview)

    Returns:
        (True, bytes_written) on success, (False, 0) if the buffer is too small
    """
    text = format_fraction(value)
    if len(buffer) < len(text):
        return False, 0
    buffer[: len(text)] = text.encode("ascii")
    return True, len(text)
