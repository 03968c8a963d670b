"""Text input for BigFraction values.

Accepted grammar: an optional leading "-", then ASCII digits with at most one
"." that is not the last character. A leading "." is fine (".5", "-.5").
Leading zeros and fractional trailing zeros are ignored, and any all-zero
input, signed or not, is zero. Nothing else is accepted: no "+", no
whitespace, no exponent, no group separators, no non-ASCII digits.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from bigfraction.constants import DIGITS
from bigfraction.errors import FractionFormatError, FractionRangeError
from bigfraction.fraction import ZERO, BigFraction
from bigfraction.math.digits import digits_to_int

__all__ = [
    "ParsedFraction",
    "scan_fraction",
    "parse",
    "try_parse",
    "try_parse_default",
]

logger = structlog.get_logger()


@dataclass(frozen=True)
class ParsedFraction:
    """Canonical parts read from text.

    Attributes:
        decimal_string: Fractional digits without trailing zeros
        whole_number: Signed integer part
        numerator: Signed value scaled by 10^len(decimal_string)
    """

    decimal_string: str
    whole_number: int
    numerator: int


_ZERO_PARTS = ParsedFraction("", 0, 0)

# "1".."9" need no integer parsing at all
_SINGLE_DIGITS: dict[str, int] = {str(digit): digit for digit in range(1, 10)}


def scan_fraction(text: str) -> ParsedFraction | None:
    """Validate text and split it into canonical parts.

    Returns:
        ParsedFraction, or None if text is not a valid decimal fraction
    """
    if not text:
        return None

    negative = text[0] == "-"
    body = text[1:] if negative else text
    if not body:
        return None

    body = body.lstrip("0")
    if not body:
        return _ZERO_PARTS

    if len(body) == 1:
        digit = _SINGLE_DIGITS.get(body)
        if digit is None:
            return None
        if negative:
            digit = -digit
        return ParsedFraction("", digit, digit)

    point = -1
    last = len(body) - 1
    for index, char in enumerate(body):
        if char in DIGITS:
            continue
        if char != "." or point != -1 or index == last:
            return None
        point = index

    if point == -1:
        whole = digits_to_int(body)
        if negative:
            whole = -whole
        return ParsedFraction("", whole, whole)

    # The point is never last, so stripping stops at it at the latest
    body = body.rstrip("0")
    whole_digits = body[:point]
    decimal_string = body[point + 1 :]
    if not whole_digits and not decimal_string:
        return _ZERO_PARTS

    whole = digits_to_int(whole_digits) if whole_digits else 0
    numerator = digits_to_int(whole_digits + decimal_string)
    if negative:
        return ParsedFraction(decimal_string, -whole, -numerator)
    return ParsedFraction(decimal_string, whole, numerator)


def _build(parts: ParsedFraction) -> BigFraction:
    if not parts.decimal_string:
        return BigFraction.from_int(parts.whole_number)
    return BigFraction._create(parts.decimal_string, parts.whole_number, parts.numerator)


def parse(text: str) -> BigFraction:
    """Parse text into a BigFraction.

    Args:
        text: Decimal text such as "12", "-0.05" or ".5"

    Returns:
        The canonical value

    Raises:
        TypeError: If text is None or not a string
        FractionFormatError: If text is not a valid decimal fraction
        PowerOutOfRangeError: If text has more than MAX_POWER_OF_TEN decimals
    """
    if text is None:
        raise TypeError("parse requires a string, got None")
    if not isinstance(text, str):
        raise TypeError(f"parse requires a string, got {type(text).__name__}")

    parts = scan_fraction(text)
    if parts is None:
        raise FractionFormatError(f"Invalid decimal fraction: {text!r}")
    return _build(parts)


def try_parse(text: str | None) -> tuple[bool, BigFraction]:
    """Parse text without raising.

    None, non-string, malformed and over-long input all fail.

    Returns:
        (True, value) on success, (False, ZERO) on failure
    """
    if not isinstance(text, str):
        return False, ZERO
    parts = scan_fraction(text)
    if parts is None:
        return False, ZERO
    try:
        return True, _build(parts)
    except FractionRangeError:
        return False, ZERO


def try_parse_default(text: str | None, default: BigFraction | None = None) -> BigFraction:
    """Parse text, falling back to default (ZERO if omitted) on failure."""
    success, value = try_parse(text)
    if success:
        return value
    fallback = ZERO if default is None else default
    logger.debug("fraction_parse_fallback", text_length=len(text) if isinstance(text, str) else None)
    return fallback
