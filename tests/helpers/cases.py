"""Shared string tables for parsing and formatting tests.

Usage:
    from tests.helpers import INVALID_STRINGS, VALID_MINIMAL_STRINGS
"""

# =============================================================================
# Rejected input
# =============================================================================

INVALID_STRINGS = [
    "",
    " ",
    ".",
    "-",
    "-.",
    "0.",
    "1.",
    "-1.",
    "1.2.3",
    "a",
    "0a",
    "a0",
    "0.2.",
    "0..2",
    "1..2",
    "01,33",
    " 0.2",
    " 0.2 ",
    "0.2 ",
    "0.2z",
    "z0.2",
    "0z.2",
    "0.z2",
    "0.-1",
    "--1",
    "+1",
    "1-",
    "1e5",
    "١",  # ARABIC-INDIC DIGIT ONE
    "1١",
]

# =============================================================================
# Canonical text (parse then format gives the same string)
# =============================================================================

VALID_MINIMAL_STRINGS = [
    "0",
    "1",
    "-1",
    "10",
    "-10",
    "109",
    "-109",
    "0.1",
    "-0.1",
    "0.01",
    "-0.01",
    "5.01",
    "-5.01",
    "50.01",
    "-50.01",
    "1234.987605",
    "-1234.987605",
    "0.0203405",
    "-0.0203405",
    "1.0203405",
    "-1.0203405",
]

# =============================================================================
# (text, numerator, denominator) after canonicalization
# =============================================================================

_LONG_PADDED = "0" * 68 + "12345678.90123456789" + "0" * 86

NUMERATOR_DENOMINATOR_CASES = [
    ("0", 0, 1),
    ("0.0", 0, 1),
    ("000000000000000000000.000000000000000000000", 0, 1),
    (".0", 0, 1),
    (".001", 1, 1000),
    ("1", 1, 1),
    ("1.0", 1, 1),
    ("2", 2, 1),
    ("10", 10, 1),
    ("01", 1, 1),
    ("001", 1, 1),
    ("001010", 1010, 1),
    ("0.1", 1, 10),
    ("1.1", 11, 10),
    ("2.1", 21, 10),
    ("0002.1000", 21, 10),
    (".1000", 1, 10),
    ("1000.1000", 10001, 10),
    ("12345678.90123456789", 1234567890123456789, 100000000000),
    (_LONG_PADDED, 1234567890123456789, 100000000000),
    ("-0", 0, 1),
    ("-0.0", 0, 1),
    ("-000000000000000000000.000000000000000000000", 0, 1),
    ("-.0", 0, 1),
    ("-.001", -1, 1000),
    ("-1", -1, 1),
    ("-1.0", -1, 1),
    ("-2", -2, 1),
    ("-10", -10, 1),
    ("-01", -1, 1),
    ("-001", -1, 1),
    ("-001010", -1010, 1),
    ("-0.1", -1, 10),
    ("-1.1", -11, 10),
    ("-2.1", -21, 10),
    ("-0002.1000", -21, 10),
    ("-.1000", -1, 10),
    ("-1000.1000", -10001, 10),
    ("-12345678.90123456789", -1234567890123456789, 100000000000),
    ("-" + _LONG_PADDED, -1234567890123456789, 100000000000),
]
