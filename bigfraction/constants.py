"""Fixed constants for decimal fraction representation.

The power-of-ten ceiling bounds how many fractional digits a value may carry.
"""

# Largest power of ten the shared cache will produce, and therefore the
# longest fractional digit string a BigFraction may hold.
MAX_POWER_OF_TEN = 10000

# Fixed-notation fractional digits used when converting binary floats.
FLOAT_FORMAT_DIGITS = 20

# Python refuses int <-> str conversions past 4300 digits by default, so long
# digit runs are converted in chunks of this many digits.
DIGIT_CHUNK_SIZE = 1000

DIGITS = frozenset("0123456789")

# Every formatted value uses only these characters
OUTPUT_ALPHABET = frozenset("-0123456789.")
