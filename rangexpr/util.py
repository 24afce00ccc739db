"""Utility constants and helpers for rangexpr.

Bounds are plain numbers: finite bounds are ints, unbounded sides are the
float infinities below.
"""

import math
import sys
from numbers import Real

# Unbounded sides
POS_INF = math.inf
NEG_INF = -math.inf

# Largest integer a float can hold exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9007199254740991

# Slice arguments that select nothing when a bound sits on the wrong infinity
SLICE_PAST_END = sys.maxsize
SLICE_BEFORE_START = -sys.maxsize - 1


def is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_finite(value: int | float) -> bool:
    return not (isinstance(value, float) and math.isinf(value))


def normalize_bound(value: int | float) -> int | float:
    """Round a finite bound to the nearest integer; infinities pass through.

    Raises:
        TypeError: If value is not a real number (bools are rejected too)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"Range bound must be an int or float.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if isinstance(value, int):
        return value
    if math.isinf(value):
        return float(value)
    return round(value)


def is_safe_integer(value: object) -> bool:
    """True for ints and for integral floats that a float represents exactly."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
    return False


def fits_literal(value: int | float) -> bool:
    """True if the bound can be written out in decimal.

    Python caps int-to-str conversion (`sys.get_int_max_str_digits()`), so
    bounds past that cap could never be rendered or parsed back.
    """
    if not isinstance(value, int):
        return True
    try:
        str(value)
    except ValueError:
        return False
    return True
