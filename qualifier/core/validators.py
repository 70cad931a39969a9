"""
Input Validators - Type checks for untyped JSON values.

JSON decoding yields bool, int, float, str, list, dict and None.
These helpers decide which of those count as the value types the
operations accept. bool is an int subclass in Python but a distinct
type in JSON, so it never counts as a number.
"""
import math
from typing import Any


def is_number(value: Any) -> bool:
    """Check that a decoded JSON value is a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_number_array(value: Any) -> bool:
    """Check that a decoded JSON value is an array of numbers."""
    return isinstance(value, list) and all(is_number(item) for item in value)


def is_text(value: Any) -> bool:
    """Check that a decoded JSON value is a string."""
    return isinstance(value, str)


def wrap_signed(value: int, bits: int) -> int:
    """Wrap an integer into the two's-complement range of the given width."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def truncate_number(value: float, bits: int) -> int:
    """
    Truncate a JSON number to a signed integer of the given width.

    Mirrors an integer cast: floats drop their fraction and saturate
    at the range bounds (NaN becomes 0), integers wrap.

    Args:
        value: int or float from the request body
        bits: Target width, 32 or 64

    Returns:
        Truncated integer
    """
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if value >= high:
            return high
        if value <= low:
            return low
        return int(value)
    return wrap_signed(int(value), bits)
