"""Rounding and formatting helpers for base ten numbers.

Integers are rounded to a power of ten and floats to a number of decimal
places, both with ties going away from zero. Results can be rendered with
thousands separators.
"""

from .formatting import format_float, format_int, format_thousands
from .rounding import INT64_MAX, INT64_MIN, round_float, round_int

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "format_float",
    "format_int",
    "format_thousands",
    "round_float",
    "round_int",
]
