"""10 進の丸めユーティリティ。"""

from .floating import quantize_half_up, round_float
from .integer import INT64_MAX, INT64_MIN, round_int

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "quantize_half_up",
    "round_float",
    "round_int",
]
