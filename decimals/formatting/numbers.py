from __future__ import annotations

import math
from decimal import Decimal

from decimals.rounding import quantize_half_up, round_float, round_int
from decimals.rounding.integer import _require_int

from .thousands import DEFAULT_SEP, _group_digits, _require_sep, format_thousands

DEFAULT_POINT = "."


def format_int(x: int, precision: int, sep: str = DEFAULT_SEP) -> str:
    """整数を precision で丸めてから 3 桁区切りにする。"""
    return format_thousands(round_int(x, precision), sep=sep)


def format_float(
    x: float,
    precision: int,
    sep: str = DEFAULT_SEP,
    point: str = DEFAULT_POINT,
) -> str:
    """float を precision で丸め、整数部を 3 桁区切りにして返す。

    precision > 0 のときだけ小数点と小数 precision 桁（右ゼロ埋め）を付ける。
    整数部が 0 の負数は符号を残し（-0.5 -> "-0.50"）、丸めて 0 になった値には
    符号を付けない（-0.001 -> "0.00"）。nan / inf は "nan" / "inf" / "-inf"。
    """
    precision = _require_int(precision, "precision")
    sep = _require_sep(sep, "sep")
    point = _require_sep(point, "point")
    rounded = round_float(x, precision)

    if math.isnan(rounded):
        return "nan"
    if math.isinf(rounded):
        return "-inf" if rounded < 0 else "inf"

    # rounded は既に precision 桁なので、ここでの量子化はゼロ埋めのみ。
    # 1e19 のような int64 を超える整数部もそのまま区切る
    value = quantize_half_up(Decimal(repr(rounded)), max(precision, 0))
    # abs() は既定コンテキストの 28 桁で丸まる
    int_text, _, frac_text = f"{value.copy_abs():f}".partition(".")
    int_part = _group_digits(int(int_text), sep)
    sign = "-" if value < 0 else ""
    if precision <= 0:
        return f"{sign}{int_part}"
    return f"{sign}{int_part}{point}{frac_text}"
