from __future__ import annotations

import math
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP

import numpy as np

from .integer import _require_int, _saturate, round_int


def _require_real(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"{name} は実数である必要があります: {value!r}")
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"{name} が float の範囲外です: {value}") from exc


def quantize_half_up(value: Decimal, precision: int) -> Decimal:
    """Decimal を小数 precision 桁へ ROUND_HALF_UP で量子化する。

    既定コンテキストの精度（28 桁）では桁数の大きい指定で InvalidOperation に
    なるため、必要な桁数を持つローカルコンテキストで計算する。
    """
    quantum = Decimal(1).scaleb(-precision)
    needed = max(value.adjusted(), 0) + max(precision, 0) + 2
    ctx = Context(prec=max(needed, 28), rounding=ROUND_HALF_UP)
    try:
        return value.quantize(quantum, context=ctx)
    except InvalidOperation as exc:
        raise ValueError(f"丸めに失敗しました: {value} (precision={precision})") from exc


def round_float(x: float, precision: int) -> float:
    """float を小数 precision 桁へ四捨五入する（0.5 はゼロから遠い側へ）。

    0.5 ちょうどかどうかは double の最短 10 進表現（repr）で判定するため、
    55.555 は 55.56 になる。

    負の precision では小数部を切り捨てて整数にしてから round_int に委譲する。
    そのため -0.6 を precision=-1 で丸めると -1 や -10 ではなく 0 になる。
    小数部を四捨五入せずに捨てる挙動は直感に反するが、互換性のため維持している。

    整数部が int64 の範囲を超える場合は INT64_MIN / INT64_MAX に飽和させてから丸める。

    nan / inf はそのまま返す。
    """
    x = _require_real(x, "x")
    precision = _require_int(precision, "precision")
    if not math.isfinite(x):
        return x

    if precision < 0:
        truncated = _saturate(int(x), "round_float")
        return float(round_int(truncated, precision))

    rounded = quantize_half_up(Decimal(repr(x)), precision)
    # Decimal は符号付きゼロを保持するので -0.001 -> -0.0 になる
    return float(rounded)
