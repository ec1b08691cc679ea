from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)
INT64_DIGITS = len(str(INT64_MAX))  # 19
# 繰り上がりで 1 桁増える分を含めた固定長バッファ
DIGIT_BUFFER_SIZE = INT64_DIGITS + 1


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} は整数である必要があります: {value!r}")
    return int(value)


def _require_int64(value: object, name: str) -> int:
    value = _require_int(value, name)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"{name} が int64 の範囲外です: {value}")
    return value


def _to_digits(magnitude: int) -> tuple[list[int], int]:
    """非負整数を下位桁から並べた桁バッファと桁数に分解する。"""
    digits = [0] * DIGIT_BUFFER_SIZE
    count = 0
    while magnitude:
        magnitude, digits[count] = divmod(magnitude, 10)
        count += 1
    # 0 も 1 桁として数える
    return digits, max(count, 1)


def _from_digits(digits: list[int], count: int) -> int:
    value = 0
    for i in range(count - 1, -1, -1):
        value = value * 10 + digits[i]
    return value


def _saturate(value: int, source: str = "round_int") -> int:
    if value > INT64_MAX:
        logger.warning("%s: %d が int64 上限を超えたため %d に飽和", source, value, INT64_MAX)
        return INT64_MAX
    if value < INT64_MIN:
        logger.warning("%s: %d が int64 下限を超えたため %d に飽和", source, value, INT64_MIN)
        return INT64_MIN
    return value


def round_int(x: int, precision: int) -> int:
    """整数 x を 10**(-precision) の倍数に四捨五入する（0.5 はゼロから遠い側へ）。

    precision が 0 以上なら x をそのまま返す。負の precision は丸め先の
    10 のべき乗を表す（-1 で十の位、-2 で百の位）。

    桁は固定長バッファ上で下位桁から走査し、繰り上がりは明示的な carry
    フラグで伝播させる。10**power で割って float で丸め直す方式のほうが
    短く書けるが、int64 上位の桁では float の表現誤差で結果がずれるため
    採用しない。

    丸めた結果が int64 の範囲を超える場合は INT64_MIN / INT64_MAX に飽和する
    （既知の制約: その値は 10**power の倍数にならない）。

    >>> round_int(999, -1)
    1000
    >>> round_int(-555, -2)
    -600
    """
    x = _require_int64(x, "x")
    precision = _require_int(precision, "precision")
    if precision >= 0:
        return x

    power = -precision
    negative = x < 0
    digits, count = _to_digits(-x if negative else x)

    if power > count:
        return 0

    if power == count:
        # 先頭桁のさらに 1 つ上の桁へ丸める
        if digits[count - 1] < 5:
            return 0
        magnitude = 10**power
    else:
        if digits[power - 1] >= 5:
            carry = True
            i = power
            while carry and i < count:
                if digits[i] == 9:
                    digits[i] = 0
                    i += 1
                else:
                    digits[i] += 1
                    carry = False
            if carry:
                # 999 -> 1000 のように最上位を越えた繰り上がり
                digits[count] = 1
                count += 1
        for i in range(power):
            digits[i] = 0
        magnitude = _from_digits(digits, count)

    return _saturate(-magnitude if negative else magnitude)
