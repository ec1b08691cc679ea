from __future__ import annotations

from decimals.rounding.integer import _require_int64

DEFAULT_SEP = ","


def _require_sep(value: object, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} は空でない文字列である必要があります")
    return value


def _group_digits(value: int, sep: str) -> str:
    # 桁数の制限なし。int64 の検査は呼び出し側で行う
    text = f"{value:,}"
    return text if sep == DEFAULT_SEP else text.replace(DEFAULT_SEP, sep)


def format_thousands(x: int, sep: str = DEFAULT_SEP) -> str:
    """整数を 3 桁区切りの文字列にする。丸めは行わない。

    >>> format_thousands(-1234)
    '-1,234'
    """
    x = _require_int64(x, "x")
    sep = _require_sep(sep, "sep")
    return _group_digits(x, sep)
