"""3 桁区切りの数値フォーマット。"""

from .numbers import DEFAULT_POINT, format_float, format_int
from .thousands import DEFAULT_SEP, format_thousands

__all__ = [
    "DEFAULT_POINT",
    "DEFAULT_SEP",
    "format_float",
    "format_int",
    "format_thousands",
]
