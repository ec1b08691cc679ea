from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "decimals"
LOG_LEVEL_ENV = "DECIMALS_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def parse_log_level(raw_level: str | int | None, default: int = DEFAULT_LEVEL) -> int:
    if raw_level is None:
        return default
    if isinstance(raw_level, int) and not isinstance(raw_level, bool):
        return raw_level
    if not isinstance(raw_level, str) or not raw_level.strip():
        return default

    normalized = raw_level.strip().upper()
    if normalized.isdigit():
        return int(normalized)

    parsed = logging.getLevelName(normalized)
    if isinstance(parsed, int):
        return parsed
    return default


class _DecimalsStreamHandler(logging.StreamHandler):
    """configure_logging が追加したハンドラの目印。"""


def configure_logging(level: str | int | None = None) -> int:
    """decimals ロガーに stderr ハンドラを 1 つだけ設定し、採用したレベルを返す。

    level が無ければ環境変数 DECIMALS_LOG_LEVEL、それも無ければ WARNING。
    stdout は CLI の出力に使うため、ログは stderr に出す。
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
    resolved = parse_log_level(level)

    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if isinstance(handler, _DecimalsStreamHandler):
            package_logger.removeHandler(handler)

    handler = _DecimalsStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.setLevel(resolved)
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved)
    return resolved
