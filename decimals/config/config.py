from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from decimals.formatting import DEFAULT_POINT, DEFAULT_SEP


ALLOWED_SECTIONS = {"format", "logging"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """設定の検証・読み込みで失敗した際の例外。"""


@dataclass(frozen=True)
class FormatConfig:
    int_precision: int = 0
    float_precision: int = 2
    thousands_sep: str = DEFAULT_SEP
    decimal_point: str = DEFAULT_POINT

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoggingConfig:
    # None は未指定。DECIMALS_LOG_LEVEL、それも無ければ WARNING を使う
    level: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DecimalsConfig:
    format: FormatConfig = field(default_factory=FormatConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format.to_dict(),
            "logging": self.logging.to_dict(),
        }


def _ensure_str(value: Any, field_name: str) -> str:
    # 区切り文字に空白を使えるよう strip はしない
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{field_name} は空でない文字列である必要があります")
    return value


def _ensure_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{field_name} は整数である必要があります")
    return value


def _section(raw: Any, name: str) -> Mapping[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{name} はマッピングである必要があります")
    return raw


def _normalize_format(raw: Any) -> FormatConfig:
    raw = _section(raw, "format")
    defaults = FormatConfig()
    int_precision = _ensure_int(raw.get("int_precision", defaults.int_precision), "format.int_precision")
    float_precision = _ensure_int(
        raw.get("float_precision", defaults.float_precision), "format.float_precision"
    )
    thousands_sep = _ensure_str(raw.get("thousands_sep", defaults.thousands_sep), "format.thousands_sep")
    decimal_point = _ensure_str(raw.get("decimal_point", defaults.decimal_point), "format.decimal_point")
    if thousands_sep == decimal_point:
        raise ConfigError("format.thousands_sep と format.decimal_point は異なる必要があります")
    return FormatConfig(
        int_precision=int_precision,
        float_precision=float_precision,
        thousands_sep=thousands_sep,
        decimal_point=decimal_point,
    )


def _normalize_logging(raw: Any) -> LoggingConfig:
    raw = _section(raw, "logging")
    if raw.get("level") is None:
        return LoggingConfig()
    level = _ensure_str(raw["level"], "logging.level").strip().upper()
    if level not in ALLOWED_LOG_LEVELS:
        raise ConfigError(f"logging.level は {sorted(ALLOWED_LOG_LEVELS)} のいずれかである必要があります")
    return LoggingConfig(level=level)


def normalize_config(raw: Any) -> DecimalsConfig:
    if not isinstance(raw, Mapping):
        raise ConfigError("設定はマッピングである必要があります")
    unknown = set(raw) - ALLOWED_SECTIONS
    if unknown:
        raise ConfigError(f"未知のセクションがあります: {sorted(map(str, unknown))}")

    return DecimalsConfig(
        format=_normalize_format(raw.get("format")),
        logging=_normalize_logging(raw.get("logging")),
    )


def load_config(path: str | Path) -> DecimalsConfig:
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigError(f"設定ファイルが見つかりません: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"設定ファイルの読み込みに失敗しました: {exc}") from exc

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAMLのパースに失敗しました: {exc}") from exc

    if raw is None:
        raise ConfigError("設定ファイルが空です")

    config = normalize_config(raw)
    logger.debug("loaded config from %s: %s", file_path, config.to_dict())
    return config
