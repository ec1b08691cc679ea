"""設定読み込みとスキーマ定義。"""

from .config import (
    ALLOWED_LOG_LEVELS,
    ALLOWED_SECTIONS,
    ConfigError,
    DecimalsConfig,
    FormatConfig,
    LoggingConfig,
    load_config,
    normalize_config,
)

__all__ = [
    "ALLOWED_LOG_LEVELS",
    "ALLOWED_SECTIONS",
    "ConfigError",
    "DecimalsConfig",
    "FormatConfig",
    "LoggingConfig",
    "load_config",
    "normalize_config",
]
