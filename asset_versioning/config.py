"""Load the asset packaging configuration (assets.yml)."""
from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .domain.policy import AssetsConfig
from .logging_conf import get_logger

__all__ = [
    "CONFIG_ENV",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "config_path_from_env",
    "load_assets_config",
]

logger = get_logger("config")

CONFIG_ENV = "ASSETS_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "assets.yml"


class ConfigError(ValueError):
    """Raised when assets.yml cannot be turned into an AssetsConfig.

    The `code` attribute gives callers a stable machine-readable reason.
    """

    code: str = "invalid_config"


def config_path_from_env() -> Path:
    """Return $ASSETS_CONFIG, or config/assets.yml when unset."""
    raw = os.getenv(CONFIG_ENV)
    return Path(raw) if raw else DEFAULT_CONFIG_PATH


def _coerce_newlines(raw: str) -> str:
    return raw.replace("\r\n", "\n").replace("\r", "\n")


def load_assets_config(path: str | Path | None = None) -> AssetsConfig:
    """Parse assets.yml into an AssetsConfig.

    Raises:
        FileNotFoundError: if the file does not exist.
        ConfigError: if the YAML is unreadable, not a mapping, or fails validation.
    """
    p = Path(path) if path is not None else config_path_from_env()
    raw = p.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(_coerce_newlines(raw))
    except yaml.YAMLError as e:
        raise ConfigError(f"{p}: not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a mapping at the top level, got {type(data).__name__}")

    try:
        config = AssetsConfig.from_mapping(data)
    except ValidationError as e:
        raise ConfigError(f"{p}: {e}") from e

    logger.info(
        "config.loaded",
        extra={
            "event": "config_loaded",
            "path": str(p),
            "package_assets": config.package_assets,
            "strategy": config.versioning_strategy.value,
        },
    )
    return config
