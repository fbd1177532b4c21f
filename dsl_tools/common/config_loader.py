"""
================================================================================
Configuration Loader
================================================================================

Reads config/config.yaml. The file has three sections:

    dsl      - message prefixes, error toggle, element timeout
    logging  - loguru level, format and optional log file
    browser  - browser type and headless flag

An environment variable named after the upper-cased dotted path wins over the
file, e.g. ``DSL_ELEMENT_TIMEOUT=5000`` or ``BROWSER_HEADLESS=false``.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"

_TRUE_WORDS = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when the configuration file or a configured value is invalid."""
    pass


def env_key(dotted_key: str) -> str:
    """``dsl.element_timeout`` -> ``DSL_ELEMENT_TIMEOUT``"""
    return dotted_key.upper().replace(".", "_")


def _coerce(raw: str, like: Any) -> Any:
    # Environment values are strings; follow the type of the fallback value
    if isinstance(like, bool):
        return raw.strip().lower() in _TRUE_WORDS
    for kind in (int, float):
        if isinstance(like, kind):
            try:
                return kind(raw)
            except ValueError:
                return raw
    return raw


class ConfigLoader:
    """
    One parsed copy of the YAML file plus environment overrides.

    Not shared: each composition point builds its own loader.

    Usage:
        >>> loader = ConfigLoader()
        >>> loader.get("browser.type", "chromium")
        'chromium'
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._data: Dict[str, Any] = {}
        self.reload()

    @property
    def config_path(self) -> Path:
        return self._config_path

    def reload(self) -> None:
        """Re-read the YAML file."""
        if not self._config_path.exists():
            logger.warning(f"No configuration file at {self._config_path}, using defaults")
            self._data = {}
            return

        try:
            self._data = yaml.safe_load(self._config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {self._config_path}: {e}") from e
        logger.debug(f"Configuration read from {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value at a dotted path: environment first, then the file, then ``default``.
        """
        raw = os.environ.get(env_key(key))
        if raw is not None:
            return _coerce(raw, default)

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """Whole top-level section (empty dict if absent)."""
        return self._data.get(section) or {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "env_key",
]
