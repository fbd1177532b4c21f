"""
================================================================================
DSL Tools Common Utilities
================================================================================

Shared configuration management, logging setup and environment helpers.

Exports:
    - ConfigLoader: YAML + environment configuration reader
    - ConfigurationError: Raised on unreadable configuration or missing env vars
    - init_logger: Loguru sink setup
    - get_env_variable / compose_base_url / current_time_unix: environment helpers

Usage:
    from dsl_tools.common import compose_base_url, init_logger

    init_logger()
    url = compose_base_url() + "/text-box"

================================================================================
"""

from .config_loader import DEFAULT_CONFIG_PATH, ConfigLoader, ConfigurationError
from .global_config import (
    compose_base_url,
    current_time_unix,
    get_env_variable,
    init_logger,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigLoader",
    "ConfigurationError",
    "compose_base_url",
    "current_time_unix",
    "get_env_variable",
    "init_logger",
]
