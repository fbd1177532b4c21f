"""
================================================================================
Global Configuration for DSL Tools
================================================================================

This module provides the process-wide pieces shared by every test run:
Loguru sink setup and environment helpers.

Features:
    - Centralized Loguru logging configuration
    - Environment variable lookup with explicit failure
    - Target URL composition from protocol/host variables

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader, ConfigurationError

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    loader: Optional[ConfigLoader] = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    This function should be called once at the start of a test session so that
    DSL messages land on the same sink with the same format.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        loader: Configuration source. A fresh ConfigLoader is used if omitted.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    loader = loader or ConfigLoader()

    log_level = level or loader.get("logging.level", "INFO")
    log_format = format_str or loader.get("logging.format", DEFAULT_LOG_FORMAT)

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = loader.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=loader.get("logging.rotation", "10 MB"),
            retention=loader.get("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_env_variable(name: str) -> str:
    """
    Read a required environment variable.

    Raises:
        ConfigurationError: If the variable is not set.
    """
    value = os.environ.get(name)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is not set.")
    return value


def compose_base_url(
    protocol_var: str = "DEMOQA_PROTOCOL",
    host_var: str = "DEMOQA_URL",
) -> str:
    """
    Build the target base URL from environment variables.

    Falls back to ``http`` and ``localhost`` when the variables are unset, so
    the default result is ``http://localhost``.
    """
    protocol = os.environ.get(protocol_var) or "http"
    host = os.environ.get(host_var) or "localhost"
    return f"{protocol}://{host.strip('/')}"


def current_time_unix() -> float:
    """Current time as seconds since the epoch."""
    return time.time()
