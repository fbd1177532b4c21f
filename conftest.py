"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults for the target site so a fresh clone runs as-is
  - Keep behavior explicit and discoverable

Important:
  Values below are defaults only. Any variable already set by the user or CI wins.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from dsl_tools.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _env_defaults() -> Generator[None, None, None]:
    """Point the UI suite at the public demoqa.com site unless configured otherwise."""
    defaults = {
        "DEMOQA_PROTOCOL": "https",
        "DEMOQA_URL": "demoqa.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Route DSL messages through the configured loguru sink."""
    init_logger()
