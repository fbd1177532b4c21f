"""
JSON test-data fixtures.

Fixture files hold plain objects keyed by section, e.g.::

    {"testData": {"gender": "Male", "state": "NCR"}}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from loguru import logger


class FixtureError(Exception):
    """Raised when a fixture file or a value inside it cannot be read."""
    pass


def read_json_fixture(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a JSON fixture file.

    Args:
        file_path: Path to the ``.json`` file

    Returns:
        Parsed JSON object

    Raises:
        FixtureError: If the file is missing or is not valid JSON
    """
    path = Path(file_path)
    if not path.exists():
        raise FixtureError(f"Fixture file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FixtureError(f"Invalid JSON in fixture file {path}: {e}") from e

    logger.debug(f"Loaded fixture: {path}")
    return data


def get_fixture_value(data: Dict[str, Any], key: str) -> Any:
    """
    Read a value from fixture data by dot-notation path.

    Example:
        >>> get_fixture_value({"testData": {"gender": "Male"}}, "testData.gender")
        'Male'
    """
    value: Any = data
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            raise FixtureError(f"Fixture key not found: {key}")
    return value
