"""Test-data fixture readers."""

from .excel_reader import read_excel_fixture
from .json_reader import FixtureError, get_fixture_value, read_json_fixture

__all__ = [
    "FixtureError",
    "get_fixture_value",
    "read_excel_fixture",
    "read_json_fixture",
]
