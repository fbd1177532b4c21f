"""
================================================================================
DSL Tools
================================================================================

Shared tooling for the Playwright DSL test framework.

Modules:
    - common: YAML configuration loading, Loguru setup and environment helpers
    - fixture_readers: JSON test-data fixtures
    - report_tools: Allure attachment helpers

Example:
    from dsl_tools.common import ConfigLoader, init_logger
    from dsl_tools.fixture_readers import read_json_fixture

    init_logger()
    timeout = ConfigLoader().get("dsl.element_timeout", 10000)
    data = read_json_fixture("fixtures/json/test-data.json")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "fixture_readers",
    "report_tools",
]
