"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke_ui: Quick browser verification tests"
    )
    config.addinivalue_line(
        "markers", "regression_ui: Full browser regression suite"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the DSL and its tooling"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tags every test with 'unit' or 'ui' from the directory it lives in.
    """
    for item in items:
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Playwright DSL Automation Framework",
        "=" * 60,
        "",
    ]
