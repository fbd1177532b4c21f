"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the end-to-end DSL tests, providing fixtures
for browser management, the DSL, page objects and test data.

Key Features:
- Browser and page lifecycle management
- Dsl and Page Object fixtures
- Screenshot capture on failure
- Opt-in execution: the suite talks to demoqa.com and only runs with UI_E2E=1

================================================================================
"""

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
from playwright.async_api import BrowserContext, Page

from dsl_tools.common import compose_base_url
from dsl_tools.fixture_readers import read_json_fixture
from dsl_tools.report_tools import attach_png
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.configuration import Configuration
from testsuites.ui_testing.framework.dsl import Dsl
from testsuites.ui_testing.pages.practice_form_page import PracticeFormPage
from testsuites.ui_testing.pages.text_box_page import TextBoxPage

FIXTURES_DIR = Path(__file__).resolve().parents[3] / "fixtures"

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_collection_modifyitems(config, items):
    """Skip the end-to-end suite unless UI_E2E=1."""
    if os.getenv("UI_E2E") == "1":
        return
    skip_e2e = pytest.mark.skip(reason="set UI_E2E=1 to run browser tests against demoqa.com")
    ui_dir = Path(__file__).parent
    for item in items:
        if ui_dir in item.path.parents:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item (``item.rep_call``) for fixtures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """Browser manager configured from config/config.yaml."""
    manager = BrowserManager.from_config()
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Isolated browser context for each test."""
    context = await browser_manager.new_context()
    yield context


@pytest.fixture
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    New page for each test.

    Attaches a full-page screenshot to the Allure report when the test body fails.
    """
    page = await context.new_page()
    yield page
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and not page.is_closed():
        attach_png(await page.screenshot(full_page=True), name="failure_screenshot")


@pytest.fixture
def base_url() -> str:
    return compose_base_url()


# ================================================================================
# DSL and Page Object Fixtures
# ================================================================================

@pytest.fixture
def dsl(page: Page, context: BrowserContext) -> Dsl:
    return Dsl(page, context, Configuration.from_loader())


@pytest.fixture
def text_box_page(page: Page, dsl: Dsl, base_url: str) -> TextBoxPage:
    return TextBoxPage(page, dsl, base_url)


@pytest.fixture
def practice_form_page(page: Page, dsl: Dsl, base_url: str) -> PracticeFormPage:
    return PracticeFormPage(page, dsl, base_url)


# ================================================================================
# Test Data Fixtures
# ================================================================================

@pytest.fixture
def test_data() -> dict:
    """Static form values from fixtures/json/test-data.json."""
    return read_json_fixture(FIXTURES_DIR / "json" / "test-data.json")["testData"]


@pytest.fixture
def upload_file(tmp_path: Path, test_data: dict) -> Path:
    """A small picture to upload, named as the fixture data expects."""
    path = tmp_path / test_data["uploadFile"]
    path.write_bytes(PNG_BYTES)
    return path
