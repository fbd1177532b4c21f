"""
================================================================================
Unit Test Fixtures
================================================================================

Fixtures wiring the Playwright doubles from ``fakes`` into a Dsl.

================================================================================
"""

from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from loguru import logger
from playwright.async_api import FrameLocator, Keyboard, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework import action_verifier
from testsuites.ui_testing.framework.configuration import Configuration
from testsuites.ui_testing.framework.dsl import Dsl

from .fakes import FakeElement, FakeExpect, make_locator


@pytest.fixture
def fake_expect(monkeypatch) -> FakeExpect:
    fake = FakeExpect()
    monkeypatch.setattr(action_verifier, "expect", fake)
    return fake


@pytest.fixture
def elements() -> Dict[str, MagicMock]:
    """Selector -> fake locator registry consulted by ``fake_page.locator``."""
    return {}


@pytest.fixture
def fake_page(elements) -> MagicMock:
    page = MagicMock(spec=Page)
    page.url = "about:blank"

    def locator(selector: str):
        if selector not in elements:
            elements[selector] = make_locator(FakeElement(count=0, visible=False), selector)
        return elements[selector]

    async def goto(url: str, **kwargs):
        page.url = url

    async def wait_for_url(predicate, timeout: Optional[float] = None, **kwargs):
        if not predicate(page.url):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for URL")

    page.locator.side_effect = locator
    page.goto.side_effect = goto
    page.wait_for_url.side_effect = wait_for_url
    page.frame_locator.return_value = MagicMock(spec=FrameLocator)
    page.keyboard = MagicMock(spec=Keyboard)
    return page


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        error_messages_toggle="enable",
        element_timeout=1000,
        dropdown_settle_wait=50,
    )


@pytest.fixture
def dsl(fake_page, fake_expect, config) -> Dsl:
    return Dsl(fake_page, config=config)


@pytest.fixture
def log_lines():
    """Collect loguru output as ``LEVEL|message`` strings."""
    lines: List[str] = []
    handler_id = logger.add(lambda message: lines.append(message.strip()), format="{level}|{message}")
    yield lines
    logger.remove(handler_id)
