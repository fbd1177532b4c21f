"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

A page object holds a Dsl instead of inheriting from one: every interaction
goes through the verified DSL operations, the page object only contributes
locators and page-level flows.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from dsl_tools.common import compose_base_url

from .dsl import Dsl


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class TextBoxPage(BasePage):
            URL_PATH = "/text-box"

            async def fill_name(self, name: str):
                await self.dsl.send_keys("#userName", name)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        dsl: Optional[Dsl] = None,
        base_url: str = "",
    ):
        """
        Args:
            page: Playwright Page object
            dsl: Shared Dsl instance (a new one is built for ``page`` when omitted)
            base_url: Application base URL, composed from DEMOQA_PROTOCOL and
                DEMOQA_URL when empty
        """
        self.page = page
        self.dsl = dsl or Dsl(page)
        self.base_url = (base_url or compose_base_url()).rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def open(self) -> "BasePage":
        """Navigate to this page and verify the landing URL."""
        with allure.step(f"Open {self.__class__.__name__}"):
            await self.dsl.navigate_to(self.url)
            logger.debug(f"Opened page: {self.url}")
        return self


__all__ = [
    "BasePage",
]
