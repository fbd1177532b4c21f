"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for the DSL test suites.

Features:
    - One browser instance per manager
    - Isolated contexts (downloads accepted) for test independence
    - Browser type and headless mode taken from config/config.yaml

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from dsl_tools.common import ConfigLoader

BROWSER_TYPES = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            context = await manager.new_context()
            page = await context.new_page()
            dsl = Dsl(page, context)
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
        "accept_downloads": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
    ):
        """
        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
        """
        if browser_type not in BROWSER_TYPES:
            raise ValueError(
                f"Unsupported browser type '{browser_type}'. "
                f"Choose one of: {', '.join(BROWSER_TYPES)}"
            )
        self.headless = headless
        self.browser_type = browser_type

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    @classmethod
    def from_config(cls, loader: Optional[ConfigLoader] = None) -> "BrowserManager":
        """Build a manager from the ``browser`` section of the configuration."""
        loader = loader or ConfigLoader()
        return cls(
            headless=bool(loader.get("browser.headless", True)),
            browser_type=str(loader.get("browser.type", "chromium")),
        )

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in a new or existing context."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BROWSER_TYPES",
    "BrowserManager",
]
