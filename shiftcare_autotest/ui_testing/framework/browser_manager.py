"""
================================================================================
Browser Manager
================================================================================

Playwright browser lifecycle for the UI test fixtures.

One browser per manager, one isolated context per test.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages a browser instance and its contexts.

    Usage:
        manager = BrowserManager(browser_type="firefox")
        await manager.start()
        context = await manager.new_context()
        page = await context.new_page()
        ...
        await manager.close()
    """

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
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
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_type}', expected one of {SUPPORTED_BROWSERS}"
            )
        self.headless = headless
        self.browser_type = browser_type

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def start(self) -> Browser:
        """Start Playwright and launch the browser."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        self._browser = await launcher.launch(headless=self.headless)
        logger.debug(f"Browser started: {self.browser_type} (headless={self.headless})")
        return self._browser

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
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
        Create a new isolated browser context.

        Args:
            **options: Context options layered over DEFAULT_CONTEXT_OPTIONS
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
