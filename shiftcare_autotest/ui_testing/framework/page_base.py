"""
================================================================================
Base Page Helper
================================================================================

Retry-aware navigation and interaction primitives over a Playwright page.

Page objects do not inherit from this class; they own an instance of it and
implement their own selectors and flows against its interface.

Provides:
    - Navigation with fail-fast configuration checks
    - Wait strategies (network idle, selector presence)
    - Bounded-retry click for flaky elements
    - Boolean and tri-state visibility probes
    - Text/value extraction and screenshots

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from .config_loader import ConfigurationError, UIConfig


class Visibility(str, Enum):
    """Outcome of a visibility probe."""

    VISIBLE = "visible"
    ABSENT = "absent"
    TIMED_OUT = "timed_out"


class BasePage:
    """
    Generic driver-interaction helper shared by all page objects.

    Usage:
        base = BasePage(page, UIConfig(base_url="https://app.example.com"))
        await base.navigate()
        await base.fill_input("input[name='email']", "user@example.com")
        await base.click_with_retry("button[type='submit']")
    """

    def __init__(self, page: Page, config: Optional[UIConfig] = None):
        """
        Initialize the helper.

        Args:
            page: Playwright Page object (owned by the caller)
            config: Explicit UI configuration; an empty UIConfig when omitted
        """
        self.page = page
        self.config = config or UIConfig()

    @property
    def current_url(self) -> str:
        """URL currently shown by the page."""
        return self.page.url

    def _timeout(self, timeout: Optional[int]) -> int:
        return self.config.default_timeout_ms if timeout is None else timeout

    # =========================================================================
    # Navigation and Waits
    # =========================================================================

    async def navigate(self, url: Optional[str] = None) -> None:
        """
        Navigate to `url`, or to the configured base URL when omitted.

        Waits until network activity settles. Driver failures are logged and
        re-raised unchanged.

        Raises:
            ConfigurationError: Neither `url` nor a base URL is available.
        """
        target = url or self.config.base_url
        if not target:
            raise ConfigurationError(
                "No URL given and no base URL configured (ui.base_url, UI_BASE_URL or BASE_URL)."
            )

        with allure.step(f"Navigate to {target}"):
            try:
                await self.page.goto(target, wait_until="networkidle")
            except Exception as e:
                logger.error(f"Failed to navigate to {target}: {e}")
                raise
            logger.debug(f"Navigated to: {target}")

    async def wait_for_network_idle(self, timeout: Optional[int] = None) -> None:
        """Wait for network to be idle."""
        await self.page.wait_for_load_state("networkidle", timeout=self._timeout(timeout))

    async def get_locator(self, selector: str, timeout: Optional[int] = None) -> Locator:
        """
        Wait for `selector` to appear and return a locator for it.

        Raises:
            playwright.async_api.TimeoutError: The element did not appear in time.
        """
        await self.page.wait_for_selector(selector, timeout=self._timeout(timeout))
        return self.page.locator(selector)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def fill_input(self, selector: str, text: str) -> None:
        """Clear an input and type `text` into it. Assumes the element exists."""
        shown = "*" * len(text) if "password" in selector.lower() else text
        with allure.step(f"Fill {selector}: {shown}"):
            locator = self.page.locator(selector)
            await locator.clear()
            await locator.fill(text)

    async def click_with_retry(self, selector: str, max_retries: Optional[int] = None) -> None:
        """
        Wait for an element to be visible, then click it, retrying on failure.

        Each failed attempt is followed by a fixed `retry_delay_ms` pause
        before the next one. After `max_retries` failed attempts the last
        driver error is re-raised.

        Args:
            selector: CSS/attribute selector of the element
            max_retries: Attempt budget (defaults to config.max_click_retries)
        """
        if max_retries is None:
            max_retries = self.config.max_click_retries
        if max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {max_retries}")

        with allure.step(f"Click with retry: {selector}"):
            attempts = 0
            while True:
                try:
                    locator = self.page.locator(selector)
                    await locator.wait_for(state="visible", timeout=self.config.default_timeout_ms)
                    await locator.click()
                    return
                except PlaywrightError as e:
                    attempts += 1
                    if attempts >= max_retries:
                        logger.error(
                            f"All {max_retries} attempts failed for click on {selector}: {e}"
                        )
                        raise
                    logger.warning(
                        f"Attempt {attempts}/{max_retries} failed for click on {selector}: {e}. "
                        f"Retrying in {self.config.retry_delay_ms}ms..."
                    )
                    await self.page.wait_for_timeout(self.config.retry_delay_ms)

    # =========================================================================
    # Visibility Probes
    # =========================================================================

    async def is_visible(self, selector: str, timeout: Optional[int] = None) -> bool:
        """
        Check if an element becomes visible within `timeout` milliseconds.

        Never raises for driver failures; they are reported as False.
        """
        try:
            await self.page.wait_for_selector(
                selector, state="visible", timeout=self._timeout(timeout)
            )
            return True
        except PlaywrightError as e:
            logger.debug(f"{selector} not visible: {e}")
            return False

    async def probe_visibility(self, selector: str, timeout: Optional[int] = None) -> Visibility:
        """
        Like `is_visible`, but tells "absent" apart from "timed out".

        Returns:
            VISIBLE if the element became visible in time,
            ABSENT if nothing matching the selector is attached to the page,
            TIMED_OUT if a match is attached but never became visible.
        """
        try:
            await self.page.wait_for_selector(
                selector, state="visible", timeout=self._timeout(timeout)
            )
            return Visibility.VISIBLE
        except PlaywrightError as e:
            logger.debug(f"{selector} not visible: {e}")

        try:
            attached = await self.page.locator(selector).count()
        except PlaywrightError as e:
            logger.debug(f"Could not count matches for {selector}: {e}")
            return Visibility.TIMED_OUT
        return Visibility.TIMED_OUT if attached else Visibility.ABSENT

    # =========================================================================
    # Reading Values
    # =========================================================================

    async def get_text(self, selector: str) -> str:
        """Rendered text of an element. Assumes the element exists."""
        return await self.page.locator(selector).inner_text()

    async def get_input_value(self, selector: str) -> str:
        """Current value of an input element."""
        return await self.page.locator(selector).input_value()

    # =========================================================================
    # Screenshots
    # =========================================================================

    async def take_screenshot(self, path: Union[str, Path]) -> None:
        """Capture the current viewport to `path`."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        await self.page.screenshot(path=str(path))
        logger.debug(f"Screenshot saved: {path}")

    async def attach_screenshot(self, name: str, full_page: bool = True) -> Path:
        """
        Capture a timestamped screenshot under `config.screenshot_dir` and
        attach it to the Allure report.

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = Path(self.config.screenshot_dir)
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = screenshot_dir / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)
        allure.attach.file(
            str(filepath),
            name=name,
            attachment_type=allure.attachment_type.PNG,
        )

        logger.debug(f"Screenshot attached: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "Visibility",
]
