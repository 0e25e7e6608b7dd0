"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Selectors and flows for the sign-in page: login, logout, error banner,
"remember me", "forgot password" and username persistence.

The page object owns a `BasePage` helper and delegates every driver call to
it. It keeps no state between calls; callers sequence the operations
(e.g. `navigate()` before `login()`).

NOTE:
  The selectors below are the compatibility surface with the application's
  markup. Any markup change must be mirrored here.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from shiftcare_autotest.ui_testing.framework.config_loader import UIConfig
from shiftcare_autotest.ui_testing.framework.page_base import BasePage


class LoginPage:
    """Login page object (async)."""

    USERNAME_INPUT = 'input[name="email"]'
    PASSWORD_INPUT = 'input[name="password"]'
    LOGIN_BUTTON = 'button[type="submit"]'
    ERROR_MESSAGE = ".error-message"
    REMEMBER_ME_CHECKBOX = 'input[type="checkbox"]'
    FORGOT_PASSWORD_LINK = 'a[href="/forgot-password"]'
    # Only rendered once the user is signed in
    SIDEBAR_MENU = '[data-testid="sidebar-menu"]'

    def __init__(self, base_page: BasePage):
        """
        Args:
            base_page: Shared driver-interaction helper
        """
        self.base = base_page

    @classmethod
    def from_page(cls, page: Page, config: Optional[UIConfig] = None) -> "LoginPage":
        """Build a LoginPage with its own BasePage helper."""
        return cls(BasePage(page, config))

    @property
    def page(self) -> Page:
        return self.base.page

    @property
    def config(self) -> UIConfig:
        return self.base.config

    async def navigate(self) -> None:
        """Navigate to the sign-in path under the configured base URL."""
        with allure.step("Open login page"):
            await self.base.navigate(self.config.build_url(self.config.sign_in_path))

    async def login(self, username: str, password: str) -> None:
        """
        Fill in the credentials and submit.

        Success or failure is observed afterwards through `is_logged_in()`
        and `get_error_message()`.
        """
        # The step title carries the username only
        with allure.step(f"Login as {username}"):
            await self.base.fill_input(self.USERNAME_INPUT, username)
            await self.base.fill_input(self.PASSWORD_INPUT, password)
            await self.base.click_with_retry(self.LOGIN_BUTTON)
        logger.debug(f"Submitted login form for {username}")

    async def is_logged_in(self) -> bool:
        """Check for the post-login sidebar marker."""
        with allure.step("Verify user is logged in"):
            return await self.base.is_visible(
                self.SIDEBAR_MENU, timeout=self.config.login_marker_timeout_ms
            )

    async def get_error_message(self) -> Optional[str]:
        """
        Text of the error banner.

        Returns:
            The banner's text (possibly empty) when it is visible,
            None when no banner is shown.
        """
        if await self.base.is_visible(self.ERROR_MESSAGE):
            return await self.base.get_text(self.ERROR_MESSAGE)
        return None

    async def toggle_remember_me(self) -> None:
        with allure.step("Toggle 'Remember Me'"):
            await self.base.click_with_retry(self.REMEMBER_ME_CHECKBOX)

    async def click_forgot_password(self) -> None:
        with allure.step("Click 'Forgot Password'"):
            await self.base.click_with_retry(self.FORGOT_PASSWORD_LINK)

    async def is_username_persisted(self, expected_username: str) -> bool:
        """Exact (case-sensitive, untrimmed) match of the username field value."""
        value = await self.base.get_input_value(self.USERNAME_INPUT)
        return value == expected_username

    async def logout(self) -> bool:
        """
        Open the sign-out path and wait for the login button to come back.

        Returns:
            Whether the login button reappeared (a weak completion signal)
        """
        with allure.step("Logout"):
            await self.base.navigate(self.config.build_url(self.config.sign_out_path))
            back_on_login = await self.base.is_visible(self.LOGIN_BUTTON)
        if not back_on_login:
            logger.warning("Login button did not reappear after logout")
        return back_on_login

    async def is_login_form_displayed(self) -> bool:
        """Username, password and submit are all visible."""
        username_ok = await self.base.is_visible(self.USERNAME_INPUT)
        password_ok = await self.base.is_visible(self.PASSWORD_INPUT)
        button_ok = await self.base.is_visible(self.LOGIN_BUTTON)
        return username_ok and password_ok and button_ok

    async def assert_login_page_loaded(self) -> None:
        """Hard assertion helper used by tests."""
        assert await self.is_login_form_displayed(), "Login form should be visible"


__all__ = [
    "LoginPage",
]
