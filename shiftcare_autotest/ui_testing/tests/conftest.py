"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and failure screenshots.

Key Features:
- Browser and page lifecycle management
- UIConfig resolved once from YAML + environment
- LoginPage fixture built on an injected BasePage helper
- Screenshot capture on failure (attached to Allure)

================================================================================
"""

import os
from pathlib import Path
from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import BrowserContext, Page

from shiftcare_autotest.ui_testing.framework.browser_manager import BrowserManager
from shiftcare_autotest.ui_testing.framework.config_loader import UIConfig, load_ui_config
from shiftcare_autotest.ui_testing.framework.page_base import BasePage
from shiftcare_autotest.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> UIConfig:
    """UI configuration resolved from config/config.yaml and the environment."""
    return load_ui_config()


@pytest.fixture
def valid_credentials():
    """
    Account for live scenarios, from UI_USERNAME / UI_PASSWORD.

    Tests that need it are skipped when those are not set.
    """
    username = os.getenv("UI_USERNAME")
    password = os.getenv("UI_PASSWORD")
    if not username or not password:
        pytest.skip("UI_USERNAME / UI_PASSWORD not set")
    return {"username": username, "password": password}


@pytest.fixture
def invalid_credentials():
    """Credentials no account has; always available."""
    return {"username": "invalid_user@example.com", "password": "wrong_password"}


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(request) -> AsyncGenerator[BrowserManager, None]:
    """Browser manager with a started browser, closed after the test."""
    manager = BrowserManager(
        headless=not request.config.getoption("--ui-headed"),
        browser_type=request.config.getoption("--browser-type"),
    )
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Fresh, isolated browser context per test."""
    context = await browser_manager.new_context()
    yield context


@pytest.fixture
async def page(
    request,
    context: BrowserContext,
    ui_config: UIConfig,
) -> AsyncGenerator[Page, None]:
    """
    New page within the test's browser context.

    When the test body failed, a full-page screenshot and the current URL
    are attached to the Allure report before the page is closed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        helper = BasePage(page, ui_config)
        try:
            await helper.attach_screenshot(f"failure_{request.node.name}")
            allure.attach(
                helper.current_url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def base_page(page: Page, ui_config: UIConfig) -> BasePage:
    """Driver-interaction helper shared by the page objects of one test."""
    return BasePage(page, ui_config)


@pytest.fixture
def login_page(base_page: BasePage) -> LoginPage:
    """LoginPage for the live application."""
    return LoginPage(base_page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Remember the call-phase report so fixtures can react to failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    """Temporary directory for screenshots."""
    screenshots = tmp_path / "screenshots"
    screenshots.mkdir(exist_ok=True)
    return screenshots
