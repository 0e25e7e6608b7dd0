"""
Repository-level pytest configuration.

Why this exists:
  - Initialise Loguru once for the whole run
  - Keep the repository root importable for `shiftcare_autotest`

Important:
  No credentials or environment URLs are embedded here. Live UI tests read
  UI_BASE_URL / UI_USERNAME / UI_PASSWORD from the environment and are
  skipped when they are missing.
"""

from __future__ import annotations

from shiftcare_autotest.ui_testing.framework.log_setup import init_logger

pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    group = parser.getgroup("login-ui")
    group.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run tests that drive a real browser (requires `playwright install`)",
    )
    group.addoption(
        "--browser-type",
        action="store",
        default="chromium",
        choices=["chromium", "firefox", "webkit"],
        help="Browser used by UI tests (default: chromium)",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Run UI tests with a visible browser window",
    )


def pytest_configure(config):
    init_logger()

