"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project-wide markers. Browser tests need installed Playwright
browsers and are skipped unless `--run-ui` is given.

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
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live application"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Fast tests with a fake driver, no browser"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to sign-in and sign-out"
    )


def pytest_collection_modifyitems(config, items):
    """
    Auto-mark tests by directory and skip browser tests unless `--run-ui`.
    """
    skip_ui = pytest.mark.skip(reason="needs a real browser; pass --run-ui to run")
    run_ui = config.getoption("--run-ui")

    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Login Page-Object Test Suite",
        "=" * 60,
        "",
    ]
