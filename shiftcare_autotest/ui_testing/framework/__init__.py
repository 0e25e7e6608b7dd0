"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helpers shared by the page objects.

Components:
    - config_loader: YAML + environment configuration, UIConfig
    - log_setup: Loguru initialisation
    - page_base: Retry-aware driver-interaction helper
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, UIConfig, load_ui_config
from .log_setup import init_logger
from .page_base import BasePage, Visibility
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UIConfig",
    "load_ui_config",
    "init_logger",
    "BasePage",
    "Visibility",
    "BrowserManager",
]
