"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with environment variable override, resolved into an
explicit `UIConfig` object that is handed to every page object.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with default values
    - Immutable UIConfig for page objects (no hidden global state)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (repository root / config / config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url")
        'https://shiftcare.com'  # From YAML or env var

        >>> config.get("ui.default_timeout_ms", 5000)
        5000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL (BASE_URL is used when neither is set)
        - ui.retry_delay_ms -> UI_RETRY_DELAY_MS
        - logging.level -> LOGGING_LEVEL
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section (empty dict if not found)."""
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Expected an integer environment value, got {value!r}"
                ) from e
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Expected a number environment value, got {value!r}"
                ) from e

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UIConfig:
    """
    Explicit configuration for page objects.

    Page objects receive one of these at construction time instead of reading
    the process environment themselves.
    """

    base_url: Optional[str] = None
    sign_in_path: str = "/users/sign_in"
    sign_out_path: str = "/users/sign_out"
    default_timeout_ms: int = 5000
    login_marker_timeout_ms: int = 10000
    retry_delay_ms: int = 1000
    max_click_retries: int = 3
    screenshot_dir: str = "screenshots"

    def __post_init__(self) -> None:
        # Normalise "" to None and drop a trailing slash
        base_url = (self.base_url or "").rstrip("/") or None
        object.__setattr__(self, "base_url", base_url)

    def require_base_url(self) -> str:
        """Return the base URL or raise ConfigurationError if it is not set."""
        if not self.base_url:
            raise ConfigurationError(
                "Base URL is not configured (set ui.base_url, UI_BASE_URL or BASE_URL)."
            )
        return self.base_url

    def build_url(self, path: str) -> str:
        """Join the configured base URL with an absolute path."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.require_base_url()}{path}"


def load_ui_config(loader: Optional[ConfigLoader] = None) -> UIConfig:
    """
    Resolve a UIConfig from YAML + environment.

    Args:
        loader: ConfigLoader to read from (defaults to the process singleton)

    Returns:
        Frozen UIConfig
    """
    loader = loader or ConfigLoader()
    defaults = UIConfig()

    # BASE_URL is the variable older setups export
    base_url = loader.get("ui.base_url", None) or os.environ.get("BASE_URL")

    config = UIConfig(
        base_url=base_url,
        sign_in_path=loader.get("ui.sign_in_path", defaults.sign_in_path),
        sign_out_path=loader.get("ui.sign_out_path", defaults.sign_out_path),
        default_timeout_ms=loader.get("ui.default_timeout_ms", defaults.default_timeout_ms),
        login_marker_timeout_ms=loader.get(
            "ui.login_marker_timeout_ms", defaults.login_marker_timeout_ms
        ),
        retry_delay_ms=loader.get("ui.retry_delay_ms", defaults.retry_delay_ms),
        max_click_retries=loader.get("ui.max_click_retries", defaults.max_click_retries),
        screenshot_dir=loader.get("ui.screenshot_dir", defaults.screenshot_dir),
    )
    logger.debug(f"Resolved UI config: base_url={config.base_url}")
    return config


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UIConfig",
    "load_ui_config",
]
