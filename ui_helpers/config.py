"""
================================================================================
Configuration and Logging
================================================================================

YAML-based configuration with environment variable overrides, the typed
settings consumed by the helper components, and Loguru logger setup.

Configuration hierarchy (highest to lowest priority):
    1. Environment variables (UI_HELPERS_WAITS_ELEMENT_TIMEOUT)
    2. YAML configuration file (config/config.yaml)
    3. Default values

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError
from .waits import MIN_POLL_INTERVAL
from .windows import NoMatchPolicy


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"

ENV_PREFIX = "UI_HELPERS_"

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False

# HelperSettings fields and the type each is coerced to
NUMERIC_FIELDS = {
    "element_timeout": float,
    "page_timeout": float,
    "poll_interval": float,
    "settle_timeout": float,
    "settle_interval": float,
    "highlight_duration": float,
    "scroll_step": int,
}


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("waits.element_timeout", 10)
        10

    Environment Variable Mapping:
        - waits.element_timeout -> UI_HELPERS_WAITS_ELEMENT_TIMEOUT
        - windows.no_match_policy -> UI_HELPERS_WINDOWS_NO_MATCH_POLICY
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
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

        Args:
            key: Dot-notation path (e.g., "waits.element_timeout")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = ENV_PREFIX + key.upper().replace(".", "_")
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

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Convert an environment string to the type of ``reference``."""
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (tests)."""
        cls._instance = None
        cls._config = {}


@dataclass
class HelperSettings:
    """
    Tunables for the helper components.

    Attributes:
        element_timeout: Default timeout (s) for element-level waits
        page_timeout: Default timeout (s) for page-load waits
        poll_interval: Seconds between wait evaluations
        settle_timeout: Upper bound (s) of the window settle poll
        settle_interval: Seconds between window-count checks
        no_match_policy: Active window after an unmatched window switch
        highlight_duration: Seconds a temporary highlight stays on
        scroll_step: Pixels per scroll step
        screenshot_dir: Directory for named screenshots
    """
    element_timeout: float = 10.0
    page_timeout: float = 60.0
    poll_interval: float = 0.5
    settle_timeout: float = 2.0
    settle_interval: float = 0.1
    no_match_policy: NoMatchPolicy = NoMatchPolicy.LAST_ITERATED
    highlight_duration: float = 3.0
    scroll_step: int = 50
    screenshot_dir: Path = Path("screenshots")

    def __post_init__(self) -> None:
        # Environment overrides that fail to parse arrive as raw strings
        for field_name, convert in NUMERIC_FIELDS.items():
            value = getattr(self, field_name)
            try:
                setattr(self, field_name, convert(value))
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"{field_name} must be a number: {value!r}"
                ) from e

        for field_name in ("element_timeout", "page_timeout", "settle_timeout", "highlight_duration"):
            if getattr(self, field_name) < 0:
                raise ConfigurationError(f"{field_name} must be >= 0")
        if self.poll_interval < MIN_POLL_INTERVAL:
            raise ConfigurationError(f"poll_interval must be >= {MIN_POLL_INTERVAL}s")
        if self.settle_interval <= 0:
            raise ConfigurationError("settle_interval must be > 0")
        if self.scroll_step <= 0:
            raise ConfigurationError("scroll_step must be > 0")
        try:
            self.no_match_policy = NoMatchPolicy(self.no_match_policy)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown no_match_policy: {self.no_match_policy!r}"
            ) from e
        self.screenshot_dir = Path(self.screenshot_dir)

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> "HelperSettings":
        """Build settings from configuration, falling back to field defaults."""
        loader = loader or ConfigLoader()
        defaults = cls()
        return cls(
            element_timeout=loader.get("waits.element_timeout", defaults.element_timeout),
            page_timeout=loader.get("waits.page_timeout", defaults.page_timeout),
            poll_interval=loader.get("waits.poll_interval", defaults.poll_interval),
            settle_timeout=loader.get("windows.settle_timeout", defaults.settle_timeout),
            settle_interval=loader.get("windows.settle_interval", defaults.settle_interval),
            no_match_policy=loader.get("windows.no_match_policy", defaults.no_match_policy.value),
            highlight_duration=loader.get("actions.highlight_duration", defaults.highlight_duration),
            scroll_step=loader.get("actions.scroll_step", defaults.scroll_step),
            screenshot_dir=loader.get("screenshots.dir", str(defaults.screenshot_dir)),
        )


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger.

    Safe to call repeatedly; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = ConfigLoader()
    log_level = (level or config.get("logging.level", "INFO")).upper()
    log_format = format_str or config.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = [
    "ConfigLoader",
    "HelperSettings",
    "init_logger",
    "DEFAULT_CONFIG_PATH",
]
