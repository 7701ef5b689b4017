"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment-specific overlay (config/{ENV}.yaml)
    - Environment variable override (LOCATOR_MAX_ATTEMPTS overrides locator.max_attempts)
    - Dot notation path access
    - Default value support

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

DEFAULT_FORM_URL = "https://app.cloudqa.io/home/AutomationPracticeForm"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (LOCATOR_RETRY_DELAY)
        2. Environment overlay file (config/{ENV}.yaml)
        3. YAML configuration file
        4. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("locator.max_attempts", 3)
        3

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - locator.strategy_timeout -> LOCATOR_STRATEGY_TIMEOUT
        - action.retry_delay -> ACTION_RETRY_DELAY
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
        """Load configuration from YAML file plus the optional environment overlay."""
        self._config = self._read_yaml(self._config_path)
        if self._config is None:
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        logger.debug(f"Loaded configuration from: {self._config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV"))
        if env:
            overlay_path = self._config_path.parent / f"{env}.yaml"
            overlay = self._read_yaml(overlay_path)
            if overlay:
                self._config = _deep_merge(self._config, overlay)
                logger.debug(f"Merged environment config: {overlay_path}")

    @staticmethod
    def _read_yaml(path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "locator.retry_delay")
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
        """Get entire configuration section, or an empty dict."""
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Convert an environment string to match the type of the default."""
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
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class HarnessSettings:
    """
    Retry and timeout settings for the locator/executor pair.

    Attributes:
        locator_max_attempts: Full passes over a strategy list
        strategy_timeout: Seconds to wait per strategy
        locator_retry_delay: Seconds between locator passes
        action_max_attempts: Invocations of an action before giving up
        action_retry_delay: Seconds between action invocations
        navigation_timeout: Seconds to wait for the form after navigation
    """
    locator_max_attempts: int = 3
    strategy_timeout: float = 30.0
    locator_retry_delay: float = 2.0
    action_max_attempts: int = 3
    action_retry_delay: float = 1.0
    navigation_timeout: float = 30.0

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "HarnessSettings":
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            locator_max_attempts=config.get("locator.max_attempts", defaults.locator_max_attempts),
            strategy_timeout=config.get("locator.strategy_timeout", defaults.strategy_timeout),
            locator_retry_delay=config.get("locator.retry_delay", defaults.locator_retry_delay),
            action_max_attempts=config.get("action.max_attempts", defaults.action_max_attempts),
            action_retry_delay=config.get("action.retry_delay", defaults.action_retry_delay),
            navigation_timeout=config.get("ui.navigation_timeout", defaults.navigation_timeout),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "HarnessSettings",
    "DEFAULT_FORM_URL",
]
