"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework built to survive markup changes.

Components:
    - strategy: Locator strategies (By.id, By.name, By.xpath, By.css, ...)
    - robust_locator: Fallback-chain element resolution with retries
    - action_executor: Fixed-delay retry wrapper for element actions
    - page_base: Base page object (navigation, scrolling, screenshots)
    - config_loader: YAML + environment configuration
    - log_setup: Loguru sink configuration for a test run

Author: Automation Team
License: MIT
================================================================================
"""

from .action_executor import ResilientActionExecutor
from .config_loader import ConfigLoader, HarnessSettings
from .exceptions import ActionExecutionError, ElementNotFoundError, UIAutomationError
from .page_base import BasePage
from .robust_locator import RobustElementLocator
from .strategy import By, LocatorStrategy

__all__ = [
    "ActionExecutionError",
    "BasePage",
    "By",
    "ConfigLoader",
    "ElementNotFoundError",
    "HarnessSettings",
    "LocatorStrategy",
    "ResilientActionExecutor",
    "RobustElementLocator",
    "UIAutomationError",
]
