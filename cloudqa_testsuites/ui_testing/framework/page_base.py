"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation with a ready-element wait
    - Robust element location and resilient actions
    - Scroll helpers
    - Screenshot capture with Allure attachment

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from .action_executor import ResilientActionExecutor
from .config_loader import DEFAULT_FORM_URL, ConfigLoader, HarnessSettings
from .robust_locator import RobustElementLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path("reports") / "screenshots"

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str, replacement: str = "_") -> str:
    """Replace characters that are not allowed in file names."""
    return _INVALID_FILENAME_CHARS.sub(replacement, name)


class BasePage:
    """
    Base class for all page objects.

    The page owns one locator/executor pair for its Playwright page. Both are
    built from HarnessSettings unless injected.

    Usage:
        class FormPage(BasePage):
            def enter_name(self, name: str) -> None:
                field = self.locator.find_element("Name", By.id("fname"))
                self.executor.execute("Enter name", lambda: field.fill(name))
    """

    # Selector that must be visible before the page counts as loaded
    READY_SELECTOR: str = "form"

    def __init__(
        self,
        page: Page,
        locator: Optional[RobustElementLocator] = None,
        executor: Optional[ResilientActionExecutor] = None,
        settings: Optional[HarnessSettings] = None,
        base_url: str = "",
        screenshot_dir: Optional[Path] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            locator: Element locator (built from settings if omitted)
            executor: Action executor (built from settings if omitted)
            settings: Retry/timeout settings (read from config if omitted)
            base_url: Page URL (read from config if omitted)
            screenshot_dir: Screenshot output directory
        """
        config = ConfigLoader()
        self.page = page
        self.settings = settings or HarnessSettings.from_config(config)
        self.base_url = base_url or config.get("ui.base_url", DEFAULT_FORM_URL)
        self.screenshot_dir = Path(
            screenshot_dir or config.get("artifacts.screenshot_dir", str(SCREENSHOT_DIR))
        )
        self.locator = locator or RobustElementLocator(
            page,
            max_attempts=self.settings.locator_max_attempts,
            strategy_timeout=self.settings.strategy_timeout,
            retry_delay=self.settings.locator_retry_delay,
        )
        self.executor = executor or ResilientActionExecutor(
            max_attempts=self.settings.action_max_attempts,
            retry_delay=self.settings.action_retry_delay,
        )

    def navigate(self, url: Optional[str] = None) -> None:
        """
        Navigate to a URL and wait for READY_SELECTOR to be visible.

        Args:
            url: Target URL (defaults to base_url)
        """
        url = url or self.base_url
        timeout = self.settings.navigation_timeout * 1000
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url, timeout=timeout)
            self.page.locator(self.READY_SELECTOR).first.wait_for(
                state="visible", timeout=timeout
            )
            logger.info(f"Successfully navigated to: {url}")

    # =========================================================================
    # Scroll Utilities
    # =========================================================================

    def scroll_to_bottom(self) -> None:
        """Scroll to bottom of page."""
        self.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    def scroll_to_top(self) -> None:
        """Scroll to top of page."""
        self.page.evaluate("window.scrollTo(0, 0)")

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(
        self,
        name: str,
        full_page: bool = True,
        attach_to_allure: bool = True,
    ) -> Optional[Path]:
        """
        Take screenshot and optionally attach to Allure.

        Capture problems are logged, not raised, so a failing test keeps its
        original error.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot, or None if capture failed
        """
        safe_name = sanitize_filename(name)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.screenshot_dir / f"{safe_name}_{timestamp}.png"

        try:
            self.screenshot_dir.mkdir(parents=True, exist_ok=True)
            self.page.screenshot(path=str(filepath), full_page=full_page)
        except Exception as e:
            logger.warning(f"Failed to take screenshot: {e}")
            return None

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=f"Screenshot for {name}",
                attachment_type=allure.attachment_type.PNG,
            )

        logger.info(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "sanitize_filename",
    "SCREENSHOT_DIR",
]
