"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser-driven tests of the CloudQA form.

Key Features:
- Browser launch/context options from config (pytest-playwright hooks)
- Page Object fixture
- Execution log sinks
- Screenshot capture on failure

The browser itself is started and closed by pytest-playwright.

================================================================================
"""

from typing import Any, Dict, Generator

import pytest
from loguru import logger
from playwright.sync_api import Page

from cloudqa_testsuites.ui_testing.framework.config_loader import DEFAULT_FORM_URL, ConfigLoader
from cloudqa_testsuites.ui_testing.framework.log_setup import init_logger
from cloudqa_testsuites.ui_testing.pages.cloudqa_form_page import CloudQAFormPage


# ================================================================================
# Browser Configuration (pytest-playwright overrides)
# ================================================================================

@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: Dict[str, Any]) -> Dict[str, Any]:
    """Chromium flags from config, plus notification blocking."""
    config = ConfigLoader()
    args = list(config.get("browser.args", []))
    if config.get("browser.block_notifications", True):
        args.append("--disable-notifications")
    return {**browser_type_launch_args, "args": args}


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: Dict[str, Any]) -> Dict[str, Any]:
    """Viewport from config."""
    viewport = ConfigLoader().get("browser.viewport", {"width": 1920, "height": 1080})
    return {**browser_context_args, "viewport": viewport}


# ================================================================================
# Logging
# ================================================================================

@pytest.fixture(scope="session", autouse=True)
def execution_log() -> None:
    """Configure console and execution log file sinks once per run."""
    init_logger()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def form_page(page: Page) -> Generator[CloudQAFormPage, None, None]:
    """Provides a CloudQAFormPage bound to a fresh browser page."""
    form = CloudQAFormPage(page)
    logger.info("Test setup completed successfully")
    yield form
    logger.info("Test teardown completed")


@pytest.fixture
def form_url() -> str:
    return ConfigLoader().get("ui.base_url", DEFAULT_FORM_URL)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture a screenshot when a form test fails.

    The screenshot is saved under the artifact directory and attached to the
    Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        form = getattr(item, "funcargs", {}).get("form_page")
        if form is not None:
            if call.excinfo is not None:
                logger.error(f"Test failed with error: {call.excinfo.value}")
            form.screenshot(f"Failed_{item.name}")
