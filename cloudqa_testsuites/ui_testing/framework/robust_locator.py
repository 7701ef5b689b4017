"""
================================================================================
Robust Element Locator
================================================================================

Fallback-chain element resolution with whole-chain retries.

Features:
    - Ordered locator strategies (most stable first, most fragile last)
    - First visible and enabled match wins (waits for both)
    - Fixed-delay retry of the whole strategy list
    - Best-effort document readiness probe between passes
    - Injected logger and sleep, no global state

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from loguru import logger as default_logger
from playwright.sync_api import Locator, Page, expect

from .exceptions import ElementNotFoundError
from .strategy import LocatorStrategy


@dataclass(frozen=True)
class ResolutionAttempt:
    """
    One strategy tried during one pass. Only used for log emission.

    Attributes:
        attempt: 1-based pass number
        index: 0-based position of the strategy in the list
        strategy: The strategy tried
        found: Whether the strategy produced an interactive element
        error: Failure message when not found
    """
    attempt: int
    index: int
    strategy: LocatorStrategy
    found: bool
    error: Optional[str] = None


def wait_until_enabled(element: Locator, timeout_ms: float) -> None:
    """Block until the element is enabled; raises AssertionError on timeout."""
    expect(element).to_be_enabled(timeout=timeout_ms)


class RobustElementLocator:
    """
    Resolves a single visible and enabled element from a list of strategies.

    Every call searches from scratch. No handle is cached between calls, and
    the locator holds no reference to what it returns.

    Worst-case latency of a failing call is
    ``max_attempts * len(strategies) * strategy_timeout
    + (max_attempts - 1) * retry_delay``: each failing strategy pays its full
    timeout on every pass.

    Usage:
        >>> locator = RobustElementLocator(page)
        >>> field = locator.find_element(
        ...     "First Name Field",
        ...     By.id("fname"),
        ...     By.name("First Name"),
        ... )
    """

    def __init__(
        self,
        page: Page,
        max_attempts: int = 3,
        strategy_timeout: float = 30.0,
        retry_delay: float = 2.0,
        logger: Any = None,
        sleep: Callable[[float], None] = time.sleep,
        enabled_wait: Callable[[Locator, float], None] = wait_until_enabled,
    ):
        """
        Initialize the locator.

        Args:
            page: Playwright Page, owned by the caller
            max_attempts: Default number of passes over the strategy list
            strategy_timeout: Default wait per strategy, in seconds
            retry_delay: Default delay between passes, in seconds
            logger: Loguru-compatible logger (debug/info/warning/error)
            sleep: Blocking delay function
            enabled_wait: Waits for an element to become enabled (element, timeout in ms)
        """
        self.page = page
        self.max_attempts = max_attempts
        self.strategy_timeout = strategy_timeout
        self.retry_delay = retry_delay
        self.logger = logger or default_logger.bind(component="robust_locator")
        self._sleep = sleep
        self._enabled_wait = enabled_wait

    def find_element(
        self,
        description: str,
        *strategies: LocatorStrategy,
        max_attempts: Optional[int] = None,
        strategy_timeout: Optional[float] = None,
        retry_delay: Optional[float] = None,
    ) -> Locator:
        """
        Find the first strategy that yields a visible and enabled element.

        Args:
            description: Human-readable element description (diagnostics only)
            *strategies: Ordered locator strategies
            max_attempts: Passes over the strategy list (overrides default)
            strategy_timeout: Seconds to wait per strategy (overrides default)
            retry_delay: Seconds between passes (overrides default)

        Returns:
            Playwright Locator for the resolved element

        Raises:
            ElementNotFoundError: When every strategy failed on every pass
            ValueError: When max_attempts is lower than 1
        """
        max_attempts = self.max_attempts if max_attempts is None else max_attempts
        strategy_timeout = self.strategy_timeout if strategy_timeout is None else strategy_timeout
        retry_delay = self.retry_delay if retry_delay is None else retry_delay

        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        if not strategies:
            self.logger.error(f"No locators provided for '{description}'")
            raise ElementNotFoundError(description, 0)

        last_error: Optional[str] = None

        for attempt in range(1, max_attempts + 1):
            for index, strategy in enumerate(strategies):
                self.logger.debug(
                    f"Attempt {attempt}: Trying to find '{description}' using: {strategy}"
                )
                result, element = self._try_strategy(attempt, index, strategy, strategy_timeout)

                if result.found:
                    self.logger.info(
                        f"✓ Successfully found '{description}' using: {result.strategy}"
                    )
                    return element

                last_error = result.error
                self.logger.warning(
                    f"Failed to find '{description}' using: {result.strategy} "
                    f"(attempt {result.attempt}, locator {result.index + 1}/{len(strategies)}). "
                    f"Error: {result.error}"
                )

            if attempt < max_attempts:
                self.logger.info(
                    f"Retrying in {retry_delay} seconds... "
                    f"(Attempt {attempt + 1}/{max_attempts})"
                )
                self._sleep(retry_delay)
                self._probe_ready_state()

        self.logger.error(
            f"❌ All locators failed for '{description}' after {max_attempts} attempts"
        )
        raise ElementNotFoundError(description, max_attempts, last_error)

    def _try_strategy(
        self,
        attempt: int,
        index: int,
        strategy: LocatorStrategy,
        timeout: float,
    ) -> tuple[ResolutionAttempt, Optional[Locator]]:
        """
        Query one strategy and apply the interactivity post-check.

        Visibility and enabled state share one ``timeout`` budget. Playwright
        reads a timeout of 0 as "wait forever", so the enabled wait always
        gets at least 1ms.
        """
        deadline = time.monotonic() + timeout
        try:
            element = self.page.locator(strategy.selector).first
            element.wait_for(state="visible", timeout=timeout * 1000)

            remaining_ms = max((deadline - time.monotonic()) * 1000, 1)
            self._enabled_wait(element, remaining_ms)

            if element.is_visible() and element.is_enabled():
                return ResolutionAttempt(attempt, index, strategy, found=True), element

            error = "element is present but not visible and enabled"
        except Exception as e:
            error = str(e)

        return ResolutionAttempt(attempt, index, strategy, found=False, error=error), None

    def _probe_ready_state(self) -> None:
        """Best-effort readiness probe; failures are ignored."""
        try:
            state = self.page.evaluate("document.readyState")
            self.logger.debug(f"Document readyState: {state}")
        except Exception as e:
            self.logger.debug(f"Ready state probe failed: {e}")


__all__ = [
    "RobustElementLocator",
    "ResolutionAttempt",
]
