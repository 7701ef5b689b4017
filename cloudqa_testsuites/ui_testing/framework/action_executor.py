# ================================================================================
# Resilient Action Executor
# ================================================================================
#
# Wraps a zero-argument operation (clear+type, click-if-unchecked,
# select-by-text, ...) with bounded, fixed-delay retries.
#
# A handle that was interactive when resolved can go stale or become
# momentarily non-interactive before the action runs, so every mutation
# against a resolved element goes through here.
#
# Usage:
#   executor = ResilientActionExecutor()
#   executor.execute("Enter First Name", lambda: field.fill("saurabh"))
#
# ================================================================================

import time
from typing import Any, Callable, Optional

from loguru import logger as default_logger

from .exceptions import ActionExecutionError


class ResilientActionExecutor:
    """
    Runs an action until it succeeds or the attempt budget is spent.

    All failures are treated alike: timeout, stale element and
    not-interactable errors all just consume one attempt.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
        logger: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the executor.

        Args:
            max_attempts: Default number of invocations
            retry_delay: Default delay between invocations, in seconds
            logger: Loguru-compatible logger (debug/info/warning/error)
            sleep: Blocking delay function
        """
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.logger = logger or default_logger.bind(component="action_executor")
        self._sleep = sleep

    def execute(
        self,
        description: str,
        action: Callable[[], Any],
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ) -> Any:
        """
        Execute an action with retries.

        Args:
            description: Human-readable action description
            action: Zero-argument callable that may raise
            max_attempts: Invocations before giving up (overrides default)
            retry_delay: Seconds between invocations (overrides default)

        Returns:
            Whatever the successful invocation returned

        Raises:
            ActionExecutionError: When every invocation raised
            ValueError: When max_attempts is lower than 1
        """
        max_attempts = self.max_attempts if max_attempts is None else max_attempts
        retry_delay = self.retry_delay if retry_delay is None else retry_delay

        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        last_exception: Optional[Exception] = None

        for attempt in range(1, max_attempts + 1):
            try:
                self.logger.debug(f"Executing action: {description} (Attempt {attempt})")
                result = action()
                self.logger.info(f"✓ Successfully executed: {description}")
                return result
            except Exception as e:
                last_exception = e
                self.logger.warning(f"Failed to execute '{description}': {e}")

                if attempt < max_attempts:
                    self._sleep(retry_delay)

        self.logger.error(
            f"All {max_attempts} attempts failed for '{description}': {last_exception}"
        )
        raise ActionExecutionError(description, max_attempts, str(last_exception))


__all__ = [
    "ResilientActionExecutor",
]
