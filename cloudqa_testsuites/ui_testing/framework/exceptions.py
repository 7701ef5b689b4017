"""
================================================================================
UI Automation Exceptions
================================================================================

Terminal failure kinds raised by the resilient locator and action executor.

Callers that need to react differently should match on the exception class,
not on the message text.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class UIAutomationError(Exception):
    """Base exception for all UI automation failures."""
    pass


class ElementNotFoundError(UIAutomationError):
    """
    Raised when no locator strategy produced a visible and enabled element.

    "Never existed" and "existed but never interactable" are reported the
    same way.

    Attributes:
        description: Human-readable element description
        attempts: Number of full passes over the strategy list
        last_error: Message of the last underlying failure, if any
    """

    def __init__(
        self,
        description: str,
        attempts: int,
        last_error: Optional[str] = None,
    ) -> None:
        self.description = description
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Could not find element '{description}' after {attempts} attempts "
            f"using any of the provided locators. "
            f"Last error: {last_error or 'No additional error information.'}"
        )


class ActionExecutionError(UIAutomationError):
    """
    Raised when an action failed on every attempt.

    Attributes:
        description: Human-readable action description
        attempts: Number of times the action was invoked
        last_error: Message of the last underlying failure
    """

    def __init__(
        self,
        description: str,
        attempts: int,
        last_error: Optional[str] = None,
    ) -> None:
        self.description = description
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Could not execute action '{description}' after {attempts} attempts. "
            f"Last error: {last_error}"
        )


__all__ = [
    "UIAutomationError",
    "ElementNotFoundError",
    "ActionExecutionError",
]
