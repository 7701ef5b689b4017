"""
================================================================================
Locator Strategies
================================================================================

Query strategies used by the robust locator, ordered from the most stable
identifier to the most structurally fragile one.

Each strategy is an immutable (kind, value) pair that renders to a Playwright
selector string.

Usage:
    >>> By.id("fname").selector
    'id=fname'
    >>> By.name("First Name").selector
    '[name="First Name"]'
    >>> By.xpath("//input[@placeholder='Name']").selector
    "xpath=//input[@placeholder='Name']"

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


def _quote(value: str) -> str:
    """Quote a value for use inside a CSS attribute selector."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# kind -> Playwright selector builder
_SELECTOR_BUILDERS: Dict[str, Callable[[str], str]] = {
    "id": lambda v: f"id={v}",
    "name": lambda v: f"[name={_quote(v)}]",
    "xpath": lambda v: f"xpath={v}",
    "css": lambda v: f"css={v}",
    "class_name": lambda v: f"css=.{v}",
    "tag_name": lambda v: f"css={v}",
    "placeholder": lambda v: f"[placeholder={_quote(v)}]",
    "text": lambda v: f"text={v}",
}


@dataclass(frozen=True)
class LocatorStrategy:
    """
    One alternative way to locate an element.

    Attributes:
        kind: Strategy kind (id, name, xpath, css, class_name, ...)
        value: Raw value for the strategy
    """
    kind: str
    value: str

    def __post_init__(self) -> None:
        if self.kind not in _SELECTOR_BUILDERS:
            raise ValueError(
                f"Unknown locator strategy: {self.kind}. "
                f"Expected one of: {', '.join(_SELECTOR_BUILDERS)}"
            )

    @property
    def selector(self) -> str:
        """Playwright selector string for this strategy."""
        return _SELECTOR_BUILDERS[self.kind](self.value)

    def __str__(self) -> str:
        return f"By.{self.kind}: {self.value}"


class By:
    """Factory for LocatorStrategy instances."""

    @staticmethod
    def id(value: str) -> LocatorStrategy:
        return LocatorStrategy("id", value)

    @staticmethod
    def name(value: str) -> LocatorStrategy:
        return LocatorStrategy("name", value)

    @staticmethod
    def xpath(value: str) -> LocatorStrategy:
        return LocatorStrategy("xpath", value)

    @staticmethod
    def css(value: str) -> LocatorStrategy:
        return LocatorStrategy("css", value)

    @staticmethod
    def class_name(value: str) -> LocatorStrategy:
        return LocatorStrategy("class_name", value)

    @staticmethod
    def tag_name(value: str) -> LocatorStrategy:
        return LocatorStrategy("tag_name", value)

    @staticmethod
    def placeholder(value: str) -> LocatorStrategy:
        return LocatorStrategy("placeholder", value)

    @staticmethod
    def text(value: str) -> LocatorStrategy:
        return LocatorStrategy("text", value)


__all__ = [
    "By",
    "LocatorStrategy",
]
