"""
Fakes for driving the locator and executor without a browser.

FakePage maps selector strings to FakeElement objects and records every
query, so tests can assert which strategies were tried and how often.
"""

from typing import Callable, Dict, List, Optional, Tuple


class FakeTimeoutError(Exception):
    """Stands in for playwright's TimeoutError."""


class FakeElement:
    """
    Element with visible/enabled state.

    ``enable_after`` (ms) makes a disabled element turn enabled once an
    enabled-wait of at least that long is requested.
    """

    def __init__(
        self,
        visible: bool = True,
        enabled: bool = True,
        name: str = "element",
        enable_after: Optional[float] = None,
    ):
        self.visible = visible
        self.enabled = enabled
        self.name = name
        self.enable_after = enable_after
        self.wait_calls: List[Tuple[str, float]] = []
        self.enabled_wait_calls: List[float] = []

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.wait_calls.append((state, timeout))
        if state == "visible" and not self.visible:
            raise FakeTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.name}")

    def wait_until_enabled(self, timeout: float) -> None:
        self.enabled_wait_calls.append(timeout)
        if not self.enabled and self.enable_after is not None and self.enable_after <= timeout:
            self.enabled = True
        if not self.enabled:
            raise AssertionError(f"Locator expected to be enabled\nTimeout {timeout}ms exceeded for {self.name}")

    def is_visible(self) -> bool:
        return self.visible

    def is_enabled(self) -> bool:
        return self.enabled

    def __repr__(self) -> str:
        return f"FakeElement({self.name})"


class _MissingElement(FakeElement):
    def __init__(self, selector: str):
        super().__init__(visible=False, name=selector)

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.wait_calls.append((state, timeout))
        raise FakeTimeoutError(f"Timeout {timeout}ms exceeded waiting for locator('{self.name}')")


class _FakeLocatorList:
    def __init__(self, element: FakeElement):
        self.first = element


class FakePage:
    """Page exposing just what the locator needs."""

    def __init__(self, elements: Optional[Dict[str, FakeElement]] = None, ready_state_error: bool = False):
        self.elements = elements or {}
        self.queries: List[str] = []
        self.evaluations: List[str] = []
        self.ready_state_error = ready_state_error

    def locator(self, selector: str) -> _FakeLocatorList:
        self.queries.append(selector)
        element = self.elements.get(selector)
        if element is None:
            element = _MissingElement(selector)
        return _FakeLocatorList(element)

    def evaluate(self, expression: str):
        self.evaluations.append(expression)
        if self.ready_state_error:
            raise RuntimeError("Execution context was destroyed")
        return "complete"


class RecordingLogger:
    """Loguru-compatible logger that keeps messages in memory."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def _record(self, level: str) -> Callable[[str], None]:
        return lambda message, *args, **kwargs: self.records.append((level, message))

    def __getattr__(self, level: str):
        if level in ("debug", "info", "warning", "error"):
            return self._record(level.upper())
        raise AttributeError(level)

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [m for lvl, m in self.records if level is None or lvl == level]


class RecordingSleep:
    """Replaces time.sleep; records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


def fake_enabled_wait(element: FakeElement, timeout_ms: float) -> None:
    """Enabled-wait hook for RobustElementLocator that drives FakeElement."""
    element.wait_until_enabled(timeout_ms)
