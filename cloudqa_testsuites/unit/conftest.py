"""Fixtures wiring the browser-free fakes into the unit tests."""

from typing import Callable

import pytest

from cloudqa_testsuites.unit.fakes import FakeElement, FakePage, RecordingLogger, RecordingSleep


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_page() -> Callable[..., FakePage]:
    """Factory: make_page({"id=fname": FakeElement()}, ready_state_error=False)."""
    return FakePage


@pytest.fixture
def make_element() -> Callable[..., FakeElement]:
    return FakeElement
