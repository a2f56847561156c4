# File: tests/conftest.py
from __future__ import annotations

from typing import Callable, List, Optional

import pytest

from health_probe.config import ProbeConfig
from health_probe.logger import configure


class FakeElement:
    def __init__(self, text: str) -> None:
        self.text = text


class FakeDriver:
    """
    Stand-in for a remote WebDriver session.
    Records every call so tests can check order and release count.
    """

    def __init__(
        self,
        body: str = "System OK",
        get_error: Optional[Exception] = None,
        find_error: Optional[Exception] = None,
        quit_error: Optional[Exception] = None,
    ) -> None:
        self.body = body
        self.get_error = get_error
        self.find_error = find_error
        self.quit_error = quit_error
        self.calls: List[tuple] = []
        self.quit_count = 0

    def get(self, url: str) -> None:
        self.calls.append(("get", url))
        if self.get_error:
            raise self.get_error

    def find_element(self, by: str, value: str) -> FakeElement:
        self.calls.append(("find_element", by, value))
        if self.find_error:
            raise self.find_error
        return FakeElement(self.body)

    def quit(self) -> None:
        self.calls.append(("quit",))
        self.quit_count += 1
        if self.quit_error:
            raise self.quit_error


class FakeFactory:
    """Driver factory returning a prepared FakeDriver, or raising on session creation."""

    def __init__(self, driver: Optional[FakeDriver] = None, error: Optional[Exception] = None) -> None:
        self.driver = driver
        self.error = error
        self.requests: List[tuple] = []

    def __call__(self, hub_url, options):
        self.requests.append((hub_url, options))
        if self.error:
            raise self.error
        return self.driver


@pytest.fixture(autouse=True)
def reset_logger():
    """CliRunner swaps stderr; re-attach the handler to the real stream after each test."""
    yield
    configure(level="WARNING")


@pytest.fixture()
def probe_config() -> ProbeConfig:
    return ProbeConfig(hub_url="http://grid:4444/wd/hub", target_url="http://app:3000/health")


@pytest.fixture()
def make_factory() -> Callable[..., FakeFactory]:
    """
    Build a FakeFactory: make_factory(body="ok") or make_factory(error=Exception()).
    Driver options (get_error, find_error, quit_error) are forwarded to FakeDriver.
    """

    def _make(body: str = "System OK", error: Optional[Exception] = None, **driver_kwargs) -> FakeFactory:
        if error is not None:
            return FakeFactory(error=error)
        return FakeFactory(driver=FakeDriver(body=body, **driver_kwargs))

    return _make
