# health_probe/session.py
"""
Session module: builds the headless browser profile and owns the remote
WebDriver session for the duration of one probe.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.remote.webdriver import WebDriver

from health_probe.config import ProbeConfig
from health_probe.errors import OperationalError
from health_probe.logger import logger

DriverFactory = Callable[[str, ChromeOptions], WebDriver]

__all__ = ["DriverFactory", "build_options", "default_driver_factory", "remote_session"]


def build_options(config: ProbeConfig) -> ChromeOptions:
    """Headless Chrome profile requested from the automation service."""
    options = ChromeOptions()
    for arg in config.headless_args:
        options.add_argument(arg)
    return options


def default_driver_factory(hub_url: str, options: ChromeOptions) -> WebDriver:
    return webdriver.Remote(command_executor=hub_url, options=options)


@contextmanager
def remote_session(
    config: ProbeConfig,
    driver_factory: Optional[DriverFactory] = None,
) -> Iterator[WebDriver]:
    """
    Acquire a remote browser session and guarantee ``quit()`` on exit.

    If acquisition fails an :class:`OperationalError` is raised and nothing is
    released. Otherwise the session is released exactly once, whatever happens
    inside the ``with`` block.
    """
    factory = driver_factory or default_driver_factory
    options = build_options(config)

    logger.debug("Requesting %s session from %s", config.browser, config.hub)
    try:
        driver = factory(config.hub, options)
    except Exception as exc:
        logger.error("Session creation failed: %s", exc)
        raise OperationalError(f"Could not create remote session: {exc}", stage="session") from exc
    logger.info("Remote session created on %s", config.hub)

    try:
        yield driver
    finally:
        try:
            driver.quit()
        except Exception as exc:
            # outcome of the run is already decided
            logger.warning("Failed to close remote session: %s", exc)
        else:
            logger.debug("Remote session closed")
