# File: health_probe/probe.py
"""health_probe.probe: открыть удалённую сессию браузера, прочитать текст страницы и проверить готовность."""

from __future__ import annotations

import re
from typing import Optional

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from health_probe.config import ProbeConfig
from health_probe.errors import LogicalFailure, OperationalError
from health_probe.logger import logger
from health_probe.models import ExitCode, ProbeResult
from health_probe.session import DriverFactory, remote_session

__all__ = ["HealthProbe", "is_ready", "SUCCESS_MESSAGE", "NOT_READY_MESSAGE"]

SUCCESS_MESSAGE = "Selenium health check OK"
NOT_READY_MESSAGE = "Health endpoint did not return ok"

_READY_RE = re.compile(r"ok", re.IGNORECASE)


def is_ready(text: str) -> bool:
    """Истина, если в тексте есть подстрока "ok" в любом регистре."""
    return _READY_RE.search(text) is not None


class HealthProbe:
    """Одна проверка: сессия → переход на страницу → текст body → предикат → закрытие сессии."""

    def __init__(
        self,
        config: Optional[ProbeConfig] = None,
        driver_factory: Optional[DriverFactory] = None,
    ) -> None:
        self.config = config or ProbeConfig()
        self.driver_factory = driver_factory

    def run(self) -> ProbeResult:
        """Выполняет проверку и возвращает результат; ошибки превращаются в код выхода."""
        cfg = self.config
        try:
            body = self._check()
        except LogicalFailure as exc:
            logger.error("%s: %r", exc, exc.body_text)
            return self._result(ExitCode.NOT_READY, str(exc), body_text=exc.body_text)
        except OperationalError as exc:
            logger.error("Probe failed at %s stage: %s", exc.stage, exc)
            return self._result(ExitCode.ERROR, str(exc), error=str(exc))

        logger.info("Target %s is ready", cfg.target)
        return self._result(ExitCode.READY, SUCCESS_MESSAGE, body_text=body)

    def _check(self) -> str:
        with remote_session(self.config, self.driver_factory) as driver:
            self._navigate(driver)
            body = self._read_body(driver)
        if not is_ready(body):
            raise LogicalFailure(NOT_READY_MESSAGE, body_text=body)
        return body

    def _navigate(self, driver: WebDriver) -> None:
        target = self.config.target
        logger.info("Navigating to %s", target)
        try:
            driver.get(target)
        except Exception as exc:
            raise OperationalError(f"Navigation to {target} failed: {exc}", stage="navigate") from exc

    def _read_body(self, driver: WebDriver) -> str:
        try:
            text = driver.find_element(By.CSS_SELECTOR, "body").text
        except Exception as exc:
            raise OperationalError(f"Could not read page body: {exc}", stage="extract") from exc
        logger.debug("Body text: %r", text)
        return text or ""

    def _result(self, code: ExitCode, message: str, **extra) -> ProbeResult:
        return ProbeResult(
            exit_code=code,
            message=message,
            target_url=self.config.target,
            hub_url=self.config.hub,
            **extra,
        )
