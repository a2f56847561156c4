# File: health_probe/errors.py
"""health_probe.errors: Исключения проверки готовности."""

from __future__ import annotations

from typing import Literal, Optional

Stage = Literal["session", "navigate", "extract"]

__all__ = ["ProbeError", "OperationalError", "LogicalFailure"]


class ProbeError(Exception):
    """Базовое исключение HealthProbe."""


class OperationalError(ProbeError):
    """Сбой взаимодействия с WebDriver-сервисом или целевой страницей."""

    def __init__(self, message: str, *, stage: Stage) -> None:
        super().__init__(message)
        self.stage = stage


class LogicalFailure(ProbeError):
    """Страница прочитана, но её текст не прошёл проверку готовности."""

    def __init__(self, message: str, *, body_text: Optional[str] = None) -> None:
        super().__init__(message)
        self.body_text = body_text
