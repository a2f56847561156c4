# health_probe/models.py
"""
Data models for a single HealthProbe run.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, Dict, Optional


class ExitCode(IntEnum):
    READY = 0
    NOT_READY = 1
    ERROR = 2


@dataclass(slots=True, frozen=True)
class ProbeResult:
    """Outcome of one run: process exit code, console message and what was read."""

    exit_code: ExitCode
    message: str
    target_url: str
    hub_url: str
    body_text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.exit_code is ExitCode.READY

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["exit_code"] = int(self.exit_code)
        data["outcome"] = self.exit_code.name.lower()
        return data
