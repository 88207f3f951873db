"""Environment-backed console configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

Mode = Literal["interactive", "legacy"]

DEFAULT_MAX_RETRIES = 100
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _to_positive_int(value: str | None, *, default: int) -> int:
    if not value:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _to_mode(value: str | None) -> Mode:
    if value and value.strip().lower() == "legacy":
        return "legacy"
    return "interactive"


def _to_log_level(value: str | None) -> str:
    if value and value.strip().upper() in LOG_LEVELS:
        return value.strip().upper()
    return "WARNING"


@dataclass(slots=True)
class ConsoleConfig:
    """Runtime settings loaded from environment variables."""

    mode: Mode = "interactive"
    max_retries: int = DEFAULT_MAX_RETRIES
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ConsoleConfig:
        return cls(
            mode=_to_mode(os.getenv("TEXTCONSOLE_MODE")),
            max_retries=_to_positive_int(
                os.getenv("TEXTCONSOLE_MAX_RETRIES"),
                default=DEFAULT_MAX_RETRIES,
            ),
            log_level=_to_log_level(os.getenv("TEXTCONSOLE_LOG_LEVEL")),
        )
