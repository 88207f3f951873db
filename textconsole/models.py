from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Literal

ReadState = Literal["accepted", "cancelled", "exhausted"]

RETRY_TEMPLATE = "That was not {label}. Please try again. {prompt}"


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounds a single typed read: how many bad answers before giving up."""

    max_retries: int = 100
    template: str = RETRY_TEMPLATE

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def retry_prompt(self, label: str, prompt: str) -> str:
        return self.template.format(label=label, prompt=prompt)


@dataclass(slots=True)
class SessionState:
    """Printed output owned by one console instance."""

    captured_lines: List[str] = field(default_factory=list)
    pending_fragment: str = ""


@dataclass(slots=True)
class ReadOutcome:
    """How a typed read ended."""

    state: ReadState
    value: Any
    attempts: int
