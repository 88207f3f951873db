"""Retry loop behind the console's typed reads."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .models import ReadOutcome, RetryPolicy
from .parsing import ParsingStrategy

LOGGER = logging.getLogger(__name__)

PromptHandler = Callable[[str], Optional[str]]


class TypedReader:
    """Prompt repeatedly until an answer parses or the read has to stop.

    A cancelled prompt ends the read with ``None`` straight away. Each answer
    the strategy rejects counts as one failed attempt and re-prompts with an
    error notice in front of the original prompt. Once more than
    ``policy.max_retries`` attempts have failed the read gives up and returns
    the strategy's default.
    """

    def __init__(self, prompt_handler: PromptHandler, policy: Optional[RetryPolicy] = None) -> None:
        self._prompt_handler = prompt_handler
        self._policy = policy or RetryPolicy()

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def read(self, prompt: str, strategy: ParsingStrategy) -> ReadOutcome:
        active_prompt = prompt
        failures = 0
        while True:
            answer = self._prompt_handler(active_prompt)
            if answer is None:
                LOGGER.debug(
                    "read_cancelled",
                    extra={"strategy": strategy.name, "attempts": failures + 1},
                )
                return ReadOutcome(state="cancelled", value=None, attempts=failures + 1)

            value = strategy.parse(answer)
            if value is not None:
                LOGGER.debug(
                    "read_accepted",
                    extra={"strategy": strategy.name, "attempts": failures + 1},
                )
                return ReadOutcome(state="accepted", value=value, attempts=failures + 1)

            failures += 1
            if failures > self._policy.max_retries:
                LOGGER.warning(
                    "read_exhausted",
                    extra={"strategy": strategy.name, "attempts": failures},
                )
                return ReadOutcome(state="exhausted", value=strategy.default, attempts=failures)

            LOGGER.debug("read_retry", extra={"strategy": strategy.name, "attempts": failures})
            active_prompt = self._policy.retry_prompt(strategy.label, prompt)
