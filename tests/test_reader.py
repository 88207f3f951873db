from __future__ import annotations

import logging
from typing import Optional

import pytest

from textconsole.errors import GatewayError
from textconsole.io import BufferedIO
from textconsole.models import RetryPolicy
from textconsole.parsing import BOOLEAN, FLOAT, INTEGER
from textconsole.reader import TypedReader


class RepeatingGateway:
    def __init__(self, answer: Optional[str]):
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return self.answer


def test_valid_first_answer_is_accepted_immediately():
    io = BufferedIO(["17"])
    reader = TypedReader(io.read)

    outcome = reader.read("Age? ", INTEGER)

    assert outcome.state == "accepted"
    assert outcome.value == 17
    assert outcome.attempts == 1
    assert io.prompts == ["Age? "]


def test_invalid_answer_reprompts_with_error_notice():
    io = BufferedIO(["3.5", "three", "3"])
    reader = TypedReader(io.read)

    outcome = reader.read("How many? ", INTEGER)

    assert outcome.value == 3
    assert outcome.attempts == 3
    retry_prompt = "That was not an integer. Please try again. How many? "
    assert io.prompts == ["How many? ", retry_prompt, retry_prompt]


def test_always_invalid_gateway_falls_back_after_101_attempts():
    gateway = RepeatingGateway("abc")
    reader = TypedReader(gateway)

    outcome = reader.read("Number: ", INTEGER)

    assert outcome.state == "exhausted"
    assert outcome.value == 0
    assert len(gateway.prompts) == 101
    assert outcome.attempts == 101


def test_exhaustion_default_matches_domain():
    assert TypedReader(RepeatingGateway("nope")).read("x", FLOAT).value == 0.0
    assert TypedReader(RepeatingGateway("nope")).read("x", BOOLEAN).value is False


def test_custom_policy_changes_ceiling():
    gateway = RepeatingGateway("bad")
    reader = TypedReader(gateway, RetryPolicy(max_retries=2))

    outcome = reader.read("Number: ", INTEGER)

    assert outcome.state == "exhausted"
    assert len(gateway.prompts) == 3
    assert reader.policy.max_attempts == 3


def test_cancellation_short_circuits_on_first_call():
    gateway = RepeatingGateway(None)
    reader = TypedReader(gateway)

    outcome = reader.read("Number: ", INTEGER)

    assert outcome.state == "cancelled"
    assert outcome.value is None
    assert gateway.prompts == ["Number: "]


def test_cancellation_after_bad_answer_skips_default():
    io = BufferedIO(["maybe", None])
    reader = TypedReader(io.read)

    outcome = reader.read("Continue? ", BOOLEAN)

    assert outcome.state == "cancelled"
    assert outcome.value is None
    assert outcome.attempts == 2


def test_false_answer_is_accepted_not_retried():
    io = BufferedIO(["no"])
    outcome = TypedReader(io.read).read("Continue? ", BOOLEAN)

    assert outcome.state == "accepted"
    assert outcome.value is False


def test_gateway_failures_propagate():
    io = BufferedIO(["x"])
    reader = TypedReader(io.read)

    with pytest.raises(GatewayError):
        reader.read("Number: ", INTEGER)


def test_exhaustion_is_logged(caplog: pytest.LogCaptureFixture):
    reader = TypedReader(RepeatingGateway("abc"), RetryPolicy(max_retries=0))

    with caplog.at_level(logging.WARNING, logger="textconsole.reader"):
        reader.read("Number: ", INTEGER)

    assert [record.getMessage() for record in caplog.records] == ["read_exhausted"]
