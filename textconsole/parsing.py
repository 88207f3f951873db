"""Parsing strategies for typed reads.

Each strategy maps a raw answer to a value of its domain, or ``None`` when the
answer is not acceptable. ``False`` and ``0`` are valid results, so callers
must compare against ``None`` by identity.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

_LEADING_INT = re.compile(r"[+-]?\d+")

_TRUE_WORDS = frozenset({"true", "yes"})
_FALSE_WORDS = frozenset({"false", "no"})


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return None


def parse_float(text: Optional[str]) -> Optional[float]:
    """Accept anything ``float()`` understands except NaN and digit separators."""
    if text is None or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_int(text: Optional[str]) -> Optional[int]:
    """Accept a whole number only when its integer and float readings agree.

    ``"3.0"`` reads as 3 both ways and is accepted; ``"3.5"`` would truncate to
    3 and is rejected instead.
    """
    if text is None:
        return None
    stripped = text.strip()
    as_int = _leading_int(stripped)
    as_float = parse_float(stripped)
    if as_int is None or as_float is None:
        return None
    try:
        if float(as_int) != as_float:
            return None
    except OverflowError:
        return None
    return as_int


def parse_boolean(text: Optional[str]) -> Optional[bool]:
    if text is None:
        return None
    normalized = text.lower()
    if normalized in _TRUE_WORDS:
        return True
    if normalized in _FALSE_WORDS:
        return False
    return None


@dataclass(frozen=True, slots=True)
class ParsingStrategy:
    """A parse function plus what the retry prompt calls its domain."""

    name: str
    label: str
    parse: Callable[[Optional[str]], Any]
    default: Any


INTEGER = ParsingStrategy(name="int", label="an integer", parse=parse_int, default=0)
FLOAT = ParsingStrategy(name="float", label="a float", parse=parse_float, default=0.0)
BOOLEAN = ParsingStrategy(
    name="boolean",
    label="a boolean (true/false)",
    parse=parse_boolean,
    default=False,
)

STRATEGIES = {strategy.name: strategy for strategy in (INTEGER, FLOAT, BOOLEAN)}
