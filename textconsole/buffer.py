from __future__ import annotations

from typing import List

from .models import SessionState


class OutputBuffer:
    """Collects printed text until a caller asks for it line by line."""

    def __init__(self) -> None:
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def append(self, text: str) -> None:
        self._state.pending_fragment += text

    def flush(self) -> List[str]:
        """Move the pending text into the captured history and return all of it.

        A newline that ends the text does not produce an empty last line, but
        blank lines in the middle are kept.
        """
        self._state.captured_lines.extend(_split_lines(self._state.pending_fragment))
        lines = self._state.captured_lines
        self._state = SessionState()
        return lines

    def lines(self) -> List[str]:
        """Captured history plus the pending text, leaving both in place."""
        return self._state.captured_lines + _split_lines(self._state.pending_fragment)

    def clear(self) -> None:
        self._state = SessionState()


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if not lines[-1]:
        lines = lines[:-1]
    return lines
