from __future__ import annotations

import sys
from typing import Iterable, List, Optional

from .errors import GatewayError


class IOInterface:
    """Prompt gateway and live display sink behind a console.

    ``read`` blocks until the user answers and returns ``None`` when they
    decline to answer at all.
    """

    def read(self, prompt: str = "") -> Optional[str]:  # pragma: no cover - interface contract
        raise NotImplementedError

    def write(self, text: str = "") -> None:  # pragma: no cover - interface contract
        raise NotImplementedError


class StdIO(IOInterface):
    """Standard stdin/stdout implementation."""

    def read(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def write(self, text: str = "") -> None:
        sys.stdout.write(text)
        sys.stdout.flush()


class BufferedIO(IOInterface):
    """Test-double IO that replays scripted answers and captures output.

    A scripted ``None`` behaves like the user cancelling the prompt.
    """

    def __init__(self, scripted_inputs: Iterable[Optional[str]] = ()):
        self._inputs = list(scripted_inputs)
        self.prompts: List[str] = []
        self.outputs: List[str] = []

    def read(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self._inputs:
            raise GatewayError("No more scripted inputs")
        return self._inputs.pop(0)

    def write(self, text: str = "") -> None:
        self.outputs.append(text)
