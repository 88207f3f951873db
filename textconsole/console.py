from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Optional

from .buffer import OutputBuffer
from .errors import exact_arity
from .io import IOInterface, StdIO
from .models import ReadOutcome, RetryPolicy
from .parsing import BOOLEAN, FLOAT, INTEGER, ParsingStrategy
from .reader import PromptHandler, TypedReader

LOGGER = logging.getLogger(__name__)

PrintHandler = Callable[[str], None]


class Console:
    """Text console with typed reads and a quiet capture channel for graders.

    Everything printed is buffered until ``flush_quiet_output``; ``print`` and
    ``println`` also echo to the live display. Typed reads keep prompting until
    the answer parses, returning ``None`` if the user cancels and the type's
    zero value if the retry ceiling is reached.
    """

    def __init__(
        self,
        io: Optional[IOInterface] = None,
        policy: Optional[RetryPolicy] = None,
        echo: bool = True,
    ) -> None:
        io = io or StdIO()
        self._prompt_handler: PromptHandler = io.read
        self._print_handler: PrintHandler = io.write
        self._policy = policy or RetryPolicy()
        self._echo = echo
        self._buffer = OutputBuffer()
        self._lock = threading.RLock()
        self.last_outcome: Optional[ReadOutcome] = None

    def configure(
        self,
        prompt: Optional[PromptHandler] = None,
        print: Optional[PrintHandler] = None,
    ) -> None:
        """Swap the prompt and/or print handlers; omitted ones are kept."""
        with self._lock:
            self._prompt_handler = prompt or self._prompt_handler
            self._print_handler = print or self._print_handler

    @property
    def captured(self) -> List[str]:
        """Everything ``flush_quiet_output`` would return, without flushing."""
        with self._lock:
            return self._buffer.lines()

    # Output

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    @exact_arity
    def print(self, line: Any) -> None:
        text = str(line)
        with self._lock:
            self._buffer.append(text)
            if self._echo:
                self._print_handler(text)

    @exact_arity
    def println(self, line: Any = "") -> None:
        self.print(f"{line}\n")

    @exact_arity
    def quiet_print(self, line: Any) -> None:
        with self._lock:
            self._buffer.append(str(line))

    @exact_arity
    def quiet_println(self, line: Any = "") -> None:
        self.quiet_print(f"{line}\n")

    def flush_quiet_output(self) -> List[str]:
        with self._lock:
            return self._buffer.flush()

    # Input

    @exact_arity
    def read_line(self, prompt: str) -> Optional[str]:
        with self._lock:
            return self._prompt_handler(prompt)

    @exact_arity
    def read_int(self, prompt: str) -> Optional[int]:
        return self._read(prompt, INTEGER)

    @exact_arity
    def read_float(self, prompt: str) -> Optional[float]:
        return self._read(prompt, FLOAT)

    @exact_arity
    def read_boolean(self, prompt: str) -> Optional[bool]:
        return self._read(prompt, BOOLEAN)

    def read_value(self, prompt: str, strategy: ParsingStrategy) -> Any:
        """Typed read with a caller-supplied strategy."""
        return self._read(prompt, strategy)

    def _read(self, prompt: str, strategy: ParsingStrategy) -> Any:
        with self._lock:
            reader = TypedReader(self._prompt_handler, self._policy)
            outcome = reader.read(prompt, strategy)
            self.last_outcome = outcome
        if outcome.state == "exhausted":
            LOGGER.info(
                "read_default_used",
                extra={"strategy": strategy.name, "default": strategy.default},
            )
        return outcome.value
