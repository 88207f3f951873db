from __future__ import annotations

from typing import Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from .io import IOInterface


class PromptToolkitIO(IOInterface):
    """prompt_toolkit-backed gateway: one modal line prompt per read.

    Ctrl+C and Ctrl+D cancel the prompt instead of raising.
    """

    def __init__(
        self,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self._output = output
        self._style = Style.from_dict(
            {
                "prompt": "#89c6ff",
                "printed": "#dddddd",
            }
        )
        self._session: PromptSession[str] = PromptSession(
            input=input,
            output=output,
            style=self._style,
        )

    def read(self, prompt: str = "") -> Optional[str]:
        try:
            return self._session.prompt(FormattedText([("class:prompt", prompt)]))
        except (KeyboardInterrupt, EOFError):
            return None

    def write(self, text: str = "") -> None:
        print_formatted_text(
            FormattedText([("class:printed", text)]),
            end="",
            style=self._style,
            output=self._output,
        )
