from __future__ import annotations

from typing import Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from .errors import EndOfInput
from .io import IOInterface


class PromptToolkitIO(IOInterface):
    """prompt_toolkit-based line source with editing and per-session history."""

    def __init__(
        self,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self._output = output
        self._session: PromptSession[str] = PromptSession(input=input, output=output)
        self._style = Style.from_dict(
            {
                "prompt": "bold",
                "error": "#ff5f5f",
            }
        )

    def ask(self, prompt: str) -> str:
        try:
            return self._session.prompt(FormattedText([("class:prompt", prompt)]), style=self._style)
        except EOFError:
            raise EndOfInput() from None

    def read_line(self) -> str:
        return self.ask("")

    def write(self, text: str = "") -> None:
        self._print([("", text)])

    def write_error(self, text: str) -> None:
        self._print([("class:error", text + "\n")])

    def _print(self, fragments: list[tuple[str, str]]) -> None:
        kwargs = {"output": self._output} if self._output is not None else {}
        print_formatted_text(FormattedText(fragments), end="", style=self._style, **kwargs)
