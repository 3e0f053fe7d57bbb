from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Optional, TypeVar

from . import parsers
from .errors import EndOfInput, ParseFailure
from .io import IOInterface, StdIO

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Prompter:
    """Asks for a value until the user types one that parses.

    A prompter owns one line source for its whole life. It is not safe to
    share between threads: the buffered input would be read concurrently.
    """

    DEFAULT_ERROR_MESSAGE = "Invalid value, please try again."

    def __init__(
        self,
        io: Optional[IOInterface] = None,
        error_message: Optional[str] = None,
    ) -> None:
        self._io = io if io is not None else StdIO()
        self._error_message = self.DEFAULT_ERROR_MESSAGE
        self.error_message = error_message

    @property
    def io(self) -> IOInterface:
        return self._io

    @property
    def error_message(self) -> str:
        return self._error_message

    @error_message.setter
    def error_message(self, value: Optional[str]) -> None:
        self._error_message = self.DEFAULT_ERROR_MESSAGE if value is None else value

    def prompt(self, prompt_text: str, parse: Callable[[str], T]) -> T:
        """Show ``prompt_text`` and return ``parse(line)`` for the first line that parses.

        ``parse`` signals bad input by raising :class:`ParseFailure`; the
        error message is printed and the prompt repeats, without limit.
        :class:`EndOfInput` and I/O errors propagate to the caller.
        """
        while True:
            try:
                line = self._io.ask(prompt_text)
            except EndOfInput:
                logger.debug("Input ended while waiting for %r", prompt_text)
                raise
            try:
                return parse(line)
            except ParseFailure as exc:
                logger.debug("Rejected %r as %s", exc.text, exc.type_name)
                self._io.write_error(self._error_message)

    def prompt_for_string(self, prompt_text: str) -> str:
        return self.prompt(prompt_text, parsers.parse_string)

    def prompt_for_byte(self, prompt_text: str) -> int:
        return self.prompt(prompt_text, parsers.parse_byte)

    def prompt_for_short(self, prompt_text: str) -> int:
        return self.prompt(prompt_text, parsers.parse_short)

    def prompt_for_int(self, prompt_text: str) -> int:
        return self.prompt(prompt_text, parsers.parse_int)

    def prompt_for_long(self, prompt_text: str) -> int:
        return self.prompt(prompt_text, parsers.parse_long)

    def prompt_for_float(self, prompt_text: str) -> float:
        return self.prompt(prompt_text, parsers.parse_float)

    def prompt_for_double(self, prompt_text: str) -> float:
        return self.prompt(prompt_text, parsers.parse_double)

    def prompt_for_big_integer(self, prompt_text: str) -> int:
        return self.prompt(prompt_text, parsers.parse_big_integer)

    def prompt_for_big_decimal(self, prompt_text: str) -> Decimal:
        return self.prompt(prompt_text, parsers.parse_big_decimal)

    def prompt_for(self, type_name: str, prompt_text: str):
        """Prompt for a value of a type from :data:`prompter.parsers.VALUE_TYPES` by name."""
        return self.prompt(prompt_text, parsers.get_value_type(type_name).parse)
