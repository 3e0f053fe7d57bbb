from __future__ import annotations

import locale
import sys
from typing import IO, List, Optional, Union

from .errors import EndOfInput


class IOInterface:
    """Abstraction over line input and text output to simplify testing."""

    def read_line(self) -> str:  # pragma: no cover - interface contract
        """Return the next line without its terminator, or raise EndOfInput."""
        raise NotImplementedError

    def write(self, text: str = "") -> None:  # pragma: no cover - interface contract
        """Write text without a newline and flush it."""
        raise NotImplementedError

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def write_error(self, text: str) -> None:
        self.write_line(text)

    def ask(self, prompt: str) -> str:
        """Show the prompt and read the answer."""
        self.write(prompt)
        return self.read_line()


class StreamIO(IOInterface):
    """Reads lines from a text or byte stream and writes to a text stream.

    Byte streams are decoded with ``encoding``, which defaults to the
    platform's preferred encoding. The streams are never closed here.
    """

    def __init__(
        self,
        input_stream: Union[IO[str], IO[bytes]],
        output_stream: IO[str],
        encoding: Optional[str] = None,
    ) -> None:
        self._input_stream = input_stream
        self._output_stream = output_stream
        self._encoding = encoding or locale.getpreferredencoding(False)

    @property
    def input_stream(self) -> Union[IO[str], IO[bytes]]:
        return self._input_stream

    @property
    def output_stream(self) -> IO[str]:
        return self._output_stream

    def read_line(self) -> str:
        """Return the next complete line.

        Input that ends before a newline, including a trailing partial line,
        raises :class:`EndOfInput`.
        """
        line = self.input_stream.readline()
        if isinstance(line, bytes):
            return _strip_terminator(line, b"\n", b"\r").decode(self._encoding, errors="replace")
        return _strip_terminator(line, "\n", "\r")

    def write(self, text: str = "") -> None:
        self.output_stream.write(text)
        self.output_stream.flush()


class StdIO(StreamIO):
    """Standard stdin/stdout implementation.

    The streams are looked up on every call so that replacing ``sys.stdin``
    or ``sys.stdout`` after construction is honoured.
    """

    def __init__(self, encoding: Optional[str] = None) -> None:
        super().__init__(sys.stdin, sys.stdout, encoding=encoding)

    @property
    def input_stream(self) -> IO[str]:
        return sys.stdin

    @property
    def output_stream(self) -> IO[str]:
        return sys.stdout


class BufferedIO(IOInterface):
    """Test-double IO that consumes scripted input and captures output."""

    def __init__(self, scripted_inputs: List[str]):
        self._inputs = list(scripted_inputs)
        self.outputs: List[str] = []

    @property
    def remaining(self) -> int:
        return len(self._inputs)

    @property
    def transcript(self) -> str:
        return "".join(self.outputs)

    def read_line(self) -> str:
        if not self._inputs:
            raise EndOfInput("No more scripted inputs")
        return self._inputs.pop(0)

    def write(self, text: str = "") -> None:
        self.outputs.append(text)


def _strip_terminator(line, newline, carriage_return):
    if not line.endswith(newline):
        raise EndOfInput("Input ended before a newline" if line else "End of input reached")
    line = line[: -len(newline)]
    if line.endswith(carriage_return):
        line = line[: -len(carriage_return)]
    return line
