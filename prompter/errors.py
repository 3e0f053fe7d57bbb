from __future__ import annotations


class PrompterError(Exception):
    """Base class for errors raised by the prompter package."""


class ParseFailure(PrompterError, ValueError):
    """A line of text does not match the grammar of the requested type."""

    def __init__(self, text: str, type_name: str, reason: str = "") -> None:
        self.text = text
        self.type_name = type_name
        self.reason = reason
        message = f"{text!r} is not a valid {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EndOfInput(PrompterError, EOFError):
    """The input source ran out before a line could be read."""

    def __init__(self, message: str = "End of input reached") -> None:
        super().__init__(message)
