"""Module-level prompting over one process-wide :class:`Prompter`.

Handy for short scripts that do not want to build a prompter themselves::

    from prompter import shared

    age = shared.prompt_for_int("How old are you? ")

The shared instance reads ``sys.stdin`` and is created on first use. None
of these functions are thread-safe.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .io import StdIO
from .prompter import Prompter

_prompter: Optional[Prompter] = None


def get_prompter() -> Prompter:
    global _prompter
    if _prompter is None:
        _prompter = Prompter(StdIO())
    return _prompter


def set_error_message(message: Optional[str]) -> None:
    """Change the message shown on bad input; ``None`` restores the default."""
    get_prompter().error_message = message


def reset() -> None:
    global _prompter
    _prompter = None


def prompt_for_string(prompt_text: str) -> str:
    return get_prompter().prompt_for_string(prompt_text)


def prompt_for_byte(prompt_text: str) -> int:
    return get_prompter().prompt_for_byte(prompt_text)


def prompt_for_short(prompt_text: str) -> int:
    return get_prompter().prompt_for_short(prompt_text)


def prompt_for_int(prompt_text: str) -> int:
    return get_prompter().prompt_for_int(prompt_text)


def prompt_for_long(prompt_text: str) -> int:
    return get_prompter().prompt_for_long(prompt_text)


def prompt_for_float(prompt_text: str) -> float:
    return get_prompter().prompt_for_float(prompt_text)


def prompt_for_double(prompt_text: str) -> float:
    return get_prompter().prompt_for_double(prompt_text)


def prompt_for_big_integer(prompt_text: str) -> int:
    return get_prompter().prompt_for_big_integer(prompt_text)


def prompt_for_big_decimal(prompt_text: str) -> Decimal:
    return get_prompter().prompt_for_big_decimal(prompt_text)
