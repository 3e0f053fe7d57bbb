from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class ValueType:
    """A type the prompter knows how to read, keyed by a short name."""

    name: str
    parse: Callable[[str], Any]
    description: str = ""
