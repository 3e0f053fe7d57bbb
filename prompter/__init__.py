from .errors import EndOfInput, ParseFailure, PrompterError
from .io import BufferedIO, IOInterface, StdIO, StreamIO
from .prompter import Prompter

__all__ = [
    "BufferedIO",
    "EndOfInput",
    "IOInterface",
    "ParseFailure",
    "Prompter",
    "PrompterError",
    "StdIO",
    "StreamIO",
]
