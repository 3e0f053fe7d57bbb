from __future__ import annotations

import argparse
import logging
import os
import sys
from decimal import Decimal
from typing import Callable, Optional

from .errors import EndOfInput
from .io import IOInterface, StdIO
from .parsers import VALUE_TYPES
from .prompter import Prompter

logger = logging.getLogger(__name__)

MODES = ("plain", "interactive")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="prompter",
        description="Ask for typed values on the terminal, re-prompting until the input is valid.",
    )
    parser.add_argument(
        "prompt",
        nargs="?",
        help="Prompt to show for a single value. Without it the age/year sample runs.",
    )
    parser.add_argument(
        "--type",
        dest="value_type",
        choices=sorted(VALUE_TYPES),
        default="string",
        help="Type of the single value asked with PROMPT.",
    )
    parser.add_argument(
        "--error-message",
        default=os.getenv("PROMPTER_ERROR_MESSAGE"),
        help="Message shown after invalid input.",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=_env_choice(parser, "PROMPTER_MODE", MODES, "plain"),
        help="`plain` reads stdin line by line, `interactive` uses prompt_toolkit line editing.",
    )
    parser.add_argument(
        "--log-level",
        default=_env_choice(parser, "PROMPTER_LOG_LEVEL", LOG_LEVELS, "WARNING", str.upper),
        type=str.upper,
        choices=LOG_LEVELS,
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    io = _build_io(args.mode)
    prompter = Prompter(io, error_message=args.error_message)

    try:
        if args.prompt is None:
            run_sample(prompter)
        else:
            value = prompter.prompt_for(args.value_type, args.prompt)
            io.write_line(_format_value(value))
    except EndOfInput:
        logger.debug("Input ended before all values were read")
        print("\nInput ended before a value was entered.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


def run_sample(prompter: Prompter) -> None:
    age = prompter.prompt_for_int("How old are you? ")
    year = prompter.prompt_for_int("What year were you born? ")
    prompter.io.write_line(f"Then, we must be in the year {age + year} or {age + year + 1}")


def _format_value(value) -> str:
    # str() of a very long int is limited by sys.get_int_max_str_digits()
    if isinstance(value, int):
        return str(Decimal(value))
    return str(value)


def _build_io(mode: str) -> IOInterface:
    if mode == "interactive":
        # Deferred import keeps plain mode usable without a terminal
        from .ui import PromptToolkitIO

        return PromptToolkitIO()
    return StdIO()


def _env_choice(
    parser: argparse.ArgumentParser,
    name: str,
    choices: tuple[str, ...],
    default: str,
    normalize: Callable[[str], str] = str,
) -> str:
    value = os.getenv(name)
    if not value:
        return default
    value = normalize(value)
    if value not in choices:
        parser.error(f"{name} must be one of {', '.join(choices)} (got {value!r})")
    return value


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
