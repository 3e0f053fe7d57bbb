from __future__ import annotations

from decimal import Decimal
import io
import sys

import pytest

from prompter import shared
from prompter.errors import EndOfInput
from prompter.prompter import Prompter


@pytest.fixture(autouse=True)
def fresh_shared_prompter():
    shared.reset()
    yield
    shared.reset()


def feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_get_prompter_returns_one_instance():
    first = shared.get_prompter()

    assert isinstance(first, Prompter)
    assert shared.get_prompter() is first


def test_reset_discards_instance():
    first = shared.get_prompter()
    shared.reset()

    assert shared.get_prompter() is not first


def test_module_functions_read_stdin(monkeypatch, capsys):
    feed_stdin(monkeypatch, "x\n12\n3.25\nAda\n")

    assert shared.prompt_for_int("n? ") == 12
    assert shared.prompt_for_big_decimal("d? ") == Decimal("3.25")
    assert shared.prompt_for_string("name? ") == "Ada"
    assert capsys.readouterr().out == "n? Invalid value, please try again.\nn? d? name? "


def test_set_error_message_applies_to_shared_prompter(monkeypatch, capsys):
    feed_stdin(monkeypatch, "300\n100\n")

    shared.set_error_message("a byte is -128..127")

    assert shared.prompt_for_byte("b? ") == 100
    assert "a byte is -128..127\n" in capsys.readouterr().out


def test_set_error_message_none_restores_default():
    shared.set_error_message("custom")
    shared.set_error_message(None)

    assert shared.get_prompter().error_message == Prompter.DEFAULT_ERROR_MESSAGE


def test_remaining_wrappers_delegate(monkeypatch):
    feed_stdin(monkeypatch, "1\n2\n3\n4.5\n6.5\n")

    assert shared.prompt_for_short("") == 1
    assert shared.prompt_for_long("") == 2
    assert shared.prompt_for_big_integer("") == 3
    assert shared.prompt_for_float("") == 4.5
    assert shared.prompt_for_double("") == 6.5
    with pytest.raises(EndOfInput):
        shared.prompt_for_int("")
