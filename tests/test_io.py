from __future__ import annotations

import io
import sys

import pytest

from prompter.errors import EndOfInput
from prompter.io import BufferedIO, StdIO, StreamIO


def test_stream_io_strips_lf_and_crlf():
    stream = StreamIO(io.StringIO("one\ntwo\r\n"), io.StringIO())

    assert stream.read_line() == "one"
    assert stream.read_line() == "two"
    with pytest.raises(EndOfInput):
        stream.read_line()


def test_stream_io_partial_last_line_is_end_of_input():
    stream = StreamIO(io.StringIO("one\nthree"), io.StringIO())

    assert stream.read_line() == "one"
    with pytest.raises(EndOfInput):
        stream.read_line()


def test_stream_io_partial_byte_line_is_end_of_input():
    stream = StreamIO(io.BytesIO(b"42\r"), io.StringIO(), encoding="utf-8")

    with pytest.raises(EndOfInput):
        stream.read_line()


def test_stream_io_keeps_carriage_return_inside_line():
    stream = StreamIO(io.StringIO("a\rb\n"), io.StringIO())

    assert stream.read_line() == "a\rb"


def test_stream_io_empty_line_is_not_end_of_input():
    stream = StreamIO(io.StringIO("\n"), io.StringIO())

    assert stream.read_line() == ""
    with pytest.raises(EndOfInput):
        stream.read_line()


def test_stream_io_decodes_bytes_with_given_encoding():
    stream = StreamIO(io.BytesIO("héllo\r\n".encode("utf-8")), io.StringIO(), encoding="utf-8")

    assert stream.read_line() == "héllo"


class FlushRecordingSink(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushed: list[str] = []

    def flush(self) -> None:
        self.flushed.append(self.getvalue())
        super().flush()


def test_stream_io_writes_and_flushes_without_newline():
    output = FlushRecordingSink()
    stream = StreamIO(io.StringIO(), output)

    stream.write("Name? ")
    stream.write_error("bad")

    assert output.getvalue() == "Name? bad\n"
    assert output.flushed == ["Name? ", "Name? bad\n"]


class SinkWatchingSource(io.StringIO):
    def __init__(self, text: str, sink: FlushRecordingSink) -> None:
        super().__init__(text)
        self.sink = sink
        self.flushed_at_read: list[list[str]] = []

    def readline(self, size: int = -1) -> str:
        self.flushed_at_read.append(list(self.sink.flushed))
        return super().readline(size)


def test_stream_io_prompt_is_flushed_before_reading():
    output = FlushRecordingSink()
    source = SinkWatchingSource("Ada\n", output)
    stream = StreamIO(source, output)

    assert stream.ask("Name? ") == "Ada"
    assert source.flushed_at_read == [["Name? "]]


def test_stream_io_does_not_close_streams():
    source = io.StringIO("x\n")
    sink = io.StringIO()
    stream = StreamIO(source, sink)

    stream.ask("? ")

    assert not source.closed and not sink.closed


def test_std_io_follows_replaced_sys_streams(monkeypatch, capsys):
    std = StdIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("typed\n"))

    answer = std.ask("prompt> ")

    assert answer == "typed"
    assert capsys.readouterr().out == "prompt> "


def test_buffered_io_records_outputs_and_runs_dry():
    buffered = BufferedIO(["first"])

    assert buffered.ask("? ") == "first"
    assert buffered.remaining == 0
    with pytest.raises(EndOfInput):
        buffered.read_line()
    buffered.write_line("done")
    assert buffered.transcript == "? done\n"
