"""Tests for the PGN character stream."""

import io

import pytest

from pgncodec.core.notation import PgnStream


class TestReadChar:
    def test_reads_in_order(self) -> None:
        stream = PgnStream.from_text("ab")
        assert stream.read_char() == "a"
        assert stream.read_char() == "b"

    def test_end_of_data(self) -> None:
        stream = PgnStream.from_text("a")
        assert not stream.at_end
        stream.read_char()
        assert not stream.at_end
        assert stream.read_char() == ""
        assert stream.at_end

    def test_wraps_file_objects(self) -> None:
        stream = PgnStream(io.StringIO("x"))
        assert stream.read_char() == "x"

    def test_line_number_advances_on_newline(self) -> None:
        stream = PgnStream.from_text("a\nb")
        assert stream.line_number == 1
        stream.read_char()
        stream.read_char()
        assert stream.line_number == 2


class TestRewind:
    def test_rewind_returns_same_char(self) -> None:
        stream = PgnStream.from_text("[x")
        assert stream.read_char() == "["
        stream.rewind_char()
        assert stream.read_char() == "["
        assert stream.read_char() == "x"

    def test_rewind_restores_line_number(self) -> None:
        stream = PgnStream.from_text("\n[")
        stream.read_char()
        assert stream.line_number == 2
        stream.rewind_char()
        assert stream.line_number == 1

    def test_pushed_back_char_is_not_end(self) -> None:
        stream = PgnStream.from_text("a")
        stream.read_char()
        stream.rewind_char()
        assert not stream.at_end

    def test_double_rewind_raises(self) -> None:
        stream = PgnStream.from_text("ab")
        stream.read_char()
        stream.rewind_char()
        with pytest.raises(RuntimeError):
            stream.rewind_char()

    def test_rewind_before_read_raises(self) -> None:
        with pytest.raises(RuntimeError):
            PgnStream.from_text("a").rewind_char()
