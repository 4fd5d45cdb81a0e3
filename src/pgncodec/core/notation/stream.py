"""Forward-only character stream with one character of push-back."""

from __future__ import annotations

import io
from typing import TextIO


class PgnStream:
    """Character source for the item scanner.

    Wraps any text stream (an open file, ``sys.stdin``, a ``StringIO``)
    and tracks the current line for diagnostics.
    """

    __slots__ = ("_source", "_pushback", "_last", "_line", "_exhausted")

    def __init__(self, source: TextIO) -> None:
        self._source = source
        self._pushback: str = ""
        self._last: str = ""
        self._line = 1
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str) -> PgnStream:
        return cls(io.StringIO(text))

    @property
    def line_number(self) -> int:
        """1-based line of the next character to be read."""
        return self._line

    @property
    def at_end(self) -> bool:
        """A read has hit end of data and nothing is pushed back."""
        return self._exhausted and not self._pushback

    def read_char(self) -> str:
        """Return the next character, or ``""`` at end of data."""
        if self._pushback:
            ch, self._pushback = self._pushback, ""
        else:
            ch = self._source.read(1)
            if not ch:
                self._exhausted = True
                self._last = ""
                return ""
        if ch == "\n":
            self._line += 1
        self._last = ch
        return ch

    def rewind_char(self) -> None:
        """Push the last character read back onto the stream.

        Raises:
            RuntimeError: Nothing to rewind (start of data, end of data or
                a second consecutive rewind).
        """
        if not self._last or self._pushback:
            raise RuntimeError("cannot rewind PGN stream")
        if self._last == "\n":
            self._line -= 1
        self._pushback, self._last = self._last, ""
