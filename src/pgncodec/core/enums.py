"""Core enumerations for the PGN codec domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
    ERROR = 4  # unparseable result value


class PgnItem(IntEnum):
    """Semantic class of one item pulled from a PGN stream."""

    MOVE = auto()
    MOVE_NUMBER = auto()
    TAG = auto()
    COMMENT = auto()
    NAG = auto()
    RESULT = auto()
    EMPTY = auto()
    ERROR = auto()


class ParseOutcome(StrEnum):
    """How the decoding of a single game ended."""

    COMPLETE = "complete"
    TRUNCATED = "truncated"
    EMPTY_INPUT = "empty-input"


class MoveNotation(StrEnum):
    """Move text style used when rendering moves."""

    SAN = "san"
    LAN = "lan"
    UCI = "uci"


class ScanState(IntEnum):
    """States of the item scanner."""

    IDLE = auto()
    MOVE = auto()
    MOVE_NUMBER = auto()
    TAG = auto()
    PAREN_COMMENT = auto()
    BRACE_COMMENT = auto()
    LINE_COMMENT = auto()
    NAG = auto()
    ESCAPE = auto()  # "%" line, discarded
