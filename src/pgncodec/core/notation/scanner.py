"""PGN item scanner.

Pulls one semantic item (tag, move, move number, comment, NAG, result)
from a :class:`PgnStream`. Scanning is a small state machine: :func:`step`
maps ``(state, depth, char)`` to the next state and what to do with the
character, :func:`read_item` feeds it characters and classifies the
collected text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, auto

from pgncodec.core.enums import GameResult, PgnItem, ScanState
from pgncodec.core.notation.results import PGN_RESULT_TOKENS, game_result_from_pgn
from pgncodec.core.notation.stream import PgnStream

_LOGGER = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_LINE_BREAKS = frozenset("\r\n")
# Characters that end a move token and start the next item.
_TOKEN_BREAKS = frozenset("{(;$")

_OPENERS: dict[str, ScanState] = {
    "[": ScanState.TAG,
    "(": ScanState.PAREN_COMMENT,
    "{": ScanState.BRACE_COMMENT,
}
_BRACKETS: dict[ScanState, tuple[str, str]] = {
    ScanState.TAG: ("[", "]"),
    ScanState.PAREN_COMMENT: ("(", ")"),
    ScanState.BRACE_COMMENT: ("{", "}"),
}
_ITEM_KIND: dict[ScanState, PgnItem] = {
    ScanState.MOVE: PgnItem.MOVE,
    ScanState.MOVE_NUMBER: PgnItem.MOVE_NUMBER,
    ScanState.TAG: PgnItem.TAG,
    ScanState.PAREN_COMMENT: PgnItem.COMMENT,
    ScanState.BRACE_COMMENT: PgnItem.COMMENT,
    ScanState.LINE_COMMENT: PgnItem.COMMENT,
    ScanState.NAG: PgnItem.NAG,
}


class ScanAction(IntEnum):
    """What the scanner does with the character it just read."""

    IGNORE = auto()
    APPEND = auto()
    FINISH = auto()  # item complete, character consumed
    PUSHBACK = auto()  # item complete, character starts the next item
    REJECT = auto()  # tag after moves: rewind and report an error


@dataclass(slots=True, frozen=True)
class Transition:
    state: ScanState
    depth: int
    action: ScanAction


@dataclass(slots=True, frozen=True)
class ScannedItem:
    """One classified item and its payload text."""

    kind: PgnItem
    text: str = ""
    line: int = 0
    result: GameResult | None = None


# ── Transitions ──────────────────────────────────────────────────────────────


def _step_idle(ch: str, has_tags: bool, has_moves: bool) -> Transition:
    # Before the first tag everything up to a "[" is noise.
    if not has_tags and ch != "[":
        return Transition(ScanState.IDLE, 0, ScanAction.IGNORE)
    if ch.isspace() or ch == ".":
        return Transition(ScanState.IDLE, 0, ScanAction.IGNORE)
    if ch == ";":
        return Transition(ScanState.LINE_COMMENT, 0, ScanAction.IGNORE)
    if ch == "%":
        return Transition(ScanState.ESCAPE, 0, ScanAction.IGNORE)
    if ch == "$":
        return Transition(ScanState.NAG, 0, ScanAction.IGNORE)
    if ch in _OPENERS:
        if ch == "[" and has_moves:
            return Transition(ScanState.IDLE, 0, ScanAction.REJECT)
        return Transition(_OPENERS[ch], 1, ScanAction.IGNORE)
    if ch in _DIGITS:
        return Transition(ScanState.MOVE_NUMBER, 0, ScanAction.APPEND)
    return Transition(ScanState.MOVE, 0, ScanAction.APPEND)


def _step_bracket(state: ScanState, depth: int, ch: str) -> Transition:
    opener, closer = _BRACKETS[state]
    if ch == opener:
        return Transition(state, depth + 1, ScanAction.APPEND)
    if ch == closer:
        if depth <= 1:
            return Transition(state, 0, ScanAction.FINISH)
        return Transition(state, depth - 1, ScanAction.APPEND)
    if state == ScanState.TAG and ch in _LINE_BREAKS:
        return Transition(state, depth, ScanAction.FINISH)
    return Transition(state, depth, ScanAction.APPEND)


def step(
    state: ScanState,
    depth: int,
    ch: str,
    *,
    has_tags: bool,
    has_moves: bool,
) -> Transition:
    """Pure scanner transition for one character.

    Args:
        state: Current scanner state.
        depth: Nesting depth of the open bracket (0 when none is open).
        ch: The character just read.
        has_tags: The game being read has seen at least one tag.
        has_moves: The game being read has accepted at least one move.
    """
    if state == ScanState.IDLE:
        return _step_idle(ch, has_tags, has_moves)
    if state in _BRACKETS:
        return _step_bracket(state, depth, ch)
    if state == ScanState.LINE_COMMENT:
        action = ScanAction.FINISH if ch == "\n" else ScanAction.APPEND
        return Transition(state, 0, action)
    if state == ScanState.ESCAPE:
        if ch == "\n":
            return Transition(ScanState.IDLE, 0, ScanAction.IGNORE)
        return Transition(state, 0, ScanAction.IGNORE)
    if state == ScanState.NAG:
        if ch in _DIGITS:
            return Transition(state, 0, ScanAction.APPEND)
        if ch.isspace():
            return Transition(state, 0, ScanAction.FINISH)
        return Transition(state, 0, ScanAction.PUSHBACK)

    # MOVE / MOVE_NUMBER
    if ch.isspace():
        return Transition(state, 0, ScanAction.FINISH)
    if ch in _TOKEN_BREAKS:
        return Transition(state, 0, ScanAction.PUSHBACK)
    if state == ScanState.MOVE_NUMBER and ch == ".":
        return Transition(state, 0, ScanAction.FINISH)
    return Transition(state, 0, ScanAction.APPEND)


# ── Scanning ─────────────────────────────────────────────────────────────────


def _classify(state: ScanState, text: str, line: int) -> ScannedItem:
    kind = _ITEM_KIND.get(state)
    if kind is None:
        return ScannedItem(PgnItem.EMPTY, line=line)

    if kind in (PgnItem.MOVE, PgnItem.MOVE_NUMBER) and text in PGN_RESULT_TOKENS:
        return ScannedItem(PgnItem.RESULT, text, line, game_result_from_pgn(text))
    return ScannedItem(kind, text, line)


def read_item(stream: PgnStream, *, has_tags: bool, has_moves: bool) -> ScannedItem:
    """Read the next item from *stream*.

    A tag that follows accepted moves means the previous game had no
    termination marker: the ``[`` is pushed back so the next read starts
    a new game, and an :attr:`PgnItem.ERROR` item is returned.
    """
    state = ScanState.IDLE
    depth = 0
    chars: list[str] = []
    line = stream.line_number

    while True:
        ch = stream.read_char()
        if not ch:
            break

        transition = step(state, depth, ch, has_tags=has_tags, has_moves=has_moves)
        if transition.action == ScanAction.REJECT:
            stream.rewind_char()
            _LOGGER.debug("Line %d: tag after moves", stream.line_number)
            return ScannedItem(PgnItem.ERROR, "[", stream.line_number)
        if transition.action == ScanAction.PUSHBACK:
            stream.rewind_char()
            break

        if state == ScanState.IDLE:
            line = stream.line_number
        state, depth = transition.state, transition.depth
        if transition.action == ScanAction.APPEND:
            chars.append(ch)
        elif transition.action == ScanAction.FINISH:
            break

    return _classify(state, "".join(chars).strip(), line)
