"""PGN game-termination markers."""

from __future__ import annotations

from pgncodec.core.enums import GameResult

PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """Convert a PGN result token to :class:`GameResult`.

    ``*`` is an unfinished game; anything that is not one of the four
    markers is :attr:`GameResult.ERROR`.
    """
    token = token.strip()
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    if token == "*":
        return GameResult.IN_PROGRESS
    return GameResult.ERROR
