"""Snapshots of games played on a live python-chess board."""

from __future__ import annotations

from dataclasses import dataclass, field

import chess

from pgncodec.core.enums import GameResult
from pgncodec.core.notation.results import game_result_from_pgn
from pgncodec.core.variant import STANDARD, Variant, variant_of


@dataclass(slots=True, frozen=True)
class GameSnapshot:
    """Everything the PGN writer needs from a finished live game.

    Satisfies :class:`pgncodec.core.notation.models.LiveGame`, so it can
    be turned into a record with ``GameRecord.from_live_game``.
    """

    white_player: str
    black_player: str
    starting_fen: str
    move_history: tuple[chess.Move, ...] = field(default_factory=tuple)
    variant: Variant = STANDARD
    result: GameResult = GameResult.IN_PROGRESS

    @property
    def is_random_variant(self) -> bool:
        return self.variant.is_random

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    @classmethod
    def from_board(
        cls,
        board: chess.Board,
        white: str,
        black: str,
        result: GameResult | None = None,
    ) -> GameSnapshot:
        """Capture *board*'s game so far.

        When *result* is omitted it is read off the board: a finished
        position (mate, stalemate, automatic draw) gives its outcome,
        anything else is still in progress.
        """
        if result is None:
            result = game_result_from_pgn(board.result())
        return cls(
            white_player=white,
            black_player=black,
            starting_fen=board.root().fen(),
            move_history=tuple(board.move_stack),
            variant=variant_of(board),
            result=result,
        )
