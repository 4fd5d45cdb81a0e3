"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from pgncodec.core.enums import GameResult, ParseOutcome
from pgncodec.core.variant import STANDARD, Variant

if TYPE_CHECKING:
    from collections.abc import Sequence

    import chess


class PgnError(ValueError):
    """The game being read cannot be continued."""


class LiveGame(Protocol):
    """A finished game handed over by the game-orchestration layer."""

    @property
    def white_player(self) -> str: ...

    @property
    def black_player(self) -> str: ...

    @property
    def move_history(self) -> Sequence[chess.Move]: ...

    @property
    def starting_fen(self) -> str: ...

    @property
    def variant(self) -> Variant: ...

    @property
    def is_random_variant(self) -> bool: ...

    @property
    def result(self) -> GameResult: ...


@dataclass(slots=True)
class GameRecord:
    """A position-validated game transcript.

    ``moves`` is always a legal continuation of ``starting_fen``. While a
    game is being decoded the record is filled in item by item; once
    handed to the writer it is treated as read-only.
    """

    white_player: str = ""
    black_player: str = ""
    result: GameResult = GameResult.IN_PROGRESS
    variant: Variant = STANDARD
    starting_fen: str = ""
    is_random_variant: bool = False
    moves: list[chess.Move] = field(default_factory=list)
    has_tags: bool = False
    outcome: ParseOutcome = ParseOutcome.EMPTY_INPUT
    error: str | None = None
    error_line: int | None = None

    @classmethod
    def from_live_game(cls, game: LiveGame) -> GameRecord:
        """Snapshot an already played game."""
        return cls(
            white_player=game.white_player,
            black_player=game.black_player,
            result=game.result,
            variant=game.variant,
            starting_fen=game.starting_fen,
            is_random_variant=game.is_random_variant,
            moves=list(game.move_history),
            has_tags=True,
            outcome=ParseOutcome.COMPLETE,
        )

    @property
    def ply_count(self) -> int:
        return len(self.moves)

    @property
    def is_empty(self) -> bool:
        return not self.moves

    @property
    def is_complete(self) -> bool:
        return self.outcome == ParseOutcome.COMPLETE
