"""Rule-set identifiers backed by python-chess board classes."""

from __future__ import annotations

from dataclasses import dataclass

import chess
import chess.variant

_RANDOM_ALIASES = frozenset(
    {
        "chess960",
        "chess 960",
        "960",
        "fischerandom",
        "fischerrandom",
        "fischer random",
        "chess960 (fischerandom)",
    }
)


@dataclass(slots=True, frozen=True)
class Variant:
    """A named rule set.

    Args:
        name: Display name written to the ``Variant`` tag.
        board_class: python-chess board class implementing the rules.
        is_random: The variant allows non-standard starting setups
            (Fischer random castling rules apply).
    """

    name: str
    board_class: type[chess.Board] = chess.Board
    is_random: bool = False

    @property
    def starting_fen(self) -> str:
        """Standard starting position of this variant."""
        return self.board_class.starting_fen

    @property
    def is_standard(self) -> bool:
        return self == STANDARD

    def new_board(self, fen: str | None = None) -> chess.Board:
        """Create a board for this variant, at *fen* or the standard start.

        Raises:
            ValueError: *fen* is malformed.
        """
        return self.board_class(
            self.starting_fen if fen is None else fen,
            chess960=self.is_random,
        )

    def __str__(self) -> str:
        return self.name


STANDARD = Variant("Standard")
CHESS960 = Variant("Chess960", is_random=True)


def parse_variant(name: str) -> Variant:
    """Resolve a ``Variant`` tag value.

    Raises:
        ValueError: The name does not identify a supported variant.
    """
    clean = name.strip()
    if clean.lower() in _RANDOM_ALIASES:
        return CHESS960

    board_class = chess.variant.find_variant(clean)
    if board_class is chess.Board:
        return STANDARD
    return Variant(board_class.aliases[0], board_class)


def variant_of(board: chess.Board) -> Variant:
    """Identify the variant a live board is playing."""
    board_class = type(board)
    if board_class is chess.Board:
        return CHESS960 if board.chess960 else STANDARD
    return Variant(board_class.aliases[0], board_class, is_random=board.chess960)
