"""Codec settings shared by the reader, the writer and the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from pgncodec.core.enums import MoveNotation
from pgncodec.core.variant import STANDARD, Variant

DEFAULT_MAX_MOVES = 1000
DEFAULT_MOVES_PER_LINE = 8


@dataclass(slots=True, frozen=True)
class CodecSettings:
    """Limits and formatting options for reading and writing PGN.

    Args:
        max_moves: Stop reading a game after this many half-moves.
        variant: Rule set of games that carry no ``Variant`` tag.
        notation: Move notation used by the writer.
        moves_per_line: Half-moves per movetext line in written PGN.
    """

    max_moves: int = DEFAULT_MAX_MOVES
    variant: Variant = STANDARD
    notation: MoveNotation = MoveNotation.SAN
    moves_per_line: int = DEFAULT_MOVES_PER_LINE

    def __post_init__(self) -> None:
        if self.max_moves <= 0:
            raise ValueError(f"max_moves must be positive, got {self.max_moves}")
        if self.moves_per_line <= 0:
            raise ValueError(
                f"moves_per_line must be positive, got {self.moves_per_line}"
            )
