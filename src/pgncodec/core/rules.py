"""Rules-engine adapter: one simulated board per game being read or written."""

from __future__ import annotations

import chess

from pgncodec.core.enums import MoveNotation
from pgncodec.core.variant import STANDARD, Variant, parse_variant

# Move suffix annotations ("!", "?!", "!!") carry no move information.
_SUFFIX_GLYPHS = "!?"


class RulesBoard:
    """Legality checking, move decoding and rendering on top of python-chess.

    Each instance owns its board. Parsing and writing create their own
    instance, so a ``RulesBoard`` is never shared between games.
    """

    __slots__ = ("_variant", "_board")

    def __init__(self, variant: Variant = STANDARD) -> None:
        self._variant = variant
        self._board = variant.new_board()

    # ── Variant / position ───────────────────────────────────────────────

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def board(self) -> chess.Board:
        return self._board

    def apply_variant(self, name: str) -> bool:
        """Switch to the variant called *name* and reset to its start."""
        try:
            variant = parse_variant(name)
        except ValueError:
            return False
        self._variant = variant
        self._board = variant.new_board()
        return True

    def apply_position(self, fen: str) -> bool:
        """Set up *fen* under the current variant.

        Malformed strings and positions the variant considers invalid
        (missing kings, bad castling rights, ...) are rejected and leave
        the board untouched.
        """
        try:
            board = self._variant.new_board(fen)
        except ValueError:
            return False
        if not board.is_valid():
            return False
        self._board = board
        return True

    def standard_starting_position(self, variant: Variant | None = None) -> str:
        return (variant or self._variant).starting_fen

    def is_random_variant(self, variant: Variant | None = None) -> bool:
        return (variant or self._variant).is_random

    def fen(self) -> str:
        return self._board.fen()

    # ── Moves ────────────────────────────────────────────────────────────

    def parse_move_text(self, text: str) -> chess.Move:
        """Decode SAN or coordinate move text.

        Returns the null move when *text* cannot be decoded in the current
        position; :meth:`is_legal` never accepts it.
        """
        clean = text.rstrip(_SUFFIX_GLYPHS)
        try:
            return self._board.parse_san(clean)
        except ValueError:
            pass
        try:
            return chess.Move.from_uci(clean)
        except ValueError:
            return chess.Move.null()

    def is_legal(self, move: chess.Move) -> bool:
        return bool(move) and self._board.is_legal(move)

    def apply(self, move: chess.Move) -> None:
        """Play *move*. Caller is responsible for the legality check."""
        self._board.push(move)

    def render(self, move: chess.Move, notation: MoveNotation = MoveNotation.SAN) -> str:
        """Render *move* as played from the current position."""
        if notation == MoveNotation.LAN:
            return self._board.lan(move)
        if notation == MoveNotation.UCI:
            return self._board.uci(move)
        return self._board.san(move)
