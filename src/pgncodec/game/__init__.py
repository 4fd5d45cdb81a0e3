"""Game layer: snapshots of games played elsewhere, ready for PGN export."""

from pgncodec.game.snapshot import GameSnapshot

__all__ = ["GameSnapshot"]
