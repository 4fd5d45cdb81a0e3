"""Notation package: PGN scanning, decoding and writing."""

from pgncodec.core.notation.models import GameRecord, LiveGame, PgnError
from pgncodec.core.notation.pgn import (
    build_pgn,
    iter_games,
    load_pgn_file,
    parse_pgn_game,
    parse_pgn_games,
    read_game,
    save_pgn_file,
    write_game,
)
from pgncodec.core.notation.results import (
    PGN_RESULT_TOKENS,
    game_result_from_pgn,
    pgn_result_token,
)
from pgncodec.core.notation.scanner import ScannedItem, read_item
from pgncodec.core.notation.stream import PgnStream

__all__ = [
    "PGN_RESULT_TOKENS",
    "GameRecord",
    "LiveGame",
    "PgnError",
    "PgnStream",
    "ScannedItem",
    "build_pgn",
    "game_result_from_pgn",
    "iter_games",
    "load_pgn_file",
    "parse_pgn_game",
    "parse_pgn_games",
    "pgn_result_token",
    "read_game",
    "read_item",
    "save_pgn_file",
    "write_game",
]
