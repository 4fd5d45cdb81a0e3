"""pgncodec: position-validated PGN decoding and canonical PGN writing."""

from pgncodec.core.config import CodecSettings
from pgncodec.core import (
    GameRecord,
    GameResult,
    ParseOutcome,
    PgnStream,
    build_pgn,
    iter_games,
    load_pgn_file,
    parse_pgn_game,
    parse_pgn_games,
    read_game,
    save_pgn_file,
    write_game,
)

__all__ = [
    "CodecSettings",
    "GameRecord",
    "GameResult",
    "ParseOutcome",
    "PgnStream",
    "build_pgn",
    "iter_games",
    "load_pgn_file",
    "parse_pgn_game",
    "parse_pgn_games",
    "read_game",
    "save_pgn_file",
    "write_game",
]
