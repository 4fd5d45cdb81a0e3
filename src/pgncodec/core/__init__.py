"""Core domain layer: rule sets, the rules-engine adapter and PGN notation.

Quick start::

    from pgncodec.core import PgnStream, read_game, build_pgn

    record = read_game(PgnStream.from_text(pgn_text))
    print(record.outcome, len(record.moves))
    print(build_pgn(record))
"""

from pgncodec.core.config import CodecSettings
from pgncodec.core.enums import GameResult, MoveNotation, ParseOutcome, PgnItem, ScanState
from pgncodec.core.notation import (
    GameRecord,
    LiveGame,
    PgnError,
    PgnStream,
    build_pgn,
    game_result_from_pgn,
    iter_games,
    load_pgn_file,
    parse_pgn_game,
    parse_pgn_games,
    pgn_result_token,
    read_game,
    read_item,
    save_pgn_file,
    write_game,
)
from pgncodec.core.rules import RulesBoard
from pgncodec.core.variant import CHESS960, STANDARD, Variant, parse_variant, variant_of

__all__ = [
    "CodecSettings",
    # Enums
    "GameResult",
    "MoveNotation",
    "ParseOutcome",
    "PgnItem",
    "ScanState",
    # Rules engine
    "CHESS960",
    "STANDARD",
    "RulesBoard",
    "Variant",
    "parse_variant",
    "variant_of",
    # Notation
    "GameRecord",
    "LiveGame",
    "PgnError",
    "PgnStream",
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
