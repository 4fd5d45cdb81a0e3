"""PGN decoding into position-validated game records, and PGN writing."""

from __future__ import annotations

import logging
import re
from datetime import date as Date
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from pgncodec.core.config import CodecSettings
from pgncodec.core.enums import GameResult, ParseOutcome, PgnItem
from pgncodec.core.notation.models import GameRecord, PgnError
from pgncodec.core.notation.results import game_result_from_pgn, pgn_result_token
from pgncodec.core.notation.scanner import ScannedItem, read_item
from pgncodec.core.notation.stream import PgnStream
from pgncodec.core.rules import RulesBoard

if TYPE_CHECKING:
    from collections.abc import Iterator

_LOGGER = logging.getLogger(__name__)

_QUOTED_VALUE_RE = re.compile(r'^"((?:[^"\\]|\\.)*)"$')
_MAX_NAG = 255


# ── Reading ──────────────────────────────────────────────────────────────────


def _split_tag(text: str) -> tuple[str, str]:
    """Split ``Name "value"`` into its name and unescaped value."""
    parts = text.split(maxsplit=1)
    if not parts:
        return "", ""
    name = parts[0]
    raw = parts[1].strip() if len(parts) > 1 else ""
    match = _QUOTED_VALUE_RE.match(raw)
    if match is None:
        return name, raw.replace('"', "")
    return name, match.group(1).replace('\\"', '"').replace("\\\\", "\\")


class _GameBuilder:
    """Applies scanned items to one record and its simulated board."""

    __slots__ = ("record", "board", "_result_tag")

    def __init__(self, settings: CodecSettings) -> None:
        variant = settings.variant
        self.record = GameRecord(variant=variant, is_random_variant=variant.is_random)
        self.board = RulesBoard(variant)
        self._result_tag: GameResult | None = None

    def apply(self, item: ScannedItem) -> bool:
        """Apply *item*; return True when the game is over.

        Raises:
            PgnError: The item makes the rest of the game unreadable.
        """
        kind = item.kind
        if kind == PgnItem.ERROR:
            raise PgnError("tag found after moves, no termination marker")
        if kind == PgnItem.TAG:
            self.record.has_tags = True
            self._apply_tag(item.text)
        elif kind == PgnItem.MOVE:
            self._apply_move(item.text)
        elif kind == PgnItem.NAG:
            self._check_nag(item.text)
        elif kind == PgnItem.RESULT:
            self._apply_result(item)
            return True
        elif kind == PgnItem.EMPTY:
            return True
        return False

    def _apply_tag(self, text: str) -> None:
        record = self.record
        name, value = _split_tag(text)

        if name == "White":
            record.white_player = value
        elif name == "Black":
            record.black_player = value
        elif name == "Result":
            record.result = game_result_from_pgn(value)
            self._result_tag = record.result
            if record.result == GameResult.ERROR:
                _LOGGER.warning("Invalid result: %s", value)
        elif name == "Variant":
            board = RulesBoard()
            if not board.apply_variant(value):
                raise PgnError(f"Invalid variant: {value}")
            # The new rule set starts from its own board; keep an earlier FEN.
            if record.starting_fen and not board.apply_position(record.starting_fen):
                raise PgnError(
                    f"Invalid FEN for {board.variant}: {record.starting_fen}"
                )
            self.board = board
            record.variant = board.variant
            record.is_random_variant = board.variant.is_random
        elif name == "FEN":
            if not self.board.apply_position(value):
                raise PgnError(f"Invalid FEN: {value}")
            record.starting_fen = value

    def _apply_move(self, text: str) -> None:
        record = self.record
        board = self.board
        if not record.has_tags:
            raise PgnError("No tags found")

        if not record.starting_fen:
            record.starting_fen = board.standard_starting_position()
            board.apply_position(record.starting_fen)

        move = board.parse_move_text(text)
        if not board.is_legal(move):
            raise PgnError(f"Illegal move: {text}")
        record.moves.append(move)
        board.apply(move)

    @staticmethod
    def _check_nag(text: str) -> None:
        try:
            nag = int(text)
        except ValueError:
            raise PgnError(f"Invalid NAG: {text}") from None
        if not 0 <= nag <= _MAX_NAG:
            raise PgnError(f"Invalid NAG: {text}")

    def _apply_result(self, item: ScannedItem) -> None:
        result = item.result if item.result is not None else GameResult.ERROR
        if self._result_tag is not None and result != self._result_tag:
            _LOGGER.warning(
                "Line %d: the termination marker is different from the result tag",
                item.line,
            )
        self.record.result = result


def read_game(stream: PgnStream, settings: CodecSettings | None = None) -> GameRecord:
    """Decode the next game from *stream*.

    Reading stops at the game's termination marker, at the first error,
    at end of data or after ``settings.max_moves`` half-moves. The
    record's ``outcome`` tells which; nothing is rolled back on error.
    """
    settings = settings or CodecSettings()
    builder = _GameBuilder(settings)
    record = builder.record

    while not stream.at_end and len(record.moves) < settings.max_moves:
        item = read_item(stream, has_tags=record.has_tags, has_moves=bool(record.moves))
        try:
            finished = builder.apply(item)
        except PgnError as exc:
            _LOGGER.warning("PGN error on line %d: %s", item.line, exc)
            record.outcome = ParseOutcome.TRUNCATED
            record.error = str(exc)
            record.error_line = item.line
            return record

        if finished:
            if item.kind == PgnItem.RESULT:
                record.outcome = ParseOutcome.COMPLETE
                return record
            break

    if not record.has_tags:
        record.outcome = ParseOutcome.EMPTY_INPUT
    elif len(record.moves) >= settings.max_moves:
        record.outcome = ParseOutcome.TRUNCATED
        record.error = f"move limit of {settings.max_moves} reached"
        record.error_line = stream.line_number
    else:
        record.outcome = ParseOutcome.TRUNCATED
        record.error = "no termination marker"
        record.error_line = stream.line_number
    if record.error is not None:
        _LOGGER.info("Game truncated on line %d: %s", stream.line_number, record.error)
    return record


def iter_games(
    stream: PgnStream, settings: CodecSettings | None = None
) -> Iterator[GameRecord]:
    """Yield every game in *stream*, including truncated ones."""
    while True:
        record = read_game(stream, settings)
        if record.outcome == ParseOutcome.EMPTY_INPUT:
            return
        yield record


def parse_pgn_game(pgn_text: str, settings: CodecSettings | None = None) -> GameRecord:
    """Decode the first game of *pgn_text*."""
    return read_game(PgnStream.from_text(pgn_text), settings)


def parse_pgn_games(
    pgn_text: str, settings: CodecSettings | None = None
) -> list[GameRecord]:
    """Decode every game of a multi-game PGN document."""
    return list(iter_games(PgnStream.from_text(pgn_text), settings))


def load_pgn_file(
    file_path: Path | str, settings: CodecSettings | None = None
) -> Iterator[GameRecord]:
    """Yield the games stored in a PGN file."""
    with open(file_path, encoding="utf-8", errors="replace") as fh:
        yield from iter_games(PgnStream(fh), settings)


# ── Writing ──────────────────────────────────────────────────────────────────


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _movetext_lines(record: GameRecord, fen: str, settings: CodecSettings) -> list[str]:
    board = RulesBoard(record.variant)
    if not board.apply_position(fen):
        raise ValueError(f"Invalid starting position: {fen}")

    lines: list[str] = []
    parts: list[str] = []
    for ply, move in enumerate(record.moves):
        if ply and ply % settings.moves_per_line == 0:
            lines.append(" ".join(parts))
            parts = []
        if not board.is_legal(move):
            raise ValueError(f"Illegal move in game record at ply {ply + 1}: {move}")
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(board.render(move, settings.notation))
        board.apply(move)
    parts.append(pgn_result_token(record.result))
    lines.append(" ".join(parts))
    return lines


def build_pgn(
    record: GameRecord,
    settings: CodecSettings | None = None,
    *,
    date: Date | None = None,
) -> str:
    """Build a single-game PGN document.

    Untagged records produce an empty string. The ``Date`` tag is always
    today's date (or *date*), never a date read from the source game.

    Raises:
        ValueError: The moves cannot be replayed from the starting position.
    """
    if not record.has_tags:
        return ""
    settings = settings or CodecSettings()
    day = date or Date.today()

    variant = record.variant
    fen = record.starting_fen or variant.starting_fen
    headers: list[tuple[str, str]] = [
        ("Date", day.strftime("%Y.%m.%d")),
        ("White", record.white_player),
        ("Black", record.black_player),
        ("Result", pgn_result_token(record.result)),
    ]
    if not variant.is_standard:
        headers.append(("Variant", variant.name))
    if record.is_random_variant or variant.is_random or fen != variant.starting_fen:
        headers.append(("FEN", fen))

    lines = [f'[{key} "{_escape(value)}"]' for key, value in headers]
    lines.append("")
    lines.extend(_movetext_lines(record, fen, settings))
    lines.append("")
    lines.append("")
    return "\n".join(lines)


def write_game(
    record: GameRecord,
    out: TextIO,
    settings: CodecSettings | None = None,
    *,
    date: Date | None = None,
) -> None:
    """Write *record* as PGN to an open text stream."""
    text = build_pgn(record, settings, date=date)
    if text:
        out.write(text)


def save_pgn_file(
    record: GameRecord,
    file_path: Path | str,
    settings: CodecSettings | None = None,
    *,
    date: Date | None = None,
) -> Path:
    """Append *record* to *file_path* as given and return that path."""
    save_path = Path(file_path)
    text = build_pgn(record, settings, date=date)
    if not text:
        return save_path
    with open(save_path, "a", encoding="utf-8") as fh:
        fh.write(text)
    return save_path
