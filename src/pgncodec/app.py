"""Command-line entry point: decode PGN files and re-encode them canonically."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from pgncodec.core.config import DEFAULT_MAX_MOVES, CodecSettings
from pgncodec.core.enums import MoveNotation, ParseOutcome
from pgncodec.core.notation import load_pgn_file, save_pgn_file, write_game
from pgncodec.core.variant import parse_variant

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgncodec",
        description="Validate PGN games move by move and rewrite them as canonical PGN.",
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="PGN files to read")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="append games to this file instead of writing to stdout",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=DEFAULT_MAX_MOVES,
        help="stop reading a game after this many half-moves (default: %(default)s)",
    )
    parser.add_argument(
        "--variant",
        default="Standard",
        help="rule set of games without a Variant tag (default: %(default)s)",
    )
    parser.add_argument(
        "--notation",
        choices=[notation.value for notation in MoveNotation],
        default=MoveNotation.SAN.value,
        help="move notation of the written games (default: %(default)s)",
    )
    parser.add_argument(
        "--skip-truncated",
        action="store_true",
        help="do not write games that ended on an error or without a terminator",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="more log output (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def convert_file(
    input_path: Path,
    settings: CodecSettings,
    output: Path | None = None,
    *,
    skip_truncated: bool = False,
) -> Counter[ParseOutcome]:
    """Re-encode every game of *input_path*; return outcome counts."""
    counts: Counter[ParseOutcome] = Counter()
    for record in load_pgn_file(input_path, settings):
        counts[record.outcome] += 1
        if skip_truncated and not record.is_complete:
            continue
        try:
            if output is None:
                write_game(record, sys.stdout, settings)
            else:
                save_pgn_file(record, output, settings)
        except ValueError as exc:
            _LOGGER.warning("%s: game not written: %s", input_path, exc)

    _LOGGER.info(
        "%s: %d complete, %d truncated",
        input_path,
        counts[ParseOutcome.COMPLETE],
        counts[ParseOutcome.TRUNCATED],
    )
    return counts


def main(argv: list[str] | None = None) -> int:
    """Run the converter; return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = CodecSettings(
            max_moves=args.max_moves,
            variant=parse_variant(args.variant),
            notation=MoveNotation(args.notation),
        )
    except ValueError as exc:
        print(f"pgncodec: {exc}", file=sys.stderr)
        return 2

    totals: Counter[ParseOutcome] = Counter()
    for input_path in args.inputs:
        try:
            totals += convert_file(
                input_path,
                settings,
                args.output,
                skip_truncated=args.skip_truncated,
            )
        except OSError as exc:
            print(f"pgncodec: {exc}", file=sys.stderr)
            return 2

    return 1 if totals[ParseOutcome.TRUNCATED] else 0


if __name__ == "__main__":
    sys.exit(main())
