"""Tests for the pgncodec command-line converter."""

from pathlib import Path

import pytest

from pgncodec.app import main
from pgncodec.core.enums import ParseOutcome
from pgncodec.core.notation import load_pgn_file

GOOD_GAMES = """[White "A"][Black "B"][Result "1-0"]
1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0

[White "C"][Black "D"]
1. d4 d5 *
"""

BAD_GAME = """[White "E"][Black "F"]
1. e4 e5 2. Ke3 *
"""


BAD_POSITION_GAMES = """[White "G"][FEN "garbage"]
1. e4 *

[White "H"][Black "I"]
1. d4 d5 *
"""


@pytest.fixture
def good_file(tmp_path: Path) -> Path:
    path = tmp_path / "good.pgn"
    path.write_text(GOOD_GAMES, encoding="utf-8")
    return path


@pytest.fixture
def bad_file(tmp_path: Path) -> Path:
    path = tmp_path / "bad.pgn"
    path.write_text(BAD_GAME, encoding="utf-8")
    return path


class TestMain:
    def test_converts_to_output_file(self, good_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.pgn"
        assert main([str(good_file), "-o", str(out)]) == 0

        games = list(load_pgn_file(out))
        assert [game.white_player for game in games] == ["A", "C"]
        assert all(game.outcome == ParseOutcome.COMPLETE for game in games)

    def test_writes_to_stdout(
        self, good_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(good_file)]) == 0
        out = capsys.readouterr().out
        assert "1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0" in out
        assert "1. d4 d5 *" in out

    def test_truncated_game_sets_exit_status(
        self, bad_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(bad_file)]) == 1
        assert "1. e4 e5 *" in capsys.readouterr().out

    def test_bad_position_does_not_stop_conversion(self, tmp_path: Path) -> None:
        source = tmp_path / "positions.pgn"
        source.write_text(BAD_POSITION_GAMES, encoding="utf-8")
        out = tmp_path / "out.pgn"
        assert main([str(source), "-o", str(out)]) == 1

        games = list(load_pgn_file(out))
        assert [game.white_player for game in games] == ["G", "H"]
        assert games[0].starting_fen == ""
        assert games[0].ply_count == 0
        assert games[1].ply_count == 2
        assert all(game.outcome == ParseOutcome.COMPLETE for game in games)

    def test_output_path_used_as_given(self, good_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        assert main([str(good_file), "-o", str(out)]) == 0
        assert out.is_file()
        assert not (tmp_path / "out.pgn").exists()

    def test_skip_truncated(
        self, good_file: Path, bad_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(good_file), str(bad_file), "--skip-truncated"]) == 1
        out = capsys.readouterr().out
        assert '[White "E"]' not in out
        assert '[White "C"]' in out

    def test_uci_notation(
        self, good_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(good_file), "--notation", "uci"]) == 0
        assert "1. e2e4 e7e5" in capsys.readouterr().out

    def test_move_cap(self, good_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(good_file), "--max-moves", "2"]) == 1
        assert "1. e4 e5 1-0" in capsys.readouterr().out

    def test_missing_input(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "missing.pgn")]) == 2
        assert "pgncodec:" in capsys.readouterr().err

    def test_unknown_default_variant(
        self, good_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(good_file), "--variant", "capablanca"]) == 2
        assert "pgncodec:" in capsys.readouterr().err
