"""Tests for the command-line entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from musketeers.app import build_parser, main
from musketeers.core.board import Board
from musketeers.core.notation import board_to_text
from musketeers.game.storage import load_board

BOARD_TEXT = (
    ". . . o M\n"
    ". . o . o\n"
    ". o M o .\n"
    "o . o . .\n"
    "M o . . .\n"
)


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.board is None
    assert not args.gui
    assert args.output_prefix == "out-"
    assert args.log_level == "WARNING"


def test_parser_options() -> None:
    args = build_parser().parse_args(
        ["games/b.txt", "--gui", "--output-prefix", "saved-", "--log-level", "DEBUG"]
    )
    assert args.board == Path("games/b.txt")
    assert args.gui
    assert args.output_prefix == "saved-"
    assert args.log_level == "DEBUG"


def test_unreadable_board_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main([str(tmp_path / "missing.txt")])
    assert code == 1
    err = capsys.readouterr().err
    assert "Error opening the file" in err
    assert "Failed to read the board from the file." in err


def test_text_game_saves_next_to_input(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    board_path = tmp_path / "game.txt"
    board_path.write_text(BOARD_TEXT, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("c,3=l\n0,0=E\n"))

    assert main([str(board_path)]) == 0

    saved = load_board(tmp_path / "out-game.txt")
    assert saved != Board.initial()
    assert "Game interrupted. Exiting..." in capsys.readouterr().out


def test_default_board_saved_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main(["--output-prefix", "keep-"]) == 0

    saved = tmp_path / "keep-board.txt"
    assert saved.read_text(encoding="utf-8") == board_to_text(Board.initial())
