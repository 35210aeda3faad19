"""Tests for loading and saving board files."""

from pathlib import Path

import pytest

from musketeers.core.board import Board
from musketeers.core.enums import CellContent
from musketeers.core.errors import BoardFileError, LoadError, MusketeersError, SaveError
from musketeers.game.storage import load_board, save_board, saved_board_path

VALID_TEXT = (
    "M . . . .\n"
    ". o . . .\n"
    ". . M . .\n"
    ". . . o .\n"
    ". . . . M\n"
)


class TestLoad:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "board.txt"
        path.write_text(VALID_TEXT, encoding="utf-8")
        board = load_board(path)
        assert board.positions_of(CellContent.MUSKETEER) == [(0, 0), (2, 2), (4, 4)]
        assert board.positions_of(CellContent.ENEMY) == [(1, 1), (3, 3)]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError, match="Error opening the file"):
            load_board(tmp_path / "nope.txt")

    def test_invalid_symbol(self, tmp_path: Path) -> None:
        path = tmp_path / "board.txt"
        path.write_text(VALID_TEXT.replace("o", "x", 1), encoding="utf-8")
        with pytest.raises(LoadError, match="Invalid board"):
            load_board(path)

    def test_wrong_musketeer_count(self, tmp_path: Path) -> None:
        path = tmp_path / "board.txt"
        path.write_text(VALID_TEXT.replace("M", "o", 1), encoding="utf-8")
        with pytest.raises(LoadError, match="exactly 3 Musketeers"):
            load_board(path)

    def test_truncated_file(self, tmp_path: Path) -> None:
        path = tmp_path / "board.txt"
        path.write_text(VALID_TEXT[:20], encoding="utf-8")
        with pytest.raises(LoadError, match="symbols"):
            load_board(path)

    def test_binary_garbage(self, tmp_path: Path) -> None:
        path = tmp_path / "board.txt"
        path.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(LoadError):
            load_board(path)

    def test_load_error_hierarchy(self) -> None:
        assert issubclass(LoadError, BoardFileError)
        assert issubclass(SaveError, BoardFileError)
        assert issubclass(BoardFileError, MusketeersError)


class TestSave:
    def test_save_then_load(self, tmp_path: Path) -> None:
        board = Board.initial()
        board.apply_move((2, 2), (2, 1), CellContent.MUSKETEER)
        path = save_board(board, tmp_path / "out-board.txt")
        assert path.exists()
        assert load_board(path) == board

    def test_saved_text_format(self, tmp_path: Path) -> None:
        path = tmp_path / "saved.txt"
        save_board(Board.initial(), path)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            ". . . o M",
            ". . o . o",
            ". o M o .",
            "o . o . .",
            "M o . . .",
        ]

    def test_save_to_directory_fails(self, tmp_path: Path) -> None:
        with pytest.raises(SaveError, match="Error opening the saved file"):
            save_board(Board.initial(), tmp_path)

    def test_save_into_missing_directory_fails(self, tmp_path: Path) -> None:
        with pytest.raises(SaveError):
            save_board(Board.initial(), tmp_path / "missing" / "out.txt")


class TestSavedBoardPath:
    def test_default_prefix(self) -> None:
        assert saved_board_path(Path("games/board.txt")) == Path("games/out-board.txt")

    def test_custom_prefix(self) -> None:
        assert saved_board_path(Path("b.txt"), "saved-") == Path("saved-b.txt")
