"""Loading and saving board files."""

from __future__ import annotations

import logging
from pathlib import Path

from musketeers.core.board import Board
from musketeers.core.errors import LoadError, SaveError
from musketeers.core.notation import board_from_text, board_to_text

_LOGGER = logging.getLogger(__name__)

DEFAULT_OUTPUT_PREFIX = "out-"


def load_board(file_path: Path) -> Board:
    """Read a board file; any failure is reported as :class:`LoadError`."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.warning("Cannot read board file %s: %s", file_path, exc)
        raise LoadError(f"Error opening the file: {file_path}") from exc

    try:
        board = board_from_text(text)
    except ValueError as exc:
        _LOGGER.warning("Invalid board file %s: %s", file_path, exc)
        raise LoadError(f"Invalid board in {file_path}: {exc}") from exc

    _LOGGER.debug("Loaded board from %s", file_path)
    return board


def saved_board_path(
    input_path: Path, prefix: str = DEFAULT_OUTPUT_PREFIX
) -> Path:
    """Where the board read from *input_path* is saved, e.g. ``out-board.txt``."""
    return input_path.with_name(prefix + input_path.name)


def save_board(board: Board, file_path: Path) -> Path:
    """Write *board* so that :func:`load_board` reads it back unchanged."""
    try:
        file_path.write_text(board_to_text(board), encoding="utf-8")
    except OSError as exc:
        _LOGGER.warning("Cannot write board file %s: %s", file_path, exc)
        raise SaveError(f"Error opening the saved file: {file_path}") from exc

    _LOGGER.debug("Saved board to %s", file_path)
    return file_path
