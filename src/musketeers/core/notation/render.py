"""ASCII rendering of a board for terminals."""

from __future__ import annotations

from musketeers.core.board import Board
from musketeers.core.types import BOARD_SIZE, COL_DIGITS, ROW_LETTERS

_SEPARATOR = "  +" + "---+" * BOARD_SIZE


def render_board(board: Board) -> str:
    """Grid with columns ``1``–``5`` across the top and rows ``A``–``E``."""
    lines = ["    " + "   ".join(COL_DIGITS), _SEPARATOR]
    for letter, row in zip(ROW_LETTERS, board.rows()):
        cells = "".join(f" {cell.symbol} |" for cell in row)
        lines.append(f"{letter} |{cells}")
        lines.append(_SEPARATOR)
    return "\n".join(lines)
