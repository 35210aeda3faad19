"""Board text format: 25 symbols, one row per line, space separated."""

from __future__ import annotations

from musketeers.core.board import Board
from musketeers.core.enums import CellContent
from musketeers.core.types import BOARD_SIZE

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def board_from_text(text: str) -> Board:
    """Parse board text into a :class:`Board`.

    Whitespace only separates symbols.  The first 25 symbols fill the grid
    row by row; anything after them is ignored.
    """
    cells: list[CellContent] = []
    for ch in text:
        if ch.isspace():
            continue
        if len(cells) == _CELL_COUNT:
            break
        cells.append(CellContent.from_symbol(ch))

    if len(cells) < _CELL_COUNT:
        raise ValueError(
            f"Board text holds {len(cells)} symbols, expected {_CELL_COUNT}"
        )

    rows = [cells[i : i + BOARD_SIZE] for i in range(0, _CELL_COUNT, BOARD_SIZE)]
    return Board.from_rows(rows)


def board_to_text(board: Board) -> str:
    """Serialise *board*; the result parses back to an equal board."""
    lines = [" ".join(cell.symbol for cell in row) for row in board.rows()]
    return "\n".join(lines) + "\n"
