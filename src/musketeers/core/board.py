"""Board - cell contents on the 5x5 grid."""

from __future__ import annotations

from collections.abc import Iterable

from musketeers.core.enums import CellContent
from musketeers.core.types import BOARD_SIZE, Position, all_positions, in_bounds

MUSKETEER_COUNT = 3
MAX_ENEMY_COUNT = 8

_INITIAL_LAYOUT = (
    ". . . o M",
    ". . o . o",
    ". o M o .",
    "o . o . .",
    "M o . . .",
)


class Board:
    """Mutable 25-cell board; the only mutable object in the core."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[CellContent]] = [
            [CellContent.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> CellContent:
        row, col = pos
        if not in_bounds(row, col):
            raise IndexError(f"Position off the board: {pos!r}")
        return self._cells[row][col]

    def __setitem__(self, pos: Position, content: CellContent) -> None:
        row, col = pos
        if not in_bounds(row, col):
            raise IndexError(f"Position off the board: {pos!r}")
        self._cells[row][col] = content

    def is_empty(self, pos: Position) -> bool:
        return self[pos] == CellContent.EMPTY

    # -- Mutation primitive -------------------------------------------------

    def apply_move(self, src: Position, dst: Position, content: CellContent) -> None:
        """Move *content* from *src* to *dst*, leaving *src* empty.

        Legality is the caller's concern; whatever *dst* held is overwritten.
        """
        self[src] = CellContent.EMPTY
        self[dst] = content

    # -- Query helpers ------------------------------------------------------

    def count(self, content: CellContent) -> int:
        """Number of cells holding *content*."""
        return sum(row.count(content) for row in self._cells)

    def positions_of(self, content: CellContent) -> list[Position]:
        """Positions holding *content*, in row-major order."""
        return [pos for pos in all_positions() if self[pos] == content]

    def rows(self) -> tuple[tuple[CellContent, ...], ...]:
        """Read-only snapshot of all 25 cells, one tuple per row."""
        return tuple(tuple(row) for row in self._cells)

    # -- Copying / factories ------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[CellContent]]) -> Board:
        """Build a board from 5 rows of 5 cells, enforcing piece counts."""
        grid = [list(row) for row in rows]
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE} cells")

        b = cls()
        b._cells = [[CellContent(cell) for cell in row] for row in grid]

        musketeers = b.count(CellContent.MUSKETEER)
        if musketeers != MUSKETEER_COUNT:
            raise ValueError(
                f"Board must hold exactly {MUSKETEER_COUNT} Musketeers, "
                f"found {musketeers}"
            )
        enemies = b.count(CellContent.ENEMY)
        if enemies > MAX_ENEMY_COUNT:
            raise ValueError(
                f"Board may hold at most {MAX_ENEMY_COUNT} enemies, found {enemies}"
            )
        return b

    @classmethod
    def initial(cls) -> Board:
        """Default starting layout used when no board file is supplied."""
        return cls.from_rows(
            [CellContent.from_symbol(ch) for ch in line.split()]
            for line in _INITIAL_LAYOUT
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        lines = [" ".join(cell.symbol for cell in row) for row in self._cells]
        return "\n".join(lines)
