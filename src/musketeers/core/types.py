"""Position type alias and coordinate helpers.

Board layout (row-major, rows lettered top to bottom)::

    A1 A2 A3 A4 A5      (0, 0) ... (0, 4)
    B1 ...              (1, 0) ...
    ...
    E1 ... E5           (4, 0) ... (4, 4)
"""

from __future__ import annotations

from typing import TypeAlias

from musketeers.core.enums import Direction

BOARD_SIZE = 5

ROW_LETTERS = "ABCDE"
COL_DIGITS = "12345"

Position: TypeAlias = tuple[int, int]  # (row, col), each 0–4


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 5×5 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def shift(pos: Position, direction: Direction) -> Position:
    """Position one step from *pos* in *direction* (may be off-grid)."""
    d_row, d_col = direction.delta
    return pos[0] + d_row, pos[1] + d_col


def neighbours(pos: Position) -> list[Position]:
    """On-grid orthogonal neighbours of *pos*."""
    result: list[Position] = []
    for direction in Direction:
        row, col = shift(pos, direction)
        if in_bounds(row, col):
            result.append((row, col))
    return result


def position_name(pos: Position) -> str:
    """Human-readable name, e.g. ``(0, 0)`` → ``'A1'``."""
    return f"{ROW_LETTERS[pos[0]]}{COL_DIGITS[pos[1]]}"


def parse_position(name: str) -> Position:
    """Parse a position name, e.g. ``'c3'`` → ``(2, 2)``."""
    if len(name) != 2:
        raise ValueError(f"Invalid position name: {name!r}")
    letter, digit = name[0].upper(), name[1]
    if letter not in ROW_LETTERS or digit not in COL_DIGITS:
        raise ValueError(f"Invalid position name: {name!r}")
    return ROW_LETTERS.index(letter), COL_DIGITS.index(digit)


def all_positions() -> list[Position]:
    """All 25 positions in row-major order."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


def direction_between(src: Position, dst: Position) -> Direction | None:
    """Direction of the single step from *src* to *dst*, if they are adjacent."""
    for direction in Direction:
        if shift(src, direction) == dst:
            return direction
    return None
