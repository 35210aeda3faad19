"""Parsing of one line of player input, e.g. ``a,5=l``."""

from __future__ import annotations

import re

from musketeers.core.enums import Direction
from musketeers.core.errors import MalformedInputError
from musketeers.core.move import Move
from musketeers.core.types import COL_DIGITS, ROW_LETTERS

INTERRUPT_COMMAND = "0,0=E"

_MOVE_RE = re.compile(
    r"^\s*([A-E])\s*,\s*([1-5])\s*=\s*([UDLR])\s*$",
    re.IGNORECASE,
)


def is_interrupt(text: str) -> bool:
    """Whether *text* is the reserved command that ends the session."""
    return text.strip().upper() == INTERRUPT_COMMAND


def parse_move(text: str) -> Move:
    """Parse ``<row-letter>,<col-digit>=<direction-letter>`` (any case)."""
    match = _MOVE_RE.match(text)
    if match is None:
        raise MalformedInputError(
            f"Invalid input format {text.strip()!r}. Use i,j=value (e.g., A,5=L)."
        )
    letter, digit, direction = match.groups()
    position = (ROW_LETTERS.index(letter.upper()), COL_DIGITS.index(digit))
    return Move(position, Direction.from_letter(direction))


def format_move(move: Move) -> str:
    """Inverse of :func:`parse_move` for in-range moves, e.g. ``'A,5=L'``."""
    row, col = move.position
    return f"{ROW_LETTERS[row]},{COL_DIGITS[col]}={move.direction.letter}"
