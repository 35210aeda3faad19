"""Notation package: board text, move commands, ASCII rendering."""

from musketeers.core.notation.board_text import board_from_text, board_to_text
from musketeers.core.notation.commands import (
    INTERRUPT_COMMAND,
    format_move,
    is_interrupt,
    parse_move,
)
from musketeers.core.notation.render import render_board

__all__ = [
    "INTERRUPT_COMMAND",
    "board_from_text",
    "board_to_text",
    "format_move",
    "is_interrupt",
    "parse_move",
    "render_board",
]
