"""Core domain layer — pure Three Musketeers rules with zero external dependencies.

Quick start::

    from musketeers.core import Board, Direction, Move, MoveValidator, Rules, Side

    board = Board.initial()
    validator = MoveValidator(board)
    legal = validator.validate(Move((2, 2), Direction.LEFT), Side.MUSKETEERS)
    board.apply_move(legal.source, legal.destination, legal.piece)
    print(Rules.game_outcome(board))
"""

from musketeers.core.board import MAX_ENEMY_COUNT, MUSKETEER_COUNT, Board
from musketeers.core.enums import CellContent, Direction, GameOutcome, MoveError, Side
from musketeers.core.errors import (
    BoardFileError,
    IllegalMoveError,
    LoadError,
    MalformedInputError,
    MusketeersError,
    SaveError,
)
from musketeers.core.move import Move, ValidatedMove
from musketeers.core.move_generator import MoveValidator
from musketeers.core.notation import (
    INTERRUPT_COMMAND,
    board_from_text,
    board_to_text,
    format_move,
    is_interrupt,
    parse_move,
    render_board,
)
from musketeers.core.rules import Rules
from musketeers.core.types import (
    BOARD_SIZE,
    Position,
    direction_between,
    in_bounds,
    parse_position,
    position_name,
    shift,
)

__all__ = [
    # Enums
    "CellContent",
    "Direction",
    "GameOutcome",
    "MoveError",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "direction_between",
    "in_bounds",
    "parse_position",
    "position_name",
    "shift",
    # Domain objects
    "MAX_ENEMY_COUNT",
    "MUSKETEER_COUNT",
    "Board",
    "Move",
    "MoveValidator",
    "Rules",
    "ValidatedMove",
    # Errors
    "BoardFileError",
    "IllegalMoveError",
    "LoadError",
    "MalformedInputError",
    "MusketeersError",
    "SaveError",
    # Notation
    "INTERRUPT_COMMAND",
    "board_from_text",
    "board_to_text",
    "format_move",
    "is_interrupt",
    "parse_move",
    "render_board",
]
