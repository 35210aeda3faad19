"""Move validation and legal-move enumeration."""

from __future__ import annotations

from musketeers.core.board import Board
from musketeers.core.enums import Direction, MoveError, Side
from musketeers.core.errors import IllegalMoveError
from musketeers.core.move import Move, ValidatedMove
from musketeers.core.types import in_bounds, shift


class MoveValidator:
    """Checks move requests for one side against a board.

    Musketeers only ever move onto an enemy (capturing it); enemies only
    ever step into an empty cell.  The validator never mutates the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def validate(self, move: Move, side: Side) -> ValidatedMove:
        """Resolve *move* for *side* or raise :class:`IllegalMoveError`.

        Checks run in a fixed order: source bounds, direction, destination
        bounds, then the side-specific occupancy of source and destination.
        """
        row, col = move.position
        if not in_bounds(row, col):
            raise IllegalMoveError(move, MoveError.OUT_OF_BOUNDS)

        if not isinstance(move.direction, Direction):
            raise IllegalMoveError(move, MoveError.INVALID_DIRECTION)

        dst = shift(move.position, move.direction)
        if not in_bounds(*dst):
            raise IllegalMoveError(move, MoveError.OUT_OF_BOUNDS)

        if self._board[move.position] != side.piece:
            raise IllegalMoveError(move, MoveError.NO_PIECE_AT_SOURCE)
        if self._board[dst] != side.target:
            raise IllegalMoveError(move, MoveError.ILLEGAL_TARGET)

        return ValidatedMove(move.position, dst, side.piece)

    def is_legal(self, move: Move, side: Side) -> bool:
        try:
            self.validate(move, side)
        except IllegalMoveError:
            return False
        return True

    def generate_legal_moves(self, side: Side) -> list[ValidatedMove]:
        """All legal moves for *side*, ordered by source then direction."""
        moves: list[ValidatedMove] = []
        for src in self._board.positions_of(side.piece):
            for direction in Direction:
                dst = shift(src, direction)
                if in_bounds(*dst) and self._board[dst] == side.target:
                    moves.append(ValidatedMove(src, dst, side.piece))
        return moves

    def has_legal_move(self, side: Side) -> bool:
        return bool(self.generate_legal_moves(side))
