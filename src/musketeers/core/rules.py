"""Win detection."""

from __future__ import annotations

from collections import Counter

from musketeers.core.board import MUSKETEER_COUNT, Board
from musketeers.core.enums import CellContent, GameOutcome
from musketeers.core.types import neighbours


class Rules:
    """Static win evaluator that re-scans a :class:`Board` on every call."""

    # Rule notes:
    # - Musketeers win when no Musketeer touches an enemy orthogonally.  This
    #   is an adjacency test, not a "side to move has no legal move" test; the
    #   two agree only because enemies never move onto Musketeers.
    # - When both sides' conditions hold, Musketeers win.

    @staticmethod
    def adjacent_enemy_count(board: Board) -> int:
        """Total Musketeer/enemy orthogonal contacts on the board."""
        count = 0
        for pos in board.positions_of(CellContent.MUSKETEER):
            for near in neighbours(pos):
                if board[near] == CellContent.ENEMY:
                    count += 1
        return count

    @staticmethod
    def is_musketeers_win(board: Board) -> bool:
        return Rules.adjacent_enemy_count(board) == 0

    @staticmethod
    def is_enemies_win(board: Board) -> bool:
        """All three Musketeers share a row or share a column."""
        positions = board.positions_of(CellContent.MUSKETEER)
        rows = Counter(row for row, _ in positions)
        cols = Counter(col for _, col in positions)
        return MUSKETEER_COUNT in rows.values() or MUSKETEER_COUNT in cols.values()

    @staticmethod
    def is_game_over(board: Board) -> bool:
        return Rules.is_musketeers_win(board) or Rules.is_enemies_win(board)

    @staticmethod
    def game_outcome(board: Board) -> GameOutcome:
        """Determine the current outcome, Musketeers checked first."""
        if Rules.is_musketeers_win(board):
            return GameOutcome.MUSKETEERS_WIN
        if Rules.is_enemies_win(board):
            return GameOutcome.ENEMIES_WIN
        return GameOutcome.IN_PROGRESS
