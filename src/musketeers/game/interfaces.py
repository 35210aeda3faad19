"""Abstract interfaces for the game layer.

The front-ends (text session, Qt window) depend on these, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from musketeers.core.board import Board
    from musketeers.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Lifecycle of a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
    INTERRUPTED = auto()  # ended early by the player


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the turn controller."""

    @abstractmethod
    def new_game(self, board: Board | None = None) -> None:
        """Set up a new game, Musketeers to move."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move for the side to move. Returns True if applied."""

    @abstractmethod
    def interrupt(self) -> None:
        """End the session early, keeping the board as it is."""
