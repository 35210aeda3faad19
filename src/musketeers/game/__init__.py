"""Game management layer — turn controller, state, storage, text session.

Quick start::

    from pathlib import Path

    from musketeers.core import parse_move
    from musketeers.game import GameController, load_board

    ctrl = GameController()
    ctrl.new_game(load_board(Path("board.txt")))
    ctrl.submit_move(parse_move("c,3=l"))
"""

from musketeers.game.controller import GameController, GameEvents
from musketeers.game.interfaces import GamePhase, IGameController
from musketeers.game.session import SessionConfig, TextSession
from musketeers.game.state import GameState, MoveRecord
from musketeers.game.storage import (
    DEFAULT_OUTPUT_PREFIX,
    load_board,
    save_board,
    saved_board_path,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "SessionConfig",
    "TextSession",
    # Storage
    "DEFAULT_OUTPUT_PREFIX",
    "load_board",
    "save_board",
    "saved_board_path",
]
