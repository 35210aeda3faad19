"""GameController — the turn controller of a Three Musketeers game.

Drives validate → apply → evaluate for each submitted move and emits
events via simple callbacks so the text session, the UI and tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from musketeers.core.board import Board
from musketeers.core.enums import GameOutcome, MoveError
from musketeers.core.errors import IllegalMoveError
from musketeers.core.move import Move
from musketeers.core.move_generator import MoveValidator
from musketeers.game.interfaces import GamePhase, IGameController
from musketeers.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[Move, MoveError], None]
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]
InterruptCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_move_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_interrupted: list[InterruptCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Alternates Musketeers and enemies, one fully processed move at a time.

    A rejected move leaves both the board and the side to move untouched.
    Once the board is terminal (or the session is interrupted) every further
    ``submit_move`` is refused.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        self._state = GameState()
        self._state.setup(board)
        _LOGGER.debug("New game:\n%r", self._state.board)

        if self._state.is_game_over:
            # A loaded board may already be decided.
            self._emit_game_over(self._state.outcome)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_finished:
            return False
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        side = self._state.side_to_move
        validator = MoveValidator(self._state.board)
        try:
            validated = validator.validate(move, side)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected %s move %s: %s", side, move, exc.reason.name)
            self._emit_rejected(move, exc.reason)
            return False

        record = self._state.apply_move(validated)
        _LOGGER.debug("Applied %s move %s", side, validated)

        self._emit_move(record)

        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", record.outcome.name)
            self._emit_game_over(record.outcome)
        return True

    def interrupt(self) -> None:
        if self._state.is_finished:
            return
        self._state.interrupt()
        _LOGGER.info("Game interrupted with %s to move", self._state.side_to_move)
        self._emit_phase(GamePhase.INTERRUPTED)
        for cb in self.events.on_interrupted:
            cb(self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_rejected(self, move: Move, reason: MoveError) -> None:
        for cb in self.events.on_move_rejected:
            cb(move, reason)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
