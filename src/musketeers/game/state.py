"""Game state — board, side to move and session phase."""

from __future__ import annotations

from dataclasses import dataclass, field

from musketeers.core.board import Board
from musketeers.core.enums import CellContent, GameOutcome, Side
from musketeers.core.move import ValidatedMove
from musketeers.core.move_generator import MoveValidator
from musketeers.core.rules import Rules
from musketeers.game.interfaces import GamePhase


@dataclass(frozen=True)
class MoveRecord:
    """Summary of the move just applied."""

    move: ValidatedMove
    side: Side
    captured: bool
    outcome: GameOutcome


@dataclass
class GameState:
    """Owns the board for one session.

    This is a pure data/logic class — no I/O, no UI.  The outcome is never
    stored; it is recomputed from the board on every access.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Side = field(default=Side.MUSKETEERS, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    last_move: MoveRecord | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Initialise (or reset) the game; Musketeers always move first."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = Side.MUSKETEERS
        self.last_move = None
        self.phase = (
            GamePhase.GAME_OVER if self.is_terminal else GamePhase.AWAITING_MOVE
        )

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: ValidatedMove) -> MoveRecord:
        """Apply a validated move and pass the turn.

        Caller is responsible for the legality check.
        """
        side = self.side_to_move
        captured = self.board[move.destination] == CellContent.ENEMY
        self.board.apply_move(move.source, move.destination, move.piece)

        outcome = self.outcome
        if outcome == GameOutcome.IN_PROGRESS:
            self.side_to_move = side.opposite
        else:
            self.phase = GamePhase.GAME_OVER

        record = MoveRecord(move=move, side=side, captured=captured, outcome=outcome)
        self.last_move = record
        return record

    def interrupt(self) -> None:
        self.phase = GamePhase.INTERRUPTED

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def outcome(self) -> GameOutcome:
        return Rules.game_outcome(self.board)

    @property
    def is_terminal(self) -> bool:
        return Rules.is_game_over(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_finished(self) -> bool:
        """Game over or interrupted; no more moves are accepted."""
        return self.phase in (GamePhase.GAME_OVER, GamePhase.INTERRUPTED)

    @property
    def enemy_count(self) -> int:
        return self.board.count(CellContent.ENEMY)

    def legal_moves(self) -> list[ValidatedMove]:
        """Legal moves for the side to move."""
        return MoveValidator(self.board).generate_legal_moves(self.side_to_move)
