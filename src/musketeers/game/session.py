"""Interactive text session: prompt, parse, submit, render, save."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from musketeers.core.enums import GameOutcome, MoveError, Side
from musketeers.core.errors import MalformedInputError, SaveError
from musketeers.core.move import Move
from musketeers.core.notation import is_interrupt, parse_move, render_board
from musketeers.game.controller import GameController
from musketeers.game.interfaces import GamePhase
from musketeers.game.state import GameState, MoveRecord
from musketeers.game.storage import save_board

_LOGGER = logging.getLogger(__name__)

INTRO = (
    "*** The Three Musketeers Game ***\n"
    "To make a move, enter the location of the piece you want to move,\n"
    "and the direction you want it to move. Locations are indicated as\n"
    "a letter (A, B, C, D, E) followed by a number (1, 2, 3, 4, or 5).\n"
    "Directions are indicated as left, right, up, down (L/l, R/r, U/u, D/d).\n"
    "For example, to move the Musketeer from the top right-hand corner\n"
    "to the left, enter 'A,5=L' or 'a,5=l' (without quotes).\n"
    "Enter '0,0=E' to save the board and quit.\n"
)

_PROMPTS: dict[Side, str] = {
    Side.MUSKETEERS: "Give the Musketeer's move",
    Side.ENEMIES: "Give the enemy's move",
}

_OUTCOME_MESSAGES: dict[GameOutcome, str] = {
    GameOutcome.MUSKETEERS_WIN: "The Musketeers win!",
    GameOutcome.ENEMIES_WIN: "Cardinal Richelieu's men win!",
}


@dataclass
class SessionConfig:
    """Settings for one text session."""

    save_path: Path | None = None
    show_intro: bool = True


class TextSession:
    """Plays one game over a pair of text streams.

    Args:
        controller: Controller already set up with ``new_game``.
        stdin: Source of player commands, one per line.
        stdout: Destination for prompts, boards and messages.
        config: Session settings; ``save_path=None`` disables saving.
    """

    def __init__(
        self,
        controller: GameController,
        stdin: TextIO,
        stdout: TextIO,
        config: SessionConfig | None = None,
    ) -> None:
        self._controller = controller
        self._in = stdin
        self._out = stdout
        self._config = config or SessionConfig()

        events = controller.events
        events.on_move.append(self._on_move)
        events.on_move_rejected.append(self._on_move_rejected)

    @property
    def state(self) -> GameState:
        return self._controller.state

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self) -> GameState:
        """Play until the game ends or the player interrupts."""
        if self._config.show_intro:
            self._write(INTRO)
        self._write(render_board(self.state.board))

        while self.state.phase == GamePhase.AWAITING_MOVE:
            line = self._ask(_PROMPTS[self.state.side_to_move])
            if line is None:
                _LOGGER.info("Input closed, interrupting the game")
                self._interrupt()
                break
            if is_interrupt(line):
                self._interrupt()
                break
            self.handle_line(line)

        if self.state.is_game_over:
            self._write(f"\n{_OUTCOME_MESSAGES[self.state.outcome]}\n")
            self._save()
        return self.state

    def handle_line(self, line: str) -> bool:
        """Parse and submit one move line. Returns True if it was applied."""
        try:
            move = parse_move(line)
        except MalformedInputError as exc:
            self._write(str(exc))
            return False
        return self._controller.submit_move(move)

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self._write(render_board(state.board))

    def _on_move_rejected(self, move: Move, reason: MoveError) -> None:
        self._write(f"\n{reason.message}")

    # ── Helpers ──────────────────────────────────────────────────────────

    def _interrupt(self) -> None:
        self._write("\nGame interrupted. Exiting...")
        self._controller.interrupt()
        self._save()

    def _save(self) -> None:
        path = self._config.save_path
        if path is None:
            return
        try:
            save_board(self.state.board, path)
        except SaveError as exc:
            self._write(str(exc))
            self._write("Failed to save the game state.")
            return
        self._write(f"Saving {path}...Done.\nAu revoir!\n")

    def _ask(self, prompt: str) -> str | None:
        self._out.write(f"\n{prompt}\n>")
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line

    def _write(self, text: str) -> None:
        print(text, file=self._out)
