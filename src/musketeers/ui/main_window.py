"""MainWindow — top-level window assembling the board and the controller."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from musketeers.core.board import Board
from musketeers.core.enums import GameOutcome, MoveError, Side
from musketeers.core.errors import BoardFileError
from musketeers.core.move import Move
from musketeers.game.controller import GameController
from musketeers.game.interfaces import GamePhase
from musketeers.game.state import GameState, MoveRecord
from musketeers.game.storage import load_board, save_board, saved_board_path
from musketeers.ui.board.board_view import BoardView
from musketeers.ui.settings import UiSettings, apply_settings

_LOGGER = logging.getLogger(__name__)

_BOARD_FILTER = "Board files (*.txt);;All files (*)"

_SIDE_NAMES: dict[Side, str] = {
    Side.MUSKETEERS: "Musketeers",
    Side.ENEMIES: "Cardinal Richelieu's men",
}

_OUTCOME_MESSAGES: dict[GameOutcome, str] = {
    GameOutcome.MUSKETEERS_WIN: "The Musketeers win!",
    GameOutcome.ENEMIES_WIN: "Cardinal Richelieu's men win!",
}


class MainWindow(QMainWindow):
    """Main application window: board, status line and File menu.

    Args:
        board: Starting board; the default layout when ``None``.
        save_path: Target of *Save* and of the automatic save at game end.
        settings: Display settings.
    """

    def __init__(
        self,
        board: Board | None = None,
        save_path: Path | None = None,
        settings: UiSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Three Musketeers")
        self.setMinimumSize(420, 480)

        self._controller = GameController()
        self._settings = settings or UiSettings()
        self._save_path = save_path

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._board_view.move_made.connect(self._on_user_move)
        apply_settings(self._board_view.board_scene, self._settings)

        self.start_game(board)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_file = menu_bar.addMenu("&File")
        assert self._menu_file is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(lambda: self.start_game(None))
        self._menu_file.addAction(self._act_new_game)

        self._act_open = QAction("Open board…", self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_board)
        self._menu_file.addAction(self._act_open)

        self._act_save = QAction("Save board…", self)
        self._act_save.setShortcut("Ctrl+S")
        self._act_save.triggered.connect(self._on_save_board)
        self._menu_file.addAction(self._act_save)

        self._menu_file.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_move_rejected.append(self._on_move_rejected)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase_changed)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def start_game(self, board: Board | None) -> None:
        self._board_view.board_scene.highlight_last_move(None)
        self._controller.new_game(board)
        self._sync_board()
        self._update_status()

    def _on_open_board(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open board", "", _BOARD_FILTER
        )
        if not file_path:
            return
        path = Path(file_path)
        try:
            board = load_board(path)
        except BoardFileError as exc:
            QMessageBox.warning(self, "Open board", str(exc))
            return
        self._save_path = saved_board_path(path)
        self.start_game(board)
        self._status_label.setText(f"Loaded {path.name}")

    def _on_save_board(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save board",
            str(self._save_path or "out-board.txt"),
            _BOARD_FILTER,
        )
        if not file_path:
            return
        self._save_to(Path(file_path))

    def _save_to(self, path: Path) -> bool:
        try:
            save_board(self._controller.board, path)
        except BoardFileError as exc:
            QMessageBox.warning(self, "Save board", str(exc))
            return False
        self._status_label.setText(f"Saved {path.name}")
        return True

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_user_move(self, move: Move) -> None:
        self._controller.submit_move(move)

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        self._sync_board()
        self._board_view.board_scene.highlight_last_move(record.move)
        self._update_status()

    def _on_move_rejected(self, move: Move, reason: MoveError) -> None:
        self._status_label.setText(reason.message)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self._board_view.board_scene.set_interactive(False)
        if self._save_path is not None:
            self._save_to(self._save_path)
        self._update_status()
        QMessageBox.information(self, "Game over", _OUTCOME_MESSAGES[outcome])

    def _on_phase_changed(self, phase: GamePhase) -> None:
        _LOGGER.debug("Phase changed: %s", phase.name)
        self._board_view.board_scene.set_interactive(
            phase == GamePhase.AWAITING_MOVE
        )

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_board(self) -> None:
        state = self._controller.state
        self._board_view.board_scene.set_board(state.board, state.side_to_move)

    def _update_status(self) -> None:
        state = self._controller.state
        if state.is_game_over:
            text = _OUTCOME_MESSAGES[state.outcome]
        else:
            text = f"{_SIDE_NAMES[state.side_to_move]} to move"
        self._status_label.setText(text)
