"""Qt application bootstrap helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from musketeers.core.board import Board
    from musketeers.ui.settings import UiSettings


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from musketeers.ui.styles.theme import APP_STYLE

    app.setApplicationName("Three Musketeers")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    board: Board | None = None,
    save_path: Path | None = None,
    settings: UiSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from musketeers.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(board=board, save_path=save_path, settings=settings)
    window.show()

    return app.exec()
