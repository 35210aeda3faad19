"""Visual theme constants and QSS styles."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and its pieces."""

    light_cell: QColor
    dark_cell: QColor
    musketeer: QColor
    enemy: QColor
    piece_outline: QColor
    highlight_from: QColor  # selected piece
    highlight_to: QColor  # legal move targets
    last_move: QColor  # last move origin and destination
    coord_light: QColor  # coordinate text on dark cells
    coord_dark: QColor  # coordinate text on light cells

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_cell=QColor(240, 217, 181),  # tan
            dark_cell=QColor(181, 136, 99),  # brown
            musketeer=QColor(30, 80, 160),  # royal blue
            enemy=QColor(170, 30, 40),  # cardinal red
            piece_outline=QColor(20, 20, 20),
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            last_move=QColor(155, 199, 0, 105),  # green
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_cell=QColor(224, 226, 231),
            dark_cell=QColor(101, 110, 122),
            musketeer=QColor(40, 110, 200),
            enemy=QColor(190, 50, 50),
            piece_outline=QColor(15, 15, 20),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
        )


BOARD_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Slate": BoardTheme.slate(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
    font-size: 14px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
