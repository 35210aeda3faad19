"""User-configurable settings of the desktop front-end."""

from __future__ import annotations

from dataclasses import dataclass

from musketeers.ui.board.board_scene import BoardScene
from musketeers.ui.styles.theme import BOARD_THEMES, BoardTheme


@dataclass
class UiSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    @property
    def theme(self) -> BoardTheme:
        return BOARD_THEMES.get(self.board_theme, BoardTheme.default())


def apply_settings(scene: BoardScene, settings: UiSettings) -> None:
    scene.set_theme(settings.theme)
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
