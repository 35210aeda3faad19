"""Tests for applying UI settings to the board scene."""

from __future__ import annotations

from musketeers.ui.board.board_scene import BoardScene
from musketeers.ui.settings import UiSettings, apply_settings
from musketeers.ui.styles.theme import BOARD_THEMES, BoardTheme


class _StubScene:
    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def set_theme(self, theme: object) -> None:
        self.calls.append(("theme", theme))

    def set_show_coordinates(self, visible: bool) -> None:
        self.calls.append(("coordinates", visible))

    def set_show_legal_moves(self, visible: bool) -> None:
        self.calls.append(("legal_moves", visible))


def test_theme_lookup() -> None:
    assert UiSettings().theme == BoardTheme.default()
    assert UiSettings(board_theme="Slate").theme == BOARD_THEMES["Slate"]


def test_unknown_theme_falls_back_to_default() -> None:
    assert UiSettings(board_theme="Neon").theme == BoardTheme.default()


def test_apply_settings_forwards_every_option() -> None:
    scene = _StubScene()
    settings = UiSettings(board_theme="Slate", show_coordinates=False)

    apply_settings(scene, settings)  # type: ignore[arg-type]

    assert scene.calls == [
        ("theme", BOARD_THEMES["Slate"]),
        ("coordinates", False),
        ("legal_moves", True),
    ]


def test_apply_settings_on_real_scene_hides_coordinates() -> None:
    scene = BoardScene()
    apply_settings(scene, UiSettings(show_coordinates=False))
    assert all(not item.isVisible() for item in scene._coord_items)
