"""Tests for BoardScene helpers, selection and move resolution."""

from __future__ import annotations

from types import SimpleNamespace

from PyQt6.QtCore import QPointF

from musketeers.core.board import Board
from musketeers.core.enums import CellContent, Direction, Side
from musketeers.core.move import Move, ValidatedMove
from musketeers.ui.board.board_scene import BoardScene
from musketeers.ui.styles.theme import BoardTheme


def _centre(row: int, col: int) -> QPointF:
    t = BoardScene.TILE
    return QPointF(col * t + t / 2, row * t + t / 2)


def _scene_with_initial_board(side: Side = Side.MUSKETEERS) -> BoardScene:
    scene = BoardScene()
    scene.set_board(Board.initial(), side)
    return scene


def test_pos_to_position_maps_cells() -> None:
    scene = BoardScene()
    assert scene._pos_to_position(scene.sceneRect().topLeft()) == (0, 0)
    assert scene._pos_to_position(_centre(4, 4)) == (4, 4)
    assert scene._pos_to_position(_centre(1, 3)) == (1, 3)


def test_pos_to_position_outside_board() -> None:
    scene = BoardScene()
    assert scene._pos_to_position(QPointF(-1, 10)) is None
    assert scene._pos_to_position(QPointF(5 * BoardScene.TILE, 0)) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 10

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_show_legal_moves_false_clears_existing_dots() -> None:
    scene = BoardScene()
    dot = scene._make_highlight((2, 2), scene._theme.highlight_to)
    scene._legal_dot_items.append(dot)

    scene.set_show_legal_moves(False)

    assert scene._legal_dot_items == []


def test_set_board_creates_piece_items() -> None:
    scene = _scene_with_initial_board()
    assert len(scene._piece_items) == 11
    assert (0, 4) in scene._piece_items
    assert (0, 0) not in scene._piece_items


def test_set_board_resyncs_after_capture() -> None:
    board = Board.initial()
    scene = BoardScene()
    scene.set_board(board, Side.MUSKETEERS)
    board.apply_move((2, 2), (2, 1), CellContent.MUSKETEER)
    scene.set_board(board, Side.ENEMIES)
    assert len(scene._piece_items) == 10
    assert (2, 2) not in scene._piece_items


def test_select_own_piece_shows_targets() -> None:
    scene = _scene_with_initial_board()
    scene._select((2, 2))
    assert scene._selected == (2, 2)
    assert len(scene._legal_moves) == 4
    assert len(scene._legal_dot_items) == 4
    assert len(scene._highlight_items) == 1


def test_select_without_legal_move_dots() -> None:
    scene = _scene_with_initial_board()
    scene.set_show_legal_moves(False)
    scene._select((0, 4))
    assert len(scene._legal_moves) == 2
    assert scene._legal_dot_items == []


def test_find_legal_move_for_selection() -> None:
    scene = _scene_with_initial_board()
    scene._select((2, 2))

    assert scene._find_legal_move((2, 2), (1, 2)) == Move((2, 2), Direction.UP)
    assert scene._find_legal_move((2, 2), (3, 3)) is None
    assert scene._find_legal_move((0, 4), (0, 3)) is None


def test_enemy_targets_are_empty_cells() -> None:
    scene = _scene_with_initial_board(Side.ENEMIES)
    scene._select((3, 0))
    destinations = sorted(m.destination for m in scene._legal_moves)
    assert destinations == [(2, 0), (3, 1)]


def test_click_on_target_emits_move() -> None:
    scene = _scene_with_initial_board()
    emitted: list[Move] = []
    scene.move_made.connect(emitted.append)

    scene._select((4, 0))
    event = SimpleNamespace(scenePos=lambda: _centre(4, 1))
    scene.mousePressEvent(event)  # type: ignore[arg-type]

    assert emitted == [Move((4, 0), Direction.RIGHT)]
    assert scene._selected is None


def test_set_interactive_false_clears_selection() -> None:
    scene = _scene_with_initial_board()
    scene._select((2, 2))
    scene.set_interactive(False)
    assert scene._selected is None
    assert scene._legal_dot_items == []


def test_highlight_last_move() -> None:
    scene = _scene_with_initial_board()
    scene.highlight_last_move(ValidatedMove((2, 2), (2, 1), CellContent.MUSKETEER))
    assert len(scene._last_move_highlights) == 2

    scene.highlight_last_move(None)
    assert scene._last_move_highlights == []


def test_set_theme_keeps_board() -> None:
    scene = _scene_with_initial_board()
    original = scene._theme
    scene.set_theme(BoardTheme.slate())
    assert scene._theme == BoardTheme.slate()
    assert len(scene._cell_items) == 25
    assert len(scene._coord_items) == 10
    assert len(scene._piece_items) == 11
    scene.set_theme(original)
    assert scene._theme == original
