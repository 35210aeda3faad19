"""BoardScene — QGraphicsScene that draws the 5x5 board and its pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from musketeers.core.board import Board
from musketeers.core.enums import CellContent, Side
from musketeers.core.move import Move, ValidatedMove
from musketeers.core.move_generator import MoveValidator
from musketeers.core.types import (
    BOARD_SIZE,
    COL_DIGITS,
    ROW_LETTERS,
    Position,
    all_positions,
    direction_between,
)
from musketeers.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the cells, coordinates, highlights and pieces.

    Signals:
        move_made(Move): Emitted when the user clicks a piece and then one of
            its highlighted targets.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per cell

    _PIECE_MARGIN = 12

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._side = Side.MUSKETEERS

        # Interaction state
        self._selected: Position | None = None
        self._legal_moves: list[ValidatedMove] = []
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._cell_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsEllipseItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, side_to_move: Side) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self._side = side_to_move
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row/column labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, move: ValidatedMove | None) -> None:
        """Highlight origin/destination of the last applied move."""
        self._clear_items(self._last_move_highlights)
        if move is None:
            return
        for pos in (move.source, move.destination):
            rect = self._make_highlight(pos, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 25 cells and coordinates."""
        for cell_item in self._cell_items.values():
            self.removeItem(cell_item)
        self._cell_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica", max(9, t // 8))

        for row, col in all_positions():
            is_light = (row + col) % 2 == 0
            color = self._theme.light_cell if is_light else self._theme.dark_cell
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._cell_items[(row, col)] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Row letters (left edge)
            if col == 0:
                self._add_coord(
                    ROW_LETTERS[row], col * t + 3, row * t + 1, font, text_color
                )

            # Column digits (top edge)
            if row == 0:
                self._add_coord(
                    COL_DIGITS[col], col * t + t - 12, row * t + 1, font, text_color
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        m = self._PIECE_MARGIN
        font = QFont("Helvetica", t // 3)
        font.setBold(True)

        for pos in all_positions():
            content = self._board[pos]
            if content == CellContent.EMPTY:
                continue
            row, col = pos
            fill = (
                self._theme.musketeer
                if content == CellContent.MUSKETEER
                else self._theme.enemy
            )
            item = QGraphicsEllipseItem(col * t + m, row * t + m, t - 2 * m, t - 2 * m)
            item.setBrush(QBrush(fill))
            item.setPen(QPen(self._theme.piece_outline, 2))
            item.setZValue(1)

            label = QGraphicsSimpleTextItem(content.symbol, item)
            label.setFont(font)
            label.setBrush(QBrush(QColor(255, 255, 255)))
            bounds = label.boundingRect()
            label.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )

            self.addItem(item)
            self._piece_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        pos = self._pos_to_position(event.scenePos())
        if pos is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking a legal target → make the move
        if self._selected is not None:
            move = self._find_legal_move(self._selected, pos)
            if move is not None:
                self._clear_selection()
                self.move_made.emit(move)
                return

        if self._board[pos] == self._side.piece:
            self._select(pos)
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, pos: Position) -> None:
        self._clear_selection()
        self._selected = pos

        rect = self._make_highlight(pos, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._board is not None:
            validator = MoveValidator(self._board)
            self._legal_moves = [
                m for m in validator.generate_legal_moves(self._side) if m.source == pos
            ]
            if self._show_legal_moves:
                for m in self._legal_moves:
                    dot = self._make_highlight(m.destination, self._theme.highlight_to)
                    self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal_moves = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Move resolution ──────────────────────────────────────────────────

    def _find_legal_move(self, src: Position, dst: Position) -> Move | None:
        """Move request for *src* → *dst* if it is among the selection's targets."""
        for legal in self._legal_moves:
            if legal.source == src and legal.destination == dst:
                direction = direction_between(src, dst)
                if direction is not None:
                    return Move(src, direction)
        return None

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_position(self, point: QPointF) -> Position | None:
        """Scene position → board position."""
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return row, col

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a cell."""
        t = self.TILE
        row, col = pos
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
