"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from chessgrid.core.board import Board
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE, Coord
from chessgrid.ui.board.piece_item import PieceItem
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def _check_tile_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"Tile size must be at least 1 pixel, got {size}")


class BoardScene(QGraphicsScene):
    """Renders the board, move highlights, and piece items.

    Board ``x`` maps to the screen column and ``y`` to the screen row. Any
    piece may be dragged; there is no turn order.

    Signals:
        move_made(Coord, Coord): Emitted after a piece was moved by drag/click.
    """

    move_made = pyqtSignal(Coord, Coord)

    TILE = 128  # px per square

    def __init__(
        self, parent: QObject | None = None, *, tile_size: int = TILE
    ) -> None:
        _check_tile_size(tile_size)
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._tile = tile_size

        # Interaction state
        self._selected: Coord | None = None
        self._valid_moves: list[Coord] = []
        self._dragging_item: PieceItem | None = None
        self._interactive = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coord, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def tile_size(self) -> int:
        return self._tile

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def set_tile_size(self, size: int) -> None:
        """Change the square size in scene pixels and redraw everything."""
        _check_tile_size(size)
        if size == self._tile:
            return
        self._tile = size
        self._clear_selection()
        self._draw_board()
        self._sync_pieces()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide valid-move highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def refresh(self) -> None:
        """Re-read the board after it was mutated outside the scene."""
        self._clear_selection()
        self._sync_pieces()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self._tile
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                is_dark = (x + y) % 2 == 1
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(x * t, y * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Coord(x, y)] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self._tile
        for coord, piece in self._board.pieces():
            item = PieceItem(piece, coord, t)
            item.setPos(coord.x * t + item.margin, coord.y * t + item.margin)
            self.addItem(item)
            self._piece_items[coord] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_coord(event.scenePos())
        if coord is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking a highlighted target → make the move
        if self._selected is not None and self._try_move(self._selected, coord):
            return

        if isinstance(self._board[coord], Piece):
            self._select(coord)
            item = self._piece_items.get(coord)
            if item is not None:
                item.enable_drag(True)
                item.start_drag()
                self._dragging_item = item
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            self._dragging_item = None
            drop = self._pos_to_coord(event.scenePos())

            if drop is not None and drop != item.coord:
                if self._try_move(item.coord, drop):
                    item.finish_drag()
                    item.enable_drag(False)
                    return

            # Invalid drop — snap back
            item.cancel_drag()
            item.enable_drag(False)

        super().mouseReleaseEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, coord: Coord) -> None:
        self._clear_selection()
        if self._board is None:
            return
        self._selected = coord
        self._highlight_items.append(
            self._make_highlight(coord, self._theme.highlight_from)
        )

        self._valid_moves = self._board.valid_moves(coord.x, coord.y)
        if self._show_legal_moves:
            for target in self._valid_moves:
                dot = self._make_highlight(target, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected = None
        self._valid_moves = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Move application ─────────────────────────────────────────────────

    def _try_move(self, origin: Coord, target: Coord) -> bool:
        """Move the piece on *origin* to *target* if the board allows it."""
        if self._board is None:
            return False
        if not self._board.is_move_allowed(origin, target):
            _LOGGER.debug("Rejected move %s -> %s", origin, target)
            return False

        moved = self._board[origin]
        captured = self._board.move_piece(origin, target)
        if isinstance(captured, Piece):
            _LOGGER.debug("%s %s takes %s on %s", moved, origin, captured, target)
        else:
            _LOGGER.debug("%s %s -> %s", moved, origin, target)

        self._clear_selection()
        self._sync_pieces()
        self.move_made.emit(origin, target)
        return True

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_coord(self, pos: QPointF) -> Coord | None:
        """Scene position → board coordinate."""
        t = self._tile
        coord = Coord(int(pos.x() // t), int(pos.y() // t))
        if not coord.in_bounds:
            return None
        return coord

    def _make_highlight(self, coord: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(coord.x * t, coord.y * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
