"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget

from chessgrid.core.board import Board, create_starting_board
from chessgrid.core.types import Coord
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.settings import START_EMPTY, AppSettings
from chessgrid.ui.styles.theme import BOARD_THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Board view plus a Game menu (new game, clear board, quit)."""

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._board = Board()

        self.setWindowTitle("chessgrid")
        self._board_view = BoardView(self, tile_size=self._settings.tile_size)
        self._board_view.move_made.connect(self._on_move_made)
        self.setCentralWidget(self._board_view)
        self.resize(512, 512)

        self._build_menu()
        self.apply_settings()
        self.new_game()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def new_game(self) -> None:
        """Reset to the configured start position."""
        if self._settings.start_position == START_EMPTY:
            self._board = Board()
        else:
            self._board = create_starting_board()
        self._board_view.board_scene.set_board(self._board)
        self.statusBar().clearMessage()

    def clear_board(self) -> None:
        """Remove every piece from the current board."""
        self._board.clear()
        self._board_view.board_scene.refresh()
        self.statusBar().clearMessage()

    def apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene

        factory = BOARD_THEMES.get(s.board_theme)
        if factory is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            factory = BoardTheme.default
        scene.set_theme(factory())
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_tile_size(s.tile_size)
        self._board_view.fit_board()

    # ── Internals ────────────────────────────────────────────────────────

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu("&Game")

        act_new = QAction("&New game", self)
        act_new.setShortcut(QKeySequence.StandardKey.New)
        act_new.triggered.connect(self.new_game)
        menu.addAction(act_new)

        act_clear = QAction("&Clear board", self)
        act_clear.triggered.connect(self.clear_board)
        menu.addAction(act_clear)

        menu.addSeparator()

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        act_quit.triggered.connect(self.close)
        menu.addAction(act_quit)

    def _on_move_made(self, origin: Coord, target: Coord) -> None:
        piece = self._board[target]
        self.statusBar().showMessage(f"{piece} {origin} → {target}")
