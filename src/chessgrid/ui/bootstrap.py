"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.runtime_assets import PIECES_DIR, missing_piece_svgs

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chessgrid.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _check_piece_assets() -> None:
    """Warn about pieces that have no SVG file to draw them with."""
    keys = [Piece(color, pt).resource_key for color in Color for pt in PieceType]
    missing = missing_piece_svgs(keys)
    if missing:
        _LOGGER.warning(
            "Missing piece assets in %s: %s", PIECES_DIR, ", ".join(missing)
        )
        return
    _LOGGER.debug("Using piece assets from %s", PIECES_DIR)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessgrid.ui.styles.theme import APP_STYLE

    app.setApplicationName("chessgrid")
    app.setStyle("Fusion")
    _check_piece_assets()
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessgrid.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
