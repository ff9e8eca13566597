"""Piece rendering helpers for chess SVG assets."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtSvg import QSvgRenderer

from chessgrid.core.piece import Piece
from chessgrid.runtime_assets import PIECES_DIR

_ASSETS_DIR = PIECES_DIR

# Cache SVG renderers (one per resource key)
_renderers: dict[str, QSvgRenderer] = {}


def piece_asset_path(piece: Piece) -> Path:
    """SVG file for *piece*, e.g. ``pieces/w_rook.svg``."""
    return _ASSETS_DIR / f"{piece.resource_key}.svg"


def piece_renderer(piece: Piece) -> QSvgRenderer:
    """Return a cached SVG renderer for *piece*."""
    key = piece.resource_key
    if key not in _renderers:
        path = piece_asset_path(piece)
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG asset not found or invalid: {path}")
        _renderers[key] = renderer
    return _renderers[key]
