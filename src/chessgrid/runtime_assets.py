"""Locations of the SVG files shipped inside the package."""

from __future__ import annotations

from pathlib import Path

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
PIECES_DIR = ASSETS_DIR / "pieces"


def piece_svg_path(resource_key: str) -> Path:
    """SVG file drawn for *resource_key*, e.g. ``pieces/w_rook.svg``."""
    return PIECES_DIR / f"{resource_key}.svg"


def missing_piece_svgs(resource_keys: list[str]) -> list[str]:
    """Return the keys in *resource_keys* that have no SVG file."""
    return [key for key in resource_keys if not piece_svg_path(key).is_file()]
