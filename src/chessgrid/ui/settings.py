"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

START_STANDARD = "standard"
START_EMPTY = "empty"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True
    tile_size: int = 128  # px per square

    # Game
    start_position: str = START_STANDARD  # or START_EMPTY
