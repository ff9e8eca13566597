"""Board coordinates and bounds helpers.

Axis convention: ``x`` is the outer (row) index of the grid and ``y`` the
inner (column) index. The text dump prints one line per ``x``; the board
scene draws ``x`` as the screen column and ``y`` as the screen row.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


class OutOfBoundsError(IndexError):
    """Raised when a coordinate outside the 8x8 board is accessed."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinate ({x}, {y}) is outside the board")
        self.x = x
        self.y = y


def is_in_bounds(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def check_bounds(x: int, y: int) -> None:
    """Raise :class:`OutOfBoundsError` unless ``(x, y)`` lies on the board."""
    if not is_in_bounds(x, y):
        raise OutOfBoundsError(x, y)


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable board coordinate."""

    x: int
    y: int

    @property
    def in_bounds(self) -> bool:
        return is_in_bounds(self.x, self.y)

    def offset(self, dx: int, dy: int) -> Coord:
        """Coordinate shifted by ``(dx, dy)``; may leave the board."""
        return Coord(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
