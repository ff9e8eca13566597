"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def code(self) -> str:
        """Short token used in resource keys, e.g. ``"w"``."""
        return _COLOR_CODES[self]

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def code(self) -> str:
        """Lowercase token used in resource keys, e.g. ``"rook"``."""
        return self.name.lower()

    @property
    def key(self) -> str:
        """Display character used by the board text dump."""
        return _PIECE_KEYS[self]


_COLOR_CODES: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}

# Knight prints as "K" and King as "R"; board text fixtures depend on these.
_PIECE_KEYS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "K",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "R",
}
