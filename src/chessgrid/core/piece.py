"""Square contents: the empty-square singleton and the Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from chessgrid.core.enums import Color, PieceType


class EmptySquare(Enum):
    """Singleton marker for an unoccupied cell."""

    EMPTY = "."

    def __str__(self) -> str:
        return self.value


EMPTY = EmptySquare.EMPTY


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def white(cls, piece_type: PieceType) -> Piece:
        return cls(Color.WHITE, piece_type)

    @classmethod
    def black(cls, piece_type: PieceType) -> Piece:
        return cls(Color.BLACK, piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Key character (uppercase = white, lowercase = black)."""
        key = self.piece_type.key
        return key.upper() if self.color == Color.WHITE else key.lower()

    @property
    def resource_key(self) -> str:
        """Asset lookup key, e.g. white rook → ``'w_rook'``."""
        return f"{self.color.code}_{self.piece_type.code}"


Square: TypeAlias = Piece | EmptySquare
