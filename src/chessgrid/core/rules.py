"""Per-piece movement rules.

Every rule is a pure function of the origin coordinate and the mover's color
returning a :data:`RaySet`: an insertion-ordered mapping from a direction
``(dx, dy)`` to the ray of coordinates leaving the origin in that direction.
Rays are *not* filtered for bounds or occupancy; :class:`MoveGenerator`
does that against a concrete board.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.types import BOARD_SIZE, Coord

Direction: TypeAlias = tuple[int, int]
Ray: TypeAlias = tuple[Coord, ...]
RaySet: TypeAlias = dict[Direction, Ray]
RayRule: TypeAlias = Callable[[Coord, Color], RaySet]

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

KING_OFFSETS: tuple[Direction, ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[Direction, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS

# Black pawns advance towards higher y, white pawns towards lower y.
_PAWN_FORWARD: dict[Color, int] = {Color.BLACK: 1, Color.WHITE: -1}

_MAX_DISTANCE = BOARD_SIZE - 1


# -- Ray builders -----------------------------------------------------------


def _steps(origin: Coord, offsets: tuple[Direction, ...]) -> RaySet:
    """One single-square ray per offset."""
    return {(dx, dy): (origin.offset(dx, dy),) for dx, dy in offsets}


def _slides(origin: Coord, directions: tuple[Direction, ...]) -> RaySet:
    """One ray per direction, nearest square first, up to 7 squares long."""
    return {
        (dx, dy): tuple(
            origin.offset(dx * dist, dy * dist)
            for dist in range(1, _MAX_DISTANCE + 1)
        )
        for dx, dy in directions
    }


# -- Piece rules ------------------------------------------------------------


def _pawn_moves(origin: Coord, color: Color) -> RaySet:
    return _steps(origin, ((0, _PAWN_FORWARD[color]),))


def _pawn_captures(origin: Coord, color: Color) -> RaySet:
    forward = _PAWN_FORWARD[color]
    return _steps(origin, ((1, forward), (-1, forward)))


def _knight_moves(origin: Coord, color: Color) -> RaySet:
    return _steps(origin, KNIGHT_OFFSETS)


def _bishop_moves(origin: Coord, color: Color) -> RaySet:
    return _slides(origin, BISHOP_DIRS)


def _rook_moves(origin: Coord, color: Color) -> RaySet:
    return _slides(origin, ROOK_DIRS)


def _queen_moves(origin: Coord, color: Color) -> RaySet:
    return _rook_moves(origin, color) | _bishop_moves(origin, color)


def _king_moves(origin: Coord, color: Color) -> RaySet:
    return _steps(origin, KING_OFFSETS)


_MOVE_RULES: dict[PieceType, RayRule] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}

# Only pieces that capture differently from how they move are listed here.
_CAPTURE_OVERRIDES: dict[PieceType, RayRule] = {
    PieceType.PAWN: _pawn_captures,
}


# -- Public API -------------------------------------------------------------


def move_rays(piece_type: PieceType, origin: Coord, color: Color) -> RaySet:
    """Non-capturing rays for *piece_type* standing on *origin*."""
    return _MOVE_RULES[piece_type](origin, color)


def capture_rays(piece_type: PieceType, origin: Coord, color: Color) -> RaySet:
    """Capturing rays for *piece_type*; same as :func:`move_rays` unless overridden."""
    rule = _CAPTURE_OVERRIDES.get(piece_type, _MOVE_RULES[piece_type])
    return rule(origin, color)
