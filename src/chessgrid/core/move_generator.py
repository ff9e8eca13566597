"""Pseudo-legal move generation over a :class:`Board`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.piece import EMPTY, Piece
from chessgrid.core.rules import Ray, capture_rays, move_rays
from chessgrid.core.types import Coord, check_bounds

if TYPE_CHECKING:
    from chessgrid.core.board import Board


class MoveGenerator:
    """Computes destinations for the piece on a given cell.

    Moves are pseudo-legal: piece geometry and blocking are honoured, king
    safety is not checked. Nothing is cached; every query reads the board
    as it is now.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def valid_moves(self, origin: Coord) -> list[Coord]:
        """Move set followed by capture set for the piece on *origin*.

        Raises:
            OutOfBoundsError: *origin* is outside the board.
        """
        check_bounds(origin.x, origin.y)
        piece = self._board[origin]
        if not isinstance(piece, Piece):
            return []
        return self.move_set(origin, piece) + self.capture_set(origin, piece)

    def is_move_allowed(self, origin: Coord, target: Coord) -> bool:
        """Whether *target* is among the valid moves from *origin*."""
        return target in self.valid_moves(origin)

    def move_set(self, origin: Coord, piece: Piece) -> list[Coord]:
        """Empty squares reachable without capturing, ray by ray."""
        moves: list[Coord] = []
        for ray in move_rays(piece.piece_type, origin, piece.color).values():
            for to in self._on_board(ray):
                if self._board[to] is not EMPTY:
                    break
                moves.append(to)
        return moves

    def capture_set(self, origin: Coord, piece: Piece) -> list[Coord]:
        """First occupied square of each capture ray, when it holds an enemy."""
        captures: list[Coord] = []
        for ray in capture_rays(piece.piece_type, origin, piece.color).values():
            for to in self._on_board(ray):
                target = self._board[to]
                if target is EMPTY:
                    continue
                if isinstance(target, Piece) and target.color != piece.color:
                    captures.append(to)
                break
        return captures

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def _on_board(ray: Ray) -> list[Coord]:
        return [coord for coord in ray if coord.in_bounds]
