"""Core domain layer — board model and pseudo-legal move generation.

Quick start::

    from chessgrid.core import create_starting_board

    board = create_starting_board()
    print(board)
    for target in board.valid_moves(1, 0):
        print(target)
"""

from chessgrid.core.board import Board, create_starting_board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import EMPTY, EmptySquare, Piece, Square
from chessgrid.core.rules import RaySet, capture_rays, move_rays
from chessgrid.core.types import BOARD_SIZE, Coord, OutOfBoundsError, is_in_bounds

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "OutOfBoundsError",
    "is_in_bounds",
    # Square contents
    "EMPTY",
    "EmptySquare",
    "Piece",
    "Square",
    # Rules
    "RaySet",
    "capture_rays",
    "move_rays",
    # Domain objects
    "Board",
    "MoveGenerator",
    "create_starting_board",
]
