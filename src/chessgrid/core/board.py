"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import EMPTY, Piece, Square
from chessgrid.core.types import BOARD_SIZE, Coord, check_bounds


class Board:
    """Mutable 8x8 grid of squares, indexed ``[x][y]`` with x as the outer axis.

    The board does not validate mutations: callers consult
    :meth:`valid_moves` and then write cells themselves.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Square]] = [
            [EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def cell_at(self, x: int, y: int) -> Square:
        check_bounds(x, y)
        return self._cells[x][y]

    def set_cell(self, x: int, y: int, square: Square) -> None:
        check_bounds(x, y)
        self._cells[x][y] = square

    def __getitem__(self, coord: Coord) -> Square:
        return self.cell_at(coord.x, coord.y)

    def __setitem__(self, coord: Coord, square: Square) -> None:
        self.set_cell(coord.x, coord.y, square)

    def is_empty(self, coord: Coord) -> bool:
        return self[coord] is EMPTY

    # -- Iteration ----------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Coord, Square]]:
        """All 64 ``(coord, square)`` pairs, x outer, y inner."""
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                yield Coord(x, y), self._cells[x][y]

    def for_each_cell(self, visit: Callable[[Coord, Square], None]) -> None:
        """Call *visit* for every cell in :meth:`__iter__` order."""
        for coord, square in self:
            visit(coord, square)

    def pieces(self) -> list[tuple[Coord, Piece]]:
        """Occupied cells only."""
        return [(coord, sq) for coord, sq in self if isinstance(sq, Piece)]

    # -- Move queries -------------------------------------------------------

    def valid_moves(self, x: int, y: int) -> list[Coord]:
        """Pseudo-legal destinations for the piece on ``(x, y)``."""
        return MoveGenerator(self).valid_moves(Coord(x, y))

    def is_move_allowed(self, origin: Coord, target: Coord) -> bool:
        return MoveGenerator(self).is_move_allowed(origin, target)

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, origin: Coord, target: Coord) -> Square:
        """Relocate whatever stands on *origin* to *target*, unchecked.

        Returns the square previously on *target* (the captured piece, if any).
        """
        moved = self[origin]
        replaced = self[target]
        self[target] = moved
        self[origin] = EMPTY
        return replaced

    def copy(self) -> Board:
        b = Board()
        b._cells = [column.copy() for column in self._cells]
        return b

    def clear(self) -> None:
        self._cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        """One line per x, one character per y, each line newline-terminated."""
        return "".join(
            "".join(str(square) for square in column) + "\n" for column in self._cells
        )

    def __repr__(self) -> str:
        return f"Board(\n{self})"


# -- Factory ----------------------------------------------------------------

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_LAST = BOARD_SIZE - 1


def _place_for_both_colors(board: Board, x: int, y: int, piece_type: PieceType) -> None:
    """Black on *y*, White mirrored across the horizontal midline."""
    board.set_cell(x, y, Piece(Color.BLACK, piece_type))
    board.set_cell(x, _LAST - y, Piece(Color.WHITE, piece_type))


def create_starting_board() -> Board:
    """Standard starting arrangement; Black on y=0/1, White on y=6/7."""
    board = Board()
    for x in range(BOARD_SIZE):
        _place_for_both_colors(board, x, 1, PieceType.PAWN)
    for x, piece_type in enumerate(_BACK_RANK):
        _place_for_both_colors(board, x, 0, piece_type)
    return board
