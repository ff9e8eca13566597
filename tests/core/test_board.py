"""Tests for Board."""

import pytest

from chessgrid.core.board import Board, create_starting_board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import EMPTY, Piece
from chessgrid.core.types import Coord, OutOfBoundsError


def _rows(*rows: str) -> str:
    return "\n".join(rows) + "\n"


class TestBoardText:
    def test_empty_board(self) -> None:
        assert str(Board()) == _rows(*["........"] * 8)

    def test_simple_board_with_a_couple_of_pieces(self) -> None:
        board = Board()
        board.set_cell(0, 1, Piece.white(PieceType.BISHOP))
        board.set_cell(4, 4, Piece.black(PieceType.KING))
        assert str(board) == (
            ".B......\n"
            "........\n"
            "........\n"
            "........\n"
            "....r...\n"
            "........\n"
            "........\n"
            "........\n"
        )

    def test_rows_follow_x_and_columns_follow_y(self) -> None:
        board = Board()
        board.set_cell(7, 0, Piece.white(PieceType.PAWN))
        board.set_cell(0, 7, Piece.black(PieceType.QUEEN))
        lines = str(board).splitlines()
        assert lines[0] == ".......q"
        assert lines[7] == "P......."

    def test_starting_board(self) -> None:
        assert str(create_starting_board()) == _rows(
            "rp....PR",
            "kp....PK",
            "bp....PB",
            "qp....PQ",
            "rp....PR",
            "bp....PB",
            "kp....PK",
            "rp....PR",
        )


class TestBoardAccess:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(square is EMPTY for _, square in board)

    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece.white(PieceType.ROOK)
        board.set_cell(2, 5, piece)
        assert board.cell_at(2, 5) == piece
        assert board[Coord(2, 5)] == piece
        assert board.is_empty(Coord(5, 2))

    def test_item_assignment(self) -> None:
        board = Board()
        board[Coord(6, 1)] = Piece.black(PieceType.KNIGHT)
        assert board.cell_at(6, 1) == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_overwrite_with_empty_removes_piece(self) -> None:
        board = Board()
        board.set_cell(3, 3, Piece.white(PieceType.QUEEN))
        board.set_cell(3, 3, EMPTY)
        assert board.cell_at(3, 3) is EMPTY

    @pytest.mark.parametrize("x, y", [(8, 0), (0, 8), (-1, 0), (0, -1), (9, 9)])
    def test_cell_at_out_of_bounds_raises(self, x: int, y: int) -> None:
        with pytest.raises(OutOfBoundsError, match="outside the board"):
            Board().cell_at(x, y)

    @pytest.mark.parametrize("x, y", [(8, 0), (-1, 7)])
    def test_set_cell_out_of_bounds_raises(self, x: int, y: int) -> None:
        board = Board()
        with pytest.raises(OutOfBoundsError):
            board.set_cell(x, y, Piece.white(PieceType.PAWN))
        assert board == Board()

    def test_out_of_bounds_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            Board()[Coord(0, 8)]


class TestBoardIteration:
    def test_visits_all_cells_row_major(self) -> None:
        coords = [coord for coord, _ in Board()]
        assert len(coords) == 64
        assert coords[0] == Coord(0, 0)
        assert coords[1] == Coord(0, 1)
        assert coords[8] == Coord(1, 0)
        assert coords[-1] == Coord(7, 7)

    def test_for_each_cell_matches_iteration(self) -> None:
        board = create_starting_board()
        visited = []
        board.for_each_cell(lambda coord, square: visited.append((coord, square)))
        assert visited == list(board)

    def test_pieces_lists_occupied_cells_only(self) -> None:
        board = Board()
        board.set_cell(1, 1, Piece.white(PieceType.KING))
        board.set_cell(6, 6, Piece.black(PieceType.KING))
        assert board.pieces() == [
            (Coord(1, 1), Piece.white(PieceType.KING)),
            (Coord(6, 6), Piece.black(PieceType.KING)),
        ]


class TestBoardOperations:
    def test_copy_independence(self) -> None:
        board = create_starting_board()
        copy = board.copy()
        assert board == copy
        copy.set_cell(4, 7, EMPTY)
        assert board != copy
        assert board.cell_at(4, 7) == Piece.white(PieceType.KING)

    def test_clear(self) -> None:
        board = create_starting_board()
        board.clear()
        assert board == Board()

    def test_move_piece_returns_captured_square(self) -> None:
        board = Board()
        rook = Piece.white(PieceType.ROOK)
        pawn = Piece.black(PieceType.PAWN)
        board[Coord(0, 0)] = rook
        board[Coord(0, 5)] = pawn

        captured = board.move_piece(Coord(0, 0), Coord(0, 5))

        assert captured == pawn
        assert board[Coord(0, 5)] == rook
        assert board[Coord(0, 0)] is EMPTY

    def test_move_piece_to_empty_square(self) -> None:
        board = Board()
        board[Coord(2, 2)] = Piece.black(PieceType.BISHOP)
        assert board.move_piece(Coord(2, 2), Coord(5, 5)) is EMPTY

    def test_repr_contains_dump(self) -> None:
        text = repr(create_starting_board())
        assert text.startswith("Board(")
        assert "rp....PR" in text


class TestStartingBoard:
    def test_piece_count(self) -> None:
        board = create_starting_board()
        pieces = board.pieces()
        assert len(pieces) == 32
        assert sum(1 for _, p in pieces if p.color == Color.WHITE) == 16

    def test_pawn_rows(self) -> None:
        board = create_starting_board()
        for x in range(8):
            assert board.cell_at(x, 1) == Piece.black(PieceType.PAWN)
            assert board.cell_at(x, 6) == Piece.white(PieceType.PAWN)

    def test_back_ranks(self) -> None:
        board = create_starting_board()
        expected = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for x, pt in enumerate(expected):
            assert board.cell_at(x, 0) == Piece.black(pt), f"Mismatch at x={x}"
            assert board.cell_at(x, 7) == Piece.white(pt), f"Mismatch at x={x}"

    def test_mirrored_across_midline(self) -> None:
        board = create_starting_board()
        for x in range(8):
            for y in range(4):
                top = board.cell_at(x, y)
                bottom = board.cell_at(x, 7 - y)
                if top is EMPTY:
                    assert bottom is EMPTY
                    continue
                assert isinstance(top, Piece) and isinstance(bottom, Piece)
                assert top.piece_type == bottom.piece_type
                assert top.color == bottom.color.opposite

    def test_middle_is_empty(self) -> None:
        board = create_starting_board()
        for x in range(8):
            for y in range(2, 6):
                assert board.cell_at(x, y) is EMPTY

    def test_each_call_returns_a_fresh_board(self) -> None:
        first = create_starting_board()
        second = create_starting_board()
        first.clear()
        assert second != first
