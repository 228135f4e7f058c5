"""Tests for Board."""

import pytest

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.errors import InvalidSquareError
from gambit.core.piece import Piece
from gambit.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self, initial_board: Board) -> None:
        assert initial_board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self, initial_board: Board) -> None:
        assert initial_board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self, initial_board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert initial_board[sq] == Piece(Color.WHITE, pt), f"Mismatch at {sq}"

    def test_black_back_rank(self, initial_board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert initial_board[sq] == Piece(Color.BLACK, pt), f"Mismatch at {sq}"

    def test_pawns(self, initial_board: Board) -> None:
        white = initial_board.squares_of(Color.WHITE, PieceType.PAWN)
        black = initial_board.squares_of(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.row == 6 for sq in white)
        assert len(black) == 8 and all(sq.row == 1 for sq in black)

    def test_empty_middle(self, initial_board: Board) -> None:
        for row in range(2, 6):
            for col in range(8):
                assert initial_board[Square(row, col)] is None

    def test_metadata(self, initial_board: Board) -> None:
        assert initial_board.side_to_move == Color.WHITE
        assert initial_board.castling == CastlingRights.ALL
        assert initial_board.en_passant is None


class TestBoardMutation:
    def test_set_and_clear(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board[E4] = knight
        assert board[E4] == knight
        assert not board.is_empty(E4)
        board[E4] = None
        assert board.is_empty(E4)

    def test_king_cache_tracks_moves(self) -> None:
        board = Board()
        assert board.king_square(Color.WHITE) is None
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == E1
        board[E1] = None
        board[E2] = Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == E2

    def test_capturing_king_square_clears_cache(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        board[E1] = Piece(Color.BLACK, PieceType.ROOK)
        assert board.king_square(Color.WHITE) is None

    def test_copy_is_independent(self, initial_board: Board) -> None:
        clone = initial_board.copy()
        assert clone == initial_board
        clone[E2] = None
        clone.side_to_move = Color.BLACK
        clone.castling = CastlingRights.NONE
        assert initial_board[E2] is not None
        assert initial_board.side_to_move == Color.WHITE
        assert initial_board.castling == CastlingRights.ALL

    def test_pieces_lists_one_side(self, initial_board: Board) -> None:
        squares = [sq for sq, _ in initial_board.pieces(Color.BLACK)]
        assert len(squares) == 16
        assert all(sq.row in (0, 1) for sq in squares)


class TestBoardBounds:
    @pytest.mark.parametrize("sq", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_get_out_of_range(self, initial_board: Board, sq: tuple[int, int]) -> None:
        with pytest.raises(InvalidSquareError):
            initial_board[sq]  # type: ignore[index]

    def test_set_out_of_range(self) -> None:
        with pytest.raises(InvalidSquareError):
            Board()[(8, 8)] = Piece(Color.WHITE, PieceType.PAWN)  # type: ignore[index]


class TestBoardRepr:
    def test_repr_shows_grid(self, initial_board: Board) -> None:
        text = repr(initial_board)
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_render_with_glyphs(self, initial_board: Board) -> None:
        lines = initial_board.render(glyphs=True).splitlines()
        assert lines[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[6] == "2 ♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙"
        assert lines[7] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"
        assert lines[4] == "4 . . . . . . . ."

    def test_render_omits_status_line(self, initial_board: Board) -> None:
        assert len(initial_board.render().splitlines()) == 9
        assert len(repr(initial_board).splitlines()) == 10
