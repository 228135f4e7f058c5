"""Move execution: the single routine that mutates a board for a move.

Real moves and legality simulations both go through :func:`apply_move`; a
simulation simply runs it on a :meth:`Board.copy`, so the two paths cannot
drift apart.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import PieceType
from gambit.core.geometry import (
    CASTLING_BY_KING_TARGET,
    KING_RIGHTS,
    PROMOTION_ROW,
    ROOK_CORNERS,
)
from gambit.core.move import Move
from gambit.core.move_generator import AUTO_PROMOTION
from gambit.core.piece import Piece
from gambit.core.types import Square, square_name


def apply_move(board: Board, move: Move) -> Piece | None:
    """Apply *move* to *board* in place and return the captured piece, if any.

    The move is trusted to come from the move generator for this board.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")
    color = piece.color

    # A rook taken on its home corner takes its castling right with it.
    captured = board[move.to_sq]
    if captured is not None and captured.piece_type == PieceType.ROOK:
        _revoke_corner(board, move.to_sq, captured)

    board[move.from_sq] = None

    placed = piece
    if move.en_passant and piece.piece_type == PieceType.PAWN:
        # The captured pawn sits beside the origin, not on the target square.
        capture_sq = Square(move.from_sq.row, move.to_sq.col)
        captured = board[capture_sq]
        board[capture_sq] = None
    elif piece.piece_type == PieceType.PAWN and move.to_sq.row == PROMOTION_ROW[color]:
        placed = Piece(color, move.promotion or AUTO_PROMOTION)
    board[move.to_sq] = placed

    if piece.piece_type == PieceType.KING:
        board.castling &= ~KING_RIGHTS[color]
        if move.castling:
            _relocate_castling_rook(board, move)
    elif piece.piece_type == PieceType.ROOK:
        _revoke_corner(board, move.from_sq, piece)

    # En passant target lives for exactly one reply.
    board.en_passant = None
    if piece.piece_type == PieceType.PAWN and abs(move.to_sq.row - move.from_sq.row) == 2:
        board.en_passant = Square(
            (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
        )

    board.side_to_move = color.opposite
    return captured


def _revoke_corner(board: Board, sq: Square, rook: Piece) -> None:
    corner = ROOK_CORNERS.get(sq)
    if corner is not None and corner[0] == rook.color:
        board.castling &= ~corner[1]


def _relocate_castling_rook(board: Board, move: Move) -> None:
    path = CASTLING_BY_KING_TARGET.get(move.to_sq)
    if path is None:
        return
    rook = board[path.rook_from]
    if rook is not None:
        board[path.rook_to] = rook
        board[path.rook_from] = None
    board.castling &= ~path.right
