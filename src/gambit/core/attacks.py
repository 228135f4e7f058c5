"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.geometry import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    ROOK_RAYS,
)
from gambit.core.piece import Piece
from gambit.core.types import Square, is_valid_square

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Only movement shape and blocking matter; whether the attacker is pinned
    is irrelevant, so this never consults legality.
    """
    # A by_color pawn attacks sq from one row "behind" it, relative to its
    # own direction of travel.
    pawn = Piece(by_color, PieceType.PAWN)
    pawn_row = sq.row - PAWN_DIRECTION[by_color]
    for dc in (-1, 1):
        col = sq.col + dc
        if is_valid_square(pawn_row, col) and board[Square(pawn_row, col)] == pawn:
            return True

    knight = Piece(by_color, PieceType.KNIGHT)
    for from_sq in KNIGHT_TARGETS[sq]:
        if board[from_sq] == knight:
            return True

    king = Piece(by_color, PieceType.KING)
    for from_sq in KING_TARGETS[sq]:
        if board[from_sq] == king:
            return True

    if _ray_attacked(board, ROOK_RAYS[sq], by_color, _ORTHOGONAL_ATTACKERS):
        return True

    return _ray_attacked(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_ATTACKERS)


def _ray_attacked(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    attackers: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for from_sq in ray:
            piece = board[from_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in attackers:
                return True
            break
    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A side without a king on the board counts as in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return True
    return is_square_attacked(board, king_sq, color.opposite)
