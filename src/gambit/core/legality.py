"""Legality filter: narrows pseudo-legal moves to legal ones."""

from __future__ import annotations

from gambit.core.attacks import is_in_check
from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.executor import apply_move
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.types import Square


def is_move_legal(board: Board, move: Move, color: Color) -> bool:
    """Does *move* leave *color*'s king safe?

    The move is played on a copy; *board* is not touched.
    """
    trial = board.copy()
    apply_move(trial, move)
    return not is_in_check(trial, color)


def legal_moves(board: Board, sq: Square) -> list[Move]:
    """Legal moves of the piece on *sq*.

    Only pieces of the side to move have legal moves; any other square
    yields an empty list.
    """
    piece = board[sq]
    if piece is None or piece.color != board.side_to_move:
        return []
    gen = MoveGenerator(board)
    return [m for m in gen.pseudo_legal_moves(sq) if is_move_legal(board, m, piece.color)]


def all_legal_moves(board: Board) -> list[Move]:
    """Every legal move for the side to move."""
    color = board.side_to_move
    gen = MoveGenerator(board)
    return [
        m
        for m in gen.generate_pseudo_legal_moves(color)
        if is_move_legal(board, m, color)
    ]


def has_any_legal_move(board: Board, color: Color) -> bool:
    """Whether *color* has at least one legal move; stops at the first one."""
    gen = MoveGenerator(board)
    for sq, _piece in board.pieces(color):
        for move in gen.pseudo_legal_moves(sq):
            if is_move_legal(board, move, color):
                return True
    return False
