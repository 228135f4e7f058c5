"""Pseudo-legal move generation.

Moves produced here obey each piece's movement shape and board occupancy but
may leave the mover's own king attacked; :mod:`gambit.core.legality` filters
them down to legal moves.
"""

from __future__ import annotations

from collections.abc import Callable

from gambit.core.attacks import is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.geometry import (
    BISHOP_RAYS,
    CASTLING_PATHS,
    KING_HOME,
    KING_RIGHTS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    PAWN_START_ROW,
    PROMOTION_ROW,
    QUEEN_RAYS,
    ROOK_RAYS,
)
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square, is_valid_square

# Pawns always promote to the strongest piece.
AUTO_PROMOTION: PieceType = PieceType.QUEEN


class MoveGenerator:
    """Generates pseudo-legal moves for pieces on a :class:`Board`.

    The generator only reads the board; it never mutates it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty list if none)."""
        piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Move] = []
        _GENERATORS[piece.piece_type](self, Square(*sq), piece.color, moves)
        return moves

    def generate_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Pseudo-legal moves of every piece of *color* (default: side to move)."""
        if color is None:
            color = self._board.side_to_move
        moves: list[Move] = []
        for sq, piece in self._board.pieces(color):
            _GENERATORS[piece.piece_type](self, sq, color, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = PAWN_DIRECTION[color]
        one_row = sq.row + step
        if not is_valid_square(one_row, sq.col):
            return

        one_step = Square(one_row, sq.col)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, color, moves)
            if sq.row == PAWN_START_ROW[color]:
                two_step = Square(sq.row + 2 * step, sq.col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        enemy_pawn = Piece(color.opposite, PieceType.PAWN)
        for dc in (-1, 1):
            col = sq.col + dc
            if not is_valid_square(one_row, col):
                continue
            cap_sq = Square(one_row, col)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, color, moves)
            elif cap_sq == board.en_passant and board[Square(sq.row, col)] == enemy_pawn:
                moves.append(Move(sq, cap_sq, en_passant=True))

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, color: Color, moves: list[Move]
    ) -> None:
        if to_sq.row == PROMOTION_ROW[color]:
            moves.append(Move(from_sq, to_sq, promotion=AUTO_PROMOTION))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_knight(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        for to_sq in KNIGHT_TARGETS[sq]:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_bishop(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, BISHOP_RAYS[sq], moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, ROOK_RAYS[sq], moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, QUEEN_RAYS[sq], moves)

    def _gen_king(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        for to_sq in KING_TARGETS[sq]:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

        self._gen_castling(sq, color, moves)

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        if not board.castling & KING_RIGHTS[color] or king_sq != KING_HOME[color]:
            return

        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        for path in CASTLING_PATHS[color]:
            if not board.castling & path.right:
                continue
            if board[path.rook_from] != rook:
                continue
            if not all(board.is_empty(s) for s in path.between):
                continue
            if any(is_square_attacked(board, s, opponent) for s in path.king_path):
                continue
            moves.append(Move(king_sq, path.king_to, castling=True))


_PieceGenerator = Callable[[MoveGenerator, Square, Color, list[Move]], None]

_GENERATORS: dict[PieceType, _PieceGenerator] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
