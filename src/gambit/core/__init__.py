"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Board, legal_moves, apply_move, Rules, parse_square

    board = Board.initial()
    move = legal_moves(board, parse_square("e2"))[0]
    apply_move(board, move)
    print(Rules.evaluate(board).status_text)
"""

from gambit.core.attacks import is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, GamePhase, PieceType
from gambit.core.errors import IllegalMoveError, InvalidSquareError
from gambit.core.executor import apply_move
from gambit.core.fen import STARTING_FEN, board_from_fen, board_to_fen
from gambit.core.legality import (
    all_legal_moves,
    has_any_legal_move,
    is_move_legal,
    legal_moves,
)
from gambit.core.move import Move
from gambit.core.move_generator import AUTO_PROMOTION, MoveGenerator
from gambit.core.piece import Piece
from gambit.core.rules import GameState, Rules
from gambit.core.types import (
    Square,
    ensure_square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GamePhase",
    "PieceType",
    # Errors
    "IllegalMoveError",
    "InvalidSquareError",
    # Types / helpers
    "Square",
    "ensure_square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "AUTO_PROMOTION",
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "all_legal_moves",
    "apply_move",
    "has_any_legal_move",
    "is_in_check",
    "is_move_legal",
    "is_square_attacked",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
