"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.attacks import is_in_check
from gambit.core.board import Board
from gambit.core.enums import Color, GamePhase
from gambit.core.legality import has_any_legal_move

_TERMINAL_PHASES = frozenset({GamePhase.CHECKMATE, GamePhase.STALEMATE})


@dataclass(frozen=True, slots=True)
class GameState:
    """Classification of a position after a move (or at game start)."""

    phase: GamePhase
    side_to_move: Color
    in_check: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.phase in _TERMINAL_PHASES

    @property
    def winner(self) -> Color | None:
        """The side that delivered mate, or None."""
        if self.phase == GamePhase.CHECKMATE:
            return self.side_to_move.opposite
        return None

    @property
    def status_text(self) -> str:
        """One-line status for display, e.g. ``"Black to move (Check)"``."""
        side = self.side_to_move.name.capitalize()
        if self.phase == GamePhase.CHECKMATE:
            other = self.side_to_move.opposite.name.capitalize()
            return f"{side} is in checkmate. {other} wins!"
        if self.phase == GamePhase.STALEMATE:
            return "Stalemate. Draw."
        return f"{side} to move" + (" (Check)" if self.in_check else "")


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return is_in_check(board, board.side_to_move)

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        if not Rules.is_in_check(board):
            return False
        return not has_any_legal_move(board, board.side_to_move)

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        if Rules.is_in_check(board):
            return False
        return not has_any_legal_move(board, board.side_to_move)

    @staticmethod
    def evaluate(board: Board) -> GameState:
        """Classify the position for the side now to move."""
        side = board.side_to_move
        in_check = is_in_check(board, side)
        if has_any_legal_move(board, side):
            return GameState(GamePhase.ONGOING, side, in_check)
        if in_check:
            return GameState(GamePhase.CHECKMATE, side, True)
        return GameState(GamePhase.STALEMATE, side, False)

    @staticmethod
    def initial_state(board: Board) -> GameState:
        """State reported before any move has been played."""
        side = board.side_to_move
        return GameState(GamePhase.INITIAL, side, is_in_check(board, side))
