"""Abstract interface for the game layer.

A presentation layer depends on :class:`IGameController`, not on the concrete
controller, so it can be driven by a fake in its own tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.core.piece import Piece
    from gambit.core.rules import GameState
    from gambit.core.types import Square


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def legal_moves(self, square: Square) -> list[Move]:
        """Legal moves of the piece on *square* for the side to move."""

    @abstractmethod
    def apply_move(self, move: Move) -> GameState:
        """Play a move previously returned by :meth:`legal_moves`."""

    @abstractmethod
    def piece_at(self, square: Square) -> Piece | None:
        """Piece on *square*, if any."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the starting position."""
