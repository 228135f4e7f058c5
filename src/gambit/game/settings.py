"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.fen import STARTING_FEN


@dataclass
class GameSettings:
    """All user-configurable game options."""

    # Position installed on construction and by reset()
    start_fen: str = STARTING_FEN

    # Presentation hint: expose destinations of the selected piece
    highlight_legal_moves: bool = True
