"""Game management layer: controller, settings, events.

Quick start::

    from gambit.core import parse_square
    from gambit.game import GameController

    ctrl = GameController()
    move = ctrl.legal_moves(parse_square("e2"))[0]
    state = ctrl.apply_move(move)
    print(state.status_text)
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import IGameController
from gambit.game.settings import GameSettings

__all__ = [
    # Interfaces
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
]
