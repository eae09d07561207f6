"""Game layer: immutable game state, move applier and controller.

Quick start::

    from chessrules.game import GameController
    from chessrules.core.types import E2, E4

    ctrl = GameController()
    ctrl.select(E2)          # [E3, E4]
    ctrl.submit_move(E2, E4)
"""

from chessrules.game.controller import GameController, GameEvents, Tally
from chessrules.game.state import GameState, apply_move, create_initial_state

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "Tally",
    "apply_move",
    "create_initial_state",
]
