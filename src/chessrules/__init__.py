"""chessrules: a two-player chess rules engine.

The engine is a pure state transformer::

    from chessrules import apply_move, create_initial_state, legal_moves
    from chessrules.core.types import E2, E4

    state = create_initial_state()
    assert E4 in legal_moves(state.board, E2, state.en_passant)
    state = apply_move(state, E2, E4)
"""

from chessrules.core import (
    Board,
    Color,
    GameResult,
    IllegalMoveError,
    MoveRecord,
    Piece,
    PieceType,
    Square,
    has_any_legal_move,
    is_in_check,
    is_square_attacked,
    legal_moves,
    raw_moves,
)
from chessrules.game import GameController, GameState, apply_move, create_initial_state

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "GameController",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "create_initial_state",
    "has_any_legal_move",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "raw_moves",
]
