"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, E2, legal_moves

    board = Board.initial()
    for sq in legal_moves(board, E2):
        print(sq)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    PIECE_VALUES,
    PROMOTION_PIECE,
    Color,
    GameResult,
    PieceType,
)
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import MoveRecord
from chessrules.core.move_generator import (
    MoveGenerator,
    has_any_legal_move,
    is_in_check,
    is_square_attacked,
    legal_moves,
    raw_moves,
)
from chessrules.core.notation import MovePair, move_pairs, move_to_notation
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums / constants
    "Color",
    "GameResult",
    "PIECE_VALUES",
    "PROMOTION_PIECE",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "IllegalMoveError",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Rules",
    # Move generation
    "has_any_legal_move",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "raw_moves",
    # Notation
    "MovePair",
    "move_pairs",
    "move_to_notation",
]
