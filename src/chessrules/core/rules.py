"""High-level chess rules: check, checkmate, stalemate, material."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import PIECE_VALUES, Color, GameResult
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square


class Rules:
    """Static rule-checker operating on a board and the side to move."""

    # Product policy:
    # - Terminal states: checkmate and stalemate only.
    # - No repetition, fifty-move or insufficient-material draws.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_move(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        return MoveGenerator(board, en_passant).has_any_legal_move(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color, en_passant)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color, en_passant)

    @staticmethod
    def game_result(
        board: Board, to_move: Color, en_passant: Square | None = None
    ) -> GameResult:
        """Result of the position with *to_move* on turn."""
        gen = MoveGenerator(board, en_passant)
        if gen.has_any_legal_move(to_move):
            return GameResult.IN_PROGRESS
        if gen.is_in_check(to_move):
            return (
                GameResult.BLACK_WINS
                if to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate

    @staticmethod
    def material(board: Board, color: Color) -> int:
        """Sum of piece values *color* still has on the board."""
        return sum(PIECE_VALUES[piece.piece_type] for _, piece in board.occupied(color))
