"""Game state value and the move applier.

A :class:`GameState` is never mutated after construction: every transition
returns a new state, so callers can keep earlier states around (history
display, undo) without copying them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

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
    KINGSIDE,
    QUEENSIDE,
    MoveGenerator,
    en_passant_victim,
    is_castling_move,
    is_en_passant_capture,
    promotion_row,
)
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """Everything a caller needs to render and continue a game.

    ``captured`` and ``scores`` are indexed by ``int(Color)`` and credit the
    side that made the capture.  The board is left out of the hash.
    """

    board: Board = field(default_factory=Board.initial, hash=False)
    turn: Color = Color.WHITE
    moves: tuple[MoveRecord, ...] = ()
    captured: tuple[tuple[Piece, ...], tuple[Piece, ...]] = ((), ())
    scores: tuple[int, int] = (0, 0)
    en_passant: Square | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    winner: Color | None = None
    resigned: Color | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls()

    @classmethod
    def from_board(
        cls,
        board: Board,
        turn: Color = Color.WHITE,
        en_passant: Square | None = None,
    ) -> GameState:
        """State for an arbitrary set-up position with status computed."""
        return cls(board=board, turn=turn, en_passant=en_passant).with_status()

    def with_status(self) -> GameState:
        """Copy with check / checkmate / stalemate recomputed for ``turn``."""
        gen = MoveGenerator(self.board, self.en_passant)
        in_check = gen.is_in_check(self.turn)
        can_move = gen.has_any_legal_move(self.turn)
        checkmate = in_check and not can_move
        return replace(
            self,
            is_check=in_check,
            is_checkmate=checkmate,
            is_stalemate=not in_check and not can_move,
            winner=self.turn.opposite if checkmate else None,
        )

    # ── Transitions ──────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations for the piece on *sq* in this position."""
        return MoveGenerator(self.board, self.en_passant).legal_moves(sq)

    def play(self, from_sq: Square, to_sq: Square) -> GameState:
        """Validated move: raises :class:`IllegalMoveError` if not allowed."""
        if self.is_game_over:
            raise IllegalMoveError(from_sq, to_sq, "the game is over")
        piece = self.board[from_sq] if from_sq.is_valid else None
        if piece is None:
            raise IllegalMoveError(from_sq, to_sq, "no piece on the source square")
        if piece.color != self.turn:
            raise IllegalMoveError(from_sq, to_sq, f"it is {self.turn}'s turn")
        if to_sq not in self.legal_moves(from_sq):
            raise IllegalMoveError(from_sq, to_sq, "destination is not legal")
        return apply_move(self, from_sq, to_sq)

    def resign(self, color: Color) -> GameState:
        """Terminal state where *color* gave up."""
        if self.is_game_over:
            return self
        return replace(self, resigned=color, winner=color.opposite)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate or self.resigned is not None

    @property
    def result(self) -> GameResult:
        if self.winner == Color.WHITE:
            return GameResult.WHITE_WINS
        if self.winner == Color.BLACK:
            return GameResult.BLACK_WINS
        if self.is_stalemate:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.moves)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    @property
    def last_move(self) -> MoveRecord | None:
        return self.moves[-1] if self.moves else None

    def captured_by(self, color: Color) -> tuple[Piece, ...]:
        """Pieces *color* has taken from the opponent."""
        return self.captured[int(color)]

    def score(self, color: Color) -> int:
        """Material value *color* has captured."""
        return self.scores[int(color)]


def create_initial_state() -> GameState:
    """Standard chess starting position, white to move."""
    return GameState.initial()


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState:
    """Apply a move already known to be legal and return the next state.

    Legality is not re-checked: *to_sq* must come from
    ``legal_moves(state.board, from_sq, state.en_passant)``.  An empty source
    square returns *state* unchanged.
    """
    piece = state.board[from_sq] if from_sq.is_valid else None
    if piece is None:
        return state

    board = state.board.copy()

    captured = board[to_sq]
    en_passant_capture = is_en_passant_capture(piece, to_sq, state.en_passant)
    if en_passant_capture:
        victim_sq = en_passant_victim(from_sq, to_sq)
        captured = board[victim_sq]
        board[victim_sq] = None

    castling = is_castling_move(piece, from_sq, to_sq)
    if castling:
        lane = KINGSIDE if to_sq.col == KINGSIDE.king_to_col else QUEENSIDE
        rook_from = Square(from_sq.row, lane.rook_col)
        rook = board[rook_from]
        board[rook_from] = None
        if rook is not None:
            board[Square(from_sq.row, lane.rook_to_col)] = rook.moved()

    board[from_sq] = None
    placed = piece.moved()
    promotion = (
        piece.piece_type == PieceType.PAWN and to_sq.row == promotion_row(piece.color)
    )
    if promotion:
        placed = Piece(piece.color, PROMOTION_PIECE, has_moved=True)
    board[to_sq] = placed

    next_en_passant: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
        next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)

    captured_lists = list(state.captured)
    scores = list(state.scores)
    if captured is not None:
        idx = int(piece.color)
        captured_lists[idx] = (*captured_lists[idx], captured)
        scores[idx] += PIECE_VALUES[captured.piece_type]

    record = MoveRecord(
        from_sq=from_sq,
        to_sq=to_sq,
        piece=piece,
        captured=captured,
        is_promotion=promotion,
        is_castling=castling,
        is_en_passant=en_passant_capture,
    )

    next_state = GameState(
        board=board,
        turn=state.turn.opposite,
        moves=(*state.moves, record),
        captured=(captured_lists[0], captured_lists[1]),
        scores=(scores[0], scores[1]),
        en_passant=next_en_passant,
    ).with_status()

    if next_state.is_checkmate:
        _LOGGER.debug("Checkmate after %s, %s wins", record, next_state.winner)
    elif next_state.is_stalemate:
        _LOGGER.debug("Stalemate after %s", record)
    return next_state
