"""Raw and legal move generation + attack detection."""

from __future__ import annotations

from typing import NamedTuple

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row delta of a pawn step and the row pawns start on.
_PAWN_DIRECTION: tuple[int, int] = (-1, 1)
_PAWN_START_ROW: tuple[int, int] = (6, 1)
_HOME_ROW: tuple[int, int] = (7, 0)
_KING_HOME_COL = 4


class _CastlingLane(NamedTuple):
    rook_col: int
    between: tuple[int, ...]  # must be empty
    king_path: tuple[int, ...]  # must not be attacked
    king_to_col: int
    rook_to_col: int


KINGSIDE = _CastlingLane(7, (5, 6), (5, 6), 6, 5)
QUEENSIDE = _CastlingLane(0, (1, 2, 3), (2, 3), 2, 3)
_CASTLING_LANES: tuple[_CastlingLane, ...] = (KINGSIDE, QUEENSIDE)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for idx in range(64):
        origin = Square(idx // 8, idx % 8)
        moves = [origin.offset(dr, dc) for dr, dc in offsets]
        targets.append(tuple(sq for sq in moves if sq.is_valid))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for idx in range(64):
        origin = Square(idx // 8, idx % 8)
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            sq = origin.offset(dr, dc)
            while sq.is_valid:
                ray.append(sq)
                sq = sq.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


# -- Move classification -----------------------------------------------------


def is_castling_move(piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """A king moving two columns is a castling move."""
    return piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2


def is_en_passant_capture(
    piece: Piece, to_sq: Square, en_passant: Square | None
) -> bool:
    """A pawn landing on the en-passant target captures en passant."""
    return (
        piece.piece_type == PieceType.PAWN
        and en_passant is not None
        and to_sq == en_passant
    )


def en_passant_victim(from_sq: Square, to_sq: Square) -> Square:
    """Square of the pawn removed by an en-passant capture."""
    return Square(from_sq.row, to_sq.col)


def promotion_row(color: Color) -> int:
    """Farthest row for *color*'s pawns."""
    return _HOME_ROW[int(color.opposite)]


class MoveGenerator:
    """Generates raw and legal moves for pieces on a :class:`Board`.

    The board is never mutated; legality tests run on throwaway copies.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: Square | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def raw_moves(self, sq: Square, attack_only: bool = False) -> list[Square]:
        """Geometric destinations of the piece on *sq*, ignoring self-check.

        With *attack_only* pawns report both forward diagonals whatever
        occupies them; other pieces are unaffected by the flag.
        """
        if not sq.is_valid:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(sq, piece.color, attack_only)
        if pt == PieceType.KNIGHT:
            return self._gen_step(sq, piece.color, _KNIGHT_TARGETS[sq.ordinal])
        if pt == PieceType.KING:
            return self._gen_step(sq, piece.color, _KING_TARGETS[sq.ordinal])
        return self._gen_sliding(sq, piece.color, _SLIDER_RAYS[pt][sq.ordinal])

    def legal_moves(self, sq: Square) -> list[Square]:
        """Destinations that do not leave the mover's king in check."""
        if not sq.is_valid:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        legal: list[Square] = []
        for to_sq in self.raw_moves(sq):
            test_board = self._simulate(sq, to_sq, piece)
            if not MoveGenerator(test_board).is_in_check(piece.color):
                legal.append(to_sq)

        if piece.piece_type == PieceType.KING:
            legal.extend(self._gen_castling(sq, piece))
        return legal

    def has_any_legal_move(self, color: Color) -> bool:
        """Does *color* have at least one legal move?"""
        return any(self.legal_moves(sq) for sq, _ in self._board.occupied(color))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* in the attack set of any piece of *by_color*?"""
        for from_sq, _ in self._board.occupied(by_color):
            if sq in self.raw_moves(from_sq, attack_only=True):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, attack_only: bool) -> list[Square]:
        board = self._board
        direction = _PAWN_DIRECTION[int(color)]
        moves: list[Square] = []

        if attack_only:
            for dc in (-1, 1):
                target = sq.offset(direction, dc)
                if target.is_valid:
                    moves.append(target)
            return moves

        one_step = sq.offset(direction, 0)
        if one_step.is_valid and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == _PAWN_START_ROW[int(color)]:
                two_step = sq.offset(2 * direction, 0)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for dc in (-1, 1):
            target = sq.offset(direction, dc)
            if not target.is_valid:
                continue
            occupant = board[target]
            if occupant is not None:
                if occupant.color != color:
                    moves.append(target)
            elif target == self._en_passant:
                moves.append(target)
        return moves

    def _gen_step(
        self, sq: Square, color: Color, targets: tuple[Square, ...]
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
        return moves

    def _gen_castling(self, king_sq: Square, king: Piece) -> list[Square]:
        row = _HOME_ROW[int(king.color)]
        if king.has_moved or king_sq != Square(row, _KING_HOME_COL):
            return []
        if self.is_in_check(king.color):
            return []

        board = self._board
        opponent = king.color.opposite
        moves: list[Square] = []
        for lane in _CASTLING_LANES:
            rook = board[Square(row, lane.rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue
            if not all(board.is_empty(Square(row, col)) for col in lane.between):
                continue
            if any(
                self.is_square_attacked(Square(row, col), opponent)
                for col in lane.king_path
            ):
                continue
            moves.append(Square(row, lane.king_to_col))
        return moves

    def _simulate(self, from_sq: Square, to_sq: Square, piece: Piece) -> Board:
        test_board = self._board.copy()
        test_board[to_sq] = piece
        test_board[from_sq] = None
        if is_en_passant_capture(piece, to_sq, self._en_passant):
            test_board[en_passant_victim(from_sq, to_sq)] = None
        return test_board


# -- Functional entry points -------------------------------------------------


def raw_moves(
    board: Board,
    sq: Square,
    en_passant: Square | None = None,
    attack_only: bool = False,
) -> list[Square]:
    """Geometrically possible destinations for the piece on *sq*."""
    return MoveGenerator(board, en_passant).raw_moves(sq, attack_only)


def legal_moves(
    board: Board, sq: Square, en_passant: Square | None = None
) -> list[Square]:
    """Legal destinations (castling included) for the piece on *sq*."""
    return MoveGenerator(board, en_passant).legal_moves(sq)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    return MoveGenerator(board).is_square_attacked(sq, by_color)


def is_in_check(board: Board, color: Color) -> bool:
    return MoveGenerator(board).is_in_check(color)


def has_any_legal_move(
    board: Board, color: Color, en_passant: Square | None = None
) -> bool:
    return MoveGenerator(board, en_passant).has_any_legal_move(color)
