"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

_BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square board holding ``Piece | None`` per square.

    Pieces are immutable, so :meth:`copy` only duplicates the square list.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {tuple(sq)}")
        return self._squares[sq.ordinal]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {tuple(sq)}")
        self._squares[sq.ordinal] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order (a8 first)."""
        squares = self._squares
        for sq in ALL_SQUARES:
            piece = squares[sq.ordinal]
            if piece is not None:
                yield sq, piece

    def occupied(self, color: Color) -> list[tuple[Square, Piece]]:
        """All (square, piece) pairs belonging to *color*."""
        return [(sq, piece) for sq, piece in self if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self:
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(
            1
            for _, piece in self
            if piece.color == color and piece.piece_type == piece_type
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, white on rows 6-7."""
        b = cls()
        for col, pt in enumerate(_BACK_ROW):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_placement(cls, placement: Mapping[Square, Piece | str]) -> Board:
        """Board holding exactly *placement*; letters are accepted for pieces."""
        b = cls()
        for sq, piece in placement.items():
            b[sq] = Piece.from_char(piece) if isinstance(piece, str) else piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[Square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
