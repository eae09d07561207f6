"""Move-history notation for display.

Produces the short algebraic-style strings used by move lists: piece letter,
``x`` for captures, destination square, ``=Q`` for promotions and
``O-O`` / ``O-O-O`` for castling.  No disambiguation or check suffixes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.move import MoveRecord
from chessrules.core.types import square_name

_PIECE_LETTER: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


@dataclass(frozen=True, slots=True)
class MovePair:
    """One numbered row of a move list."""

    number: int
    white: str
    black: str | None = None


def move_to_notation(record: MoveRecord) -> str:
    """Display string for a single applied move."""
    if record.is_castling:
        return "O-O" if record.to_sq.col == 6 else "O-O-O"

    text = _PIECE_LETTER[record.piece.piece_type]
    if record.captured is not None:
        if record.piece.piece_type == PieceType.PAWN:
            text += square_name(record.from_sq)[0]
        text += "x"
    text += square_name(record.to_sq)
    if record.is_promotion:
        text += "=Q"
    return text


def move_pairs(records: Sequence[MoveRecord]) -> list[MovePair]:
    """Group a move log into numbered (white, black) pairs."""
    pairs: list[MovePair] = []
    for i in range(0, len(records), 2):
        black = records[i + 1] if i + 1 < len(records) else None
        pairs.append(
            MovePair(
                number=i // 2 + 1,
                white=move_to_notation(records[i]),
                black=move_to_notation(black) if black is not None else None,
            )
        )
    return pairs
