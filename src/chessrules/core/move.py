"""Move record value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable log entry for one applied move.

    ``piece`` is the mover as it stood before the move (a pawn for
    promotions).  Records are kept for history display and never replayed.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_promotion: bool = False
    is_castling: bool = False
    is_en_passant: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.is_promotion:
            base += "q"
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
