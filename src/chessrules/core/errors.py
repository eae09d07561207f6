"""Exceptions raised by the rules engine."""

from __future__ import annotations

from chessrules.core.types import Square, square_name


def _describe(sq: Square) -> str:
    return square_name(sq) if sq.is_valid else str(tuple(sq))


class IllegalMoveError(ValueError):
    """A move was rejected by the validating entry points."""

    def __init__(self, from_sq: Square, to_sq: Square, reason: str) -> None:
        self.from_sq = from_sq
        self.to_sq = to_sq
        self.reason = reason
        super().__init__(
            f"Illegal move {_describe(from_sq)}-{_describe(to_sq)}: {reason}"
        )
