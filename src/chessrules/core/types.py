"""Square type and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0 = rank 8 (a8 ... h8)
    row 7 = rank 1 (a1 ... h1)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"


class Square(NamedTuple):
    """A (row, col) board coordinate."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < 8 and 0 <= self.col < 8

    @property
    def ordinal(self) -> int:
        """Flat 0-63 index, a8=0 ... h1=63."""
        return self.row * 8 + self.col

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(row: int, col: int) -> bool:
    """Check whether (row, col) lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(7, 0) → 'a1', Square(0, 7) → 'h8'."""
    return _FILES[sq.col] + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
