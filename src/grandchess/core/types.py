"""Square type and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0  = rank 15, black's edge
    row 14 = rank 1,  white's edge
    col 0  = file a ... col 19 = file t
"""

from __future__ import annotations

from typing import NamedTuple

ROWS = 15
COLS = 20

FILES = "abcdefghijklmnopqrst"

WHITE_PAWN_ROW = ROWS - 4
BLACK_PAWN_ROW = 3


class InvalidSquareError(ValueError):
    """Raised when a coordinate lies outside the 15x20 board."""


class Square(NamedTuple):
    """Board coordinate; compares equal to a plain ``(row, col)`` tuple."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies on the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


def make_square(row: int, col: int) -> Square:
    """Create a square, rejecting coordinates that are off the board."""
    if not in_bounds(row, col):
        raise InvalidSquareError(f"Square off the board: ({row}, {col})")
    return Square(row, col)


def to_square(sq: tuple[int, int]) -> Square:
    """Normalise any ``(row, col)`` pair into a validated :class:`Square`."""
    try:
        row, col = sq
    except (TypeError, ValueError):
        raise InvalidSquareError(f"Not a (row, col) pair: {sq!r}") from None
    return make_square(row, col)


def rank_of(sq: tuple[int, int]) -> int:
    """Rank number 1-15, counted from white's edge."""
    return ROWS - sq[0]


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. ``(14, 10)`` -> ``'k1'``."""
    row, col = to_square(sq)
    return FILES[col] + str(ROWS - row)


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'a4'`` -> ``Square(11, 0)``."""
    text = name.strip().lower()
    if len(text) < 2 or text[0] not in FILES or not text[1:].isdigit():
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    rank = int(text[1:])
    if not 1 <= rank <= ROWS:
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return Square(ROWS - rank, FILES.index(text[0]))
