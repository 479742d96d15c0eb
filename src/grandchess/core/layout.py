"""Initial army placement.

Each side fills four ranks counted inward from its own edge: a full back
rank, a sparse second and third rank, and a full pawn rank. Black's army is
the row-mirror of white's.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grandchess.core.enums import Color, PieceType
from grandchess.core.piece import Piece
from grandchess.core.types import COLS, ROWS

if TYPE_CHECKING:
    from grandchess.core.board import Board

_R = PieceType.ROOK
_N = PieceType.KNIGHT
_B = PieceType.BISHOP
_Q = PieceType.QUEEN
_K = PieceType.KING

# fmt: off
FIRST_RANK: tuple[PieceType, ...] = (
    _R, _B, _Q, _B, _R, _N, _B, _R, _Q, _N,
    _K,
    _B, _Q, _R, _B, _N, _R, _B, _Q, _R,
)
# fmt: on

SECOND_RANK_COLS: tuple[int, ...] = (2, 4, 6, 8, 10, 11, 13, 15, 17, 19)
SECOND_RANK: tuple[PieceType, ...] = (_R, _B, _Q, _R, _B, _R, _Q, _R, _B, _Q)

THIRD_RANK_COLS: tuple[int, ...] = (5, 9, 10, 14, 18)
THIRD_RANK: tuple[PieceType, ...] = (_R, _Q, _R, _B, _Q)

KING_COL = FIRST_RANK.index(PieceType.KING)


def home_row(color: Color, rank: int) -> int:
    """Row of *color*'s *rank* (1 = edge-most, 4 = pawn rank)."""
    if color == Color.WHITE:
        return ROWS - rank
    return rank - 1


def place_army(board: Board, color: Color) -> None:
    """Write *color*'s full starting army onto *board*.

    Meant for a freshly cleared board; cells already holding pieces on the
    four home ranks are overwritten.
    """
    row = home_row(color, 1)
    for col, pt in enumerate(FIRST_RANK):
        board[row, col] = Piece(color, pt)

    row = home_row(color, 2)
    for col, pt in zip(SECOND_RANK_COLS, SECOND_RANK):
        board[row, col] = Piece(color, pt)

    row = home_row(color, 3)
    for col, pt in zip(THIRD_RANK_COLS, THIRD_RANK):
        board[row, col] = Piece(color, pt)

    row = home_row(color, 4)
    for col in range(COLS):
        board[row, col] = Piece(color, PieceType.PAWN)
