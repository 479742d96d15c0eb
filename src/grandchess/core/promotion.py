"""Pawn promotion on the far edge."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grandchess.core.enums import Color, PieceType
from grandchess.core.types import ROWS

if TYPE_CHECKING:
    from grandchess.core.board import Board

_LOGGER = logging.getLogger(__name__)

# Pawns always promote to a queen; there is no under-promotion.
PROMOTION_TYPE = PieceType.QUEEN


def promotion_row(color: Color) -> int:
    """Row on which *color*'s pawns promote."""
    return 0 if color == Color.WHITE else ROWS - 1


def maybe_promote(board: Board, sq: tuple[int, int]) -> bool:
    """Turn a pawn standing on its promotion row into a queen.

    Returns ``True`` when a promotion happened. Applying it again is a no-op
    because the piece is no longer a pawn.
    """
    piece = board[sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    if sq[0] != promotion_row(piece.color):
        return False
    board[sq] = piece.promoted(PROMOTION_TYPE)
    _LOGGER.debug("Promoted %s pawn on %s", piece.color, tuple(sq))
    return True
