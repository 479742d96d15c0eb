"""Placement strings: a FEN-style text form of a 15x20 board.

Rows are listed from row 0 (black's edge) to row 14, separated by ``/``.
Pieces use ``PNBRQK`` for white and ``pnbrqk`` for black; a run of empty
cells is written as its decimal length, which may take two digits.
"""

from __future__ import annotations

import re

from grandchess.core.board import Board
from grandchess.core.piece import Piece
from grandchess.core.types import COLS, ROWS

_TOKEN = re.compile(r"\d+|.")

STARTING_PLACEMENT = "/".join(
    [
        "rbqbrnbrqnkbqrbnrbqr",
        "2r1b1q1r1br1q1r1b1q",
        "5r3qr3b3q1",
        "p" * COLS,
        *([str(COLS)] * (ROWS - 8)),
        "P" * COLS,
        "5R3QR3B3Q1",
        "2R1B1Q1R1BR1Q1R1B1Q",
        "RBQBRNBRQNKBQRBNRBQR",
    ]
)


def board_from_placement(placement: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    rows = placement.strip().split("/")
    if len(rows) != ROWS:
        raise ValueError(
            f"Invalid placement (must contain {ROWS} rows): {placement!r}"
        )

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for token in _TOKEN.findall(row_text):
            if token.isdigit():
                step = int(token)
                if not (1 <= step <= COLS):
                    raise ValueError(
                        f"Invalid placement run {token!r}: {placement!r}"
                    )
                col += step
            else:
                if col >= COLS:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
                board[row, col] = Piece.from_char(token)
                col += 1
            if col > COLS:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        if col != COLS:
            raise ValueError(f"Invalid placement row width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise a :class:`Board` to a placement string."""
    rows: list[str] = []
    for row in range(ROWS):
        empty = 0
        text = ""
        for col in range(COLS):
            piece = board[row, col]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
