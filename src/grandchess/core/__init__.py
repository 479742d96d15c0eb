"""Core domain layer: pure rules logic with zero external dependencies.

Quick start::

    from grandchess.core import Color, create_initial_board, in_check, legal_moves

    board = create_initial_board()
    print(legal_moves(board, 11, 0))  # [Square(row=10, col=0), Square(row=9, col=0)]
    print(in_check(board, Color.WHITE))  # False
"""

from grandchess.core.board import Board
from grandchess.core.enums import Color, PieceType
from grandchess.core.layout import place_army
from grandchess.core.move import Move
from grandchess.core.move_generator import MoveGenerator
from grandchess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from grandchess.core.piece import Piece
from grandchess.core.promotion import maybe_promote
from grandchess.core.rules import (
    IllegalMoveError,
    Rules,
    apply_move,
    create_initial_board,
    in_check,
    legal_moves,
)
from grandchess.core.types import (
    COLS,
    ROWS,
    InvalidSquareError,
    Square,
    in_bounds,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "COLS",
    "ROWS",
    "Square",
    "in_bounds",
    "make_square",
    "parse_square",
    "square_name",
    # Errors
    "IllegalMoveError",
    "InvalidSquareError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "create_initial_board",
    "in_check",
    "legal_moves",
    "maybe_promote",
    "place_army",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
