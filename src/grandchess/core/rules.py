"""High-level rules: legal moves, check and move application."""

from __future__ import annotations

import logging

from grandchess.core.board import Board
from grandchess.core.enums import Color
from grandchess.core.move_generator import MoveGenerator
from grandchess.core.promotion import maybe_promote
from grandchess.core.types import Square, square_name, to_square

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised by a validating :meth:`Rules.apply_move` for an illegal target."""


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def initial_board() -> Board:
        return Board.initial()

    @staticmethod
    def legal_moves(board: Board, sq: tuple[int, int]) -> list[Square]:
        return MoveGenerator(board).legal_targets(sq)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def apply_move(
        board: Board,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        *,
        validate: bool = False,
    ) -> bool:
        """Play *from_sq* -> *to_sq* on *board* in place.

        The move is trusted as given: callers are expected to pick it from
        :meth:`legal_moves`. Pass ``validate=True`` to have it checked first,
        raising :class:`IllegalMoveError` when it is not legal.

        Returns ``True`` when the move promoted a pawn.
        """
        origin = to_square(from_sq)
        target = to_square(to_sq)
        if board[origin] is None:
            raise ValueError(f"No piece on {square_name(origin)}")
        if validate and target not in Rules.legal_moves(board, origin):
            raise IllegalMoveError(
                f"Illegal move {square_name(origin)}{square_name(target)}"
            )

        captured = board.move_piece(origin, target)
        promoted = maybe_promote(board, target)
        _LOGGER.debug(
            "Applied %s%s (capture=%s, promotion=%s)",
            square_name(origin),
            square_name(target),
            captured,
            promoted,
        )
        return promoted


# -- Functional interface --------------------------------------------------


def create_initial_board() -> Board:
    """Fresh board with both armies in their starting squares."""
    return Rules.initial_board()


def legal_moves(board: Board, row: int, col: int) -> list[Square]:
    """Legal destinations of the piece on ``(row, col)``."""
    return Rules.legal_moves(board, (row, col))


def in_check(board: Board, color: Color) -> bool:
    return Rules.is_in_check(board, color)


def apply_move(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    *,
    validate: bool = False,
) -> bool:
    return Rules.apply_move(board, from_sq, to_sq, validate=validate)
