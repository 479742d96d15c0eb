"""Legal and pseudo-legal move generation + check detection."""

from __future__ import annotations

import logging

from grandchess.core.board import Board
from grandchess.core.enums import Color, PieceType
from grandchess.core.move import Move
from grandchess.core.promotion import maybe_promote
from grandchess.core.types import (
    BLACK_PAWN_ROW,
    COLS,
    ROWS,
    WHITE_PAWN_ROW,
    Square,
    in_bounds,
    to_square,
)

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# (row step, start row) per color; white marches toward row 0.
_PAWN_FORWARD: tuple[tuple[int, int], tuple[int, int]] = (
    (-1, WHITE_PAWN_ROW),
    (1, BLACK_PAWN_ROW),
)

# [row][col] -> per-square precomputed data
_Table = tuple[tuple[tuple[Square, ...], ...], ...]
_RayTable = tuple[tuple[tuple[tuple[Square, ...], ...], ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> _Table:
    table: list[tuple[tuple[Square, ...], ...]] = []
    for row in range(ROWS):
        row_targets: list[tuple[Square, ...]] = []
        for col in range(COLS):
            targets: list[Square] = []
            for dr, dc in offsets:
                ar = row + dr
                ac = col + dc
                if in_bounds(ar, ac):
                    targets.append(Square(ar, ac))
            row_targets.append(tuple(targets))
        table.append(tuple(row_targets))
    return tuple(table)


def _build_rays(directions: tuple[tuple[int, int], ...]) -> _RayTable:
    table: list[tuple[tuple[tuple[Square, ...], ...], ...]] = []
    for row in range(ROWS):
        row_rays: list[tuple[tuple[Square, ...], ...]] = []
        for col in range(COLS):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in directions:
                ar = row + dr
                ac = col + dc
                ray: list[Square] = []
                while in_bounds(ar, ac):
                    ray.append(Square(ar, ac))
                    ar += dr
                    ac += dc
                square_rays.append(tuple(ray))
            row_rays.append(tuple(square_rays))
        table.append(tuple(row_rays))
    return tuple(table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    The generator never mutates the board it wraps. Legality is decided on
    throwaway copies: each candidate is played on a fresh copy and rejected
    if it leaves the mover's king attacked.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_targets(self, sq: tuple[int, int]) -> list[Square]:
        """Destinations of the piece on *sq* that keep its own king safe.

        Returns an empty list for an empty square. Raises
        :class:`~grandchess.core.types.InvalidSquareError` when *sq* is off
        the board.
        """
        from_sq = to_square(sq)
        piece = self._board[from_sq]
        if piece is None:
            return []

        legal: list[Square] = []
        for to_sq in self.pseudo_legal_targets(from_sq):
            speculative = self._board.copy()
            speculative.move_piece(from_sq, to_sq)
            maybe_promote(speculative, to_sq)
            if not MoveGenerator(speculative).is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, grouped by origin in row-major order."""
        moves: list[Move] = []
        for from_sq in self._board.all_pieces(color):
            for to_sq in self.legal_targets(from_sq):
                moves.append(Move(from_sq, to_sq))
        return moves

    def pseudo_legal_targets(self, sq: tuple[int, int]) -> list[Square]:
        """Destinations of the piece on *sq*, ignoring its own king's safety."""
        from_sq = to_square(sq)
        piece = self._board[from_sq]
        if piece is None:
            return []

        targets: list[Square] = []
        row, col = from_sq
        color = piece.color
        match piece.piece_type:
            case PieceType.PAWN:
                self._gen_pawn(from_sq, color, targets)
            case PieceType.KNIGHT:
                self._gen_step(color, _KNIGHT_TARGETS[row][col], targets)
            case PieceType.BISHOP:
                self._gen_sliding(color, _BISHOP_RAYS[row][col], targets)
            case PieceType.ROOK:
                self._gen_sliding(color, _ROOK_RAYS[row][col], targets)
            case PieceType.QUEEN:
                self._gen_sliding(color, _QUEEN_RAYS[row][col], targets)
            case PieceType.KING:
                self._gen_step(color, _KING_TARGETS[row][col], targets)
        return targets

    # -- Check detection (public) ------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without a king of *color* is reported as not in check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            _LOGGER.debug("No %s king on board, reporting no check", color)
            return False
        return any(
            king_sq in self.pseudo_legal_targets(sq)
            for sq in self._board.all_pieces(color.opposite)
        )

    def checkers(self, color: Color) -> list[Square]:
        """Squares of the opposing pieces that attack *color*'s king."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return []
        return [
            sq
            for sq in self._board.all_pieces(color.opposite)
            if king_sq in self.pseudo_legal_targets(sq)
        ]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, targets: list[Square]) -> None:
        board = self._board
        step, start_row = _PAWN_FORWARD[int(color)]
        row, col = sq
        ahead = row + step

        if in_bounds(ahead, col) and board.is_empty((ahead, col)):
            targets.append(Square(ahead, col))
            two_ahead = row + 2 * step
            if (
                row == start_row
                and in_bounds(two_ahead, col)
                and board.is_empty((two_ahead, col))
            ):
                targets.append(Square(two_ahead, col))

        for dc in (-1, 1):
            cap_col = col + dc
            if not in_bounds(ahead, cap_col):
                continue
            target = board[ahead, cap_col]
            if target is not None and target.color != color:
                targets.append(Square(ahead, cap_col))

    def _gen_step(
        self,
        color: Color,
        candidates: tuple[Square, ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for to_sq in candidates:
            target = board[to_sq]
            if target is None or target.color != color:
                targets.append(to_sq)

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != color:
                    targets.append(to_sq)
                break
