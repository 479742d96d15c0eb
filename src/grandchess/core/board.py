"""Board - piece placement on a 15x20 grid."""

from __future__ import annotations

from collections.abc import Iterator

from grandchess.core.enums import Color, PieceType
from grandchess.core.layout import place_army
from grandchess.core.piece import Piece
from grandchess.core.types import (
    COLS,
    FILES,
    ROWS,
    InvalidSquareError,
    Square,
)


class Board:
    """Mutable 15x20 grid of optional pieces.

    A board is treated as a value: code that explores hypothetical positions
    works on :meth:`copy`, never on a shared reference.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * COLS for _ in range(ROWS)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        row, col = sq
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise InvalidSquareError(f"Square off the board: ({row}, {col})")
        return self._grid[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        row, col = sq
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise InvalidSquareError(f"Square off the board: ({row}, {col})")
        self._grid[row][col] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, row-major."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        # Pieces are frozen, so copying the rows is a full deep copy.
        b = Board()
        b._grid = [cells.copy() for cells in self._grid]
        return b

    def move_piece(
        self, from_sq: tuple[int, int], to_sq: tuple[int, int]
    ) -> Piece | None:
        """Relocate the piece on *from_sq* to *to_sq*; return what was captured."""
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {tuple(from_sq)}")
        captured = self[to_sq]
        self[to_sq] = piece
        self[from_sq] = None
        return captured

    def clear(self) -> None:
        self._grid = [[None] * COLS for _ in range(ROWS)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position with both armies in place."""
        b = cls()
        place_army(b, Color.WHITE)
        place_army(b, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def diagram(self, *, symbols: bool = False) -> str:
        """Text diagram, black's edge on top, ranks and files labelled."""
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            marks = []
            for p in cells:
                if p is None:
                    marks.append(".")
                else:
                    marks.append(p.symbol if symbols else str(p))
            rows.append(f"{ROWS - row:>2} {' '.join(marks)}")
        rows.append("   " + " ".join(FILES))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return self.diagram()
