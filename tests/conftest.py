"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from grandchess.core.board import Board
from grandchess.core.piece import Piece


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def board_with() -> Callable[[dict[tuple[int, int], str]], Board]:
    """Factory building a board from ``{(row, col): "K", ...}``."""

    def _build(pieces: dict[tuple[int, int], str]) -> Board:
        board = Board()
        for sq, char in pieces.items():
            board[sq] = Piece.from_char(char)
        return board

    return _build
