"""Tests for queen promotion."""

from grandchess.core.board import Board
from grandchess.core.enums import Color, PieceType
from grandchess.core.piece import Piece
from grandchess.core.promotion import maybe_promote, promotion_row
from grandchess.core.rules import apply_move


class TestPromotionRow:
    def test_rows(self) -> None:
        assert promotion_row(Color.WHITE) == 0
        assert promotion_row(Color.BLACK) == 14


class TestMaybePromote:
    def test_white_pawn_on_row_zero(self, board_with) -> None:
        board = board_with({(0, 5): "P"})
        assert maybe_promote(board, (0, 5))
        assert board[0, 5] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_pawn_on_last_row(self, board_with) -> None:
        board = board_with({(14, 5): "p"})
        assert maybe_promote(board, (14, 5))
        assert board[14, 5] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_pawn_on_own_edge_is_untouched(self, board_with) -> None:
        board = board_with({(0, 5): "p", (14, 6): "P"})
        assert not maybe_promote(board, (0, 5))
        assert not maybe_promote(board, (14, 6))
        assert board[0, 5] == Piece(Color.BLACK, PieceType.PAWN)

    def test_other_pieces_ignored(self, board_with) -> None:
        board = board_with({(0, 5): "N"})
        assert not maybe_promote(board, (0, 5))
        assert board[0, 5] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_empty_square(self, empty_board: Board) -> None:
        assert not maybe_promote(empty_board, (0, 5))

    def test_idempotent(self, board_with) -> None:
        board = board_with({(0, 5): "P"})
        assert maybe_promote(board, (0, 5))
        assert not maybe_promote(board, (0, 5))
        assert board[0, 5] == Piece(Color.WHITE, PieceType.QUEEN)


class TestPromotionOnMove:
    def test_push_promotes(self, board_with) -> None:
        board = board_with({(1, 5): "P"})
        assert apply_move(board, (1, 5), (0, 5))
        assert board[0, 5] == Piece(Color.WHITE, PieceType.QUEEN)
        assert board[1, 5] is None

    def test_capture_promotes(self, board_with) -> None:
        board = board_with({(13, 5): "p", (14, 6): "R"})
        assert apply_move(board, (13, 5), (14, 6))
        assert board[14, 6] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_ordinary_push_keeps_pawn(self, board_with) -> None:
        board = board_with({(10, 5): "P"})
        assert not apply_move(board, (10, 5), (9, 5))
        assert board[9, 5] == Piece(Color.WHITE, PieceType.PAWN)

    def test_copy_not_affected(self, board_with) -> None:
        board = board_with({(1, 5): "P"})
        copy = board.copy()
        apply_move(copy, (1, 5), (0, 5))
        assert board[1, 5] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[0, 5] is None
