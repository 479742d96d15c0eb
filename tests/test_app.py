"""Tests for the grandchess command line tool."""

import pytest

from grandchess.app import build_parser, main
from grandchess.core.board import Board
from grandchess.core.notation import board_to_placement
from grandchess.core.piece import Piece


def _placement(pieces: dict[tuple[int, int], str]) -> str:
    board = Board()
    for sq, char in pieces.items():
        board[sq] = Piece.from_char(char)
    return board_to_placement(board)


class TestShow:
    def test_prints_starting_diagram(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["show"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0].startswith("15 r b q b r")
        assert "a b c d e f g h i j k l m n o p q r s t" in out

    def test_unicode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["show", "--unicode"]) == 0
        assert "♚" in capsys.readouterr().out


class TestMoves:
    def test_by_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves", "a4"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a5 (10,0)", "a6 (9,0)"]

    def test_by_coordinates(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves", "14,10"]) == 0
        assert capsys.readouterr().out.splitlines() == ["j2 (13,9)"]

    def test_empty_square_prints_nothing(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["moves", "7,7"]) == 0
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("square", ["z9", "20,0", "a,b"])
    def test_invalid_square(
        self, square: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["moves", square]) == 2
        assert "grandchess: error:" in capsys.readouterr().err


class TestCheck:
    def test_starting_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "white"]) == 0
        assert capsys.readouterr().out.strip() == "white is not in check"

    def test_with_placement(self, capsys: pytest.CaptureFixture[str]) -> None:
        placement = _placement({(14, 10): "K", (0, 10): "r", (0, 0): "k"})
        assert main(["check", "WHITE", "--placement", placement]) == 0
        assert capsys.readouterr().out.strip() == "white is in check"

    def test_invalid_color(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "green"]) == 2
        assert "Invalid color 'green'" in capsys.readouterr().err

    def test_invalid_placement(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "black", "--placement", "20/20"]) == 2
        assert "must contain 15 rows" in capsys.readouterr().err


class TestParser:
    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_log_level_default(self) -> None:
        args = build_parser().parse_args(["show"])
        assert args.log_level == "WARNING"
