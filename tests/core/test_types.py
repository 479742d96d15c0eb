"""Tests for square helpers."""

import pytest

from grandchess.core.types import (
    InvalidSquareError,
    Square,
    in_bounds,
    make_square,
    parse_square,
    rank_of,
    square_name,
    to_square,
)


class TestBounds:
    def test_corners_in_bounds(self) -> None:
        assert in_bounds(0, 0)
        assert in_bounds(14, 19)

    def test_outside_rejected(self) -> None:
        assert not in_bounds(15, 0)
        assert not in_bounds(0, 20)
        assert not in_bounds(-1, 5)

    def test_make_square_off_board_raises(self) -> None:
        with pytest.raises(InvalidSquareError, match="off the board"):
            make_square(15, 3)

    def test_invalid_square_is_value_error(self) -> None:
        assert issubclass(InvalidSquareError, ValueError)

    def test_to_square_accepts_plain_tuple(self) -> None:
        sq = to_square((11, 0))
        assert isinstance(sq, Square)
        assert sq == (11, 0)

    def test_to_square_rejects_non_pair(self) -> None:
        with pytest.raises(InvalidSquareError):
            to_square((1, 2, 3))  # type: ignore[arg-type]


class TestNames:
    def test_white_king_square(self) -> None:
        assert square_name((14, 10)) == "k1"

    def test_black_corner(self) -> None:
        assert square_name((0, 0)) == "a15"
        assert square_name((0, 19)) == "t15"

    def test_rank_of(self) -> None:
        assert rank_of((14, 3)) == 1
        assert rank_of((0, 3)) == 15

    def test_parse(self) -> None:
        assert parse_square("a4") == Square(11, 0)
        assert parse_square("t15") == Square(0, 19)
        assert parse_square("K1") == Square(14, 10)

    @pytest.mark.parametrize("name", ["u1", "a0", "a16", "a", "4a", ""])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(InvalidSquareError, match="Invalid square name"):
            parse_square(name)

    def test_str_of_square(self) -> None:
        assert str(Square(11, 0)) == "a4"
