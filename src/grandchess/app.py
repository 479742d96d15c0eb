"""Console entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from grandchess.core.board import Board
from grandchess.core.enums import Color
from grandchess.core.notation import board_from_placement
from grandchess.core.rules import Rules
from grandchess.core.types import Square, make_square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_square_arg(text: str) -> Square:
    """Accept either ``row,col`` or a square name such as ``a4``."""
    if "," in text:
        row_text, _, col_text = text.partition(",")
        try:
            return make_square(int(row_text), int(col_text))
        except ValueError as exc:
            raise ValueError(f"Invalid square {text!r}: {exc}") from None
    return parse_square(text)


def _parse_color_arg(text: str) -> Color:
    try:
        return Color[text.upper()]
    except KeyError:
        raise ValueError(f"Invalid color {text!r} (expected white or black)") from None


def _load_board(placement: str | None) -> Board:
    if placement is None:
        return Rules.initial_board()
    return board_from_placement(placement)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grandchess", description="Inspect positions of 15x20 grand-board chess"
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    placement_help = "Placement string to load (default: starting position)"
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the board diagram")
    show.add_argument("--placement", help=placement_help)
    show.add_argument("--unicode", action="store_true", help="Use chess glyphs")

    moves = sub.add_parser("moves", help="List legal targets of one piece")
    moves.add_argument("square", help="Square as row,col or a name like a4")
    moves.add_argument("--placement", help=placement_help)

    check = sub.add_parser("check", help="Report whether a side is in check")
    check.add_argument("color", help="white or black")
    check.add_argument("--placement", help=placement_help)
    return parser


def _run(args: argparse.Namespace) -> None:
    board = _load_board(args.placement)

    if args.command == "show":
        print(board.diagram(symbols=args.unicode))
        return

    if args.command == "moves":
        sq = _parse_square_arg(args.square)
        targets = Rules.legal_moves(board, sq)
        _LOGGER.info("%d legal targets from %s", len(targets), square_name(sq))
        for target in targets:
            print(f"{square_name(target)} ({target.row},{target.col})")
        return

    color = _parse_color_arg(args.color)
    in_check = Rules.is_in_check(board, color)
    print(f"{color} is {'in check' if in_check else 'not in check'}")


def main(argv: list[str] | None = None) -> int:
    """Run the ``grandchess`` command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except ValueError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
