"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .game import game
from .options import Interface, Options

_PRESETS = {
    1: (8, 8, 10),
    2: (16, 16, 40),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuimines",
        description="TUI-based Minesweeper game.",
        epilog="Minesweeper",
    )
    parser.add_argument(
        "--width", "--board-width", dest="board_width", type=int, default=None,
        help="The width of the game board. Must be >=3.",
    )
    parser.add_argument(
        "--height", "--board-height", dest="board_height", type=int, default=None,
        help="The height of the game board. Must be >=3.",
    )
    parser.add_argument(
        "--mines", "--mine-count", dest="mine_count", type=int, default=None,
        help="The number of mines. (Must be less than width * height).",
    )
    difficulty_help = "Difficulty measurement. Conflicts with dimension and mine count options."
    parser.add_argument("--easy", dest="difficulty", action="store_const", const=1, help=difficulty_help)
    parser.add_argument("--med", "--medium", dest="difficulty", action="store_const", const=2, help=difficulty_help)
    parser.add_argument("--hard", dest="difficulty", action="store_const", const=3, help=difficulty_help)
    parser.add_argument("-d", "--diff", "--difficulty", dest="difficulty", action="count", help=difficulty_help)
    parser.set_defaults(difficulty=0)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Options:
    """Turn command-line arguments into game options; exits on bad input."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    custom = (args.board_width, args.board_height, args.mine_count)
    if args.difficulty and any(value is not None for value in custom):
        parser.error("difficulty options conflict with --width, --height and --mines")

    opts = Options(interface=Interface.TUI)
    if args.difficulty in _PRESETS:
        opts.board_width, opts.board_height, opts.mine_count = _PRESETS[args.difficulty]
    if args.board_width is not None:
        opts.board_width = args.board_width
    if args.board_height is not None:
        opts.board_height = args.board_height
    if args.mine_count is not None:
        opts.mine_count = args.mine_count

    if opts.board_width < 3:
        parser.error("--width must be >=3")
    if opts.board_height < 3:
        parser.error("--height must be >=3")
    if not 0 <= opts.mine_count < opts.tile_count:
        parser.error("--mines must be non-negative and less than width * height")
    return opts


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and play a game."""
    opts = parse_args(argv)
    try:
        return game(opts)
    except ValueError as exc:
        print(f"tuimines: {exc}", file=sys.stderr)
        return 1