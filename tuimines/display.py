"""Screen layout and rendering of the board into a curses-style window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .game_data import MINE, GameData, Tile, TileState
from .options import Options


class Window(Protocol):
    """The subset of a curses window that rendering needs."""

    def move(self, y: int, x: int) -> None: ...

    def addstr(self, text: str) -> None: ...

    def addch(self, ch: str) -> None: ...


def center_begin_index(buff_size: int, block_size: int) -> int:
    """Offset at which a block must start to be centred in a buffer; never negative."""
    return max(0, (buff_size - block_size) // 2)


@dataclass(frozen=True)
class Coords:
    """A row/column pair."""

    row: int
    col: int


@dataclass
class DisplaySettings:
    """Window geometry derived from the board size."""

    height: int
    width: int
    board_height: int
    board_width: int
    cell_pad_height: int
    cell_pad_width: int
    vert_buffer: int
    horiz_buffer: int
    header_width: int
    dot_count: int
    top_margin: int
    header_margin: int
    footer_margin: int
    right_margin: int
    left_margin: int
    horiz_line_trim: int
    bottom_margin: int

    def header_coords(self) -> Coords:
        """Where the mine counter header starts."""
        return Coords(self.top_margin + 1, center_begin_index(self.width, self.header_width))

    def board_coords(self) -> Coords:
        """Top-left corner of the board area."""
        return Coords(self.top_margin + self.header_margin + 2, self.left_margin + 1)


def to_pos(opts: Options, coords: Coords) -> int:
    """Board position of ``coords``."""
    return coords.row * opts.board_width + coords.col


def from_pos(opts: Options, pos: int) -> Coords:
    """Row and column of board position ``pos``."""
    row, col = divmod(pos, opts.board_width)
    return Coords(row, col)


def display_tile(tile: Tile) -> str:
    """The character shown for ``tile``."""
    if tile.state is TileState.INVISIBLE:
        return " "
    if tile.state is TileState.FLAGGED:
        return "F"
    if tile.value == MINE:
        return "X"
    if tile.value == "0":
        return " "
    if tile.value == "!":
        # A tile that was flagged wrongly, revealed at the end of the game.
        return "R"
    return tile.value


def init_display_settings(opts: Options, lines: int, cols: int) -> DisplaySettings:
    """Compute the window layout for ``opts`` on a screen of ``lines`` x ``cols``."""
    top_margin = 1
    header_margin = 1
    bottom_margin = 1
    footer_margin = 0
    right_margin = 6
    left_margin = 5
    cell_pad_height = 1
    cell_pad_width = 3
    board_height = (opts.board_height + 1) * (cell_pad_height + 1)
    board_width = (opts.board_width + 1) * (cell_pad_width + 1) - 2
    height = board_height + top_margin + bottom_margin + header_margin + footer_margin + 3
    width = board_width + right_margin + left_margin + 2
    return DisplaySettings(
        height=height,
        width=width,
        board_height=board_height,
        board_width=board_width,
        cell_pad_height=cell_pad_height,
        cell_pad_width=cell_pad_width,
        vert_buffer=center_begin_index(lines, height),
        horiz_buffer=center_begin_index(cols, width),
        header_width=6,
        dot_count=height * width,
        top_margin=top_margin,
        header_margin=header_margin,
        footer_margin=footer_margin,
        right_margin=right_margin,
        left_margin=left_margin,
        horiz_line_trim=1,
        bottom_margin=bottom_margin,
    )


def initial_display(window: Window, opts: Options, ds: DisplaySettings, gd: GameData) -> None:
    """Fill ``gd`` with a blank placeholder board and draw it."""
    gd.board = [Tile() for _ in range(opts.tile_count)]
    gd.status = "Initializing Game .."
    gd.flags = opts.mine_count
    gd.cursorpos = opts.board_width * (opts.board_height - 1) // 2
    render_board(window, opts, ds, gd)


def _render_header(window: Window, ds: DisplaySettings, gd: GameData) -> None:
    start = ds.header_coords()
    window.move(start.row, start.col)
    window.addstr(f"M: {gd.flags:03d}")


def _render_body(window: Window, opts: Options, ds: DisplaySettings, gd: GameData) -> None:
    width = opts.board_width
    start = ds.board_coords()
    horiz_line = "-" * (ds.board_width - ds.horiz_line_trim)
    horiz_eraser = " " * (ds.cell_pad_width + 1)

    window.move(start.row, start.col + ds.cell_pad_width - 1)
    window.addstr(f"  {1:2d}")
    for number in range(2, width + 1):
        window.addstr(f"| {number:2d}")

    prev_visible = [False] * width
    for ri in range(opts.board_height):
        rloc = ri * width
        line_row = start.row + ri * 2 + 1
        visible = [gd.is_visible(rloc + ci) for ci in range(width)]

        window.move(line_row + 1, start.col + 1)
        window.addstr(f"{ri + 1:2d}")
        for ci in range(width):
            # The spacer between two revealed tiles is dropped; the last
            # column always keeps its spacer.
            joined = 0 < ci < width - 1 and visible[ci - 1] and visible[ci]
            window.addstr("  " if joined else "| ")
            char = display_tile(gd.board[rloc + ci])
            window.addstr(char if ci == width - 1 else f"{char} ")

        window.move(line_row, start.col + ds.horiz_line_trim + 1)
        window.addstr(horiz_line)
        last = False
        col = start.col + ds.cell_pad_width
        for ci in range(width):
            window.move(line_row, col)
            if ci < width - 1 and visible[ci] and prev_visible[ci]:
                window.addch(" " if last else "+")
                window.addstr(horiz_eraser)
                last = True
            else:
                window.addch("+")
                last = False
            col += ds.cell_pad_width + 1

        prev_visible = visible


def _render_footer(window: Window, ds: DisplaySettings, gd: GameData) -> None:
    footer_row = ds.height - ds.footer_margin - 2
    window.move(footer_row, 1)
    window.addstr(" " * (ds.width - 2))
    window.move(footer_row, center_begin_index(ds.width, len(gd.status)))
    window.addstr(gd.status)


def render_board(window: Window, opts: Options, ds: DisplaySettings, gd: GameData) -> None:
    """Draw header, board and footer, then leave the cursor on the selected tile."""
    _render_header(window, ds, gd)
    _render_body(window, opts, ds, gd)
    _render_footer(window, ds, gd)

    cursor = from_pos(opts, gd.cursorpos)
    start = ds.board_coords()
    window.move(
        start.row + (cursor.row + 1) * (ds.cell_pad_height + 1),
        start.col + (cursor.col + 1) * (ds.cell_pad_width + 1) + 1,
    )