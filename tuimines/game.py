"""Game flow: reading moves, revealing tiles and running a full game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from .display import DisplaySettings, from_pos, init_display_settings, initial_display, render_board
from .game_data import MINE, GameData, TileState, init_game_data, neighbours
from .options import Interface, Options

logger = logging.getLogger(__name__)

KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261

_LEFT_KEYS = frozenset({KEY_LEFT, ord("h"), ord("a")})
_RIGHT_KEYS = frozenset({KEY_RIGHT, ord("l"), ord("d")})
_UP_KEYS = frozenset({KEY_UP, ord("k"), ord("w")})
_DOWN_KEYS = frozenset({KEY_DOWN, ord("j"), ord("s")})
_STEP_KEYS = frozenset({ord("\n"), ord(" ")})
_FLAG_KEYS = frozenset({ord("?"), ord("!"), ord("f")})

LOSS_STATUS = "Stepped on a mine, Game Over. (Space to exit)"
WIN_STATUS = "All mines cleared, Game Over."
FIRST_MOVE_STATUS = "First move must be a step."


class Window(Protocol):
    """The subset of a curses window that the game loop needs."""

    def getch(self) -> int: ...

    def refresh(self) -> None: ...

    def move(self, y: int, x: int) -> None: ...

    def addstr(self, text: str) -> None: ...

    def addch(self, ch: str) -> None: ...


class MoveType(Enum):
    """What a move does to its tile."""

    FLAG = auto()
    UNFLAG = auto()
    STEP = auto()


@dataclass(frozen=True)
class Move:
    """A move chosen by the player at board position ``loc``."""

    loc: int
    type: MoveType


def _move_cursor(opts: Options, gd: GameData, ch: int) -> bool:
    """Apply a cursor movement key; return whether ``ch`` was one."""
    width = opts.board_width
    if ch in _LEFT_KEYS:
        if gd.cursorpos % width != 0:
            gd.cursorpos -= 1
        gd.status = "Moving Left ..."
    elif ch in _RIGHT_KEYS:
        if gd.cursorpos % width != width - 1:
            gd.cursorpos += 1
        gd.status = "Moving Right ..."
    elif ch in _UP_KEYS:
        if gd.cursorpos >= width:
            gd.cursorpos -= width
        gd.status = "Moving Up ..."
    elif ch in _DOWN_KEYS:
        if gd.cursorpos // width < opts.board_height - 1:
            gd.cursorpos += width
        gd.status = "Moving Down ..."
    else:
        return False
    return True


def _key_name(ch: int) -> str:
    return chr(ch) if 0 <= ch < 256 else str(ch)


def get_move(window: Window, opts: Options, gd: GameData, ds: DisplaySettings) -> Move:
    """Read keys, moving the cursor, until the player steps on or (un)flags a tile."""
    while True:
        ch = window.getch()
        coords = from_pos(opts, gd.cursorpos)
        where = f"{gd.cursorpos}({coords.col + 1}, {coords.row + 1})..."

        if _move_cursor(opts, gd, ch):
            pass
        elif ch in _STEP_KEYS:
            state = gd.current_tile().state
            if state is TileState.VISIBLE:
                gd.status = "Cannot step on visible tiles."
            elif state is TileState.FLAGGED:
                gd.status = "Cannot step on flagged tiles."
            else:
                gd.status = f"Stepping at {where}"
                return Move(gd.cursorpos, MoveType.STEP)
        elif ch in _FLAG_KEYS:
            state = gd.current_tile().state
            if state is TileState.VISIBLE:
                gd.status = "Cannot mark visible tiles."
            elif state is TileState.FLAGGED:
                gd.status = f"Unmarking at {where}"
                return Move(gd.cursorpos, MoveType.UNFLAG)
            else:
                gd.status = f"Marking at {where}"
                return Move(gd.cursorpos, MoveType.FLAG)
        else:
            gd.status = f"({_key_name(ch)}) key does not have a binding."

        render_board(window, opts, ds, gd)
        window.refresh()


def clear(opts: Options, gd: GameData, loc: int) -> int:
    """Reveal ``loc`` and flood-fill outwards through empty tiles.

    Returns the number of tiles that became visible.
    """
    revealed = 0
    start = gd.board[loc]
    if start.state is not TileState.VISIBLE:
        start.state = TileState.VISIBLE
        revealed += 1

    pending = [loc]
    while pending:
        current = pending.pop()
        for adjacent in neighbours(opts, current):
            tile = gd.board[adjacent]
            if tile.value == "0":
                if tile.state is TileState.INVISIBLE:
                    tile.state = TileState.VISIBLE
                    revealed += 1
                    pending.append(adjacent)
            elif tile.state is not TileState.VISIBLE:
                tile.state = TileState.VISIBLE
                revealed += 1
    return revealed


def _reveal_loss(gd: GameData) -> None:
    for tile in gd.board:
        if tile.value == MINE and tile.state is not TileState.FLAGGED:
            tile.state = TileState.VISIBLE
        elif tile.value != MINE and tile.state is TileState.FLAGGED:
            tile.state = TileState.VISIBLE
            tile.value = "!"


def _apply_move(opts: Options, gd: GameData, move: Move) -> bool:
    """Carry out ``move``; return whether the game is over."""
    tile = gd.board[move.loc]
    game_over = False

    if move.type is MoveType.STEP:
        if tile.value == MINE:
            logger.debug("STEP %d (mined)", move.loc)
            game_over = True
            gd.status = LOSS_STATUS
            _reveal_loss(gd)
        elif tile.value == "0":
            logger.debug("STEP %d", move.loc)
            count = clear(opts, gd, move.loc)
            gd.status = f"Stepped; Cleared {count} tiles."
        else:
            logger.debug("STEP %d", move.loc)
            tile.state = TileState.VISIBLE
    elif move.type is MoveType.FLAG:
        gd.flags -= 1
        tile.state = TileState.FLAGGED
        logger.debug("FLAG %d (%s)", move.loc, "correct" if tile.value == MINE else "incorrect")
    else:
        gd.flags += 1
        tile.state = TileState.INVISIBLE
        logger.debug("UNFLAG %d (%s)", move.loc, "incorrect" if tile.value == MINE else "correct")

    correct_flags = sum(
        1 for t in gd.board if t.value == MINE and t.state is TileState.FLAGGED
    )
    if correct_flags == opts.mine_count:
        gd.status = WIN_STATUS
        for t in gd.board:
            t.state = TileState.VISIBLE
        game_over = True
    return game_over


def _redraw(window: Window, opts: Options, ds: DisplaySettings, gd: GameData) -> None:
    render_board(window, opts, ds, gd)
    window.refresh()


def _play(
    window: Window,
    opts: Options,
    ds: DisplaySettings,
    gd: GameData,
    rng: Optional[random.Random] = None,
) -> int:
    """Run the game on an already drawn window; return the exit code."""
    while True:
        move = get_move(window, opts, gd, ds)
        if move.type is MoveType.STEP:
            logger.debug("first move: STEP %d", move.loc)
            init_game_data(opts, gd, move.loc, rng)
            clear(opts, gd, move.loc)
            break
        gd.status = FIRST_MOVE_STATUS
        _redraw(window, opts, ds, gd)
    _redraw(window, opts, ds, gd)

    game_over = False
    while not game_over:
        move = get_move(window, opts, gd, ds)
        game_over = _apply_move(opts, gd, move)
        _redraw(window, opts, ds, gd)

    while True:
        ch = window.getch()
        if ch in _STEP_KEYS:
            return 0
        _move_cursor(opts, gd, ch)
        _redraw(window, opts, ds, gd)


def game(opts: Optional[Options] = None) -> int:
    """Play one game in the terminal; return the exit code."""
    import curses

    opts = opts if opts is not None else Options(interface=Interface.TUI)

    def run(stdscr) -> int:
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        ds = init_display_settings(opts, curses.LINES, curses.COLS)
        window = curses.newwin(ds.height, ds.width, ds.vert_buffer, ds.horiz_buffer)
        window.keypad(True)
        window.box()
        gd = GameData()
        initial_display(window, opts, ds, gd)
        window.refresh()
        return _play(window, opts, ds, gd)

    return curses.wrapper(run)