import random

import pytest

from tuimines import game as game_mod
from tuimines.display import init_display_settings
from tuimines.game import (
    KEY_DOWN,
    LOSS_STATUS,
    WIN_STATUS,
    FIRST_MOVE_STATUS,
    Move,
    MoveType,
    clear,
    get_move,
)
from tuimines.game_data import MINE, GameData, Tile, TileState, neighbours
from tuimines.options import Options


class FakeWindow:
    def __init__(self, keys):
        self._keys = iter(keys)
        self.written = []
        self.refreshes = 0

    def getch(self):
        return next(self._keys)

    def refresh(self):
        self.refreshes += 1

    def move(self, y, x):
        pass

    def addstr(self, text):
        self.written.append(text)

    def addch(self, ch):
        self.written.append(ch)


def make_gd(opts, cursor=0, mines=()):
    board = [Tile() for _ in range(opts.tile_count)]
    for loc in mines:
        board[loc].value = MINE
    for loc in mines:
        for adj in neighbours(opts, loc):
            if board[adj].value != MINE:
                board[adj].value = chr(ord(board[adj].value) + 1)
    return GameData(board=board, flags=opts.mine_count, cursorpos=cursor)


def keys(text):
    return [ord(c) for c in text]


def _winning_script(gd, opts, seen):
    yield ord("f")
    seen.append(gd.status)
    yield ord(" ")
    mine = next(i for i, t in enumerate(gd.board) if t.value == MINE)
    row, col = divmod(mine, opts.board_width)
    for _ in range(row):
        yield ord("j")
    for _ in range(col):
        yield ord("l")
    yield ord("f")
    seen.append(gd.status)
    yield ord(" ")


@pytest.fixture
def opts3():
    return Options(board_width=3, board_height=3, mine_count=1)


@pytest.fixture
def ds3(opts3):
    return init_display_settings(opts3, 24, 80)


def test_get_move_step_after_moving_right(ds3):
    opts = Options(board_width=3, board_height=3, mine_count=1)
    gd = make_gd(opts)
    move = get_move(FakeWindow(keys("l ")), opts, gd, ds3)
    assert move == Move(1, MoveType.STEP)
    assert gd.status == "Stepping at 1(2, 1)..."


def test_get_move_flag_and_unflag(opts3, ds3):
    gd = make_gd(opts3, cursor=4)
    move = get_move(FakeWindow(keys("f")), opts3, gd, ds3)
    assert move == Move(4, MoveType.FLAG)
    assert gd.status.startswith("Marking at 4")
    gd.board[4].state = TileState.FLAGGED
    move = get_move(FakeWindow(keys("!")), opts3, gd, ds3)
    assert move == Move(4, MoveType.UNFLAG)
    assert gd.status.startswith("Unmarking at 4")


@pytest.mark.parametrize(
    "cursor, key",
    [(3, "h"), (5, "l"), (1, "k"), (7, "j")],
)
def test_cursor_stays_at_edges(opts3, ds3, cursor, key):
    gd = make_gd(opts3, cursor=cursor)
    move = get_move(FakeWindow(keys(key + " ")), opts3, gd, ds3)
    assert move.loc == cursor


def test_arrow_key_moves_down(opts3, ds3):
    gd = make_gd(opts3, cursor=0)
    move = get_move(FakeWindow([KEY_DOWN, ord(" ")]), opts3, gd, ds3)
    assert move.loc == opts3.board_width


def test_cannot_step_on_visible_tile(opts3, ds3):
    gd = make_gd(opts3, cursor=0)
    gd.board[0].state = TileState.VISIBLE
    window = FakeWindow(keys(" l "))
    move = get_move(window, opts3, gd, ds3)
    assert move.loc == 1
    assert "Cannot step on visible tiles." in window.written


def test_cannot_step_on_flagged_or_mark_visible(opts3, ds3):
    gd = make_gd(opts3, cursor=0)
    gd.board[0].state = TileState.FLAGGED
    gd.board[1].state = TileState.VISIBLE
    window = FakeWindow(keys(" lfl "))
    move = get_move(window, opts3, gd, ds3)
    assert move.loc == 2
    assert "Cannot step on flagged tiles." in window.written
    assert "Cannot mark visible tiles." in window.written


def test_unbound_key_reported(opts3, ds3):
    gd = make_gd(opts3)
    window = FakeWindow(keys("z "))
    get_move(window, opts3, gd, ds3)
    assert "(z) key does not have a binding." in window.written


def test_clear_empty_board_reveals_everything():
    opts = Options(board_width=4, board_height=3, mine_count=0)
    gd = make_gd(opts)
    count = clear(opts, gd, 5)
    assert count == opts.tile_count
    assert all(t.state is TileState.VISIBLE for t in gd.board)


def test_clear_does_not_pass_flagged_empty_tile():
    opts = Options(board_width=5, board_height=1, mine_count=0)
    gd = make_gd(opts)
    gd.board[2].state = TileState.FLAGGED
    clear(opts, gd, 0)
    states = [t.state for t in gd.board]
    assert states[:2] == [TileState.VISIBLE, TileState.VISIBLE]
    assert states[2] is TileState.FLAGGED
    assert states[3:] == [TileState.INVISIBLE, TileState.INVISIBLE]


@pytest.mark.parametrize("seed", range(5))
def test_clear_invariants_on_random_board(seed):
    opts = Options(board_width=8, board_height=8, mine_count=10)
    gd = GameData()
    game_mod.init_game_data(opts, gd, 27, random.Random(seed))
    count = clear(opts, gd, 27)
    visible = [i for i, t in enumerate(gd.board) if t.state is TileState.VISIBLE]
    assert count == len(visible)
    assert all(gd.board[i].value != MINE for i in visible)
    for i in visible:
        if gd.board[i].value == "0":
            assert all(
                gd.board[adj].state is TileState.VISIBLE for adj in neighbours(opts, i)
            )


def test_step_on_mine_loses_and_marks_wrong_flags(opts3):
    gd = make_gd(opts3, mines=[0])
    gd.board[8].state = TileState.FLAGGED
    over = game_mod._apply_move(opts3, gd, Move(0, MoveType.STEP))
    assert over is True
    assert gd.status == LOSS_STATUS
    assert gd.board[0].state is TileState.VISIBLE
    assert gd.board[8].value == "!"
    assert gd.board[8].state is TileState.VISIBLE


def test_flagging_all_mines_wins(opts3):
    gd = make_gd(opts3, mines=[4])
    over = game_mod._apply_move(opts3, gd, Move(4, MoveType.FLAG))
    assert over is True
    assert gd.status == WIN_STATUS
    assert gd.flags == 0
    assert all(t.state is TileState.VISIBLE for t in gd.board)


def test_unflag_restores_counter(opts3):
    gd = make_gd(opts3, mines=[4])
    gd.board[0].state = TileState.FLAGGED
    gd.flags -= 1
    over = game_mod._apply_move(opts3, gd, Move(0, MoveType.UNFLAG))
    assert over is False
    assert gd.flags == opts3.mine_count
    assert gd.board[0].state is TileState.INVISIBLE


def test_step_on_number_reveals_only_that_tile(opts3):
    gd = make_gd(opts3, mines=[4])
    over = game_mod._apply_move(opts3, gd, Move(0, MoveType.STEP))
    assert over is False
    visible = [i for i, t in enumerate(gd.board) if t.state is TileState.VISIBLE]
    assert visible == [0]


def test_step_on_empty_tile_clears_region(opts3):
    gd = make_gd(opts3, mines=[8])
    over = game_mod._apply_move(opts3, gd, Move(0, MoveType.STEP))
    assert over is False
    assert gd.status.startswith("Stepped; Cleared ")
    assert gd.board[8].state is TileState.INVISIBLE
    assert gd.board[0].state is TileState.VISIBLE


def test_play_full_winning_game():
    opts = Options(board_width=4, board_height=4, mine_count=1)
    ds = init_display_settings(opts, 24, 80)
    gd = make_gd(opts, cursor=0)
    seen = []
    window = FakeWindow(_winning_script(gd, opts, seen))
    result = game_mod._play(window, opts, ds, gd, random.Random(3))
    assert result == 0
    assert seen == [FIRST_MOVE_STATUS, WIN_STATUS]
    assert sum(t.value == MINE for t in gd.board) == 1
    assert all(gd.board[i].value != MINE for i in (0, 1, 4, 5))