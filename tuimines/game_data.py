"""Board state and mine placement."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

from .options import Options

logger = logging.getLogger(__name__)

MINE = "M"


class TileState(Enum):
    """Whether a tile is hidden, flagged or revealed."""

    INVISIBLE = auto()
    FLAGGED = auto()
    VISIBLE = auto()


@dataclass
class Tile:
    """One board square; ``value`` is ``"M"`` for a mine or the adjacent-mine digit."""

    value: str = "0"
    state: TileState = TileState.INVISIBLE


@dataclass
class GameData:
    """Mutable state of a game in progress."""

    board: list[Tile] = field(default_factory=list)
    flags: int = 0
    status: str = ""
    cursorpos: int = 0

    def current_tile(self) -> Tile:
        """The tile under the cursor."""
        return self.board[self.cursorpos]

    def is_visible(self, loc: int) -> bool:
        """Whether the tile at ``loc`` has been revealed."""
        return self.board[loc].state is TileState.VISIBLE


def tile_index(opts: Options, row: int, col: int) -> int:
    """Board position of the tile at ``row``, ``col``."""
    return row * opts.board_width + col


def neighbours(opts: Options, loc: int) -> Iterator[int]:
    """Yield the positions adjacent to ``loc``, row by row from top-left."""
    width, height = opts.board_width, opts.board_height
    row, col = divmod(loc, width)
    for d_row in (-1, 0, 1):
        r = row + d_row
        if not 0 <= r < height:
            continue
        for d_col in (-1, 0, 1):
            c = col + d_col
            if (d_row, d_col) == (0, 0) or not 0 <= c < width:
                continue
            yield r * width + c


def init_game_data(
    opts: Options,
    gd: GameData,
    first_move: int,
    rng: Optional[random.Random] = None,
) -> None:
    """Lay out a fresh board whose first move and its neighbours are mine-free."""
    tile_count = opts.tile_count
    if not 0 <= first_move < tile_count:
        raise IndexError(f"first move {first_move} is outside the board")
    if opts.mine_count < 0:
        raise ValueError("mine count must not be negative")

    forbidden = {first_move, *neighbours(opts, first_move)}
    logger.debug("first move: %d, forbidden: %s", first_move, sorted(forbidden))
    candidates = [i for i in range(tile_count) if i not in forbidden]
    if opts.mine_count > len(candidates):
        raise ValueError(
            f"cannot place {opts.mine_count} mines; only {len(candidates)} tiles are free"
        )

    gd.board = [Tile() for _ in range(tile_count)]

    rng = rng if rng is not None else random.Random()
    rng.shuffle(candidates)
    for loc in candidates[: opts.mine_count]:
        logger.debug("mine at %d", loc)
        gd.board[loc].value = MINE
        for adjacent in neighbours(opts, loc):
            tile = gd.board[adjacent]
            if tile.value != MINE:
                tile.value = chr(ord(tile.value) + 1)

    gd.flags = opts.mine_count