"""Game options: board dimensions, mine count and interface kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Interface(Enum):
    """The kind of user interface the game runs under."""

    NONE = auto()
    CLI = auto()
    TUI = auto()


@dataclass
class Options:
    """Settings for one game of minesweeper."""

    interface: Interface = Interface.NONE
    board_width: int = 30
    board_height: int = 16
    mine_count: int = 99

    @property
    def tile_count(self) -> int:
        """Total number of tiles on the board."""
        return self.board_width * self.board_height