# tuimines

Minesweeper for the terminal. The board is drawn with curses and you play
it from the keyboard. Your first step is always safe. No mine is placed on
the tile you step on first or on any of the eight tiles around it.

## Installing

```
pip install .
```

The game uses the standard-library `curses` module, so it needs a platform
that provides it, such as Linux or macOS.

## Playing

```
tuimines
```

The default board is 30 columns by 16 rows with 99 mines. To choose a
different size:

```
tuimines --width 20 --height 12 --mines 40
```

The long forms of these options are `--board-width`, `--board-height` and
`--mine-count`. Width and height must each be at least 3. The mine count
must be at least 0 and less than width × height. If the option values
break these rules, the command prints a usage error and exits.

Instead of giving a size, you can choose a difficulty. A difficulty cannot
be combined with `--width`, `--height` or `--mines`:

```
tuimines --easy      # 8 x 8, 10 mines
tuimines --medium    # 16 x 16, 40 mines
tuimines --hard      # 30 x 16, 99 mines
```

- `--med` is a short form of `--medium`.
- `-d`, `--diff` and `--difficulty` raise the level by one each time they
  appear. For example, `-d` selects easy and `-dd` selects medium.

The mines are placed when you take your first step, and they must all fit
outside that step and its neighbouring tiles. If they do not fit, the game
stops, `tuimines: ...` is printed on standard error, and the exit status
is 1.

### Keys

| Key                              | Action                              |
|----------------------------------|-------------------------------------|
| Arrow keys, `h j k l`, `w a s d` | Move the cursor                     |
| Space or Enter                   | Step on the tile under the cursor   |
| `f`, `?` or `!`                  | Flag the tile, or remove its flag   |

The first move must be a step. Flagging is not allowed until you have
stepped.

The counter at the top (`M: 099`) shows how many flags you have left. The
line at the bottom shows the result of your last key press.

### How a game ends

- **Win:** every mine carries a flag. The whole board is then revealed.
- **Loss:** you step on a mine. The board then shows:
  - every unflagged mine as `X`;
  - every wrongly placed flag as `R`;
  - correctly flagged mines still as `F`.

After the game ends you can still move the cursor. Press Space or Enter to
leave.

## Using it as a library

The game logic works without a terminal:

```python
import random

from tuimines.options import Options
from tuimines.game_data import GameData, init_game_data
from tuimines.game import clear

opts = Options(board_width=9, board_height=9, mine_count=10)
gd = GameData()
init_game_data(opts, gd, first_move=40, rng=random.Random(1))
opened = clear(opts, gd, 40)   # number of tiles that became visible
```

The main pieces:

- **`tuimines.game_data`**
  - `Tile` holds a `value`: `"M"` for a mine, otherwise the count of
    adjacent mines as a digit.
  - `Tile` also has a `TileState`: `INVISIBLE`, `FLAGGED` or `VISIBLE`.
  - `neighbours(opts, loc)` yields the positions adjacent to a tile.
- **`tuimines.display`**
  - `init_display_settings(opts, lines, cols)` computes the window layout.
  - `render_board(window, opts, ds, gd)` draws into any object that has
    curses-style `move`, `addstr` and `addch` methods.
- **`tuimines.game`**
  - `get_move(window, opts, gd, ds)` reads keys from `window.getch()`
    until the player steps on a tile or flags one.
  - `game(opts)` runs a full game in curses.
- **`tuimines.log_file`**
  - `LogFile` writes to `log/<name>.log` while it is enabled.
  - It drops writes while it is disabled.
  - It can be used as a context manager.

The game itself reports moves through the standard `logging` module, at
debug level.

## Limits

- The game has no timer, no high-score table and no way to save a game.
- The terminal must be large enough to hold the whole board window, or
  curses fails when it creates the window.