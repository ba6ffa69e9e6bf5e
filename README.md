# termtetris

A falling-block puzzle game that runs in your terminal. Pieces fall into a
10 × 20 well. Fill a row completely to clear it and score points. Every ten
cleared rows the level goes up and the pieces fall faster. The game ends when
a new piece has no room to appear.

## Installation

```
pip install .
```

The game draws with the standard `curses` module, so it runs on POSIX
systems. It needs a terminal with many colours. If it reports that there are
too few, start it with `TERM=xterm-256color`.

## Playing

```
termtetris                 # start at level 0, rotate with a / s
termtetris 5               # start at level 5 (0 or more)
termtetris j k             # rotate left with j, right with k
termtetris 3 j k           # level 3 (1 or more) with custom rotation keys
```

If the arguments are invalid, the command prints a message and exits with
status 1. It also exits with status 1 when the terminal cannot show enough
colours. Rotation keys must be single characters.

Controls:

| Key         | Action                                   |
|-------------|------------------------------------------|
| Left/Right  | move the piece sideways                  |
| Down        | push the piece down one row              |
| `a` / `s`   | rotate left / right (configurable)       |
| `q`         | quit                                     |

The I, S and Z pieces flip between two positions. The O piece does not
rotate.

Scoring follows the classic table. Clearing one, two, three or four rows at
once earns 40, 100, 300 or 1200 points, multiplied by the level plus one. If a
press of Down makes the piece land, you also get one point for each time you
pressed Down on that piece.

The best score is kept in `TetrisHighScore.txt` in the current directory.
When the game ends, the screen is wiped, the scores are shown for ten seconds
and the program exits.

## Using it as a library

- `termtetris.terminal` contains `Color`, `UserInput` and the abstract
  `TerminalManager`. It also has `MockTerminalManager`, an in-memory screen
  for tests or headless use.
- `termtetris.curses_terminal.CursesTerminalManager` draws with curses. Use it
  as a context manager, which restores the terminal on exit.
- `termtetris.tetrominos` contains `TetrominoType` and `Tetromino`, a piece
  that can move, rotate and undo its last change.
- `termtetris.game.Tetris` holds the game rules and the drawing code.
- `termtetris.cli` contains `parse_arguments` and `main`.

```python
from termtetris.terminal import MockTerminalManager
from termtetris.game import Tetris

screen = MockTerminalManager(30, 60)
game = Tetris(screen, high_score_file="scores.txt")
game.draw_border()
assert screen.is_pixel_drawn(4, 1)
assert screen.color_at(4, 1) == Tetris.BORDER_COLOR
```

## Limitations

- Mouse clicks are read from the terminal but have no effect in the game.
- Escape does not quit. Only `q` does.
- There is no pause key.

## Running the tests

```
pip install .[test]
pytest
```