"""The Tetris game: field, falling pieces, scoring and drawing."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from .terminal import KEY_DOWN, KEY_LEFT, KEY_RIGHT, TerminalManager, UserInput
from .tetrominos import Point, Tetromino

FALL_SPEEDS = (
    48, 43, 38, 33, 28, 23, 18, 13, 8, 6,
    5, 5, 5, 4, 4, 4, 3, 3, 3, 2,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 1,
)
LINE_POINTS = (40, 100, 300, 1200)
QUIT_KEY = ord("q")


def _key_code(key: str | int) -> int:
    return ord(key) if isinstance(key, str) else int(key)


class Tetris:
    """A game of Tetris played on a terminal manager.

    Pieces live in terminal coordinates (x = column, y = row); the field of
    settled cells is a 20 x 10 grid holding colors, 0 meaning empty.
    """

    ROWS = 20
    COLS = 10
    X_MIN = 1
    X_MAX = 12
    Y_MIN = 4
    Y_MAX = 24
    X_SHIFT = X_MIN + 1
    Y_SHIFT = Y_MIN
    SPAWN = (X_MAX // 2, Y_MIN)
    NEXT_POSITION = (17, 6)
    BORDER_COLOR = 9
    TEXT_COLOR = 1
    GAME_OVER_COLOR = 5
    FRAME_MS = 1000 // 60
    DEFAULT_HIGH_SCORE_FILE = "TetrisHighScore.txt"

    def __init__(
        self,
        terminal: TerminalManager,
        level: int = 0,
        left_key: str | int = "a",
        right_key: str | int = "s",
        high_score_file: str | Path = DEFAULT_HIGH_SCORE_FILE,
    ) -> None:
        self.terminal = terminal
        self.num_rows = terminal.num_rows()
        self.num_cols = terminal.num_cols()
        self.level = level
        self.left_key = _key_code(left_key)
        self.right_key = _key_code(right_key)
        self.high_score_file = Path(high_score_file)

        self.current_tetromino = Tetromino()
        self.next_tetromino = Tetromino()
        self.grid: list[list[int]] = [[0] * self.COLS for _ in range(self.ROWS)]

        self.rows_filled = 0
        self.fall_speed = FALL_SPEEDS[0]
        self.score = 0
        self.quit = False
        self.times_pressed = 0
        self.pushed_down = False
        self.high_score = 0
        self.last_fall_time = time.monotonic()

    # ------------------------------------------------------------------ flow

    def run(self) -> None:
        """Play until the player quits or loses, then show the end screen."""
        self.init_terminal()
        self.high_score = self.load_high_score()
        self.last_fall_time = time.monotonic()
        while self.process_user_input(self.terminal.get_user_input()):
            self.update_game(time.monotonic())
            self.draw_status()
        self.save_high_score()
        self.draw_game_over()

    def init_terminal(self) -> None:
        """Draw the border and place the first and the next piece."""
        self.draw_border()
        self.current_tetromino.set_pivot(*self.SPAWN)
        self.current_tetromino.set_random_shape()
        self.next_tetromino.set_pivot(*self.NEXT_POSITION)
        self.next_tetromino.set_random_shape()
        self.draw_tetromino(self.next_tetromino.points(), self.next_tetromino.color())

    def process_user_input(self, user_input: UserInput) -> bool:
        """Apply one key press; return False once the game is over."""
        current = self.current_tetromino
        self.erase_tetromino(current.points())
        keycode = user_input.keycode
        if keycode == QUIT_KEY:
            return False
        if keycode == KEY_DOWN:
            self.times_pressed += 1
            self.pushed_down = True
            current.move_down()
        elif keycode == KEY_RIGHT:
            current.move_right()
        elif keycode == KEY_LEFT:
            current.move_left()
        elif keycode == self.right_key:
            current.rotate(True)
        elif keycode == self.left_key:
            current.rotate(False)
        self.validate_move(False)
        self.pushed_down = False
        return not self.quit

    def update_game(self, now: float) -> bool:
        """Let the piece fall one row if its fall interval has passed."""
        interval = self.FRAME_MS * self.fall_speed / 1000
        if now - self.last_fall_time >= interval:
            self.erase_tetromino(self.current_tetromino.points())
            self.current_tetromino.move_down()
            self.validate_move(False)
            self.last_fall_time = now
            return True
        return False

    # ----------------------------------------------------------- game rules

    def _lock_current(self) -> None:
        current = self.current_tetromino
        current.revert()
        self.draw_tetromino(current.points(), current.color())
        self.insert_tetromino(current.points(), current.color())
        self.switch_tetromino()

    def validate_move(self, spawn: bool = False) -> None:
        """Undo illegal moves, lock pieces that land, detect a lost game."""
        current = self.current_tetromino
        for x, y in current.points():
            if self.X_MIN >= x or x >= self.X_MAX:
                current.revert()
                return
            if self.Y_MAX <= y:
                self._lock_current()
                return
            col = x - self.X_SHIFT
            row = y - self.Y_SHIFT
            if 0 <= col < self.COLS and 0 <= row < self.ROWS and self.grid[row][col]:
                if spawn:
                    self.quit = True
                    return
                self._lock_current()
                return
        self.draw_tetromino(current.points(), current.color())

    def insert_tetromino(self, points: Iterable[Point], color: int) -> None:
        """Settle the given points into the grid, then clear full rows."""
        for x, y in points:
            col = x - self.X_SHIFT
            row = y - self.Y_SHIFT
            if 0 <= col < self.COLS and 0 <= row < self.ROWS:
                self.grid[row][col] = color
        self.add_points(0)
        self.handle_full_rows()

    def handle_full_rows(self) -> None:
        """Remove full rows and move the rows above them down."""
        cleared = 0
        for row in range(self.ROWS - 1, -1, -1):
            if all(self.grid[row]):
                cleared += 1
            elif cleared:
                self.grid[row + cleared] = self.grid[row]
                self.grid[row] = [0] * self.COLS
                self.draw_row(row + cleared)
        for row in range(cleared):
            self.grid[row] = [0] * self.COLS
            self.draw_row(row)
        if cleared:
            self.add_points(cleared)
            self.rows_filled += cleared
        self.update_speed_and_level(True)

    def switch_tetromino(self) -> None:
        """Bring the next piece into play and pick a new next piece."""
        self.times_pressed = 0
        self.erase_tetromino(self.next_tetromino.points())
        self.current_tetromino, self.next_tetromino = (
            self.next_tetromino,
            self.current_tetromino,
        )
        self.next_tetromino.set_pivot(*self.NEXT_POSITION)
        self.next_tetromino.set_random_shape()
        self.draw_tetromino(self.next_tetromino.points(), self.next_tetromino.color())
        self.current_tetromino.set_pivot(*self.SPAWN)
        self.current_tetromino.compute_shape()
        self.validate_move(True)
        self.draw_tetromino(
            self.current_tetromino.points(), self.current_tetromino.color()
        )

    def update_speed_and_level(self, verbose: bool = False) -> None:
        """Level up every ten rows and set the fall speed for the level."""
        if not verbose:
            self.rows_filled += 1
        if self.rows_filled == 10:
            self.level += 1
            self.rows_filled = 0
        if self.level < 0:
            self.fall_speed = FALL_SPEEDS[0]
        elif self.level < len(FALL_SPEEDS):
            self.fall_speed = FALL_SPEEDS[self.level]
        else:
            self.fall_speed = 1

    def add_points(self, rows: int) -> None:
        """Score soft drops and the given number of cleared rows (1-4)."""
        if self.pushed_down:
            self.score += self.times_pressed
        if rows == 0:
            return
        if not 1 <= rows <= 4:
            print(f"{rows} is not a valid argument (1-4)", file=sys.stderr)
            return
        self.score += LINE_POINTS[rows - 1] * (self.level + 1)

    # -------------------------------------------------------------- drawing

    def draw_tetromino(self, points: Iterable[Point], color: int) -> None:
        for x, y in points:
            self.terminal.draw_pixel(y, x, color)

    def erase_tetromino(self, points: Iterable[Point]) -> None:
        for x, y in points:
            self.terminal.draw_pixel(y, x, 0)

    def draw_row(self, row: int) -> None:
        """Draw one grid row with its cell colors."""
        for col, color in enumerate(self.grid[row]):
            self.terminal.draw_pixel(row + self.Y_SHIFT, col + self.X_SHIFT, color)

    def draw_border(self) -> None:
        for y in range(self.Y_MIN, self.Y_MAX):
            self.terminal.draw_pixel(y, self.X_MIN, self.BORDER_COLOR)
            self.terminal.draw_pixel(y, self.X_MAX, self.BORDER_COLOR)
        for x in range(self.X_MIN, self.X_MAX + 1):
            self.terminal.draw_pixel(self.Y_MAX, x, self.BORDER_COLOR)
        self.terminal.draw_string(3, self.X_MAX + 5, self.TEXT_COLOR, "Next")
        self.terminal.refresh()

    def draw_status(self) -> None:
        """Show level, points and filled rows."""
        draw = self.terminal.draw_string
        color = self.TEXT_COLOR
        draw(1, 5, color, "Level:")
        draw(1, 9, color, str(self.level))
        draw(12, self.X_MAX + 5, color, "Points:")
        draw(12, self.X_MAX + 11, color, str(self.score))
        draw(14, self.X_MAX + 5, color, "Rows filled:")
        draw(14, self.X_MAX + 12, color, str(self.rows_filled))

    def draw_game_over(self) -> None:
        """Wipe the screen with an animation and show the final scores."""
        side = range(self.num_cols)
        for row in side:
            for col in side:
                self.terminal.draw_pixel(row, col, 0)
                time.sleep(0.0003)
                self.terminal.draw_pixel(row, col, self.BORDER_COLOR)
                self.terminal.refresh()
            time.sleep(0.0005)
        for row in side:
            for col in side:
                self.terminal.draw_pixel(row, col, 0)
                self.terminal.refresh()
                time.sleep(0.0004)
            time.sleep(0.0009)

        y = self.num_rows // 2
        x = self.num_cols // 2
        draw = self.terminal.draw_string
        color = self.GAME_OVER_COLOR
        draw(y, x, color, "YOU LOST! GAME OVER!")
        draw(y + 2, x, color, "Highscore: ")
        draw(y + 2, x + 6, color, str(self.score))
        draw(y + 4, x, color, "Your score: ")
        draw(y + 4, x + 7, color, str(self.high_score))
        self.terminal.refresh()
        time.sleep(10)

    # ---------------------------------------------------------- high score

    def save_high_score(self) -> None:
        """Write the score to the high score file if it beats the record."""
        if self.score > self.high_score:
            try:
                self.high_score_file.write_text(str(self.score))
            except OSError:
                return
            self.high_score = self.score

    def load_high_score(self) -> int:
        """Read the high score file, keeping the current value if absent."""
        try:
            text = self.high_score_file.read_text()
        except OSError:
            return self.high_score
        match = re.match(r"\s*([+-]?\d+)", text)
        self.high_score = int(match.group(1)) if match else 0
        return self.high_score

    def __repr__(self) -> str:
        return f"Tetris(level={self.level}, score={self.score}, quit={self.quit})"


def _as_rows(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    return [list(row) for row in grid]