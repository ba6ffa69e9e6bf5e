"""Colors, user input and the terminal interface the game draws on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

KEY_ESCAPE = 27
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261
NO_KEY = -1


@dataclass(frozen=True)
class Color:
    """An RGB color whose components lie between 0 and 1."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        if not all(0.0 <= value <= 1.0 for value in (self.red, self.green, self.blue)):
            raise ValueError(
                "Invalid value for color component. Must be between 0 and 1"
            )


@dataclass
class UserInput:
    """A key press or mouse click read from the terminal."""

    keycode: int = NO_KEY
    mouse_row: int = -1
    mouse_col: int = -1

    def is_escape(self) -> bool:
        return self.keycode == KEY_ESCAPE

    def is_key_left(self) -> bool:
        return self.keycode == KEY_LEFT

    def is_key_right(self) -> bool:
        return self.keycode == KEY_RIGHT

    def is_key_up(self) -> bool:
        return self.keycode == KEY_UP

    def is_key_down(self) -> bool:
        return self.keycode == KEY_DOWN

    def is_mouseclick(self) -> bool:
        return self.mouse_row != -1


class TerminalManager(ABC):
    """A screen of logical pixels that can be drawn on and read input from."""

    @abstractmethod
    def draw_pixel(self, row: int, col: int, color: int) -> None:
        """Draw a pixel at the given position in the given color."""

    @abstractmethod
    def refresh(self) -> None:
        """Show the contents of the screen."""

    @abstractmethod
    def draw_string(self, row: int, col: int, color: int, text: str) -> None:
        """Draw a string at the given position in the given color."""

    @abstractmethod
    def get_user_input(self) -> UserInput:
        """Read the next user input."""

    @abstractmethod
    def num_rows(self) -> int:
        """Number of logical rows of the screen."""

    @abstractmethod
    def num_cols(self) -> int:
        """Number of logical columns of the screen."""


class MockTerminalManager(TerminalManager):
    """An in-memory terminal that records what was drawn where."""

    MAX_NUM_CELLS = 1_000_000
    STRING_MARK = -1

    def __init__(self, num_rows: int, num_cols: int) -> None:
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._cells: dict[int, int] = {}
        self.refresh_count = 0

    def _index(self, row: int, col: int) -> int:
        index = row * self._num_cols + col
        if not 0 <= index < self.MAX_NUM_CELLS:
            raise IndexError(f"cell ({row}, {col}) is outside the mock terminal")
        return index

    def draw_pixel(self, row: int, col: int, color: int) -> None:
        self._cells[self._index(row, col)] = color

    def refresh(self) -> None:
        """Count the refresh; nothing is shown."""
        self.refresh_count += 1

    def draw_string(self, row: int, col: int, color: int, text: str) -> None:
        self._cells[self._index(row, col)] = self.STRING_MARK

    def get_user_input(self) -> UserInput:
        return UserInput()

    def num_rows(self) -> int:
        return self._num_rows

    def num_cols(self) -> int:
        return self._num_cols

    def is_pixel_drawn(self, row: int, col: int) -> bool:
        """True if the cell currently holds a non-zero color."""
        return self.color_at(row, col) != 0

    def color_at(self, row: int, col: int) -> int:
        """The color last drawn at the cell, 0 if none."""
        return self._cells.get(self._index(row, col), 0)