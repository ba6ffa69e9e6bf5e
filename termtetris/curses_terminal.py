"""A terminal manager drawing with curses."""

from __future__ import annotations

import contextlib
import curses
from collections.abc import Sequence

from .terminal import Color, TerminalManager, UserInput

SYSTEM_COLORS = 16


class CursesTerminalManager(TerminalManager):
    """Draws logical pixels (two characters wide) and reads keys and clicks.

    ``colors`` holds (foreground, background) pairs; the index of a pair is
    the color number passed to ``draw_pixel`` and ``draw_string``.
    """

    def __init__(self, colors: Sequence[tuple[Color, Color]]) -> None:
        self._num_colors = len(colors)
        self._closed = False
        self._screen = curses.initscr()
        curses.cbreak()
        curses.noecho()
        curses.curs_set(0)
        self._screen.nodelay(True)
        self._screen.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)
        curses.mouseinterval(0)

        curses.start_color()
        if curses.COLORS - SYSTEM_COLORS < self._num_colors * 2:
            self.close()
            raise RuntimeError(
                "The CursesTerminalManager requires a terminal with at least "
                "200 colors. Consider setting `TERM=xterm-256color` before "
                "starting the application"
            )
        for i, (foreground, background) in enumerate(colors):
            fg_index = 2 * (SYSTEM_COLORS + i)
            bg_index = fg_index + 1
            self._init_color(fg_index, foreground)
            self._init_color(bg_index, background)
            curses.init_pair(SYSTEM_COLORS + i, fg_index, bg_index)

        self._num_rows = curses.LINES
        self._num_cols = curses.COLS // 2

    @staticmethod
    def _init_color(index: int, color: Color) -> None:
        curses.init_color(
            index,
            int(1000 * color.red),
            int(1000 * color.green),
            int(1000 * color.blue),
        )

    def close(self) -> None:
        """Restore the terminal; safe to call more than once."""
        if not self._closed:
            self._closed = True
            curses.endwin()

    def __enter__(self) -> CursesTerminalManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_color(self, color: int, what: str) -> None:
        if color >= self._num_colors:
            raise ValueError(f"Invalid color given to {what}")

    def draw_pixel(self, row: int, col: int, color: int) -> None:
        self._check_color(color, "draw_pixel")
        self._screen.attron(curses.color_pair(color + SYSTEM_COLORS))
        self._screen.attron(curses.A_REVERSE)
        with contextlib.suppress(curses.error):
            self._screen.addstr(row, 2 * col, "  ")
        self._screen.attroff(curses.A_REVERSE)

    def draw_string(self, row: int, col: int, color: int, text: str) -> None:
        self._check_color(color, "draw_string")
        self._screen.attron(curses.color_pair(color + SYSTEM_COLORS))
        with contextlib.suppress(curses.error):
            self._screen.addstr(row, 2 * col, text)

    def refresh(self) -> None:
        self._screen.refresh()

    def get_user_input(self) -> UserInput:
        user_input = UserInput(keycode=self._screen.getch())
        if user_input.keycode == curses.KEY_MOUSE:
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                return user_input
            if state & curses.BUTTON1_PRESSED:
                user_input.mouse_row = y
                user_input.mouse_col = x // 2
        return user_input

    def num_rows(self) -> int:
        return self._num_rows

    def num_cols(self) -> int:
        return self._num_cols