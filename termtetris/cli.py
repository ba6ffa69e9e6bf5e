"""Command line entry point of the game."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import NamedTuple

from .game import Tetris
from .terminal import Color

USAGE = "Usage: termtetris [<level>] [<rotateLeftKey> <rotateRightKey>]"
INVALID_LEVEL = "Invalid level: Level must be a positive integer."
INVALID_KEYS = "Rotation keys must be single characters."

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
CYAN = Color(0.0, 1.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)
GRAY = Color(0.5, 0.5, 0.5)
ORANGE = Color(1.0, 0.5, 0.0)
PINK = Color(1.0, 0.75, 0.8)
BROWN = Color(0.65, 0.16, 0.16)

PALETTE: tuple[tuple[Color, Color], ...] = (
    (BLACK, WHITE),
    (RED, BLACK),
    (GREEN, BLACK),
    (BLUE, WHITE),
    (YELLOW, BLACK),
    (CYAN, BLACK),
    (MAGENTA, BLACK),
    (GRAY, BLACK),
    (ORANGE, BLACK),
    (PINK, BLACK),
    (BROWN, BLACK),
    (WHITE, BLACK),
)


class UsageError(ValueError):
    """The command line arguments are not valid."""


class Settings(NamedTuple):
    level: int = 0
    left_key: str = "a"
    right_key: str = "s"


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _check_keys(left: str, right: str) -> None:
    if len(left) != 1 or len(right) != 1:
        raise UsageError(INVALID_KEYS)


def parse_arguments(argv: Sequence[str]) -> Settings:
    """Read ``[<level>] [<left key> <right key>]`` from the arguments."""
    args = list(argv)
    if not args:
        return Settings()
    if len(args) == 1:
        level = _leading_int(args[0])
        if level < 0:
            raise UsageError(INVALID_LEVEL)
        return Settings(level=level)
    if len(args) == 2:
        _check_keys(args[0], args[1])
        return Settings(left_key=args[0], right_key=args[1])
    if len(args) == 3:
        level = _leading_int(args[0])
        if level <= 0:
            raise UsageError(INVALID_LEVEL)
        _check_keys(args[1], args[2])
        return Settings(level=level, left_key=args[1], right_key=args[2])
    raise UsageError(USAGE)


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game in the terminal; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_arguments(argv)
    except UsageError as err:
        print(err, file=sys.stderr)
        return 1

    from .curses_terminal import CursesTerminalManager

    try:
        with CursesTerminalManager(PALETTE) as terminal:
            Tetris(terminal, settings.level, settings.left_key, settings.right_key).run()
    except RuntimeError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())