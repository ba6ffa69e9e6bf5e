"""Tetromino shapes, movement and rotation."""

from __future__ import annotations

import random
from enum import IntEnum

Point = tuple[int, int]


class TetrominoType(IntEnum):
    """The seven shapes; the value doubles as the drawing color."""

    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


_OFFSETS: dict[TetrominoType, tuple[Point, ...]] = {
    TetrominoType.T: ((-1, 0), (1, 0), (0, 1)),
    TetrominoType.Z: ((-1, 0), (0, 1), (1, 1)),
    TetrominoType.S: ((1, 0), (0, 1), (-1, 1)),
    TetrominoType.J: ((1, 0), (1, 1), (-1, 0)),
    TetrominoType.L: ((-1, 0), (1, 0), (-1, 1)),
    TetrominoType.I: ((1, 0), (-2, 0), (-1, 0)),
    TetrominoType.O: ((-1, 0), (-1, 1), (0, 1)),
}

_TWO_STATE = (TetrominoType.I, TetrominoType.S, TetrominoType.Z)


class Tetromino:
    """A piece made of four points around a pivot, with one step of undo."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._shape: TetrominoType | None = None
        self._pivot: Point = (-1, -1)
        self._points: list[Point] = []
        self._color = 0
        self._rotated = False
        self._saved_points: list[Point] = []
        self._saved_pivot: Point = (-1, -1)

    def set_pivot(self, x: int, y: int) -> None:
        self._pivot = (x, y)

    def set_shape(self, shape: TetrominoType | int) -> None:
        """Set the shape; compute its points if the pivot is set."""
        self._shape = TetrominoType(shape)
        self._color = int(self._shape)
        if -1 not in self._pivot:
            self.compute_shape()

    def set_random_shape(self) -> None:
        """Pick a random shape, re-rolling once if it repeats the current one."""
        value = self._rng.randint(1, 7)
        if value == self._color:
            value = self._rng.randint(1, 7)
        self._color = value
        self.set_shape(value)
        self._rotated = False

    def compute_shape(self) -> None:
        """Lay the shape's points out around the pivot."""
        self._save()
        px, py = self._pivot
        offsets = _OFFSETS.get(self._shape, ()) if self._shape is not None else ()
        self._points = [(px, py)] + [(px + dx, py + dy) for dx, dy in offsets]

    def rotate(self, clockwise: bool) -> None:
        """Rotate a quarter turn; I, S and Z toggle between two states."""
        if self._shape is TetrominoType.O:
            return
        if self._shape in _TWO_STATE and self._rotated and clockwise:
            self._rotated = False
            clockwise = False
        self._save()
        px, py = self._pivot
        rotated: list[Point] = []
        for x, y in self._points:
            if (x, y) == self._pivot:
                rotated.append((x, y))
            elif clockwise:
                rotated.append((px - (y - py), py + (x - px)))
                if self._shape in _TWO_STATE:
                    self._rotated = True
            else:
                rotated.append((px + (y - py), py - (x - px)))
        self._points = rotated

    def _shift(self, dx: int, dy: int) -> None:
        self._save()
        px, py = self._pivot
        self._pivot = (px + dx, py + dy)
        self._points = [(x + dx, y + dy) for x, y in self._points]

    def move_down(self) -> None:
        self._shift(0, 1)

    def move_left(self) -> None:
        self._shift(-1, 0)

    def move_right(self) -> None:
        self._shift(1, 0)

    def _save(self) -> None:
        self._saved_points = list(self._points)
        self._saved_pivot = self._pivot

    def revert(self) -> None:
        """Undo the last move, rotation or shape computation."""
        if -1 not in self._saved_pivot:
            self._points = list(self._saved_points)
            self._pivot = self._saved_pivot

    def points(self) -> list[Point]:
        """The (x, y) coordinates of the piece."""
        return list(self._points)

    def color(self) -> int:
        return self._color