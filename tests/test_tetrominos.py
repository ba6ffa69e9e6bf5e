import random

import pytest

from termtetris.tetrominos import Tetromino, TetrominoType


def make(x, y, shape):
    tetro = Tetromino(random.Random(0))
    tetro.set_pivot(x, y)
    tetro.set_shape(shape)
    return tetro


def test_rotate_t():
    tetro = make(5, 5, TetrominoType.T)
    original = sorted(tetro.points())
    tetro.rotate(False)
    assert sorted(tetro.points()) == sorted([(5, 5), (5, 4), (6, 5), (5, 6)])
    tetro.rotate(True)
    assert sorted(tetro.points()) == original


def test_rotate_i_toggles():
    tetro = make(3, 2, TetrominoType.I)
    original = sorted(tetro.points())
    expected = [(3, 0), (3, 1), (3, 2), (3, 3)]
    tetro.rotate(True)
    assert sorted(tetro.points()) == expected
    tetro.rotate(True)
    assert sorted(tetro.points()) == original
    tetro.rotate(True)
    assert sorted(tetro.points()) == expected
    tetro.rotate(True)
    assert sorted(tetro.points()) == original


def test_rotate_o_unchanged():
    tetro = make(2, 1, TetrominoType.O)
    expected = sorted([(2, 1), (1, 1), (1, 2), (2, 2)])
    tetro.rotate(True)
    assert sorted(tetro.points()) == expected
    tetro.rotate(False)
    assert sorted(tetro.points()) == expected


def test_move_down():
    tetro = make(5, 5, TetrominoType.T)
    tetro.move_down()
    assert sorted(tetro.points()) == sorted([(5, 6), (4, 6), (6, 6), (5, 7)])


def test_move_right():
    tetro = make(5, 5, TetrominoType.T)
    tetro.move_right()
    assert sorted(tetro.points()) == sorted([(5, 5), (6, 5), (7, 5), (6, 6)])


def test_move_left():
    tetro = make(5, 5, TetrominoType.T)
    tetro.move_left()
    assert sorted(tetro.points()) == sorted([(3, 5), (4, 5), (5, 5), (4, 6)])


@pytest.mark.parametrize(
    "shape, expected",
    [
        (TetrominoType.I, [(3, 5), (4, 5), (6, 5), (5, 5)]),
        (TetrominoType.O, [(4, 6), (4, 5), (5, 5), (5, 6)]),
        (TetrominoType.T, [(5, 5), (4, 5), (6, 5), (5, 6)]),
        (TetrominoType.S, [(6, 5), (5, 6), (4, 6), (5, 5)]),
        (TetrominoType.Z, [(5, 5), (4, 5), (5, 6), (6, 6)]),
        (TetrominoType.J, [(4, 5), (6, 6), (6, 5), (5, 5)]),
        (TetrominoType.L, [(5, 5), (4, 5), (6, 5), (4, 6)]),
    ],
)
def test_compute_shape(shape, expected):
    tetro = Tetromino()
    tetro.set_pivot(5, 5)
    tetro.set_shape(shape)
    tetro.compute_shape()
    assert sorted(tetro.points()) == sorted(expected)
    assert tetro.color() == int(shape)


def test_shape_without_pivot_has_no_points():
    tetro = Tetromino()
    tetro.set_shape(TetrominoType.T)
    assert tetro.points() == []
    assert tetro.color() == TetrominoType.T


def test_set_shape_rejects_unknown_value():
    with pytest.raises(ValueError):
        Tetromino().set_shape(8)


def test_random_shape_repeat_probability():
    iterations = 200_000
    tetro = Tetromino(random.Random(1234))
    tetro.set_random_shape()
    previous = tetro.color()
    same = 0
    for _ in range(iterations):
        tetro.set_random_shape()
        current = tetro.color()
        assert 1 <= current <= 7
        same += current == previous
        previous = current
    expected = 1.0 / 49
    assert same / iterations == pytest.approx(expected, rel=0.10)


def test_random_shape_computes_points_when_pivot_set():
    tetro = Tetromino(random.Random(7))
    tetro.set_pivot(6, 4)
    tetro.set_random_shape()
    points = tetro.points()
    assert len(points) == 4
    assert (6, 4) in points
    assert tetro.color() in {int(t) for t in TetrominoType}


def test_revert_undoes_move():
    tetro = make(4, 5, TetrominoType.T)
    original = tetro.points()
    tetro.move_left()
    tetro.revert()
    assert tetro.points() == original


def test_revert_undoes_rotation():
    tetro = make(5, 5, TetrominoType.L)
    original = tetro.points()
    tetro.rotate(True)
    assert tetro.points() != original
    tetro.revert()
    assert tetro.points() == original


def test_revert_without_save_keeps_state():
    tetro = Tetromino()
    tetro.revert()
    assert tetro.points() == []


def test_points_returns_copy():
    tetro = make(5, 5, TetrominoType.T)
    points = tetro.points()
    points.clear()
    assert len(tetro.points()) == 4


def test_four_left_rotations_return_to_start():
    tetro = make(8, 8, TetrominoType.J)
    original = sorted(tetro.points())
    for _ in range(4):
        tetro.rotate(False)
    assert sorted(tetro.points()) == original