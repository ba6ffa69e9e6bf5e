import pytest

from termtetris.terminal import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Color,
    MockTerminalManager,
    TerminalManager,
    UserInput,
)


def test_color_keeps_components():
    color = Color(0.65, 0.16, 0.16)
    assert (color.red, color.green, color.blue) == (0.65, 0.16, 0.16)


@pytest.mark.parametrize("components", [(1.5, 0.0, 0.0), (0.0, -0.1, 0.0), (0.0, 0.0, 2.0)])
def test_color_rejects_out_of_range(components):
    with pytest.raises(ValueError):
        Color(*components)


def test_color_accepts_bounds():
    assert Color(0.0, 1.0, 0.0).green == 1.0


@pytest.mark.parametrize(
    "code, check",
    [
        (KEY_ESCAPE, "is_escape"),
        (KEY_LEFT, "is_key_left"),
        (KEY_RIGHT, "is_key_right"),
        (KEY_UP, "is_key_up"),
        (KEY_DOWN, "is_key_down"),
    ],
)
def test_user_input_key_checks(code, check):
    checks = ["is_escape", "is_key_left", "is_key_right", "is_key_up", "is_key_down"]
    user_input = UserInput(keycode=code)
    results = {name: getattr(user_input, name)() for name in checks}
    assert results[check] is True
    assert sum(results.values()) == 1


def test_user_input_mouseclick():
    assert not UserInput(keycode=ord("q")).is_mouseclick()
    assert UserInput(mouse_row=3, mouse_col=4).is_mouseclick()


def test_terminal_manager_is_abstract():
    with pytest.raises(TypeError):
        TerminalManager()


def test_mock_dimensions():
    tm = MockTerminalManager(30, 60)
    assert tm.num_rows() == 30
    assert tm.num_cols() == 60


def test_mock_draw_pixel_records_color():
    tm = MockTerminalManager(30, 60)
    assert not tm.is_pixel_drawn(5, 7)
    tm.draw_pixel(5, 7, 3)
    assert tm.is_pixel_drawn(5, 7)
    assert tm.color_at(5, 7) == 3
    assert tm.color_at(5, 8) == 0


def test_mock_erase_with_zero():
    tm = MockTerminalManager(30, 60)
    tm.draw_pixel(2, 2, 9)
    tm.draw_pixel(2, 2, 0)
    assert not tm.is_pixel_drawn(2, 2)
    assert tm.color_at(2, 2) == 0


def test_mock_draw_string_marks_cell():
    tm = MockTerminalManager(30, 60)
    tm.draw_string(3, 17, 1, "Next")
    assert tm.color_at(3, 17) == -1
    assert tm.is_pixel_drawn(3, 17)


def test_mock_user_input_is_empty():
    user_input = MockTerminalManager(30, 60).get_user_input()
    assert not user_input.is_mouseclick()
    assert not user_input.is_key_down()


def test_mock_rejects_cells_outside_storage():
    tm = MockTerminalManager(30, 60)
    with pytest.raises(IndexError):
        tm.draw_pixel(-1, 0, 1)
    with pytest.raises(IndexError):
        tm.color_at(MockTerminalManager.MAX_NUM_CELLS, 0)