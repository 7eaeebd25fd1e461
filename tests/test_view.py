import pytest

from fractview.config import FractalType, ViewConfig
from fractview.fractals import (
    KEY_ESC,
    render_julia,
    render_mandelbrot,
    render_tricorn,
    screen_to_complex,
)
from fractview.mlx.image import Image
from fractview.view import (
    KEY_DOWN,
    KEY_KP_MINUS,
    KEY_KP_PLUS,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    ViewState,
)


def _snapshot(state):
    return (state.zoom, state.offset_x, state.offset_y, state.is_dragging)


def test_from_config_copies_view():
    config = ViewConfig(FractalType.TRICORN, zoom=2.5, offset_x=0.25, offset_y=-0.5, max_iter=40)
    state = ViewState.from_config(config)
    assert (state.fractal_type, state.zoom, state.offset_x, state.offset_y, state.max_iter) == (
        FractalType.TRICORN, 2.5, 0.25, -0.5, 40
    )
    assert state.need_redraw is True
    assert state.is_dragging is False


def test_escape_requests_quit_without_change():
    state = ViewState()
    before = _snapshot(state)
    assert state.key_press(KEY_ESC) is True
    assert _snapshot(state) == before


def test_unknown_key_changes_nothing():
    state = ViewState(zoom=2.0, offset_x=0.5)
    before = _snapshot(state)
    assert state.key_press(ord("a")) is False
    assert _snapshot(state) == before


@pytest.mark.parametrize(
    "key, dx, dy",
    [(KEY_UP, 0.0, -0.1), (KEY_DOWN, 0.0, 0.1), (KEY_LEFT, -0.1, 0.0), (KEY_RIGHT, 0.1, 0.0)],
)
def test_arrows_pan_by_tenth(key, dx, dy):
    state = ViewState()
    assert state.key_press(key) is False
    assert state.offset_x == pytest.approx(dx)
    assert state.offset_y == pytest.approx(dy)


def test_pan_step_shrinks_with_zoom():
    state = ViewState(zoom=4.0)
    state.key_press(KEY_RIGHT)
    wide = ViewState(zoom=1.0)
    wide.key_press(KEY_RIGHT)
    assert state.offset_x * 4.0 == pytest.approx(wide.offset_x)


def test_keypad_zoom_round_trip():
    state = ViewState(zoom=3.0)
    state.key_press(KEY_KP_PLUS)
    assert state.zoom == pytest.approx(3.0 * 1.2)
    state.key_press(KEY_KP_MINUS)
    assert state.zoom == pytest.approx(3.0)


@pytest.mark.parametrize("button", [4, 5])
def test_mouse_wheel_keeps_point_under_pointer(button):
    state = ViewState(zoom=1.5, offset_x=-0.3, offset_y=0.2)
    x, y = 123, 456
    before = screen_to_complex(x, y, state.zoom, state.offset_x, state.offset_y)
    state.need_redraw = False
    assert state.mouse_wheel(button, x, y) is True
    after = screen_to_complex(x, y, state.zoom, state.offset_x, state.offset_y)
    assert after == pytest.approx(before)
    assert state.need_redraw is True


def test_mouse_wheel_zoom_direction():
    state = ViewState()
    state.mouse_wheel(4, 10, 10)
    assert state.zoom > 1.0
    other = ViewState()
    other.mouse_wheel(5, 10, 10)
    assert other.zoom < 1.0


def test_mouse_wheel_ignores_other_buttons():
    state = ViewState()
    before = _snapshot(state)
    assert state.mouse_wheel(1, 10, 10) is False
    assert _snapshot(state) == before


def test_mouse_press_wheel_up_uses_zoom_factor():
    state = ViewState()
    state.need_redraw = False
    state.mouse_press(4, 400, 300)
    assert state.zoom == pytest.approx(1.1)
    assert state.need_redraw is True


def test_mouse_press_zoom_in_then_out_round_trip():
    state = ViewState(zoom=2.0, offset_x=0.1, offset_y=-0.2)
    state.mouse_press(4, 250, 170)
    state.mouse_press(5, 250, 170)
    assert state.zoom == pytest.approx(2.0)
    assert state.offset_x == pytest.approx(0.1)
    assert state.offset_y == pytest.approx(-0.2)


def test_drag_keeps_grabbed_point_under_pointer():
    state = ViewState(zoom=1.3)
    state.mouse_press(1, 100, 100)
    assert state.is_dragging is True
    grabbed = screen_to_complex(100, 100, state.zoom, state.offset_x, state.offset_y)
    state.need_redraw = False
    state.mouse_move(140, 130)
    now = screen_to_complex(140, 130, state.zoom, state.offset_x, state.offset_y)
    assert now == pytest.approx(grabbed)
    assert (state.last_x, state.last_y) == (140, 130)
    assert state.need_redraw is True


def test_move_without_drag_changes_nothing():
    state = ViewState()
    state.need_redraw = False
    state.mouse_move(50, 60)
    assert (state.offset_x, state.offset_y, state.need_redraw) == (0.0, 0.0, False)


def test_release_ends_drag_only_for_left_button():
    state = ViewState()
    state.mouse_press(1, 5, 5)
    state.mouse_release(3, 5, 5)
    assert state.is_dragging is True
    state.mouse_release(1, 5, 5)
    assert state.is_dragging is False
    state.mouse_move(90, 90)
    assert state.offset_x == 0.0


@pytest.mark.parametrize("kind", list(FractalType))
def test_render_matches_fractal_renderer(kind):
    state = ViewState(fractal_type=kind, zoom=0.8, offset_x=-0.4, offset_y=0.1, max_iter=50)
    image = Image(5, 3)
    state.render(image)
    expected = Image(5, 3)
    if kind == FractalType.MANDELBROT:
        render_mandelbrot(expected, 0.8, -0.4, 0.1)
    elif kind == FractalType.JULIA:
        render_julia(expected, 0.8, -0.4, 0.1)
    else:
        render_tricorn(expected, 0.8, -0.4, 0.1, 50)
    assert image.data == expected.data
    assert state.need_redraw is False