"""View state of the fractal viewer and its response to keys and the mouse."""

from __future__ import annotations

from dataclasses import dataclass

from fractview.config import FractalType, ViewConfig
from fractview.fractals import (
    HEIGHT,
    KEY_ESC,
    MAX_ITER,
    WIDTH,
    ZOOM_FACTOR,
    render_julia,
    render_mandelbrot,
    render_tricorn,
    screen_to_complex,
)
from fractview.mlx.image import Image

KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_KP_PLUS = 65451
KEY_KP_MINUS = 65453

BUTTON_LEFT = 1
BUTTON_WHEEL_UP = 4
BUTTON_WHEEL_DOWN = 5

PAN_STEP = 0.1
KEY_ZOOM = 1.2
WHEEL_ZOOM = 1.2


@dataclass
class ViewState:
    """Which fractal is shown, where, and how the pointer is dragging it."""

    fractal_type: FractalType = FractalType.MANDELBROT
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    max_iter: int = MAX_ITER
    is_dragging: bool = False
    last_x: int = 0
    last_y: int = 0
    need_redraw: bool = True

    @classmethod
    def from_config(cls, config: ViewConfig) -> "ViewState":
        """Start from the view given on the command line."""
        return cls(
            fractal_type=config.fractal_type,
            zoom=config.zoom,
            offset_x=config.offset_x,
            offset_y=config.offset_y,
            max_iter=config.max_iter,
        )

    def key_press(self, keycode: int) -> bool:
        """Pan with the arrows, zoom with keypad + and -.

        Returns True when the key asks the viewer to quit.
        """
        if keycode == KEY_ESC:
            return True
        if keycode == KEY_UP:
            self.offset_y -= PAN_STEP / self.zoom
        elif keycode == KEY_DOWN:
            self.offset_y += PAN_STEP / self.zoom
        elif keycode == KEY_LEFT:
            self.offset_x -= PAN_STEP / self.zoom
        elif keycode == KEY_RIGHT:
            self.offset_x += PAN_STEP / self.zoom
        elif keycode == KEY_KP_PLUS:
            self.zoom *= KEY_ZOOM
        elif keycode == KEY_KP_MINUS:
            self.zoom /= KEY_ZOOM
        return False

    def mouse_wheel(self, button: int, x: int, y: int) -> bool:
        """Zoom by 1.2 about the pointer, keeping the point under it in place.

        Returns True when the button was a wheel button.
        """
        if button not in (BUTTON_WHEEL_UP, BUTTON_WHEEL_DOWN):
            return False
        factor = WHEEL_ZOOM if button == BUTTON_WHEEL_UP else 1 / WHEEL_ZOOM
        re, im = screen_to_complex(x, y, self.zoom, self.offset_x, self.offset_y)
        self.zoom *= factor
        dx, dy = screen_to_complex(x, y, self.zoom, 0.0, 0.0)
        self.offset_x = re - dx
        self.offset_y = im - dy
        self.need_redraw = True
        return True

    def mouse_press(self, button: int, x: int, y: int) -> None:
        """Start a drag with the left button; zoom with the wheel."""
        if button == BUTTON_LEFT:
            self.is_dragging = True
            self.last_x = x
            self.last_y = y
        elif button in (BUTTON_WHEEL_UP, BUTTON_WHEEL_DOWN):
            sx = x / WIDTH * 3.0 - 2.0
            sy = y / HEIGHT * 3.0 - 1.5
            re = sx / self.zoom + self.offset_x
            im = sy / self.zoom + self.offset_y
            if button == BUTTON_WHEEL_UP:
                self.zoom *= ZOOM_FACTOR
            else:
                self.zoom /= ZOOM_FACTOR
            self.offset_x = re - sx / self.zoom
            self.offset_y = im - sy / self.zoom
            self.need_redraw = True

    def mouse_release(self, button: int, x: int, y: int) -> None:
        """End a drag when the left button is released."""
        del x, y
        if button == BUTTON_LEFT:
            self.is_dragging = False

    def mouse_move(self, x: int, y: int) -> None:
        """While dragging, move the view along with the pointer."""
        if not self.is_dragging:
            return
        dx = x - self.last_x
        dy = y - self.last_y
        self.offset_x -= dx / (0.5 * self.zoom * WIDTH)
        self.offset_y -= dy / (0.5 * self.zoom * HEIGHT)
        self.last_x = x
        self.last_y = y
        self.need_redraw = True

    def render(self, image: Image) -> None:
        """Draw the current fractal into ``image`` and clear the redraw flag."""
        if self.fractal_type == FractalType.MANDELBROT:
            render_mandelbrot(image, self.zoom, self.offset_x, self.offset_y)
        elif self.fractal_type == FractalType.JULIA:
            render_julia(image, self.zoom, self.offset_x, self.offset_y)
        elif self.fractal_type == FractalType.TRICORN:
            render_tricorn(
                image, self.zoom, self.offset_x, self.offset_y, self.max_iter
            )
        self.need_redraw = False