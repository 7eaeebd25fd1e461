"""Escape-time iteration for the Mandelbrot, Julia and Tricorn sets."""

from __future__ import annotations

from fractview.colors import get_shifted_color
from fractview.mlx.image import Image

WIDTH = 800
HEIGHT = 600
MAX_ITER = 100
ZOOM_FACTOR = 1.1
KEY_ESC = 65307

JULIA_CR = -0.8
JULIA_CI = 0.156

# The palette shift for Mandelbrot and Julia is a fraction that falls to zero
# once taken as a whole number of iterations.
_DEFAULT_SHIFT = 0
_TRICORN_SHIFT = 3

_ESCAPE_RADIUS_SQUARED = 4.0


def screen_to_complex(
    x: float, y: float, zoom: float, offset_x: float, offset_y: float
) -> tuple[float, float]:
    """Return the complex point shown at window pixel (x, y)."""
    re = (x - WIDTH / 2.0) / (0.5 * zoom * WIDTH) + offset_x
    im = (y - HEIGHT / 2.0) / (0.5 * zoom * HEIGHT) + offset_y
    return re, im


def mandelbrot_iterations(re: float, im: float) -> int:
    """Count iterations of z*z + c from zero before |z| exceeds 2."""
    zr = zi = 0.0
    iteration = 0
    while zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED and iteration < MAX_ITER:
        zr, zi = zr * zr - zi * zi + re, 2.0 * zr * zi + im
        iteration += 1
    return iteration


def julia_iterations(zr: float, zi: float, cr: float, ci: float) -> int:
    """Count iterations of z*z + c from z before |z| exceeds 2."""
    iteration = 0
    while zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED and iteration < MAX_ITER:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        iteration += 1
    return iteration


def tricorn_iterations(cr: float, ci: float) -> int:
    """Count iterations of conj(z)**2 + c from zero before |z| exceeds 2."""
    zr = zi = 0.0
    iteration = 0
    while zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED and iteration < MAX_ITER:
        zr, zi = zr * zr - zi * zi + cr, -2.0 * zr * zi + ci
        iteration += 1
    return iteration


def _pixels(image: Image, zoom: float, offset_x: float, offset_y: float):
    for y in range(image.height):
        for x in range(image.width):
            yield x, y, screen_to_complex(x, y, zoom, offset_x, offset_y)


def render_mandelbrot(image: Image, zoom: float, offset_x: float, offset_y: float) -> None:
    """Draw the Mandelbrot set; pixel (x, y) shows window pixel (x, y)."""
    for x, y, (re, im) in _pixels(image, zoom, offset_x, offset_y):
        count = mandelbrot_iterations(re, im)
        image.put_pixel(x, y, get_shifted_color(count, MAX_ITER, _DEFAULT_SHIFT))


def render_julia(image: Image, zoom: float, offset_x: float, offset_y: float) -> None:
    """Draw the Julia set of c = -0.8 + 0.156i."""
    for x, y, (zr, zi) in _pixels(image, zoom, offset_x, offset_y):
        count = julia_iterations(zr, zi, JULIA_CR, JULIA_CI)
        image.put_pixel(x, y, get_shifted_color(count, MAX_ITER, _DEFAULT_SHIFT))


def render_tricorn(
    image: Image, zoom: float, offset_x: float, offset_y: float, max_iter: int
) -> None:
    """Draw the Tricorn, colouring escape counts against ``max_iter``."""
    for x, y, (cr, ci) in _pixels(image, zoom, offset_x, offset_y):
        count = tricorn_iterations(cr, ci)
        image.put_pixel(x, y, get_shifted_color(count, max_iter, _TRICORN_SHIFT))