"""Mapping between screen and complex ranges, and iteration-count palettes."""

from __future__ import annotations

import math


def _c_remainder(dividend: int, divisor: int) -> int:
    """Integer remainder that takes the sign of the dividend."""
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


def _pack(red: int, green: int, blue: int) -> int:
    return (red << 16) | (green << 8) | blue


def _polynomial_color(t: float) -> int:
    red = int(9 * (1 - t) * t * t * t * 255)
    green = int(15 * (1 - t) * (1 - t) * t * t * 255)
    blue = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return _pack(red, green, blue)


def scale(
    value: float,
    min_screen: float,
    max_screen: float,
    min_complex: float,
    max_complex: float,
) -> float:
    """Map ``value`` linearly from the screen range onto the complex range."""
    if max_screen == min_screen:
        raise ValueError("screen range is empty")
    return min_complex + (value - min_screen) * (max_complex - min_complex) / (
        max_screen - min_screen
    )


def map_range(value: int, min1: int, max1: int, min2: float, max2: float) -> float:
    """Map the integer ``value`` linearly from [min1, max1] onto [min2, max2]."""
    if max1 == min1:
        raise ValueError("source range is empty")
    return min2 + (value - min1) * (max2 - min2) / (max1 - min1)


def get_color(iteration: int, max_iter: int) -> int:
    """Return a 0xRRGGBB colour for an escape count; points inside are white."""
    if iteration == max_iter:
        return 0xFFFFFF
    if max_iter == 0:
        raise ValueError("max_iter must not be zero")
    return _polynomial_color(iteration / max_iter)


def get_psychedelic_color(iteration: int, max_iter: int) -> int:
    """Return a sine-wave colour for an escape count; ``max_iter`` is unused."""
    del max_iter
    red = int(math.sin(0.16 * iteration + 0) * 127 + 128)
    green = int(math.sin(0.16 * iteration + 2) * 127 + 128)
    blue = int(math.sin(0.16 * iteration + 4) * 127 + 128)
    return _pack(red, green, blue)


def get_shifted_color(iteration: int, max_iter: int, shift: int) -> int:
    """Return the palette colour of ``iteration + shift`` wrapped below ``max_iter``."""
    if max_iter == 0:
        raise ValueError("max_iter must not be zero")
    wrapped = _c_remainder(iteration + int(shift), max_iter)
    return _polynomial_color(wrapped / max_iter)