"""Command-line options of the fractal viewer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from fractview.fractals import MAX_ITER

USAGE = "Usage: fractview [mandelbrot|julia|tricorn] [options]"

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class FractalType(IntEnum):
    """The fractals the viewer can draw."""

    MANDELBROT = 1
    JULIA = 2
    TRICORN = 3


class ArgumentError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class ViewConfig:
    """What to draw and the starting view."""

    fractal_type: FractalType
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    max_iter: int = MAX_ITER


def _atof(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _fractal_type(name: str) -> FractalType:
    # A name is accepted when it begins with the fractal's full name.
    for prefix, kind in (
        ("mandelbrot", FractalType.MANDELBROT),
        ("julia", FractalType.JULIA),
        ("tricorn", FractalType.TRICORN),
    ):
        if name.startswith(prefix):
            return kind
    raise ArgumentError("Error: Unknown fractal type")


def parse_args(argv: Sequence[str]) -> ViewConfig:
    """Build a view from the arguments that follow the program name.

    The first argument names the fractal; then come ``-zoom Z``,
    ``-offset X Y`` and ``-iter N`` in any order.
    """
    if not argv:
        raise ArgumentError(USAGE)
    config = ViewConfig(_fractal_type(argv[0]))
    args = list(argv)
    i = 1
    while i < len(args):
        option = args[i]
        remaining = len(args) - i - 1
        if option.startswith("-zoom") and remaining >= 1:
            config.zoom = _atof(args[i + 1])
            i += 2
        elif option.startswith("-offset") and remaining >= 2:
            config.offset_x = _atof(args[i + 1])
            config.offset_y = _atof(args[i + 2])
            i += 3
        elif option.startswith("-iter") and remaining >= 1:
            config.max_iter = _atoi(args[i + 1])
            i += 2
        else:
            raise ArgumentError("Error: Invalid arguments")
    return config