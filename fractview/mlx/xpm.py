"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from fractview.mlx.colornames import find_color
from fractview.mlx.image import Image

TRANSPARENT_PIXEL = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_outside_quotes(text: str, find: str) -> int:
    """Return the first position of ``find`` not inside double quotes, or -1."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > len(text):
        return -1
    in_quotes = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(find, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := find_outside_quotes(text, opener)) != -1:
            close = text.find(closer, begin + len(opener))
            stop = len(text) if close == -1 else close + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def extract_quoted_lines(text: str) -> list[str]:
    """Return the contents of successive double-quoted strings in ``text``."""
    lines: list[str] = []
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            break
        lines.append(text[start + 1:end])
        pos = end + 1
    return lines


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _LEADING_HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    return -value if sign == "-" else value


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Return the 0xRRGGBB value of an XPM colour spec.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among named colours; unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:63]
    color = find_color(name)
    return 0 if color is None else color


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    table: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "the colour table is complete")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        # Short keys: a later definition replaces an earlier one; long keys
        # keep the first definition.
        if cpp <= 2 or key not in table:
            table[key] = rgb
    return table


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(rows, "the header"))
    table = _read_colors(rows, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "all pixel rows are read")
        for x in range(width):
            color = table.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Sequence[str]) -> Image:
    """Build an image from XPM data given as its list of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(extract_quoted_lines(strip_comments(text)))