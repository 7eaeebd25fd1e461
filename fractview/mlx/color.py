"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from dataclasses import dataclass


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    bits = mask >> shift
    width = (~bits & (bits + 1)).bit_length() - 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, width) for red, green and blue, flattened into six ints.

    The shift is the position of the lowest set bit of a mask and the width
    the number of consecutive set bits from there.
    """
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_shift_and_width(mask))
    return tuple(result)


@dataclass(frozen=True)
class VisualFormat:
    """Depth and channel layout of a TrueColor visual."""

    depth: int = 24
    shifts: tuple[int, ...] = (16, 8, 8, 8, 0, 8)

    @classmethod
    def from_masks(
        cls, depth: int, red_mask: int, green_mask: int, blue_mask: int
    ) -> "VisualFormat":
        """Build a format from the channel masks of a visual."""
        return cls(depth, mask_shifts(red_mask, green_mask, blue_mask))

    def good_color(self, color: int) -> int:
        """Return the pixel value that shows ``color`` on this visual."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        red_shift, red_width, green_shift, green_width, blue_shift, blue_width = (
            self.shifts
        )
        return (
            ((red >> (16 - red_width)) << red_shift)
            + ((green >> (16 - green_width)) << green_shift)
            + ((blue >> (16 - blue_width)) << blue_shift)
        )