"""Off-screen images: a pixel buffer with a fixed row stride."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, NamedTuple


class ImageType(IntEnum):
    """How an image's pixels reach the screen."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


class DataAddr(NamedTuple):
    """The pixel buffer of an image and how it is laid out."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


@dataclass(eq=False)
class Image:
    """A width x height image whose rows are padded to 32 bits."""

    width: int
    height: int
    bits_per_pixel: int = 32
    endian: int = 0
    image_type: ImageType = ImageType.XIMAGE
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian}")
        self.size_line = ((self.width * self.bits_per_pixel + 31) // 32) * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def data_addr(self) -> DataAddr:
        """Return the buffer, bits per pixel, row stride and byte order."""
        return DataAddr(self.data, self.bits_per_pixel, self.size_line, self.endian)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping as many low bytes as a pixel holds."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored value of the pixel at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bytes_per_pixel], self._byteorder
        )

    def rows(self) -> Iterator[memoryview]:
        """Yield each row of the buffer, padding included."""
        view = memoryview(self.data)
        for start in range(0, len(self.data), self.size_line):
            yield view[start:start + self.size_line]