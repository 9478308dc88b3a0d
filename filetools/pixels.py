"""Write and read a binary file of RGB pixels."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NUM_PIXELS = 10
DEFAULT_PATH = "image.dat"
_FORMAT = struct.Struct("3B")


@dataclass(frozen=True)
class Pixel:
    """One pixel with 8-bit red, green and blue channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for value in (self.red, self.green, self.blue):
            if not 0 <= value <= 255:
                raise ValueError(f"channel value out of range: {value}")

    def pack(self) -> bytes:
        """Return the three-byte encoding of the pixel."""
        return _FORMAT.pack(self.red, self.green, self.blue)

    @classmethod
    def unpack(cls, data: bytes) -> Pixel:
        """Build a pixel from exactly three bytes."""
        if len(data) != _FORMAT.size:
            raise ValueError(f"expected {_FORMAT.size} bytes, got {len(data)}")
        return cls(*_FORMAT.unpack(data))


def generate_pixels(count: int) -> Iterator[Pixel]:
    """Yield the sample pixels for n = 1 .. count - 1."""
    for n in range(1, count):
        yield Pixel(n & 0xFF, (5 * n) & 0xFF, (1 << (n % 6)) & 0xFF)


def write_pixels(path: str | os.PathLike, pixels: Iterable[Pixel]) -> int:
    """Write *pixels* to *path* and return how many were written."""
    written = 0
    with open(path, "wb") as fh:
        for pixel in pixels:
            fh.write(pixel.pack())
            written += 1
    return written


def read_pixels(path: str | os.PathLike) -> list[Pixel]:
    """Read every pixel stored in *path*."""
    with open(path, "rb") as fh:
        data = fh.read()
    if len(data) % _FORMAT.size:
        raise ValueError("file length is not a whole number of pixels")
    return [Pixel(*values) for values in _FORMAT.iter_unpack(data)]


def main(argv: list[str] | None = None) -> int:
    """Write the sample pixels to image.dat."""
    try:
        write_pixels(DEFAULT_PATH, generate_pixels(NUM_PIXELS))
    except OSError:
        print("Error opening file")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())