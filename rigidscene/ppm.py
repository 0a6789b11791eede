"""Reading and writing PPM (P3 and P6) images."""

from __future__ import annotations

import io
import warnings
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, Union

_WHITESPACE = b" \t\r\n"
_DIGITS = b"0123456789"

PathType = Union[str, "PathLike[str]"]


class PpmError(Exception):
    """Raised when a PPM file cannot be read or is malformed."""


@dataclass(frozen=True)
class PackedPixel:
    """The red, green and blue bytes of one pixel."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class PpmImage:
    """An image whose pixels run row by row from the bottom row up."""

    width: int
    height: int
    pixels: tuple[PackedPixel, ...]

    def pixel(self, x: int, y: int) -> PackedPixel:
        """Pixel at column ``x`` of row ``y``, counting rows from the bottom."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def _read_byte(stream: BinaryIO) -> int:
    ch = stream.read(1)
    if not ch:
        raise PpmError("ppmRead: unexpected end of file")
    return ch[0]


def _read_integer(stream: BinaryIO) -> int:
    """Read one non-negative integer; lines from '#' on are comments."""
    got = False
    in_comment = False
    accum = 0
    while True:
        ch = _read_byte(stream)
        if in_comment:
            if ch == ord("\n"):
                in_comment = False
            continue
        if ch in _DIGITS:
            accum = accum * 10 + ch - ord("0")
            got = True
        elif ch == ord("#"):
            in_comment = True
        elif ch not in _WHITESPACE:
            raise PpmError("ppmRead: invalid character")
        elif got:
            return accum


def _read_image(stream: BinaryIO) -> PpmImage:
    magic = stream.read(2)
    if len(magic) < 2:
        raise PpmError("ppmRead: unexpected end of file")
    if magic == b"P3":
        binary = False
    elif magic == b"P6":
        binary = True
    else:
        raise PpmError("ppmRead: bad file format")

    width = _read_integer(stream)
    height = _read_integer(stream)
    if _read_integer(stream) != 255:
        warnings.warn("maxcolor not 255 : won't work well", stacklevel=3)

    rows: list[list[PackedPixel]] = []
    for _ in range(height):
        if binary:
            data = stream.read(3 * width)
            if len(data) < 3 * width:
                raise PpmError("ppmRead: unexpected end of file")
            row = [PackedPixel(*data[k:k + 3]) for k in range(0, 3 * width, 3)]
        else:
            row = [
                PackedPixel(*(_read_integer(stream) % 256 for _ in range(3)))
                for _ in range(width)
            ]
        rows.append(row)
    # The file stores the top row first; pixels are kept bottom row first.
    pixels = tuple(p for row in reversed(rows) for p in row)
    return PpmImage(width, height, pixels)


def parse_ppm(data: bytes) -> PpmImage:
    """Parse a PPM image held in memory."""
    return _read_image(io.BytesIO(data))


def read_ppm(filename: PathType) -> PpmImage:
    """Read a PPM image from a file."""
    try:
        stream = open(filename, "rb")
    except OSError as exc:
        raise PpmError(f"ppmRead: Cannot open file {filename} for read") from exc
    with stream:
        return _read_image(stream)


def write_ppm(
    filename: PathType, width: int, height: int, rgb_bottom_up: bytes
) -> None:
    """Write RGB bytes, stored bottom row first, as a binary PPM file."""
    row_len = 3 * width
    if len(rgb_bottom_up) != row_len * height:
        raise ValueError(
            f"expected {row_len * height} bytes of RGB data, got {len(rgb_bottom_up)}"
        )
    with open(filename, "wb") as f:
        f.write(f"P6 {width} {height} 255\n".encode("ascii"))
        for start in range(row_len * (height - 1), -1, -row_len) if height else ():
            f.write(bytes(rgb_bottom_up[start:start + row_len]))