"""Reading binary PPM images."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from .errors import FatalError

COLOR_CHANNELS = 3

_WHITESPACE = b" \t\n\v\f\r"


class PpmError(FatalError):
    """A PPM file that cannot be opened or is malformed."""


@dataclass(frozen=True)
class PpmImage:
    """An image's dimensions and its raw RGB bytes, three per pixel."""

    width: int
    height: int
    maxval: int
    data: bytes


def _skip_whitespace(raw: bytes, pos: int) -> int:
    while pos < len(raw) and raw[pos] in _WHITESPACE:
        pos += 1
    return pos


def _read_magic(raw: bytes, pos: int) -> tuple[bytes, int]:
    pos = _skip_whitespace(raw, pos)
    end = pos
    while end < len(raw) and end - pos < 2 and raw[end] not in _WHITESPACE:
        end += 1
    if end == pos:
        raise PpmError("Invalid PPM format (magic number)")
    return raw[pos:end], end


def _read_unsigned(raw: bytes, pos: int) -> tuple[int, int]:
    pos = _skip_whitespace(raw, pos)
    end = pos
    while end < len(raw) and 0x30 <= raw[end] <= 0x39:
        end += 1
    if end == pos:
        raise PpmError("Invalid PPM header")
    return int(raw[pos:end]), end


def parse_ppm(raw: bytes) -> PpmImage:
    """Parse the contents of a binary PPM file."""
    _magic, pos = _read_magic(raw, 0)
    width, pos = _read_unsigned(raw, pos)
    height, pos = _read_unsigned(raw, pos)
    maxval, pos = _read_unsigned(raw, pos)
    pos = _skip_whitespace(raw, pos)

    length = COLOR_CHANNELS * width * height
    data = raw[pos:pos + length]
    if len(data) != length:
        raise PpmError("Unexpected end of file while reading image data")
    return PpmImage(width=width, height=height, maxval=maxval, data=bytes(data))


def read_ppm(path: str | PathLike[str]) -> PpmImage:
    """Read and parse the PPM file at ``path``."""
    try:
        with open(path, "rb") as stream:
            raw = stream.read()
    except OSError as exc:
        raise PpmError("File not found") from exc
    return parse_ppm(raw)