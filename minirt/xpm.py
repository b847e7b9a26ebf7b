"""Reading XPM images into pixel arrays."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Iterable, Iterator, Optional, Union

from minirt.colornames import find_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_STRTOL_HEX = re.compile(
    r"[ \t\n\r\f\v]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; pixels are stored row by row as 32-bit values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, needle: str, limit: int) -> int:
    """Position of ``needle`` in ``text``, or -1.

    A needle longer than ``limit`` is never found.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skips matches inside double-quoted strings."""
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside strings with spaces; length is kept."""
    size = len(text)
    while (begin := find_unquoted(text, "/*", size)) != -1:
        end = find(text[begin + 2 :], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", size)) != -1:
        end = find(text[begin + 2 :], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _hex_to_int(digits: str) -> int:
    match = _STRTOL_HEX.match(digits)
    sign, body = match.group(1), match.group(2)
    value = int(body, 16) if body else 0
    if sign == "-":
        value = -value
    value = max(-(2**63), min(value, 2**63 - 1))
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Colour for an XPM colour spec: ``#hex`` or a (two-word) colour name.

    Unknown names give 0; "none" gives -1.
    """
    if name.startswith("#"):
        return _hex_to_int(name[1:])
    if suffix:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    color = find_color(name)
    return 0 if color is None else color


def _parse(next_line: Callable[[], str]) -> XpmImage:
    words = split_words(next_line())
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive integers")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = split_words(line[cpp:])
        try:
            spec = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if spec >= len(words):
            raise XpmError(f"colour line without colour value: {line!r}")
        suffix = words[spec + 1] if spec + 1 < len(words) else None
        rgb = text_to_rgb(words[spec], suffix)
        key = line[:cpp]
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line()
        for x in range(width):
            color = palette.get(line[cpp * x : cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def _reader(lines: Iterator[str]) -> Callable[[], str]:
    def next_line() -> str:
        line = next(lines, None)
        if line is None:
            raise XpmError("XPM data ends too early")
        return line

    return next_line


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its strings, without quotes."""
    return _parse(_reader(iter(lines)))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return _parse(_reader(_quoted_strings(strip_comments(text))))


def read_xpm_file(path: Union[str, PathLike]) -> XpmImage:
    """Read and decode an XPM file. OSError propagates if it cannot be read."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())