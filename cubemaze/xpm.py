"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re

from cubemaze.colors import lookup_color
from cubemaze.image import Image

_TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"[+-]?(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text):
    """Split text into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text, token):
    in_quote = False
    for index, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(token, index):
            return index
    return -1


def strip_comments(text):
    """Blank out /* */ and // comments that lie outside double quotes.

    Comment characters are replaced by spaces, so the length is kept.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (start := _find_unquoted(text, opener)) != -1:
            end = text.find(closer, start + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def text_to_rgb(name, extra):
    """Return the colour a XPM colour word names.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined to
    ``extra`` with a space when given) is looked up in the colour table;
    unknown names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        digits = _HEX.match(name[1:])
        text = digits.group(0) if digits and digits.group(1) else ""
        return _to_int32(int(text, 16)) if text else 0
    if extra:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(text):
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _read_header(line):
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"bad XPM header: {line!r}")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _read_colors(rows, ncolors, cpp):
    # One or two characters per pixel: a later definition replaces an
    # earlier one. Longer keys: the first definition is kept.
    replace = cpp <= 2
    colors = {}
    for _ in range(ncolors):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends inside the colour table")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without colour: {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        value = text_to_rgb(words[index], extra)
        key = line[:cpp]
        if replace:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def parse_xpm(lines):
    """Build an Image from the quoted strings of an XPM pixmap."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        raise XpmError("empty XPM data")
    width, height, ncolors, cpp = _read_header(header)
    colors = _read_colors(rows, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends before the last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} too short")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def load_xpm(path):
    """Read an XPM file and return it as an Image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(_QUOTED.findall(strip_comments(text)))