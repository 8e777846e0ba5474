#!/usr/bin/env python

"""
Parser for LS_COLORS-style strings.

A string is a list of ``key=value`` pairs separated by colons, where each
value is a list of SGR codes separated by semicolons, e.g.
``di=1;34:*.txt=38;5;100``.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from rich.color import Color

from .style import Style, fixed, rgb


# 30-37 / 40-47 pick ANSI colours 0-7, 90-97 / 100-107 the bright ones
FOREGROUND_CODES = {str(30 + n): n for n in range(8)}
FOREGROUND_CODES.update({str(90 + n): 8 + n for n in range(8)})

BACKGROUND_CODES = {str(40 + n): n for n in range(8)}
BACKGROUND_CODES.update({str(100 + n): 8 + n for n in range(8)})

ATTRIBUTE_CODES = {
    "1": "bold",
    "2": "dimmed",
    "3": "italic",
    "4": "underline",
    "5": "blink",
    # 6 is a rapid blink that nothing supports
    "7": "reverse",
    "8": "hidden",
    "9": "strikethrough",
}


def _parse_byte(text: Optional[str]) -> Optional[int]:
    if text is None or not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value > 255:
        return None
    return value


class _Codes:
    """Iterator over SGR codes that can peek one ahead."""

    def __init__(self, value: str):
        self._codes: List[str] = value.split(";")
        self._pos = 0

    def __iter__(self) -> "_Codes":
        return self

    def __next__(self) -> str:
        code = self.next()
        if code is None:
            raise StopIteration
        return code

    def next(self) -> Optional[str]:
        if self._pos >= len(self._codes):
            return None
        code = self._codes[self._pos]
        self._pos += 1
        return code

    def peek(self) -> Optional[str]:
        if self._pos >= len(self._codes):
            return None
        return self._codes[self._pos]


def parse_high_colour(codes: _Codes) -> Optional[Color]:
    """Read the rest of a ``38;...`` or ``48;...`` sequence.

    ``5;N`` is a palette colour and ``2;R;G;B`` a true colour. Whatever was
    read is consumed even if it turns out to be malformed.
    """
    kind = codes.peek()
    if kind == "5":
        codes.next()
        number = _parse_byte(codes.next())
        if number is not None:
            return fixed(number)
    elif kind == "2":
        codes.next()
        red = _parse_byte(codes.next())
        green = _parse_byte(codes.next())
        blue = _parse_byte(codes.next())
        if red is not None and green is not None and blue is not None:
            return rgb(red, green, blue)
    return None


def parse_style(value: str) -> Style:
    """Turn a ``;``-separated SGR code list into a Style.

    Unknown or malformed codes are skipped, so this never fails.
    """
    style = Style()
    codes = _Codes(value)

    for code in codes:
        code = code.lstrip("0")

        if code in ATTRIBUTE_CODES:
            style = getattr(style, ATTRIBUTE_CODES[code])()
        elif code in FOREGROUND_CODES:
            style = style.fg(fixed(FOREGROUND_CODES[code]))
        elif code in BACKGROUND_CODES:
            style = style.on(fixed(BACKGROUND_CODES[code]))
        elif code == "38":
            colour = parse_high_colour(codes)
            if colour is not None:
                style = style.fg(colour)
        elif code == "48":
            colour = parse_high_colour(codes)
            if colour is not None:
                style = style.on(colour)

    return style


@dataclass(frozen=True)
class Pair:
    key: str
    value: str

    def to_style(self) -> Style:
        return parse_style(self.value)


class LSColors:
    """One LS_COLORS-style definition string."""

    def __init__(self, definition: str):
        self.definition = definition

    def pairs(self) -> Iterator[Pair]:
        """Yield each well-formed ``key=value`` pair, left to right.

        Pieces without an ``=``, or with an empty key or value, are skipped.
        """
        for piece in self.definition.split(":"):
            key, sep, value = piece.partition("=")
            if sep and key and value:
                yield Pair(key, value)
