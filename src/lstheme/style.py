#!/usr/bin/env python

"""
Style values for the theme engine.

A Style is a foreground colour, a background colour and eight on/off
attributes. Colours are plain ``rich.color.Color`` values so a Style can be
handed to Rich for rendering without translation tables.
"""

from dataclasses import dataclass, replace
from typing import Optional

from rich.color import Color
from rich.style import Style as RichStyle


def fixed(number: int) -> Color:
    """Colour from the 256-colour palette (``38;5;N``)."""
    return Color.from_ansi(number)


def rgb(red: int, green: int, blue: int) -> Color:
    """True colour (``38;2;R;G;B``)."""
    return Color.from_rgb(red, green, blue)


BLACK = fixed(0)
RED = fixed(1)
GREEN = fixed(2)
YELLOW = fixed(3)
BLUE = fixed(4)
PURPLE = fixed(5)
CYAN = fixed(6)
WHITE = fixed(7)

DARK_GRAY = fixed(8)
BRIGHT_RED = fixed(9)
BRIGHT_GREEN = fixed(10)
BRIGHT_YELLOW = fixed(11)
BRIGHT_BLUE = fixed(12)
BRIGHT_PURPLE = fixed(13)
BRIGHT_CYAN = fixed(14)
BRIGHT_GRAY = fixed(15)


ATTRIBUTES = (
    "is_bold",
    "is_dimmed",
    "is_italic",
    "is_underline",
    "is_blink",
    "is_reverse",
    "is_hidden",
    "is_strikethrough",
)


@dataclass(frozen=True)
class Style:
    """Immutable text style: two optional colours plus attribute flags."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    @classmethod
    def of(cls, colour: Color) -> "Style":
        """Plain style with just a foreground colour."""
        return cls(foreground=colour)

    def fg(self, colour: Color) -> "Style":
        return replace(self, foreground=colour)

    def on(self, colour: Color) -> "Style":
        return replace(self, background=colour)

    def bold(self) -> "Style":
        return replace(self, is_bold=True)

    def dimmed(self) -> "Style":
        return replace(self, is_dimmed=True)

    def italic(self) -> "Style":
        return replace(self, is_italic=True)

    def underline(self) -> "Style":
        return replace(self, is_underline=True)

    def blink(self) -> "Style":
        return replace(self, is_blink=True)

    def reverse(self) -> "Style":
        return replace(self, is_reverse=True)

    def hidden(self) -> "Style":
        return replace(self, is_hidden=True)

    def strikethrough(self) -> "Style":
        return replace(self, is_strikethrough=True)

    def is_plain(self) -> bool:
        return self == Style()

    def to_rich(self) -> RichStyle:
        """Convert to a Rich style.

        Unset attributes are left as ``None`` so the result composes with
        other Rich styles instead of forcing attributes off.
        """
        return RichStyle(
            color=self.foreground,
            bgcolor=self.background,
            bold=self.is_bold or None,
            dim=self.is_dimmed or None,
            italic=self.is_italic or None,
            underline=self.is_underline or None,
            blink=self.is_blink or None,
            reverse=self.is_reverse or None,
            conceal=self.is_hidden or None,
            strike=self.is_strikethrough or None,
        )


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend *base* with *overlay*.

    Overlays are styles meant to be layered on top of another one. The target
    of a broken symlink, for example, is drawn with the link-path style plus
    the broken-path overlay, which by default only adds an underline. Colours
    from the overlay win when it has them; attributes can only be switched on.
    """
    changes = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background

    for attribute in ATTRIBUTES:
        if getattr(overlay, attribute):
            changes[attribute] = True

    return replace(base, **changes)
