#!/usr/bin/env python

"""
Options that decide how a Theme gets built.

Values come from command-line words and environment variables; this module
turns them into typed options and rejects anything it does not understand.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .constants import ENV_EXA_COLORS, ENV_EZA_COLORS, ENV_LS_COLORS, ENV_NO_COLOR


class OptionsError(ValueError):
    """An option was given a value it does not accept."""

    def __init__(self, option: str, value: str, choices=None):
        message = f"Option --{option} has no {value!r} setting"
        if choices:
            message += f" (choices: {', '.join(choices)})"
        super().__init__(message)
        self.option = option
        self.value = value


class UseColours(Enum):
    """When to paint the output.

    ``AUTOMATIC`` only colours output going to a terminal, so that piping a
    listing into ``grep`` or ``less`` does not fill it with escape codes.
    """

    ALWAYS = "always"
    AUTOMATIC = "automatic"
    NEVER = "never"

    @classmethod
    def deduce(cls, word: Optional[str], env: Mapping[str, str]) -> "UseColours":
        if word is None:
            return cls.NEVER if ENV_NO_COLOR in env else cls.AUTOMATIC

        if word == "always":
            return cls.ALWAYS
        if word in ("auto", "automatic"):
            return cls.AUTOMATIC
        if word == "never":
            return cls.NEVER
        raise OptionsError("color", word, ["always", "auto", "never"])


@dataclass(frozen=True)
class ColorScaleOptions:
    """Graduated colouring of file sizes by magnitude."""

    size: bool = False

    @classmethod
    def deduce(cls, scale: Optional[str]) -> "ColorScaleOptions":
        size = False
        if scale is not None:
            for word in scale.split(","):
                word = word.strip()
                if word in ("all", "size"):
                    size = True
                elif word == "none":
                    size = False
                else:
                    raise OptionsError("color-scale", word, ["all", "size", "none"])
        return cls(size=size)


@dataclass(frozen=True)
class Definitions:
    """The two raw colour definition strings."""

    ls: Optional[str] = None
    exa: Optional[str] = None

    @classmethod
    def deduce(cls, env: Mapping[str, str]) -> "Definitions":
        exa = env.get(ENV_EZA_COLORS)
        if exa is None:
            exa = env.get(ENV_EXA_COLORS)
        return cls(ls=env.get(ENV_LS_COLORS), exa=exa)
