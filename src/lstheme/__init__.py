"""Colour and style resolution for file listings, driven by LS_COLORS and EZA_COLORS."""

from .options import ColorScaleOptions, Definitions, OptionsError, UseColours
from .style import Style, apply_overlay
from .theme import (
    ExtensionMappings, FallbackFileStyle, FileTypes, NoFileStyle, Options, Theme,
    parse_color_vars,
)
from .ui_styles import UiStyles

__all__ = [
    "ColorScaleOptions", "Definitions", "ExtensionMappings",
    "FallbackFileStyle", "FileTypes", "NoFileStyle", "Options", "OptionsError",
    "Style", "Theme", "UiStyles", "UseColours", "apply_overlay", "parse_color_vars",
]
