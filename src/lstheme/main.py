#!/usr/bin/env python
"""
lstheme - Main Entry Point

Paints file names the way a colourful `ls` would, using LS_COLORS and
EZA_COLORS, so colour definitions can be checked without a full listing tool.

Usage:
    lstheme [--color WHEN] [--color-scale SCALE] [--stdin] [PATH ...]
    lstheme --styles

Configuration:
    - ~/.config/lstheme/config.yaml: optional defaults for the flags above
      and fallback colour strings
"""

import argparse
import sys
from typing import List, Optional

from .app import LsThemeApp
from .constants import APP_NAME, APP_VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Preview LS_COLORS / EZA_COLORS styling")
    parser.add_argument("paths", nargs="*", help="files to paint (default: current directory)")
    parser.add_argument("--color", "--colour", dest="color", metavar="WHEN",
                        help="when to use colours: always, auto, never")
    parser.add_argument("--color-scale", "--colour-scale", dest="color_scale", metavar="SCALE",
                        help="graduated size colours: all, size, none")
    parser.add_argument("--config", help="path to a config.yaml")
    parser.add_argument("--stdin", action="store_true", help="read file names from standard input")
    parser.add_argument("--styles", action="store_true", help="show every UI style instead of a listing")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for lstheme"""
    args = build_parser().parse_args(argv)
    app = LsThemeApp()
    return app.main(args)


if __name__ == "__main__":
    sys.exit(main())
