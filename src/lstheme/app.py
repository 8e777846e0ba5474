#!/usr/bin/env python

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, TextIO

from rich.console import Console

from .config import colour_environment, load_config
from .constants import CONFIG_FILE_PATH, OPTIONS_ERROR_EXIT_CODE, SUCCESS_EXIT_CODE
from .files import File
from .logger import logger
from .options import OptionsError, UseColours
from .stdin import FilesInput
from .theme import Options, Theme
from .ui import UIManager


class LsThemeApp:
    """Builds a Theme from config, environment and flags, then paints file names"""

    def __init__(self, env: Optional[Mapping[str, str]] = None,
                 stdin: Optional[TextIO] = None,
                 console: Optional[Console] = None):
        self.env: Mapping[str, str] = os.environ if env is None else env
        self.stdin = stdin or sys.stdin
        self.console = console
        self.ui: Optional[UIManager] = None
        self.config: Optional[Dict[str, Any]] = None
        self.options: Optional[Options] = None
        self.theme: Optional[Theme] = None
        self.files_input = FilesInput()

    def initialize(self, args) -> None:
        """Load configuration and deduce options.

        Raises ``OptionsError`` when a flag or setting has an unknown value.
        """
        config_path = Path(args.config) if args.config else CONFIG_FILE_PATH
        self.config = load_config(config_path)

        if self.config.get("log_dir"):
            log_file = logger.enable_file_logging(Path(self.config["log_dir"]).expanduser())
            logger.debug(f"Logging to {log_file}")

        env = colour_environment(self.config, self.env)

        self.options = Options.deduce(
            env,
            color=args.color if args.color is not None else self.config.get("color"),
            color_scale=args.color_scale if args.color_scale is not None else self.config.get("color_scale"),
        )
        self.files_input = FilesInput.deduce(args.stdin, self.stdin.isatty(), self.env)
        self.ui = UIManager(self.console or self._make_console())

    def _make_console(self) -> Console:
        if self.options.use_colours == UseColours.ALWAYS:
            return Console(force_terminal=True)
        if self.options.use_colours == UseColours.NEVER:
            return Console(color_system=None)
        return Console()

    def build_theme(self) -> Theme:
        assert self.options is not None and self.ui is not None, "Application not properly initialized"
        self.theme = self.options.to_theme(self.ui.console.is_terminal)
        return self.theme

    def collect_files(self, paths: List[str]) -> List[File]:
        if self.files_input.from_stdin:
            paths = self.files_input.read_names(self.stdin)
        if not paths:
            directory = Path(".")
            return [File.in_directory(directory, name) for name in sorted(os.listdir(directory))]

        # Named on the command line, so no sibling check for compiled files
        return [File(path) for path in paths]

    def run(self, args) -> int:
        theme = self.build_theme()
        if args.styles:
            self.ui.show_styles(theme)
        else:
            self.ui.show_listing(theme, self.collect_files(args.paths))
        return SUCCESS_EXIT_CODE

    def main(self, args) -> int:
        try:
            self.initialize(args)
        except OptionsError as e:
            UIManager(self.console).show_error(str(e))
            return OPTIONS_ERROR_EXIT_CODE
        return self.run(args)
