#!/usr/bin/env python

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .files import File
from .style import Style
from .theme import Theme


def name_style(theme: Theme, file: File) -> Style:
    """Style for a file name: its kind first, then the theme's resolver"""
    if file.is_broken_link():
        return theme.broken_symlink()
    if file.is_directory():
        return theme.directory()
    if file.is_executable_file():
        return theme.executable_file()
    if file.is_link():
        return theme.symlink()
    if file.is_pipe():
        return theme.pipe()
    if file.is_block_device():
        return theme.block_device()
    if file.is_char_device():
        return theme.char_device()
    if file.is_socket():
        return theme.socket()
    return theme.colour_file(file)


def describe_style(style: Style) -> str:
    """Short human-readable form of a style, e.g. ``bold blue on yellow``"""
    if style.is_plain():
        return "-"
    return str(style.to_rich())


class UIManager:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.error_console = Console(stderr=True)

    def show_listing(self, theme: Theme, files: Iterable[File]):
        """Print one painted file name per line"""
        for file in files:
            text = Text(file.name, style=name_style(theme, file).to_rich())
            self.console.print(text, soft_wrap=True)

    def show_styles(self, theme: Theme):
        """Display every UI style slot in a table"""
        table = Table(title="UI Styles")
        table.add_column("Slot")
        table.add_column("Style")
        table.add_column("Sample")

        for path, style in theme.ui.slots():
            table.add_row(path, describe_style(style), Text("sample", style=style.to_rich()))

        self.console.print(table)

    def show_error(self, message: str):
        """Display error message"""
        self.error_console.print(f"[red]Error: {escape(message)}[/red]")
