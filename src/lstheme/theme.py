#!/usr/bin/env python

"""
Theme assembly.

A Theme is the table of UI styles plus one file-style resolver, built once
from the colour options and then only read. ``LS_COLORS`` and
``EZA_COLORS`` are parsed here: two-letter codes change the UI styles in
place, everything else is taken as a file-name glob.
"""

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Iterable, Mapping, Optional, Protocol, Tuple

from rich.theme import Theme as RichTheme

from .filetype import FileType
from .files import File
from .logger import logger
from .lsc import LSColors, Pair
from .options import ColorScaleOptions, Definitions, UseColours
from .patterns import GlobPattern, PatternError
from .style import Style, apply_overlay
from .ui_styles import UiStyles


class FileStyle(Protocol):
    """Decides the style of a file's name."""

    def get_style(self, file: File, theme: "Theme") -> Optional[Style]:
        ...


class NoFileStyle:
    """Never styles anything."""

    def get_style(self, file: File, theme: "Theme") -> Optional[Style]:
        return None

    def __eq__(self, other) -> bool:
        return isinstance(other, NoFileStyle)

    def __repr__(self) -> str:
        return "NoFileStyle()"


class FileTypes:
    """Styles files by their built-in type category."""

    def get_style(self, file: File, theme: "Theme") -> Optional[Style]:
        file_type = FileType.get_file_type(file)
        if file_type is None:
            return None
        return getattr(theme.ui.file_type, file_type.value)

    def __eq__(self, other) -> bool:
        return isinstance(other, FileTypes)

    def __repr__(self) -> str:
        return "FileTypes()"


class ExtensionMappings:
    """Glob patterns paired with styles, in the order they were declared."""

    def __init__(self, mappings: Optional[Iterable[Tuple[GlobPattern, Style]]] = None):
        self.mappings: Tuple[Tuple[GlobPattern, Style], ...] = tuple(mappings or ())
        self._frozen = False

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def freeze(self) -> "ExtensionMappings":
        """Refuse any further patterns. Returns the same table."""
        super().__setattr__("_frozen", True)
        return self

    def is_non_empty(self) -> bool:
        return bool(self.mappings)

    def add(self, pattern: GlobPattern, style: Style) -> None:
        self.mappings = self.mappings + ((pattern, style),)

    def get_style(self, file: File, theme: "Theme") -> Optional[Style]:
        # Later patterns win, same as later codes overwrite earlier ones
        for pattern, style in reversed(self.mappings):
            if pattern.matches(file.name):
                return style
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExtensionMappings):
            return NotImplemented
        return self.mappings == other.mappings

    def __repr__(self) -> str:
        return f"ExtensionMappings({self.mappings!r})"


@dataclass(frozen=True)
class FallbackFileStyle:
    """Ask *primary* first and only fall back to *fallback* when it has nothing.

    This lets users give their own associations while keeping the built-in
    file types for everything they did not mention.
    """

    primary: FileStyle
    fallback: FileStyle

    def get_style(self, file: File, theme: "Theme") -> Optional[Style]:
        style = self.primary.get_style(file, theme)
        if style is not None:
            return style
        return self.fallback.get_style(file, theme)


def _freeze_resolver(resolver: FileStyle) -> None:
    if isinstance(resolver, ExtensionMappings):
        resolver.freeze()
    elif isinstance(resolver, FallbackFileStyle):
        _freeze_resolver(resolver.primary)
        _freeze_resolver(resolver.fallback)


def _add_glob(exts: ExtensionMappings, pair: Pair) -> None:
    try:
        pattern = GlobPattern(pair.key)
    except PatternError as e:
        logger.warning(f"Couldn't parse glob pattern {pair.key!r}: {e}")
        return
    exts.add(pattern, pair.to_style())


def parse_color_vars(definitions: Definitions, colours: UiStyles) -> Tuple[ExtensionMappings, bool]:
    """Parse both definition strings into *colours* and a list of globs.

    Two-letter codes update *colours* in place. ``LS_COLORS`` only knows the
    ls codes, so the extended codes in it are treated as globs like any other
    key. Also returns whether the built-in file types should still be used,
    which ``EZA_COLORS`` turns off by starting with ``reset``.
    """
    exts = ExtensionMappings()

    if definitions.ls is not None:
        for pair in LSColors(definitions.ls).pairs():
            if not colours.set_ls(pair):
                _add_glob(exts, pair)

    use_default_filetypes = True

    if definitions.exa is not None:
        if definitions.exa == "reset" or definitions.exa.startswith("reset:"):
            use_default_filetypes = False

        for pair in LSColors(definitions.exa).pairs():
            if not colours.set_ls(pair) and not colours.set_exa(pair):
                _add_glob(exts, pair)

    logger.debug(
        f"Parsed colour definitions: {len(exts.mappings)} globs, "
        f"default file types {'on' if use_default_filetypes else 'off'}"
    )
    return exts, use_default_filetypes


def select_file_style(exts: ExtensionMappings, use_default_filetypes: bool) -> FileStyle:
    """Pick how file names get styled, from zero up to two sources."""
    if exts.is_non_empty() and use_default_filetypes:
        return FallbackFileStyle(exts, FileTypes())
    if exts.is_non_empty():
        return exts
    if use_default_filetypes:
        return FileTypes()
    return NoFileStyle()


@dataclass(frozen=True)
class Options:
    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColorScaleOptions = field(default_factory=ColorScaleOptions)
    definitions: Definitions = field(default_factory=Definitions)

    @classmethod
    def deduce(cls, env: Mapping[str, str], color: Optional[str] = None,
               color_scale: Optional[str] = None) -> "Options":
        return cls(
            use_colours=UseColours.deduce(color, env),
            colour_scale=ColorScaleOptions.deduce(color_scale),
            definitions=Definitions.deduce(env),
        )

    def to_theme(self, isatty: bool) -> "Theme":
        if self.use_colours == UseColours.NEVER or (
            self.use_colours == UseColours.AUTOMATIC and not isatty
        ):
            return Theme(ui=UiStyles.plain(), exts=NoFileStyle())

        ui = UiStyles.default_theme(self.colour_scale)
        exts, use_default_filetypes = parse_color_vars(self.definitions, ui)
        return Theme(ui=ui, exts=select_file_style(exts, use_default_filetypes))


def _size_tier(prefix: Optional[str]) -> str:
    if prefix is None:
        return "byte"
    if prefix in ("k", "K", "Ki"):
        return "kilo"
    if prefix in ("M", "Mi"):
        return "mega"
    if prefix in ("G", "Gi"):
        return "giga"
    return "huge"


@dataclass(frozen=True)
class Theme:
    """UI styles and file-name resolver for one listing.

    Both are made read-only on construction.
    """

    ui: UiStyles
    exts: FileStyle

    def __post_init__(self):
        self.ui.freeze()
        _freeze_resolver(self.exts)

    def colour_file(self, file: File) -> Style:
        """The style for *file*'s name, defaulting to the normal file style."""
        style = self.exts.get_style(file, self)
        if style is None:
            return self.ui.filekinds.normal
        return style

    # File kinds

    def normal(self) -> Style:
        return self.ui.filekinds.normal

    def directory(self) -> Style:
        return self.ui.filekinds.directory

    def pipe(self) -> Style:
        return self.ui.filekinds.pipe

    def symlink(self) -> Style:
        return self.ui.filekinds.symlink

    def block_device(self) -> Style:
        return self.ui.filekinds.block_device

    def char_device(self) -> Style:
        return self.ui.filekinds.char_device

    def socket(self) -> Style:
        return self.ui.filekinds.socket

    def special(self) -> Style:
        return self.ui.filekinds.special

    # File names

    def symlink_path(self) -> Style:
        return self.ui.symlink_path

    def normal_arrow(self) -> Style:
        return self.ui.punctuation

    def broken_symlink(self) -> Style:
        return self.ui.broken_symlink

    def broken_filename(self) -> Style:
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def control_char(self) -> Style:
        return self.ui.control_char

    def broken_control_char(self) -> Style:
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def executable_file(self) -> Style:
        return self.ui.filekinds.executable

    def mount_point(self) -> Style:
        return self.ui.filekinds.mount_point

    # Sizes and blocks. *prefix* is the magnitude symbol of the number
    # ("k", "Mi", ...) or None for plain bytes.

    def size(self, prefix: Optional[str]) -> Style:
        return getattr(self.ui.size, f"number_{_size_tier(prefix)}")

    def unit(self, prefix: Optional[str]) -> Style:
        return getattr(self.ui.size, f"unit_{_size_tier(prefix)}")

    def blocksize(self, prefix: Optional[str]) -> Style:
        return self.size(prefix)

    def no_size(self) -> Style:
        return self.ui.punctuation

    def no_blocksize(self) -> Style:
        return self.ui.punctuation

    def major(self) -> Style:
        return self.ui.size.major

    def minor(self) -> Style:
        return self.ui.size.minor

    def comma(self) -> Style:
        return self.ui.punctuation

    # Permissions

    def dash(self) -> Style:
        return self.ui.punctuation

    def permission(self, name: str) -> Style:
        """Style for a permission bit, e.g. ``user_read`` or ``attribute``."""
        return getattr(self.ui.perms, name)

    # Users and groups

    def user_you(self) -> Style:
        return self.ui.users.user_you

    def user_other(self) -> Style:
        return self.ui.users.user_other

    def user_root(self) -> Style:
        return self.ui.users.user_root

    def no_user(self) -> Style:
        return self.ui.punctuation

    def group_yours(self) -> Style:
        return self.ui.users.group_yours

    def group_not_yours(self) -> Style:
        return self.ui.users.group_other

    def group_root(self) -> Style:
        return self.ui.users.group_root

    def no_group(self) -> Style:
        return self.ui.punctuation

    # Links

    def links_normal(self) -> Style:
        return self.ui.links.normal

    def multi_link_file(self) -> Style:
        return self.ui.links.multi_link_file

    # Git

    def git_status(self, status: str) -> Style:
        """Style for a git status such as ``modified``; unchanged files get punctuation."""
        if status == "not_modified":
            return self.ui.punctuation
        return getattr(self.ui.git, status)

    def git_repo(self, status: str) -> Style:
        """Style for repository state: ``branch_main``, ``git_dirty``, ... or ``no_repo``."""
        if status == "no_repo":
            return self.ui.punctuation
        return getattr(self.ui.git_repo, status)

    # Security context

    def security_context_none(self) -> Style:
        return self.ui.security_context.none

    def selinux(self, part: str) -> Style:
        """Style for one part of an SELinux context: colon, user, role, typ or range."""
        return getattr(self.ui.security_context.selinux, part)

    def to_rich_theme(self) -> RichTheme:
        """Export every slot as a Rich theme, keyed by dotted slot path.

        Styles carry no attributes they do not set, so callers can compose
        freely: ``[filekinds.directory]src[/]`` or ``[bold date]...``.
        """
        return RichTheme(
            {path: style.to_rich() for path, style in self.ui.slots()},
            inherit=False,
        )
