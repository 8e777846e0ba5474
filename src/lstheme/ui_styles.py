#!/usr/bin/env python

"""
The table of named UI styles and the two key sets that can change it.

``LS_CODES`` holds the two-letter keys that ``ls`` itself understands.
``EXA_CODES`` holds the extra keys only this tool understands. Each key maps
to one or more dotted slot paths; ``sn`` and ``sb`` set a whole group at once.
"""

from dataclasses import FrozenInstanceError, dataclass, field, fields, is_dataclass, replace
from typing import Dict, Iterator, Tuple

from .lsc import Pair
from .style import Style


def _slot():
    return field(default_factory=Style)


@dataclass(frozen=True)
class FileKinds:
    normal: Style = _slot()
    directory: Style = _slot()
    symlink: Style = _slot()
    pipe: Style = _slot()
    block_device: Style = _slot()
    char_device: Style = _slot()
    socket: Style = _slot()
    special: Style = _slot()
    executable: Style = _slot()
    mount_point: Style = _slot()


@dataclass(frozen=True)
class Permissions:
    user_read: Style = _slot()
    user_write: Style = _slot()
    user_execute_file: Style = _slot()
    user_execute_other: Style = _slot()

    group_read: Style = _slot()
    group_write: Style = _slot()
    group_execute: Style = _slot()

    other_read: Style = _slot()
    other_write: Style = _slot()
    other_execute: Style = _slot()

    special_user_file: Style = _slot()
    special_other: Style = _slot()

    attribute: Style = _slot()


@dataclass(frozen=True)
class Size:
    major: Style = _slot()
    minor: Style = _slot()

    number_byte: Style = _slot()
    number_kilo: Style = _slot()
    number_mega: Style = _slot()
    number_giga: Style = _slot()
    number_huge: Style = _slot()

    unit_byte: Style = _slot()
    unit_kilo: Style = _slot()
    unit_mega: Style = _slot()
    unit_giga: Style = _slot()
    unit_huge: Style = _slot()


@dataclass(frozen=True)
class Users:
    user_you: Style = _slot()
    user_root: Style = _slot()
    user_other: Style = _slot()
    group_yours: Style = _slot()
    group_other: Style = _slot()
    group_root: Style = _slot()


@dataclass(frozen=True)
class Links:
    normal: Style = _slot()
    multi_link_file: Style = _slot()


@dataclass(frozen=True)
class Git:
    new: Style = _slot()
    modified: Style = _slot()
    deleted: Style = _slot()
    renamed: Style = _slot()
    typechange: Style = _slot()
    ignored: Style = _slot()
    conflicted: Style = _slot()


@dataclass(frozen=True)
class GitRepo:
    branch_main: Style = _slot()
    branch_other: Style = _slot()
    git_clean: Style = _slot()
    git_dirty: Style = _slot()


@dataclass(frozen=True)
class SELinuxContext:
    colon: Style = _slot()
    user: Style = _slot()
    role: Style = _slot()
    typ: Style = _slot()
    range: Style = _slot()


@dataclass(frozen=True)
class SecurityContext:
    none: Style = _slot()
    selinux: SELinuxContext = field(default_factory=SELinuxContext)


@dataclass(frozen=True)
class FileTypeStyles:
    """Styles for the built-in file type categories."""

    image: Style = _slot()
    video: Style = _slot()
    music: Style = _slot()
    lossless: Style = _slot()
    crypto: Style = _slot()
    document: Style = _slot()
    compressed: Style = _slot()
    temp: Style = _slot()
    compiled: Style = _slot()
    build: Style = _slot()
    source: Style = _slot()


_NUMBER_SLOTS = tuple(f"size.number_{tier}" for tier in ("byte", "kilo", "mega", "giga", "huge"))
_UNIT_SLOTS = tuple(f"size.unit_{tier}" for tier in ("byte", "kilo", "mega", "giga", "huge"))

# Keys understood by ls. Codes ls has that are not used here: mh (multi
# hard link), do (door), su/sg (setuid/setgid), ca (capability), tw, ow,
# st (sticky and other-writable dirs) and mi (missing file).
LS_CODES: Dict[str, Tuple[str, ...]] = {
    "di": ("filekinds.directory",),
    "ex": ("filekinds.executable",),
    "fi": ("filekinds.normal",),
    "pi": ("filekinds.pipe",),
    "so": ("filekinds.socket",),
    "bd": ("filekinds.block_device",),
    "cd": ("filekinds.char_device",),
    "ln": ("filekinds.symlink",),
    "or": ("broken_symlink",),
}

EXA_CODES: Dict[str, Tuple[str, ...]] = {
    "ur": ("perms.user_read",),
    "uw": ("perms.user_write",),
    "ux": ("perms.user_execute_file",),
    "ue": ("perms.user_execute_other",),
    "gr": ("perms.group_read",),
    "gw": ("perms.group_write",),
    "gx": ("perms.group_execute",),
    "tr": ("perms.other_read",),
    "tw": ("perms.other_write",),
    "tx": ("perms.other_execute",),
    "su": ("perms.special_user_file",),
    "sf": ("perms.special_other",),
    "xa": ("perms.attribute",),

    "sn": _NUMBER_SLOTS,
    "sb": _UNIT_SLOTS,
    "nb": ("size.number_byte",),
    "nk": ("size.number_kilo",),
    "nm": ("size.number_mega",),
    "ng": ("size.number_giga",),
    "nt": ("size.number_huge",),
    "ub": ("size.unit_byte",),
    "uk": ("size.unit_kilo",),
    "um": ("size.unit_mega",),
    "ug": ("size.unit_giga",),
    "ut": ("size.unit_huge",),
    "df": ("size.major",),
    "ds": ("size.minor",),

    "uu": ("users.user_you",),
    "uR": ("users.user_root",),
    "un": ("users.user_other",),
    "gu": ("users.group_yours",),
    "gR": ("users.group_root",),
    "gn": ("users.group_other",),

    "lc": ("links.normal",),
    "lm": ("links.multi_link_file",),

    "ga": ("git.new",),
    "gm": ("git.modified",),
    "gd": ("git.deleted",),
    "gv": ("git.renamed",),
    "gt": ("git.typechange",),
    "gi": ("git.ignored",),
    "gc": ("git.conflicted",),

    "Gm": ("git_repo.branch_main",),
    "Go": ("git_repo.branch_other",),
    "Gc": ("git_repo.git_clean",),
    "Gd": ("git_repo.git_dirty",),

    "xx": ("punctuation",),
    "da": ("date",),
    "in": ("inode",),
    "bl": ("blocks",),
    "hd": ("header",),
    "lp": ("symlink_path",),
    "cc": ("control_char",),
    "oc": ("octal",),
    "ff": ("flags",),
    "bO": ("broken_path_overlay",),

    "mp": ("filekinds.mount_point",),
    "sp": ("filekinds.special",),

    "im": ("file_type.image",),
    "vi": ("file_type.video",),
    "mu": ("file_type.music",),
    "lo": ("file_type.lossless",),
    "cr": ("file_type.crypto",),
    "do": ("file_type.document",),
    "co": ("file_type.compressed",),
    "tm": ("file_type.temp",),
    "cm": ("file_type.compiled",),
    "bu": ("file_type.build",),
    "sc": ("file_type.source",),

    "Sn": ("security_context.none",),
    "Su": ("security_context.selinux.user",),
    "Sr": ("security_context.selinux.role",),
    "St": ("security_context.selinux.typ",),
    "Sl": ("security_context.selinux.range",),
}


@dataclass
class UiStyles:
    """Every named style used when drawing a listing.

    The groups are immutable; ``set`` swaps in a rebuilt group. Once
    ``freeze`` has been called no slot can change any more.
    """

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)
    git_repo: GitRepo = field(default_factory=GitRepo)
    security_context: SecurityContext = field(default_factory=SecurityContext)
    file_type: FileTypeStyles = field(default_factory=FileTypeStyles)

    punctuation: Style = _slot()
    date: Style = _slot()
    inode: Style = _slot()
    blocks: Style = _slot()
    header: Style = _slot()
    octal: Style = _slot()
    flags: Style = _slot()

    symlink_path: Style = _slot()
    control_char: Style = _slot()
    broken_symlink: Style = _slot()
    broken_path_overlay: Style = _slot()

    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def freeze(self) -> "UiStyles":
        """Make every slot read-only. Returns the same table."""
        super().__setattr__("_frozen", True)
        return self

    @classmethod
    def plain(cls) -> "UiStyles":
        """Every slot unstyled, for when colours are turned off."""
        return cls()

    @classmethod
    def default_theme(cls, scale) -> "UiStyles":
        from .default_theme import default_theme
        return default_theme(scale)

    def get(self, path: str) -> Style:
        """Look up a slot by dotted path, e.g. ``filekinds.directory``."""
        target = self
        for name in path.split("."):
            target = getattr(target, name)
        return target

    def set(self, path: str, style: Style) -> None:
        name, _, rest = path.partition(".")
        if rest:
            style = _replaced(getattr(self, name), rest, style)
        setattr(self, name, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply *pair* if its key is an ls code. Returns whether it was."""
        return self._set_from(LS_CODES, pair)

    def set_exa(self, pair: Pair) -> bool:
        """Apply *pair* if its key is one of the extended codes."""
        return self._set_from(EXA_CODES, pair)

    def set_number_style(self, style: Style) -> None:
        for path in _NUMBER_SLOTS:
            self.set(path, style)

    def set_unit_style(self, style: Style) -> None:
        for path in _UNIT_SLOTS:
            self.set(path, style)

    def _set_from(self, codes: Dict[str, Tuple[str, ...]], pair: Pair) -> bool:
        paths = codes.get(pair.key)
        if paths is None:
            return False

        style = pair.to_style()
        for path in paths:
            self.set(path, style)
        return True

    def slots(self) -> Iterator[Tuple[str, Style]]:
        """Yield ``(dotted path, style)`` for every slot, in declaration order."""
        yield from _walk(self, "")


def _replaced(group, path: str, style: Style):
    """Copy of *group* with the slot at dotted *path* set to *style*."""
    name, _, rest = path.partition(".")
    if rest:
        style = _replaced(getattr(group, name), rest, style)
    return replace(group, **{name: style})


def _walk(node, prefix: str) -> Iterator[Tuple[str, Style]]:
    for f in fields(node):
        value = getattr(node, f.name)
        path = f"{prefix}{f.name}"
        if isinstance(value, Style):
            yield path, value
        elif is_dataclass(value):
            yield from _walk(value, f"{path}.")
