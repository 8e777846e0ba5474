#!/usr/bin/env python

"""Minimal file value handed to the file-style resolvers."""

import os
import stat
from pathlib import Path
from typing import List, Optional, Union

# Compiled artefact extension -> extensions of the file it is built from
SOURCE_EXTENSIONS = {
    "class": ["java"],
    "elc": ["el"],
    "hi": ["hs"],
    "o": ["c", "cpp"],
    "pyc": ["py"],
}


class File:
    """A path plus the bits of it that colouring cares about.

    ``parent_dir`` is set when the file was found by listing a directory;
    it enables the check for a compiled file sitting next to its source.
    """

    def __init__(self, path: Union[str, Path], parent_dir: Optional[Path] = None):
        self.path = Path(path)
        self.parent_dir = parent_dir
        self.name = self.path.name or str(self.path)
        self.ext = file_extension(self.name)
        self._stat: Optional[os.stat_result] = None

    @classmethod
    def in_directory(cls, directory: Path, name: str) -> "File":
        return cls(directory / name, parent_dir=directory)

    def source_files(self) -> List[Path]:
        """Paths that would make this file a compiled artefact if they exist."""
        return [self.path.with_suffix(f".{ext}") for ext in SOURCE_EXTENSIONS.get(self.ext or "", [])]

    def _lstat(self) -> Optional[os.stat_result]:
        if self._stat is None:
            try:
                self._stat = self.path.lstat()
            except OSError:
                return None
        return self._stat

    def is_directory(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISDIR(st.st_mode)

    def is_link(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISLNK(st.st_mode)

    def is_pipe(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISFIFO(st.st_mode)

    def is_socket(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISSOCK(st.st_mode)

    def is_block_device(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISBLK(st.st_mode)

    def is_char_device(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISCHR(st.st_mode)

    def is_executable_file(self) -> bool:
        st = self._lstat()
        return st is not None and stat.S_ISREG(st.st_mode) and bool(st.st_mode & stat.S_IXUSR)

    def is_broken_link(self) -> bool:
        return self.is_link() and not self.path.exists()

    def __repr__(self) -> str:
        return f"File({str(self.path)!r})"


def file_extension(name: str) -> Optional[str]:
    """Lower-cased text after the last dot, or None if there is no dot."""
    dot = name.rfind(".")
    if dot == -1:
        return None
    return name[dot + 1:].lower()
