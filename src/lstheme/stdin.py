#!/usr/bin/env python

"""Where the list of file names comes from: arguments or standard input."""

from dataclasses import dataclass
from typing import List, Mapping, Optional, TextIO

from .constants import DEFAULT_STDIN_SEPARATOR, ENV_STDIN_SEPARATOR


@dataclass(frozen=True)
class FilesInput:
    """``separator`` is None when names come from the command line."""

    separator: Optional[str] = None

    @property
    def from_stdin(self) -> bool:
        return self.separator is not None

    @classmethod
    def deduce(cls, use_stdin: bool, stdin_is_tty: bool, env: Mapping[str, str]) -> "FilesInput":
        # a terminal on stdin means nobody is piping names in
        if not use_stdin or stdin_is_tty:
            return cls()
        return cls(separator=env.get(ENV_STDIN_SEPARATOR) or DEFAULT_STDIN_SEPARATOR)

    def read_names(self, stream: TextIO) -> List[str]:
        return [name for name in stream.read().split(self.separator) if name]
