#!/usr/bin/env python

"""
Shell-style glob patterns for file-name colouring.

``fnmatch`` accepts any string, but colour definitions need to reject bad
patterns such as ``a[b`` or ``***`` so they can be reported and skipped.
This compiles the usual glob syntax (``?``, ``*``, ``**``, ``[...]`` and
``[!...]``) to a regular expression and raises ``PatternError`` for input
that is not a valid pattern. Backslashes are literal; use ``[*]`` to match
a literal star.
"""

import re
from typing import List, Tuple

ERROR_WILDCARDS = "wildcards are either regular `*` or recursive `**`"
ERROR_RECURSIVE_WILDCARDS = "recursive wildcards must form a single path component"
ERROR_INVALID_RANGE = "invalid range pattern"

SEPARATOR = "/"


class PatternError(ValueError):
    """A glob pattern that could not be compiled."""

    def __init__(self, pos: int, msg: str):
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")
        self.pos = pos
        self.msg = msg


def _char_specifiers(chars: List[str]) -> List[Tuple[str, str]]:
    """Split the inside of a bracket expression into (low, high) ranges."""
    specifiers = []
    i = 0
    while i < len(chars):
        if i + 3 <= len(chars) and chars[i + 1] == "-":
            specifiers.append((chars[i], chars[i + 2]))
            i += 3
        else:
            specifiers.append((chars[i], chars[i]))
            i += 1
    return specifiers


def _bracket_regex(specifiers: List[Tuple[str, str]], negated: bool) -> str:
    parts = []
    for low, high in specifiers:
        if low > high:
            continue
        if low == high:
            parts.append(re.escape(low))
        else:
            parts.append(f"{re.escape(low)}-{re.escape(high)}")

    if not parts:
        # an empty set matches nothing, its negation anything
        return "." if negated else "(?!)"
    return "[{}{}]".format("^" if negated else "", "".join(parts))


def translate(pattern: str) -> str:
    """Translate a glob into an anchored regular expression source."""
    chars = list(pattern)
    out: List[str] = []
    last_recursive = False
    i = 0

    while i < len(chars):
        c = chars[i]

        if c == "?":
            out.append(".")
            last_recursive = False
            i += 1

        elif c == "*":
            start = i
            while i < len(chars) and chars[i] == "*":
                i += 1
            count = i - start

            if count > 2:
                raise PatternError(start + 2, ERROR_WILDCARDS)
            elif count == 2:
                # ``**`` is only allowed as a whole path component
                if start != 0 and chars[start - 1] != SEPARATOR:
                    raise PatternError(start - 1, ERROR_RECURSIVE_WILDCARDS)
                if i < len(chars) and chars[i] == SEPARATOR:
                    i += 1
                    piece = "(?:.*/)?"
                elif i == len(chars):
                    piece = ".*"
                else:
                    raise PatternError(i, ERROR_RECURSIVE_WILDCARDS)

                # repeats collapse into one, except right after a leading ``**``
                if not (len(out) > 1 and last_recursive):
                    out.append(piece)
                last_recursive = True
            else:
                out.append(".*")
                last_recursive = False

        elif c == "[":
            if i + 4 <= len(chars) and chars[i + 1] == "!":
                close = _find(chars, "]", i + 3)
                if close is not None:
                    specifiers = _char_specifiers(chars[i + 2:close])
                    out.append(_bracket_regex(specifiers, negated=True))
                    last_recursive = False
                    i = close + 1
                    continue
            elif i + 3 <= len(chars) and chars[i + 1] != "!":
                close = _find(chars, "]", i + 2)
                if close is not None:
                    specifiers = _char_specifiers(chars[i + 1:close])
                    out.append(_bracket_regex(specifiers, negated=False))
                    last_recursive = False
                    i = close + 1
                    continue
            raise PatternError(i, ERROR_INVALID_RANGE)

        else:
            out.append(re.escape(c))
            last_recursive = False
            i += 1

    return "".join(out)


def _find(chars: List[str], target: str, start: int):
    for index in range(start, len(chars)):
        if chars[index] == target:
            return index
    return None


class GlobPattern:
    """A compiled glob, matched case-sensitively against a whole name."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regex = re.compile(translate(pattern), re.DOTALL)

    def matches(self, name: str) -> bool:
        return self._regex.fullmatch(name) is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, GlobPattern):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"
