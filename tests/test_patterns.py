from __future__ import annotations

import pytest

from lstheme.patterns import GlobPattern, PatternError


@pytest.mark.parametrize("pattern, name", [
    ("*.txt", "notes.txt"),
    ("*.txt", ".txt"),
    ("Makefile", "Makefile"),
    ("lev.*", "lev.el"),
    ("1*1", "11"),
    ("1*1", "1abc1"),
    ("?.c", "a.c"),
    ("[abc].md", "b.md"),
    ("[a-c].md", "b.md"),
    ("[!a-c].md", "d.md"),
    ("[]].md", "].md"),
    ("[!]].md", "x.md"),
    ("**", "anything.at.all"),
    ("**/*.rs", "main.rs"),
    ("**/**", "file.txt"),
    ("**/**", "a/b/file.txt"),
    ("a/**/**/b", "a/x/b"),
    ("a.[*]", "a.*"),
    ("x+y(1).txt", "x+y(1).txt"),
])
def test_matches(pattern, name):
    assert GlobPattern(pattern).matches(name)


@pytest.mark.parametrize("pattern, name", [
    ("*.txt", "notes.TXT"),
    ("*.txt", "notes.txt.bak"),
    ("Makefile", "makefile"),
    ("?.c", "ab.c"),
    ("[abc].md", "d.md"),
    ("[!a-c].md", "b.md"),
    ("[z-a]", "m"),
    ("a.[*]", "a.b"),
])
def test_does_not_match(pattern, name):
    assert not GlobPattern(pattern).matches(name)


@pytest.mark.parametrize("pattern", [
    "[abc",
    "[",
    "[]",
    "[!]",
    "***",
    "a**",
    "**a",
    "x/**b",
])
def test_invalid_patterns(pattern):
    with pytest.raises(PatternError):
        GlobPattern(pattern)


def test_error_describes_problem():
    with pytest.raises(PatternError) as excinfo:
        GlobPattern("*.[ch")

    assert excinfo.value.pos == 2
    assert "invalid range pattern" in str(excinfo.value)


def test_equality_is_by_source_text():
    assert GlobPattern("*.txt") == GlobPattern("*.txt")
    assert GlobPattern("*.txt") != GlobPattern("*.rtf")
