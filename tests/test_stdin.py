from __future__ import annotations

import io

from lstheme.stdin import FilesInput


def test_arguments_when_not_asked_for_stdin():
    assert FilesInput.deduce(False, False, {}) == FilesInput()


def test_arguments_when_stdin_is_a_terminal():
    assert not FilesInput.deduce(True, True, {}).from_stdin


def test_stdin_with_default_separator():
    files_input = FilesInput.deduce(True, False, {})

    assert files_input.from_stdin
    assert files_input.read_names(io.StringIO("a.txt\nb.rs\n")) == ["a.txt", "b.rs"]


def test_stdin_with_custom_separator():
    files_input = FilesInput.deduce(True, False, {"EZA_STDIN_SEPARATOR": "\0"})

    assert files_input.read_names(io.StringIO("a b\0c\0")) == ["a b", "c"]


def test_empty_separator_falls_back_to_newline():
    assert FilesInput.deduce(True, False, {"EZA_STDIN_SEPARATOR": ""}).separator == "\n"
