from __future__ import annotations

import pytest

from lstheme.files import File, file_extension
from lstheme.filetype import FileType


@pytest.mark.parametrize("name, expected", [
    ("README", FileType.BUILD),
    ("readme.md", FileType.BUILD),
    ("ReadMe.txt", FileType.BUILD),
    ("Makefile", FileType.BUILD),
    ("Cargo.toml", FileType.BUILD),
    ("pyproject.toml", FileType.BUILD),
    ("id_ed25519", FileType.CRYPTO),
    ("photo.png", FileType.IMAGE),
    ("PHOTO.JPG", FileType.IMAGE),
    ("clip.mkv", FileType.VIDEO),
    ("song.mp3", FileType.MUSIC),
    ("song.flac", FileType.LOSSLESS),
    ("key.gpg", FileType.CRYPTO),
    ("report.pdf", FileType.DOCUMENT),
    ("archive.tar.gz", FileType.COMPRESSED),
    ("notes.swp", FileType.TEMP),
    ("notes.txt~", FileType.TEMP),
    ("#notes.txt#", FileType.TEMP),
    ("module.pyc", FileType.COMPILED),
    ("build.ninja", FileType.BUILD),
    ("main.rs", FileType.SOURCE),
    ("script.py", FileType.SOURCE),
])
def test_get_file_type(name, expected):
    assert FileType.get_file_type(File(name)) is expected


@pytest.mark.parametrize("name", ["notes.txt", "LICENSE", "plain", ".bashrc", "makefile.orig"])
def test_unknown_files_have_no_type(name):
    assert FileType.get_file_type(File(name)) is None


def test_file_name_table_is_case_sensitive():
    assert FileType.get_file_type(File("cargo.toml")) is None


def test_compiled_when_source_sits_next_to_it(tmp_path):
    (tmp_path / "Main.hs").write_text("main = pure ()\n")
    (tmp_path / "Main.hi").write_bytes(b"")

    assert FileType.get_file_type(File.in_directory(tmp_path, "Main.hi")) is FileType.COMPILED


def test_not_compiled_without_source(tmp_path):
    (tmp_path / "Main.hi").write_bytes(b"")

    assert FileType.get_file_type(File.in_directory(tmp_path, "Main.hi")) is None


def test_sibling_check_needs_a_parent_directory(tmp_path):
    (tmp_path / "Main.hs").write_text("main = pure ()\n")

    assert FileType.get_file_type(File(tmp_path / "Main.hi")) is None


@pytest.mark.parametrize("name, ext", [
    ("a.txt", "txt"),
    ("A.TXT", "txt"),
    ("archive.tar.gz", "gz"),
    (".bashrc", "bashrc"),
    ("Makefile", None),
    ("trailing.", ""),
])
def test_file_extension(name, ext):
    assert file_extension(name) == ext


def test_source_files_for_object_file():
    file = File("/src/lib.o")

    assert [p.name for p in file.source_files()] == ["lib.c", "lib.cpp"]
