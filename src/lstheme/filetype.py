#!/usr/bin/env python

"""
Built-in file type detection.

Files are sorted into broad categories (images, documents, build files and
so on) from their name and extension alone, so a listing can colour them
without the user writing any glob patterns. Each category has a matching
slot in ``UiStyles.file_type``.
"""

from enum import Enum
from typing import Dict, Optional

from .files import File


class FileType(Enum):
    IMAGE = "image"
    VIDEO = "video"
    MUSIC = "music"
    LOSSLESS = "lossless"
    CRYPTO = "crypto"
    DOCUMENT = "document"
    COMPRESSED = "compressed"
    TEMP = "temp"
    COMPILED = "compiled"
    BUILD = "build"
    SOURCE = "source"

    @classmethod
    def get_file_type(cls, file: File) -> Optional["FileType"]:
        """Work out the category of *file*, or None if it has none."""
        # readme files count as build files, whatever their case
        if file.name.lower().startswith("readme"):
            return cls.BUILD

        file_type = FILENAME_TYPES.get(file.name)
        if file_type is not None:
            return file_type

        if file.ext is not None:
            file_type = EXTENSION_TYPES.get(file.ext)
            if file_type is not None:
                return file_type

        if file.name.endswith("~") or (file.name.startswith("#") and file.name.endswith("#")):
            return cls.TEMP

        if file.parent_dir is not None:
            if any(source.exists() for source in file.source_files()):
                return cls.COMPILED

        return None


def _table(file_type: FileType, *keys: str) -> Dict[str, FileType]:
    return {key: file_type for key in keys}


FILENAME_TYPES: Dict[str, FileType] = {}
FILENAME_TYPES.update(_table(
    FileType.BUILD,
    "BUILD", "BUILD.bazel", "Brewfile", "bsconfig.json", "BUCK", "build.gradle",
    "build.gradle.kts", "build.sbt", "build.xml", "Cargo.toml", "CMakeLists.txt",
    "composer.json", "configure", "Containerfile", "Dockerfile", "Earthfile",
    "flake.nix", "Gemfile", "GNUmakefile", "Gruntfile.coffee", "Gruntfile.js",
    "Gulpfile.coffee", "Gulpfile.js", "jsconfig.json", "Justfile", "justfile",
    "Makefile", "makefile", "meson.build", "mix.exs", "package.json", "Pipfile",
    "PKGBUILD", "Podfile", "pom.xml", "Procfile", "pyproject.toml", "Rakefile",
    "RoboFile.php", "SConstruct", "tsconfig.json", "Vagrantfile", "webpack.config.cjs",
    "webpack.config.js", "WORKSPACE",
))
FILENAME_TYPES.update(_table(
    FileType.CRYPTO,
    "id_dsa", "id_ecdsa", "id_ecdsa_sk", "id_ed25519", "id_ed25519_sk", "id_rsa",
))

EXTENSION_TYPES: Dict[str, FileType] = {}
EXTENSION_TYPES.update(_table(
    FileType.IMAGE,
    "arw", "avif", "bmp", "cbr", "cbz", "cr2", "dvi", "eps", "gif", "heic",
    "heif", "ico", "j2c", "j2k", "jfi", "jfif", "jif", "jp2", "jpe", "jpeg",
    "jpf", "jpg", "jpx", "jxl", "nef", "orf", "pbm", "pgm", "png", "pnm",
    "ppm", "ps", "psd", "pxm", "raw", "qoi", "stl", "svg", "tif", "tiff",
    "webp", "xcf", "xpm",
))
EXTENSION_TYPES.update(_table(
    FileType.VIDEO,
    "avi", "flv", "h264", "heics", "m2ts", "m2v", "m4v", "mkv", "mov", "mp4",
    "mpeg", "mpg", "ogm", "ogv", "vob", "webm", "wmv",
))
EXTENSION_TYPES.update(_table(
    FileType.MUSIC,
    "aac", "m4a", "mka", "mp2", "mp3", "ogg", "opus", "wma",
))
EXTENSION_TYPES.update(_table(
    FileType.LOSSLESS,
    "aif", "aifc", "aiff", "alac", "ape", "flac", "pcm", "wav", "wv",
))
EXTENSION_TYPES.update(_table(
    FileType.CRYPTO,
    "age", "asc", "cer", "cert", "crt", "csr", "gpg", "kbx", "md5", "p12",
    "pem", "pfx", "pgp", "pub", "sha1", "sha224", "sha256", "sha384",
    "sha512", "sig", "signature",
))
EXTENSION_TYPES.update(_table(
    FileType.DOCUMENT,
    "djvu", "doc", "docx", "eml", "gdoc", "key", "keynote", "numbers",
    "odp", "ods", "odt", "pages", "pdf", "ppt", "pptx", "rtf", "xls", "xlsm",
    "xlsx",
))
EXTENSION_TYPES.update(_table(
    FileType.COMPRESSED,
    "7z", "ar", "arj", "br", "bz", "bz2", "bz3", "cpio", "deb", "dmg", "gz",
    "iso", "lz", "lz4", "lzh", "lzma", "lzo", "phar", "qcow", "qcow2", "rar",
    "rpm", "tar", "taz", "tbz", "tbz2", "tc", "tgz", "tlz", "txz", "tz",
    "xz", "vdi", "vhd", "vmdk", "z", "zip", "zst",
))
EXTENSION_TYPES.update(_table(
    FileType.TEMP,
    "bak", "bk", "bkp", "crdownload", "download", "fdmdownload", "part",
    "swn", "swo", "swp", "tmp",
))
EXTENSION_TYPES.update(_table(
    FileType.COMPILED,
    "a", "bundle", "class", "cma", "cmi", "cmo", "cmx", "dll", "dylib", "elc",
    "elf", "ko", "lib", "o", "obj", "pyc", "pyd", "pyo", "so", "zwc",
))
EXTENSION_TYPES.update(_table(
    FileType.BUILD,
    "ninja", "mk", "bazel", "cmake", "gradle", "ebuild",
))
EXTENSION_TYPES.update(_table(
    FileType.SOURCE,
    "asm", "awk", "bash", "bat", "c", "c++", "cc", "clj", "cljs", "cpp",
    "cr", "cs", "css", "cxx", "d", "dart", "el", "elm", "erl", "ex", "exs",
    "f90", "fish", "fs", "go", "groovy", "h", "h++", "hpp", "hs", "hxx",
    "ipynb", "java", "jl", "js", "jsx", "kt", "kts", "less", "lisp", "lua",
    "m", "ml", "mli", "nim", "nix", "php", "pl", "pm", "ps1", "py", "pyi",
    "r", "rb", "rs", "sass", "scala", "scm", "scss", "sh", "sql", "swift",
    "tcl", "ts", "tsx", "v", "vb", "vim", "vue", "zig", "zsh",
))
