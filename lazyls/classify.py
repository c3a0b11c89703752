"""File classification for colouring.

Each record gets exactly one ``Category``. Predicates run in a fixed order
and the first match wins; the order is part of the contract because some
extension tables overlap (every archive extension is both Crypto and
Compressed, and Crypto is checked first).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .file_model.types import DirectoryContext, FileRecord


class Category(Enum):
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SPECIAL = "special"
    EXECUTABLE = "executable"
    IMMEDIATE = "immediate"
    IMAGE = "image"
    VIDEO = "video"
    MUSIC = "music"
    LOSSLESS = "lossless"
    CRYPTO = "crypto"
    DOCUMENT = "document"
    COMPRESSED = "compressed"
    TEMP = "temp"
    COMPILED = "compiled"
    NORMAL = "normal"


IMMEDIATE_NAMES = frozenset({
    "Makefile", "Cargo.toml", "SConstruct", "CMakeLists.txt",
    "build.gradle", "Rakefile", "Gruntfile.js", "Gruntfile.coffee",
})

IMAGE_EXTENSIONS = frozenset({
    "png", "jpeg", "jpg", "gif", "bmp", "tiff", "tif",
    "ppm", "pgm", "pbm", "pnm", "webp", "raw", "arw",
    "svg", "stl", "eps", "dvi", "ps", "cbr",
    "cbz", "xpm", "ico",
})

VIDEO_EXTENSIONS = frozenset({
    "avi", "flv", "m2v", "mkv", "mov", "mp4", "mpeg",
    "mpg", "ogm", "ogv", "vob", "wmv",
})

MUSIC_EXTENSIONS = frozenset({"aac", "m4a", "mp3", "ogg", "wma"})

LOSSLESS_EXTENSIONS = frozenset({"alac", "ape", "flac", "wav"})

ARCHIVE_EXTENSIONS = frozenset({
    "zip", "tar", "z", "gz", "bz2", "a", "ar", "7z",
    "iso", "dmg", "tc", "rar", "par",
})

CRYPTO_EXTENSIONS = ARCHIVE_EXTENSIONS

DOCUMENT_EXTENSIONS = frozenset({
    "djvu", "doc", "docx", "dvi", "eml", "eps", "fotd",
    "odp", "odt", "pdf", "ppt", "pptx", "rtf",
    "xls", "xlsx",
})

COMPRESSED_EXTENSIONS = ARCHIVE_EXTENSIONS

TEMP_EXTENSIONS = frozenset({"tmp", "swp", "swo", "swn", "bak"})

COMPILED_EXTENSIONS = frozenset({"class", "elc", "hi", "o", "pyc"})

# Artifact extension -> extensions of the files it is usually built from.
SOURCE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "class": ("java",),
    "css": ("sass", "less"),
    "elc": ("el",),
    "hi": ("hs",),
    "js": ("coffee", "ts"),
    "o": ("c", "cpp"),
    "pyc": ("py",),
    "aux": ("tex",),
    "bbl": ("tex",),
    "blg": ("tex",),
    "lof": ("tex",),
    "log": ("tex",),
    "lot": ("tex",),
    "toc": ("tex",),
}


def source_files(record: FileRecord) -> list[Path]:
    """Paths that, when present next to ``record``, mark it as a build artifact."""
    if record.ext is None:
        return []
    return [record.path.with_suffix(f".{ext}") for ext in SOURCE_EXTENSIONS.get(record.ext, ())]


def is_immediate(record: FileRecord) -> bool:
    return record.name.startswith("README") or record.name_is_one_of(IMMEDIATE_NAMES)


def is_temp(record: FileRecord) -> bool:
    name = record.name
    return (
        name.endswith("~")
        or (name.startswith("#") and name.endswith("#"))
        or record.extension_is_one_of(TEMP_EXTENSIONS)
    )


def is_compiled(record: FileRecord, directory: DirectoryContext | None = None) -> bool:
    if record.extension_is_one_of(COMPILED_EXTENSIONS):
        return True
    siblings = directory if directory is not None else record.directory
    if siblings is None:
        return False
    return any(siblings.contains(path) for path in source_files(record))


def _extension_in(choices: frozenset[str]) -> Callable[[FileRecord], bool]:
    return lambda record: record.extension_is_one_of(choices)


_PREDICATES: tuple[tuple[Category, Callable[[FileRecord], bool]], ...] = (
    (Category.DIRECTORY, lambda record: record.is_directory),
    (Category.SYMLINK, lambda record: record.is_link),
    (Category.SPECIAL, lambda record: not record.is_file),
    (Category.EXECUTABLE, lambda record: record.is_executable_file),
    (Category.IMMEDIATE, is_immediate),
    (Category.IMAGE, _extension_in(IMAGE_EXTENSIONS)),
    (Category.VIDEO, _extension_in(VIDEO_EXTENSIONS)),
    (Category.MUSIC, _extension_in(MUSIC_EXTENSIONS)),
    (Category.LOSSLESS, _extension_in(LOSSLESS_EXTENSIONS)),
    (Category.CRYPTO, _extension_in(CRYPTO_EXTENSIONS)),
    (Category.DOCUMENT, _extension_in(DOCUMENT_EXTENSIONS)),
    (Category.COMPRESSED, _extension_in(COMPRESSED_EXTENSIONS)),
    (Category.TEMP, is_temp),
)


def classify(record: FileRecord, directory: DirectoryContext | None = None) -> Category:
    """Return the first category whose predicate matches ``record``.

    ``directory`` overrides the record's own sibling context for the
    compiled-artifact check.
    """
    for category, predicate in _PREDICATES:
        if predicate(record):
            return category
    if is_compiled(record, directory):
        return Category.COMPILED
    return Category.NORMAL


__all__ = [
    "Category",
    "classify",
    "source_files",
    "is_immediate",
    "is_temp",
    "is_compiled",
]
