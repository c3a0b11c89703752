"""Domain datatypes for listed files and their metadata fields.

Records are produced by the scanner and only read by the presentation
layers. Field values are small typed wrappers so renderers never have to
guess what a bare integer means.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FileKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SPECIAL = "special"


class GitStatus(Enum):
    NOT_MODIFIED = "-"
    NEW = "N"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    TYPE_CHANGE = "T"


@dataclass(frozen=True)
class GitPair:
    """Staged and unstaged status for one path."""

    staged: GitStatus = GitStatus.NOT_MODIFIED
    unstaged: GitStatus = GitStatus.NOT_MODIFIED


@dataclass(frozen=True)
class Permissions:
    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    has_xattrs: bool = False

    @classmethod
    def from_mode(cls, mode: int, has_xattrs: bool = False) -> "Permissions":
        return cls(
            user_read=bool(mode & 0o400),
            user_write=bool(mode & 0o200),
            user_execute=bool(mode & 0o100),
            group_read=bool(mode & 0o040),
            group_write=bool(mode & 0o020),
            group_execute=bool(mode & 0o010),
            other_read=bool(mode & 0o004),
            other_write=bool(mode & 0o002),
            other_execute=bool(mode & 0o001),
            has_xattrs=has_xattrs,
        )


@dataclass(frozen=True)
class Links:
    count: int = 1
    multiple: bool = False


@dataclass(frozen=True)
class Timestamps:
    """Seconds since the epoch for each timestamp kind.

    ``created`` is ``None`` where the filesystem reports no birth time.
    """

    modified: float = 0.0
    accessed: float = 0.0
    created: float | None = None


@dataclass(frozen=True)
class DirectoryContext:
    """Read-only view of a directory's entries for sibling lookups.

    Records share one context per directory; the context never points back
    at the records.
    """

    path: Path
    contents: frozenset[Path] = frozenset()

    @classmethod
    def from_names(cls, path: Path, names: list[str] | tuple[str, ...]) -> "DirectoryContext":
        return cls(path=path, contents=frozenset(path / name for name in names))

    def contains(self, path: Path) -> bool:
        return path in self.contents


def extension_of(name: str) -> str | None:
    """Return the lowercase text after the last dot, or ``None``.

    Dotfiles count: ``.vimrc`` has the extension ``vimrc``.
    """
    dot = name.rfind(".")
    if dot < 0:
        return None
    return name[dot + 1 :].lower()


@dataclass(frozen=True)
class FileRecord:
    """One listed file plus the metadata the views need."""

    name: str
    path: Path
    kind: FileKind = FileKind.FILE
    size: int | None = None
    permissions: Permissions = field(default_factory=Permissions)
    timestamps: Timestamps = field(default_factory=Timestamps)
    links: Links = field(default_factory=Links)
    user: int = 0
    group: int = 0
    inode: int = 0
    blocks: int | None = None
    git: GitPair = field(default_factory=GitPair)
    is_mount_point: bool = False
    display_name: str | None = field(default=None, compare=False)
    link_target: str | None = None
    link_target_record: FileRecord | None = field(default=None, repr=False, compare=False)
    directory: DirectoryContext | None = field(default=None, repr=False, compare=False)
    ext: str | None = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ext", extension_of(self.name))

    @property
    def label(self) -> str:
        """Text shown for the record: the path as typed for command-line
        arguments, the bare name for directory entries."""
        return self.display_name if self.display_name is not None else self.name

    @property
    def is_directory(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is FileKind.FILE

    @property
    def is_link(self) -> bool:
        return self.kind is FileKind.SYMLINK

    @property
    def is_executable_file(self) -> bool:
        return self.is_file and self.permissions.user_execute

    @property
    def is_broken_link(self) -> bool:
        return self.is_link and self.link_target_record is None

    def extension_is_one_of(self, choices: frozenset[str]) -> bool:
        return self.ext is not None and self.ext in choices

    def name_is_one_of(self, choices: frozenset[str]) -> bool:
        return self.name in choices


__all__ = [
    "DirectoryContext",
    "FileKind",
    "FileRecord",
    "GitPair",
    "GitStatus",
    "Links",
    "Permissions",
    "Timestamps",
    "extension_of",
]
