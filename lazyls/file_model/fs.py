"""Filesystem scanning for listed records and tree rows."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .providers import AttributeProvider, MountProvider, NoAttributes, NoMounts
from .types import DirectoryContext, FileKind, FileRecord, GitPair, Links, Permissions, Timestamps

if TYPE_CHECKING:
    from ..git_status import GitStatusProvider

logger = logging.getLogger(__name__)

RecordOrder = Callable[[list[FileRecord]], list[FileRecord]]


@dataclass(frozen=True)
class ScanContext:
    """Visibility rule plus the providers used to fill record metadata."""

    show_all: bool = False
    attributes: AttributeProvider = field(default_factory=NoAttributes)
    mounts: MountProvider = field(default_factory=NoMounts)
    git_for_directory: Callable[[Path], GitStatusProvider] | None = None


def kind_from_mode(mode: int) -> FileKind:
    if stat.S_ISDIR(mode):
        return FileKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileKind.SYMLINK
    if stat.S_ISREG(mode):
        return FileKind.FILE
    if stat.S_ISFIFO(mode):
        return FileKind.PIPE
    return FileKind.SPECIAL


def _link_target_record(path: Path) -> tuple[str | None, FileRecord | None]:
    try:
        target = os.readlink(path)
    except OSError as exc:
        logger.debug("readlink failed for %s: %s", path, exc)
        return None, None

    target_path = path.parent / target
    try:
        target_stat = target_path.stat()
    except OSError:
        return target, None
    target_record = FileRecord(
        name=Path(target).name or target,
        path=target_path,
        kind=kind_from_mode(target_stat.st_mode),
        permissions=Permissions.from_mode(target_stat.st_mode),
    )
    return target, target_record


def record_from_stat(
    path: Path,
    name: str,
    st: os.stat_result,
    context: ScanContext,
    directory: DirectoryContext | None = None,
    git: GitStatusProvider | None = None,
    display_name: str | None = None,
) -> FileRecord:
    """Build a record for ``path`` from an ``lstat`` result."""
    kind = kind_from_mode(st.st_mode)
    is_dir = kind is FileKind.DIRECTORY

    link_target: str | None = None
    link_target_record: FileRecord | None = None
    if kind is FileKind.SYMLINK:
        link_target, link_target_record = _link_target_record(path)

    blocks: int | None = None
    if kind in (FileKind.FILE, FileKind.SYMLINK):
        blocks = getattr(st, "st_blocks", None)

    return FileRecord(
        name=name,
        path=path,
        kind=kind,
        size=None if is_dir else int(st.st_size),
        permissions=Permissions.from_mode(st.st_mode, context.attributes.has_attributes(path)),
        timestamps=Timestamps(
            modified=st.st_mtime,
            accessed=st.st_atime,
            created=getattr(st, "st_birthtime", None),
        ),
        links=Links(count=st.st_nlink, multiple=kind is FileKind.FILE and st.st_nlink > 1),
        user=st.st_uid,
        group=st.st_gid,
        inode=st.st_ino,
        blocks=blocks,
        git=git.status(path, is_dir) if git is not None else GitPair(),
        is_mount_point=is_dir and context.mounts.is_mount_point(path),
        display_name=display_name,
        link_target=link_target,
        link_target_record=link_target_record,
        directory=directory,
    )


def _git_provider(context: ScanContext, directory: Path) -> GitStatusProvider | None:
    if context.git_for_directory is None:
        return None
    return context.git_for_directory(directory)


def record_for_path(path: Path, context: ScanContext) -> FileRecord:
    """Build a record for a path named directly by the user.

    The record is named after the final path component so classification
    and extension sorting see the file name, while the path as typed is
    kept for display. Raises ``OSError`` when the path cannot be stat'ed.
    """
    st = path.lstat()
    parent = path.parent
    try:
        siblings: DirectoryContext | None = DirectoryContext.from_names(parent, os.listdir(parent))
    except OSError as exc:
        logger.debug("cannot read parent of %s: %s", path, exc)
        siblings = None
    return record_from_stat(
        path,
        path.name or str(path),
        st,
        context,
        siblings,
        git=_git_provider(context, parent),
        display_name=str(path),
    )


def list_directory(directory: Path, context: ScanContext) -> tuple[list[FileRecord], Exception | None]:
    """Return visible children of ``directory`` in scan order.

    Returns ``(records, scan_error)``. ``scan_error`` is set when the
    directory itself cannot be read; entries that fail to stat are skipped.
    """
    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries]
    except OSError as exc:
        logger.debug("cannot read directory %s: %s", directory, exc)
        return [], exc

    shared = DirectoryContext.from_names(directory, names)
    git = _git_provider(context, directory)
    records: list[FileRecord] = []
    for name in names:
        if not context.show_all and name.startswith("."):
            continue
        child_path = directory / name
        try:
            st = child_path.lstat()
        except OSError as exc:
            logger.debug("skipping %s: %s", child_path, exc)
            continue
        records.append(record_from_stat(child_path, name, st, context, shared, git))
    return records, None


def build_tree_rows(
    records: list[FileRecord],
    context: ScanContext,
    order: RecordOrder,
    max_depth: int | None = None,
    depth: int = 0,
) -> tuple[list[tuple[FileRecord, int]], list[tuple[Path, Exception]]]:
    """Walk directories depth-first and return ``(record, depth)`` rows.

    ``records`` are emitted in the given order at ``depth``; each real
    directory is followed by its own ordered children one level deeper.
    Rows deeper than ``max_depth`` are not produced. Symlinked directories
    are not followed.
    """
    rows: list[tuple[FileRecord, int]] = []
    errors: list[tuple[Path, Exception]] = []
    for record in records:
        rows.append((record, depth))
        if not record.is_directory:
            continue
        if max_depth is not None and depth + 1 > max_depth:
            continue
        children, error = list_directory(record.path, context)
        if error is not None:
            errors.append((record.path, error))
            continue
        child_rows, child_errors = build_tree_rows(order(children), context, order, max_depth, depth + 1)
        rows.extend(child_rows)
        errors.extend(child_errors)
    return rows, errors


__all__ = [
    "RecordOrder",
    "ScanContext",
    "build_tree_rows",
    "kind_from_mode",
    "list_directory",
    "record_for_path",
    "record_from_stat",
]
