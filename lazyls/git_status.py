"""Git status collection for the git column.

Runs ``git status --porcelain`` once per repository and answers staged and
unstaged status queries for files and directories below it. Directories
report the most notable status of anything they contain. Any git failure
degrades to "no git information" rather than an error.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .file_model.types import GitPair, GitStatus

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 2.0

# Most notable first; a directory shows the first of these found below it.
_STATUS_PRIORITY: tuple[GitStatus, ...] = (
    GitStatus.NEW,
    GitStatus.MODIFIED,
    GitStatus.DELETED,
    GitStatus.RENAMED,
    GitStatus.TYPE_CHANGE,
)

_INDEX_CODES: dict[str, GitStatus] = {
    "A": GitStatus.NEW,
    "C": GitStatus.NEW,
    "M": GitStatus.MODIFIED,
    "U": GitStatus.MODIFIED,
    "D": GitStatus.DELETED,
    "R": GitStatus.RENAMED,
    "T": GitStatus.TYPE_CHANGE,
}

_WORKTREE_CODES: dict[str, GitStatus] = {
    "?": GitStatus.NEW,
    "A": GitStatus.NEW,
    "M": GitStatus.MODIFIED,
    "U": GitStatus.MODIFIED,
    "D": GitStatus.DELETED,
    "R": GitStatus.RENAMED,
    "T": GitStatus.TYPE_CHANGE,
}


class GitStatusProvider(Protocol):
    def status(self, path: Path, is_dir: bool) -> GitPair: ...


class NoGitStatus:
    """Reports every path as unmodified."""

    def status(self, path: Path, is_dir: bool) -> GitPair:
        return GitPair()


def _run_git(cwd: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", " ".join(args), cwd, exc)
        return None


def resolve_repo_root(path: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> Path | None:
    """Return the work-tree root containing ``path``, or ``None`` outside git."""
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``git status --porcelain=v1 -z`` output into ``(XY, path)`` pairs."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # Renames and copies carry the source path as an extra token.
        if "R" in status or "C" in status:
            index += 1

    return records


def _most_notable(statuses: set[GitStatus]) -> GitStatus:
    for status in _STATUS_PRIORITY:
        if status in statuses:
            return status
    return GitStatus.NOT_MODIFIED


class RepoGitStatus:
    """Status snapshot of one repository.

    Untracked directories appear in porcelain output as a single ``dir/``
    entry; everything beneath one of them counts as new.
    """

    def __init__(self, repo_root: Path, records: list[tuple[str, str]]) -> None:
        self.repo_root = repo_root
        self._entries: dict[Path, tuple[GitStatus, GitStatus]] = {}
        self._untracked_dirs: list[Path] = []
        for code, rel_path in records:
            if not rel_path or code == "!!":
                continue
            target = repo_root / rel_path.rstrip("/")
            staged = _INDEX_CODES.get(code[0], GitStatus.NOT_MODIFIED)
            unstaged = _WORKTREE_CODES.get(code[1], GitStatus.NOT_MODIFIED)
            if code == "??" and rel_path.endswith("/"):
                self._untracked_dirs.append(target)
            self._entries[target] = (staged, unstaged)

    @classmethod
    def scan(cls, path: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> "RepoGitStatus | None":
        repo_root = resolve_repo_root(path, timeout_seconds)
        if repo_root is None:
            return None
        proc = _run_git(
            repo_root,
            ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
            timeout_seconds,
        )
        if proc is None or proc.returncode != 0:
            logger.debug("git status failed under %s", repo_root)
            return None
        return cls(repo_root, iter_porcelain_records(proc.stdout))

    def _inside_untracked_dir(self, path: Path) -> bool:
        return any(path == root or path.is_relative_to(root) for root in self._untracked_dirs)

    def status(self, path: Path, is_dir: bool) -> GitPair:
        try:
            target = path.resolve()
        except OSError:
            target = path
        if self._inside_untracked_dir(target):
            return GitPair(GitStatus.NOT_MODIFIED, GitStatus.NEW)
        if not is_dir:
            staged, unstaged = self._entries.get(target, (GitStatus.NOT_MODIFIED, GitStatus.NOT_MODIFIED))
            return GitPair(staged, unstaged)

        staged_found: set[GitStatus] = set()
        unstaged_found: set[GitStatus] = set()
        for entry_path, (staged, unstaged) in self._entries.items():
            if entry_path == target or entry_path.is_relative_to(target):
                staged_found.add(staged)
                unstaged_found.add(unstaged)
        return GitPair(_most_notable(staged_found), _most_notable(unstaged_found))


class GitRepositories:
    """Caches one ``RepoGitStatus`` per repository across a listing."""

    def __init__(self, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds
        self._by_root: dict[Path, RepoGitStatus] = {}
        self._outside: set[Path] = set()

    def provider_for(self, directory: Path) -> GitStatusProvider:
        try:
            directory = directory.resolve()
        except OSError:
            return NoGitStatus()
        if directory in self._outside:
            return NoGitStatus()
        for root, repo in self._by_root.items():
            if directory.is_relative_to(root):
                return repo

        repo = RepoGitStatus.scan(directory, self.timeout_seconds)
        if repo is None:
            self._outside.add(directory)
            return NoGitStatus()
        self._by_root[repo.repo_root] = repo
        return repo


__all__ = [
    "GitStatusProvider",
    "NoGitStatus",
    "RepoGitStatus",
    "GitRepositories",
    "iter_porcelain_records",
    "resolve_repo_root",
]
