"""Tests for directory scanning and tree walking.

Uses real temporary directories so stat, symlink, and hidden-file handling
are exercised the same way a listing sees them.
"""

from __future__ import annotations

import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyls.classify import Category, classify
from lazyls.file_model.fs import ScanContext, build_tree_rows, kind_from_mode, list_directory, record_for_path
from lazyls.file_model.providers import NoAttributes, NoMounts, XattrProvider
from lazyls.file_model.types import FileKind, GitPair, GitStatus
from lazyls.sort import sort_records


def _by_name(records):
    return {record.name: record for record in records}


class ListDirectoryTests(unittest.TestCase):
    def test_lists_visible_children_with_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "notes.txt").write_text("hello\n", encoding="utf-8")
            (root / "src").mkdir()
            (root / ".hidden").write_text("x", encoding="utf-8")

            records, error = list_directory(root, ScanContext())

            self.assertIsNone(error)
            found = _by_name(records)
            self.assertEqual(set(found), {"notes.txt", "src"})
            self.assertEqual(found["notes.txt"].size, 6)
            self.assertIs(found["notes.txt"].kind, FileKind.FILE)
            self.assertIsNone(found["src"].size)
            self.assertIsNone(found["src"].blocks)
            self.assertIs(found["src"].kind, FileKind.DIRECTORY)

    def test_show_all_includes_dotfiles(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".hidden").write_text("x", encoding="utf-8")
            records, _error = list_directory(root, ScanContext(show_all=True))
            self.assertEqual([record.name for record in records], [".hidden"])

    def test_records_share_directory_context_including_hidden_siblings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("a", encoding="utf-8")
            (root / "b.txt").write_text("b", encoding="utf-8")
            (root / ".c.tex").write_text("c", encoding="utf-8")
            records, _error = list_directory(root, ScanContext())
            contexts = {id(record.directory) for record in records}
            self.assertEqual(len(contexts), 1)
            self.assertTrue(records[0].directory.contains(root / ".c.tex"))

    def test_hard_links_flag_multiple(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            original = root / "one"
            original.write_text("x", encoding="utf-8")
            try:
                os.link(original, root / "two")
            except OSError:
                self.skipTest("hard links unsupported")
            found = _by_name(list_directory(root, ScanContext())[0])
            self.assertEqual(found["one"].links.count, 2)
            self.assertTrue(found["one"].links.multiple)

    def test_symlink_targets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real.py").write_text("x", encoding="utf-8")
            try:
                os.symlink("real.py", root / "good")
                os.symlink("missing", root / "bad")
            except OSError:
                self.skipTest("symlinks unsupported")
            found = _by_name(list_directory(root, ScanContext())[0])
            self.assertIs(found["good"].kind, FileKind.SYMLINK)
            self.assertEqual(found["good"].link_target, "real.py")
            self.assertEqual(found["good"].link_target_record.name, "real.py")
            self.assertFalse(found["good"].is_broken_link)
            self.assertEqual(found["bad"].link_target, "missing")
            self.assertTrue(found["bad"].is_broken_link)

    def test_unreadable_directory_reports_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            records, error = list_directory(Path(tmp) / "nope", ScanContext())
            self.assertEqual(records, [])
            self.assertIsInstance(error, OSError)

    def test_git_provider_is_consulted_per_directory(self) -> None:
        class _Git:
            def status(self, path: Path, is_dir: bool) -> GitPair:
                return GitPair(GitStatus.NOT_MODIFIED, GitStatus.MODIFIED)

        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("a", encoding="utf-8")
            lookups: list[Path] = []

            def provider_for(directory: Path):
                lookups.append(directory)
                return _Git()

            records, _error = list_directory(root, ScanContext(git_for_directory=provider_for))
            self.assertEqual(lookups, [root])
            self.assertEqual(records[0].git.unstaged, GitStatus.MODIFIED)

    def test_record_for_path_names_record_after_final_component(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            project = Path(tmp) / "proj.v2"
            project.mkdir()
            makefile = project / "Makefile"
            makefile.write_text("all:\n", encoding="utf-8")

            record = record_for_path(makefile, ScanContext())

            self.assertEqual(record.name, "Makefile")
            self.assertIsNone(record.ext)
            self.assertEqual(record.label, str(makefile))
            self.assertIs(classify(record), Category.IMMEDIATE)
            with self.assertRaises(OSError):
                record_for_path(Path(tmp) / "missing", ScanContext())

    def test_record_for_path_sees_sibling_sources(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "paper.tex").write_text("x", encoding="utf-8")
            (root / "paper.aux").write_text("x", encoding="utf-8")
            record = record_for_path(root / "paper.aux", ScanContext())
            self.assertIs(classify(record), Category.COMPILED)

    def test_record_for_current_directory_keeps_dot_name(self) -> None:
        record = record_for_path(Path("."), ScanContext())
        self.assertEqual(record.name, ".")
        self.assertIs(record.kind, FileKind.DIRECTORY)

class TreeRowsTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        (root / "b").mkdir()
        (root / "b" / "inner.txt").write_text("x", encoding="utf-8")
        (root / "b" / "deeper").mkdir()
        (root / "b" / "deeper" / "leaf").write_text("x", encoding="utf-8")
        (root / "a.txt").write_text("x", encoding="utf-8")

    def test_depth_first_with_sorted_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            context = ScanContext()
            start = record_for_path(root, context)
            rows, errors = build_tree_rows([start], context, sort_records)
            self.assertEqual(errors, [])
            self.assertEqual(
                [(record.name, depth) for record, depth in rows[1:]],
                [("a.txt", 1), ("b", 1), ("deeper", 2), ("leaf", 3), ("inner.txt", 2)],
            )
            self.assertEqual(rows[0][1], 0)

    def test_depth_limit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            context = ScanContext()
            start = record_for_path(root, context)
            rows, _errors = build_tree_rows([start], context, sort_records, max_depth=1)
            self.assertEqual([depth for _record, depth in rows], [0, 1, 1])


class ProviderTests(unittest.TestCase):
    def test_no_op_providers(self) -> None:
        self.assertFalse(NoAttributes().has_attributes(Path("/")))
        self.assertFalse(NoMounts().is_mount_point(Path("/")))

    def test_xattr_provider_treats_errors_as_absent(self) -> None:
        with mock.patch("lazyls.file_model.providers.os.listxattr", side_effect=OSError("unsupported"), create=True):
            self.assertFalse(XattrProvider().has_attributes(Path("/nope")))

    def test_xattr_provider_reports_attributes(self) -> None:
        with mock.patch("lazyls.file_model.providers.os.listxattr", return_value=["user.tag"], create=True):
            self.assertTrue(XattrProvider().has_attributes(Path("/x")))

    def test_kind_from_mode(self) -> None:
        self.assertIs(kind_from_mode(stat.S_IFDIR | 0o755), FileKind.DIRECTORY)
        self.assertIs(kind_from_mode(stat.S_IFIFO), FileKind.PIPE)
        self.assertIs(kind_from_mode(stat.S_IFCHR), FileKind.SPECIAL)


if __name__ == "__main__":
    unittest.main()
