"""Tests for per-column field renderers."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyls.cell import Alignment
from lazyls.file_model.types import FileKind, FileRecord, GitPair, GitStatus, Links, Permissions, Timestamps
from lazyls.render.columns import (
    Column,
    FieldContext,
    escaped_name,
    header_label,
    render_cell,
    render_file_name,
    render_permissions,
)
from lazyls.render.times import TimeType
from lazyls.style import Plain
from lazyls.theme import DEFAULT_COLOURS, PLAIN_COLOURS
from lazyls.users import UserNames


class _FakeUsers(UserNames):
    def __init__(self) -> None:
        super().__init__(current_uid=1000, current_groups=frozenset({100}))

    def user_name(self, uid: int) -> str | None:
        return {1000: "alice", 0: "root"}.get(uid)

    def group_name(self, gid: int) -> str | None:
        return {100: "users"}.get(gid)


def _ctx(colours=PLAIN_COLOURS) -> FieldContext:
    return FieldContext(colours=colours, users=_FakeUsers())


class ColumnMetadataTests(unittest.TestCase):
    def test_numeric_columns_are_right_aligned(self) -> None:
        for column in (Column.FILE_SIZE, Column.BLOCKS, Column.HARD_LINKS, Column.INODE):
            self.assertIs(column.alignment, Alignment.RIGHT)
        for column in (Column.PERMISSIONS, Column.USER, Column.FILE_NAME, Column.GIT_STATUS):
            self.assertIs(column.alignment, Alignment.LEFT)

    def test_timestamp_header_follows_time_type(self) -> None:
        self.assertEqual(header_label(Column.TIMESTAMP), "Date Modified")
        self.assertEqual(header_label(Column.TIMESTAMP, TimeType.CREATED), "Date Created")
        self.assertEqual(header_label(Column.FILE_SIZE), "Size")


class FieldRendererTests(unittest.TestCase):
    def test_permissions_string(self) -> None:
        record = FileRecord(name="run.sh", path=Path("run.sh"), permissions=Permissions.from_mode(0o754))
        self.assertEqual(render_permissions(record, _ctx()).text(), ".rwxr-xr--")

    def test_permissions_type_chars_and_xattr_marker(self) -> None:
        directory = FileRecord(name="d", path=Path("d"), kind=FileKind.DIRECTORY, permissions=Permissions.from_mode(0o700, True))
        self.assertEqual(render_permissions(directory, _ctx()).text(), "drwx------@")
        pipe = FileRecord(name="p", path=Path("p"), kind=FileKind.PIPE)
        self.assertEqual(render_permissions(pipe, _ctx()).text()[0], "|")
        link = FileRecord(name="l", path=Path("l"), kind=FileKind.SYMLINK)
        self.assertEqual(render_permissions(link, _ctx()).text()[0], "l")

    def test_user_execute_style_differs_for_files(self) -> None:
        perms = Permissions.from_mode(0o700)
        file_cell = render_permissions(FileRecord(name="f", path=Path("f"), permissions=perms), _ctx(DEFAULT_COLOURS))
        dir_cell = render_permissions(
            FileRecord(name="d", path=Path("d"), kind=FileKind.DIRECTORY, permissions=perms),
            _ctx(DEFAULT_COLOURS),
        )
        self.assertEqual(file_cell.contents[3][0], DEFAULT_COLOURS.perms.user_execute_file)
        self.assertEqual(dir_cell.contents[3][0], DEFAULT_COLOURS.perms.user_execute_other)

    def test_user_and_group_names_fall_back_to_ids(self) -> None:
        ctx = _ctx(DEFAULT_COLOURS)
        mine = FileRecord(name="a", path=Path("a"), user=1000, group=100)
        theirs = FileRecord(name="b", path=Path("b"), user=4242, group=4343)
        self.assertEqual(render_cell(mine, Column.USER, ctx).contents, ((DEFAULT_COLOURS.users.user_you, "alice"),))
        self.assertEqual(render_cell(theirs, Column.USER, ctx).text(), "4242")
        self.assertEqual(render_cell(mine, Column.GROUP, ctx).contents, ((DEFAULT_COLOURS.users.group_yours, "users"),))
        self.assertEqual(render_cell(theirs, Column.GROUP, ctx).text(), "4343")

    def test_links_highlight_multiple(self) -> None:
        ctx = _ctx(DEFAULT_COLOURS)
        record = FileRecord(name="a", path=Path("a"), links=Links(count=3, multiple=True))
        cell = render_cell(record, Column.HARD_LINKS, ctx)
        self.assertEqual(cell.contents, ((DEFAULT_COLOURS.links.multi_link_file, "3"),))

    def test_missing_created_time_renders_blank(self) -> None:
        ctx = FieldContext(colours=PLAIN_COLOURS, time_type=TimeType.CREATED, users=_FakeUsers())
        record = FileRecord(name="a", path=Path("a"), timestamps=Timestamps(modified=0.0))
        self.assertEqual(render_cell(record, Column.TIMESTAMP, ctx).text(), "-")

    def test_blocks_and_inode(self) -> None:
        record = FileRecord(name="a", path=Path("a"), blocks=8, inode=1234)
        self.assertEqual(render_cell(record, Column.BLOCKS, _ctx()).text(), "8")
        self.assertEqual(render_cell(record, Column.INODE, _ctx()).text(), "1234")
        directory = FileRecord(name="d", path=Path("d"), kind=FileKind.DIRECTORY)
        self.assertEqual(render_cell(directory, Column.BLOCKS, _ctx()).text(), "-")

    def test_git_status_pair(self) -> None:
        record = FileRecord(name="a", path=Path("a"), git=GitPair(GitStatus.NEW, GitStatus.MODIFIED))
        cell = render_cell(record, Column.GIT_STATUS, _ctx(DEFAULT_COLOURS))
        self.assertEqual(cell.text(), "NM")
        self.assertEqual(cell.width, 2)
        self.assertEqual(render_cell(FileRecord(name="b", path=Path("b")), Column.GIT_STATUS, _ctx()).text(), "--")


class FileNameTests(unittest.TestCase):
    def test_name_uses_category_colour(self) -> None:
        record = FileRecord(name="src", path=Path("src"), kind=FileKind.DIRECTORY)
        cell = render_file_name(record, DEFAULT_COLOURS)
        self.assertEqual(cell.contents, ((DEFAULT_COLOURS.filetypes.directory, "src"),))

    def test_mount_point_style(self) -> None:
        record = FileRecord(name="mnt", path=Path("mnt"), kind=FileKind.DIRECTORY, is_mount_point=True)
        self.assertEqual(render_file_name(record, DEFAULT_COLOURS).contents[0][0], DEFAULT_COLOURS.mount_point)

    def test_symlink_target_is_appended(self) -> None:
        target = FileRecord(name="real.py", path=Path("lib/real.py"))
        record = FileRecord(
            name="link",
            path=Path("link"),
            kind=FileKind.SYMLINK,
            link_target="lib/real.py",
            link_target_record=target,
        )
        cell = render_file_name(record, DEFAULT_COLOURS)
        self.assertEqual(cell.text(), "link -> lib/real.py")
        self.assertEqual(cell.width, len("link -> lib/real.py"))
        self.assertEqual(render_file_name(record, DEFAULT_COLOURS, show_link_target=False).text(), "link")

    def test_directory_target_with_trailing_slash_is_shown_once(self) -> None:
        for target_text in ("sub/", "../"):
            target = FileRecord(name=target_text, path=Path(target_text), kind=FileKind.DIRECTORY)
            record = FileRecord(
                name="link",
                path=Path("link"),
                kind=FileKind.SYMLINK,
                link_target=target_text,
                link_target_record=target,
            )
            cell = render_file_name(record, DEFAULT_COLOURS)
            self.assertEqual(cell.text(), f"link -> {target_text}")
            self.assertEqual(cell.contents[-1], (DEFAULT_COLOURS.filetypes.directory, target_text))

    def test_command_line_path_is_displayed_as_typed(self) -> None:
        record = FileRecord(name="README.md", path=Path("src/README.md"), display_name="src/README.md")
        cell = render_file_name(record, DEFAULT_COLOURS)
        self.assertEqual(cell.contents, ((DEFAULT_COLOURS.filetypes.immediate, "src/README.md"),))

    def test_broken_symlink_uses_broken_styles(self) -> None:
        record = FileRecord(name="dangling", path=Path("dangling"), kind=FileKind.SYMLINK, link_target="missing")
        self.assertTrue(record.is_broken_link)
        cell = render_file_name(record, DEFAULT_COLOURS)
        self.assertEqual(cell.text(), "dangling -> missing")
        self.assertIn((DEFAULT_COLOURS.broken_arrow, "->"), cell.contents)
        self.assertIn((DEFAULT_COLOURS.broken_filename, "missing"), cell.contents)

    def test_control_characters_are_escaped(self) -> None:
        cell = escaped_name("bad\nname", Plain, DEFAULT_COLOURS.control_char)
        self.assertEqual(cell.text(), "bad\\nname")
        self.assertEqual(cell.width, 9)
        self.assertEqual(escaped_name("a\x01", Plain, Plain).text(), "a\\u{1}")


if __name__ == "__main__":
    unittest.main()
