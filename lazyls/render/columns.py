"""Details columns and the field renderers behind them.

Each ``Column`` knows its alignment and header label; the renderer for a
column is looked up in ``_RENDERERS`` and turns one record into one
``TextCell``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ..cell import Alignment, TextCell
from ..classify import classify
from ..file_model.types import FileKind, FileRecord, GitStatus
from ..style import Plain, Style
from ..theme import Colours, category_style
from ..users import UserNames
from .size import SizeFormat, render_size
from .times import TimeStyle, TimeType, format_time, timestamp_for


class Column(Enum):
    PERMISSIONS = "permissions"
    FILE_SIZE = "size"
    TIMESTAMP = "timestamp"
    BLOCKS = "blocks"
    USER = "user"
    GROUP = "group"
    HARD_LINKS = "links"
    INODE = "inode"
    GIT_STATUS = "git"
    FILE_NAME = "name"

    @property
    def alignment(self) -> Alignment:
        if self in _RIGHT_ALIGNED:
            return Alignment.RIGHT
        return Alignment.LEFT

    @property
    def header(self) -> str:
        return _HEADERS[self]


_RIGHT_ALIGNED = frozenset({Column.FILE_SIZE, Column.BLOCKS, Column.HARD_LINKS, Column.INODE})

_HEADERS: dict[Column, str] = {
    Column.PERMISSIONS: "Permissions",
    Column.FILE_SIZE: "Size",
    Column.TIMESTAMP: "Date Modified",
    Column.BLOCKS: "Blocks",
    Column.USER: "User",
    Column.GROUP: "Group",
    Column.HARD_LINKS: "Links",
    Column.INODE: "inode",
    Column.GIT_STATUS: "Git",
    Column.FILE_NAME: "Name",
}


@dataclass(frozen=True)
class FieldContext:
    """Everything a field renderer needs besides the record itself."""

    colours: Colours
    size_format: SizeFormat = SizeFormat.DECIMAL
    time_type: TimeType = TimeType.MODIFIED
    time_style: TimeStyle = TimeStyle.DEFAULT
    current_year: int | None = None
    users: UserNames = field(default_factory=UserNames)


def header_label(column: Column, time_type: TimeType = TimeType.MODIFIED) -> str:
    if column is Column.TIMESTAMP:
        return time_type.header
    return column.header


_CONTROL_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r"}


def _escape_control(ch: str) -> str:
    return _CONTROL_ESCAPES.get(ch, f"\\u{{{ord(ch):x}}}")


def escaped_name(text: str, style: Style, control_style: Style) -> TextCell:
    """Paint ``text`` with control characters shown as visible escapes."""
    if text.isprintable():
        return TextCell.paint(style, text)

    cells: list[TextCell] = []
    run_start = 0
    for index, ch in enumerate(text):
        if ch.isprintable():
            continue
        if index > run_start:
            cells.append(TextCell.paint(style, text[run_start:index]))
        cells.append(TextCell.paint(control_style, _escape_control(ch)))
        run_start = index + 1
    if run_start < len(text):
        cells.append(TextCell.paint(style, text[run_start:]))
    return TextCell.concat(cells)


def name_style(record: FileRecord, colours: Colours) -> Style:
    if record.is_directory and record.is_mount_point:
        return colours.mount_point
    return category_style(colours, classify(record))


def render_file_name(record: FileRecord, colours: Colours, show_link_target: bool = True) -> TextCell:
    """Paint a record's name, plus `` -> target`` for symlinks when asked."""
    cell = escaped_name(record.label, name_style(record, colours), colours.control_char)
    if not show_link_target or not record.is_link or record.link_target is None:
        return cell

    target = record.link_target
    target_record = record.link_target_record
    if target_record is None:
        return cell + TextCell.concat([
            TextCell.paint(Plain, " "),
            TextCell.paint(colours.broken_arrow, "->"),
            TextCell.paint(Plain, " "),
            escaped_name(target, colours.broken_filename, colours.control_char),
        ])

    target_style = name_style(target_record, colours)
    parent, slash, leaf = target.rpartition("/")
    parts = [
        TextCell.paint(Plain, " "),
        TextCell.paint(colours.punctuation, "->"),
        TextCell.paint(Plain, " "),
    ]
    if slash and leaf:
        parts.append(escaped_name(parent + slash, colours.symlink_path, colours.control_char))
        parts.append(escaped_name(leaf, target_style, colours.control_char))
    else:
        # "sub/" or "../" names the directory itself
        parts.append(escaped_name(target, target_style, colours.control_char))
    return cell + TextCell.concat(parts)


def _type_char(record: FileRecord, colours: Colours) -> TextCell:
    perms = colours.perms
    if record.kind is FileKind.DIRECTORY:
        return TextCell.paint(perms.directory, "d")
    if record.kind is FileKind.SYMLINK:
        return TextCell.paint(perms.symlink, "l")
    if record.kind is FileKind.PIPE:
        return TextCell.paint(perms.pipe, "|")
    if record.kind is FileKind.SPECIAL:
        return TextCell.paint(perms.special, "s")
    return TextCell.paint(colours.punctuation, ".")


def _bit(is_set: bool, char: str, style: Style, dash: Style) -> TextCell:
    if is_set:
        return TextCell.paint(style, char)
    return TextCell.paint(dash, "-")


def render_permissions(record: FileRecord, ctx: FieldContext) -> TextCell:
    bits = record.permissions
    perms = ctx.colours.perms
    dash = perms.dash
    user_execute = perms.user_execute_file if record.is_file else perms.user_execute_other
    cells = [
        _type_char(record, ctx.colours),
        _bit(bits.user_read, "r", perms.user_read, dash),
        _bit(bits.user_write, "w", perms.user_write, dash),
        _bit(bits.user_execute, "x", user_execute, dash),
        _bit(bits.group_read, "r", perms.group_read, dash),
        _bit(bits.group_write, "w", perms.group_write, dash),
        _bit(bits.group_execute, "x", perms.group_execute, dash),
        _bit(bits.other_read, "r", perms.other_read, dash),
        _bit(bits.other_write, "w", perms.other_write, dash),
        _bit(bits.other_execute, "x", perms.other_execute, dash),
    ]
    if bits.has_xattrs:
        cells.append(TextCell.paint(perms.attribute, "@"))
    return TextCell.concat(cells)


def render_file_size(record: FileRecord, ctx: FieldContext) -> TextCell:
    return render_size(record, ctx.size_format, ctx.colours)


def render_timestamp(record: FileRecord, ctx: FieldContext) -> TextCell:
    timestamp = timestamp_for(record, ctx.time_type)
    if timestamp is None:
        return TextCell.blank(ctx.colours.punctuation)
    text = format_time(timestamp, ctx.time_style, current_year=ctx.current_year)
    return TextCell.paint(ctx.colours.date, text)


def render_blocks(record: FileRecord, ctx: FieldContext) -> TextCell:
    if record.blocks is None:
        return TextCell.blank(ctx.colours.punctuation)
    return TextCell.paint(ctx.colours.blocks, str(record.blocks))


def render_user(record: FileRecord, ctx: FieldContext) -> TextCell:
    users = ctx.colours.users
    style = users.user_you if ctx.users.is_current_user(record.user) else users.user_someone_else
    return TextCell.paint(style, ctx.users.user_name(record.user) or str(record.user))


def render_group(record: FileRecord, ctx: FieldContext) -> TextCell:
    users = ctx.colours.users
    style = users.group_yours if ctx.users.is_current_group(record.group) else users.group_not_yours
    return TextCell.paint(style, ctx.users.group_name(record.group) or str(record.group))


def render_links(record: FileRecord, ctx: FieldContext) -> TextCell:
    links = ctx.colours.links
    style = links.multi_link_file if record.links.multiple else links.normal
    return TextCell.paint(style, str(record.links.count))


def render_inode(record: FileRecord, ctx: FieldContext) -> TextCell:
    return TextCell.paint(ctx.colours.inode, str(record.inode))


def _git_char(status: GitStatus, colours: Colours) -> TextCell:
    git = colours.git
    styles = {
        GitStatus.NOT_MODIFIED: colours.punctuation,
        GitStatus.NEW: git.new,
        GitStatus.MODIFIED: git.modified,
        GitStatus.DELETED: git.deleted,
        GitStatus.RENAMED: git.renamed,
        GitStatus.TYPE_CHANGE: git.typechange,
    }
    return TextCell.paint(styles[status], status.value)


def render_git_status(record: FileRecord, ctx: FieldContext) -> TextCell:
    return _git_char(record.git.staged, ctx.colours) + _git_char(record.git.unstaged, ctx.colours)


def render_name_column(record: FileRecord, ctx: FieldContext) -> TextCell:
    return render_file_name(record, ctx.colours)


_RENDERERS: dict[Column, Callable[[FileRecord, FieldContext], TextCell]] = {
    Column.PERMISSIONS: render_permissions,
    Column.FILE_SIZE: render_file_size,
    Column.TIMESTAMP: render_timestamp,
    Column.BLOCKS: render_blocks,
    Column.USER: render_user,
    Column.GROUP: render_group,
    Column.HARD_LINKS: render_links,
    Column.INODE: render_inode,
    Column.GIT_STATUS: render_git_status,
    Column.FILE_NAME: render_name_column,
}


def render_cell(record: FileRecord, column: Column, ctx: FieldContext) -> TextCell:
    return _RENDERERS[column](record, ctx)


def row_cells(record: FileRecord, columns: list[Column], ctx: FieldContext) -> list[TextCell]:
    return [render_cell(record, column, ctx) for column in columns]


__all__ = [
    "Column",
    "FieldContext",
    "escaped_name",
    "header_label",
    "name_style",
    "render_cell",
    "render_file_name",
    "render_permissions",
    "row_cells",
]
