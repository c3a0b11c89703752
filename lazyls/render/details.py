"""Aligned details tables with optional headers and tree indentation."""

from __future__ import annotations

from ..cell import Alignment, TextCell
from ..file_model.types import FileRecord
from ..style import Plain, Style
from .columns import Column, FieldContext, header_label, row_cells

COLUMN_SEPARATOR = " "
TREE_INDENT = "│  "


def details_columns(
    *,
    inode: bool = False,
    links: bool = False,
    blocks: bool = False,
    group: bool = False,
    git: bool = False,
) -> list[Column]:
    """Return the column order for a details listing."""
    columns: list[Column] = []
    if inode:
        columns.append(Column.INODE)
    columns.append(Column.PERMISSIONS)
    if links:
        columns.append(Column.HARD_LINKS)
    columns.append(Column.FILE_SIZE)
    if blocks:
        columns.append(Column.BLOCKS)
    columns.append(Column.USER)
    if group:
        columns.append(Column.GROUP)
    columns.append(Column.TIMESTAMP)
    if git:
        columns.append(Column.GIT_STATUS)
    columns.append(Column.FILE_NAME)
    return columns


def column_widths(rows: list[list[TextCell]], labels: list[str] | None, column_count: int) -> list[int]:
    widths = [0] * column_count
    if labels is not None:
        widths = [len(label) for label in labels]
    for row in rows:
        for index, cell in enumerate(row):
            if cell.width > widths[index]:
                widths[index] = cell.width
    return widths


def _join_row(cells: list[TextCell], widths: list[int], alignments: list[Alignment]) -> str:
    parts: list[str] = []
    last = len(cells) - 1
    for index, cell in enumerate(cells):
        alignment = alignments[index]
        if index == last and alignment is Alignment.LEFT:
            parts.append(cell.render())
        else:
            parts.append(cell.pad(widths[index], alignment))
    return COLUMN_SEPARATOR.join(parts)


def render_table(
    rows: list[list[TextCell]],
    columns: list[Column],
    header: bool = False,
    tree_depths: list[int] | None = None,
    *,
    header_labels: list[str] | None = None,
    header_style: Style = Plain,
    indent_style: Style = Plain,
) -> str:
    """Lay ``rows`` out under ``columns`` and return the finished text.

    Every column is as wide as its widest cell (and its label when
    ``header`` is set). Cells are padded by the column's alignment and
    joined with one space; a left-aligned final column is left unpadded.
    ``tree_depths`` prefixes each row with that many indent glyphs.
    """
    labels: list[str] | None = None
    if header:
        labels = header_labels if header_labels is not None else [column.header for column in columns]
    widths = column_widths(rows, labels, len(columns))
    alignments = [column.alignment for column in columns]

    lines: list[str] = []
    if labels is not None:
        header_cells = [TextCell.paint(header_style, label) for label in labels]
        lines.append(_join_row(header_cells, widths, [Alignment.LEFT] * len(columns)) + "\n")

    for index, row in enumerate(rows):
        prefix = ""
        if tree_depths is not None and tree_depths[index] > 0:
            prefix = indent_style.paint(TREE_INDENT * tree_depths[index])
        lines.append(prefix + _join_row(row, widths, alignments) + "\n")
    return "".join(lines)


def render_details(
    records: list[FileRecord],
    columns: list[Column],
    ctx: FieldContext,
    header: bool = False,
    tree_depths: list[int] | None = None,
) -> str:
    """Render records as a details table using the field renderers."""
    rows = [row_cells(record, columns, ctx) for record in records]
    return render_table(
        rows,
        columns,
        header,
        tree_depths,
        header_labels=[header_label(column, ctx.time_type) for column in columns],
        header_style=ctx.colours.header,
        indent_style=ctx.colours.punctuation,
    )


__all__ = [
    "COLUMN_SEPARATOR",
    "TREE_INDENT",
    "column_widths",
    "details_columns",
    "render_details",
    "render_table",
]
