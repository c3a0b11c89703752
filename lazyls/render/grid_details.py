"""Several details tables side by side.

Rows are split column-major into ``n`` tables, each laid out with its own
column widths. The widest ``n`` whose joined tables still fit the
terminal is used; a single table is the fallback.
"""

from __future__ import annotations

import math

from ..ansi import display_width
from ..file_model.types import FileRecord
from .columns import Column, FieldContext
from .details import render_details

TABLE_GAP = "  "


def _table_lines(records: list[FileRecord], columns: list[Column], ctx: FieldContext, header: bool) -> list[str]:
    text = render_details(records, columns, ctx, header)
    return text.splitlines()


def _side_by_side(tables: list[list[str]]) -> tuple[list[str], int]:
    widths = [max((display_width(line) for line in table), default=0) for table in tables]
    height = max(len(table) for table in tables)
    lines: list[str] = []
    for row in range(height):
        parts: list[str] = []
        last = len(tables) - 1
        for index, table in enumerate(tables):
            line = table[row] if row < len(table) else ""
            if index < last:
                line += " " * (widths[index] - display_width(line))
            parts.append(line)
        lines.append(TABLE_GAP.join(parts).rstrip(" "))
    total = sum(widths) + (len(tables) - 1) * len(TABLE_GAP)
    return lines, total


def split_column_major(records: list[FileRecord], count: int) -> list[list[FileRecord]]:
    per_table = math.ceil(len(records) / count)
    return [records[start : start + per_table] for start in range(0, len(records), per_table)]


def render_grid_details(
    records: list[FileRecord],
    columns: list[Column],
    ctx: FieldContext,
    terminal_width: int | None,
    header: bool = False,
) -> str:
    """Return the widest side-by-side arrangement that fits ``terminal_width``."""
    single = _table_lines(records, columns, ctx, header)
    best = single
    if terminal_width is None or len(records) < 2:
        return "".join(line + "\n" for line in best)

    for count in range(2, len(records) + 1):
        chunks = split_column_major(records, count)
        if len(chunks) < count:
            continue
        tables = [_table_lines(chunk, columns, ctx, header) for chunk in chunks]
        lines, total = _side_by_side(tables)
        if total > terminal_width:
            break
        best = lines
    return "".join(line + "\n" for line in best)


__all__ = ["TABLE_GAP", "render_grid_details", "split_column_major"]
