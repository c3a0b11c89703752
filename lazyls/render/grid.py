"""Width-fitted multi-column grid layout.

``fit_into_width`` searches for the largest column count whose padded
columns, joined by a two-space gap, fit the terminal. Cells fill either
row by row (across) or column by column (down).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..cell import Alignment, TextCell

GRID_SEPARATOR = "  "


class Direction(Enum):
    LEFT_TO_RIGHT = "across"
    TOP_TO_BOTTOM = "down"


def _position(index: int, direction: Direction, columns: int, rows: int) -> tuple[int, int]:
    if direction is Direction.LEFT_TO_RIGHT:
        return index // columns, index % columns
    return index % rows, index // rows


@dataclass(frozen=True)
class GridLayout:
    """A fitted arrangement of cells, ready to render."""

    cells: tuple[TextCell, ...]
    direction: Direction
    column_count: int
    row_count: int
    column_widths: tuple[int, ...]

    def rows(self) -> list[list[TextCell]]:
        """Cells grouped by row, each row in column order."""
        grid: list[list[TextCell]] = [[] for _ in range(self.row_count)]
        for index, cell in enumerate(self.cells):
            row, _column = _position(index, self.direction, self.column_count, self.row_count)
            grid[row].append(cell)
        return grid

    def render(self) -> str:
        """Return the grid text; each row ends with a newline."""
        lines: list[str] = []
        for row in self.rows():
            parts: list[str] = []
            last = len(row) - 1
            for column, cell in enumerate(row):
                if column == last:
                    parts.append(cell.render())
                else:
                    parts.append(cell.pad(self.column_widths[column], Alignment.LEFT))
            lines.append(GRID_SEPARATOR.join(parts) + "\n")
        return "".join(lines)


def _column_widths(cells: list[TextCell], direction: Direction, columns: int, rows: int) -> list[int]:
    widths = [0] * columns
    for index, cell in enumerate(cells):
        _row, column = _position(index, direction, columns, rows)
        if cell.width > widths[column]:
            widths[column] = cell.width
    return widths


def fit_into_width(cells: list[TextCell], terminal_width: int, direction: Direction = Direction.TOP_TO_BOTTOM) -> GridLayout | None:
    """Return the widest-fitting layout, or ``None`` when nothing fits.

    Counts are tried from one column per cell downwards; the first count
    whose total width stays within ``terminal_width`` wins.
    """
    count = len(cells)
    if count == 0:
        return GridLayout(cells=(), direction=direction, column_count=0, row_count=0, column_widths=())

    separator_width = len(GRID_SEPARATOR)
    for columns in range(count, 0, -1):
        rows = math.ceil(count / columns)
        widths = _column_widths(cells, direction, columns, rows)
        total = sum(widths) + (columns - 1) * separator_width
        if total > terminal_width:
            continue
        used = [width for index, width in enumerate(widths) if _column_used(index, count, direction, columns, rows)]
        return GridLayout(
            cells=tuple(cells),
            direction=direction,
            column_count=columns,
            row_count=rows,
            column_widths=tuple(used),
        )
    return None


def _column_used(column: int, count: int, direction: Direction, columns: int, rows: int) -> bool:
    if direction is Direction.LEFT_TO_RIGHT:
        return column < min(columns, count)
    return column * rows < count


__all__ = ["Direction", "GRID_SEPARATOR", "GridLayout", "fit_into_width"]
