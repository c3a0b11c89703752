"""Field renderers and layout engines for listings.

Mode dispatch lives in ``lazyls.render.view``.
"""

from .columns import Column, FieldContext, header_label, render_cell, render_file_name, row_cells
from .details import details_columns, render_details, render_table
from .grid import Direction, GridLayout, fit_into_width
from .grid_details import render_grid_details
from .lines import render_lines
from .size import SizeFormat, render_size, size_parts
from .times import TimeStyle, TimeType, format_time

__all__ = [
    "Column",
    "Direction",
    "FieldContext",
    "GridLayout",
    "SizeFormat",
    "TimeStyle",
    "TimeType",
    "details_columns",
    "fit_into_width",
    "format_time",
    "header_label",
    "render_cell",
    "render_details",
    "render_file_name",
    "render_grid_details",
    "render_lines",
    "render_size",
    "render_table",
    "row_cells",
    "size_parts",
]
