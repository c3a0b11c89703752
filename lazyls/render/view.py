"""Output-mode dispatch: pick the engine that draws a listing."""

from __future__ import annotations

from ..cell import TextCell
from ..config import ListingOptions, OutputMode
from ..file_model.types import FileRecord
from ..theme import Colours
from ..users import UserNames
from .columns import Column, FieldContext, render_file_name
from .details import details_columns, render_details, render_table
from .grid import fit_into_width
from .grid_details import render_grid_details
from .lines import render_lines


def field_context(options: ListingOptions, colours: Colours, users: UserNames | None = None, current_year: int | None = None) -> FieldContext:
    return FieldContext(
        colours=colours,
        size_format=options.size_format,
        time_type=options.time_type,
        time_style=options.time_style,
        current_year=current_year,
        users=users if users is not None else UserNames(),
    )


def columns_for(options: ListingOptions) -> list[Column]:
    return details_columns(
        inode=options.inode,
        links=options.links,
        blocks=options.blocks,
        group=options.group,
        git=options.git,
    )


def render_grid(records: list[FileRecord], options: ListingOptions, colours: Colours, terminal_width: int | None) -> str:
    """Grid of names, or one per line when no width is known or nothing fits."""
    if terminal_width is None:
        return render_lines(records, colours, show_link_target=False)
    cells: list[TextCell] = [render_file_name(record, colours, show_link_target=False) for record in records]
    layout = fit_into_width(cells, terminal_width, options.direction)
    if layout is None:
        return render_lines(records, colours, show_link_target=False)
    return layout.render()


def render_listing(
    records: list[FileRecord],
    options: ListingOptions,
    ctx: FieldContext,
    terminal_width: int | None = None,
    tree_depths: list[int] | None = None,
) -> str:
    """Render already-ordered ``records`` in the mode ``options`` asks for.

    ``tree_depths`` (one per record) switches the details view into tree
    form; outside the details modes it indents a plain name list.
    """
    colours = ctx.colours
    mode = options.mode

    if tree_depths is not None:
        if mode in (OutputMode.DETAILS, OutputMode.GRID_DETAILS):
            return render_details(records, columns_for(options), ctx, options.header, tree_depths)
        rows = [[render_file_name(record, colours)] for record in records]
        return render_table(rows, [Column.FILE_NAME], False, tree_depths, indent_style=colours.punctuation)

    if mode is OutputMode.DETAILS:
        return render_details(records, columns_for(options), ctx, options.header)
    if mode is OutputMode.GRID_DETAILS:
        return render_grid_details(records, columns_for(options), ctx, terminal_width, options.header)
    if mode is OutputMode.LINES:
        return render_lines(records, colours)
    return render_grid(records, options, colours, terminal_width)


__all__ = ["columns_for", "field_context", "render_grid", "render_listing"]
