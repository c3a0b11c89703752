"""One file name per line."""

from __future__ import annotations

from ..file_model.types import FileRecord
from ..theme import Colours
from .columns import render_file_name


def render_lines(records: list[FileRecord], colours: Colours, show_link_target: bool = True) -> str:
    return "".join(render_file_name(record, colours, show_link_target).render() + "\n" for record in records)


__all__ = ["render_lines"]
