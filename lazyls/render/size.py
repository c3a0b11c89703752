"""File size formatting with decimal and binary unit prefixes."""

from __future__ import annotations

from enum import Enum

from ..cell import TextCell
from ..file_model.types import FileRecord
from ..theme import Colours


class SizeFormat(Enum):
    DECIMAL = "decimal"
    BINARY = "binary"
    BYTES = "bytes"


DECIMAL_PREFIXES: tuple[str, ...] = ("k", "M", "G", "T", "P", "E", "Z", "Y")
BINARY_PREFIXES: tuple[str, ...] = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")

_STEPS: dict[SizeFormat, tuple[float, tuple[str, ...]]] = {
    SizeFormat.DECIMAL: (1000.0, DECIMAL_PREFIXES),
    SizeFormat.BINARY: (1024.0, BINARY_PREFIXES),
}


def size_parts(size: int, size_format: SizeFormat) -> tuple[str, str]:
    """Split ``size`` into its number text and unit symbol.

    Sizes below one step have no unit. Prefixed values under ten keep one
    decimal place; larger ones are truncated to whole numbers.
    """
    if size_format is SizeFormat.BYTES:
        return f"{size:,}", ""

    step, prefixes = _STEPS[size_format]
    value = float(size)
    if value < step:
        return str(size), ""

    index = -1
    while value >= step and index < len(prefixes) - 1:
        value /= step
        index += 1

    if value < 10:
        number = f"{value:.1f}"
    else:
        number = str(int(value))
    return number, prefixes[index]


def render_size(record: FileRecord, size_format: SizeFormat, colours: Colours) -> TextCell:
    if record.size is None:
        return TextCell.blank(colours.punctuation)
    number, unit = size_parts(record.size, size_format)
    cell = TextCell.paint(colours.size.numbers, number)
    if unit:
        cell = cell + TextCell.paint(colours.size.unit, unit)
    return cell


__all__ = [
    "BINARY_PREFIXES",
    "DECIMAL_PREFIXES",
    "SizeFormat",
    "render_size",
    "size_parts",
]
