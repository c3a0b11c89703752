"""Natural sort keys and record ordering.

Natural order compares embedded numbers by value, so ``file2`` sorts before
``file10``. A display string is split into runs of digits and non-digits;
digit runs become ``Numeric`` tokens and everything else becomes a
case-folded ``Stringular`` token.

Comparison rules, token by token:

- two ``Numeric`` tokens compare by value;
- two ``Stringular`` tokens compare by folded text;
- a ``Numeric`` token always sorts before a ``Stringular`` one;
- when one key is a prefix of the other, the shorter key sorts first.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .file_model.types import FileRecord

# Digit runs above this value are kept as text rather than numbers.
MAX_NUMERIC = 2**64 - 1
_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC))


@dataclass(frozen=True)
class Numeric:
    value: int


@dataclass(frozen=True)
class Stringular:
    text: str


SortToken = Numeric | Stringular
SortKey = tuple[SortToken, ...]


class SortField(Enum):
    UNSORTED = "none"
    NAME = "name"
    EXTENSION = "ext"
    SIZE = "size"
    INODE = "inode"
    MODIFIED = "modified"
    ACCESSED = "accessed"
    CREATED = "created"


def _token_from_run(is_digit: bool, run: str) -> SortToken:
    if is_digit and len(run.lstrip("0")) <= _MAX_NUMERIC_DIGITS:
        value = int(run)
        if value <= MAX_NUMERIC:
            return Numeric(value)
    return Stringular(run.casefold())


def sort_key(text: str) -> SortKey:
    """Split ``text`` into natural-order tokens."""
    if not text:
        return ()

    tokens: list[SortToken] = []
    is_digit = text[0].isdecimal()
    start = 0
    for index, ch in enumerate(text):
        if ch.isdecimal() != is_digit:
            tokens.append(_token_from_run(is_digit, text[start:index]))
            is_digit = not is_digit
            start = index
    tokens.append(_token_from_run(is_digit, text[start:]))
    return tuple(tokens)


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)


def compare_tokens(a: SortToken, b: SortToken) -> int:
    if isinstance(a, Numeric) and isinstance(b, Numeric):
        return _cmp(a.value, b.value)
    if isinstance(a, Stringular) and isinstance(b, Stringular):
        return _cmp(a.text, b.text)
    return -1 if isinstance(a, Numeric) else 1


def compare_sort_keys(a: SortKey, b: SortKey) -> int:
    """Return -1, 0 or 1 following the natural-order rules above."""
    for token_a, token_b in zip(a, b):
        result = compare_tokens(token_a, token_b)
        if result:
            return result
    return _cmp(len(a), len(b))


def ordering_key(key: SortKey) -> tuple[tuple[int, int, str], ...]:
    """Encode ``key`` so plain tuple comparison matches ``compare_sort_keys``.

    Each token becomes ``(rank, number, text)`` with rank 0 for numbers and 1
    for text, which puts numbers first when the token kinds differ.
    """
    return tuple(
        (0, token.value, "") if isinstance(token, Numeric) else (1, 0, token.text)
        for token in key
    )


def natural_key(text: str) -> tuple[tuple[int, int, str], ...]:
    return ordering_key(sort_key(text))


def _record_key(field: SortField):
    if field is SortField.NAME:
        return lambda record: natural_key(record.name)
    if field is SortField.EXTENSION:
        return lambda record: (natural_key(record.ext or ""), natural_key(record.name))
    if field is SortField.SIZE:
        return lambda record: record.size or 0
    if field is SortField.INODE:
        return lambda record: record.inode
    if field is SortField.MODIFIED:
        return lambda record: record.timestamps.modified
    if field is SortField.ACCESSED:
        return lambda record: record.timestamps.accessed
    if field is SortField.CREATED:
        return lambda record: record.timestamps.created or 0.0
    return None


def compare(a: FileRecord, b: FileRecord, field: SortField) -> int:
    """Compare two records under ``field``; unsorted compares everything equal."""
    key = _record_key(field)
    if key is None:
        return 0
    return _cmp(key(a), key(b))


def sort_records(records: Iterable[FileRecord], field: SortField = SortField.NAME, reverse: bool = False) -> list[FileRecord]:
    """Return ``records`` in stable order under ``field``.

    ``reverse`` flips the finished list rather than each comparison, so
    reversing twice gives the forward order back even with ties.
    """
    ordered = list(records)
    key = _record_key(field)
    if key is not None:
        ordered.sort(key=key)
    if reverse:
        ordered.reverse()
    return ordered


__all__ = [
    "MAX_NUMERIC",
    "Numeric",
    "Stringular",
    "SortToken",
    "SortKey",
    "SortField",
    "sort_key",
    "compare_tokens",
    "compare_sort_keys",
    "ordering_key",
    "natural_key",
    "compare",
    "sort_records",
]
