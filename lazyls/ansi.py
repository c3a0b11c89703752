"""ANSI-aware text measurement helpers.

Widths here are terminal columns, never string lengths: escape sequences
and control characters take no columns, combining marks take none, and
East Asian wide/fullwidth characters take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.category(ch) == "Cc":
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Count the visible glyph columns of ``text``.

    Escape sequences are skipped before measuring, so this is safe to call
    on painted strings as well as raw ones.
    """
    if not text:
        return 0
    if "\x1b" in text:
        text = strip_ansi(text)
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(char_display_width(ch) for ch in text)
