"""Tests for text cells and display-width measurement."""

from __future__ import annotations

import unittest

from lazyls.ansi import char_display_width, display_width, strip_ansi
from lazyls.cell import Alignment, TextCell
from lazyls.style import Blue, Fixed, Plain, Red


class DisplayWidthTests(unittest.TestCase):
    def test_ascii_width_is_length(self) -> None:
        self.assertEqual(display_width("hello.txt"), 9)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(char_display_width("Ｗ"), 2)

    def test_combining_marks_and_controls_take_none(self) -> None:
        self.assertEqual(display_width("e\u0301"), 1)
        self.assertEqual(char_display_width("\x07"), 0)

    def test_escape_sequences_are_ignored(self) -> None:
        painted = Red.bold().paint("abc")
        self.assertEqual(display_width(painted), 3)
        self.assertEqual(strip_ansi(painted), "abc")


class TextCellTests(unittest.TestCase):
    def test_paint_width_ignores_styling(self) -> None:
        plain = TextCell.paint(Plain, "report.pdf")
        styled = TextCell.paint(Fixed(105).underline(), "report.pdf")
        self.assertEqual(plain.width, styled.width)
        self.assertEqual(styled.width, 10)

    def test_blank_is_single_dash(self) -> None:
        cell = TextCell.blank(Red.normal())
        self.assertEqual(cell.width, 1)
        self.assertEqual(cell.text(), "-")

    def test_concatenation_sums_widths_and_keeps_fragment_order(self) -> None:
        cell = TextCell.paint(Blue.normal(), "12") + TextCell.paint(Red.normal(), "k")
        self.assertEqual(cell.width, 3)
        self.assertEqual(cell.text(), "12k")
        self.assertEqual(cell.render(), Blue.paint("12") + Red.paint("k"))

    def test_concat_matches_repeated_add(self) -> None:
        parts = [TextCell.paint(Plain, "a"), TextCell.spaces(2), TextCell.paint(Plain, "日")]
        self.assertEqual(TextCell.concat(parts), parts[0] + parts[1] + parts[2])
        self.assertEqual(TextCell.concat(parts).width, 5)

    def test_append_matches_add(self) -> None:
        left = TextCell.paint(Blue.normal(), "1.2")
        right = TextCell.paint(Red.normal(), "M")
        self.assertEqual(left.append(right), left + right)

    def test_add_spaces(self) -> None:
        cell = TextCell.paint(Plain, "x").add_spaces(3)
        self.assertEqual(cell.width, 4)
        self.assertEqual(cell.text(), "x   ")
        self.assertEqual(TextCell.paint(Plain, "x").add_spaces(0).width, 1)

    def test_pad_uses_display_width_not_painted_length(self) -> None:
        cell = TextCell.paint(Red.bold(), "ab")
        self.assertEqual(cell.pad(5, Alignment.LEFT), Red.bold().paint("ab") + "   ")
        self.assertEqual(cell.pad(5, Alignment.RIGHT), "   " + Red.bold().paint("ab"))

    def test_pad_never_truncates(self) -> None:
        cell = TextCell.paint(Plain, "abcdef")
        self.assertEqual(cell.pad(3, Alignment.LEFT), "abcdef")


if __name__ == "__main__":
    unittest.main()
