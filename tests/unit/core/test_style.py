"""Tests for style composition and ANSI painting.

Covers the attribute-clearing rules of ``bold``/``underline``/``on`` and
the exact escape sequences each style shape produces.
"""

from __future__ import annotations

import unittest

from lazyls.style import (
    RESET,
    Blue,
    Composite,
    Cyan,
    Fixed,
    Foreground,
    Green,
    Plain,
    Red,
    White,
    Yellow,
)


class StyleCompositionTests(unittest.TestCase):
    def test_underline_after_bold_clears_bold(self) -> None:
        style = Red.bold().underline()
        self.assertTrue(style.is_underline)
        self.assertFalse(style.is_bold)
        self.assertEqual(style, Red.underline())

    def test_bold_after_underline_renders_like_plain_bold(self) -> None:
        self.assertEqual(Red.underline().bold().paint("x"), Red.bold().paint("x"))

    def test_on_clears_bold_and_underline_but_keeps_foreground(self) -> None:
        style = Green.bold().on(Blue)
        self.assertEqual(style, Composite(foreground=Green, background=Blue))
        self.assertFalse(style.is_bold)
        self.assertFalse(style.is_underline)

    def test_bold_keeps_background(self) -> None:
        style = Red.on(Yellow).bold()
        self.assertEqual(style.background, Yellow)
        self.assertTrue(style.is_bold)

    def test_plain_composes_from_white(self) -> None:
        self.assertEqual(Plain.underline(), Composite(foreground=White, is_underline=True))
        self.assertEqual(Plain.bold().foreground, White)

    def test_composition_never_mutates_receiver(self) -> None:
        base = Cyan.normal()
        base.bold()
        base.on(Red)
        self.assertEqual(base, Composite(foreground=Cyan))


class StylePaintTests(unittest.TestCase):
    def test_plain_returns_text_unchanged(self) -> None:
        self.assertEqual(Plain.paint("hello"), "hello")

    def test_colour_paints_foreground_only(self) -> None:
        self.assertEqual(Red.paint("x"), f"\033[31mx{RESET}")
        self.assertEqual(Foreground(Blue).paint("x"), f"\033[34mx{RESET}")

    def test_composite_orders_bold_underline_background_foreground(self) -> None:
        self.assertEqual(Red.bold().paint("x"), f"\033[1;31mx{RESET}")
        self.assertEqual(Red.underline().paint("x"), f"\033[4;31mx{RESET}")
        self.assertEqual(Red.on(Yellow).paint("x"), f"\033[43;31mx{RESET}")
        self.assertEqual(
            Composite(foreground=Red, background=Yellow, is_bold=True, is_underline=True).paint("x"),
            f"\033[1;4;43;31mx{RESET}",
        )

    def test_fixed_colours_use_256_colour_codes(self) -> None:
        self.assertEqual(Fixed(244).paint("x"), f"\033[38;5;244mx{RESET}")
        self.assertEqual(Red.on(Fixed(24)).paint("x"), f"\033[48;5;24;31mx{RESET}")

    def test_normal_is_foreground_only_composite(self) -> None:
        self.assertEqual(Green.normal().paint("ok"), f"\033[32mok{RESET}")


if __name__ == "__main__":
    unittest.main()
