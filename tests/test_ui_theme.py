from __future__ import annotations

import unittest

from lazylaunch import ui_theme


class ThemeSelectionTests(unittest.TestCase):
    def test_available_theme_names_lists_every_palette(self) -> None:
        names = ui_theme.available_theme_names()
        self.assertEqual(len(names), 9)
        self.assertEqual(list(names), sorted(names))
        self.assertIn("catppuccin-mocha", names)
        self.assertIn("gruvbox-light", names)
        self.assertNotIn("plain", names)

    def test_normalize_theme_name_falls_back_to_default(self) -> None:
        self.assertEqual(ui_theme.normalize_theme_name(" Dracula "), "dracula")
        self.assertEqual(ui_theme.normalize_theme_name("solarized"), "catppuccin-mocha")
        self.assertEqual(ui_theme.normalize_theme_name(None), "catppuccin-mocha")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(ui_theme.resolve_theme("nord-dark"), ui_theme.NORD_DARK)
        self.assertIs(ui_theme.resolve_theme("nord-dark", no_color=True), ui_theme.PLAIN_THEME)


class ThemeEscapeTests(unittest.TestCase):
    def test_colored_theme_emits_truecolor_sequences(self) -> None:
        theme = ui_theme.DRACULA
        self.assertEqual(theme.normal(), "\033[38;2;248;248;242;48;2;40;42;54m")
        self.assertTrue(theme.selected().startswith("\033[1;"))
        self.assertEqual(theme.reset, "\033[0m")

    def test_plain_theme_uses_reverse_video_only_for_selection(self) -> None:
        theme = ui_theme.PLAIN_THEME
        self.assertEqual(theme.normal(), "")
        self.assertEqual(theme.description(), "")
        self.assertEqual(theme.selected(), "\033[7m")
        self.assertEqual(theme.reset, "\033[0m")

    def test_scale_color_dims_each_channel(self) -> None:
        self.assertEqual(ui_theme.scale_color(0xFF8040, 1, 2), 0x7F4020)


if __name__ == "__main__":
    unittest.main()
