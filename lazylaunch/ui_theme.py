"""UI theme definitions and selection helpers.

Themes are 24-bit color palettes for the launcher chrome. Each palette is
stored as ``0xRRGGBB`` values and converted to ANSI SGR sequences on demand.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def scale_color(color: int, numerator: int, denominator: int) -> int:
    """Dim ``color`` by ``numerator / denominator`` per channel."""
    r, g, b = _rgb(color)
    r, g, b = (r * numerator) // denominator, (g * numerator) // denominator, (b * numerator) // denominator
    return (r << 16) | (g << 8) | b


@dataclass(frozen=True)
class UITheme:
    """Semantic launcher palette."""

    name: str
    bg_color: int
    fg_color: int
    selected_bg: int
    selected_fg: int
    border_color: int
    query_bg: int
    accent_color: int
    plain: bool = False

    def sgr(self, fg: int | None = None, bg: int | None = None, *, bold: bool = False) -> str:
        """Return an SGR prefix for the given colors (empty for plain themes)."""
        if self.plain:
            return ""
        params: list[str] = []
        if bold:
            params.append("1")
        if fg is not None:
            params.append("38;2;{};{};{}".format(*_rgb(fg)))
        if bg is not None:
            params.append("48;2;{};{};{}".format(*_rgb(bg)))
        if not params:
            return ""
        return f"\033[{';'.join(params)}m"

    @property
    def reset(self) -> str:
        return RESET

    def normal(self) -> str:
        return self.sgr(self.fg_color, self.bg_color)

    def selected(self) -> str:
        if self.plain:
            return "\033[7m"
        return self.sgr(self.selected_fg, self.selected_bg, bold=True)

    def prompt(self) -> str:
        return self.sgr(self.accent_color, self.query_bg, bold=True)

    def placeholder(self) -> str:
        return self.sgr(scale_color(self.fg_color, 1, 2), self.query_bg)

    def counter(self) -> str:
        return self.sgr(self.fg_color, self.query_bg)

    def description(self) -> str:
        return self.sgr(scale_color(self.fg_color, 3, 4), self.bg_color)

    def divider(self) -> str:
        return self.sgr(self.border_color, self.bg_color)


CATPPUCCIN_MOCHA = UITheme("catppuccin-mocha", 0x1E1E2E, 0xCDD6F4, 0x89B4FA, 0x1E1E2E, 0x6C7086, 0x313244, 0xF38BA8)
CATPPUCCIN_LATTE = UITheme("catppuccin-latte", 0xEFF1F5, 0x4C4F69, 0x1E66F5, 0xEFF1F5, 0xACB0BE, 0xCCD0DA, 0xD20F39)
NORD_DARK = UITheme("nord-dark", 0x2E3440, 0xD8DEE9, 0x88C0D0, 0x2E3440, 0x4C566A, 0x3B4252, 0x8FBCBB)
NORD_LIGHT = UITheme("nord-light", 0xECEFF4, 0x2E3440, 0x88C0D0, 0x2E3440, 0xD8DEE9, 0xE5E9F0, 0x81A1C1)
DRACULA = UITheme("dracula", 0x282A36, 0xF8F8F2, 0xBD93F9, 0x282A36, 0x44475A, 0x44475A, 0xFF79C6)
TOKYONIGHT_DARK = UITheme("tokyonight-dark", 0x1A1B26, 0xA9B1D6, 0x7AA2F7, 0x1A1B26, 0x414868, 0x24283B, 0xBB9AF7)
TOKYONIGHT_LIGHT = UITheme("tokyonight-light", 0xD5D6DB, 0x343B58, 0x3454A4, 0xD5D6DB, 0x9699A3, 0xC8C9CE, 0x8C73CC)
GRUVBOX_DARK = UITheme("gruvbox-dark", 0x282828, 0xEBDBB2, 0x83A598, 0x282828, 0x504945, 0x3C3836, 0xFE8019)
GRUVBOX_LIGHT = UITheme("gruvbox-light", 0xFBF1C7, 0x3C3836, 0x83A598, 0xFBF1C7, 0xBDAE93, 0xEBDBB2, 0xD65D0E)

DEFAULT_THEME = CATPPUCCIN_MOCHA
PLAIN_THEME = UITheme("plain", 0, 0, 0, 0, 0, 0, 0, plain=True)

_THEMES: dict[str, UITheme] = {
    theme.name: theme
    for theme in (
        CATPPUCCIN_MOCHA,
        CATPPUCCIN_LATTE,
        NORD_DARK,
        NORD_LIGHT,
        DRACULA,
        TOKYONIGHT_DARK,
        TOKYONIGHT_LIGHT,
        GRUVBOX_DARK,
        GRUVBOX_LIGHT,
    )
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "scale_color",
]
