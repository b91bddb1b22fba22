"""Frame composition for the launcher's terminal view.

``build_frame_lines`` is pure so layout can be tested without a terminal;
``render_frame`` writes the composed frame in one ``os.write`` call.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from .ansi import clip_text, display_width, pad_to_width, truncate_with_ellipsis
from .items.types import ScoredItem
from .runtime.state import LauncherFrame
from .ui_theme import UITheme

PROMPT_PREFIX = "❯ "
PLACEHOLDER = "Search applications and commands..."
NO_MATCHES_MESSAGE = "No matches"
CHROME_ROWS = 2
DESCRIPTION_INDENT = "     "


def display_budget_for_height(terminal_rows: int) -> int:
    """Rows available to result items below the prompt and divider."""
    return max(1, terminal_rows - CHROME_ROWS)


def row_height(entry: ScoredItem, show_descriptions: bool, description_rows: int = 1) -> int:
    if show_descriptions and entry.item.description and description_rows > 0:
        return 1 + description_rows
    return 1


def row_heights(
    matches: Sequence[ScoredItem],
    show_descriptions: bool,
    description_rows: int = 1,
) -> list[int]:
    """Per-match row heights aligned with ``matches``."""
    return [row_height(entry, show_descriptions, description_rows) for entry in matches]


def _prompt_line(query: str, result_count: int, width: int, theme: UITheme) -> str:
    if query:
        left = PROMPT_PREFIX + query
        style = theme.prompt()
    else:
        left = PLACEHOLDER
        style = theme.placeholder()
    counter = f"{result_count} results" if query else ""
    left_budget = width - (display_width(counter) + 1 if counter else 0)
    if left_budget < 1:
        counter = ""
        left_budget = width
    left = clip_text(left, left_budget)
    line = style + pad_to_width(left, left_budget)
    if counter:
        line += theme.counter() + " " + counter
    return line + theme.reset


def _item_lines(
    entry: ScoredItem,
    height: int,
    selected: bool,
    width: int,
    theme: UITheme,
) -> list[str]:
    style = theme.selected() if selected else theme.normal()
    title = clip_text(f" {entry.item.type_label} {entry.item.display_name}", width)
    lines = [style + pad_to_width(title, width) + theme.reset]
    if height > 1:
        desc_style = theme.selected() if selected else theme.description()
        description = DESCRIPTION_INDENT + (entry.item.description or "")
        lines.append(desc_style + pad_to_width(truncate_with_ellipsis(description, width), width) + theme.reset)
        for _ in range(height - 2):
            lines.append(style + " " * width + theme.reset)
    return lines


def build_frame_lines(
    frame: LauncherFrame,
    width: int,
    height: int,
    theme: UITheme,
) -> list[str]:
    """Compose exactly ``height`` styled rows for ``frame``.

    Row heights come from the frame so the drawn window matches the viewport
    computation. A window row that overflows the bottom is cut off.
    """
    width = max(1, width)
    height = max(1, height)
    lines = [_prompt_line(frame.query, len(frame.matches), width, theme)]
    if height > 1:
        lines.append(theme.divider() + "─" * width + theme.reset)

    window = frame.window
    if not frame.matches and frame.query:
        lines.append(theme.description() + pad_to_width(clip_text(f" {NO_MATCHES_MESSAGE}", width), width) + theme.reset)
    for idx in range(window.start_offset, window.end_offset):
        lines.extend(
            _item_lines(
                frame.matches[idx],
                frame.row_heights[idx],
                idx == window.selection,
                width,
                theme,
            )
        )

    blank = theme.normal() + " " * width + theme.reset
    while len(lines) < height:
        lines.append(blank)
    return lines[:height]


def render_frame(
    frame: LauncherFrame,
    width: int,
    height: int,
    theme: UITheme,
    stdout_fd: int,
) -> None:
    """Write one full frame to ``stdout_fd`` starting at the home position."""
    lines = build_frame_lines(frame, width, height, theme)
    payload = "\033[H" + "\r\n".join(lines)
    os.write(stdout_fd, payload.encode("utf-8", errors="replace"))


__all__ = [
    "CHROME_ROWS",
    "build_frame_lines",
    "display_budget_for_height",
    "render_frame",
    "row_height",
    "row_heights",
]
