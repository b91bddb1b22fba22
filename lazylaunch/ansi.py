"""Display-width helpers for laying out plain text in terminal cells."""

from __future__ import annotations

import unicodedata

ELLIPSIS = "..."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, and East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch) or unicodedata.category(ch) == "Cc":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if w == 0 and unicodedata.category(ch) == "Cc":
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Clip ``text`` and mark the cut with ``...`` when it does not fit."""
    if display_width(text) <= max_cols:
        return clip_text(text, max_cols)
    if max_cols <= len(ELLIPSIS):
        return clip_text(text, max_cols)
    return clip_text(text, max_cols - len(ELLIPSIS)) + ELLIPSIS


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces up to ``width`` display columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = [
    "char_display_width",
    "clip_text",
    "display_width",
    "pad_to_width",
    "truncate_with_ellipsis",
]
