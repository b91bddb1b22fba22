"""Selection and scroll-window math for variable-height result rows.

Everything here is pure: callers pass the current indices in and store the
returned ones. Row heights and the display budget share one unit (terminal
rows for the bundled renderer).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportWindow:
    """Visible slice of the ranked list after one recomputation."""

    selection: int
    start_offset: int
    visible_count: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.visible_count

    def contains(self, index: int) -> bool:
        return self.start_offset <= index < self.end_offset


@dataclass
class ViewportState:
    """Selection and scroll offset persisted between redraw cycles."""

    selection: int = 0
    start_offset: int = 0

    def reset(self) -> None:
        self.selection = 0
        self.start_offset = 0

    def apply(self, window: ViewportWindow) -> None:
        self.selection = window.selection
        self.start_offset = window.start_offset


def rows_fitting(row_heights: Sequence[int], start_offset: int, display_budget: int) -> int:
    """Count consecutive rows from ``start_offset`` whose summed height fits the budget."""
    used = 0
    count = 0
    for height in row_heights[max(0, start_offset):]:
        if used + height > display_budget:
            break
        used += height
        count += 1
    return count


def compute_viewport(
    row_heights: Sequence[int],
    display_budget: int,
    selection: int,
    start_offset: int,
) -> ViewportWindow:
    """Clamp ``selection`` and scroll so it stays inside the visible window.

    The number of fitting rows is first measured from the incoming start
    offset, then the offset advances (selection below the window) or
    retreats (selection above it) and is clamped to the list bounds. The
    count is measured again from the final offset, which keeps stepping
    forward while taller rows there push the selection out of the window.
    """
    total = len(row_heights)
    if total == 0:
        return ViewportWindow(selection=0, start_offset=0, visible_count=0)

    selection = max(0, min(selection, total - 1))
    start_offset = max(0, start_offset)
    # A row taller than the whole budget is still shown on its own.
    visible = max(1, rows_fitting(row_heights, start_offset, display_budget))

    if selection >= start_offset + visible:
        start_offset = selection - visible + 1
    elif selection < start_offset:
        start_offset = selection
    start_offset = max(0, min(start_offset, max(0, total - visible)))

    visible = max(1, rows_fitting(row_heights, start_offset, display_budget))
    while selection >= start_offset + visible:
        start_offset += 1
        visible = max(1, rows_fitting(row_heights, start_offset, display_budget))
    return ViewportWindow(selection=selection, start_offset=start_offset, visible_count=visible)


def select_next(selection: int, count: int) -> int:
    """Move selection down one row, stopping at the last item."""
    if selection + 1 < count:
        return selection + 1
    return selection


def select_previous(selection: int) -> int:
    """Move selection up one row, stopping at the first item."""
    if selection > 0:
        return selection - 1
    return selection


__all__ = [
    "ViewportState",
    "ViewportWindow",
    "compute_viewport",
    "rows_fitting",
    "select_next",
    "select_previous",
]
