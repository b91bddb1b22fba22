"""Launcher session: query editing, selection movement, and redraw cycles.

One ``cycle`` call is one pass of the presentation loop: kick a background
refresh when the cache is stale, rank the current snapshot, measure rows,
and recompute the viewport. Nothing here blocks on I/O.
"""

from __future__ import annotations

import logging

from ..items.cache import ItemCache
from ..items.types import CandidateItem
from ..render import row_heights
from ..search.ranking import rank
from ..viewport import compute_viewport, select_next, select_previous
from .config import LauncherSettings
from .state import LauncherFrame, LauncherState

logger = logging.getLogger(__name__)


class LauncherSession:
    """Mutable per-run launcher state bound to an item cache."""

    def __init__(self, cache: ItemCache, settings: LauncherSettings, query: str = "") -> None:
        self.cache = cache
        self.settings = settings
        self.state = LauncherState(query=query)
        self._last_frame: LauncherFrame | None = None

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def selection(self) -> int:
        return self.state.viewport.selection

    @property
    def start_offset(self) -> int:
        return self.state.viewport.start_offset

    # query editing
    def _set_query(self, query: str) -> bool:
        self.state.query = query
        self.state.viewport.reset()
        return True

    def append_text(self, text: str) -> bool:
        """Append typed characters; returns whether the query changed."""
        if not text:
            return False
        return self._set_query(self.state.query + text)

    def delete_last_char(self) -> bool:
        if not self.state.query:
            return False
        return self._set_query(self.state.query[:-1])

    def clear_query(self) -> bool:
        if not self.state.query:
            return False
        return self._set_query("")

    # selection
    def select_next(self) -> bool:
        viewport = self.state.viewport
        moved = select_next(viewport.selection, len(self.state.matches))
        if moved == viewport.selection:
            return False
        viewport.selection = moved
        return True

    def select_previous(self) -> bool:
        viewport = self.state.viewport
        moved = select_previous(viewport.selection)
        if moved == viewport.selection:
            return False
        viewport.selection = moved
        return True

    def selected_item(self) -> CandidateItem | None:
        if self._last_frame is None:
            return None
        return self._last_frame.selected_item()

    # redraw cycle
    def cycle(self, display_budget: int) -> LauncherFrame:
        """Rank the current snapshot and lay out the visible window."""
        if self.cache.is_expired():
            logger.debug("item cache expired; scheduling background refresh")
            self.cache.refresh_async()

        snapshot = self.cache.read()
        matches = rank(self.state.query, snapshot, self.settings.max_results)
        heights = row_heights(
            matches,
            self.settings.show_descriptions,
            self.settings.description_rows,
        )
        viewport = self.state.viewport
        window = compute_viewport(heights, display_budget, viewport.selection, viewport.start_offset)
        viewport.apply(window)
        self.state.matches = matches

        frame = LauncherFrame(
            query=self.state.query,
            matches=tuple(matches),
            row_heights=tuple(heights),
            window=window,
        )
        self._last_frame = frame
        return frame


__all__ = ["LauncherSession"]
