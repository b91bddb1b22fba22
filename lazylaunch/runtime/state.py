from __future__ import annotations

from dataclasses import dataclass, field

from ..items.types import CandidateItem, ScoredItem
from ..viewport import ViewportState, ViewportWindow


@dataclass
class LauncherState:
    query: str = ""
    viewport: ViewportState = field(default_factory=ViewportState)
    matches: list[ScoredItem] = field(default_factory=list)


@dataclass(frozen=True)
class LauncherFrame:
    """Everything the renderer needs for one redraw."""

    query: str
    matches: tuple[ScoredItem, ...]
    row_heights: tuple[int, ...]
    window: ViewportWindow

    def visible_matches(self) -> tuple[ScoredItem, ...]:
        return self.matches[self.window.start_offset:self.window.end_offset]

    def selected_item(self) -> CandidateItem | None:
        if not self.matches:
            return None
        return self.matches[self.window.selection].item


__all__ = ["LauncherFrame", "LauncherState"]
