"""Launcher bootstrap: cache setup, interactive loop, and launching.

The initial item load is synchronous so the first frame is never empty;
later refreshes happen in the background from ``LauncherSession.cycle``.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterable

from ..items.cache import ItemCache
from ..items.sources import collect_all_items
from ..items.types import CandidateItem
from ..render import render_frame
from ..search.ranking import rank
from ..ui_theme import resolve_theme
from .config import LauncherSettings
from .launch import launch_item
from .loop import RuntimeLoopCallbacks, run_main_loop
from .session import LauncherSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)

FetchItems = Callable[[], Iterable[CandidateItem]]


def build_cache(settings: LauncherSettings, fetch_items: FetchItems = collect_all_items) -> ItemCache:
    """Create the item cache and perform the blocking first load."""
    cache = ItemCache(fetch_items, settings.cache_timeout)
    cache.load_now()
    return cache


def format_match_lines(query: str, settings: LauncherSettings, fetch_items: FetchItems = collect_all_items) -> list[str]:
    """Rank once and format ``score<TAB>label<TAB>command`` rows."""
    items = list(fetch_items())
    return [
        f"{entry.score}\t{entry.item.type_label} {entry.item.display_name}\t{entry.item.command}"
        for entry in rank(query, items, settings.max_results)
    ]


def run_launcher(
    settings: LauncherSettings,
    *,
    no_color: bool = False,
    query: str = "",
    fetch_items: FetchItems = collect_all_items,
) -> int:
    """Run the interactive launcher and return a process exit code."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("lazylaunch needs an interactive terminal (use --list for scripting).")

    theme = resolve_theme(settings.theme, no_color=no_color)
    cache = build_cache(settings, fetch_items)
    session = LauncherSession(cache, settings, query=query)
    terminal = TerminalController(stdin_fd, stdout_fd)

    def draw(frame, columns: int, rows: int) -> None:
        render_frame(frame, columns, rows, theme, stdout_fd)

    selected = run_main_loop(session, terminal, stdin_fd, RuntimeLoopCallbacks(render_frame=draw))
    if selected is None:
        return 0

    try:
        launch_item(selected)
    except OSError as exc:
        logger.exception("failed to launch %s", selected.display_name)
        print(f"Failed to launch {selected.display_name}: {exc}", file=sys.stderr)
        return 1
    print(f"Launching: {selected.display_name} ({selected.command})")
    return 0


__all__ = ["build_cache", "format_match_lines", "run_launcher"]
