"""Main interactive event loop for the launcher.

Each pass is strictly sequential: measure the terminal, run one session
cycle, draw it, then block until the next key arrives.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..items.types import CandidateItem
from ..render import display_budget_for_height
from .keys import ACCEPT_KEYS, QUIT_KEYS, build_launcher_key_registry, handle_launcher_key
from .session import LauncherSession
from .state import LauncherFrame
from .terminal import TerminalController


def _default_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    render_frame: Callable[[LauncherFrame, int, int], None]
    terminal_size: Callable[[], tuple[int, int]] = _default_terminal_size
    read_key: Callable[[int], str] = read_key


def run_main_loop(
    session: LauncherSession,
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
) -> CandidateItem | None:
    """Run until the user accepts a match or quits.

    Returns the selected item on accept, or ``None`` on quit, end of input,
    or accept with an empty result list.
    """
    registry = build_launcher_key_registry(session)
    with terminal.raw_mode():
        while True:
            columns, rows = callbacks.terminal_size()
            frame = session.cycle(display_budget_for_height(rows))
            callbacks.render_frame(frame, columns, rows)

            try:
                key = callbacks.read_key(stdin_fd)
            except KeyboardInterrupt:
                return None
            if key == "" or key in QUIT_KEYS:
                return None
            if key in ACCEPT_KEYS:
                return frame.selected_item()
            handle_launcher_key(key, session, registry)


__all__ = ["RuntimeLoopCallbacks", "run_main_loop"]
