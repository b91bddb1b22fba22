"""Detached process spawning for accepted launch items."""

from __future__ import annotations

import logging
import subprocess

from ..items.types import CandidateItem

logger = logging.getLogger(__name__)

SHELL_METACHARACTERS = (" ", "&", ";")


def needs_shell(command: str) -> bool:
    """Commands with arguments or shell operators run through ``sh -c``."""
    return any(ch in command for ch in SHELL_METACHARACTERS)


def build_argv(command: str) -> list[str]:
    if needs_shell(command):
        return ["sh", "-c", command]
    return [command]


def launch_item(item: CandidateItem) -> subprocess.Popen:
    """Spawn ``item.command`` detached from the launcher's terminal.

    Raises ``OSError`` when the process cannot be started.
    """
    argv = build_argv(item.command)
    logger.info("launching %s (%s)", item.display_name, item.command)
    return subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


__all__ = ["build_argv", "launch_item", "needs_shell"]
