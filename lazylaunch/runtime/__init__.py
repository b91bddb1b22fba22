"""Public runtime orchestration entry points.

This package groups the interactive launcher bootstrap (`run_launcher`) and
the lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks


def run_launcher(*args, **kwargs):
    """Lazily import launcher entrypoint to avoid heavy bootstrap on import."""
    from .app import run_launcher as _run_launcher

    return _run_launcher(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RuntimeLoopCallbacks",
    "run_launcher",
    "run_main_loop",
]
