"""Key-combo registry and the launcher's default bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .session import LauncherSession

QUIT_KEYS = frozenset({"ESC", "CTRL_C"})
ACCEPT_KEYS = frozenset({"ENTER"})


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` means no binding."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a typed character rather than a named token."""
    return len(key) == 1 and key.isprintable()


def build_launcher_key_registry(session: LauncherSession) -> KeyComboRegistry:
    """Navigation and editing bindings for the result list and query."""
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("DOWN", "CTRL_N", "TAB"), session.select_next),
        KeyComboBinding(("UP", "CTRL_P", "SHIFT_TAB"), session.select_previous),
        KeyComboBinding(("BACKSPACE",), session.delete_last_char),
        KeyComboBinding(("CTRL_U",), session.clear_query),
    )


def handle_launcher_key(key: str, session: LauncherSession, registry: KeyComboRegistry) -> bool:
    """Apply one non-terminal key; returns whether session state changed."""
    handled = registry.dispatch(key)
    if handled is not None:
        return bool(handled)
    if is_text_key(key):
        return session.append_text(key)
    return False


__all__ = [
    "ACCEPT_KEYS",
    "QUIT_KEYS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_launcher_key_registry",
    "handle_launcher_key",
    "is_text_key",
]
