"""Persistent JSON config helpers.

Stores result limits, cache freshness, description display, and theme choice.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazylaunch"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_MAX_RESULTS = 50
DEFAULT_CACHE_TIMEOUT_SECONDS = 300.0
DEFAULT_SHOW_DESCRIPTIONS = True
DEFAULT_DESCRIPTION_ROWS = 1
DEFAULT_THEME_NAME = "catppuccin-mocha"


@dataclass(frozen=True)
class LauncherSettings:
    """Resolved launcher settings with defaults applied."""

    max_results: int = DEFAULT_MAX_RESULTS
    cache_timeout: float = DEFAULT_CACHE_TIMEOUT_SECONDS
    show_descriptions: bool = DEFAULT_SHOW_DESCRIPTIONS
    description_rows: int = DEFAULT_DESCRIPTION_ROWS
    theme: str = DEFAULT_THEME_NAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.warning("ignoring unreadable config at %s", CONFIG_PATH)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        logger.warning("could not write config to %s", CONFIG_PATH)


def _coerce_positive_int(value: object, default: int) -> int:
    """Accept real integers >= 1; booleans and other types use ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value >= 1 else default


def _coerce_nonnegative_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value >= 0 else default


def _coerce_nonnegative_seconds(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value) if value >= 0 else default


def load_max_results(data: dict[str, object] | None = None) -> int:
    """Maximum number of ranked matches kept per keystroke."""
    data = load_config() if data is None else data
    return _coerce_positive_int(data.get("max_results"), DEFAULT_MAX_RESULTS)


def load_cache_timeout(data: dict[str, object] | None = None) -> float:
    """Seconds after which the item snapshot is refreshed in the background."""
    data = load_config() if data is None else data
    return _coerce_nonnegative_seconds(data.get("cache_timeout"), DEFAULT_CACHE_TIMEOUT_SECONDS)


def load_show_descriptions(data: dict[str, object] | None = None) -> bool:
    """Only explicit booleans are honored."""
    data = load_config() if data is None else data
    value = data.get("show_descriptions")
    return value if isinstance(value, bool) else DEFAULT_SHOW_DESCRIPTIONS


def load_description_rows(data: dict[str, object] | None = None) -> int:
    data = load_config() if data is None else data
    return _coerce_nonnegative_int(data.get("description_rows"), DEFAULT_DESCRIPTION_ROWS)


def load_theme_name(data: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    data = load_config() if data is None else data
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_settings() -> LauncherSettings:
    """Read the config file once and resolve every setting."""
    data = load_config()
    return LauncherSettings(
        max_results=load_max_results(data),
        cache_timeout=load_cache_timeout(data),
        show_descriptions=load_show_descriptions(data),
        description_rows=load_description_rows(data),
        theme=load_theme_name(data) or DEFAULT_THEME_NAME,
    )


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "LauncherSettings",
    "load_cache_timeout",
    "load_config",
    "load_description_rows",
    "load_max_results",
    "load_settings",
    "load_show_descriptions",
    "load_theme_name",
    "save_config",
    "save_theme_name",
]
