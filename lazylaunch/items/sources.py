"""Item sources: executables on ``$PATH`` and XDG desktop entries.

Both scans are best-effort. Unreadable directories and malformed desktop
files are skipped so a partial scan still yields usable items.
"""

from __future__ import annotations

import configparser
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .types import APPLICATION_KIND, CandidateItem, command_item

logger = logging.getLogger(__name__)

DESKTOP_ENTRY_SECTION = "Desktop Entry"


def default_application_dirs() -> tuple[Path, ...]:
    home = Path.home()
    return (
        Path("/usr/share/applications"),
        Path("/usr/local/share/applications"),
        home / ".local" / "share" / "applications",
        Path("/var/lib/flatpak/exports/share/applications"),
        home / ".local" / "share" / "flatpak" / "exports" / "share" / "applications",
    )


def _is_executable_file(path: Path) -> bool:
    try:
        if not path.is_file():
            return False
        return bool(path.stat().st_mode & 0o111)
    except OSError:
        return False


def _iter_dir(directory: Path) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return
    yield from entries


def collect_commands(path_env: str | None = None) -> list[CandidateItem]:
    """Return one command item per executable name found on the search path.

    Earlier ``$PATH`` directories win when the same name appears twice.
    Dot-files are skipped. The result is sorted by name.
    """
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    seen: set[str] = set()
    items: list[CandidateItem] = []
    for raw_dir in path_env.split(os.pathsep):
        if not raw_dir:
            continue
        for entry in _iter_dir(Path(raw_dir)):
            name = entry.name
            if name.startswith(".") or name in seen:
                continue
            if not _is_executable_file(entry):
                continue
            seen.add(name)
            items.append(command_item(name))
    items.sort(key=lambda item: item.name)
    return items


def _strip_field_codes(exec_line: str) -> str:
    """Drop desktop-entry field codes such as ``%u`` and ``%F``."""
    return " ".join(arg for arg in exec_line.split() if not arg.startswith("%"))


def _is_true(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def parse_desktop_entry(path: Path) -> CandidateItem | None:
    """Parse one ``.desktop`` file into an application item.

    Returns ``None`` for hidden entries, entries missing ``Name`` or ``Exec``,
    and files that cannot be read or parsed.
    """
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    try:
        parser.read(path, encoding="utf-8")
    except (OSError, UnicodeDecodeError, configparser.Error):
        logger.debug("skipping unreadable desktop entry %s", path)
        return None
    if DESKTOP_ENTRY_SECTION not in parser:
        return None

    entry = parser[DESKTOP_ENTRY_SECTION]
    if _is_true(entry.get("NoDisplay")) or _is_true(entry.get("Hidden")):
        return None

    name = (entry.get("Name") or "").strip()
    exec_line = _strip_field_codes(entry.get("Exec") or "")
    if not name or not exec_line:
        return None

    comment = (entry.get("Comment") or "").strip()
    icon = (entry.get("Icon") or "").strip()
    return CandidateItem(
        name=name,
        display_name=name,
        command=exec_line,
        description=comment or None,
        icon=icon or None,
        kind=APPLICATION_KIND,
    )


def collect_applications(directories: Iterable[Path] | None = None) -> list[CandidateItem]:
    """Return application items for every visible desktop entry.

    Entries from different directories are not deduplicated.
    """
    if directories is None:
        directories = default_application_dirs()
    items: list[CandidateItem] = []
    for directory in directories:
        for entry in _iter_dir(Path(directory)):
            if entry.suffix != ".desktop":
                continue
            app = parse_desktop_entry(entry)
            if app is not None:
                items.append(app)
    items.sort(key=lambda item: item.display_name)
    return items


def collect_all_items() -> list[CandidateItem]:
    """Full item scan used by the cache: commands first, then applications."""
    items = collect_commands()
    items.extend(collect_applications())
    logger.debug("collected %d launch items", len(items))
    return items


__all__ = [
    "DESKTOP_ENTRY_SECTION",
    "collect_all_items",
    "collect_applications",
    "collect_commands",
    "default_application_dirs",
    "parse_desktop_entry",
]
