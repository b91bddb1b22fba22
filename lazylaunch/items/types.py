"""Launchable item value types shared by sources, cache, and ranking."""

from __future__ import annotations

from dataclasses import dataclass

COMMAND_KIND = "command"
APPLICATION_KIND = "application"
ITEM_KINDS: tuple[str, ...] = (COMMAND_KIND, APPLICATION_KIND)


@dataclass(frozen=True)
class CandidateItem:
    """One launchable entry: an executable on ``$PATH`` or a desktop application."""

    name: str
    display_name: str
    command: str
    description: str | None = None
    icon: str | None = None
    kind: str = COMMAND_KIND

    def __post_init__(self) -> None:
        if self.kind not in ITEM_KINDS:
            raise ValueError(f"unknown item kind: {self.kind!r}")

    @property
    def is_application(self) -> bool:
        return self.kind == APPLICATION_KIND

    @property
    def type_label(self) -> str:
        """Short row prefix shown before the display name."""
        return "App:" if self.is_application else "Cmd:"


ItemSnapshot = tuple[CandidateItem, ...]


@dataclass(frozen=True)
class ScoredItem:
    """Ranking result pairing an item with its match score."""

    item: CandidateItem
    score: int


def command_item(name: str) -> CandidateItem:
    """Build the item produced by a ``$PATH`` scan for executable ``name``."""
    return CandidateItem(name=name, display_name=name, command=name, kind=COMMAND_KIND)


__all__ = [
    "APPLICATION_KIND",
    "COMMAND_KIND",
    "ITEM_KINDS",
    "CandidateItem",
    "ItemSnapshot",
    "ScoredItem",
    "command_item",
]
