"""Launch items: value types, filesystem sources, and the refresh cache."""

from .cache import CacheState, ItemCache
from .sources import collect_all_items, collect_applications, collect_commands, parse_desktop_entry
from .types import (
    APPLICATION_KIND,
    COMMAND_KIND,
    CandidateItem,
    ItemSnapshot,
    ScoredItem,
)

__all__ = [
    "APPLICATION_KIND",
    "COMMAND_KIND",
    "CacheState",
    "CandidateItem",
    "ItemCache",
    "ItemSnapshot",
    "ScoredItem",
    "collect_all_items",
    "collect_applications",
    "collect_commands",
    "parse_desktop_entry",
]
