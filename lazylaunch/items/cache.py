"""Thread-safe launch-item cache with background refresh.

Readers always see one complete committed snapshot. Refreshes run on daemon
worker threads and publish results by replacing the whole cache state.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .types import CandidateItem, ItemSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheState:
    """Committed snapshot plus freshness bookkeeping.

    ``last_updated`` is ``None`` until the first commit so a new cache reports
    itself expired. ``generation`` identifies the fetch that produced the
    snapshot.
    """

    snapshot: ItemSnapshot
    last_updated: float | None
    stale_after: float
    generation: int = 0


class ItemCache:
    """Hold the last fetched item snapshot and refresh it off the UI thread.

    Each refresh is tagged with a generation number when dispatched. A fetch
    that finishes after a newer one has already committed is discarded, so
    overlapping refreshes never roll the cache back to older data.
    """

    def __init__(
        self,
        fetch_items: Callable[[], Iterable[CandidateItem]],
        stale_after_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetch_items = fetch_items
        self._clock = clock
        self._lock = threading.Lock()
        self._next_generation = 1
        self._state = CacheState(
            snapshot=(),
            last_updated=None,
            stale_after=max(0.0, float(stale_after_seconds)),
        )

    @property
    def state(self) -> CacheState:
        with self._lock:
            return self._state

    def read(self) -> ItemSnapshot:
        """Return the last committed snapshot without waiting on refreshes."""
        with self._lock:
            return self._state.snapshot

    def is_expired(self) -> bool:
        """Return whether the committed snapshot is older than the threshold."""
        state = self.state
        if state.last_updated is None:
            return True
        return self._clock() - state.last_updated > state.stale_after

    def _claim_generation(self) -> int:
        with self._lock:
            generation = self._next_generation
            self._next_generation += 1
            return generation

    def _commit(self, items: Iterable[CandidateItem], generation: int) -> bool:
        snapshot = tuple(items)
        with self._lock:
            if generation < self._state.generation:
                return False
            self._state = CacheState(
                snapshot=snapshot,
                last_updated=self._clock(),
                stale_after=self._state.stale_after,
                generation=generation,
            )
        return True

    def update(self, items: Iterable[CandidateItem]) -> None:
        """Replace the snapshot and reset the freshness timestamp."""
        self._commit(items, self._claim_generation())

    def _fetch_and_commit(self, generation: int) -> None:
        try:
            items = list(self._fetch_items())
        except Exception:
            logger.exception("item fetch failed; keeping previous snapshot")
            return
        if self._commit(items, generation):
            logger.debug("item cache committed %d items (generation %d)", len(items), generation)
        else:
            logger.debug("discarded out-of-order refresh (generation %d)", generation)

    def load_now(self) -> None:
        """Fetch and commit synchronously on the calling thread."""
        self._fetch_and_commit(self._claim_generation())

    def refresh_async(self) -> None:
        """Start a fire-and-forget refresh on a daemon worker thread."""
        generation = self._claim_generation()
        worker = threading.Thread(
            target=self._fetch_and_commit,
            args=(generation,),
            name=f"lazylaunch-item-refresh-{generation}",
            daemon=True,
        )
        worker.start()


__all__ = ["CacheState", "ItemCache"]
