import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from domain.models.currency import RateSnapshot
from infrastructure.cache.base import SnapshotStore


@dataclass(frozen=True)
class CacheEntry:
    value: RateSnapshot
    expires_at: float


class InMemorySnapshotStore(SnapshotStore):
    """Process-local store. Each worker process keeps its own entry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entry: CacheEntry | None = None

    async def get(self) -> RateSnapshot | None:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entry = None
            return None
        return entry.value

    async def set(self, snapshot: RateSnapshot, ttl: timedelta) -> None:
        # whole-entry swap, readers see either the old or the new snapshot
        self._entry = CacheEntry(value=snapshot, expires_at=self._clock() + ttl.total_seconds())
