from __future__ import annotations

import time
from typing import Any, Callable

from pydantic import BaseModel

DEFAULT_TTL = 300.0  # seconds


class CacheEntry(BaseModel):
    """Snapshot of one cached response."""

    key: str
    value: Any = None
    stored_at: float


class ResponseCache:
    """In-memory response cache for a single-worker async app.

    Values are type-erased: callers read back with the same key scheme they
    wrote with.  Staleness is advisory, stale entries stay until overwritten,
    swept, or pushed out by ``max_entries`` (0 = unbounded).
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        max_entries: int = 0,
    ) -> None:
        self._clock = clock
        self._max_entries = max_entries
        self._store: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> CacheEntry | None:
        return self._store.get(key)

    def put(self, key: str, value: Any) -> None:
        # Re-insert so dict order tracks storage time
        self._store.pop(key, None)
        self._store[key] = CacheEntry(
            key=key,
            value=value,
            stored_at=self._clock(),
        )
        if self._max_entries > 0:
            while len(self._store) > self._max_entries:
                oldest = next(iter(self._store))
                del self._store[oldest]

    def is_fresh(self, stored_at: float, ttl: float) -> bool:
        return self._clock() - stored_at < ttl

    def sweep(self, ttl: float) -> int:
        """Drop every stale entry; return how many were removed."""
        stale = [
            k for k, v in self._store.items()
            if not self.is_fresh(v.stored_at, ttl)
        ]
        for k in stale:
            del self._store[k]
        return len(stale)

    def keys(self) -> list[str]:
        return list(self._store.keys())

    def timestamps(self) -> dict[str, float]:
        """Return {key: stored_at} for every cached response."""
        return {k: v.stored_at for k, v in self._store.items()}
