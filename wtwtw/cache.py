# wtwtw/cache.py
"""
Simple in-memory TTL cache.

This is per-process cache. If you run multiple gunicorn workers, each worker has its own cache.
Scoreboard fetches for one day run on worker threads, so the store is lock-guarded;
loaders run outside the lock.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A single cached value and the timestamp when it was set."""
    ts: float
    value: Optional[T]


class TTLCache:
    """A small key/value TTL cache with lazy loading."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize an empty cache store."""
        self._store: dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get_or_set(self, key: Hashable, ttl_seconds: int, loader: Callable[[], T]) -> T:
        """
        Retrieve a cached value if not expired, otherwise compute & store a new value.

        If the loader raises, nothing is stored and the exception propagates,
        so a failed fetch is retried on the next call.

        Args:
            key: Cache key.
            ttl_seconds: Time-to-live for the entry.
            loader: Function that returns the value if the cache is stale/missing.

        Returns:
            The cached or newly loaded value.
        """
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)

        if entry and entry.value is not None and (now - entry.ts) < ttl_seconds:
            return entry.value

        value = loader()
        with self._lock:
            self._store[key] = CacheEntry(ts=now, value=value)
        return value

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._store.clear()
