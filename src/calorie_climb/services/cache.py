"""Expiring key-value caches for FDC responses and suggestions."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: float) -> None:
        """Store a cached value with a TTL in seconds."""

    def clear(self) -> None:
        """Drop every cached value."""


@dataclass
class InMemoryCache(Cache):
    """Process-local cache.

    Expired entries are dropped on read and swept on every write. When
    ``max_entries`` is set, the least recently written entries are evicted
    first.
    """

    clock: Callable[[], float] = time.monotonic
    max_entries: int | None = None
    _entries: dict[str, tuple[object, float]] = field(
        default_factory=dict, init=False, repr=False
    )

    def get(self, key: str) -> object | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: float) -> None:
        now = self.clock()
        self._entries.pop(key, None)
        self._entries[key] = (value, now + ttl_seconds)
        self._prune(now)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _prune(self, now: float) -> None:
        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if now >= expires_at
        ]
        for key in expired:
            del self._entries[key]
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                del self._entries[next(iter(self._entries))]
