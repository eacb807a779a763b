"""TTL cache for third-party lookups."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: float) -> None:
        """Store a value for ``ttl_seconds``."""

    def invalidate(self, key: str) -> None:
        """Drop a cached value."""


@dataclass
class InMemoryCache(Cache):
    """Process-local cache keyed by string, expiring on a monotonic clock."""

    clock: Callable[[], float] = time.monotonic
    _entries: dict[str, tuple[float, object]] = field(default_factory=dict)

    def get(self, key: str) -> object | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: float) -> None:
        self._entries[key] = (self.clock() + ttl_seconds, value)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)
