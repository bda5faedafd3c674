"""In-memory caches with wall-clock TTL expiry."""

import time
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar('T')

Clock = Callable[[], float]


class TTLCache(Generic[T]):
    """Keyed cache holding one slot per key.

    Entries expire purely by comparing their store time with the clock.
    Writing a key overwrites its slot; nothing else is evicted.
    """

    def __init__(self, ttl: float, clock: Clock = time.time):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, tuple[T, float]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[T]:
        """Get cached value if not expired."""
        entry = self._entries.get(key)
        if entry is not None:
            value, stored_at = entry
            if self._clock() - stored_at < self.ttl:
                self.hits += 1
                return value
        self.misses += 1
        return None

    def put(self, key: str, value: T) -> None:
        """Store a value, replacing the key's previous slot."""
        self._entries[key] = (value, self._clock())

    def get_many(self, keys: List[str]) -> Dict[str, T]:
        """Get the live values for the given keys."""
        return {k: v for k in keys if (v := self.get(k)) is not None}

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Clear the cache."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total = self.hits + self.misses
        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / total if total > 0 else 0,
            'size': len(self._entries),
            'ttl': self.ttl
        }


class TimedValue(Generic[T]):
    """Single-slot cache for a value that is refreshed wholesale."""

    def __init__(self, ttl: float, clock: Clock = time.time):
        self.ttl = ttl
        self._clock = clock
        self._value: Optional[T] = None
        self._stored_at = 0.0

    def get(self) -> Optional[T]:
        """Return the value while it is younger than the TTL."""
        if self._value is not None and self._clock() - self._stored_at < self.ttl:
            return self._value
        return None

    def set(self, value: T) -> None:
        self._value = value
        self._stored_at = self._clock()

    def invalidate(self) -> None:
        self._value = None
        self._stored_at = 0.0
