# core/cache.py

"""
In-memory TTL cache.

Holds per-user navigation state (latest request, last viewed page).
Entries live in this process only; a restart drops them and users
land on their role's default page again.
"""

from typing import Optional, Any, Callable
from datetime import datetime, timedelta
from threading import Lock


class CacheEntry:
    """Represents a cached value with expiration time."""

    def __init__(self, value: Any, expires_at: datetime):
        self.value = value
        self.expires_at = expires_at

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SimpleCache:
    """
    Simple in-memory cache with TTL support.

    Thread-safe: sync FastAPI handlers run in a threadpool.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._cache: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Returns:
            Cached value or None if not found or expired
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if entry.is_expired(self._clock()):
                del self._cache[key]
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int = 300):
        with self._lock:
            expires_at = self._clock() + timedelta(seconds=ttl_seconds)
            self._cache[key] = CacheEntry(value, expires_at)

    def delete(self, key: str):
        with self._lock:
            self._cache.pop(key, None)

    def clear(self):
        """Clear all cache entries."""
        with self._lock:
            self._cache.clear()

    def cleanup_expired(self):
        """Remove all expired entries from the cache."""
        with self._lock:
            now = self._clock()
            expired_keys = [
                key for key, entry in self._cache.items()
                if entry.is_expired(now)
            ]
            for key in expired_keys:
                del self._cache[key]

    def size(self) -> int:
        with self._lock:
            return len(self._cache)


# Global cache instance
_cache = SimpleCache()


def get_cache() -> SimpleCache:
    """Get the global cache instance."""
    return _cache


def cache_get(key: str) -> Optional[Any]:
    return _cache.get(key)


def cache_set(key: str, value: Any, ttl_seconds: int = 300):
    _cache.set(key, value, ttl_seconds)


def cache_delete(key: str):
    _cache.delete(key)


def cache_clear():
    """Clear all cache entries."""
    _cache.clear()
