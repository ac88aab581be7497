"""
Cache strategies using Strategy Pattern.
Allows switching between different cache backends (In-Memory, Redis, Null).

The cache only ever holds derived short id -> URL entries. Losing an entry is
always safe because the mapping store can rebuild it.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_TTL = 24 * 3600


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.

    This is the Strategy Pattern interface - allows multiple cache implementations
    without changing the service layer code.

    Methods are synchronous: requests are served from a thread pool, and a
    single entry's get/set must be atomic with respect to other threads.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if absent or expired
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """
        Set value in cache with TTL (Time To Live).

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds, counted from now.
                 None uses the backend's default.

        Returns:
            True if successful, False otherwise
        """
        pass


class InMemoryCache(CacheStrategy):
    """
    In-process cache backed by cachetools.TTLCache.

    Expiry is lazy: an entry past its deadline is dropped the next time the
    cache is touched, so no background sweeper is needed. TTLCache applies
    one TTL to every entry; a shorter per-call ``ttl`` is enforced by
    storing its deadline next to the value. A per-call ``ttl`` cannot extend
    an entry past the default.

    TTLCache itself is not thread-safe, hence the lock.
    """

    def __init__(
        self,
        ttl: int = DEFAULT_TTL,
        maxsize: int = 100_000,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl: Default entry lifetime in seconds
            maxsize: Entry bound; oldest entries are evicted first
            timer: Clock used for expiry (injectable for tests)
        """
        self.ttl = ttl
        self._timer = timer
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and self._timer() >= expires_at:
                del self._cache[key]
                return None
            return value

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        expires_at = None
        if ttl is not None and ttl < self.ttl:
            expires_at = self._timer() + ttl
        with self._lock:
            self._cache[key] = (value, expires_at)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


class RedisCache(CacheStrategy):
    """
    Redis cache implementation.

    Lets several server processes share one cache. Redis enforces the TTL
    itself via SETEX.

    Connection problems are logged and reported as a miss (get) or a failed
    write (set): the caller then falls back to the mapping store.
    """

    def __init__(self, redis_client, ttl: int = DEFAULT_TTL):
        """
        Initialize Redis cache.

        Args:
            redis_client: Redis client instance (redis.Redis)
            ttl: Default entry lifetime in seconds
        """
        self.redis = redis_client
        self.ttl = ttl

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
        except Exception as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        try:
            return bool(self.redis.setex(key, ttl or self.ttl, value))
        except Exception as e:
            logger.warning("Redis set failed for %s: %s", key, e)
            return False


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.

    Every lookup goes to the mapping store. Useful for tests and for
    measuring the store on its own.
    """

    def get(self, key: str) -> Optional[str]:
        """Always returns None (cache miss)"""
        return None

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """Pretends to set but does nothing"""
        return True
