"""
Factory for creating cache instances.
"""

import logging
from enum import Enum
from typing import Optional

from .strategies import CacheStrategy, RedisCache, InMemoryCache, NullCache
from shortener_app.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class CacheBackend(Enum):
    """Available cache backends"""
    MEMORY = "memory"
    REDIS = "redis"
    NULL = "null"


class CacheFactory:
    """
    Simple factory for creating cache instances.

    Each call builds a fresh instance; the application creates one at
    startup and hands it to the service.
    """

    @classmethod
    def create(
        cls,
        backend: Optional[CacheBackend] = None,
        config: Optional[Settings] = None,
    ) -> CacheStrategy:
        """
        Create a cache instance.

        Args:
            backend: Type of cache backend. If None, uses value from settings.
            config: Settings to read TTL and connection details from

        Returns:
            New cache instance

        Raises:
            ValueError: If backend is unknown
        """
        config = config or default_settings
        if backend is None:
            backend = CacheBackend(config.cache_backend)

        if backend == CacheBackend.MEMORY:
            cache = InMemoryCache(ttl=config.cache_ttl, maxsize=config.cache_max_entries)
            logger.info("In-memory cache initialized (ttl=%ss)", config.cache_ttl)
            return cache

        if backend == CacheBackend.REDIS:
            import redis

            try:
                redis_client = redis.from_url(
                    config.redis_url,
                    decode_responses=False,
                    socket_connect_timeout=2,
                    socket_timeout=2,
                )

                # Test connection immediately
                redis_client.ping()
            except Exception as e:
                logger.warning(
                    "Redis connection failed (%s), falling back to in-memory cache", e
                )
                return InMemoryCache(ttl=config.cache_ttl, maxsize=config.cache_max_entries)

            logger.info("Redis cache initialized (ttl=%ss)", config.cache_ttl)
            return RedisCache(redis_client, ttl=config.cache_ttl)

        if backend == CacheBackend.NULL:
            logger.info("Null cache initialized")
            return NullCache()

        raise ValueError(f"Unknown cache backend: {backend}")
