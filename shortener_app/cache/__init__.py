"""
Cache module for URL shortener.
Implements Strategy Pattern for flexible cache backends.
"""

from .strategies import CacheStrategy, InMemoryCache, RedisCache, NullCache
from .factory import CacheFactory, CacheBackend

__all__ = [
    "CacheStrategy",
    "InMemoryCache",
    "RedisCache",
    "NullCache",
    "CacheFactory",
    "CacheBackend",
]
