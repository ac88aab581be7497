"""
Tests for cache strategies and the cache factory.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

from shortener_app.cache.factory import CacheBackend, CacheFactory
from shortener_app.cache.strategies import InMemoryCache, NullCache, RedisCache
from shortener_app.config import Settings


class TestInMemoryCache:
    """Test TTL behaviour of the in-memory cache"""

    def test_set_then_get(self, cache):
        assert cache.set("url:abc", "https://example.com") is True
        assert cache.get("url:abc") == "https://example.com"

    def test_missing_key_is_a_miss(self, cache):
        assert cache.get("url:missing") is None

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.set("url:abc", "https://example.com")

        clock.advance(3599)
        assert cache.get("url:abc") == "https://example.com"

        clock.advance(2)
        assert cache.get("url:abc") is None

    def test_ttl_counts_from_last_set(self, cache, clock):
        cache.set("url:abc", "https://example.com")
        clock.advance(3000)
        cache.set("url:abc", "https://example.com")
        clock.advance(3000)

        assert cache.get("url:abc") == "https://example.com"

    def test_shorter_ttl_per_entry(self, cache, clock):
        cache.set("url:abc", "https://example.com", ttl=10)

        clock.advance(9)
        assert cache.get("url:abc") == "https://example.com"

        clock.advance(2)
        assert cache.get("url:abc") is None

    def test_concurrent_writers(self, clock):
        cache = InMemoryCache(ttl=60, timer=clock)

        def write(i):
            cache.set(f"url:{i}", f"https://example.com/{i}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(write, range(500)))

        assert len(cache) == 500
        assert all(cache.get(f"url:{i}") == f"https://example.com/{i}" for i in range(500))


class TestNullCache:

    def test_never_stores(self):
        cache = NullCache()

        assert cache.set("url:abc", "https://example.com") is True
        assert cache.get("url:abc") is None


class TestRedisCache:
    """Test Redis cache against a mocked client"""

    def test_get_decodes_bytes(self):
        client = MagicMock()
        client.get.return_value = b"https://example.com"

        assert RedisCache(client).get("url:abc") == "https://example.com"
        client.get.assert_called_once_with("url:abc")

    def test_get_miss(self):
        client = MagicMock()
        client.get.return_value = None

        assert RedisCache(client).get("url:abc") is None

    def test_set_uses_setex_with_ttl(self):
        client = MagicMock()
        client.setex.return_value = True
        cache = RedisCache(client, ttl=7200)

        assert cache.set("url:abc", "https://example.com") is True
        client.setex.assert_called_once_with("url:abc", 7200, "https://example.com")

        cache.set("url:xyz", "https://example.org", ttl=60)
        client.setex.assert_called_with("url:xyz", 60, "https://example.org")

    def test_errors_degrade_to_miss(self):
        client = MagicMock()
        client.get.side_effect = ConnectionError("down")
        client.setex.side_effect = ConnectionError("down")
        cache = RedisCache(client)

        assert cache.get("url:abc") is None
        assert cache.set("url:abc", "https://example.com") is False


class TestCacheFactory:
    """Test cache factory"""

    def test_creates_memory_cache_with_configured_ttl(self):
        config = Settings(_env_file=None, cache_duration_in_hours=2)

        cache = CacheFactory.create(CacheBackend.MEMORY, config)

        assert isinstance(cache, InMemoryCache)
        assert cache.ttl == 7200

    def test_creates_null_cache(self):
        assert isinstance(CacheFactory.create(CacheBackend.NULL), NullCache)

    def test_creates_default_from_settings(self):
        config = Settings(_env_file=None, cache_backend="null")

        assert isinstance(CacheFactory.create(config=config), NullCache)

    def test_creates_redis_cache(self):
        config = Settings(_env_file=None, cache_duration_in_hours=1)
        client = MagicMock()

        with patch("redis.from_url", return_value=client) as from_url:
            cache = CacheFactory.create(CacheBackend.REDIS, config)

        from_url.assert_called_once()
        client.ping.assert_called_once()
        assert isinstance(cache, RedisCache)
        assert cache.ttl == 3600

    def test_falls_back_to_memory_when_redis_is_down(self):
        client = MagicMock()
        client.ping.side_effect = ConnectionError("refused")

        with patch("redis.from_url", return_value=client):
            cache = CacheFactory.create(CacheBackend.REDIS, Settings(_env_file=None))

        assert isinstance(cache, InMemoryCache)


class TestCacheSettings:

    def test_default_duration_is_one_day(self, monkeypatch):
        monkeypatch.delenv("CACHE_DURATION_IN_HOURS", raising=False)
        monkeypatch.delenv("CacheDurationInHours", raising=False)

        assert Settings(_env_file=None).cache_ttl == 24 * 3600

    def test_duration_from_legacy_variable_name(self, monkeypatch):
        monkeypatch.setenv("CacheDurationInHours", "3")

        assert Settings(_env_file=None).cache_duration_in_hours == 3
