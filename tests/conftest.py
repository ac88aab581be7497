"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

from typing import Iterable

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortener_app.cache.strategies import InMemoryCache
from shortener_app.config import Settings
from shortener_app.services.short_id_strategies import ShortIdStrategy, UuidShortIdStrategy
from shortener_app.services.url_service import URLService
from shortener_app.store.strategies import InMemoryMappingStore

BASE_URL = "http://short.test"
CACHE_TTL = 3600


class FakeClock:
    """Manually advanced clock for cache expiry tests"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SequenceShortIdStrategy(ShortIdStrategy):
    """Hands out predetermined ids, then falls back to random ones"""

    def __init__(self, ids: Iterable[str]):
        self._ids = list(ids)
        self._fallback = UuidShortIdStrategy()
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        if self._ids:
            return self._ids.pop(0)
        return self._fallback.generate()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    """Fresh mapping store for each test"""
    return InMemoryMappingStore()


@pytest.fixture
def cache(clock):
    """In-memory cache driven by the fake clock"""
    return InMemoryCache(ttl=CACHE_TTL, timer=clock)


@pytest.fixture
def make_service(store, cache):
    """
    Build a URLService around the test store and cache.
    Keyword arguments override any constructor argument.
    """
    def _make(**overrides) -> URLService:
        kwargs = dict(
            store=store,
            generator=UuidShortIdStrategy(),
            cache=cache,
            base_url=BASE_URL,
            cache_ttl=CACHE_TTL,
        )
        kwargs.update(overrides)
        return URLService(**kwargs)

    return _make


@pytest.fixture
def url_service(make_service):
    return make_service()


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, base_url=BASE_URL, cache_backend="memory", debug=False)


@pytest.fixture
def client(test_settings, url_service):
    """
    Test client for an application wired to the test service.
    This is the main fixture that API tests use.
    """
    app = create_app(test_settings, url_service=url_service)
    with TestClient(app) as test_client:
        yield test_client
