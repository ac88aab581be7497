"""
FastAPI dependencies and the composition root.

The store, cache and generator are built once by ``build_url_service`` when
the application is created and kept on ``app.state``. Routes receive the
service through ``get_url_service``; tests swap it with
``app.dependency_overrides`` or by building the app with their own service.
"""

from typing import Optional

from fastapi import Request

from shortener_app.cache.factory import CacheFactory
from shortener_app.cache.strategies import CacheStrategy
from shortener_app.config import Settings
from shortener_app.services.short_id_factory import ShortIdFactory, ShortIdStrategyType
from shortener_app.services.url_service import URLService
from shortener_app.store.strategies import InMemoryMappingStore, MappingStore


def build_url_service(
    config: Settings,
    store: Optional[MappingStore] = None,
    cache: Optional[CacheStrategy] = None,
) -> URLService:
    """
    Wire a URLService from settings.

    Args:
        config: Application settings
        store: Mapping store to use (default: new in-memory store)
        cache: Cache to use (default: built by CacheFactory from settings)
    """
    generator = ShortIdFactory.create_strategy(
        ShortIdStrategyType(config.short_id_strategy),
        length=config.short_id_length,
    )
    return URLService(
        store=store if store is not None else InMemoryMappingStore(),
        generator=generator,
        cache=cache if cache is not None else CacheFactory.create(config=config),
        base_url=config.base_url,
        cache_ttl=config.cache_ttl,
        max_retries=config.max_retries,
    )


def get_url_service(request: Request) -> URLService:
    """Return the URLService built at startup for this application"""
    return request.app.state.url_service
