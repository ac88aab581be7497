import logging
from typing import Optional

from shortener_app.cache.strategies import CacheStrategy
from shortener_app.errors import InvalidArgumentError, ShortIdGenerationError
from shortener_app.models.mapping import AddOutcome
from shortener_app.schemas.url import ShortenUrlResponse
from shortener_app.services.short_id_strategies import ShortIdStrategy
from shortener_app.store.strategies import MappingStore

logger = logging.getLogger(__name__)


class URLService:
    """
    Shortens URLs and resolves short ids.

    All collaborators are injected; the application builds one instance at
    startup and shares it between request threads. The service holds no
    mutable state of its own, so it is thread-safe as long as the store and
    cache are.
    """

    def __init__(
        self,
        store: MappingStore,
        generator: ShortIdStrategy,
        cache: Optional[CacheStrategy] = None,
        base_url: str = "http://127.0.0.1:8000",
        cache_ttl: Optional[int] = None,
        max_retries: int = 5,
    ):
        """
        Initialize URL service with dependencies.

        Args:
            store: Authoritative short id <-> URL mapping store
            generator: Short id generation strategy
            cache: Cache strategy (optional, for performance)
            base_url: Origin that short ids are appended to
            cache_ttl: TTL in seconds for cache writes (None = cache default)
            max_retries: Generation attempts before giving up on collisions
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        self.store = store
        self.generator = generator
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.max_retries = max_retries

    def shorten_url(self, original_url: str) -> ShortenUrlResponse:
        """
        Return the short id for a URL, minting one on first use.

        Idempotent: a URL that is already mapped gets its existing id back,
        without touching the store or the cache.

        Process:
        1. Look up the URL in the store
        2. If missing, generate a candidate and add it atomically
        3. On a short id collision, retry with a fresh candidate
        4. On a URL collision, another request won the race - use its id
        5. Cache the new mapping

        Raises:
            InvalidArgumentError: original_url is empty
            ShortIdGenerationError: every candidate collided, or the
                generator produced an empty id
        """
        if not original_url:
            raise InvalidArgumentError("Original URL cannot be empty.")

        short_id = self.store.get_by_original_url(original_url)
        if short_id is not None:
            return self._build_response(short_id)

        for attempt in range(1, self.max_retries + 1):
            candidate = self.generator.generate()
            result = self.store.add(candidate, original_url)

            if result.outcome is AddOutcome.ADDED:
                logger.debug("Mapped %s -> %s", candidate, original_url)
                self._cache_set(candidate, original_url)
                return self._build_response(candidate)

            if result.outcome is AddOutcome.DUPLICATE_URL:
                # Lost the race to a concurrent request; its mapping is canonical
                return self._build_response(result.short_id)

            if result.outcome is AddOutcome.INVALID_ARGUMENT:
                # The URL was checked above, so the generator produced an empty id
                raise ShortIdGenerationError(
                    attempt, f"Generator produced an unusable short id {candidate!r}"
                )

            logger.debug(
                "Short id %s already taken (attempt %d/%d)",
                candidate, attempt, self.max_retries
            )

        raise ShortIdGenerationError(self.max_retries)

    def resolve_url(self, short_id: str) -> Optional[str]:
        """
        Get the original URL using the Cache-Aside pattern.

        Flow:
        1. Check cache first
        2. On miss, query the store
        3. Populate cache for next time
        4. Return original URL

        Returns:
            The original URL, or None if the short id is unknown.
            Unknown ids leave both cache and store untouched.
        """
        if self.cache is not None:
            cached_url = self.cache.get(self._cache_key(short_id))
            if cached_url:
                return cached_url

        original_url = self.store.get_by_short_id(short_id)
        if original_url is None:
            return None

        self._cache_set(short_id, original_url)
        return original_url

    def _build_response(self, short_id: str) -> ShortenUrlResponse:
        return ShortenUrlResponse(
            short_url=f"{self.base_url}/{short_id}",
            short_id=short_id,
        )

    def _cache_set(self, short_id: str, original_url: str) -> None:
        if self.cache is not None:
            self.cache.set(self._cache_key(short_id), original_url, ttl=self.cache_ttl)

    @staticmethod
    def _cache_key(short_id: str) -> str:
        return f"url:{short_id}"
