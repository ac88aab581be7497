"""
Mapping store strategies using Strategy Pattern.

The store is the single source of truth for short id <-> URL mappings.
Only an in-memory backend exists; mappings do not survive a restart.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from shortener_app.models.mapping import AddOutcome, AddResult, UrlMapping


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    Implementations must be safe to share between request threads without
    any locking on the caller's side.
    """

    @abstractmethod
    def add(self, short_id: str, original_url: str) -> AddResult:
        """
        Atomically register a new mapping unless either side is taken.

        Args:
            short_id: Candidate short id
            original_url: URL to map

        Returns:
            AddResult describing what happened. On DUPLICATE_URL the result
            carries the mapping that already owns the URL.
        """
        pass

    @abstractmethod
    def get_by_short_id(self, short_id: str) -> Optional[str]:
        """
        Look up the URL for a short id.

        Returns:
            The original URL, or None if the id is unknown
        """
        pass

    @abstractmethod
    def get_by_original_url(self, original_url: str) -> Optional[str]:
        """
        Look up the short id for a URL.

        Returns:
            The short id, or None if the URL was never shortened
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class InMemoryMappingStore(MappingStore):
    """
    Dict-backed store with a forward and a reverse index.

    Both indices are only written inside ``add`` while holding ``_lock``,
    and the membership checks happen under the same lock. That makes
    check-and-insert a single compute-if-absent step: two threads adding
    the same URL cannot both succeed.

    Reads take the lock too so that a reader never sees the forward index
    updated without the reverse one.
    """

    def __init__(self):
        self._by_short_id: Dict[str, str] = {}
        self._by_original_url: Dict[str, str] = {}
        self._lock = threading.RLock()

    def add(self, short_id: str, original_url: str) -> AddResult:
        if not short_id or not original_url:
            return AddResult(outcome=AddOutcome.INVALID_ARGUMENT)

        with self._lock:
            # URL first: a racing shortener must learn the canonical id
            existing_id = self._by_original_url.get(original_url)
            if existing_id is not None:
                return AddResult(
                    outcome=AddOutcome.DUPLICATE_URL,
                    mapping=UrlMapping(short_id=existing_id, original_url=original_url),
                )

            existing_url = self._by_short_id.get(short_id)
            if existing_url is not None:
                return AddResult(
                    outcome=AddOutcome.DUPLICATE_SHORT_ID,
                    mapping=UrlMapping(short_id=short_id, original_url=existing_url),
                )

            self._by_short_id[short_id] = original_url
            self._by_original_url[original_url] = short_id

        return AddResult(
            outcome=AddOutcome.ADDED,
            mapping=UrlMapping(short_id=short_id, original_url=original_url),
        )

    def get_by_short_id(self, short_id: str) -> Optional[str]:
        if not short_id:
            return None
        with self._lock:
            return self._by_short_id.get(short_id)

    def get_by_original_url(self, original_url: str) -> Optional[str]:
        if not original_url:
            return None
        with self._lock:
            return self._by_original_url.get(original_url)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_short_id)
