"""Quote service for core business logic.

Owns the in-memory quote cache: the first successful fetch from the quote
source is kept for the lifetime of the service and never refreshed.
"""

import logging
import threading

from quote_jsonl.config import MAX_QUOTE_LIMIT, settings
from quote_jsonl.dto import Quote, QuoteList
from quote_jsonl.protocols import QuoteSource

logger = logging.getLogger(__name__)


class QuoteService:
    """Cached access to one page of quotes.

    The service depends on the QuoteSource PROTOCOL, so the quotable
    repository can be swapped for an in-memory source in tests.

    Loading is single-flight: concurrent first callers block on a lock
    while one of them fetches, then all read the same cached list. A failed
    fetch caches nothing, so the next call tries again.

    Example:
        ```python
        from quote_jsonl.repositories import QuotableRepository
        from quote_jsonl.services import QuoteService

        service = QuoteService.create(source=QuotableRepository.create())
        quotes = service.get_list()  # fetched
        quotes = service.get_list()  # cached
        ```
    """

    def __init__(self, source: QuoteSource, limit: int | None = None) -> None:
        """Initialize the quote service.

        Args:
            source: Where quotes are fetched from (required).
            limit: Page size to request. Defaults to settings.

        Raises:
            ValueError: If limit is outside 1..MAX_QUOTE_LIMIT
        """
        if limit is None:
            limit = settings.quote_api_limit
        if not 1 <= limit <= MAX_QUOTE_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_QUOTE_LIMIT}, got {limit}")

        self._source = source
        self._limit = limit
        self._quotes: QuoteList | None = None
        self._lock = threading.Lock()

    @classmethod
    def create(cls, source: QuoteSource, limit: int | None = None) -> "QuoteService":
        """Factory method to create QuoteService with sensible defaults.

        Args:
            source: Where quotes are fetched from (required).
            limit: Page size. If None, uses settings.

        Returns:
            Configured QuoteService instance
        """
        return cls(source=source, limit=limit)

    def get_list(self) -> QuoteList:
        """Return the cached quote list, fetching it on first use.

        Returns:
            The QuoteList envelope

        Raises:
            UpstreamUnavailableError: If the first fetch fails
        """
        quotes = self._quotes
        if quotes is not None:
            return quotes

        with self._lock:
            if self._quotes is None:
                self._quotes = self._source.fetch_quotes(self._limit)
                logger.info("Cached %d quotes", len(self._quotes.results))
            return self._quotes

    def get_quotes(self) -> list[Quote]:
        """Return only the cached quote records, in upstream order."""
        return self.get_list().results

    @property
    def is_loaded(self) -> bool:
        """Whether the cache has been filled."""
        return self._quotes is not None

    @property
    def limit(self) -> int:
        """Page size requested from the source."""
        return self._limit

    @property
    def source(self) -> QuoteSource:
        """Get the underlying quote source (for testing)."""
        return self._source
