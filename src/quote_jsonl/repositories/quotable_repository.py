"""quotable.io implementation of QuoteSource.

Talks to the public quote API over a synchronous httpx client:

    GET {base_url}/quotes?limit=10

The response envelope is parsed into a QuoteList. Every failure mode
(transport error, non-2xx status, non-JSON body, body that does not match
the model) is reported as UpstreamUnavailableError.
"""

import logging

import httpx
from pydantic import ValidationError

from quote_jsonl.config import get_quote_api_client
from quote_jsonl.dto import QuoteList
from quote_jsonl.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class QuotableRepository:
    """HTTP client for the quotable API.

    This class satisfies the QuoteSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        repository = QuotableRepository.create()
        quotes = repository.fetch_quotes(limit=10)
        print(quotes.count)  # 10
        ```
    """

    QUOTES_PATH = "/quotes"

    def __init__(self, client: httpx.Client) -> None:
        """Initialize the repository.

        Args:
            client: HTTP client with base_url set to the quote API root.
        """
        self._client = client

    @classmethod
    def create(cls, client: httpx.Client | None = None) -> "QuotableRepository":
        """Factory method using the configured quote API client.

        Args:
            client: HTTP client. If None, builds one from settings.

        Returns:
            Configured QuotableRepository
        """
        return cls(client=client or get_quote_api_client())

    @property
    def base_url(self) -> str:
        """Root URL of the upstream API."""
        return str(self._client.base_url)

    def fetch_quotes(self, limit: int) -> QuoteList:
        """Fetch one page of quotes from the upstream API.

        Args:
            limit: Page size sent as the ``limit`` query parameter

        Returns:
            Parsed QuoteList envelope

        Raises:
            UpstreamUnavailableError: On transport errors, non-success
                statuses, or malformed bodies
        """
        logger.info("Fetching %d quotes from %s", limit, self.base_url)

        try:
            response = self._client.get(self.QUOTES_PATH, params={"limit": limit})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Quote API returned %d", e.response.status_code)
            raise UpstreamUnavailableError(
                f"Quote API returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Quote API request failed: %s", e)
            raise UpstreamUnavailableError(f"Quote API request failed: {e}") from e

        try:
            quotes = QuoteList.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Quote API returned a malformed body: %s", e)
            raise UpstreamUnavailableError(
                f"Quote API returned a malformed body: {e.error_count()} error(s)",
                status_code=response.status_code,
            ) from e

        logger.debug("Received %d of %d quotes", quotes.count, quotes.total_count)
        return quotes

    def close(self) -> None:
        """Close the underlying HTTP client.

        Should be called when shutting down the application.
        """
        self._client.close()
