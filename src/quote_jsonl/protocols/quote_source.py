"""Quote source protocol.

Defines the interface for anything that can produce a page of quotes.

Implementations can include:
- The quotable HTTP API (default)
- In-memory fakes for tests
"""

from typing import Protocol, runtime_checkable

from quote_jsonl.dto import QuoteList


@runtime_checkable
class QuoteSource(Protocol):
    """Protocol for quote backends.

    Any type with a matching ``fetch_quotes`` satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        source: QuoteSource = QuotableRepository.create()
        page = source.fetch_quotes(limit=10)
        ```
    """

    def fetch_quotes(self, limit: int) -> QuoteList:
        """Fetch one page of quotes.

        Args:
            limit: Maximum number of quotes to return

        Returns:
            The upstream envelope with its results

        Raises:
            UpstreamUnavailableError: If the quotes cannot be fetched
        """
        ...
