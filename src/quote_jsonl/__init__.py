"""Quote JSONL - serve upstream quotes as JSON and JSON Lines.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (QuoteSource)
    - repositories: Upstream quote API client
    - services: Cached quote list
    - handlers: HTTP endpoint handlers
    - dto: Quote models (wire contract)
    - jsonl: JSON Lines encoder

Usage:
    ```python
    import sys

    from quote_jsonl.jsonl import write_json_lines
    from quote_jsonl.repositories import QuotableRepository
    from quote_jsonl.services import QuoteService

    service = QuoteService.create(source=QuotableRepository.create())
    write_json_lines(service.get_quotes(), sys.stdout.buffer)
    ```

For HTTP API:
    ```python
    from quote_jsonl.api.app import app
    ```
"""

from quote_jsonl.config import get_quote_api_client, settings
from quote_jsonl.dto import Quote, QuoteList
from quote_jsonl.exceptions import QuoteJsonlError, SerializationError, UpstreamUnavailableError
from quote_jsonl.handlers import QuoteHandler
from quote_jsonl.jsonl import JSONL_MEDIA_TYPE, dump_json_line, iter_json_lines, write_json_lines
from quote_jsonl.protocols import QuoteSource
from quote_jsonl.repositories import QuotableRepository
from quote_jsonl.services import QuoteService

__all__ = [
    # Configuration
    "settings",
    "get_quote_api_client",
    # Protocols (interfaces)
    "QuoteSource",
    # Services (business logic)
    "QuoteService",
    # Handlers (HTTP)
    "QuoteHandler",
    # Repositories (data access)
    "QuotableRepository",
    # DTOs (wire contract)
    "Quote",
    "QuoteList",
    # JSON Lines
    "JSONL_MEDIA_TYPE",
    "dump_json_line",
    "iter_json_lines",
    "write_json_lines",
    # Errors
    "QuoteJsonlError",
    "SerializationError",
    "UpstreamUnavailableError",
]
