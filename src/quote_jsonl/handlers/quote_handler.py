"""HTTP handlers for the quote resource.

Handlers read from QuoteService and decide how the records go out on the
wire. They handle HTTP concerns like media types, status codes, and error
translation.
"""

import io
import logging

from fastapi import HTTPException, Response, status
from fastapi.responses import StreamingResponse

from quote_jsonl.dto import Quote, QuoteList
from quote_jsonl.exceptions import SerializationError, UpstreamUnavailableError
from quote_jsonl.jsonl import JSONL_MEDIA_TYPE, iter_json_lines, write_json_lines
from quote_jsonl.services import QuoteService

logger = logging.getLogger(__name__)


class QuoteHandler:
    """HTTP handlers for the quote resource.

    Every method reads the same cached list from QuoteService; they differ
    only in how the response body is produced:

    - get_quote_list: the full envelope, serialized by FastAPI as JSON
    - write_quotes: records written into a buffer with write_json_lines
    - stream_quotes: records streamed lazily with iter_json_lines
    - get_quotes: bare records, left to the route's response class

    Example:
        ```python
        handler = QuoteHandler(quote_service=QuoteService.create(source=repo))

        @app.get("/quote/ex2")
        def quotes_ex2() -> StreamingResponse:
            return handler.stream_quotes()
        ```
    """

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize the quote handler.

        Args:
            quote_service: The quote service holding the cache (required).
        """
        self._quotes = quote_service

    def get_quote_list(self) -> QuoteList:
        """Handle GET /quote requests.

        Returns:
            The QuoteList envelope

        Raises:
            HTTPException: 502 if the upstream quote API is unavailable
        """
        try:
            return self._quotes.get_list()
        except UpstreamUnavailableError as e:
            logger.warning("Serving 502, upstream unavailable: %s", e)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Quote API unavailable: {e}",
            ) from e

    def get_quotes(self) -> list[Quote]:
        """Handle GET /quote/ex3 requests.

        Returns:
            The cached quote records

        Raises:
            HTTPException: 502 if the upstream quote API is unavailable
        """
        return self.get_quote_list().results

    def write_quotes(self) -> Response:
        """Handle GET /quote/ex1 requests.

        Encodes every record into an in-memory buffer before responding, so
        an encoding failure becomes a clean 500 instead of a truncated body.

        Returns:
            Response with the complete JSON Lines body

        Raises:
            HTTPException: 502 if the upstream is unavailable, 500 if a
                record cannot be encoded
        """
        quotes = self.get_quotes()

        try:
            with io.BytesIO() as sink:
                write_json_lines(quotes, sink)
                body = sink.getvalue()
        except SerializationError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to encode quotes: {e}",
            ) from e

        return Response(content=body, media_type=JSONL_MEDIA_TYPE)

    def stream_quotes(self) -> StreamingResponse:
        """Handle GET /quote/ex2 requests.

        The body is produced lazily while the response is sent. An encoding
        failure after the first record has gone out truncates the body.

        Returns:
            StreamingResponse over the encoded records

        Raises:
            HTTPException: 502 if the upstream quote API is unavailable
        """
        quotes = self.get_quotes()
        return StreamingResponse(iter_json_lines(quotes), media_type=JSONL_MEDIA_TYPE)

    def health_check(self) -> dict:
        """Handle GET /health requests.

        Returns:
            Dict with health status
        """
        source = self._quotes.source
        return {
            "status": "healthy",
            "quotes_loaded": self._quotes.is_loaded,
            "upstream": getattr(source, "base_url", type(source).__name__),
        }
