"""Response classes for non-JSON media types."""

from typing import Any

from starlette.responses import Response

from quote_jsonl.jsonl import JSONL_MEDIA_TYPE, iter_json_lines


class JSONLinesResponse(Response):
    """Render a sequence of values as ``application/x-jsonlines``.

    Use as a route's ``response_class`` to route FastAPI's regular
    serialization through the JSON Lines encoder instead of producing a JSON
    array. FastAPI validates and dumps the return value against the route's
    response model first, so ``content`` arrives here as plain
    JSON-compatible data.

    Example:
        ```python
        @app.get("/quote/ex3", response_class=JSONLinesResponse)
        def quotes() -> list[Quote]:
            ...
        ```
    """

    media_type = JSONL_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return b"".join(iter_json_lines(content))
