"""JSON Lines encoding.

Every value becomes one compact JSON document followed by a newline:

    {"_id":"a1","author":"X",...}
    {"_id":"b2","author":"Y",...}

No brackets, no separators between records, no indentation. Pydantic models
are dumped by alias and dates as ISO strings, the same way FastAPI renders
them in a plain JSON response.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Protocol

from pydantic import TypeAdapter

from quote_jsonl.exceptions import SerializationError

JSONL_MEDIA_TYPE = "application/x-jsonlines"

NEWLINE = b"\n"

_any_adapter: TypeAdapter[Any] = TypeAdapter(Any)


class BinarySink(Protocol):
    """Anything bytes can be written to (files, BytesIO, sockets)."""

    def write(self, data: bytes, /) -> Any: ...


def dump_json_line(value: Any) -> bytes:
    """Encode a single value as one JSON Lines record.

    Args:
        value: Any JSON-compatible value or Pydantic model

    Returns:
        Compact UTF-8 JSON followed by a newline

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    try:
        return _any_adapter.dump_json(value, by_alias=True) + NEWLINE
    except (ValueError, RecursionError) as e:
        raise SerializationError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e


def iter_json_lines(values: Iterable[Any]) -> Iterator[bytes]:
    """Lazily encode values, one record per yielded chunk.

    Suitable as the body iterator of a streaming response.
    """
    for value in values:
        yield dump_json_line(value)


def write_json_lines(values: Iterable[Any], sink: BinarySink) -> int:
    """Write values to a binary sink as JSON Lines.

    The sink is left open; the caller owns it. If encoding fails part way
    through, records already written remain in the sink.

    Args:
        values: Ordered values to encode
        sink: Destination with a ``write(bytes)`` method

    Returns:
        Number of records written

    Raises:
        SerializationError: If any value cannot be represented as JSON
    """
    written = 0
    for line in iter_json_lines(values):
        sink.write(line)
        written += 1
    return written
