"""Error types raised by the quote service.

Handlers translate these into HTTP responses; nothing below the handler
layer catches them.
"""


class QuoteJsonlError(Exception):
    """Base class for all quote service errors."""


class UpstreamUnavailableError(QuoteJsonlError):
    """The upstream quote API could not be reached or returned bad data.

    Attributes:
        status_code: HTTP status returned by the upstream, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SerializationError(QuoteJsonlError, ValueError):
    """A value could not be encoded as JSON."""
