"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Cache)   -> (Quote API)
"""

from .quote_handler import QuoteHandler

__all__ = [
    "QuoteHandler",
]
