"""Protocol interfaces for swappable implementations.

Services depend on these structural types so the upstream API can be
replaced by an in-memory source in tests.
"""

from .quote_source import QuoteSource

__all__ = [
    "QuoteSource",
]
