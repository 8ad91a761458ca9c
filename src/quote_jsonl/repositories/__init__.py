"""Repository layer for data access.

Wraps the external quote API behind the QuoteSource protocol.
"""

from quote_jsonl.protocols import QuoteSource

from .quotable_repository import QuotableRepository

__all__ = [
    "QuoteSource",
    "QuotableRepository",
]
