"""Service layer for business logic.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Cache)   -> (Quote API)
"""

from .quote_service import QuoteService

__all__ = [
    "QuoteService",
]
