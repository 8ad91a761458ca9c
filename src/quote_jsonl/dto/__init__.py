"""Data Transfer Objects for the quote resource.

These Pydantic models are both the upstream contract (parsed from the
quote API) and the outbound contract (serialized by wire alias).
"""

from .quotes import Quote, QuoteList

__all__ = [
    "Quote",
    "QuoteList",
]
