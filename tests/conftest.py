"""
Shared fixtures for the quote JSONL tests.
"""

import threading
import time

import pytest
from fastapi.testclient import TestClient

from quote_jsonl.api.app import app
from quote_jsonl.api.dependencies import get_handler
from quote_jsonl.dto import QuoteList
from quote_jsonl.handlers import QuoteHandler
from quote_jsonl.services import QuoteService

QUOTES_PAYLOAD = {
    "count": 3,
    "totalCount": 2127,
    "page": 1,
    "totalPages": 213,
    "lastItemIndex": 3,
    "results": [
        {
            "_id": "qho6kC7InWuX",
            "content": "They can conquer who believe they can.",
            "author": "Virgil",
            "tags": ["famous-quotes"],
            "authorSlug": "virgil",
            "length": 38,
            "dateAdded": "2020-06-24",
            "dateModified": "2020-06-24",
        },
        {
            "_id": "a1",
            "content": "hi",
            "author": "X",
            "tags": [],
            "authorSlug": "x",
            "length": 2,
            "dateAdded": "2020-01-01",
            "dateModified": "2020-01-01",
        },
        {
            "_id": "ZfE0GJ4qS",
            "content": "L'enfer, c'est les autres. «Huis clos»",
            "author": "Jean-Paul Sartre",
            "tags": ["famous-quotes", "wisdom"],
            "authorSlug": "jean-paul-sartre",
            "length": 38,
            "dateAdded": "2021-03-10",
            "dateModified": "2023-04-14",
        },
    ],
}


class FakeQuoteSource:
    """In-memory QuoteSource that counts fetches."""

    def __init__(
        self,
        quotes: QuoteList | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.quotes = quotes or QuoteList.model_validate(QUOTES_PAYLOAD)
        self.error = error
        self.delay = delay
        self.calls: list[int] = []
        self._lock = threading.Lock()

    def fetch_quotes(self, limit: int) -> QuoteList:
        with self._lock:
            self.calls.append(limit)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.quotes


@pytest.fixture
def quotes_payload() -> dict:
    """Raw upstream envelope."""
    return QUOTES_PAYLOAD


@pytest.fixture
def quote_list() -> QuoteList:
    """Parsed upstream envelope."""
    return QuoteList.model_validate(QUOTES_PAYLOAD)


@pytest.fixture
def make_source():
    """Factory for fake quote sources with custom behaviour."""
    return FakeQuoteSource


@pytest.fixture
def source() -> FakeQuoteSource:
    """A quote source that always succeeds."""
    return FakeQuoteSource()


@pytest.fixture
def quote_service(source):
    """A quote service backed by the fake source."""
    return QuoteService.create(source=source, limit=10)


@pytest.fixture
def client(quote_service):
    """Create a test client wired to the fake quote service."""
    handler = QuoteHandler(quote_service=quote_service)
    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app)
    app.dependency_overrides.clear()
