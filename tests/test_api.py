"""
Tests for the quote JSONL API.
"""

import json

import pytest
from fastapi.testclient import TestClient

from quote_jsonl.api.app import app
from quote_jsonl.api.dependencies import get_handler
from quote_jsonl.config import settings
from quote_jsonl.dto import QuoteList
from quote_jsonl.exceptions import SerializationError, UpstreamUnavailableError
from quote_jsonl.handlers import QuoteHandler
from quote_jsonl.jsonl import JSONL_MEDIA_TYPE, iter_json_lines
from quote_jsonl.repositories import QuotableRepository
from quote_jsonl.services import QuoteService

JSONL_PATHS = ["/quote/ex1", "/quote/ex2", "/quote/ex3"]

EXAMPLE_LINE = (
    b'{"_id":"a1","author":"X","content":"hi","tags":[],"authorSlug":"x",'
    b'"dateAdded":"2020-01-01","dateModified":"2020-01-01"}\n'
)


def parse_jsonl(body: bytes) -> list[dict]:
    lines = body.split(b"\n")
    assert lines[-1] == b""
    return [json.loads(line) for line in lines[:-1]]


@pytest.fixture
def failing_client(make_source):
    """Create a test client whose upstream is down."""
    source = make_source(error=UpstreamUnavailableError("connection refused"))
    service = QuoteService.create(source=source, limit=10)
    app.dependency_overrides[get_handler] = lambda: QuoteHandler(quote_service=service)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Quote JSONL API"
    assert data["endpoints"]["quotes"] == "/quote"


def test_health(client):
    """Health reports whether quotes have been loaded."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "quotes_loaded": False,
        "upstream": "FakeQuoteSource",
    }

    client.get("/quote")
    assert client.get("/health").json()["quotes_loaded"] is True


def test_quote_list(client, quotes_payload):
    """GET /quote returns the full envelope with upstream keys."""
    response = client.get("/quote")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"

    data = response.json()
    assert data["count"] == 3
    assert data["totalCount"] == 2127
    assert [q["_id"] for q in data["results"]] == [q["_id"] for q in quotes_payload["results"]]
    assert data["results"][1] == {
        "_id": "a1",
        "author": "X",
        "content": "hi",
        "tags": [],
        "authorSlug": "x",
        "dateAdded": "2020-01-01",
        "dateModified": "2020-01-01",
    }


@pytest.mark.parametrize("path", JSONL_PATHS)
def test_jsonl_content_type(client, path):
    """Every JSON Lines variant advertises the JSON Lines media type."""
    response = client.get(path)
    assert response.status_code == 200
    assert response.headers["content-type"] == JSONL_MEDIA_TYPE


@pytest.mark.parametrize("path", JSONL_PATHS)
def test_jsonl_matches_envelope(client, path):
    """JSON Lines bodies carry the same records as the envelope, in order."""
    envelope = client.get("/quote").json()
    response = client.get(path)

    assert not response.content.startswith(b"[")
    assert parse_jsonl(response.content) == envelope["results"]


def test_jsonl_variants_are_identical(client):
    """The three wiring styles produce byte-identical bodies."""
    bodies = {client.get(path).content for path in JSONL_PATHS}
    assert len(bodies) == 1


def test_exact_jsonl_line(client):
    """Records are written compactly, one per line."""
    body = client.get("/quote/ex1").content
    assert body.split(b"\n")[1] == (
        b'{"_id":"a1","author":"X","content":"hi","tags":[],"authorSlug":"x",'
        b'"dateAdded":"2020-01-01","dateModified":"2020-01-01"}'
    )


def test_all_endpoints_share_one_fetch(client, source):
    """Every endpoint reads the same cached list."""
    for path in ["/quote", *JSONL_PATHS]:
        assert client.get(path).status_code == 200

    assert len(source.calls) == 1


@pytest.mark.parametrize("path", ["/quote", *JSONL_PATHS])
def test_upstream_failure_is_bad_gateway(failing_client, path):
    """Upstream failures surface as 502 on every representation."""
    response = failing_client.get(path)
    assert response.status_code == 502
    assert "Quote API unavailable" in response.json()["detail"]


@pytest.fixture
def unencodable_service(make_source, quote_list):
    """A quote service whose cached list holds a record with no JSON form."""
    broken = QuoteList.model_construct(
        count=2,
        total_count=2,
        results=[quote_list.results[1], object()],
    )
    return QuoteService.create(source=make_source(quotes=broken), limit=10)


@pytest.fixture
def unencodable_client(unencodable_service):
    """Create a test client serving a record that cannot be encoded."""
    handler = QuoteHandler(quote_service=unencodable_service)
    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def test_buffered_encoding_failure_is_server_error(unencodable_client):
    """ex1 encodes everything before responding, so a bad record becomes a 500."""
    response = unencodable_client.get("/quote/ex1")
    assert response.status_code == 500
    assert "Failed to encode quotes" in response.json()["detail"]


def test_negotiated_encoding_failure_is_server_error(unencodable_client):
    """ex3 fails before any body is sent."""
    response = unencodable_client.get("/quote/ex3")
    assert response.status_code == 500
    assert not response.content.startswith(b'{"_id"')


def test_streamed_encoding_failure_truncates_body(unencodable_service):
    """ex2 sends the records before the bad one, then stops."""
    lines = iter_json_lines(unencodable_service.get_quotes())

    assert next(lines) == EXAMPLE_LINE
    with pytest.raises(SerializationError):
        next(lines)


def test_lifespan_wires_and_releases_services():
    """The lifespan builds the real stack on startup and tears it down on shutdown."""
    with TestClient(app) as lifespan_client:
        repository = app.state.repository
        assert isinstance(repository, QuotableRepository)
        assert isinstance(app.state.quote_service, QuoteService)
        assert isinstance(app.state.quote_handler, QuoteHandler)

        response = lifespan_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["quotes_loaded"] is False
        assert data["upstream"].rstrip("/") == settings.quote_api_base_url.rstrip("/")

    assert repository._client.is_closed
    assert not hasattr(app.state, "quote_handler")
    assert not hasattr(app.state, "quote_service")
    assert not hasattr(app.state, "repository")



def test_handler_not_initialized():
    """Without the lifespan or an override, the handler is missing."""
    with pytest.raises(RuntimeError, match="QuoteHandler not initialized"):
        TestClient(app).get("/quote")
