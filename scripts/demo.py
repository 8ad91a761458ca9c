#!/usr/bin/env python3
"""
Demo script for the quote JSONL service.

Fetches one page of quotes from the upstream API and shows the same records
as a JSON envelope and as JSON Lines, then checks that the cache holds.
"""

import io
import json
import time

from quote_jsonl import QuotableRepository, QuoteService, UpstreamUnavailableError
from quote_jsonl.jsonl import iter_json_lines, write_json_lines


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_fetch(service: QuoteService) -> None:
    """Demonstrate the first (uncached) fetch."""
    print_section("Fetching Quotes")

    start = time.time()
    quotes = service.get_list()
    duration = (time.time() - start) * 1000

    print(f"\n📥 Fetched {quotes.count} of {quotes.total_count} quotes in {duration:.2f}ms")
    for quote in quotes.results:
        print(f"  • {quote.author}: {quote.content[:60]}")


def demo_envelope(service: QuoteService) -> None:
    """Show the envelope as served by GET /quote."""
    print_section("JSON Envelope (GET /quote)")

    envelope = service.get_list().model_dump(mode="json", by_alias=True)
    envelope["results"] = envelope["results"][:1]
    print(json.dumps(envelope, indent=2, ensure_ascii=False))


def demo_jsonl(service: QuoteService) -> None:
    """Show the JSON Lines body as served by GET /quote/ex1..ex3."""
    print_section("JSON Lines (GET /quote/ex1, ex2, ex3)")

    quotes = service.get_quotes()

    with io.BytesIO() as sink:
        count = write_json_lines(quotes, sink)
        written = sink.getvalue()

    streamed = b"".join(iter_json_lines(quotes))

    print(f"\n📝 {count} records, {len(written)} bytes")
    print(written.decode("utf-8"), end="")
    print(f"\n🔁 Buffered and streamed bodies identical: {written == streamed}")


def demo_cache(service: QuoteService) -> None:
    """Demonstrate that later calls are served from memory."""
    print_section("Cache")

    start = time.time()
    service.get_list()
    duration = (time.time() - start) * 1000
    print(f"\n⚡ Second call served in {duration:.3f}ms (loaded={service.is_loaded})")


def main() -> None:
    """Run all demos."""
    print("\n🚀 Quote JSONL Demo")
    print("=" * 70)

    repository = QuotableRepository.create()
    service = QuoteService.create(source=repository)

    try:
        demo_fetch(service)
        demo_envelope(service)
        demo_jsonl(service)
        demo_cache(service)

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except UpstreamUnavailableError as e:
        print(f"\n❌ Error: {e}")
        print("\nCheck network access or set QUOTE_API_BASE_URL to a reachable mirror.")
    finally:
        repository.close()


if __name__ == "__main__":
    main()
