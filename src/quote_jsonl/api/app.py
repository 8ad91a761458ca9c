from typing import Any

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from quote_jsonl.api.dependencies import HandlerDep, lifespan
from quote_jsonl.api.responses import JSONLinesResponse
from quote_jsonl.config import settings
from quote_jsonl.dto import Quote, QuoteList
from quote_jsonl.jsonl import JSONL_MEDIA_TYPE

API_NAME = "Quote JSONL API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Serves upstream quotes as JSON and as JSON Lines"

_JSONL_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"content": {JSONL_MEDIA_TYPE: {}}},
}

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "endpoints": {
            "quotes": "/quote",
            "jsonl_buffered": "/quote/ex1",
            "jsonl_streamed": "/quote/ex2",
            "jsonl_negotiated": "/quote/ex3",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health")
def health(handler: HandlerDep) -> dict[str, Any]:
    """Health check endpoint."""
    return handler.health_check()


@app.get("/quote", response_model=QuoteList)
def get_quote_list(handler: HandlerDep) -> QuoteList:
    """Return the full upstream envelope as a JSON object."""
    return handler.get_quote_list()


@app.get("/quote/ex1", response_class=Response, responses=_JSONL_RESPONSES)
def get_quotes_ex1(handler: HandlerDep) -> Response:
    """Return the quotes as JSON Lines, written into the body by hand."""
    return handler.write_quotes()


@app.get("/quote/ex2", response_class=StreamingResponse, responses=_JSONL_RESPONSES)
def get_quotes_ex2(handler: HandlerDep) -> StreamingResponse:
    """Return the quotes as JSON Lines, streamed one record at a time."""
    return handler.stream_quotes()


@app.get("/quote/ex3", response_model=list[Quote], response_class=JSONLinesResponse)
def get_quotes_ex3(handler: HandlerDep) -> list[Quote]:
    """Return the quotes as JSON Lines via the route's response class."""
    return handler.get_quotes()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quote_jsonl.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
