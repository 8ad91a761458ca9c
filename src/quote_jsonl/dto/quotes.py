"""Quote DTOs mirroring the upstream quote API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

# Shared by every DTO here: immutable, accepts wire keys or field names,
# ignores upstream keys we do not model (e.g. "length").
_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Quote(BaseModel):
    """A single quote as served by the upstream API.

    Example wire form:
        {"_id": "qho6kC7InWuX", "content": "They can conquer who believe they can.",
         "author": "Virgil", "tags": ["famous-quotes"], "authorSlug": "virgil",
         "length": 38, "dateAdded": "2020-06-24", "dateModified": "2020-06-24"}
    """

    model_config = _WIRE_CONFIG

    id: str = Field(..., alias="_id", description="Upstream identifier")
    author: str = Field(..., description="Author display name")
    content: str = Field(..., description="The quote text")
    tags: list[str] = Field(..., description="Category tags, in upstream order")
    author_slug: str = Field(..., alias="authorSlug", description="URL-safe author key")
    date_added: date = Field(..., alias="dateAdded")
    date_modified: date = Field(..., alias="dateModified")


class QuoteList(BaseModel):
    """Paginated envelope returned by GET /quotes."""

    model_config = _WIRE_CONFIG

    count: int = Field(..., description="Number of quotes in this page", ge=0)
    total_count: int = Field(
        ...,
        alias="totalCount",
        description="Number of quotes available upstream",
        ge=0,
    )
    page: int = Field(1, ge=1)
    total_pages: int = Field(1, alias="totalPages", ge=0)
    last_item_index: int | None = Field(None, alias="lastItemIndex")
    results: list[Quote] = Field(default_factory=list)
