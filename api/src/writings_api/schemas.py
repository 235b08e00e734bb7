"""Response envelopes shared by the routers."""

from pydantic import BaseModel

from writings_core.models import Author, WritingsType
from writings_core.writings import Writings


class WritingsPage(BaseModel):
    """Paginated list of records."""

    total: int
    limit: int
    offset: int
    writings: list[Writings]


class SearchResult(BaseModel):
    ty: WritingsType
    author: Author
    title: str
    subtitle: str | None
    excerpt: str
    writings: Writings


class SearchResponse(BaseModel):
    query: str
    total: int
    limit: int
    offset: int
    results: list[SearchResult]
