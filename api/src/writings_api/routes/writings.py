"""Lookup of any record by its anchor id."""

from fastapi import APIRouter, Query

from writings_api.config import settings
from writings_api.deps import Corpus
from writings_api.schemas import WritingsPage
from writings_core.models import WritingsType
from writings_core.writings import Writings

router = APIRouter()


@router.get("", response_model=WritingsPage)
def list_writings(
    corpus: Corpus,
    type: WritingsType | None = None,
    limit: int = Query(default=settings.default_limit, ge=1, le=settings.max_limit),
    offset: int = Query(default=0, ge=0),
) -> WritingsPage:
    """List records across the corpus in document order."""
    records = corpus.all(type) if type is not None else corpus.everything()
    return WritingsPage(
        total=len(records),
        limit=limit,
        offset=offset,
        writings=list(records[offset : offset + limit]),
    )


@router.get("/{ref_id}", response_model=Writings)
def get_by_ref(corpus: Corpus, ref_id: str) -> Writings:
    """Return the record whose paragraph anchor is `ref_id`."""
    return corpus.get(ref_id)


