"""Prayer endpoints."""

from fastapi import APIRouter, HTTPException, Query

from writings_api.config import settings
from writings_api.deps import Corpus
from writings_api.schemas import WritingsPage
from writings_core.models import Author, PrayerKind, PrayerParagraph, WritingsType
from writings_core.normalize import fold_for_search

router = APIRouter()


def _matches_section(prayer: PrayerParagraph, wanted: list[str]) -> bool:
    """Every requested segment occurs in some heading of the prayer."""
    sections = [fold_for_search(s) for s in prayer.section]
    return all(any(w in s for s in sections) for w in wanted)


@router.get("", response_model=WritingsPage)
def list_prayers(
    corpus: Corpus,
    kind: PrayerKind | None = None,
    section: str | None = Query(default=None, description="Slash-separated headings, e.g. teaching/western"),
    author: Author | None = None,
    limit: int = Query(default=settings.default_limit, ge=1, le=settings.max_limit),
    offset: int = Query(default=0, ge=0),
) -> WritingsPage:
    """List prayer paragraphs, optionally filtered by kind, section and author."""
    prayers: list[PrayerParagraph] = list(corpus.all(WritingsType.prayer))
    if kind is not None:
        prayers = [p for p in prayers if p.kind is kind]
    if author is not None:
        prayers = [p for p in prayers if p.author is author]
    if section:
        wanted = [fold_for_search(s.replace("-", " ")) for s in section.split("/") if s]
        prayers = [p for p in prayers if _matches_section(p, wanted)]

    return WritingsPage(
        total=len(prayers),
        limit=limit,
        offset=offset,
        writings=prayers[offset : offset + limit],
    )


@router.get("/{number}", response_model=list[PrayerParagraph])
def get_prayer(corpus: Corpus, number: int) -> list[PrayerParagraph]:
    """All paragraphs of one prayer, in order."""
    paragraphs = [p for p in corpus.all(WritingsType.prayer) if p.number == number]
    if not paragraphs:
        raise HTTPException(status_code=404, detail=f"Prayer {number} not found")
    return paragraphs
