"""Search endpoint."""

import re
from difflib import SequenceMatcher

from fastapi import APIRouter, Query

from writings_api.config import settings
from writings_api.deps import Corpus
from writings_api.schemas import SearchResponse, SearchResult
from writings_core import writings as w
from writings_core.models import PrayerParagraph
from writings_core.normalize import fold_for_search

router = APIRouter()

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]?\s*")
WORD_RE = re.compile(r"\w+")

# Archaic pronouns too frequent to be useful as keywords
STOP_WORDS = frozenset({"thee", "thou", "thine", "hast"})

ORDER_WEIGHT = 800.0
PROXIMITY_WEIGHT = 600.0
POSITION_WEIGHT = 400.0
EXACT_LAST_WEIGHT = 1000.0
FUZZY_WEIGHT = 500.0

# Minimum similarity for a misspelt last keyword
FUZZY_THRESHOLD = 0.7


def keywords_of(query: str) -> list[str]:
    words = WORD_RE.findall(fold_for_search(query))
    return [word for word in words if word not in STOP_WORDS]


def score_sentence(sentence: str, keywords: list[str]) -> float | None:
    """
    Score a sentence containing every keyword; None if one is missing.

    The last keyword may still be being typed, so it also matches a word
    that is merely similar. Keywords in query order, close together and
    early in the sentence score higher.
    """
    words = WORD_RE.findall(fold_for_search(sentence))
    positions: list[int] = []
    for keyword in keywords[:-1]:
        pos = next((i for i, word in enumerate(words) if keyword in word), None)
        if pos is None:
            return None
        positions.append(pos)

    last = keywords[-1]
    pos = next((i for i, word in enumerate(words) if last in word), None)
    if pos is not None:
        exact, similarity = 1.0, 1.0
    else:
        similarity, pos = max(
            ((SequenceMatcher(None, last, word).ratio(), i) for i, word in enumerate(words)),
            default=(0.0, 0),
        )
        if similarity < FUZZY_THRESHOLD:
            return None
        exact = 0.0
    positions.append(pos)

    pairs = list(zip(positions, positions[1:]))
    order = sum(1 for a, b in pairs if b >= a)
    proximity = sum(1.0 / (abs(b - a) + 1.0) for a, b in pairs) / max(len(pairs), 1)
    position = 1.0 / (positions[0] + 1.0)
    return (
        order * ORDER_WEIGHT
        + proximity * PROXIMITY_WEIGHT
        + position * POSITION_WEIGHT
        + exact * EXACT_LAST_WEIGHT
        + similarity * FUZZY_WEIGHT
    )


def best_excerpt(record: w.Writings, keywords: list[str]) -> tuple[float, str] | None:
    best: tuple[float, str] | None = None
    for match in SENTENCE_RE.finditer(record.text):
        sentence = match.group().strip()
        if not sentence:
            continue
        score = score_sentence(sentence, keywords)
        if score is not None and (best is None or score > best[0]):
            best = (score, sentence)
    if best is None and isinstance(record, PrayerParagraph):
        # Section headings match without a text excerpt
        headings = fold_for_search(" ".join(record.section))
        if all(k in headings for k in keywords):
            best = (0.0, record.text[:200])
    return best


@router.get("", response_model=SearchResponse)
def search(
    corpus: Corpus,
    q: str = Query(min_length=2, description="Search query"),
    limit: int = Query(default=settings.default_limit, ge=1, le=settings.max_limit),
    offset: int = Query(default=0, ge=0),
) -> SearchResponse:
    """Diacritic- and case-insensitive keyword search over text and prayer sections."""
    keywords = keywords_of(q)
    scored: list[tuple[float, int, SearchResult]] = []
    if keywords:
        for index, record in enumerate(corpus.everything()):
            excerpt = best_excerpt(record, keywords)
            if excerpt is None:
                continue
            result = SearchResult(
                ty=w.writings_type(record),
                author=w.author(record),
                title=w.title(record),
                subtitle=w.subtitle(record),
                excerpt=excerpt[1],
                writings=record,
            )
            scored.append((-excerpt[0], index, result))

    scored.sort(key=lambda item: item[:2])
    results = [result for _, _, result in scored]
    return SearchResponse(
        query=q,
        total=len(results),
        limit=limit,
        offset=offset,
        results=results[offset : offset + limit],
    )
