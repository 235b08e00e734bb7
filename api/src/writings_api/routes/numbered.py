"""
Gleanings and Prayers and Meditations: works divided into numbered units,
addressed by decimal or Roman number.
"""

from fastapi import APIRouter, HTTPException

from writings_api.deps import Corpus, parse_number
from writings_core.models import GleaningsParagraph, MeditationParagraph, WritingsType


def numbered_router(writings_type: WritingsType, model: type, label: str) -> APIRouter:
    router = APIRouter()

    @router.get("", response_model=list[model])
    def list_all(corpus: Corpus):
        return list(corpus.all(writings_type))

    @router.get("/{number}", response_model=list[model])
    def get_unit(corpus: Corpus, number: str):
        n = parse_number(number)
        paragraphs = [p for p in corpus.all(writings_type) if p.number == n]
        if not paragraphs:
            raise HTTPException(status_code=404, detail=f"{label} {number} not found")
        return paragraphs

    @router.get("/{number}/{paragraph}", response_model=model)
    def get_paragraph(corpus: Corpus, number: str, paragraph: int):
        n = parse_number(number)
        for p in corpus.all(writings_type):
            if p.number == n and p.paragraph == paragraph:
                return p
        raise HTTPException(status_code=404, detail=f"{label} {number}:{paragraph} not found")

    return router


gleanings_router = numbered_router(WritingsType.gleaning, GleaningsParagraph, "Gleaning")
meditations_router = numbered_router(WritingsType.meditation, MeditationParagraph, "Meditation")
