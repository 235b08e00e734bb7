"""Hidden Words endpoints."""

from fastapi import APIRouter, HTTPException

from writings_api.deps import Corpus
from writings_core.models import HiddenWord, HiddenWordKind, WritingsType

router = APIRouter()


def _parse_kind(value: str) -> HiddenWordKind:
    for kind in HiddenWordKind:
        if value.lower() in (kind.name, kind.value.lower()):
            return kind
    raise HTTPException(status_code=400, detail=f"Unknown Hidden Words part: {value!r}")


@router.get("", response_model=list[HiddenWord])
def list_hidden_words(corpus: Corpus, kind: str | None = None) -> list[HiddenWord]:
    """All Hidden Words, including prologue and epilogue; optionally one part."""
    hidden_words: list[HiddenWord] = list(corpus.all(WritingsType.hidden_word))
    if kind is None:
        return hidden_words
    part = _parse_kind(kind)
    return [hw for hw in hidden_words if hw.kind is part]


@router.get("/{kind}/{number}", response_model=HiddenWord)
def get_hidden_word(corpus: Corpus, kind: str, number: int) -> HiddenWord:
    part = _parse_kind(kind)
    for hw in corpus.all(WritingsType.hidden_word):
        if hw.kind is part and hw.number == number:
            return hw
    raise HTTPException(status_code=404, detail=f"{part.value} Hidden Word {number} not found")
