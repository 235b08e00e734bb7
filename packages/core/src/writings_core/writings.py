"""
The corpus-wide record type.

`Writings` is a closed union over the per-work records, discriminated by
their `type` field. Every cross-cutting accessor matches on all variants and
ends in `assert_never`, so adding a record type without handling it here is a
type-checking error.
"""

from __future__ import annotations

from typing import Annotated, Union, assert_never

from pydantic import Field, TypeAdapter

from writings_core.models import (
    Author,
    CDBParagraph,
    GleaningsParagraph,
    HiddenWord,
    MeditationParagraph,
    PrayerParagraph,
    WritingsType,
)
from writings_core.normalize import remove_diacritics

Writings = Annotated[
    Union[PrayerParagraph, HiddenWord, GleaningsParagraph, MeditationParagraph, CDBParagraph],
    Field(discriminator="type"),
]

WritingsAdapter: TypeAdapter[Writings] = TypeAdapter(Writings)

GLEANINGS_TITLE = "Gleanings from the Writings of Bahá’u’lláh"
HIDDEN_WORDS_TITLE = "The Hidden Words"
MEDITATIONS_TITLE = "Prayers and Meditations"


def writings_type(w: Writings) -> WritingsType:
    match w:
        case PrayerParagraph():
            return WritingsType.prayer
        case HiddenWord():
            return WritingsType.hidden_word
        case GleaningsParagraph():
            return WritingsType.gleaning
        case MeditationParagraph():
            return WritingsType.meditation
        case CDBParagraph():
            return WritingsType.cdb
        case _:
            assert_never(w)


def title(w: Writings) -> str:
    match w:
        case PrayerParagraph():
            return w.source.title
        case HiddenWord():
            return HIDDEN_WORDS_TITLE
        case GleaningsParagraph():
            return GLEANINGS_TITLE
        case MeditationParagraph():
            return MEDITATIONS_TITLE
        case CDBParagraph():
            return w.work_title
        case _:
            assert_never(w)


def subtitle(w: Writings) -> str | None:
    match w:
        case PrayerParagraph():
            if not w.section:
                return None
            return f"{w.kind.title}: {w.section[0]}"
        case HiddenWord():
            return w.kind.title
        case GleaningsParagraph() | MeditationParagraph():
            return None
        case CDBParagraph():
            return w.subtitle
        case _:
            assert_never(w)


def author(w: Writings) -> Author:
    match w:
        case PrayerParagraph():
            return w.author
        case HiddenWord() | GleaningsParagraph() | MeditationParagraph() | CDBParagraph():
            return Author.bahaullah
        case _:
            assert_never(w)


def number(w: Writings) -> int | None:
    """Ordinal of the enclosing numbered unit, if the work has them."""
    match w:
        case PrayerParagraph() | HiddenWord() | GleaningsParagraph() | MeditationParagraph():
            return w.number
        case CDBParagraph():
            return None
        case _:
            assert_never(w)


def paragraph_num(w: Writings) -> int:
    match w:
        case PrayerParagraph() | GleaningsParagraph() | MeditationParagraph():
            return w.paragraph
        case HiddenWord():
            return w.number or 0
        case CDBParagraph():
            return w.index
        case _:
            assert_never(w)


def search_strings(w: Writings) -> list[str]:
    """Strings an external full-text indexer should index for a record."""
    match w:
        case PrayerParagraph():
            fields = [w.ref_id, w.kind.value, " ".join(w.section), remove_diacritics(w.text)]
        case HiddenWord():
            fields = [w.ref_id, w.kind.value, w.prelude or "", w.invocation or "", remove_diacritics(w.text)]
        case GleaningsParagraph() | MeditationParagraph():
            fields = [w.ref_id, w.roman, remove_diacritics(w.text)]
        case CDBParagraph():
            fields = [w.ref_id, remove_diacritics(w.work_title), remove_diacritics(w.text)]
        case _:
            assert_never(w)
    return [f for f in fields if f]
