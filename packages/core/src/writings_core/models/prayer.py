from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from writings_core.models.citation import Citation
from writings_core.models.enums import Author, ParagraphStyle


class PrayerKind(str, enum.Enum):
    """Top-level category of a prayer in the Bahá’í Prayers book."""

    prologue = "Prologue"
    obligatory = "Obligatory Prayers"
    general = "General Prayers"
    occasional = "Occasional Prayers"
    tablet = "Special Tablets"

    @property
    def title(self) -> str:
        return self.value

    @classmethod
    def from_title(cls, title: str) -> PrayerKind | None:
        return next((k for k in cls if k.value == title), None)


class PrayerSource(str, enum.Enum):
    bahai_prayers = "Bahá’í Prayers"
    additional_prayers_bahaullah = "Additional Prayers Revealed by Bahá’u’lláh"
    additional_prayers_abdul_baha = "Additional Prayers Revealed by ‘Abdu’l‑Bahá"
    twenty_six_prayers_abdul_baha = "Twenty-six Prayers Revealed by ‘Abdu’l‑Bahá"
    prayers_and_tablets_for_children = "Bahá’í Prayers and Tablets for Children"

    @property
    def title(self) -> str:
        return self.value


class PrayerParagraph(BaseModel):
    """A single paragraph of a prayer."""

    model_config = ConfigDict(frozen=True)

    type: Literal["prayer"] = "prayer"
    ref_id: str = Field(..., min_length=1)
    source: PrayerSource
    author: Author
    kind: PrayerKind
    # Headings below the kind, outermost first
    section: tuple[str, ...] = ()
    # Prayer ordinal across the book, starting at 1
    number: int = Field(..., ge=1)
    # Paragraph within the prayer, starting at 1
    paragraph: int = Field(..., ge=1)
    style: ParagraphStyle = ParagraphStyle.text
    text: str
    citations: tuple[Citation, ...] = ()
