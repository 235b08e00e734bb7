from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MeditationParagraph(BaseModel):
    """A paragraph from Prayers and Meditations by Bahá’u’lláh."""

    model_config = ConfigDict(frozen=True)

    type: Literal["meditation"] = "meditation"
    ref_id: str = Field(..., min_length=1)
    number: int = Field(..., ge=1)
    roman: str
    paragraph: int = Field(..., ge=1)
    text: str
