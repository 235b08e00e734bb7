from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GleaningsParagraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["gleaning"] = "gleaning"
    ref_id: str = Field(..., min_length=1)
    number: int = Field(..., ge=1)
    roman: str
    # Paragraph within the Gleaning, starting at 1
    paragraph: int = Field(..., ge=1)
    text: str
