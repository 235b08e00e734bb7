from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Citation(BaseModel):
    """A footnote or endnote marker embedded in a paragraph."""

    model_config = ConfigDict(frozen=True)

    ref_id: str = Field(..., description="Anchor id of the footnote block, https://www.bahai.org/r/<ref_id>")
    number: int = Field(..., description="Citation number as printed in the text")
    offset: int = Field(..., ge=0, description="Character offset of the marker within the paragraph text")
    text: str = Field(default="", description="Footnote text, empty until resolved")
