from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from writings_core.models.citation import Citation
from writings_core.models.enums import ParagraphStyle


class CDBParagraph(BaseModel):
    """A paragraph or stanza from the Call of the Divine Beloved."""

    model_config = ConfigDict(frozen=True)

    type: Literal["cdb"] = "cdb"
    # Stanzas split out of a paragraph carry "<paragraph ref_id>-<k>"
    ref_id: str = Field(..., min_length=1)
    work_title: str
    subtitle: str | None = None
    # Paragraph number as printed, if any
    number: int | None = None
    # Position within the work, starting at 1
    index: int = Field(..., ge=1)
    style: ParagraphStyle = ParagraphStyle.text
    text: str
    citations: tuple[Citation, ...] = ()
