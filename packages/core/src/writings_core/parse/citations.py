"""
End-matter footnote harvesting and citation resolution.

Footnotes are collected once per document into a pool. Resolving a
paragraph's citations consumes entries from the pool, preferring an exact
`ref_id` match and falling back to the printed number.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bs4 import Tag

from writings_core.errors import CitationResolutionError, StructureError
from writings_core.models.citation import Citation
from writings_core.parse.text import trimmed_text

logger = logging.getLogger(__name__)

FOOTNOTE_LABEL_SELECTOR = ".jf"


@dataclass(frozen=True)
class CitationText:
    number: int
    ref_id: str
    text: str


def harvest_citation_texts(body: Tag) -> list[CitationText]:
    """Collect every numbered footnote block in the document."""
    pool: list[CitationText] = []
    for label in body.select(FOOTNOTE_LABEL_SELECTOR):
        label_text = trimmed_text(label, 1)
        try:
            number = int(label_text)
        except ValueError as exc:
            raise StructureError(f"Invalid footnote label {label_text!r}") from exc

        block = label.parent
        if not isinstance(block, Tag):
            raise StructureError(f"Footnote {number} has no parent block")
        anchor = block.select_one("p a[id]")
        if anchor is None:
            raise StructureError(f"Footnote {number} has no ref_id anchor")
        paragraph = block.select_one("p")
        if paragraph is None:
            raise StructureError(f"Footnote {number} has no text element")
        text = trimmed_text(paragraph, 1, skip=[label])
        if not text:
            raise StructureError(f"Footnote {number} has empty text")

        citation_text = CitationText(number=number, ref_id=str(anchor["id"]), text=text)
        logger.debug("footnote %s %s: %s", number, citation_text.ref_id, text)
        pool.append(citation_text)
    return pool


def resolve_citations(
    ref_id: str,
    citations: Iterable[Citation],
    pool: list[CitationText],
) -> list[Citation]:
    """
    Fill in the text of each citation, removing used entries from `pool`.

    `ref_id` names the paragraph, for error messages only.
    """
    resolved: list[Citation] = []
    for citation in citations:
        index = next((i for i, ct in enumerate(pool) if ct.ref_id == citation.ref_id), None)
        if index is None:
            index = next((i for i, ct in enumerate(pool) if ct.number == citation.number), None)
        if index is None:
            raise CitationResolutionError(
                f"Missing citation text for paragraph {ref_id}: "
                f"citation ref_id={citation.ref_id} number={citation.number} "
                f"({len(pool)} footnotes left)"
            )
        resolved.append(citation.model_copy(update={"text": pool.pop(index).text}))
    return resolved
