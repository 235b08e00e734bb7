"""
Works made of Roman-numbered units of plain paragraphs: Gleanings and
Prayers and Meditations.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TypeVar

from bs4 import Tag

from writings_core.errors import StructureError
from writings_core.models.enums import WritingsType
from writings_core.models.gleaning import GleaningsParagraph
from writings_core.models.meditation import MeditationParagraph
from writings_core.parse.class_list import ClassList
from writings_core.parse.text import trimmed_text
from writings_core.parse.walker import VisitorAction
from writings_core.roman import to_roman
from writings_core.visitors.base import WritingsVisitor

logger = logging.getLogger(__name__)

FOOTER_CLASS = ClassList.parse("wf")
ROMAN_NUMBER_CLASS = ClassList.parse("c q")

P = TypeVar("P", GleaningsParagraph, MeditationParagraph)


class NumberedUnitVisitor(WritingsVisitor[P]):
    def __init__(self) -> None:
        super().__init__()
        self.number = 0
        self.paragraph = 0
        self.seen_first = False

    @abstractmethod
    def build(self, *, ref_id: str, number: int, roman: str, paragraph: int, text: str) -> P:
        """Create the record for one paragraph."""

    def visit(self, element: Tag, level: int) -> VisitorAction:
        class_list = ClassList.of(element)

        if class_list == ROMAN_NUMBER_CLASS:
            self.seen_first = True
            self.number += 1
            self.paragraph = 0
            printed = "".join(ch for ch in trimmed_text(element, 0) if "A" <= ch <= "Z")
            if printed != to_roman(self.number):
                raise StructureError(
                    f"Unit heading {printed!r} does not match expected number {self.number}"
                )
            logger.debug("unit %s", printed)
            return VisitorAction.SKIP_CHILDREN

        if not self.seen_first:
            return VisitorAction.VISIT_CHILDREN

        if class_list == FOOTER_CLASS:
            logger.debug("footer reached, stop")
            return VisitorAction.STOP

        if element.name != "p":
            return VisitorAction.VISIT_CHILDREN

        ref_id = self.get_ref_id(element)
        self.paragraph += 1
        self.emit(
            self.build(
                ref_id=ref_id,
                number=self.number,
                roman=to_roman(self.number) or "",
                paragraph=self.paragraph,
                text=trimmed_text(element, 4),
            )
        )
        return VisitorAction.VISIT_CHILDREN


class GleaningsVisitor(NumberedUnitVisitor[GleaningsParagraph]):
    URL = "https://www.bahai.org/library/authoritative-texts/bahaullah/gleanings-writings-bahaullah/gleanings-writings-bahaullah.xhtml"
    EXPECTED_COUNT = 716
    WRITINGS_TYPE = WritingsType.gleaning

    def build(self, *, ref_id: str, number: int, roman: str, paragraph: int, text: str) -> GleaningsParagraph:
        return GleaningsParagraph(ref_id=ref_id, number=number, roman=roman, paragraph=paragraph, text=text)


class MeditationsVisitor(NumberedUnitVisitor[MeditationParagraph]):
    URL = "https://www.bahai.org/library/authoritative-texts/bahaullah/prayers-meditations/prayers-meditations.xhtml"
    EXPECTED_COUNT = 877
    WRITINGS_TYPE = WritingsType.meditation

    def build(self, *, ref_id: str, number: int, roman: str, paragraph: int, text: str) -> MeditationParagraph:
        return MeditationParagraph(ref_id=ref_id, number=number, roman=roman, paragraph=paragraph, text=text)
