from __future__ import annotations

import logging

from bs4 import Tag

from writings_core.models.citation import Citation
from writings_core.models.enums import Author, WritingsType
from writings_core.models.prayer import PrayerKind, PrayerParagraph, PrayerSource
from writings_core.parse.citations import resolve_citations
from writings_core.parse.class_list import ClassList
from writings_core.parse.style import determine_style
from writings_core.parse.text import trimmed_text
from writings_core.parse.walker import VisitorAction
from writings_core.visitors.base import WritingsVisitor

logger = logging.getLogger(__name__)

ENDNOTES_CLASS = ClassList.parse("bf wf")
TITLE_CLASS = ClassList.parse("e")
AUTHOR_CLASS = ClassList.parse("hb ac")
KIND_CLASS = ClassList.parse("g c")
SECTION_CLASS = ClassList.parse("ub c l")
SUBSECTION_CLASS = ClassList.parse("xc jb c kf z nb zd ub")
TEACHING_CLASS = ClassList.parse("c kf z nb zd ub")


class PrayersVisitor(WritingsVisitor[PrayerParagraph]):
    """
    Bahá’í Prayers.

    Each prayer is a run of `p` paragraphs closed by an author signature
    (`.hb.ac`). Because the signature follows the text it labels, the author is
    looked up ahead from the first paragraph of every prayer.
    """

    URL = "https://www.bahai.org/library/authoritative-texts/prayers/bahai-prayers/bahai-prayers.xhtml"
    EXPECTED_COUNT = 981
    WRITINGS_TYPE = WritingsType.prayer

    def __init__(self) -> None:
        super().__init__()
        self.number = 0
        self.paragraph = 0
        self.current_section: list[str] = []
        self.current_author: Author | None = None

    def visit(self, element: Tag, level: int) -> VisitorAction:
        name = element.name

        if name == "body":
            self.citation_texts = self.get_citation_texts(element)

        if name == "nav":
            logger.debug("skip nav")
            return VisitorAction.SKIP_CHILDREN

        class_list = ClassList.of(element)

        if class_list == TITLE_CLASS:
            logger.debug("skip title")
            return VisitorAction.SKIP_CHILDREN

        if class_list.intersects(ENDNOTES_CLASS):
            logger.debug("notes reached, stop")
            return VisitorAction.STOP

        section = self.identify_section(element, class_list)
        if section is not None:
            section_level, heading = section
            logger.debug("section %r at level %d (html level %d)", heading, section_level, level)
            del self.current_section[section_level:]
            self.current_section.append(heading)
            return VisitorAction.SKIP_CHILDREN

        # An author signature closes the current prayer.
        if identify_author(element) is not None:
            self.current_author = None
            self.paragraph = 0
            return VisitorAction.SKIP_CHILDREN

        # Content depth is not fixed, so keep descending until a paragraph.
        if name != "p":
            return VisitorAction.VISIT_CHILDREN

        if self.current_author is None:
            author = self.find_next_author(element)
            if author is not None:
                self.current_author = author
                self.number += 1

        paragraph = self.extract_paragraph(element)
        if paragraph is not None:
            self.emit(paragraph)
            return VisitorAction.SKIP_CHILDREN

        return VisitorAction.VISIT_CHILDREN

    def extract_paragraph(self, element: Tag) -> PrayerParagraph | None:
        if self.current_author is None:
            return None

        citations: list[Citation] = []
        # Depth 4 reaches nested spans.
        text = trimmed_text(element, 4, citations=citations)
        if not text:
            return None

        ref_id = self.get_ref_id(element)
        self.paragraph += 1

        kind = PrayerKind.prologue
        if self.current_section:
            kind = PrayerKind.from_title(self.current_section[0]) or PrayerKind.prologue

        return PrayerParagraph(
            ref_id=ref_id,
            source=PrayerSource.bahai_prayers,
            author=self.current_author,
            kind=kind,
            section=tuple(self.current_section[1:]),
            number=self.number,
            paragraph=self.paragraph,
            style=determine_style(element),
            text=text,
            citations=tuple(resolve_citations(ref_id, citations, self.citation_texts)),
        )

    def find_next_author(self, element: Tag) -> Author | None:
        """Scan forward in document order for the signature ending this prayer."""
        for node in element.next_elements:
            if not isinstance(node, Tag):
                continue
            if ClassList.of(node).intersects(ENDNOTES_CLASS):
                return None
            author = identify_author(node)
            if author is not None:
                return author
        return None

    def identify_section(self, element: Tag, class_list: ClassList) -> tuple[int, str] | None:
        # Subsection first: its signature is a superset of the teaching one.
        if class_list.contains(SUBSECTION_CLASS):
            return 2, trimmed_text(element, 1)
        if class_list.contains(TEACHING_CLASS):
            return 3, trimmed_text(element, 1)
        if class_list.contains(SECTION_CLASS):
            return 1, trimmed_text(element, 1)
        if class_list == KIND_CLASS:
            return 0, trimmed_text(element, 1)
        return None


def identify_author(element: Tag) -> Author | None:
    if not ClassList.of(element).contains(AUTHOR_CLASS):
        return None
    return Author.find_in(trimmed_text(element, 1))
