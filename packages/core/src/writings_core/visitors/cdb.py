"""
The Call of the Divine Beloved: several mystical works in one document,
prose paragraphs with poetry embedded in them.

A single source paragraph can hold prose, then a poetry container
(`span.dd`) whose line groups (`span.ce`) are stanzas, then more prose. Each
stanza becomes its own blockquote record, and the prose on either side of a
container becomes a separate text record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import Tag

from writings_core.errors import StructureError
from writings_core.models.cdb import CDBParagraph
from writings_core.models.citation import Citation
from writings_core.models.enums import ParagraphStyle, WritingsType
from writings_core.parse.citations import resolve_citations
from writings_core.parse.class_list import ClassList
from writings_core.parse.style import INVOCATION_CLASS
from writings_core.parse.text import TextBuffer, get_citation, is_text, trimmed_text
from writings_core.parse.walker import VisitorAction
from writings_core.visitors.base import WritingsVisitor

logger = logging.getLogger(__name__)

WORK_TITLE_CLASS = ClassList.parse("ic")
WORK_TITLE_SELECTOR = ".g"
WORK_SUBTITLE_SELECTOR = ".hb, .j"
PARAGRAPH_NUMBER_SELECTOR = "a.td"
POETRY_CONTAINER_CLASS = ClassList.parse("dd")
LINE_GROUP_CLASS = ClassList.parse("ce")


@dataclass
class _Part:
    style: ParagraphStyle
    text: str
    citations: list[Citation] = field(default_factory=list)


class _Stanza:
    """Lines of one line group; `<br>` starts a new line."""

    def __init__(self) -> None:
        self.lines: list[TextBuffer] = [TextBuffer()]

    @property
    def current(self) -> TextBuffer:
        return self.lines[-1]

    def break_line(self) -> None:
        self.lines.append(TextBuffer())

    def finish(self) -> tuple[str, list[Citation]]:
        texts: list[str] = []
        citations: list[Citation] = []
        position = 0
        for line in self.lines:
            text, found = line.finish(normalize_newlines=True)
            if not text:
                # A marker alone on its line closes the previous line
                citations.extend(c.model_copy(update={"offset": position}) for c in found)
                continue
            if texts:
                position += 1
            citations.extend(c.model_copy(update={"offset": c.offset + position}) for c in found)
            texts.append(text)
            position += len(text)
        return "\n".join(texts), citations


def _is_span_of(element: Tag, class_list: ClassList) -> bool:
    return element.name == "span" and ClassList.of(element).contains(class_list)


def _attach_to_last(parts: list[_Part], citations: list[Citation]) -> None:
    """Pin citations from an empty part to the end of the previous part."""
    if not parts:
        raise StructureError(f"Citation marker with no preceding text: {[c.ref_id for c in citations]}")
    last = parts[-1]
    last.citations.extend(c.model_copy(update={"offset": len(last.text)}) for c in citations)


class CDBVisitor(WritingsVisitor[CDBParagraph]):
    URL = "https://www.bahai.org/library/authoritative-texts/bahaullah/call-divine-beloved/call-divine-beloved.xhtml"
    EXPECTED_COUNT = 205
    WRITINGS_TYPE = WritingsType.cdb

    def __init__(self) -> None:
        super().__init__()
        self.current_work: str | None = None
        self.current_subtitle: str | None = None
        self.in_work = False
        self.index = 0

    def visit(self, element: Tag, level: int) -> VisitorAction:
        name = element.name

        if name == "body":
            self.citation_texts = self.get_citation_texts(element)

        if name == "h2" and trimmed_text(element, 1, False) == "Notes":
            logger.debug("notes reached, stop")
            return VisitorAction.STOP

        title = self.get_work_title(element)
        if title is not None:
            if title == "Preface":
                self.current_work = None
                self.current_subtitle = None
                self.in_work = False
                return VisitorAction.SKIP_CHILDREN
            logger.debug("work: %s", title)
            self.current_work = title
            self.current_subtitle = self.get_work_subtitle(element)
            self.in_work = True
            self.index = 0
            return VisitorAction.SKIP_CHILDREN

        if not (self.in_work and name == "p"):
            return VisitorAction.VISIT_CHILDREN

        ref_id = self.get_ref_id(element)
        number = self.get_paragraph_number(element)
        prose_style = (
            ParagraphStyle.invocation if ClassList.of(element) == INVOCATION_CLASS else ParagraphStyle.text
        )

        parts = self.split_paragraph(element, prose_style)
        if not parts:
            raise StructureError(f"Empty paragraph {ref_id} in {self.current_work!r}")

        for part_ref_id, part in zip(self._part_ref_ids(ref_id, parts), parts):
            self.index += 1
            self.emit(
                CDBParagraph(
                    ref_id=part_ref_id,
                    work_title=self.current_work or "",
                    subtitle=self.current_subtitle,
                    number=number,
                    index=self.index,
                    style=part.style,
                    text=part.text,
                    citations=tuple(resolve_citations(part_ref_id, part.citations, self.citation_texts)),
                )
            )
        return VisitorAction.SKIP_CHILDREN

    def split_paragraph(self, element: Tag, prose_style: ParagraphStyle) -> list[_Part]:
        parts: list[_Part] = []
        prose = TextBuffer()

        def flush_prose() -> None:
            nonlocal prose
            text, citations = prose.finish(normalize_newlines=True)
            if text:
                parts.append(_Part(prose_style, text, citations))
            elif citations:
                _attach_to_last(parts, citations)
            prose = TextBuffer()

        def walk(node: Tag) -> None:
            for child in node.children:
                if is_text(child):
                    prose.append(str(child))
                    continue
                if not isinstance(child, Tag):
                    continue
                # Printed paragraph number
                if child.name == "a" and "td" in ClassList.of(child):
                    continue
                if child.name == "sup":
                    citation = get_citation(child)
                    if citation is not None:
                        prose.mark(citation)
                    continue
                if _is_span_of(child, POETRY_CONTAINER_CLASS):
                    flush_prose()
                    self.split_poetry(child, parts)
                    continue
                walk(child)

        walk(element)
        flush_prose()
        return parts

    def split_poetry(self, container: Tag, parts: list[_Part]) -> None:
        """Append one blockquote part per line group inside a poetry container."""
        loose = _Stanza()

        def flush(stanza: _Stanza) -> None:
            text, citations = stanza.finish()
            if text:
                parts.append(_Part(ParagraphStyle.blockquote, text, citations))
            elif citations:
                _attach_to_last(parts, citations)

        def walk(node: Tag, stanza: _Stanza) -> None:
            for child in node.children:
                if is_text(child):
                    stanza.current.append(str(child))
                    continue
                if not isinstance(child, Tag):
                    continue
                if child.name == "br":
                    stanza.break_line()
                elif child.name == "sup":
                    citation = get_citation(child)
                    if citation is not None:
                        stanza.current.mark(citation)
                elif child.name == "a" and "td" in ClassList.of(child):
                    continue
                else:
                    walk(child, stanza)

        for child in container.children:
            if isinstance(child, Tag) and _is_span_of(child, LINE_GROUP_CLASS):
                flush(loose)
                loose = _Stanza()
                group = _Stanza()
                walk(child, group)
                flush(group)
            elif is_text(child):
                loose.current.append(str(child))
            elif isinstance(child, Tag):
                if child.name == "br":
                    loose.break_line()
                else:
                    walk(child, loose)
        flush(loose)

    @staticmethod
    def _part_ref_ids(ref_id: str, parts: list[_Part]) -> list[str]:
        """
        The first prose part keeps the paragraph's ref_id (the first part when
        there is no prose); every other part gets "<ref_id>-<k>", k from 1.
        """
        owner = next((i for i, p in enumerate(parts) if p.style is not ParagraphStyle.blockquote), 0)
        ids: list[str] = []
        suffix = 0
        for i in range(len(parts)):
            if i == owner:
                ids.append(ref_id)
            else:
                suffix += 1
                ids.append(f"{ref_id}-{suffix}")
        return ids

    def get_work_title(self, element: Tag) -> str | None:
        if not ClassList.of(element).contains(WORK_TITLE_CLASS):
            return None
        title = element.select_one(WORK_TITLE_SELECTOR)
        if title is None:
            return None
        return trimmed_text(title, 0)

    def get_work_subtitle(self, element: Tag) -> str | None:
        subtitle = element.select_one(WORK_SUBTITLE_SELECTOR)
        if subtitle is None:
            return None
        return trimmed_text(subtitle, 0) or None

    def get_paragraph_number(self, element: Tag) -> int | None:
        label = element.select_one(PARAGRAPH_NUMBER_SELECTOR)
        if label is None:
            return None
        try:
            return int(trimmed_text(label, 0))
        except ValueError:
            return None
