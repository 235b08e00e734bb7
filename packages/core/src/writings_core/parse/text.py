"""
Bounded-depth text extraction with citation offsets.

Text is accumulated raw, then normalised once. Citation markers are recorded
against the raw position and remapped through every normalisation step, so a
citation's offset always points into the final string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from writings_core.errors import StructureError
from writings_core.models.citation import Citation

_NEWLINE_WHITESPACE_RE = re.compile(r"\s*\n\s*")


def is_text(node: object) -> bool:
    # Comments, CDATA, doctypes and processing instructions are not text.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def child_elements(element: Tag) -> list[Tag]:
    return [c for c in element.children if isinstance(c, Tag)]


class TextBuffer:
    """Raw text plus citation markers pinned to positions in it."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._length = 0
        self._marks: list[tuple[Citation, int]] = []

    def append(self, text: str) -> None:
        if text:
            self._chunks.append(text)
            self._length += len(text)

    def mark(self, citation: Citation) -> None:
        self._marks.append((citation, self._length))

    @property
    def raw(self) -> str:
        return "".join(self._chunks)

    def is_blank(self) -> bool:
        return not self.raw.strip()

    def finish(self, normalize_newlines: bool = True) -> tuple[str, list[Citation]]:
        text = self.raw
        positions = [p for _, p in self._marks]

        if normalize_newlines:
            text, positions = _collapse(text, positions, _NEWLINE_WHITESPACE_RE, " ")

        stripped = text.lstrip()
        lead = len(text) - len(stripped)
        text = stripped.rstrip()
        positions = [min(max(0, p - lead), len(text)) for p in positions]

        citations = [
            citation.model_copy(update={"offset": position})
            for (citation, _), position in zip(self._marks, positions)
        ]
        return text, citations


def _collapse(
    raw: str, positions: list[int], pattern: re.Pattern[str], repl: str
) -> tuple[str, list[int]]:
    """Apply `pattern.sub(repl, raw)` and carry `positions` along."""
    out: list[str] = []
    # (raw_start, raw_end, new_start) for each replaced run
    spans: list[tuple[int, int, int]] = []
    last = 0
    length = 0
    for m in pattern.finditer(raw):
        out.append(raw[last : m.start()])
        length += m.start() - last
        spans.append((m.start(), m.end(), length))
        out.append(repl)
        length += len(repl)
        last = m.end()
    out.append(raw[last:])

    def remap(p: int) -> int:
        prior = None
        for span in spans:
            if span[0] >= p:
                break
            prior = span
        if prior is None:
            return p
        start, end, new_start = prior
        if p < end:
            return new_start + len(repl)
        return new_start + len(repl) + (p - end)

    return "".join(out), [remap(p) for p in positions]


def get_citation(element: Tag, offset: int = 0) -> Citation | None:
    """
    Read an inline `<sup><a href="#id">n</a></sup>` marker.

    Returns None for anything else, including a `sup` without a link. A linked
    marker whose label is not an integer is a structural error.
    """
    if element.name != "sup":
        return None
    link = element.find("a")
    if not isinstance(link, Tag):
        return None
    href = link.get("href")
    if not href:
        return None
    label = trimmed_text(element, 1)
    try:
        number = int(label)
    except ValueError as exc:
        raise StructureError(f"Invalid citation number {label!r} for link {href!r}") from exc
    return Citation(ref_id=str(href).replace("#", ""), number=number, offset=offset, text="")


def trimmed_text(
    element: Tag,
    max_depth: int,
    normalize_newlines: bool = True,
    *,
    skip: Sequence[Tag] = (),
    citations: list[Citation] | None = None,
) -> str:
    """
    Concatenate the text under `element`, descending at most `max_depth` levels.

    Subtrees rooted at a node in `skip` (matched by identity) are left out.
    Citation markers are never emitted as text; when `citations` is given they
    are appended to it with offsets into the returned string.
    """
    buffer = TextBuffer()
    _collect(element, max_depth, skip, buffer)
    text, found = buffer.finish(normalize_newlines)
    if citations is not None:
        citations.extend(found)
    return text


def _collect(element: Tag, max_depth: int, skip: Sequence[Tag], buffer: TextBuffer) -> None:
    if any(element is s for s in skip):
        return
    for child in element.children:
        if isinstance(child, Tag):
            if child.name == "sup":
                citation = get_citation(child)
                if citation is not None:
                    buffer.mark(citation)
                continue
            if max_depth > 0:
                _collect(child, max_depth - 1, skip, buffer)
        elif is_text(child):
            buffer.append(str(child))
