"""
Shared scaffolding for the per-work extraction visitors.

A visitor is created for exactly one document. `parse_and_traverse` parses
the HTML, walks `<body>` once and returns the records collected along the way.
Any structural surprise raises; there is no partial result.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar, Generic, TypeVar

from bs4 import BeautifulSoup, Tag

from writings_core.errors import RecordCountMismatchError, StructureError
from writings_core.models.enums import WritingsType
from writings_core.parse.citations import CitationText, harvest_citation_texts
from writings_core.parse.walker import VisitorAction, traverse

logger = logging.getLogger(__name__)

W = TypeVar("W")

REF_ID_SELECTOR = "a.sf"


class WritingsVisitor(ABC, Generic[W]):
    URL: ClassVar[str]
    EXPECTED_COUNT: ClassVar[int]
    WRITINGS_TYPE: ClassVar[WritingsType]

    def __init__(self) -> None:
        self._visited: list[W] = []
        self.citation_texts: list[CitationText] = []

    @property
    def visited(self) -> tuple[W, ...]:
        return tuple(self._visited)

    @abstractmethod
    def visit(self, element: Tag, level: int) -> VisitorAction:
        """Inspect one node and tell the walker how to continue."""

    def emit(self, record: W) -> None:
        self._visited.append(record)

    def get_ref_id(self, element: Tag) -> str:
        anchor = element.select_one(REF_ID_SELECTOR)
        if anchor is None:
            raise StructureError(f"No ref_id anchor in <{element.name}>: {_snippet(element)}")
        ref_id = anchor.get("id")
        if not ref_id:
            raise StructureError(f"ref_id anchor without id in <{element.name}>: {_snippet(element)}")
        return str(ref_id)

    def get_citation_texts(self, body: Tag) -> list[CitationText]:
        return harvest_citation_texts(body)

    def parse_and_traverse(self, html: str) -> tuple[W, ...]:
        soup = BeautifulSoup(html, "lxml")
        body = soup.body
        if not isinstance(body, Tag):
            raise StructureError("Document has no <body>")
        self.traverse(body)
        logger.info("%s: %d records", type(self).__name__, len(self._visited))
        return self.visited

    def traverse(self, element: Tag) -> None:
        traverse(self, element, 0)

    @classmethod
    def verify_count(cls, records: Sequence[W]) -> None:
        if len(records) != cls.EXPECTED_COUNT:
            raise RecordCountMismatchError(cls.__name__, cls.EXPECTED_COUNT, len(records))


def _snippet(element: Tag, limit: int = 200) -> str:
    markup = str(element)
    return markup if len(markup) <= limit else markup[:limit] + "..."
