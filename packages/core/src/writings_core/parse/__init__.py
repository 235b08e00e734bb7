from writings_core.parse.citations import CitationText, harvest_citation_texts, resolve_citations
from writings_core.parse.class_list import ClassList
from writings_core.parse.style import determine_style
from writings_core.parse.text import TextBuffer, get_citation, trimmed_text
from writings_core.parse.walker import VisitorAction, traverse

__all__ = [
    "CitationText",
    "ClassList",
    "TextBuffer",
    "VisitorAction",
    "determine_style",
    "get_citation",
    "harvest_citation_texts",
    "resolve_citations",
    "traverse",
    "trimmed_text",
]
