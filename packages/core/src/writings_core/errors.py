"""
Error taxonomy for document extraction.

Structural and citation errors are fatal: the snapshots are fixed and
versioned, so any of them means the markup changed or an extraction rule is
wrong. Only `NotFoundError` is meant to reach an end user.
"""

from __future__ import annotations


class WritingsError(Exception):
    """Base class for every error raised by this package."""


class StructureError(WritingsError):
    """A node is missing substructure the extraction rules depend on."""


class CitationResolutionError(StructureError):
    """An inline citation marker has no matching footnote text."""


class RecordCountMismatchError(WritingsError):
    """A parsed snapshot did not yield the expected number of records."""

    def __init__(self, visitor_name: str, expected: int, found: int) -> None:
        self.visitor_name = visitor_name
        self.expected = expected
        self.found = found
        super().__init__(
            f"{visitor_name}: unexpected number of paragraphs: expected {expected}, found {found}"
        )


class NotFoundError(WritingsError):
    """A lookup by ref_id, number or kind matched nothing."""
