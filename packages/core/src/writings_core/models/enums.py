from __future__ import annotations

import enum


class WritingsType(str, enum.Enum):
    prayer = "prayer"
    hidden_word = "hidden_word"
    gleaning = "gleaning"
    meditation = "meditation"
    cdb = "cdb"


class ParagraphStyle(str, enum.Enum):
    # Regular text of the Writing
    text = "text"
    # Invocations, often displayed in ALL CAPS
    invocation = "invocation"
    # Instructions to the reader, e.g. in the Obligatory Prayers
    instruction = "instruction"
    # A stanza or line group split out of a prose paragraph
    blockquote = "blockquote"


class Author(str, enum.Enum):
    """The three Central Figures, valued by their printed names."""

    the_bab = "The Báb"
    bahaullah = "Bahá’u’lláh"
    abdul_baha = "‘Abdu’l‑Bahá"

    @classmethod
    def find_in(cls, text: str) -> Author | None:
        """Return the first author whose printed name occurs in `text`."""
        return next((a for a in cls if a.value in text), None)
