from __future__ import annotations

import re
import unicodedata

# Typographic quotes and hyphens in the source text, folded for matching.
_FOLD = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "‑": "-",
        "‐": "-",
    }
)


def remove_diacritics(text: str) -> str:
    """Strip combining marks: "Bahá’u’lláh" -> "Baha’u’llah"."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_for_search(text: str) -> str:
    """
    Case-, diacritic- and punctuation-variant-insensitive form used for
    containment matching.
    """
    folded = remove_diacritics(text).translate(_FOLD).casefold()
    return _normalize_whitespace(folded)


def _normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
