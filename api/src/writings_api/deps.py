"""FastAPI dependencies for corpus access."""

from typing import Annotated

from fastapi import Depends, HTTPException

from writings_core.corpus import CorpusCache, corpus
from writings_core.roman import from_roman


def get_corpus() -> CorpusCache:
    """Return the process-wide corpus; overridden in tests."""
    return corpus


Corpus = Annotated[CorpusCache, Depends(get_corpus)]


def parse_number(value: str) -> int:
    """Accept a decimal (`19`) or Roman (`XIX`) number from a path segment."""
    if value.isascii() and value.isdigit():
        return int(value)
    number = from_roman(value.upper(), strict=True)
    if number is None:
        raise HTTPException(status_code=400, detail=f"Invalid number or Roman numeral: {value!r}")
    return number
