"""Conversion between integers and Roman numerals."""

from __future__ import annotations

_SYMBOLS = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_PAIRS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

# The largest number representable as a Roman numeral.
MAX = 3999


def to_roman(n: int) -> str | None:
    """Return the numeral for 1 <= n <= 3999, otherwise None."""
    if n <= 0 or n > MAX:
        return None
    out: list[str] = []
    for name, value in _PAIRS:
        while n >= value:
            n -= value
            out.append(name)
    return "".join(out)


def from_roman(text: str, *, strict: bool = False) -> int | None:
    """
    Parse an uppercase Roman numeral.

    Returns None on any unrecognised symbol. The default scan is permissive
    ("IIII" parses as 4); with `strict=True` only the canonical spelling of a
    value in 1..3999 is accepted.
    """
    total = 0
    highest = 0
    for ch in reversed(text):
        value = _SYMBOLS.get(ch)
        if value is None:
            return None
        if value < highest:
            total -= value
        else:
            total += value
            highest = value
    if strict and (not text or to_roman(total) != text):
        return None
    return total
