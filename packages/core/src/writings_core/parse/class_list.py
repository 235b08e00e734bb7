from __future__ import annotations

from collections.abc import Iterable

from bs4 import Tag


class ClassList:
    """
    The set of `class` tokens on a node.

    Compared by set semantics only: equality, superset (`contains`) and
    intersection. Token order in the markup never matters.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens = frozenset(t.strip() for t in tokens if t and t.strip())

    @classmethod
    def parse(cls, text: str) -> ClassList:
        return cls(text.split())

    @classmethod
    def of(cls, element: Tag) -> ClassList:
        raw = element.get("class") or []
        if isinstance(raw, str):
            raw = raw.split()
        return cls(raw)

    def contains(self, other: ClassList) -> bool:
        return other._tokens <= self._tokens

    def intersects(self, other: ClassList) -> bool:
        return not self._tokens.isdisjoint(other._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassList):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __contains__(self, token: str) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ClassList({' '.join(sorted(self._tokens))!r})"
