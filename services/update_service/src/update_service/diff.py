from __future__ import annotations

from collections.abc import Sequence

from writings_core.writings import Writings


def diff_records(old: Sequence[Writings], new: Sequence[Writings]) -> tuple[list[Writings], list[Writings]]:
    """
    Records only in `new` (added) and only in `old` (removed), each in
    document order. Records compare by value.
    """
    old_set = set(old)
    new_set = set(new)
    added = [w for w in new if w not in old_set]
    removed = [w for w in old if w not in new_set]
    return added, removed
