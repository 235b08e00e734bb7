from __future__ import annotations

import enum
from typing import Protocol

from bs4 import Tag

from writings_core.parse.text import child_elements


class VisitorAction(enum.Enum):
    VISIT_CHILDREN = "visit_children"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


class Visitor(Protocol):
    def visit(self, element: Tag, level: int) -> VisitorAction: ...


def traverse(visitor: Visitor, element: Tag, level: int = 0) -> VisitorAction:
    """
    Pre-order walk over `element` and its descendant elements.

    `level` is the nesting depth relative to the starting element. A STOP from
    any node ends the whole walk; SKIP_CHILDREN only prunes that node's subtree.
    """
    action = visitor.visit(element, level)
    if action is VisitorAction.VISIT_CHILDREN:
        for child in child_elements(element):
            if traverse(visitor, child, level + 1) is VisitorAction.STOP:
                return VisitorAction.STOP
    return action
