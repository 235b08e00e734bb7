from __future__ import annotations

from bs4 import Tag

from writings_core.models.enums import ParagraphStyle
from writings_core.parse.class_list import ClassList
from writings_core.parse.text import trimmed_text

INVOCATION_CLASS = ClassList.parse("ub w kf")
INSTRUCTION_CLASSES = (ClassList.parse("cb"), ClassList.parse("z"))


def determine_style(element: Tag) -> ParagraphStyle:
    """
    Classify a content node as invocation, instruction or plain text.

    Blockquote is never returned here: visitors assign it to poetry they split
    out of a paragraph.
    """
    class_list = ClassList.of(element)
    if class_list == INVOCATION_CLASS:
        return ParagraphStyle.invocation
    if any(class_list.contains(c) for c in INSTRUCTION_CLASSES):
        return ParagraphStyle.instruction
    # e.g. "(The Intercalary Days, February 26 to March 1 ...)"
    if trimmed_text(element, 1).startswith("("):
        return ParagraphStyle.instruction
    return ParagraphStyle.text
