from __future__ import annotations

import logging

from bs4 import Tag

from writings_core.errors import StructureError
from writings_core.models.enums import WritingsType
from writings_core.models.hidden_word import HiddenWord, HiddenWordKind
from writings_core.parse.class_list import ClassList
from writings_core.parse.text import trimmed_text
from writings_core.parse.walker import VisitorAction
from writings_core.visitors.base import WritingsVisitor

logger = logging.getLogger(__name__)

TOP_INVOCATION_CLASS = ClassList.parse("w")
PROLOGUE_EPILOGUE_CLASS = ClassList.parse("zd hb")
PRELUDE_CLASS = ClassList.parse("dd zd hb")
HIDDEN_WORD_CLASS = ClassList.parse("dd zd")
INVOCATION_SELECTOR = "span.kf"


class HiddenWordsVisitor(WritingsVisitor[HiddenWord]):
    URL = "https://www.bahai.org/library/authoritative-texts/bahaullah/hidden-words/hidden-words.xhtml"
    EXPECTED_COUNT = 155
    WRITINGS_TYPE = WritingsType.hidden_word

    def __init__(self) -> None:
        super().__init__()
        self.seen_prologue = False
        self.prologue_ref_id: str | None = None
        self.current_kind = HiddenWordKind.arabic
        self.current_prelude: str | None = None
        self.current_number = 0

    def visit(self, element: Tag, level: int) -> VisitorAction:
        class_list = ClassList.of(element)
        is_paragraph = element.name == "p"

        if self.current_kind is HiddenWordKind.persian and class_list == PRELUDE_CLASS:
            self.current_prelude = trimmed_text(element, 1)
            logger.debug("prelude before Persian #%d: %s", self.current_number + 1, self.current_prelude)
            return VisitorAction.SKIP_CHILDREN

        if not self.seen_prologue and self.current_kind is HiddenWordKind.arabic and is_paragraph:
            if class_list == TOP_INVOCATION_CLASS:
                self.current_prelude = trimmed_text(element, 0)
                self.prologue_ref_id = self.get_ref_id(element)
                return VisitorAction.SKIP_CHILDREN

            if class_list == PROLOGUE_EPILOGUE_CLASS:
                if self.prologue_ref_id is None:
                    raise StructureError("Prologue found before the top invocation")
                self.emit(
                    HiddenWord(
                        ref_id=self.prologue_ref_id,
                        kind=HiddenWordKind.arabic,
                        invocation=self.current_prelude,
                        text=trimmed_text(element, 1),
                    )
                )
                self.prologue_ref_id = None
                self.current_prelude = None
                self.seen_prologue = True
                return VisitorAction.SKIP_CHILDREN

        if self.current_kind is HiddenWordKind.persian and is_paragraph and class_list == PROLOGUE_EPILOGUE_CLASS:
            self.emit(
                HiddenWord(
                    ref_id=self.get_ref_id(element),
                    kind=HiddenWordKind.persian,
                    text=trimmed_text(element, 1),
                )
            )
            logger.debug("epilogue reached, stop")
            return VisitorAction.STOP

        if (
            self.current_kind is HiddenWordKind.arabic
            and element.name == "h2"
            and trimmed_text(element, 0) == "Part Two"
        ):
            self.current_kind = HiddenWordKind.persian
            self.current_number = 0
            logger.debug("switching to the Persian")
            return VisitorAction.SKIP_CHILDREN

        if is_paragraph and class_list == HIDDEN_WORD_CLASS:
            salutation = element.select_one(INVOCATION_SELECTOR)
            if salutation is None:
                raise StructureError(f"Missing Hidden Word salutation after #{self.current_number}")
            ref_id = self.get_ref_id(element)
            self.current_number += 1
            self.emit(
                HiddenWord(
                    ref_id=ref_id,
                    kind=self.current_kind,
                    number=self.current_number,
                    prelude=self.current_prelude,
                    invocation=trimmed_text(salutation, 1),
                    # Depth 0 leaves out the salutation span.
                    text=trimmed_text(element, 0),
                )
            )
            self.current_prelude = None

        return VisitorAction.VISIT_CHILDREN
