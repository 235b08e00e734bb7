from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HiddenWordKind(str, enum.Enum):
    arabic = "Arabic"
    persian = "Persian"

    @property
    def title(self) -> str:
        if self is HiddenWordKind.arabic:
            return "Part One: From the Arabic"
        return "Part Two: From the Persian"


class HiddenWord(BaseModel):
    """
    One Hidden Word.

    `number` is None for the prologue (before the Arabic) and the epilogue
    (after the Persian).
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["hidden_word"] = "hidden_word"
    ref_id: str = Field(..., min_length=1)
    kind: HiddenWordKind
    number: int | None = None
    # Text preceding Persian #1, #20, #37 and #48
    prelude: str | None = None
    # Opening salutation, e.g. "O Son of Spirit!"
    invocation: str | None = None
    text: str
