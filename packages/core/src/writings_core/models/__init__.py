from writings_core.models.cdb import CDBParagraph
from writings_core.models.citation import Citation
from writings_core.models.enums import Author, ParagraphStyle, WritingsType
from writings_core.models.gleaning import GleaningsParagraph
from writings_core.models.hidden_word import HiddenWord, HiddenWordKind
from writings_core.models.meditation import MeditationParagraph
from writings_core.models.prayer import PrayerKind, PrayerParagraph, PrayerSource

__all__ = [
    "Author",
    "CDBParagraph",
    "Citation",
    "GleaningsParagraph",
    "HiddenWord",
    "HiddenWordKind",
    "MeditationParagraph",
    "ParagraphStyle",
    "PrayerKind",
    "PrayerParagraph",
    "PrayerSource",
    "WritingsType",
]
