from writings_core.visitors.base import WritingsVisitor
from writings_core.visitors.cdb import CDBVisitor
from writings_core.visitors.hidden_words import HiddenWordsVisitor
from writings_core.visitors.numbered import GleaningsVisitor, MeditationsVisitor
from writings_core.visitors.prayers import PrayersVisitor

__all__ = [
    "CDBVisitor",
    "GleaningsVisitor",
    "HiddenWordsVisitor",
    "MeditationsVisitor",
    "PrayersVisitor",
    "WritingsVisitor",
]
