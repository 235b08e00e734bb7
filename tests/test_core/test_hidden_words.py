from conftest import HIDDEN_WORDS_HTML

from writings_core.models import HiddenWordKind
from writings_core.visitors import HiddenWordsVisitor


def _parse():
    return HiddenWordsVisitor().parse_and_traverse(HIDDEN_WORDS_HTML)


def test_record_sequence_ends_at_epilogue():
    records = _parse()
    assert [r.ref_id for r in records] == ["hw0", "hw1", "hw2", "hw3", "hw4"]


def test_prologue_takes_top_invocation():
    prologue = _parse()[0]
    assert prologue.kind is HiddenWordKind.arabic
    assert prologue.number is None
    assert prologue.invocation == "He is the Glory of Glories"
    assert prologue.text == "This is that which hath descended from the realm of glory."


def test_arabic_numbering_and_salutation():
    _, first, second, _, _ = _parse()
    assert (first.kind, first.number) == (HiddenWordKind.arabic, 1)
    assert first.invocation == "O Son of Spirit!"
    assert first.text == "My first counsel is this."
    assert (second.kind, second.number) == (HiddenWordKind.arabic, 2)
    assert second.prelude is None


def test_persian_restarts_numbering_and_carries_prelude():
    persian = _parse()[3]
    assert persian.kind is HiddenWordKind.persian
    assert persian.number == 1
    assert persian.prelude == "In the name of the Lord of utterance."
    assert persian.invocation == "O Ye People that have Minds to Know!"


def test_epilogue_is_unnumbered_persian():
    epilogue = _parse()[-1]
    assert epilogue.kind is HiddenWordKind.persian
    assert epilogue.number is None
    assert epilogue.text == "I bear witness, O friends!"
