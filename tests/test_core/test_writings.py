import pytest
from pydantic import ValidationError

from writings_core import writings as w
from writings_core.models import (
    Author,
    CDBParagraph,
    GleaningsParagraph,
    HiddenWord,
    HiddenWordKind,
    MeditationParagraph,
    PrayerKind,
    PrayerParagraph,
    PrayerSource,
    WritingsType,
)
from writings_core.normalize import fold_for_search, remove_diacritics

PRAYER = PrayerParagraph(
    ref_id="p1",
    source=PrayerSource.bahai_prayers,
    author=Author.the_bab,
    kind=PrayerKind.general,
    section=("Aid and Assistance",),
    number=3,
    paragraph=2,
    text="Is there any Remover of difficulties save God?",
)
HIDDEN_WORD = HiddenWord(ref_id="h1", kind=HiddenWordKind.persian, number=7, text="Know ye.")
PROLOGUE = HiddenWord(ref_id="h0", kind=HiddenWordKind.arabic, text="He is the Glory of Glories")
GLEANING = GleaningsParagraph(ref_id="g1", number=19, roman="XIX", paragraph=1, text="Bahá’u’lláh")
MEDITATION = MeditationParagraph(ref_id="m1", number=2, roman="II", paragraph=3, text="Glorified art Thou.")
CDB = CDBParagraph(ref_id="c1", work_title="The Seven Valleys", subtitle=None, number=None, index=4, text="x")


@pytest.mark.parametrize(
    ("record", "expected"),
    [
        (PRAYER, WritingsType.prayer),
        (HIDDEN_WORD, WritingsType.hidden_word),
        (GLEANING, WritingsType.gleaning),
        (MEDITATION, WritingsType.meditation),
        (CDB, WritingsType.cdb),
    ],
)
def test_writings_type(record, expected):
    assert w.writings_type(record) is expected
    assert record.type == expected.value


def test_title_and_subtitle():
    assert w.title(PRAYER) == "Bahá’í Prayers"
    assert w.subtitle(PRAYER) == "General Prayers: Aid and Assistance"
    assert w.subtitle(PRAYER.model_copy(update={"section": ()})) is None
    assert w.title(HIDDEN_WORD) == "The Hidden Words"
    assert w.subtitle(HIDDEN_WORD) == "Part Two: From the Persian"
    assert w.title(GLEANING) == "Gleanings from the Writings of Bahá’u’lláh"
    assert w.subtitle(GLEANING) is None
    assert w.title(MEDITATION) == "Prayers and Meditations"
    assert w.title(CDB) == "The Seven Valleys"


def test_author():
    assert w.author(PRAYER) is Author.the_bab
    for record in (HIDDEN_WORD, GLEANING, MEDITATION, CDB):
        assert w.author(record) is Author.bahaullah


def test_number_and_paragraph_num():
    assert (w.number(PRAYER), w.paragraph_num(PRAYER)) == (3, 2)
    assert (w.number(HIDDEN_WORD), w.paragraph_num(HIDDEN_WORD)) == (7, 7)
    assert (w.number(PROLOGUE), w.paragraph_num(PROLOGUE)) == (None, 0)
    assert (w.number(GLEANING), w.paragraph_num(GLEANING)) == (19, 1)
    assert (w.number(MEDITATION), w.paragraph_num(MEDITATION)) == (2, 3)
    assert (w.number(CDB), w.paragraph_num(CDB)) == (None, 4)


def test_discriminated_union_round_trip_through_json():
    dumped = CDB.model_dump_json()
    assert w.WritingsAdapter.validate_json(dumped) == CDB
    assert isinstance(w.WritingsAdapter.validate_python(PRAYER.model_dump()), PrayerParagraph)


def test_records_are_immutable_and_hashable():
    with pytest.raises(ValidationError):
        GLEANING.text = "changed"
    assert len({GLEANING, GLEANING.model_copy()}) == 1


def test_search_strings_strip_diacritics():
    strings = w.search_strings(GLEANING)
    assert strings == ["g1", "XIX", "Baha’u’llah"]


def test_remove_diacritics_and_folding():
    assert remove_diacritics("Bahá’u’lláh") == "Baha’u’llah"
    assert fold_for_search("  ‘Abdu’l‑Bahá \n") == "'abdu'l-baha"
