from writings_core.roman import MAX, from_roman, to_roman


def test_to_roman_canonical_forms():
    assert to_roman(1) == "I"
    assert to_roman(4) == "IV"
    assert to_roman(19) == "XIX"
    assert to_roman(166) == "CLXVI"
    assert to_roman(1994) == "MCMXCIV"
    assert to_roman(MAX) == "MMMCMXCIX"


def test_to_roman_out_of_range():
    assert to_roman(0) is None
    assert to_roman(-3) is None
    assert to_roman(MAX + 1) is None


def test_from_roman_inverts_to_roman():
    for n in range(1, MAX + 1):
        assert from_roman(to_roman(n)) == n


def test_from_roman_rejects_unknown_symbols():
    assert from_roman("XIZ") is None
    assert from_roman("xix") is None


def test_from_roman_is_permissive_by_default():
    assert from_roman("IIII") == 4
    assert from_roman("") == 0


def test_from_roman_strict_requires_canonical_spelling():
    assert from_roman("IIII", strict=True) is None
    assert from_roman("", strict=True) is None
    assert from_roman("XIX", strict=True) == 19
