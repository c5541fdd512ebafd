import pytest

from scoutcode.text_model import (
    Char,
    Text,
    count_graphemes,
    expand_ligatures,
    remove_accents,
    to_graphemes,
)


def test_graphemes_keep_combining_marks_and_keycaps_together():
    assert to_graphemes("éa") == ["é", "a"]
    assert to_graphemes("1️⃣b") == ["1️⃣", "b"]
    assert to_graphemes("") == []
    assert count_graphemes("Tié") == 3


def test_remove_accents_and_ligatures():
    assert remove_accents("Élève ça") == "Eleve ca"
    assert expand_ligatures("cœur Æsop ﬁn") == "coeur AEsop fin"


@pytest.mark.parametrize(
    "value, expected",
    [("é", "e"), ("É", "E"), ("ç", "c"), ("e\u0301", "e"), ("Z", "Z"), ("5", None), ("?", None)],
)
def test_base_latin_letter(value, expected):
    assert Char(value).base_latin_letter == expected


def test_classification():
    assert Char("7").is_digit
    assert not Char("٣").is_digit
    assert Char("é").is_latin_letter
    assert Char("é").is_accented
    assert not Char("e").is_accented
    assert Char("!").is_sentence_separator
    assert Char("\n").is_sentence_separator
    assert Char(",").is_word_separator
    assert not Char("a").is_word_separator
    assert Char("A").is_uppercase and not Char("A").is_lowercase
    assert not Char("1").is_uppercase and not Char("1").is_lowercase
    assert Char("4").matches("letterOrDigit")
    with pytest.raises(ValueError):
        Char("a").matches("vowel")


def test_empty_char_is_rejected():
    with pytest.raises(ValueError):
        Char("")


def test_alphabet_rank_and_shift():
    assert Char("é").alphabet_rank == 5
    assert Char("?").alphabet_rank is None
    assert Char("Z").shifted(1).value == "A"
    assert Char("a").shifted(-1).value == "z"
    assert Char("h").shifted(3 + 26).value == "k"
    assert Char("É").shifted(1).value == "F"
    assert Char("3").shifted(4).value == "3"
    accented = Char("é")
    assert accented.shifted(26) is accented


def test_from_alphabet_rank():
    assert Char.from_alphabet_rank(1).value == "A"
    assert Char.from_alphabet_rank(26, uppercase=False).value == "z"
    for rank in (0, 27, True):
        with pytest.raises(ValueError):
            Char.from_alphabet_rank(rank)


def test_normalised_variants():
    assert Char("é").normalized_upper.value == "E"
    assert Char("À").normalized_lower.value == "a"
    assert Char("7").base_latin_letter_or_digit == "7"


def test_text_exposes_graphemes():
    text = Text("Ça va?")
    assert len(text) == 6
    assert [char.value for char in text.chars()][:2] == ["Ç", "a"]
    assert text.char_at(5).value == "?"
    assert text.char_at(6) is None
    assert Text("  \n").is_blank
    assert Text(None).raw == ""
