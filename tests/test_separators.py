import pytest

from scoutcode.separators import (
    NBSP,
    SLASHES_FROM_LETTER,
    SLASHES_FROM_WORD,
    SPACED_WITH_SLASHES,
    SeparatorOverrides,
    SeparatorsConfig,
    build_separators,
    layer_separators,
    resolve_separators,
    separators_for_type,
    spacing_for_type,
)


def test_default_signs_from_letter_level():
    config = build_separators(None, "letter")
    assert config == SLASHES_FROM_LETTER
    assert config.sub_letter == ""
    assert config.letter == f"{NBSP}/ "
    assert config.word == f"{NBSP}// "
    assert config.phrase == f"{NBSP}///\n"


def test_word_level_takes_phrase_sign_from_the_list():
    config = build_separators(["/", "//", "///"], "word")
    assert config == SLASHES_FROM_WORD
    assert config.letter == ""
    assert config.word == f"{NBSP}/ "
    assert config.phrase == f"{NBSP}//\n"


def test_short_sign_list_extends_the_last_sign_for_phrases():
    config = build_separators(["|"], "subLetter")
    assert config.sub_letter == f"{NBSP}| "
    assert config.letter == ""
    assert config.word == ""
    assert config.phrase == f"{NBSP}|/\n"


def test_blank_signs_are_kept_verbatim():
    config = build_separators([" ", "|"], "letter")
    assert config.letter == " "
    assert config.word == f"{NBSP}| "


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        build_separators(None, "phrase")


def test_layering_takes_first_override_per_level():
    base = SeparatorsConfig("a", "b", "c", "d")
    resolved = layer_separators(
        base,
        SeparatorOverrides(letter="1"),
        None,
        SeparatorOverrides(letter="2", word="3"),
    )
    assert resolved == SeparatorsConfig("a", "1", "3", "d")


def test_empty_string_override_still_wins():
    resolved = resolve_separators(SeparatorOverrides(word=""), "digits")
    assert resolved.word == ""
    assert resolved.letter == SPACED_WITH_SLASHES.letter


def test_type_defaults():
    assert spacing_for_type("letters") == "preserve"
    assert spacing_for_type("twoSymbols") == "separators"
    assert spacing_for_type(None) == "separators"
    assert separators_for_type("visual") == SLASHES_FROM_WORD
    assert separators_for_type("digits") == SPACED_WITH_SLASHES
    assert separators_for_type(None) == SLASHES_FROM_LETTER
