from scoutcode.analysis import analyze_message
from scoutcode.parser import parse_text
from scoutcode.separators import SLASHES_FROM_LETTER, SLASHES_FROM_SUB_LETTER, SPACED_WITH_SLASHES
from scoutcode.structures import ImageSubLetter, TextSubLetter


def test_letters_only():
    analysis = analyze_message(parse_text("Élan"))
    assert analysis.content_type == "letters"
    assert analysis.auto_level == "word"
    assert analysis.auto_separators == SPACED_WITH_SLASHES
    assert not analysis.requires_separators
    assert analysis.has_content


def test_mixed_and_digit_content():
    assert analyze_message(parse_text("A1")).content_type == "lettersAndDigits"
    assert analyze_message(parse_text("42 7")).content_type == "digits"


def test_no_content():
    analysis = analyze_message(parse_text(" ?! "))
    assert not analysis.has_content
    assert analysis.content_type is None


def test_analysis_does_not_materialise():
    message = parse_text("abc")
    analyze_message(message)
    assert not any(letter.is_materialized for letter, _ in message.iter_letters())


def test_several_sub_letters_need_letter_separators():
    message = parse_text("ab")
    letter, _ = next(message.iter_letters())
    letter.set_sub_letters("10")
    analysis = analyze_message(message)
    assert analysis.auto_level == "letter"
    assert analysis.auto_separators == SLASHES_FROM_LETTER
    assert analysis.requires_separators
    assert analysis.content_type == "lettersAndDigits"


def test_long_sub_letters_need_sub_letter_separators():
    message = parse_text("a")
    letter, _ = next(message.iter_letters())
    letter.set_sub_letters([TextSubLetter("--")])
    analysis = analyze_message(message)
    assert analysis.auto_level == "subLetter"
    assert analysis.auto_separators == SLASHES_FROM_SUB_LETTER
    assert analysis.requires_separators
    assert analysis.content_type == "symbols"


def test_images_are_other_content():
    message = parse_text("a")
    letter, _ = next(message.iter_letters())
    letter.set_sub_letters([ImageSubLetter("stars", "a")])
    analysis = analyze_message(message)
    assert analysis.content_type == "symbols"
    assert analysis.auto_level == "word"
