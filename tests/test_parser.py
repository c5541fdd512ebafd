import pytest

from scoutcode.parser import parse_text, segment_text
from scoutcode.renderer import RenderOptions, render_message
from scoutcode.structures import RawToken, WordToken


def test_segments_coalesce_runs():
    segments = segment_text("Hi, you! Ok")
    assert [(segment.kind, segment.text) for segment in segments] == [
        ("letters", "Hi"),
        ("separator", ", "),
        ("letters", "you"),
        ("separator", "! "),
        ("letters", "Ok"),
    ]
    assert [segment.separator_kind for segment in segments if segment.kind == "separator"] == [
        "word",
        "sentence",
    ]


def test_sentence_separator_closes_the_phrase():
    message = parse_text("Hello, world! Bye.")
    assert len(message.phrases) == 2

    first, second = message.phrases
    assert [type(token) for token in first.tokens] == [WordToken, RawToken, WordToken, RawToken]
    assert first.tokens[-1] == RawToken("! ", "sentence")
    assert [token.text for token in second.raw_tokens()] == ["."]
    assert message.word_count == 3
    assert message.letter_count == 13


def test_letters_stay_raw_after_parsing():
    message = parse_text("ab")
    letters = [letter for letter, _ in message.iter_letters()]
    assert not any(letter.is_materialized for letter in letters)
    assert letters[0].raw_char() == "a"


def test_ligatures_are_expanded():
    message = parse_text("cœur")
    assert message.letter_count == 5


def test_blank_and_punctuation_only_input():
    assert parse_text("").phrases == []
    message = parse_text("?!")
    assert len(message.phrases) == 1
    assert message.word_count == 0


@pytest.mark.parametrize(
    "text",
    [
        "Hello, world! Bye.",
        "  leading and trailing  ",
        "Line one\nLine two\r\n",
        "Élan, 42 ânes; fin?",
        "👍 ok 1️⃣",
    ],
)
def test_preserve_rendering_gives_back_the_input(text):
    message = parse_text(text)
    assert render_message(message, RenderOptions(spacing="preserve")).content == text
