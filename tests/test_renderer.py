from scoutcode.parser import parse_text
from scoutcode.renderer import (
    RenderOptions,
    code_image_path,
    debug_message,
    render_image_tag,
    render_message,
    resolve_render_separators,
)
from scoutcode.separators import NBSP, SLASHES_FROM_LETTER, SeparatorOverrides, SeparatorsConfig
from scoutcode.structures import ImageSubLetter, MessageMetadata


def _message_with_images():
    message = parse_text("ab cd")
    for letter, _ in message.iter_letters():
        letter.set_sub_letters([ImageSubLetter("stars", letter.text_value())])
    message.metadata = MessageMetadata(produced_by="stars", produced_type="visual")
    return message


def test_image_paths():
    assert code_image_path("stars", "a") == "./assets/codes/stars/a.svg"
    assert code_image_path("grid", "3", "png", "https://cdn.example/codes/") == (
        "https://cdn.example/codes/grid/3.png"
    )
    assert render_image_tag("stars", "a") == (
        '<img src="./assets/codes/stars/a.svg" alt="a" class="code-symbol" />'
    )


def test_separators_mode_joins_levels():
    message = parse_text("ab c. d")
    options = RenderOptions(
        spacing="separators",
        separators=SeparatorOverrides(letter="-", word=" ", phrase=" | "),
    )
    assert render_message(message, options).content == "a-b c | d"


def test_separators_mode_skips_word_less_phrases():
    message = parse_text("!? ab. cd")
    options = RenderOptions(
        spacing="separators", separators=SeparatorOverrides(letter=" ", phrase="|")
    )
    assert render_message(message, options).content.split("|") == [
        "a b",
        "c d",
    ]


def test_sub_letters_use_the_sub_letter_separator():
    message = parse_text("a")
    letter, _ = next(message.iter_letters())
    letter.set_sub_letters("xyz")
    options = RenderOptions(spacing="separators", separators=SeparatorOverrides(sub_letter="."))
    assert render_message(message, options).content == "x.y.z"


def test_auto_format_uses_html_for_visual_output():
    output = render_message(_message_with_images())
    assert output.kind == "html"
    assert output.content.count('<img src="./assets/codes/stars/') == 4
    assert "&nbsp;" in output.content
    assert NBSP not in output.content


def test_text_format_uses_bracket_references():
    output = render_message(
        _message_with_images(),
        RenderOptions(format="text", separators=SeparatorOverrides(letter=" ", word=" / ")),
    )
    assert output.kind == "text"
    assert output.content == "[stars/a] [stars/b] / [stars/c] [stars/d]"


def test_custom_image_resolver():
    output = render_message(
        _message_with_images(),
        RenderOptions(
            separators=SeparatorOverrides(letter="", word=""),
            resolve_image_path=lambda folder, name: f"/img/{folder}-{name}.png",
        ),
    )
    assert str(output).startswith('<img src="/img/stars-a.png" alt="a"')


def test_html_separators_escape_newlines():
    message = parse_text("a. b")
    message.metadata = MessageMetadata(produced_type="digits")
    options = RenderOptions(format="html", spacing="separators")
    assert render_message(message, options).content == "a&nbsp;//<br>b"


def test_separator_precedence():
    message = parse_text("ab")
    message.metadata = MessageMetadata(
        produced_type="digits",
        separators=SeparatorOverrides(letter="~", word="#"),
        auto_separators=SLASHES_FROM_LETTER,
    )
    resolved = resolve_render_separators(message, SeparatorOverrides(letter="+"))
    assert resolved == SeparatorsConfig(
        sub_letter="",
        letter="+",
        word="#",
        phrase=SLASHES_FROM_LETTER.phrase,
    )


def test_spacing_falls_back_to_metadata_then_separators():
    message = parse_text("a, b")
    assert render_message(message).content == f"a{NBSP}// b"
    message.metadata = MessageMetadata(spacing="preserve")
    assert render_message(message).content == "a, b"


def test_debug_message_dumps_tokens():
    message = parse_text("ab!\n")
    letter, _ = next(message.iter_letters())
    letter.set_sub_letters("10")
    dump = debug_message(message)
    assert "Message: 1 phrase(s), 1 word(s), 2 letter(s)" in dump
    assert "[WORD] (1,0)b" in dump
    assert '[RAW:sentence] "!\\n"' in dump
