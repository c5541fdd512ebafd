"""One-to-one substitutions: phone keypad and the picture alphabets."""

from __future__ import annotations

from ..encoders.types import (
    EncoderConfig,
    EncoderDef,
    FunctionTransform,
    MessageClass,
    Requirement,
    TableTransform,
    ValueRange,
    VisualAssetsTransform,
)
from ..structures import ImageSubLetter, Message
from ..text_model import Char

PHONE_TABLE = {
    "A": "2", "B": "22", "C": "222",
    "D": "3", "E": "33", "F": "333",
    "G": "4", "H": "44", "I": "444",
    "J": "5", "K": "55", "L": "555",
    "M": "6", "N": "66", "O": "666",
    "P": "7", "Q": "77", "R": "777", "S": "7777",
    "T": "8", "U": "88", "V": "888",
    "W": "9", "X": "99", "Y": "999", "Z": "9999",
}  # fmt: skip

PHONE = EncoderDef(
    id="phone",
    name="Phone keypad",
    description="Old mobile phone keys",
    requires=Requirement("letters"),
    produces=MessageClass("digits", range=ValueRange(2, 9999)),
    transform=TableTransform(
        level="letter",
        replacements=PHONE_TABLE,
        uppercase=True,
        base_latin_letter=True,
    ),
    spacing="separators",
    category="digits",
)


def encode_mandarin(message: Message, config: EncoderConfig) -> None:
    folder = "simple-mandarin" if config.get("use_simple_variant") else "mandarin"
    for letter, _ in message.iter_letters():
        value = letter.text_value()
        if not value:
            continue
        base = Char(value).base_latin_letter
        if base is None:
            continue
        letter.set_sub_letters([ImageSubLetter(folder, base.lower())])


MANDARIN = EncoderDef(
    id="mandarin",
    name="Mandarin",
    description="Chinese-looking symbols",
    requires=Requirement("letters"),
    produces=MessageClass("visual"),
    transform=FunctionTransform(encode_mandarin),
    spacing="separators",
    category="visual",
)

STARS = EncoderDef(
    id="stars",
    name="Stars",
    requires=Requirement("letters"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(folder="stars"),
    spacing="separators",
    category="visual",
    help_text="Count the points of each star to find the letter. A is a circle.",
)

TEMPLARS = EncoderDef(
    id="templars",
    name="Templars",
    requires=Requirement("letters"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(folder="templars"),
    spacing="separators",
    category="visual",
)

TICTACTOC = EncoderDef(
    id="tictactoc",
    name="TicTacToc",
    requires=Requirement("letters"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(folder="tictactoc"),
    spacing="separators",
    category="visual",
)

GRID26 = EncoderDef(
    id="grid26",
    name="Grid 26",
    description="Grids showing the ranks A=1 to Z=26",
    requires=Requirement("letters"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(
        folder="grid26", level="letter", file_name_transform=("letterToRank",)
    ),
    category="visual",
    is_camouflage=True,
)
