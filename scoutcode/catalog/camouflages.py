"""Generic camouflages, offered after any encoder whose output they accept."""

from __future__ import annotations

from ..encoders.types import (
    EncoderConfig,
    EncoderDef,
    FunctionTransform,
    MessageClass,
    Requirement,
    SymbolPairTransform,
    TableTransform,
    ValueRange,
    VisualAssetsTransform,
)
from ..structures import Message, TextSubLetter

# --- Digits ------------------------------------------------------------------

EMOJI_DIGITS = EncoderDef(
    id="emoji-digits",
    name="Enclosed digits",
    description="Digits as keycap emoji",
    requires=Requirement("digits"),
    produces=MessageClass("symbols"),
    transform=TableTransform(
        level="subletter",
        replacements={digit: f"{digit}\ufe0f\u20e3" for digit in "0123456789"},
    ),
    is_primary=False,
    is_camouflage=True,
    cosmetic_only=True,
    category="digits",
    preview="1️⃣2️⃣",
)

CLOCK = EncoderDef(
    id="clock",
    name="Clock",
    description="Digits as clock faces",
    requires=Requirement("digits", range=ValueRange(0, 9)),
    produces=MessageClass("symbols"),
    transform=TableTransform(
        level="subletter",
        replacements={
            "0": "🕛",
            "1": "🕐",
            "2": "🕑",
            "3": "🕒",
            "4": "🕓",
            "5": "🕔",
            "6": "🕕",
            "7": "🕖",
            "8": "🕗",
            "9": "🕘",
        },
    ),
    is_primary=False,
    is_camouflage=True,
    category="digits",
    preview="🕐🕑",
)

ALPHABET_A_J = EncoderDef(
    id="alphabet-A-J",
    name="0-9 as A-J",
    description="Digits 0-9 become letters A-J",
    requires=Requirement("digits", range=ValueRange(0, 9)),
    produces=MessageClass("letters"),
    transform=TableTransform(
        level="subletter",
        replacements={str(digit): chr(ord("A") + digit) for digit in range(10)},
    ),
    is_primary=False,
    is_camouflage=True,
    category="digits",
    preview=("0→A", "9→J"),
)

ROMAN_NUMERALS = (
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
    "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX", "XX",
    "XXI", "XXII", "XXIII", "XXIV", "XXV", "XXVI",
)  # fmt: skip

ROMAN_DIGITS = EncoderDef(
    id="roman-digits",
    name="Roman numerals",
    description="Numbers 1-26 as roman numerals",
    requires=Requirement("digits", range=ValueRange(1, 26)),
    produces=MessageClass("letters"),
    transform=TableTransform(
        level="letter",
        replacements={
            str(number): numeral for number, numeral in enumerate(ROMAN_NUMERALS, start=1)
        },
    ),
    is_primary=False,
    is_camouflage=True,
    cosmetic_only=True,
    category="digits",
    preview="VI",
)

GRID = EncoderDef(
    id="grid",
    name="Grid",
    description="Digits drawn in a grid",
    requires=Requirement("digits"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(folder="grid", level="subletter"),
    is_primary=False,
    is_camouflage=True,
    category="visual",
    preview="⊞",
)

POLYGONS = EncoderDef(
    id="polygons",
    name="Polygons",
    description="Digits drawn as polygons",
    requires=Requirement("digits"),
    produces=MessageClass("visual"),
    transform=VisualAssetsTransform(folder="polygons", level="subletter"),
    is_primary=False,
    is_camouflage=True,
    category="visual",
    preview="△▢",
)

DIGIT_CAMOUFLAGES = (EMOJI_DIGITS, CLOCK, ALPHABET_A_J, ROMAN_DIGITS, GRID, POLYGONS)


# --- Letters -----------------------------------------------------------------


def _recase(upper: bool):
    def encode(message: Message, config: EncoderConfig) -> None:
        for sub, _ in message.iter_sub_letters():
            if isinstance(sub, TextSubLetter):
                sub.value = sub.value.upper() if upper else sub.value.lower()

    return encode


LOWERCASE = EncoderDef(
    id="lowercase",
    name="Lowercase",
    description="All letters in lowercase",
    requires=Requirement(("letters", "lettersAndDigits")),
    produces=MessageClass("letters"),
    transform=FunctionTransform(_recase(upper=False)),
    is_primary=False,
    is_camouflage=True,
    cosmetic_only=True,
    category="letters",
    preview="abc",
)

UPPERCASE = EncoderDef(
    id="uppercase",
    name="Uppercase",
    description="All letters in uppercase",
    requires=Requirement(("letters", "lettersAndDigits")),
    produces=MessageClass("letters"),
    transform=FunctionTransform(_recase(upper=True)),
    is_primary=False,
    is_camouflage=True,
    cosmetic_only=True,
    category="letters",
    preview="ABC",
)

LETTER_CAMOUFLAGES = (LOWERCASE, UPPERCASE)


# --- Two symbols -------------------------------------------------------------


def _two_symbols(
    encoder_id: str,
    name: str,
    description: str,
    pair,
    produces: MessageClass,
    preview,
    variation_level: str = "letter",
) -> EncoderDef:
    return EncoderDef(
        id=encoder_id,
        name=name,
        description=description,
        requires=Requirement("twoSymbols"),
        produces=produces,
        transform=SymbolPairTransform(pair, variation_level),
        is_primary=False,
        is_camouflage=True,
        category="two-symbols",
        preview=preview,
    )


EMPTY_FULL = _two_symbols(
    "empty-full",
    "Empty / Full",
    "Empty and filled squares",
    ("◻", "◼"),
    MessageClass("twoSymbols", symbols=("◻", "◼")),
    ("◻", "◼"),
    variation_level="subletter",
)

HEIGHT = _two_symbols(
    "height",
    "Height",
    "Short and tall bars",
    ("▃", "▇"),
    MessageClass("twoSymbols", symbols=("▃", "▇")),
    ("▃", "▇"),
    variation_level="subletter",
)

MATH = _two_symbols(
    "math",
    "Maths",
    "Operators and digits",
    (("-", "÷", "+", "x"), tuple("1234567890")),
    MessageClass("symbols"),
    ("÷", "3"),
)

SHAPES = _two_symbols(
    "shapes",
    "Round / Angular",
    "Round and angular shapes",
    (("⬤", "⬬", "⬮"), ("⬟", "█", "◼", "▲")),
    MessageClass("symbols"),
    ("⬤", "▲"),
)

ARROWS = _two_symbols(
    "arrows",
    "Horizontal / Vertical",
    "Horizontal and vertical arrows",
    (("←", "→", "↔"), ("↑", "↓", "↕")),
    MessageClass("symbols"),
    ("↔", "↕"),
)

CARDS = _two_symbols(
    "cards",
    "Red / Black",
    "Card suits",
    (("♥️", "♦️"), ("♠️", "♣️")),
    MessageClass("symbols"),
    ("♥️", "♠️"),
)

SUN_MOON = _two_symbols(
    "sun-moon",
    "Day / Night",
    "Day and night symbols",
    (("☀️", "🌞", "🔆"), ("🌙", "🌜", "⭐")),
    MessageClass("symbols"),
    ("☀️", "🌙"),
)

NATURE = _two_symbols(
    "nature",
    "Nature",
    "Plants and bugs",
    (("🌿", "🌲", "🌳", "☘️", "🌱"), ("🐞", "🐜", "🐝", "🐛", "🦋")),
    MessageClass("symbols"),
    ("🌿", "🐞"),
)

MUSIC = _two_symbols(
    "music",
    "Single / Double",
    "Music notes",
    (("♩", "♭"), ("♫", "♬")),
    MessageClass("symbols"),
    ("♩", "♫"),
)

MOOD = _two_symbols(
    "mood",
    "Mood",
    "Happy and sad faces",
    (("😊", "😀", "😃"), ("😢", "😞", "😔")),
    MessageClass("symbols"),
    ("😊", "😢"),
)

VOWELS_CONSONANTS = _two_symbols(
    "vowels-consonants",
    "Vowels / Consonants",
    "Random vowels and consonants",
    (tuple("EAIOUY"), tuple("CBDFGHJKLMNPQRSTVWXZ")),
    MessageClass("letters"),
    ("A", "C"),
)

LOWERCASE_UPPERCASE = _two_symbols(
    "lowercase-uppercase",
    "Lower / Upper",
    "Random lowercase and uppercase letters",
    (tuple("abcdefghijklmnopqrstuvwxyz"), tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")),
    MessageClass("letters"),
    ("a", "C"),
)

EVEN_ODD = _two_symbols(
    "even-odd",
    "Even / Odd",
    "Random even and odd digits",
    (tuple("02468"), tuple("13579")),
    MessageClass("digits"),
    ("4", "1"),
)

TWO_SYMBOLS_CAMOUFLAGES = (
    EMPTY_FULL,
    HEIGHT,
    MATH,
    SHAPES,
    ARROWS,
    CARDS,
    SUN_MOON,
    NATURE,
    MUSIC,
    MOOD,
    VOWELS_CONSONANTS,
    LOWERCASE_UPPERCASE,
    EVEN_ODD,
)

ALL_CAMOUFLAGES = DIGIT_CAMOUFLAGES + LETTER_CAMOUFLAGES + TWO_SYMBOLS_CAMOUFLAGES
