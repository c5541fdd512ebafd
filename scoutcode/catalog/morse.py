"""International morse code for letters and digits."""

from __future__ import annotations

from ..encoders.types import (
    EncoderConfig,
    EncoderDef,
    FunctionTransform,
    MessageClass,
    Requirement,
    SymbolPairTransform,
)
from ..structures import Message
from .common import flag, lookup_key, swap_symbols

MORSE_MAP = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..",
    "E": ".", "F": "..-.", "G": "--.", "H": "....",
    "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.",
    "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--",
    "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.",
}  # fmt: skip


def encode_morse(message: Message, config: EncoderConfig) -> None:
    swap = flag(config, "swap_symbols", False)
    for letter, _ in message.iter_letters():
        code = MORSE_MAP.get(lookup_key(letter) or "")
        if code is None:
            continue
        if swap:
            code = swap_symbols(code, ".", "-")
        letter.set_sub_letters(code)


MORSE_CAMOUFLAGES = (
    EncoderDef(
        id="morse-stylized",
        name="Stylized",
        description="Stylized dots and dashes",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("twoSymbols", symbols=("•", "⸺")),
        transform=SymbolPairTransform({".": "•", "-": "⸺"}),
        is_camouflage=True,
        is_default_camouflage=True,
        cosmetic_only=True,
        category="two-symbols",
        preview=("•", "⸺"),
    ),
    EncoderDef(
        id="morse-seems-binary",
        name="Looks like binary",
        description="0 and 1 instead of dots and dashes",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("twoSymbols", symbols=("0", "1")),
        transform=SymbolPairTransform({".": "0", "-": "1"}),
        is_camouflage=True,
        category="two-symbols",
        preview=("0", "1"),
    ),
    EncoderDef(
        id="morse-ti-ta",
        name="Ti / Ta",
        description="Ti for dots, Ta for dashes",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("symbols"),
        transform=SymbolPairTransform({".": "Ti", "-": "Ta"}),
        is_camouflage=True,
        cosmetic_only=True,
        category="two-symbols",
        preview=("Ti", "Ta"),
        separator_level="letter",
        separator_signs=("/", "//", "///"),
    ),
)

MORSE = EncoderDef(
    id="morse",
    name="Morse",
    requires=Requirement("lettersAndDigits"),
    produces=MessageClass("twoSymbols", symbols=(".", "-")),
    transform=FunctionTransform(encode_morse),
    spacing="separators",
    category="symbols",
    custom_camouflages=MORSE_CAMOUFLAGES,
)
