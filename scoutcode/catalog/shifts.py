"""Alphabet shift ciphers: Caesar, numeric Caesar, Vigenère and the inverted alphabet."""

from __future__ import annotations

import re
from typing import Callable, Optional

from ..encoders.types import (
    EncoderConfig,
    EncoderDef,
    FunctionTransform,
    MessageClass,
    Requirement,
    ValueRange,
)
from ..errors import invalid_config_error
from ..structures import Message, TextSubLetter
from ..text_model import Char
from .common import first_char, flag, is_int
from .presets import caesar_preset, numeric_caesar_preset

NON_ALPHA_PATTERN = re.compile(r"[^A-Z]")


def _shift_resolver(
    encoder_id: str, find_preset: Callable[[str], Optional[object]]
) -> Callable[[EncoderConfig], int]:
    """Read ``shift`` from the config, or the shift of a named ``preset``."""

    def resolve(config: EncoderConfig) -> int:
        shift = config.get("shift")
        if is_int(shift):
            return shift
        preset_id = config.get("preset")
        if shift is None and preset_id is not None:
            preset = find_preset(str(preset_id))
            if preset is None:
                raise invalid_config_error(
                    encoder_id, f"Unknown preset '{preset_id}'.", field="preset"
                )
            return preset.shift
        raise invalid_config_error(
            encoder_id, "Choose a shift (an integer).", field="shift"
        )

    return resolve


resolve_caesar_shift = _shift_resolver("caesar", caesar_preset)
resolve_numeric_shift = _shift_resolver("numeric-caesar", numeric_caesar_preset)


def encode_caesar(message: Message, config: EncoderConfig) -> None:
    shift = resolve_caesar_shift(config)
    for letter, _ in message.iter_letters():
        char = first_char(letter)
        if char is None or not char.is_latin_letter:
            continue
        letter.text_sub_letters()[0].value = char.shifted(shift).value


def encode_numeric_caesar(message: Message, config: EncoderConfig) -> None:
    shift = resolve_numeric_shift(config)
    for letter, _ in message.iter_letters():
        char = first_char(letter)
        if char is None or char.base_latin_letter is None:
            continue
        letter.set_sub_letters(str(char.shifted(shift).alphabet_rank))


def normalize_key(raw_key: object) -> str:
    return NON_ALPHA_PATTERN.sub("", str(raw_key or "").upper())


def validate_vigenere(config: EncoderConfig) -> None:
    if not normalize_key(config.get("key")):
        raise invalid_config_error(
            "vigenere", "Choose a key containing at least one letter.", field="key"
        )


def encode_vigenere(message: Message, config: EncoderConfig) -> None:
    """Shift each letter by the matching key letter.

    The key only advances on letters. A decoding key (the default) shifts
    backwards, so that the key is what a reader applies to decode.
    """

    key = normalize_key(config.get("key"))
    direction = -1 if flag(config, "is_decoding_key", True) else 1
    index = 0
    for letter, _ in message.iter_letters():
        char = first_char(letter)
        if char is None or char.base_latin_letter is None:
            continue
        shift = direction * (ord(key[index % len(key)]) - ord("A"))
        letter.set_sub_letters([TextSubLetter(char.shifted(shift).value)])
        index += 1


def encode_invert(message: Message, config: EncoderConfig) -> None:
    invert_numbers = flag(config, "invert_numbers", True)
    for letter, _ in message.iter_letters():
        char = first_char(letter)
        if char is None:
            continue
        rank = char.alphabet_rank
        if rank is not None:
            inverted = Char.from_alphabet_rank(27 - rank, char.is_uppercase)
            letter.set_sub_letters([TextSubLetter(inverted.value)])
        elif invert_numbers and char.is_digit:
            letter.set_sub_letters([TextSubLetter(str(9 - int(char.value)))])


CAESAR = EncoderDef(
    id="caesar",
    name="Caesar",
    description="Shift letters along the alphabet",
    requires=Requirement("letters"),
    produces=MessageClass("letters"),
    transform=FunctionTransform(encode_caesar),
    validate_config=resolve_caesar_shift,
    spacing="preserve",
    category="shift",
)

NUMERIC_CAESAR = EncoderDef(
    id="numeric-caesar",
    name="Numbers with shift",
    description="Shift letters, then write their rank",
    requires=Requirement("letters"),
    produces=MessageClass("digits", range=ValueRange(1, 26)),
    transform=FunctionTransform(encode_numeric_caesar),
    validate_config=resolve_numeric_shift,
    spacing="separators",
    category="digits",
)

VIGENERE = EncoderDef(
    id="vigenere",
    name="Vigenère",
    description="Shift letters with a key",
    requires=Requirement("letters"),
    produces=MessageClass("letters"),
    transform=FunctionTransform(encode_vigenere),
    validate_config=validate_vigenere,
    spacing="preserve",
    category="shift",
)

INVERT = EncoderDef(
    id="invert",
    name="Inverted alphabet",
    description="A↔Z, B↔Y, ...",
    requires=Requirement("lettersAndDigits"),
    produces=MessageClass("lettersAndDigits"),
    transform=FunctionTransform(encode_invert),
    spacing="preserve",
    category="shift",
)
