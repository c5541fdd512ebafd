"""Helpers shared by the catalog encoders."""

from __future__ import annotations

from typing import Optional

from ..encoders.types import EncoderConfig
from ..structures import Letter
from ..text_model import Char

NUL = "\u0000"


def swap_symbols(text: str, first: str, second: str) -> str:
    return text.replace(first, NUL).replace(second, first).replace(NUL, second)


def first_char(letter: Letter) -> Optional[Char]:
    """The first text sub-letter of ``letter`` as a :class:`Char`."""

    subs = letter.text_sub_letters()
    if not subs or not subs[0].value:
        return None
    return Char(subs[0].value)


def lookup_key(letter: Letter) -> Optional[str]:
    """Upper-case, accent-free letter or digit used by the code tables."""

    char = first_char(letter)
    if char is None:
        return None
    base = char.base_latin_letter_or_digit
    return base.upper() if base else None


def flag(config: EncoderConfig, key: str, default: bool) -> bool:
    value = config.get(key)
    if value is None:
        return default
    return bool(value)


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
