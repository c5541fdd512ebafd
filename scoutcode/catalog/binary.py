"""Binary code: A=1, B=10, ..., Z=11010."""

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

BINARY_MAP = {chr(ord("A") + index): format(index + 1, "b") for index in range(26)}


def encode_binary(message: Message, config: EncoderConfig) -> None:
    swap = flag(config, "swap_symbols", False)
    for letter, _ in message.iter_letters():
        code = BINARY_MAP.get(lookup_key(letter) or "")
        if code is None:
            continue
        if swap:
            code = swap_symbols(code, "0", "1")
        letter.set_sub_letters(code)


BINARY_CAMOUFLAGES = (
    EncoderDef(
        id="binary-enclosed",
        name="Enclosed",
        description="Enclosed digits",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("symbols"),
        transform=SymbolPairTransform({"0": "0️⃣", "1": "1️⃣"}),
        is_camouflage=True,
        cosmetic_only=True,
        category="two-symbols",
        preview=("0️⃣", "1️⃣"),
    ),
    EncoderDef(
        id="binary-seems-morse",
        name="Looks like morse",
        description="Dots and dashes instead of 0 and 1",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("twoSymbols", symbols=(".", "-")),
        transform=SymbolPairTransform({"0": ".", "1": "-"}),
        is_camouflage=True,
        category="two-symbols",
        preview=(".", "-"),
    ),
)

BINARY = EncoderDef(
    id="binary",
    name="Binary",
    requires=Requirement("letters"),
    produces=MessageClass("twoSymbols", symbols=("0", "1")),
    transform=FunctionTransform(encode_binary),
    category="digits",
    custom_camouflages=BINARY_CAMOUFLAGES,
)
