"""Separator sets and spacing defaults used when rendering encoded messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Sequence

ContentType = Literal[
    "letters",
    "digits",
    "lettersAndDigits",
    "twoSymbols",
    "symbols",
    "visual",
]
Spacing = Literal["preserve", "separators"]
SeparatorLevel = Literal["subLetter", "letter", "word"]

SEPARATOR_LEVELS: tuple[SeparatorLevel, ...] = ("subLetter", "letter", "word")

# Non-breaking space keeps a sign glued to the unit it follows.
NBSP = "\u00a0"

DEFAULT_SIGNS: tuple[str, ...] = ("/", "//", "///")


@dataclass(frozen=True)
class SeparatorsConfig:
    """A complete set of separators, one per structural level."""

    sub_letter: str
    letter: str
    word: str
    phrase: str


@dataclass(frozen=True)
class SeparatorOverrides:
    """Partial separators; ``None`` means "defer to the next layer"."""

    sub_letter: Optional[str] = None
    letter: Optional[str] = None
    word: Optional[str] = None
    phrase: Optional[str] = None


def format_sign(sign: str) -> str:
    """Return ``NBSP + sign + " "``; blank signs are kept verbatim."""

    if not sign.strip():
        return sign
    return f"{NBSP}{sign} "


def format_phrase_sign(sign: str) -> str:
    """Return ``NBSP + sign + "\\n"``; blank signs are kept verbatim."""

    if not sign.strip():
        return sign
    return f"{NBSP}{sign}\n"


def build_separators(
    signs: Optional[Sequence[str]] = None,
    level: SeparatorLevel = "letter",
) -> SeparatorsConfig:
    """Assign signs to levels, starting at ``level``.

    Levels below the starting level stay empty. Each level from the starting
    one upward consumes the next sign. The phrase level takes the sign after
    the last one consumed, or the last sign plus ``/`` when the list runs out.

    With the default signs and ``level="letter"``::

        sub_letter ""   letter "⍽/ "   word "⍽// "   phrase "⍽///\\n"
    """

    chosen = list(signs) if signs else list(DEFAULT_SIGNS)
    if level not in SEPARATOR_LEVELS:
        raise ValueError(f"Unknown separator level '{level}'.")

    start = SEPARATOR_LEVELS.index(level)
    values = {name: "" for name in SEPARATOR_LEVELS}
    sign_index = 0
    for index, name in enumerate(SEPARATOR_LEVELS):
        if index >= start and sign_index < len(chosen):
            values[name] = format_sign(chosen[sign_index])
            sign_index += 1

    if sign_index < len(chosen):
        phrase_sign = chosen[sign_index]
    else:
        phrase_sign = chosen[-1] + "/"

    return SeparatorsConfig(
        sub_letter=values["subLetter"],
        letter=values["letter"],
        word=values["word"],
        phrase=format_phrase_sign(phrase_sign),
    )


SLASHES_FROM_SUB_LETTER = build_separators(DEFAULT_SIGNS, "subLetter")
SLASHES_FROM_LETTER = build_separators(DEFAULT_SIGNS, "letter")
SLASHES_FROM_WORD = build_separators(DEFAULT_SIGNS, "word")
SPACED_WITH_SLASHES = SeparatorsConfig(
    sub_letter="",
    letter=" ",
    word=f"{NBSP}/ ",
    phrase=f"{NBSP}//\n",
)
COMPACT = SeparatorsConfig(sub_letter="", letter="", word=" ", phrase="\n")

SEPARATOR_PRESETS: Dict[str, SeparatorsConfig] = {
    "slashes_from_sub_letter": SLASHES_FROM_SUB_LETTER,
    "slashes_from_letter": SLASHES_FROM_LETTER,
    "slashes_from_word": SLASHES_FROM_WORD,
    "spaced_with_slashes": SPACED_WITH_SLASHES,
    "compact": COMPACT,
}

DEFAULT_SPACING: Dict[str, Spacing] = {
    "letters": "preserve",
    "digits": "separators",
    "lettersAndDigits": "preserve",
    "twoSymbols": "separators",
    "symbols": "separators",
    "visual": "separators",
}
FALLBACK_SPACING: Spacing = "separators"

DEFAULT_SEPARATORS: Dict[str, SeparatorsConfig] = {
    "visual": SLASHES_FROM_WORD,
    "symbols": SPACED_WITH_SLASHES,
    "digits": SPACED_WITH_SLASHES,
    "letters": SPACED_WITH_SLASHES,
    "lettersAndDigits": SPACED_WITH_SLASHES,
    "twoSymbols": SPACED_WITH_SLASHES,
}
FALLBACK_SEPARATORS = SLASHES_FROM_LETTER


def spacing_for_type(content_type: Optional[str]) -> Spacing:
    if content_type is None:
        return FALLBACK_SPACING
    return DEFAULT_SPACING.get(content_type, FALLBACK_SPACING)


def separators_for_type(content_type: Optional[str]) -> SeparatorsConfig:
    """Legacy defaults for messages that carry no computed separators."""

    if content_type is None:
        return FALLBACK_SEPARATORS
    return DEFAULT_SEPARATORS.get(content_type, FALLBACK_SEPARATORS)


def layer_separators(
    base: SeparatorsConfig,
    *overrides: Optional[SeparatorOverrides],
) -> SeparatorsConfig:
    """Resolve each level from the first override that sets it, else ``base``.

    Overrides are given highest priority first.
    """

    resolved = {}
    for name in ("sub_letter", "letter", "word", "phrase"):
        value = getattr(base, name)
        for layer in overrides:
            if layer is None:
                continue
            candidate = getattr(layer, name)
            if candidate is not None:
                value = candidate
                break
        resolved[name] = value
    return SeparatorsConfig(**resolved)


def resolve_separators(
    explicit: Optional[SeparatorOverrides] = None,
    content_type: Optional[str] = None,
) -> SeparatorsConfig:
    return layer_separators(separators_for_type(content_type), explicit)


def as_overrides(config: SeparatorsConfig) -> SeparatorOverrides:
    return SeparatorOverrides(
        sub_letter=config.sub_letter,
        letter=config.letter,
        word=config.word,
        phrase=config.phrase,
    )
