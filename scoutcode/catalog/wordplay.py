"""Encoders that move or add letters instead of replacing them."""

from __future__ import annotations

import random
import string
from typing import List, Optional

from ..encoders.types import (
    EncoderConfig,
    EncoderDef,
    FunctionTransform,
    MessageClass,
    Requirement,
)
from ..errors import invalid_config_error
from ..structures import Letter, Message
from ..text_model import Char, to_graphemes
from .common import flag, is_int

# --- Reverse -----------------------------------------------------------------


def reverse_preserving_case(text: str) -> str:
    """Reverse the letters and digits only, keeping punctuation and case positions.

    ``"Hello, World"`` becomes ``"Dlrow, Olleh"``.
    """

    graphemes = to_graphemes(text)
    chars = [Char(grapheme) for grapheme in graphemes]
    reversed_values = [char.value.lower() for char in chars if char.is_letter_or_digit]
    reversed_values.reverse()

    result: List[str] = []
    index = 0
    for char in chars:
        if not char.is_letter_or_digit:
            result.append(char.value)
            continue
        value = reversed_values[index]
        result.append(value.upper() if char.is_uppercase else value)
        index += 1
    return "".join(result)


def reverse_simple(text: str) -> str:
    return "".join(reversed(to_graphemes(text)))


def preprocess_reverse(text: str, config: EncoderConfig) -> str:
    if flag(config, "preserve_case", True):
        return reverse_preserving_case(text)
    return reverse_simple(text)


REVERSE = EncoderDef(
    id="reverse",
    name="Reversed text",
    description="Last letter first",
    requires=Requirement("lettersAndDigits"),
    produces=MessageClass("lettersAndDigits"),
    preprocess=preprocess_reverse,
    spacing="preserve",
    category="misc",
)


# --- Intercalated ------------------------------------------------------------

DEFAULT_PATTERN = "X"


def validate_intercalated(config: EncoderConfig) -> None:
    count = config.get("random_count")
    if count is not None and (not is_int(count) or count < 1):
        raise invalid_config_error(
            "intercalated",
            "The number of parasite letters must be a positive integer.",
            field="random_count",
        )
    pattern = config.get("pattern")
    if pattern is not None and (not isinstance(pattern, str) or not pattern):
        raise invalid_config_error(
            "intercalated",
            "The parasite pattern cannot be empty.",
            field="pattern",
        )


def _parasites(
    current: Char,
    following: Optional[Char],
    rng: random.Random,
    use_random_letters: bool,
    random_count: int,
    pattern: str,
) -> str:
    upper_context = current.is_uppercase and following is not None and following.is_uppercase
    if use_random_letters:
        if current.is_digit and following is not None and following.is_digit:
            return "".join(rng.choice(string.digits) for _ in range(random_count))
        letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(random_count))
        return letters if upper_context else letters.lower()

    if current.is_latin_letter and following is not None and following.is_latin_letter:
        return pattern.upper() if upper_context else pattern.lower()
    return pattern


def encode_intercalated(message: Message, config: EncoderConfig) -> None:
    """Slip parasite letters (or digits, between digits) inside every word.

    ``seed`` makes the random parasites reproducible.
    """

    use_random_letters = flag(config, "use_random_letters", True)
    random_count = config.get("random_count") or 1
    pattern = config.get("pattern") or DEFAULT_PATTERN
    rng = random.Random(config.get("seed"))

    for word, _ in message.iter_words():
        if len(word.letters) <= 1:
            continue
        letters: List[Letter] = []
        for index, letter in enumerate(word.letters):
            letters.append(letter)
            current_raw = letter.raw_char()
            if index == len(word.letters) - 1 or not current_raw:
                continue
            following_raw = word.letters[index + 1].raw_char()
            parasites = _parasites(
                Char(current_raw),
                Char(following_raw) if following_raw else None,
                rng,
                use_random_letters,
                random_count,
                pattern,
            )
            letters.extend(Letter(grapheme) for grapheme in to_graphemes(parasites))
        word.letters = letters


INTERCALATED = EncoderDef(
    id="intercalated",
    name="Parasite letters",
    requires=Requirement("lettersAndDigits"),
    produces=MessageClass("lettersAndDigits"),
    transform=FunctionTransform(encode_intercalated),
    validate_config=validate_intercalated,
    spacing="preserve",
    category="misc",
)
