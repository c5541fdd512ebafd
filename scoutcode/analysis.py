"""Structural and content analysis of a message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .separators import (
    SLASHES_FROM_LETTER,
    SLASHES_FROM_SUB_LETTER,
    SPACED_WITH_SLASHES,
    ContentType,
    SeparatorLevel,
    SeparatorsConfig,
)
from .structures import ImageSubLetter, Message, SubLetter
from .text_model import Char, count_graphemes


@dataclass(frozen=True)
class MessageAnalysis:
    auto_level: SeparatorLevel
    auto_separators: SeparatorsConfig
    requires_separators: bool
    content_type: Optional[ContentType]
    has_content: bool


def sub_letter_length(sub: SubLetter) -> int:
    """Images count as one unit, text as its number of graphemes."""

    if isinstance(sub, ImageSubLetter):
        return 1
    return count_graphemes(sub.value)


def analyze_message(message: Message) -> MessageAnalysis:
    """Classify the current content and pick the finest separator level.

    Raw letters are inspected through :meth:`Letter.peek`, so analysing a
    freshly parsed message does not materialise it.
    """

    max_per_letter = 0
    max_length = 0
    has_letters = has_digits = has_other = False
    has_content = False

    for letter, _ in message.iter_letters():
        has_content = True
        subs = letter.peek()
        max_per_letter = max(max_per_letter, len(subs))

        for sub in subs:
            max_length = max(max_length, sub_letter_length(sub))
            if isinstance(sub, ImageSubLetter):
                has_other = True
                continue
            if not sub.value:
                continue
            char = Char(sub.value)
            if char.base_latin_letter is not None:
                has_letters = True
            elif char.is_digit:
                has_digits = True
            else:
                has_other = True

    if max_length > 1:
        auto_level: SeparatorLevel = "subLetter"
        auto_separators = SLASHES_FROM_SUB_LETTER
    elif max_per_letter > 1:
        auto_level = "letter"
        auto_separators = SLASHES_FROM_LETTER
    else:
        auto_level = "word"
        auto_separators = SPACED_WITH_SLASHES

    content_type: Optional[ContentType] = None
    if has_content:
        if has_other:
            content_type = "symbols"
        elif has_letters and has_digits:
            content_type = "lettersAndDigits"
        elif has_digits:
            content_type = "digits"
        else:
            content_type = "letters"

    return MessageAnalysis(
        auto_level=auto_level,
        auto_separators=auto_separators,
        requires_separators=max_per_letter > 1 or max_length > 1,
        content_type=content_type,
        has_content=has_content,
    )
