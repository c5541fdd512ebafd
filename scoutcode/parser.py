"""Turn raw text into a :class:`Message` tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from .structures import Letter, Message, Phrase, SeparatorKind, WordToken
from .text_model import Text, expand_ligatures

SegmentKind = Literal["letters", "separator"]


@dataclass
class Segment:
    """A run of letter/digit graphemes or of separator graphemes."""

    kind: SegmentKind
    text: str
    has_sentence_separator: bool = False

    @property
    def separator_kind(self) -> SeparatorKind:
        return "sentence" if self.has_sentence_separator else "word"


def segment_text(text: str) -> List[Segment]:
    """Group consecutive graphemes of the same kind.

    Letters and digits coalesce into ``letters`` segments; everything else
    coalesces into ``separator`` segments, flagged when any grapheme in the
    run ends a sentence.
    """

    segments: List[Segment] = []
    current: Segment | None = None

    for char in Text(text).chars():
        kind: SegmentKind = "letters" if char.is_letter_or_digit else "separator"
        if current is None or current.kind != kind:
            current = Segment(kind=kind, text="")
            segments.append(current)
        current.text += char.value
        if kind == "separator" and char.is_sentence_separator:
            current.has_sentence_separator = True

    return segments


def _build_word(text: str) -> WordToken:
    # Letters stay raw until an encoder touches them.
    return WordToken([Letter(char.value) for char in Text(text).chars()])


def parse_text(raw_text: str) -> Message:
    """Parse text into phrases of word and raw tokens.

    A sentence-level separator closes the current phrase and stays attached
    to it. Rendering the result with ``spacing="preserve"`` gives back the
    input, ligatures aside.
    """

    message = Message()
    phrase = Phrase()

    for segment in segment_text(expand_ligatures(raw_text or "")):
        if segment.kind == "letters":
            phrase.add_word(_build_word(segment.text))
            continue
        phrase.add_raw(segment.text, segment.separator_kind)
        if segment.separator_kind == "sentence":
            message.add_phrase(phrase)
            phrase = Phrase()

    if phrase.tokens:
        message.add_phrase(phrase)
    return message
