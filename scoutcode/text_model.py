"""Character classification and grapheme-safe text helpers."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, List, Literal, Optional

import regex

CharClass = Literal[
    "letter",
    "digit",
    "letterOrDigit",
    "wordSeparator",
    "sentenceSeparator",
]

GRAPHEME_PATTERN = regex.compile(r"\X")
COMBINING_MARKS_PATTERN = regex.compile("[\u0300-\u036f]")

SENTENCE_SEPARATORS = frozenset({".", ":", "!", "?", ";", "\n", "\r"})

LIGATURES = {
    "œ": "oe",
    "Œ": "OE",
    "æ": "ae",
    "Æ": "AE",
    "ﬁ": "fi",
    "ﬂ": "fl",
}


def remove_accents(text: str) -> str:
    """Strip diacritics using canonical decomposition ("é" -> "e")."""

    return COMBINING_MARKS_PATTERN.sub("", unicodedata.normalize("NFD", text))


def expand_ligatures(text: str) -> str:
    """Expand typographic ligatures (œ -> oe, æ -> ae, ﬁ -> fi, ﬂ -> fl)."""

    return "".join(LIGATURES.get(char, char) for char in text)


def to_graphemes(text: str) -> List[str]:
    """Split text into user-perceived characters.

    Use this instead of iterating over a ``str`` so that emoji sequences and
    combining marks are never split apart.
    """

    if not text:
        return []
    return GRAPHEME_PATTERN.findall(text)


def count_graphemes(text: str) -> int:
    return len(to_graphemes(text))


def _is_ascii_letter(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


@dataclass(frozen=True)
class Char:
    """A single grapheme cluster with latin-alphabet helpers."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Char must be created from a non-empty string.")

    # --- Construction -----------------------------------------------------

    @classmethod
    def from_char(cls, value: str) -> "Char":
        return cls(value)

    @classmethod
    def from_alphabet_rank(cls, rank: int, uppercase: bool = True) -> "Char":
        """Build a char from its rank in the alphabet (1-26)."""

        if isinstance(rank, bool) or not isinstance(rank, int) or not 1 <= rank <= 26:
            raise ValueError(
                f"alphabet rank must be an integer between 1 and 26, got {rank!r}"
            )
        base = ord("A") if uppercase else ord("a")
        return cls(chr(base + rank - 1))

    def __str__(self) -> str:
        return self.value

    # --- Classification ---------------------------------------------------

    @property
    def is_latin_letter(self) -> bool:
        return self.base_latin_letter is not None

    @property
    def is_digit(self) -> bool:
        return len(self.value) == 1 and "0" <= self.value <= "9"

    @property
    def is_letter_or_digit(self) -> bool:
        return self.is_digit or self.is_latin_letter

    @property
    def is_uppercase(self) -> bool:
        return self.value == self.value.upper() and self.value != self.value.lower()

    @property
    def is_lowercase(self) -> bool:
        return self.value == self.value.lower() and self.value != self.value.upper()

    @property
    def is_sentence_separator(self) -> bool:
        return all(char in SENTENCE_SEPARATORS for char in self.value)

    @property
    def is_word_separator(self) -> bool:
        """Anything that is neither a letter, a digit nor a sentence separator."""

        return not self.is_letter_or_digit and not self.is_sentence_separator

    def matches(self, char_class: CharClass) -> bool:
        if char_class == "letter":
            return self.is_latin_letter
        if char_class == "digit":
            return self.is_digit
        if char_class == "letterOrDigit":
            return self.is_letter_or_digit
        if char_class == "wordSeparator":
            return self.is_word_separator
        if char_class == "sentenceSeparator":
            return self.is_sentence_separator
        raise ValueError(f"Unknown character class '{char_class}'.")

    # --- Accents & normalisation -----------------------------------------

    @property
    def is_accented(self) -> bool:
        decomposed = unicodedata.normalize("NFD", self.value)
        return COMBINING_MARKS_PATTERN.search(decomposed) is not None

    @property
    def base_latin_letter(self) -> Optional[str]:
        """Accent-free latin letter keeping the original case, or ``None``.

        "é" -> "e", "É" -> "E", "ç" -> "c", "5" -> None.
        """

        stripped = remove_accents(self.value)
        if not stripped:
            return None
        first = stripped[0]
        if not _is_ascii_letter(first):
            return None
        return first.upper() if self.is_uppercase else first.lower()

    @property
    def base_latin_letter_or_digit(self) -> Optional[str]:
        """Lookup key for encoders that accept letters and digits."""

        if self.is_digit:
            return self.value
        return self.base_latin_letter

    @property
    def normalized_upper(self) -> "Char":
        return Char(remove_accents(self.value).upper())

    @property
    def normalized_lower(self) -> "Char":
        return Char(remove_accents(self.value).lower())

    @property
    def upper(self) -> "Char":
        return Char(self.value.upper())

    @property
    def lower(self) -> "Char":
        return Char(self.value.lower())

    # --- Alphabet arithmetic ---------------------------------------------

    @property
    def alphabet_rank(self) -> Optional[int]:
        """Rank 1-26 of the accent-free letter ("é" -> 5, "B" -> 2)."""

        base = self.base_latin_letter
        if base is None:
            return None
        return ord(base.upper()) - ord("A") + 1

    def shifted(self, shift: int) -> "Char":
        """Circular shift within the alphabet, keeping case.

        Non-letters are returned unchanged, and so is every char when the
        shift reduces to zero.
        """

        rank = self.alphabet_rank
        if rank is None:
            return self
        offset = shift % 26
        if offset == 0:
            return self
        new_rank = (rank - 1 + offset) % 26 + 1
        return Char.from_alphabet_rank(new_rank, self.is_uppercase)


class Text:
    """Raw text exposed as a sequence of :class:`Char` graphemes."""

    def __init__(self, raw: Optional[str]) -> None:
        self.raw = raw or ""

    @cached_property
    def _graphemes(self) -> List[str]:
        return to_graphemes(self.raw)

    @property
    def is_blank(self) -> bool:
        return not self.raw.strip()

    def chars(self) -> Iterator[Char]:
        for grapheme in self._graphemes:
            yield Char(grapheme)

    def char_at(self, index: int) -> Optional[Char]:
        if 0 <= index < len(self._graphemes):
            return Char(self._graphemes[index])
        return None

    def __len__(self) -> int:
        return len(self._graphemes)
