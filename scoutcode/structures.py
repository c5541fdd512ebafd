"""Message tree for the scoutcode engine.

A parsed message is a tree ``Message -> Phrase -> (WordToken | RawToken) ->
Letter -> SubLetter``. Encoders rewrite letters in place and replace the
message metadata after every step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    ClassVar,
    Iterator,
    List,
    Literal,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .separators import ContentType, SeparatorOverrides, SeparatorsConfig, Spacing
from .text_model import to_graphemes

SeparatorKind = Literal["sentence", "word"]


@dataclass
class TextSubLetter:
    """A literal render unit."""

    kind: ClassVar[str] = "text"
    value: str


@dataclass
class ImageSubLetter:
    """A reference to an image asset (``folder/name``)."""

    kind: ClassVar[str] = "image"
    folder: str
    name: str


SubLetter = Union[TextSubLetter, ImageSubLetter]


@dataclass(frozen=True)
class RawContent:
    """An untouched grapheme, kept as a plain string."""

    char: str


@dataclass(frozen=True)
class Materialized:
    """Explicit sub-letters owned by a letter."""

    sub_letters: List[SubLetter]


LetterContent = Union[RawContent, Materialized]


class Letter:
    """One logical letter of a word.

    The content is either :class:`RawContent` or :class:`Materialized`, never
    both. Reading :attr:`sub_letters` materialises raw content; :meth:`peek`
    and :meth:`raw_char` read it without doing so.
    """

    def __init__(self, init: Union[str, Sequence[SubLetter], None] = None) -> None:
        self._content: LetterContent
        if isinstance(init, str):
            self._content = RawContent(init)
        else:
            self._content = Materialized(list(init or []))

    def __repr__(self) -> str:
        if isinstance(self._content, RawContent):
            return f"Letter({self._content.char!r})"
        return f"Letter({self._content.sub_letters!r})"

    @property
    def content(self) -> LetterContent:
        return self._content

    @property
    def is_materialized(self) -> bool:
        return isinstance(self._content, Materialized)

    @property
    def sub_letters(self) -> List[SubLetter]:
        if isinstance(self._content, RawContent):
            char = self._content.char
            self._content = Materialized([TextSubLetter(char)] if char else [])
        return self._content.sub_letters

    def peek(self) -> Tuple[SubLetter, ...]:
        """Read-only view of the sub-letters that leaves raw content alone."""

        if isinstance(self._content, RawContent):
            if not self._content.char:
                return ()
            return (TextSubLetter(self._content.char),)
        return tuple(self._content.sub_letters)

    def raw_char(self) -> Optional[str]:
        """The single grapheme held by this letter, if it is just one."""

        if isinstance(self._content, RawContent):
            return self._content.char
        subs = self._content.sub_letters
        if len(subs) == 1 and isinstance(subs[0], TextSubLetter):
            return subs[0].value
        return None

    def text_value(self) -> str:
        return "".join(
            sub.value for sub in self.peek() if isinstance(sub, TextSubLetter)
        )

    def text_sub_letters(self) -> List[TextSubLetter]:
        return [sub for sub in self.sub_letters if isinstance(sub, TextSubLetter)]

    def image_sub_letters(self) -> List[ImageSubLetter]:
        return [sub for sub in self.sub_letters if isinstance(sub, ImageSubLetter)]

    def add_sub_letter(self, sub: SubLetter) -> None:
        self.sub_letters.append(sub)

    def set_sub_letters(self, value: Union[str, Sequence[SubLetter]]) -> None:
        """Replace the content; a string becomes one text sub-letter per grapheme."""

        if isinstance(value, str):
            self._content = Materialized(
                [TextSubLetter(grapheme) for grapheme in to_graphemes(value)]
            )
        else:
            self._content = Materialized(list(value))


@dataclass
class RawToken:
    """Punctuation or whitespace captured verbatim from the input."""

    kind: ClassVar[str] = "raw"
    text: str
    separator_kind: SeparatorKind = "word"


@dataclass
class WordToken:
    """A maximal run of letters and digits."""

    kind: ClassVar[str] = "word"
    letters: List[Letter] = field(default_factory=list)

    def add_letter(self, letter: Letter) -> None:
        self.letters.append(letter)


Token = Union[WordToken, RawToken]


@dataclass
class Phrase:
    """Tokens up to and including a sentence-level separator."""

    tokens: List[Token] = field(default_factory=list)

    def words(self) -> List[WordToken]:
        return [token for token in self.tokens if isinstance(token, WordToken)]

    def raw_tokens(self) -> List[RawToken]:
        return [token for token in self.tokens if isinstance(token, RawToken)]

    def add_word(self, word: WordToken) -> None:
        self.tokens.append(word)

    def add_raw(self, text: str, separator_kind: SeparatorKind = "word") -> None:
        self.tokens.append(RawToken(text, separator_kind))


class PhrasePosition(NamedTuple):
    phrase_index: int


class WordPosition(NamedTuple):
    phrase_index: int
    word_index_in_phrase: int
    word_index_in_message: int


class LetterPosition(NamedTuple):
    phrase_index: int
    word_index_in_phrase: int
    word_index_in_message: int
    letter_index_in_word: int
    letter_index_in_message: int


class SubLetterPosition(NamedTuple):
    phrase_index: int
    word_index_in_phrase: int
    word_index_in_message: int
    letter_index_in_word: int
    letter_index_in_message: int
    sub_letter_index_in_letter: int
    sub_letter_index_in_message: int


@dataclass(frozen=True)
class MessageMetadata:
    """What the last encoder left behind, for chaining and rendering.

    Each encoder step builds a new value; fields are never patched.
    """

    produced_by: Optional[str] = None
    produced_type: Optional[ContentType] = None
    symbols: Optional[Tuple[str, str]] = None
    spacing: Optional[Spacing] = None
    separators: Optional[SeparatorOverrides] = None
    auto_separators: Optional[SeparatorsConfig] = None


@dataclass
class Message:
    phrases: List[Phrase] = field(default_factory=list)
    metadata: MessageMetadata = field(default_factory=MessageMetadata)

    def add_phrase(self, phrase: Phrase) -> None:
        self.phrases.append(phrase)

    def iter_phrases(self) -> Iterator[Tuple[Phrase, PhrasePosition]]:
        for phrase_index, phrase in enumerate(self.phrases):
            yield phrase, PhrasePosition(phrase_index)

    def iter_words(self) -> Iterator[Tuple[WordToken, WordPosition]]:
        word_index_in_message = 0
        for phrase, (phrase_index,) in self.iter_phrases():
            for word_index_in_phrase, word in enumerate(phrase.words()):
                yield word, WordPosition(
                    phrase_index, word_index_in_phrase, word_index_in_message
                )
                word_index_in_message += 1

    def iter_letters(self) -> Iterator[Tuple[Letter, LetterPosition]]:
        letter_index_in_message = 0
        for word, position in self.iter_words():
            for letter_index_in_word, letter in enumerate(word.letters):
                yield letter, LetterPosition(
                    *position, letter_index_in_word, letter_index_in_message
                )
                letter_index_in_message += 1

    def iter_sub_letters(self) -> Iterator[Tuple[SubLetter, SubLetterPosition]]:
        """Walk every sub-letter; this materialises every letter visited."""

        sub_letter_index_in_message = 0
        for letter, position in self.iter_letters():
            for sub_letter_index_in_letter, sub in enumerate(letter.sub_letters):
                yield sub, SubLetterPosition(
                    *position, sub_letter_index_in_letter, sub_letter_index_in_message
                )
                sub_letter_index_in_message += 1

    @property
    def word_count(self) -> int:
        return sum(1 for _ in self.iter_words())

    @property
    def letter_count(self) -> int:
        return sum(1 for _ in self.iter_letters())

    @property
    def sub_letter_count(self) -> int:
        return sum(len(letter.peek()) for letter, _ in self.iter_letters())
