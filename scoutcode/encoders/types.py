"""Declarative encoder definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from ..errors import invalid_config_error
from ..separators import ContentType, SeparatorLevel, Spacing
from ..structures import Message, SubLetter

EncoderConfig = Mapping[str, Any]
TransformLevel = Literal["letter", "subletter"]
VariationLevel = Literal["subletter", "letter", "word"]
FileNameTransform = Literal["toLower", "toUpper", "letterToRank", "rankToLetter"]

SymbolReplacement = Union[str, Sequence[str]]
SymbolPairInput = Union[
    Tuple[SymbolReplacement, SymbolReplacement],
    Mapping[str, SymbolReplacement],
]
SymbolPairResolved = Dict[str, SymbolReplacement]


@dataclass(frozen=True)
class ValueRange:
    min: int
    max: int

    def contains(self, other: "ValueRange") -> bool:
        return self.min <= other.min and other.max <= self.max


@dataclass(frozen=True)
class MessageClass:
    """What an encoder produces."""

    type: ContentType
    range: Optional[ValueRange] = None
    symbols: Optional[Tuple[str, str]] = None


@dataclass(frozen=True)
class Requirement:
    """What an encoder accepts; ``type`` may list several content types."""

    type: Union[ContentType, Tuple[ContentType, ...]]
    range: Optional[ValueRange] = None

    @property
    def accepted_types(self) -> Tuple[ContentType, ...]:
        if isinstance(self.type, str):
            return (self.type,)
        return tuple(self.type)


# --- Transformation strategies ---------------------------------------------


@dataclass(frozen=True)
class FunctionTransform:
    """Free function rewriting the message in place."""

    encode: Callable[[Message, EncoderConfig], None]


@dataclass(frozen=True)
class TableTransform:
    """Lookup table applied per letter or per sub-letter.

    Letter-level lookups use the concatenated text of the letter. A string
    replacement becomes one sub-letter per grapheme; a sequence of sub-letters
    is used as is. Sub-letter-level lookups key on each text sub-letter: a
    string replaces its value, a sequence is spliced in its place.
    """

    level: TransformLevel
    replacements: Mapping[str, Union[str, Sequence[SubLetter]]]
    uppercase: bool = False
    base_latin_letter: bool = False


@dataclass(frozen=True)
class VisualAssetsTransform:
    """Replace letters (or each sub-letter) by an image from ``folder``."""

    folder: str
    level: TransformLevel = "letter"
    file_name_transform: Tuple[FileNameTransform, ...] = ("toLower",)


@dataclass(frozen=True)
class SymbolPairTransform:
    """Swap the two symbols recorded by the previous encoder."""

    pair: SymbolPairInput
    variation_level: VariationLevel = "subletter"


Transform = Union[
    FunctionTransform,
    TableTransform,
    VisualAssetsTransform,
    SymbolPairTransform,
]


@dataclass(frozen=True)
class EncoderDef:
    """A cipher or camouflage, described as data.

    At most one of ``transform`` and ``preprocess`` is set. Without either the
    encoder only rewrites the metadata. ``validate_config`` runs before the
    message is touched and raises ``INVALID_CONFIG`` errors.
    """

    id: str
    name: str
    description: str = ""
    requires: Optional[Requirement] = None
    produces: Optional[MessageClass] = None
    transform: Optional[Transform] = None
    preprocess: Optional[Callable[[str, EncoderConfig], str]] = None
    validate_config: Optional[Callable[[EncoderConfig], object]] = None

    spacing: Optional[Spacing] = None
    separator_signs: Optional[Tuple[str, ...]] = None
    separator_level: Optional[SeparatorLevel] = None

    category: Optional[str] = None
    cosmetic_only: bool = False
    is_primary: bool = True
    is_camouflage: bool = False
    preview: Union[str, Tuple[str, str], None] = None
    help_text: Optional[str] = None

    custom_camouflages: Tuple["EncoderDef", ...] = field(default_factory=tuple)
    is_default_camouflage: bool = False

    def __post_init__(self) -> None:
        if self.transform is not None and self.preprocess is not None:
            raise ValueError(
                f"Encoder '{self.id}' declares both a transform and a preprocess."
            )

    @property
    def has_preprocess(self) -> bool:
        return self.preprocess is not None


def resolve_symbol_pair(
    pair: SymbolPairInput,
    source_symbols: Sequence[str],
    encoder_id: Optional[str] = None,
) -> SymbolPairResolved:
    """Key a symbol pair by the two source symbols.

    A positional pair maps its first entry to the first recorded symbol. A
    mapping must be keyed by exactly the two source symbols.
    """

    if isinstance(pair, Mapping):
        keys = list(pair.keys())
        if set(keys) != set(source_symbols):
            raise invalid_config_error(
                encoder_id,
                f"Symbol pair keys [{', '.join(keys)}] do not match the source "
                f"symbols [{', '.join(source_symbols)}].",
                field="symbol_pair",
                expected=list(source_symbols),
                got=keys,
            )
        return dict(pair)

    if len(pair) != 2:
        raise invalid_config_error(
            encoder_id,
            "A positional symbol pair needs exactly two replacements.",
            field="symbol_pair",
        )
    first, second = source_symbols
    return {first: pair[0], second: pair[1]}


def first_candidate(replacement: SymbolReplacement) -> str:
    if isinstance(replacement, str):
        return replacement
    return replacement[0] if replacement else ""


def check_requires(
    requires: Optional[Requirement], produces: Optional[MessageClass]
) -> bool:
    """Whether an encoder's declared output satisfies another's requirement.

    This is the static check used to list camouflages: exact type membership
    plus range containment when both sides declare one.
    """

    if requires is None:
        return True
    if produces is None:
        return False
    if produces.type not in requires.accepted_types:
        return False
    if requires.range is not None and produces.range is not None:
        return requires.range.contains(produces.range)
    return True
