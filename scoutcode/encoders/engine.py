"""Execution of declarative encoders against a message."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from ..analysis import MessageAnalysis, analyze_message
from ..errors import (
    incompatible_input_error,
    invalid_config_error,
    missing_symbols_error,
    no_content_error,
)
from ..separators import (
    ContentType,
    as_overrides,
    build_separators,
    spacing_for_type,
)
from ..structures import ImageSubLetter, Message, MessageMetadata, SubLetter, TextSubLetter
from ..text_model import Char
from .types import (
    EncoderConfig,
    EncoderDef,
    FileNameTransform,
    FunctionTransform,
    MessageClass,
    Requirement,
    SymbolPairTransform,
    SymbolReplacement,
    TableTransform,
    VariationLevel,
    VisualAssetsTransform,
    first_candidate,
    resolve_symbol_pair,
)

# A compiled strategy rewrites the message and may report the two symbols
# it wrote, for metadata recording.
CompiledTransform = Callable[[Message, EncoderConfig], Optional[Tuple[str, str]]]

UINT32_MASK = 0xFFFFFFFF
GOLDEN_RATIO_SALT = 0x9E3779B9

EMPTY_CONFIG: Mapping[str, object] = {}


# --- Validation --------------------------------------------------------------


def is_type_compatible(message_type: Optional[str], required_type: str) -> bool:
    """``letters`` and ``digits`` both satisfy a ``lettersAndDigits`` requirement."""

    if message_type == required_type:
        return True
    if required_type == "lettersAndDigits":
        return message_type in ("letters", "digits")
    return False


def source_symbols_for(
    message: Message, config: EncoderConfig
) -> Optional[Tuple[str, str]]:
    """Symbols recorded by the previous encoder, else ``config["source_symbols"]``."""

    symbols = message.metadata.symbols or config.get("source_symbols")
    if not symbols or len(symbols) != 2:
        return None
    return (symbols[0], symbols[1])


def validate_requires(
    definition: EncoderDef,
    message: Message,
    analysis: MessageAnalysis,
    config: EncoderConfig = EMPTY_CONFIG,
) -> None:
    requires: Optional[Requirement] = definition.requires
    if requires is None:
        return

    if not analysis.has_content:
        raise no_content_error(definition.id)

    accepted = requires.accepted_types
    if "twoSymbols" in accepted:
        if source_symbols_for(message, config) is None:
            raise missing_symbols_error(definition.id)
        return

    if not any(is_type_compatible(analysis.content_type, item) for item in accepted):
        raise incompatible_input_error(
            definition.id, definition.name, requires.type, analysis.content_type
        )


# --- Value helpers -------------------------------------------------------------


def normalize_value(
    value: str, uppercase: bool = False, base_latin_letter: bool = False
) -> str:
    """Prepare a lookup key: accent-free base letter first, then uppercase."""

    result = value
    if base_latin_letter and value:
        base = Char(value).base_latin_letter_or_digit
        if base:
            result = base
    if uppercase:
        result = result.upper()
    return result


def apply_file_name_transform(value: str, transform: FileNameTransform) -> Optional[str]:
    if transform == "toLower":
        return value.lower()
    if transform == "toUpper":
        return value.upper()
    if transform == "letterToRank":
        rank = Char(value).alphabet_rank if value else None
        return str(rank) if rank is not None else None
    if transform == "rankToLetter":
        try:
            number = int(value)
        except ValueError:
            return None
        if not 1 <= number <= 26:
            return None
        return chr(ord("a") + number - 1)
    raise ValueError(f"Unknown file name transform '{transform}'.")


def asset_file_name(
    value: str, transforms: Sequence[FileNameTransform]
) -> Optional[str]:
    if not value:
        return None
    result: Optional[str] = Char(value).base_latin_letter_or_digit
    for transform in transforms:
        if result is None:
            return None
        result = apply_file_name_transform(result, transform)
    return result


# --- Symbol-pair variation -----------------------------------------------------


def mix_hash(value: int) -> int:
    """Unsigned 32-bit xor-shift/multiply avalanche."""

    x = value & UINT32_MASK
    x = ((x ^ (x >> 16)) * 0x7FEB352D) & UINT32_MASK
    x = ((x ^ (x >> 15)) * 0x846CA68B) & UINT32_MASK
    return x ^ (x >> 16)


def pick_replacement(replacement: SymbolReplacement, seed: int, salt: int) -> str:
    """Choose one candidate deterministically; a fixed string is returned as is."""

    if isinstance(replacement, str):
        return replacement
    if not replacement:
        return ""
    mixed = (seed ^ (salt * GOLDEN_RATIO_SALT)) & UINT32_MASK
    return replacement[mix_hash(mixed) % len(replacement)]


def compute_seed(
    level: VariationLevel,
    phrase_index: int,
    word_index: int,
    letter_index: int,
    sub_letter_index: int,
) -> int:
    """Position seed; coarser levels give every unit inside them the same seed."""

    if level == "word":
        return phrase_index * 100 + word_index
    if level == "letter":
        return phrase_index * 10000 + word_index * 100 + letter_index
    return (
        phrase_index * 1000000
        + word_index * 10000
        + letter_index * 100
        + sub_letter_index
    )


# --- Strategy compilation ----------------------------------------------------


def _copy_sub_letters(sub_letters: Sequence[SubLetter]) -> List[SubLetter]:
    return [replace(sub) for sub in sub_letters]


def _compile_table(table: TableTransform) -> CompiledTransform:
    def encode(message: Message, config: EncoderConfig) -> None:
        if table.level == "letter":
            for letter, _ in message.iter_letters():
                key = normalize_value(
                    letter.text_value(), table.uppercase, table.base_latin_letter
                )
                replacement = table.replacements.get(key)
                if replacement is None:
                    continue
                if isinstance(replacement, str):
                    letter.set_sub_letters(replacement)
                else:
                    letter.set_sub_letters(_copy_sub_letters(replacement))
            return None

        for letter, _ in message.iter_letters():
            spliced: List[SubLetter] = []
            changed = False
            for sub in letter.sub_letters:
                replacement = None
                if isinstance(sub, TextSubLetter):
                    key = normalize_value(
                        sub.value, table.uppercase, table.base_latin_letter
                    )
                    replacement = table.replacements.get(key)
                if replacement is None:
                    spliced.append(sub)
                elif isinstance(replacement, str):
                    sub.value = replacement
                    spliced.append(sub)
                else:
                    spliced.extend(_copy_sub_letters(replacement))
                    changed = True
            if changed:
                letter.set_sub_letters(spliced)
        return None

    return encode


def _compile_visual(assets: VisualAssetsTransform) -> CompiledTransform:
    def encode(message: Message, config: EncoderConfig) -> None:
        for letter, _ in message.iter_letters():
            if assets.level == "subletter":
                images: List[SubLetter] = []
                for sub in letter.sub_letters:
                    if not isinstance(sub, TextSubLetter):
                        continue
                    name = asset_file_name(sub.value, assets.file_name_transform)
                    if name:
                        images.append(ImageSubLetter(assets.folder, name))
                if images:
                    letter.set_sub_letters(images)
                continue

            name = asset_file_name(letter.text_value(), assets.file_name_transform)
            if name:
                letter.set_sub_letters([ImageSubLetter(assets.folder, name)])
        return None

    return encode


def _compile_symbol_pair(
    definition_id: Optional[str], transform: SymbolPairTransform
) -> CompiledTransform:
    def encode(message: Message, config: EncoderConfig) -> Tuple[str, str]:
        sources = source_symbols_for(message, config)
        if sources is None:
            raise missing_symbols_error(definition_id)
        symbol_map = config.get("resolved_symbol_map") or resolve_symbol_pair(
            transform.pair, sources, definition_id
        )
        if set(symbol_map) != set(sources):
            raise invalid_config_error(
                definition_id,
                f"Symbol map keys [{', '.join(symbol_map)}] do not match the current "
                f"symbols [{', '.join(sources)}].",
                field="resolved_symbol_map",
                expected=list(sources),
                got=list(symbol_map),
            )
        source0, source1 = sources
        replacement0 = symbol_map[source0]
        replacement1 = symbol_map[source1]

        for sub, position in message.iter_sub_letters():
            if not isinstance(sub, TextSubLetter):
                continue
            if sub.value == source0:
                salt, replacement = 0, replacement0
            elif sub.value == source1:
                salt, replacement = 1, replacement1
            else:
                continue
            seed = compute_seed(
                transform.variation_level,
                position.phrase_index,
                position.word_index_in_phrase,
                position.letter_index_in_word,
                position.sub_letter_index_in_letter,
            )
            sub.value = pick_replacement(replacement, seed, salt)

        return (first_candidate(replacement0), first_candidate(replacement1))

    return encode


def _compile_function(function: FunctionTransform) -> CompiledTransform:
    def encode(message: Message, config: EncoderConfig) -> None:
        function.encode(message, config)
        return None

    return encode


def _no_op(message: Message, config: EncoderConfig) -> None:
    return None


def compile_transform(definition: EncoderDef) -> CompiledTransform:
    """Turn the declared strategy into a single ``apply(message, config)``."""

    transform = definition.transform
    if isinstance(transform, FunctionTransform):
        return _compile_function(transform)
    if isinstance(transform, TableTransform):
        return _compile_table(transform)
    if isinstance(transform, VisualAssetsTransform):
        return _compile_visual(transform)
    if isinstance(transform, SymbolPairTransform):
        return _compile_symbol_pair(definition.id, transform)
    return _no_op


# --- Metadata ----------------------------------------------------------------


def refine_produced_type(
    declared: Optional[ContentType], analysis: MessageAnalysis
) -> Optional[ContentType]:
    """``lettersAndDigits`` narrows to ``letters`` when no digit is left."""

    if declared == "lettersAndDigits" and analysis.content_type == "letters":
        return "letters"
    return declared


def build_metadata(
    definition: EncoderDef,
    analysis: MessageAnalysis,
    written_symbols: Optional[Tuple[str, str]] = None,
) -> MessageMetadata:
    """Fresh metadata for the message an encoder just produced."""

    produces: Optional[MessageClass] = definition.produces
    declared = produces.type if produces else None

    symbols = None
    if declared == "twoSymbols":
        symbols = produces.symbols or written_symbols

    has_explicit_separators = (
        definition.separator_signs is not None or definition.separator_level is not None
    )
    spacing = definition.spacing or (
        "separators" if has_explicit_separators else spacing_for_type(declared)
    )
    if analysis.requires_separators and spacing == "preserve":
        spacing = "separators"

    separators = None
    if has_explicit_separators:
        level = definition.separator_level or analysis.auto_level
        separators = as_overrides(build_separators(definition.separator_signs, level))

    return MessageMetadata(
        produced_by=definition.id,
        produced_type=refine_produced_type(declared, analysis),
        symbols=symbols,
        spacing=spacing,
        separators=separators,
        auto_separators=analysis.auto_separators,
    )


# --- Entry points ------------------------------------------------------------


def run_encoder(
    definition: EncoderDef,
    message: Message,
    config: Optional[EncoderConfig] = None,
) -> MessageMetadata:
    """Validate, transform the message in place and replace its metadata.

    Every check happens before the first letter is rewritten, so a raised
    :class:`~scoutcode.errors.EncoderError` leaves the message as it was.
    """

    config = config or EMPTY_CONFIG
    validate_requires(definition, message, analyze_message(message), config)
    if definition.validate_config is not None:
        definition.validate_config(config)

    written_symbols = compile_transform(definition)(message, config)

    metadata = build_metadata(definition, analyze_message(message), written_symbols)
    message.metadata = metadata
    return metadata


def run_preprocess(
    definition: EncoderDef,
    text: str,
    config: Optional[EncoderConfig] = None,
) -> str:
    """Apply a text-level encoder before parsing; other encoders return ``text``."""

    if definition.preprocess is None:
        return text
    config = config or EMPTY_CONFIG
    if definition.validate_config is not None:
        definition.validate_config(config)
    return definition.preprocess(text, config)


CUSTOM_SYMBOL_PAIR_ID = "custom-symbol-pair"


def apply_custom_symbol_pair(
    message: Message,
    symbol0: SymbolReplacement,
    symbol1: SymbolReplacement,
    variation_level: VariationLevel = "subletter",
) -> MessageMetadata:
    """Replace the two current symbols with ad-hoc ones."""

    definition = EncoderDef(
        id=CUSTOM_SYMBOL_PAIR_ID,
        name="Custom symbols",
        requires=Requirement("twoSymbols"),
        produces=MessageClass("twoSymbols"),
        transform=SymbolPairTransform((symbol0, symbol1), variation_level),
        is_primary=False,
        is_camouflage=True,
    )
    return run_encoder(definition, message)
