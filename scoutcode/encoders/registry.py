"""Encoder lookup and camouflage compatibility queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..catalog.definitions import ALL_DEFINITIONS
from ..errors import EncoderError, encoder_not_found_error
from ..structures import Message, MessageMetadata
from .engine import run_encoder
from .types import (
    EncoderConfig,
    EncoderDef,
    MessageClass,
    SymbolPairResolved,
    SymbolPairTransform,
    check_requires,
    resolve_symbol_pair,
)


@dataclass(frozen=True)
class CamouflageOption:
    """A camouflage that can follow the current step.

    ``resolved_symbol_map`` holds the symbol pair keyed by the source symbols
    it will replace, for two-symbol camouflages.
    """

    definition: EncoderDef
    resolved_symbol_map: Optional[SymbolPairResolved] = None
    is_custom: bool = False

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    def config(self, base: Optional[EncoderConfig] = None) -> Dict[str, object]:
        merged: Dict[str, object] = dict(base or {})
        if self.resolved_symbol_map is not None:
            merged["resolved_symbol_map"] = self.resolved_symbol_map
        return merged


class EncoderRegistry:
    """Explicit encoder registry, built once and passed to whoever needs it."""

    def __init__(self, definitions: Iterable[EncoderDef] = ()) -> None:
        self._top_level: Dict[str, EncoderDef] = {}
        self._all: Dict[str, EncoderDef] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: EncoderDef) -> None:
        """Add a definition and its custom camouflages; ids must be unique."""

        for candidate in (definition, *definition.custom_camouflages):
            if candidate.id in self._all:
                raise ValueError(f"Encoder id '{candidate.id}' is already registered.")
        self._top_level[definition.id] = definition
        self._all[definition.id] = definition
        for camouflage in definition.custom_camouflages:
            self._all[camouflage.id] = camouflage

    def __contains__(self, encoder_id: object) -> bool:
        return encoder_id in self._all

    def __len__(self) -> int:
        return len(self._top_level)

    def find(self, encoder_id: str) -> Optional[EncoderDef]:
        return self._all.get(encoder_id)

    def get(self, encoder_id: str) -> EncoderDef:
        definition = self.find(encoder_id)
        if definition is None:
            raise encoder_not_found_error(encoder_id)
        return definition

    def ids(self) -> List[str]:
        return list(self._top_level)

    def definitions(self) -> List[EncoderDef]:
        return list(self._top_level.values())

    def camouflages(self) -> List[EncoderDef]:
        return [item for item in self._top_level.values() if item.is_camouflage]

    def run(
        self,
        encoder: Union[EncoderDef, str],
        message: Message,
        config: Optional[EncoderConfig] = None,
    ) -> MessageMetadata:
        definition = self.get(encoder) if isinstance(encoder, str) else encoder
        return run_encoder(definition, message, config)

    # --- compatibility --------------------------------------------------

    def _options(
        self,
        source: Optional[EncoderDef],
        produces: Optional[MessageClass],
        source_symbols: Optional[Sequence[str]],
    ) -> List[CamouflageOption]:
        options: List[CamouflageOption] = []
        if source is not None:
            for camouflage in source.custom_camouflages:
                option = _make_option(camouflage, source_symbols, is_custom=True)
                if option is not None:
                    options.append(option)
        for camouflage in self.camouflages():
            if not check_requires(camouflage.requires, produces):
                continue
            option = _make_option(camouflage, source_symbols)
            if option is not None:
                options.append(option)
        return options

    def compatible_camouflages(self, message: Message) -> List[CamouflageOption]:
        """Camouflages that accept what the message currently holds.

        The producing encoder's own camouflages come first, then the generic
        ones whose requirement matches the refined produced type and the
        producer's declared range.
        """

        metadata = message.metadata
        source = self.find(metadata.produced_by) if metadata.produced_by else None
        declared = source.produces if source is not None else None
        if metadata.produced_type is not None:
            produces: Optional[MessageClass] = MessageClass(
                type=metadata.produced_type,
                range=declared.range if declared is not None else None,
            )
        else:
            produces = declared
        return self._options(source, produces, metadata.symbols)

    def compatible_camouflages_for_encoder(self, encoder_id: str) -> List[CamouflageOption]:
        """Camouflages that can follow ``encoder_id``, from its declared output."""

        source = self.get(encoder_id)
        symbols = source.produces.symbols if source.produces is not None else None
        return self._options(source, source.produces, symbols)

    def default_camouflage(self, message: Message) -> Optional[CamouflageOption]:
        produced_by = message.metadata.produced_by
        source = self.find(produced_by) if produced_by else None
        if source is None:
            return None
        for camouflage in source.custom_camouflages:
            if camouflage.is_default_camouflage:
                return _make_option(camouflage, message.metadata.symbols, is_custom=True)
        return None


def _make_option(
    definition: EncoderDef,
    source_symbols: Optional[Sequence[str]],
    is_custom: bool = False,
) -> Optional[CamouflageOption]:
    """Build an option; a symbol pair that does not fit the source symbols is skipped."""

    transform = definition.transform
    if not isinstance(transform, SymbolPairTransform) or not source_symbols:
        return CamouflageOption(definition, is_custom=is_custom)
    try:
        resolved = resolve_symbol_pair(transform.pair, source_symbols, definition.id)
    except EncoderError:
        return None
    return CamouflageOption(definition, resolved, is_custom=is_custom)


def build_default_registry() -> EncoderRegistry:
    """A registry holding the full catalog."""

    return EncoderRegistry(ALL_DEFINITIONS)
