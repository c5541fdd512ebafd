"""High-level orchestration: parse, run a chain of encoders, render."""

from __future__ import annotations

import json
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .encoders.engine import run_encoder, run_preprocess
from .encoders.registry import EncoderRegistry, build_default_registry
from .encoders.types import EncoderDef
from .errors import invalid_config_error
from .parser import parse_text
from .renderer import RenderOptions, RenderOutput, debug_message, render_message
from .structures import Message, MessageMetadata


@dataclass
class PipelineStep:
    """One encoder of a chain, with its encoder-specific configuration."""

    encoder_id: str
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PipelineSummary:
    """Report returned after encoding a text."""

    output: RenderOutput
    steps: List[str]
    metadata: MessageMetadata
    phrase_count: int
    word_count: int
    letter_count: int
    elapsed_seconds: float
    message: Message

    @property
    def content(self) -> str:
        return self.output.content


class PipelineRunner:
    """Coordinates parsing, the encoder chain and rendering."""

    def __init__(
        self,
        *,
        registry: Optional[EncoderRegistry] = None,
        steps: Sequence[PipelineStep] = (),
        render_options: Optional[RenderOptions] = None,
        verbose: bool = False,
        debug: bool = False,
    ) -> None:
        self.registry = registry if registry is not None else build_default_registry()
        self.steps = list(steps)
        self.render_options = render_options or RenderOptions()
        self.verbose = verbose
        self.debug = debug

    def _resolve_definitions(self) -> List[EncoderDef]:
        definitions = [self.registry.get(step.encoder_id) for step in self.steps]
        for index, definition in enumerate(definitions):
            if definition.has_preprocess and index > 0:
                raise invalid_config_error(
                    definition.id,
                    f"'{definition.id}' works on the raw text and must be the first step.",
                    field="steps",
                    position=index,
                )
        return definitions

    def run(self, text: str) -> PipelineSummary:
        start_time = time.time()
        definitions = self._resolve_definitions()

        if definitions and definitions[0].has_preprocess:
            text = run_preprocess(definitions[0], text, self.steps[0].config)
            self._log_debug("pipeline.preprocessed", text)

        message = parse_text(text)
        self._log_debug("pipeline.parsed", debug_message(message))

        for step, definition in zip(self.steps, definitions):
            metadata = run_encoder(definition, message, step.config)
            if self.verbose:
                print(
                    f"Applied {definition.id}: produced {metadata.produced_type}, "
                    f"spacing {metadata.spacing}."
                )
            self._log_debug(f"pipeline.step.{definition.id}.metadata", asdict(metadata))
            self._log_debug(f"pipeline.step.{definition.id}.tree", debug_message(message))

        output = render_message(message, self.render_options)
        self._log_debug("pipeline.output", {"kind": output.kind, "content": output.content})

        return PipelineSummary(
            output=output,
            steps=[definition.id for definition in definitions],
            metadata=message.metadata,
            phrase_count=len(message.phrases),
            word_count=message.word_count,
            letter_count=message.letter_count,
            elapsed_seconds=time.time() - start_time,
            message=message,
        )

    def _log_debug(self, label: str, payload: Any) -> None:
        """Emit structured debug information when enabled."""

        if not self.debug:
            return
        if isinstance(payload, (dict, list)):
            message = json.dumps(payload, ensure_ascii=False, indent=2)
        else:
            message = str(payload)
        print(f"[scoutcode][engine-debug] {label}:\n{message}", file=sys.stderr)


def encode_text(
    text: str,
    *encoder_ids: str,
    registry: Optional[EncoderRegistry] = None,
    configs: Optional[Mapping[str, Mapping[str, Any]]] = None,
    render_options: Optional[RenderOptions] = None,
) -> str:
    """Encode ``text`` through ``encoder_ids`` and return the rendered content.

    ``configs`` maps an encoder id to its configuration.
    """

    configs = configs or {}
    steps = [
        PipelineStep(encoder_id, dict(configs.get(encoder_id, {})))
        for encoder_id in encoder_ids
    ]
    runner = PipelineRunner(
        registry=registry, steps=steps, render_options=render_options
    )
    return runner.run(text).content
