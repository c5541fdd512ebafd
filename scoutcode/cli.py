"""Command line interface for scoutcode."""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Any, Dict, Iterable, List, Optional

from .configuration import ScoutcodeSettings, get_settings
from .encoders.registry import EncoderRegistry, build_default_registry
from .errors import EncoderError, ScoutcodeConfigurationError, ScoutcodeError
from .pipeline import PipelineRunner, PipelineStep, PipelineSummary
from .renderer import RenderOptions, code_image_path, debug_message
from .separators import SeparatorOverrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoutcode",
        description="Encode text with scout ciphers (morse, binary, Caesar, ...) and camouflages.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to encode. Read from --input or stdin when omitted.",
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Read the text from this file ('-' for stdin).",
    )
    parser.add_argument(
        "-e",
        "--encoder",
        action="append",
        default=[],
        metavar="ID[:key=value,...]",
        help="Encoder to apply; repeat to chain (e.g. -e morse -e morse-stylized).",
    )
    parser.add_argument(
        "--spacing",
        choices=("preserve", "separators"),
        help="Replay the original punctuation or insert structural separators.",
    )
    parser.add_argument(
        "--format",
        choices=("auto", "html", "text"),
        help="Output format (default: auto, html for picture codes).",
    )
    parser.add_argument("--sub-letter-separator", help="Separator between sub-letters.")
    parser.add_argument("--letter-separator", help="Separator between letters.")
    parser.add_argument("--word-separator", help="Separator between words.")
    parser.add_argument("--phrase-separator", help="Separator between phrases.")
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List the available encoders and exit.",
    )
    parser.add_argument(
        "--camouflages",
        metavar="ID",
        help="List the camouflages that can follow encoder ID and exit.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the encoded message tree instead of the rendered text.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the result to this file instead of stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show one progress line per encoder.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the message tree and metadata after each step to stderr.",
    )
    return parser


def coerce_value(raw: str) -> Any:
    """Turn a command line config value into a bool, int or string."""

    lowered = raw.strip().lower()
    if lowered in {"true", "yes", "on"}:
        return True
    if lowered in {"false", "no", "off"}:
        return False
    try:
        return int(raw)
    except ValueError:
        return raw


def parse_encoder_spec(spec: str) -> PipelineStep:
    """Parse ``ID[:key=value,...]`` into a pipeline step."""

    encoder_id, _, options = spec.partition(":")
    config: Dict[str, Any] = {}
    for item in filter(None, (part.strip() for part in options.split(","))):
        key, separator, value = item.partition("=")
        if not separator:
            raise argparse.ArgumentTypeError(
                f"Invalid encoder option '{item}' (expected key=value)."
            )
        config[key.strip().replace("-", "_")] = coerce_value(value)
    return PipelineStep(encoder_id.strip(), config)


def _unescape(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.replace("\\n", "\n").replace("\\t", "\t")


def build_render_options(
    args: argparse.Namespace, settings: ScoutcodeSettings
) -> RenderOptions:
    separators = SeparatorOverrides(
        sub_letter=_unescape(args.sub_letter_separator),
        letter=_unescape(args.letter_separator),
        word=_unescape(args.word_separator),
        phrase=_unescape(args.phrase_separator),
    )
    return RenderOptions(
        spacing=args.spacing,
        format=args.format or settings.SCOUTCODE_RENDER_FORMAT,
        separators=separators,
        resolve_image_path=lambda folder, name: code_image_path(
            folder,
            name,
            settings.SCOUTCODE_IMAGE_FORMAT,
            settings.SCOUTCODE_ASSETS_BASE,
        ),
    )


def read_input_text(text: Optional[str], input_file: Optional[str]) -> str:
    if text is not None:
        return text
    if input_file and input_file != "-":
        return pathlib.Path(input_file).expanduser().read_text(encoding="utf-8")
    return sys.stdin.read()


def execute_encoding(
    *,
    text: str,
    steps: List[PipelineStep],
    registry: EncoderRegistry,
    render_options: RenderOptions,
    verbose: bool,
    debug: bool,
) -> tuple[int, PipelineSummary | None, str | None]:
    """Run the encoder chain and return the exit code, summary, and message."""

    runner = PipelineRunner(
        registry=registry,
        steps=steps,
        render_options=render_options,
        verbose=verbose,
        debug=debug,
    )
    try:
        summary = runner.run(text)
    except EncoderError as exc:
        return 1, None, f"[{exc.code.value}] {exc}"
    except ScoutcodeError as exc:
        return 1, None, str(exc)
    except KeyboardInterrupt:
        return 2, None, "Encoding interrupted by user."
    return 0, summary, None


def print_encoders(registry: EncoderRegistry) -> None:
    for definition in registry.definitions():
        requires = (
            "/".join(definition.requires.accepted_types) if definition.requires else "-"
        )
        produces = definition.produces.type if definition.produces else "-"
        marker = " (camouflage)" if definition.is_camouflage else ""
        print(f"  {definition.id:<22} {definition.name}{marker}")
        print(f"  {'':<22} requires {requires}, produces {produces}")


def print_camouflages(registry: EncoderRegistry, encoder_id: str) -> None:
    options = registry.compatible_camouflages_for_encoder(encoder_id)
    if not options:
        print(f"No camouflage available after '{encoder_id}'.")
        return
    for option in options:
        marker = " *" if option.definition.is_default_camouflage else ""
        print(f"  {option.id:<22} {option.name}{marker}")


def write_output(content: str, output_file: Optional[str]) -> None:
    if not output_file:
        print(content)
        return
    output_path = pathlib.Path(output_file).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = get_settings()
    except ScoutcodeConfigurationError as exc:
        print(exc)
        return 1

    registry = build_default_registry()

    if args.list:
        print_encoders(registry)
        return 0
    if args.camouflages:
        try:
            print_camouflages(registry, args.camouflages)
        except EncoderError as exc:
            print(exc)
            return 1
        return 0

    try:
        steps = [parse_encoder_spec(spec) for spec in args.encoder]
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        text = read_input_text(args.text, args.input)
    except OSError as exc:
        print(f"Input could not be read: {exc}")
        return 1

    exit_code, summary, message = execute_encoding(
        text=text,
        steps=steps,
        registry=registry,
        render_options=build_render_options(args, settings),
        verbose=bool(args.verbose or settings.SCOUTCODE_VERBOSE),
        debug=bool(args.debug or settings.SCOUTCODE_DEBUG),
    )

    if message:
        print(message)
    if summary:
        content = debug_message(summary.message) if args.tree else summary.content
        write_output(content, args.output)
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
