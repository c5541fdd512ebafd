"""Serialise a :class:`Message` to plain text or HTML."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Literal, Optional

from .separators import (
    NBSP,
    SeparatorOverrides,
    SeparatorsConfig,
    Spacing,
    layer_separators,
    separators_for_type,
)
from .structures import ImageSubLetter, Letter, Message, RawToken, SubLetter

RenderFormat = Literal["auto", "html", "text"]
OutputKind = Literal["html", "text"]
ImageFormat = Literal["svg", "png"]
ImagePathResolver = Callable[[str, str], str]

ASSETS_BASE = "./assets/codes"


def code_image_path(
    folder: str,
    name: str,
    image_format: ImageFormat = "svg",
    base: str = ASSETS_BASE,
) -> str:
    return f"{base.rstrip('/')}/{folder}/{name}.{image_format}"


def render_image_tag(
    folder: str,
    name: str,
    image_format: ImageFormat = "svg",
    base: str = ASSETS_BASE,
) -> str:
    src = code_image_path(folder, name, image_format, base)
    return _image_tag(src, name)


def _image_tag(src: str, name: str) -> str:
    return f'<img src="{src}" alt="{name}" class="code-symbol" />'


@dataclass
class RenderOptions:
    """How to render a message.

    ``spacing=None`` follows the message metadata. ``separators`` wins over
    anything the encoders recorded.
    """

    spacing: Optional[Spacing] = None
    format: RenderFormat = "auto"
    separators: Optional[SeparatorOverrides] = None
    resolve_image_path: Optional[ImagePathResolver] = None


@dataclass(frozen=True)
class RenderOutput:
    kind: OutputKind
    content: str

    def __str__(self) -> str:
        return self.content


def resolve_render_separators(
    message: Message,
    explicit: Optional[SeparatorOverrides] = None,
) -> SeparatorsConfig:
    """Explicit > encoder-declared > auto-computed > per-type defaults."""

    metadata = message.metadata
    base = metadata.auto_separators or separators_for_type(metadata.produced_type)
    return layer_separators(base, explicit, metadata.separators)


def _to_html(value: str) -> str:
    return value.replace(NBSP, "&nbsp;").replace("\n", "<br>")


class _Serializer:
    def __init__(
        self,
        output_kind: OutputKind,
        resolve_image_path: ImagePathResolver,
        sub_letter_separator: str,
    ) -> None:
        self.output_kind = output_kind
        self.resolve_image_path = resolve_image_path
        self.sub_letter_separator = sub_letter_separator

    def sub_letter(self, sub: SubLetter) -> str:
        if not isinstance(sub, ImageSubLetter):
            return sub.value
        if self.output_kind == "text":
            return f"[{sub.folder}/{sub.name}]"
        return _image_tag(self.resolve_image_path(sub.folder, sub.name), sub.name)

    def letter(self, letter: Letter) -> str:
        return self.sub_letter_separator.join(
            self.sub_letter(sub) for sub in letter.peek()
        )


def render_message(
    message: Message, options: Optional[RenderOptions] = None
) -> RenderOutput:
    """Render in ``preserve`` mode (original punctuation) or ``separators`` mode.

    Separators mode joins words only, so a phrase without words (pure
    punctuation or whitespace) is left out of the output.

    No escaping is applied to text sub-letters; an HTML consumer must treat
    the content accordingly.
    """

    options = options or RenderOptions()
    metadata = message.metadata

    if options.format == "auto":
        output_kind: OutputKind = (
            "html" if metadata.produced_type == "visual" else "text"
        )
    else:
        output_kind = options.format

    spacing = options.spacing or metadata.spacing or "separators"
    resolved = resolve_render_separators(message, options.separators)
    if output_kind == "html":
        resolved = SeparatorsConfig(
            sub_letter=_to_html(resolved.sub_letter),
            letter=_to_html(resolved.letter),
            word=_to_html(resolved.word),
            phrase=_to_html(resolved.phrase),
        )

    serializer = _Serializer(
        output_kind,
        options.resolve_image_path or (lambda folder, name: code_image_path(folder, name)),
        resolved.sub_letter,
    )

    if spacing == "preserve":
        parts: List[str] = []
        for phrase in message.phrases:
            for token in phrase.tokens:
                if isinstance(token, RawToken):
                    parts.append(token.text)
                else:
                    parts.extend(serializer.letter(letter) for letter in token.letters)
        return RenderOutput(kind=output_kind, content="".join(parts))

    phrase_strings: List[str] = []
    for phrase in message.phrases:
        words = phrase.words()
        if not words:
            continue
        phrase_strings.append(
            resolved.word.join(
                resolved.letter.join(serializer.letter(letter) for letter in word.letters)
                for word in words
            )
        )
    return RenderOutput(kind=output_kind, content=resolved.phrase.join(phrase_strings))


def debug_message(message: Message) -> str:
    """Human-readable dump of the tree, one line per token."""

    lines = [
        f"Message: {len(message.phrases)} phrase(s), "
        f"{message.word_count} word(s), {message.letter_count} letter(s)",
        "",
    ]
    for phrase, position in message.iter_phrases():
        lines.append(f"  Phrase {position.phrase_index}:")
        for token in phrase.tokens:
            if isinstance(token, RawToken):
                escaped = token.text.replace("\n", "\\n").replace("\r", "\\r")
                lines.append(f'    [RAW:{token.separator_kind}] "{escaped}"')
                continue
            rendered = []
            for letter in token.letters:
                subs = [
                    f"[{sub.folder}/{sub.name}]"
                    if isinstance(sub, ImageSubLetter)
                    else sub.value
                    for sub in letter.peek()
                ]
                if len(subs) > 1:
                    rendered.append(f"({','.join(subs)})")
                else:
                    rendered.append("".join(subs))
            lines.append(f"    [WORD] {''.join(rendered)}")
    return "\n".join(lines)
