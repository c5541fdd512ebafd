"""Error definitions for the scoutcode engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Sequence, Union


class ErrorCode(str, Enum):
    """What went wrong in an encoder step; safe to map to user-facing text."""

    NO_CONTENT = "NO_CONTENT"
    INCOMPATIBLE_INPUT = "INCOMPATIBLE_INPUT"
    MISSING_SYMBOLS = "MISSING_SYMBOLS"
    INVALID_CONFIG = "INVALID_CONFIG"
    ENCODER_NOT_FOUND = "ENCODER_NOT_FOUND"


class ScoutcodeError(Exception):
    """Base exception for all custom errors."""


class ScoutcodeConfigurationError(ScoutcodeError):
    """Raised when the settings cannot be loaded or validated."""


class EncoderError(ScoutcodeError):
    """Raised when an encoder step cannot run.

    The message is left untouched when this is raised: requirements and
    encoder configuration are checked before any letter is rewritten.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        encoder_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.encoder_id = encoder_id
        self.details: Dict[str, Any] = dict(details or {})

    @property
    def expected(self) -> Any:
        return self.details.get("expected")

    @property
    def got(self) -> Any:
        return self.details.get("got")

    def __repr__(self) -> str:
        return (
            f"EncoderError(code={self.code.value}, encoder_id={self.encoder_id!r}, "
            f"details={self.details!r})"
        )


TYPE_LABELS = {
    "letters": "letters",
    "digits": "digits",
    "lettersAndDigits": "letters or digits",
    "twoSymbols": "two-symbol codes",
    "symbols": "symbols",
    "visual": "images",
}


def type_label(content_type: Union[str, Sequence[str]]) -> str:
    if isinstance(content_type, str):
        return TYPE_LABELS.get(content_type, content_type)
    return " or ".join(type_label(item) for item in content_type)


def no_content_error(encoder_id: Optional[str] = None) -> EncoderError:
    return EncoderError(
        ErrorCode.NO_CONTENT,
        "Nothing to encode. Enter some text containing letters or digits.",
        encoder_id=encoder_id,
    )


def incompatible_input_error(
    encoder_id: str,
    encoder_name: str,
    expected: Union[str, Sequence[str]],
    got: Optional[str] = None,
) -> EncoderError:
    message = (
        f"To encode with {encoder_name}, the text must only contain "
        f"{type_label(expected)}."
    )
    if got:
        message += f" Remove the {type_label(got)} first."
    if not isinstance(expected, str):
        expected = list(expected)
    return EncoderError(
        ErrorCode.INCOMPATIBLE_INPUT,
        message,
        encoder_id=encoder_id,
        details={"expected": expected, "got": got},
    )


def missing_symbols_error(encoder_id: Optional[str] = None) -> EncoderError:
    return EncoderError(
        ErrorCode.MISSING_SYMBOLS,
        "Two-symbol camouflage without source symbols. Apply an encoder that "
        "produces symbols first (binary, morse, ...).",
        encoder_id=encoder_id,
    )


def invalid_config_error(
    encoder_id: Optional[str],
    message: str,
    **details: Any,
) -> EncoderError:
    return EncoderError(
        ErrorCode.INVALID_CONFIG,
        message,
        encoder_id=encoder_id,
        details=details,
    )


def encoder_not_found_error(encoder_id: str) -> EncoderError:
    return EncoderError(
        ErrorCode.ENCODER_NOT_FOUND,
        f'Unknown encoder: "{encoder_id}"',
        encoder_id=encoder_id,
    )
