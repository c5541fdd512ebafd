"""Every encoder shipped with scoutcode, in display order."""

from __future__ import annotations

from .binary import BINARY
from .camouflages import ALL_CAMOUFLAGES
from .morse import MORSE
from .shifts import CAESAR, INVERT, NUMERIC_CAESAR, VIGENERE
from .substitutions import GRID26, MANDARIN, PHONE, STARS, TEMPLARS, TICTACTOC
from .wordplay import INTERCALATED, REVERSE

PRIMARY_DEFINITIONS = (
    BINARY,
    MORSE,
    CAESAR,
    NUMERIC_CAESAR,
    PHONE,
    VIGENERE,
    INVERT,
    INTERCALATED,
    REVERSE,
    STARS,
    MANDARIN,
    TEMPLARS,
    TICTACTOC,
    GRID26,
)

ALL_DEFINITIONS = PRIMARY_DEFINITIONS + ALL_CAMOUFLAGES
