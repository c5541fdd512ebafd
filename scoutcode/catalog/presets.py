"""Mnemonic shift presets used by scout troops.

Each preset is a pun linking an origin letter to a destination ("Avocat" reads
"A vaut K": A is worth K). The names are kept in French since the puns only
work there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


def compute_shift_from_letters(origin: str, destination: str) -> int:
    return ord(destination.upper()[0]) - ord(origin.upper()[0])


def compute_shift_from_letter_and_number(origin: str, destination_number: int) -> int:
    return destination_number - (ord(origin.upper()[0]) - ord("A") + 1)


def shifted_letter(letter: str, shift: int) -> str:
    """Shift one letter, returning it upper-cased; non-letters are returned as is."""

    code = ord(letter.upper()[0])
    if not ord("A") <= code <= ord("Z"):
        return letter
    return chr(ord("A") + (code - ord("A") + shift) % 26)


@dataclass(frozen=True)
class CaesarPreset:
    id: str
    name: str
    origin: str
    destination: str

    @property
    def shift(self) -> int:
        return compute_shift_from_letters(self.origin, self.destination)


@dataclass(frozen=True)
class NumericCaesarPreset:
    id: str
    name: str
    origin: str
    destination_number: int

    @property
    def shift(self) -> int:
        return compute_shift_from_letter_and_number(self.origin, self.destination_number)


CAESAR_PRESETS = (
    CaesarPreset("a-vote", "A voté - A vaut T", "A", "T"),
    CaesarPreset("acheter", "Acheter - HT", "H", "T"),
    CaesarPreset("age", "Agé - AG", "A", "G"),
    CaesarPreset("avocat", "Avocat - A vaut K", "A", "K"),
    CaesarPreset("casse", "Cassé - KC", "K", "C"),
    CaesarPreset("chaos", "Chaos - KO", "K", "O"),
    CaesarPreset("deesse", "Déesse - DS", "D", "S"),
    CaesarPreset("eiffel", "Eiffel - FL", "F", "L"),
    CaesarPreset("happe", "Happé - AP", "A", "P"),
    CaesarPreset("helene", "Hélène - LN", "L", "N"),
    CaesarPreset("herge", "Hergé - RG", "R", "G"),
    CaesarPreset("herve", "Hervé - RV", "R", "V"),
    CaesarPreset("jy-vais", "J'y vais - JV", "J", "V"),
    CaesarPreset("oeufs-pourris", "Œufs pourris - E pour I", "E", "I"),
    CaesarPreset("pete", "Pété - PT", "P", "T"),
    CaesarPreset("rot13", "Rot13 - Code qui s'annule en le refaisant", "A", "N"),
)

NUMERIC_CAESAR_PRESETS = (
    NumericCaesarPreset("numbers-only", "Conversion sans décalage - A=1", "A", 1),
    NumericCaesarPreset("cassis", "Cassis - K=6", "K", 6),
    NumericCaesarPreset("cassette", "Cassette - K=7", "K", 7),
    NumericCaesarPreset("detroit", "Détroit - D=3", "D", 3),
    NumericCaesarPreset("indienne", "Indienne - 1 dit N", "N", 1),
    NumericCaesarPreset("sizaine", "Sizaine - 6=N", "N", 6),
)


def caesar_preset(preset_id: str) -> Optional[CaesarPreset]:
    return next((item for item in CAESAR_PRESETS if item.id == preset_id), None)


def numeric_caesar_preset(preset_id: str) -> Optional[NumericCaesarPreset]:
    return next((item for item in NUMERIC_CAESAR_PRESETS if item.id == preset_id), None)


def caesar_presets_for_form() -> List[Dict[str, object]]:
    return [
        {
            "id": item.id,
            "label": item.name,
            "origin": item.origin,
            "destination": item.destination,
            "shift": item.shift,
        }
        for item in CAESAR_PRESETS
    ]
