"""IPA chart overlays: the canonical grid with one language's phonemes.

The output is plain data (rows of cells) for a presentation layer to draw.
Each cell holds the reference symbols, or ``None`` where the grid leaves
the articulation undefined, next to the language's own phonemes at those
coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from phoneme_atlas.inventory.classification import (
    BACKNESS_LABELS,
    CONSONANT_MANNERS,
    CONSONANT_PLACES,
    HEIGHT_LABELS,
    MANNER_LABELS,
    PLACE_LABELS,
    VOWEL_BACKNESSES,
    VOWEL_HEIGHTS,
    VOWEL_ROUNDINGS,
)
from phoneme_atlas.inventory.models import Language
from phoneme_atlas.inventory.reference import consonant_symbols, vowel_symbols


@dataclass
class ChartCell:
    column: str
    reference: tuple[str, ...] | None
    phonemes: list[str] = field(default_factory=list)

    @property
    def defined(self) -> bool:
        return self.reference is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "reference": list(self.reference) if self.reference is not None else None,
            "phonemes": self.phonemes,
        }


@dataclass
class ChartRow:
    row: str
    label: str
    cells: list[ChartCell] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "label": self.label,
            "cells": [c.to_dict() for c in self.cells],
        }


@dataclass
class Chart:
    language_id: str
    kind: str
    columns: list[dict[str, str]]
    rows: list[ChartRow]

    def cell(self, row: str, column: str) -> ChartCell | None:
        for r in self.rows:
            if r.row == row:
                for c in r.cells:
                    if c.column == column:
                        return c
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "language_id": self.language_id,
            "kind": self.kind,
            "columns": self.columns,
            "rows": [r.to_dict() for r in self.rows],
        }


def build_consonant_chart(language: Language) -> Chart:
    """Manner rows x place columns."""
    placed: dict[tuple[str, str], list[str]] = {}
    for p in language.consonants:
        placed.setdefault((p.manner.value, p.place.value), []).append(p.ipa)

    rows = []
    for manner in CONSONANT_MANNERS:
        cells = [
            ChartCell(
                column=place.value,
                reference=consonant_symbols(manner, place),
                phonemes=placed.get((manner.value, place.value), []),
            )
            for place in CONSONANT_PLACES
        ]
        rows.append(ChartRow(row=manner.value, label=MANNER_LABELS[manner], cells=cells))

    columns = [{"id": p.value, "label": PLACE_LABELS[p]} for p in CONSONANT_PLACES]
    return Chart(language_id=language.id, kind="consonant", columns=columns, rows=rows)


def build_vowel_chart(language: Language) -> Chart:
    """Height rows x (backness, rounding) columns, e.g. ``front/rounded``."""
    placed: dict[tuple[str, str, str], list[str]] = {}
    for p in language.vowels:
        coord = (p.height.value, p.backness.value, p.rounding.value)
        placed.setdefault(coord, []).append(p.ipa)

    rows = []
    for height in VOWEL_HEIGHTS:
        cells = []
        for backness in VOWEL_BACKNESSES:
            for rounding in VOWEL_ROUNDINGS:
                cells.append(ChartCell(
                    column=f"{backness.value}/{rounding.value}",
                    reference=vowel_symbols(height, backness, rounding),
                    phonemes=placed.get((height.value, backness.value, rounding.value), []),
                ))
        rows.append(ChartRow(row=height.value, label=HEIGHT_LABELS[height], cells=cells))

    columns = [
        {"id": f"{b.value}/{r.value}", "label": f"{BACKNESS_LABELS[b]} {r.value}"}
        for b in VOWEL_BACKNESSES
        for r in VOWEL_ROUNDINGS
    ]
    return Chart(language_id=language.id, kind="vowel", columns=columns, rows=rows)
