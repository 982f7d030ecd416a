"""Check a language's phonemes against the canonical reference grids.

Mismatches are findings for a curator to review, not validation errors:
inventories legitimately use symbols the grid does not list (aspirated or
unreleased stops, long vowels), so comparison is done on base symbols
with diacritics and modifier letters removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from phoneme_atlas.inventory.classification import Phoneme
from phoneme_atlas.inventory.models import Language
from phoneme_atlas.inventory.reference import base_symbol, expected_symbols

logger = logging.getLogger(__name__)


class MismatchReason:
    """Why a phoneme disagrees with the reference grid."""

    UNDEFINED_CELL = "undefined_cell"    # coordinates the grid rules out
    VACANT_CELL = "vacant_cell"          # possible, but no IPA letter exists
    SYMBOL_MISMATCH = "symbol_mismatch"  # cell letters differ from the ipa


@dataclass(frozen=True)
class ReferenceMismatch:
    language_id: str
    ipa: str
    reason: str
    expected: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "language_id": self.language_id,
            "ipa": self.ipa,
            "reason": self.reason,
            "expected": list(self.expected),
        }


def check_phoneme(language_id: str, phoneme: Phoneme) -> ReferenceMismatch | None:
    expected = expected_symbols(phoneme)
    if expected is None:
        return ReferenceMismatch(language_id, phoneme.ipa, MismatchReason.UNDEFINED_CELL)
    if not expected:
        return ReferenceMismatch(language_id, phoneme.ipa, MismatchReason.VACANT_CELL)
    if phoneme.ipa in expected:
        return None
    base = base_symbol(phoneme.ipa)
    if any(base_symbol(sym) == base for sym in expected):
        return None
    return ReferenceMismatch(
        language_id, phoneme.ipa, MismatchReason.SYMBOL_MISMATCH, expected
    )


def check_reference_consistency(language: Language) -> list[ReferenceMismatch]:
    """Return every phoneme of ``language`` that disagrees with the grids."""
    mismatches = []
    for phoneme in language.phonemes:
        mismatch = check_phoneme(language.id, phoneme)
        if mismatch is not None:
            logger.warning(
                "%s: /%s/ %s (reference: %s)",
                language.id, mismatch.ipa, mismatch.reason,
                ", ".join(mismatch.expected) or "-",
            )
            mismatches.append(mismatch)
    return mismatches
