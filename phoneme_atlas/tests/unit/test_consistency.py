"""Tests for the reference consistency check."""

from __future__ import annotations

import logging

from phoneme_atlas.inventory.classification import ConsonantPhoneme, VowelPhoneme
from phoneme_atlas.inventory.consistency import (
    MismatchReason,
    check_phoneme,
    check_reference_consistency,
)


class TestCheckPhoneme:
    def test_exact_symbol(self):
        p = ConsonantPhoneme(ipa="t͡ʃ", place="postalveolar", manner="affricate")
        assert check_phoneme("x", p) is None

    def test_modified_symbol_matches_base(self):
        p = ConsonantPhoneme(ipa="kʰ", place="velar", manner="plosive", voicing="aspirated")
        assert check_phoneme("x", p) is None

    def test_long_vowel_matches_base(self):
        p = VowelPhoneme(ipa="aː", height="open", backness="front", rounding="unrounded")
        assert check_phoneme("x", p) is None

    def test_undefined_cell(self):
        p = ConsonantPhoneme(ipa="ʡ", place="pharyngeal", manner="plosive")
        mismatch = check_phoneme("x", p)
        assert mismatch.reason == MismatchReason.UNDEFINED_CELL
        assert mismatch.expected == ()

    def test_vacant_cell(self):
        p = ConsonantPhoneme(ipa="ʜ", place="pharyngeal", manner="trill")
        assert check_phoneme("x", p).reason == MismatchReason.VACANT_CELL

    def test_symbol_mismatch(self):
        p = VowelPhoneme(ipa="o", height="close", backness="front", rounding="unrounded")
        mismatch = check_phoneme("x", p)
        assert mismatch.reason == MismatchReason.SYMBOL_MISMATCH
        assert mismatch.expected == ("i",)


class TestCheckReferenceConsistency:
    def test_indonesian_and_arabic_agree(self, indonesian, arabic):
        assert check_reference_consistency(indonesian) == []
        assert check_reference_consistency(arabic) == []

    def test_korean_alveolo_palatal(self, korean, caplog):
        with caplog.at_level(logging.WARNING):
            mismatches = check_reference_consistency(korean)
        assert [m.ipa for m in mismatches] == ["ɕ"]
        assert mismatches[0].reason == MismatchReason.SYMBOL_MISMATCH
        assert mismatches[0].expected == ("ʃ", "ʒ")
        assert "kor: /ɕ/ symbol_mismatch" in caplog.text

    def test_to_dict(self, korean):
        d = check_reference_consistency(korean)[0].to_dict()
        assert d == {
            "language_id": "kor", "ipa": "ɕ", "reason": "symbol_mismatch",
            "expected": ["ʃ", "ʒ"],
        }
