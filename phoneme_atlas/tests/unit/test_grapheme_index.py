"""Tests for the per-language grapheme index."""

from __future__ import annotations

from phoneme_atlas.inventory.models import Language
from phoneme_atlas.normalise.grapheme_index import GraphemeIndex


class TestGraphemeIndex:
    def test_lookup_by_variant_spelling(self, indonesian):
        index = GraphemeIndex.build(indonesian)
        entry = index.lookup("NG")
        assert entry.key == "ind-ng"
        assert entry.anchor_id == "grapheme-ind-ng"
        assert entry.phonemes == ["ŋ"]

    def test_one_grapheme_several_phonemes(self, indonesian):
        index = GraphemeIndex.build(indonesian)
        assert index.lookup("e").phonemes == ["e", "ə"]

    def test_korean_shared_jamo(self, korean):
        index = GraphemeIndex.build(korean)
        assert index.lookup("ㅂ").phonemes == ["p", "p̚"]
        assert index.lookup("ㅅ").phonemes == ["t̚", "s", "ɕ"]

    def test_spelling_variants_merged(self, toy_record):
        index = GraphemeIndex.build(Language.from_dict(toy_record))
        assert len(index) == 3
        assert index.lookup("t").spellings == ["t", "T"]
        assert index.lookup("a").spellings == ["a", "á"]

    def test_bare_marks_share_fallback_key(self, arabic):
        index = GraphemeIndex.build(arabic)
        entry = index.lookup("\u064e")
        assert entry.key == "arb-unknown"
        assert entry.phonemes == ["i", "u", "a"]

    def test_unknown_grapheme(self, indonesian):
        assert GraphemeIndex.build(indonesian).lookup("q") is None

    def test_phoneme_without_graphemes_not_indexed(self, indonesian):
        index = GraphemeIndex.build(indonesian)
        assert all("ʔ" not in e.phonemes for e in index)

    def test_to_dict(self, toy_record):
        d = GraphemeIndex.build(Language.from_dict(toy_record)).to_dict()
        assert d["language_id"] == "toy"
        assert d["graphemes"][0] == {
            "key": "toy-t",
            "anchor_id": "grapheme-toy-t",
            "spellings": ["t", "T"],
            "phonemes": ["t"],
        }
