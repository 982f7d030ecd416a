"""Tests for IPA chart overlays."""

from __future__ import annotations

from phoneme_atlas.export.chart import build_consonant_chart, build_vowel_chart


class TestConsonantChart:
    def test_shape(self, indonesian):
        chart = build_consonant_chart(indonesian)
        assert chart.kind == "consonant"
        assert len(chart.columns) == 12
        assert len(chart.rows) == 9
        assert all(len(row.cells) == 12 for row in chart.rows)
        assert chart.columns[-1] == {"id": "labial-velar", "label": "Labial-velar"}
        assert chart.rows[3].label == "Tap/Flap"

    def test_language_symbols_overlaid(self, indonesian):
        cell = build_consonant_chart(indonesian).cell("plosive", "bilabial")
        assert cell.reference == ("p", "b")
        assert cell.phonemes == ["p", "b"]

    def test_several_phonemes_in_one_cell(self, korean):
        cell = build_consonant_chart(korean).cell("plosive", "velar")
        assert cell.phonemes == ["k", "kʰ", "k̚"]

    def test_undefined_and_vacant_cells(self, arabic):
        chart = build_consonant_chart(arabic)
        undefined = chart.cell("plosive", "pharyngeal")
        assert undefined.reference is None
        assert not undefined.defined
        vacant = chart.cell("trill", "pharyngeal")
        assert vacant.reference == ()
        assert vacant.defined

    def test_missing_cell(self, arabic):
        assert build_consonant_chart(arabic).cell("click", "bilabial") is None

    def test_to_dict(self, arabic):
        d = build_consonant_chart(arabic).to_dict()
        assert d["language_id"] == "arb"
        plosives = d["rows"][0]
        assert plosives["row"] == "plosive"
        pharyngeal = next(c for c in plosives["cells"] if c["column"] == "pharyngeal")
        assert pharyngeal == {"column": "pharyngeal", "reference": None, "phonemes": []}


class TestVowelChart:
    def test_shape(self, korean):
        chart = build_vowel_chart(korean)
        assert chart.kind == "vowel"
        assert len(chart.rows) == 7
        assert len(chart.columns) == 10
        assert chart.columns[0] == {"id": "front/unrounded", "label": "Front unrounded"}

    def test_language_symbols_overlaid(self, korean):
        chart = build_vowel_chart(korean)
        assert chart.cell("close", "back/unrounded").phonemes == ["ɯ"]
        assert chart.cell("close", "back/rounded").phonemes == ["u"]

    def test_long_vowels_share_cell(self, arabic):
        cell = build_vowel_chart(arabic).cell("close", "front/unrounded")
        assert cell.reference == ("i",)
        assert cell.phonemes == ["i", "iː"]

    def test_undefined_cell(self, indonesian):
        cell = build_vowel_chart(indonesian).cell("mid", "front/unrounded")
        assert cell.reference is None
        assert cell.phonemes == []
