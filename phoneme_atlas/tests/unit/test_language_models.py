"""Tests for the language inventory model."""

from __future__ import annotations

import pytest

from phoneme_atlas.inventory.errors import (
    ClassificationError,
    InventoryConsistencyError,
    InventoryError,
    UnknownPhonemeError,
)
from phoneme_atlas.inventory.models import Language, LanguageRule, RuleType


class TestBuiltinInventories:
    def test_sizes(self, indonesian, korean, arabic):
        assert (len(indonesian.consonants), len(indonesian.vowels)) == (23, 6)
        assert (len(korean.consonants), len(korean.vowels)) == (19, 8)
        assert (len(arabic.consonants), len(arabic.vowels)) == (20, 6)

    def test_unique_ipa(self, indonesian, korean, arabic):
        for language in (indonesian, korean, arabic):
            ipas = [p.ipa for p in language.phonemes]
            assert len(ipas) == len(set(ipas))

    def test_rules_reference_inventory(self, indonesian, korean, arabic):
        for language in (indonesian, korean, arabic):
            ipas = {p.ipa for p in language.phonemes}
            for rule in language.rules:
                assert rule.phoneme in ipas

    def test_notes_and_rules_optional(self, arabic):
        assert arabic.rules == ()
        assert arabic.notes == "Short vowels typically unwritten."


class TestQueries:
    def test_phoneme_lookup(self, indonesian):
        assert indonesian.phoneme("ŋ").graphemes == ("ng",)
        assert indonesian.phoneme("θ") is None

    def test_rules_for(self, korean):
        assert [r.name for r in korean.rules_for("p")] == ["aspiration"]
        assert korean.rules_for("t") == []

    def test_phonemes_for_grapheme(self, indonesian):
        assert [p.ipa for p in indonesian.phonemes_for_grapheme("e")] == ["e", "ə"]


class TestRealize:
    def test_matching_environment(self, indonesian):
        assert indonesian.realize("e", "unstressed syllables") == "ə"
        assert indonesian.realize("e", "stressed syllables") == "e"

    def test_unmatched_environment_defaults_to_phoneme(self, indonesian):
        assert indonesian.realize("e", "word-final") == "e"

    def test_phoneme_without_rules_realizes_as_itself(self, indonesian):
        assert indonesian.realize("p", "anywhere") == "p"

    def test_korean_coda(self, korean):
        assert korean.realize("p", "syllable-final") == "p̚"

    def test_custom_matcher(self, korean):
        def prefix(label: str, environment: str) -> bool:
            return label.startswith(environment)

        assert korean.realize("p", "word-initial", matcher=prefix) == "pʰ"
        assert korean.realize("p", "word-initial") == "p"

    def test_unknown_phoneme(self, indonesian):
        with pytest.raises(UnknownPhonemeError) as exc_info:
            indonesian.realize("θ", "anywhere")
        assert isinstance(exc_info.value, KeyError)
        assert "ind" in str(exc_info.value)

    def test_first_rule_wins_across_rules(self, toy_record):
        toy_record["rules"].append({
            "name": "glottalling",
            "type": "allophone",
            "phoneme": "t",
            "realizations": [
                {"ipa": "ʔ", "environment": "intervocalic"},
                {"ipa": "ʔ", "environment": "word-final"},
            ],
        })
        toy = Language.from_dict(toy_record)
        assert toy.realize("t", "intervocalic") == "ɾ"
        assert toy.realize("t", "word-final") == "ʔ"


class TestValidation:
    def test_valid_record(self, toy_record):
        toy = Language.from_dict(toy_record)
        assert toy.id == "toy"
        assert toy.rules[0].type is RuleType.ALLOPHONE

    def test_duplicate_ipa(self, toy_record):
        toy_record["phonemes"].append(
            {"ipa": "t", "place": "dental", "manner": "plosive"}
        )
        with pytest.raises(InventoryConsistencyError) as exc_info:
            Language.from_dict(toy_record)
        assert exc_info.value.language_id == "toy"
        assert exc_info.value.problems == ["phoneme /t/ is listed 2 times"]

    def test_rule_for_missing_phoneme(self, toy_record):
        toy_record["rules"][0]["phoneme"] = "k"
        with pytest.raises(InventoryConsistencyError, match="/k/"):
            Language.from_dict(toy_record)

    def test_duplicate_environment(self, toy_record):
        toy_record["rules"][0]["realizations"].append(
            {"ipa": "d", "environment": "intervocalic"}
        )
        with pytest.raises(InventoryConsistencyError, match="intervocalic"):
            Language.from_dict(toy_record)

    def test_empty_realizations(self, toy_record):
        toy_record["rules"][0]["realizations"] = []
        with pytest.raises(InventoryConsistencyError, match="no realizations"):
            Language.from_dict(toy_record)

    def test_duplicate_rule_name(self, toy_record):
        toy_record["rules"].append(dict(toy_record["rules"][0], phoneme="d"))
        with pytest.raises(InventoryConsistencyError, match="flapping"):
            Language.from_dict(toy_record)

    def test_all_problems_reported_together(self, toy_record):
        toy_record["phonemes"].append({"ipa": "a", "height": "open", "backness": "back",
                                       "rounding": "unrounded"})
        toy_record["rules"][0]["phoneme"] = "k"
        with pytest.raises(InventoryConsistencyError) as exc_info:
            Language.from_dict(toy_record)
        assert len(exc_info.value.problems) == 2

    def test_unclassifiable_phoneme(self, toy_record):
        toy_record["phonemes"].append({"ipa": "?", "place": "velar"})
        with pytest.raises(ClassificationError, match=r"'toy', phoneme #3"):
            Language.from_dict(toy_record)

    def test_unknown_rule_type(self, toy_record):
        toy_record["rules"][0]["type"] = "rewrite"
        with pytest.raises(InventoryError, match="rewrite"):
            Language.from_dict(toy_record)

    def test_realization_without_environment(self, toy_record):
        del toy_record["rules"][0]["realizations"][0]["environment"]
        with pytest.raises(InventoryError, match=r"rule #0: Rule 'flapping', realization #0"):
            Language.from_dict(toy_record)

    def test_rule_without_name(self, toy_record):
        del toy_record["rules"][0]["name"]
        with pytest.raises(InventoryError, match="no valid name"):
            Language.from_dict(toy_record)

    def test_non_mapping_phoneme(self, toy_record):
        toy_record["phonemes"].append("x")
        with pytest.raises(ClassificationError, match=r"phoneme #3: .*mapping, got str"):
            Language.from_dict(toy_record)

    def test_non_list_phonemes(self, toy_record):
        toy_record["phonemes"] = "t d a"
        with pytest.raises(InventoryError, match="must be a list"):
            Language.from_dict(toy_record)

    def test_null_phonemes_and_rules_mean_empty(self, toy_record):
        toy_record["phonemes"] = None
        toy_record["rules"] = None
        toy = Language.from_dict(toy_record)
        assert toy.phonemes == ()
        assert toy.rules == ()

    def test_non_mapping_record(self):
        with pytest.raises(InventoryError, match="mapping, got list"):
            Language.from_dict(["toy"])

    def test_non_string_id(self, toy_record):
        toy_record["id"] = 7
        with pytest.raises(InventoryError, match="'id'"):
            Language.from_dict(toy_record)

    def test_errors_are_value_errors(self):
        assert issubclass(InventoryConsistencyError, ValueError)
        assert issubclass(ClassificationError, ValueError)

    def test_direct_construction_validates(self):
        rule = LanguageRule(name="r", type="distribution", phoneme="x")
        with pytest.raises(InventoryConsistencyError):
            Language(id="zz", name="", variety="", script="", phonemes=(), rules=(rule,))


class TestSerialisation:
    def test_round_trip(self, korean):
        assert Language.from_dict(korean.to_dict()) == korean

    def test_optional_fields_omitted(self, arabic):
        d = arabic.to_dict()
        assert "rules" not in d
        assert d["phonemes"][0] == {
            "ipa": "b", "graphemes": ["ب"], "kind": "consonant",
            "place": "bilabial", "manner": "plosive", "voicing": "voiced",
        }
