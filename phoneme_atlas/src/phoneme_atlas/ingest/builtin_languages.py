"""Bundled language descriptions.

Raw records in the same shape a catalog source supplies; they go through
``Language.from_dict`` and therefore through full validation.
"""

from __future__ import annotations

from typing import Any


def _c(ipa: str, place: str, manner: str, voicing: str, *graphemes: str, **extra: Any) -> dict:
    return {"ipa": ipa, "place": place, "manner": manner, "voicing": voicing,
            "graphemes": list(graphemes), **extra}


def _v(ipa: str, height: str, backness: str, rounding: str, *graphemes: str) -> dict:
    return {"ipa": ipa, "height": height, "backness": backness, "rounding": rounding,
            "graphemes": list(graphemes)}


INDONESIAN: dict[str, Any] = {
    "id": "ind",
    "name": "Indonesian",
    "variety": "Standard",
    "script": "Latin",
    "notes": "Borrowed /f v z ʃ/ occur mainly in loans.",
    "phonemes": [
        _c("p", "bilabial", "plosive", "voiceless", "p"),
        _c("b", "bilabial", "plosive", "voiced", "b"),
        _c("t", "alveolar", "plosive", "voiceless", "t"),
        _c("d", "alveolar", "plosive", "voiced", "d"),
        _c("k", "velar", "plosive", "voiceless", "k"),
        _c("ɡ", "velar", "plosive", "voiced", "g"),
        _c("ʔ", "glottal", "plosive", "voiceless", contexts=["syllable-final"]),
        _c("t͡ʃ", "postalveolar", "affricate", "voiceless", "c"),
        _c("d͡ʒ", "postalveolar", "affricate", "voiced", "j"),
        _c("m", "bilabial", "nasal", "voiced", "m"),
        _c("n", "alveolar", "nasal", "voiced", "n"),
        _c("ɲ", "palatal", "nasal", "voiced", "ny"),
        _c("ŋ", "velar", "nasal", "voiced", "ng"),
        _c("s", "alveolar", "fricative", "voiceless", "s"),
        _c("h", "glottal", "fricative", "voiceless", "h"),
        _c("r", "alveolar", "trill", "voiced", "r"),
        _c("l", "alveolar", "lateral_approximant", "voiced", "l"),
        _c("w", "labial-velar", "approximant", "voiced", "w"),
        _c("j", "palatal", "approximant", "voiced", "y"),
        _c("f", "labiodental", "fricative", "voiceless", contexts=["loans"]),
        _c("v", "labiodental", "fricative", "voiced", contexts=["loans"]),
        _c("z", "alveolar", "fricative", "voiced", contexts=["loans"]),
        _c("ʃ", "postalveolar", "fricative", "voiceless", contexts=["loans"]),
        _v("i", "close", "front", "unrounded", "i"),
        _v("e", "close-mid", "front", "unrounded", "e"),
        _v("ə", "mid", "central", "unrounded", "e"),
        _v("a", "open", "front", "unrounded", "a"),
        _v("o", "close-mid", "back", "rounded", "o"),
        _v("u", "close", "back", "rounded", "u"),
    ],
    "rules": [
        {
            "name": "e-ambiguity",
            "type": "allophone",
            "phoneme": "e",
            "realizations": [
                {"ipa": "e", "environment": "stressed syllables"},
                {"ipa": "ə", "environment": "unstressed syllables"},
            ],
        },
    ],
}

KOREAN: dict[str, Any] = {
    "id": "kor",
    "name": "Korean",
    "variety": "Seoul",
    "script": "Hangul",
    "phonemes": [
        _c("p", "bilabial", "plosive", "voiceless", "ㅂ", contexts=["syllable-initial"]),
        _c("pʰ", "bilabial", "plosive", "aspirated", "ㅍ", contexts=["syllable-initial"]),
        _c("p̚", "bilabial", "plosive", "voiceless", "ㅂ",
           contexts=["syllable-final"], notes="Unreleased final stop"),
        _c("t", "alveolar", "plosive", "voiceless", "ㄷ", contexts=["syllable-initial"]),
        _c("tʰ", "alveolar", "plosive", "aspirated", "ㅌ", contexts=["syllable-initial"]),
        _c("t̚", "alveolar", "plosive", "voiceless", "ㅅ",
           contexts=["syllable-final"], notes="Stops neutralize in coda position"),
        _c("k", "velar", "plosive", "voiceless", "ㄱ", contexts=["syllable-initial"]),
        _c("kʰ", "velar", "plosive", "aspirated", "ㅋ", contexts=["syllable-initial"]),
        _c("k̚", "velar", "plosive", "voiceless", "ㄱ", contexts=["syllable-final"]),
        _c("s", "alveolar", "fricative", "voiceless", "ㅅ"),
        _c("ɕ", "postalveolar", "fricative", "voiceless", "ㅅ", contexts=["before /i/ or /j/"]),
        _c("m", "bilabial", "nasal", "voiced", "ㅁ"),
        _c("n", "alveolar", "nasal", "voiced", "ㄴ"),
        _c("ŋ", "velar", "nasal", "voiced", "ㅇ", contexts=["syllable-final"]),
        _c("ɾ", "alveolar", "tap_flap", "voiced", "ㄹ", contexts=["intervocalic"]),
        _c("l", "alveolar", "lateral_approximant", "voiced", "ㄹ", contexts=["syllable-final"]),
        _c("h", "glottal", "fricative", "voiceless", "ㅎ"),
        _c("j", "palatal", "approximant", "voiced", "ㅣ", contexts=["as glide"]),
        _c("w", "labial-velar", "approximant", "voiced", "ㅗ", contexts=["as glide"]),
        _v("i", "close", "front", "unrounded", "ㅣ"),
        _v("e", "close-mid", "front", "unrounded", "ㅔ"),
        _v("ɛ", "open-mid", "front", "unrounded", "ㅐ"),
        _v("a", "open", "front", "unrounded", "ㅏ"),
        _v("ʌ", "open-mid", "back", "unrounded", "ㅓ"),
        _v("o", "close-mid", "back", "rounded", "ㅗ"),
        _v("u", "close", "back", "rounded", "ㅜ"),
        _v("ɯ", "close", "back", "unrounded", "ㅡ"),
    ],
    "rules": [
        {
            "name": "aspiration",
            "type": "allophone",
            "phoneme": "p",
            "realizations": [
                {"ipa": "pʰ", "environment": "word-initial stressed"},
                {"ipa": "p̚", "environment": "syllable-final"},
            ],
        },
    ],
}

ARABIC: dict[str, Any] = {
    "id": "arb",
    "name": "Arabic",
    "variety": "MSA",
    "script": "Arabic",
    "notes": "Short vowels typically unwritten.",
    "phonemes": [
        _c("b", "bilabial", "plosive", "voiced", "ب"),
        _c("t", "dental", "plosive", "voiceless", "ت"),
        _c("d", "dental", "plosive", "voiced", "د"),
        _c("k", "velar", "plosive", "voiceless", "ك"),
        _c("q", "uvular", "plosive", "voiceless", "ق"),
        _c("ʔ", "glottal", "plosive", "voiceless", "ء"),
        _c("f", "labiodental", "fricative", "voiceless", "ف"),
        _c("s", "alveolar", "fricative", "voiceless", "س"),
        _c("z", "alveolar", "fricative", "voiced", "ز"),
        _c("ʃ", "postalveolar", "fricative", "voiceless", "ش"),
        _c("χ", "uvular", "fricative", "voiceless", "خ"),
        _c("ħ", "pharyngeal", "fricative", "voiceless", "ح"),
        _c("ʕ", "pharyngeal", "fricative", "voiced", "ع"),
        _c("h", "glottal", "fricative", "voiceless", "ه"),
        _c("m", "bilabial", "nasal", "voiced", "م"),
        _c("n", "alveolar", "nasal", "voiced", "ن"),
        _c("l", "alveolar", "lateral_approximant", "voiced", "ل"),
        _c("r", "alveolar", "trill", "voiced", "ر"),
        _c("w", "labial-velar", "approximant", "voiced", "و"),
        _c("j", "palatal", "approximant", "voiced", "ي"),
        # kasra, damma and fatha are bare combining marks: their keys fall
        # back to "arb-unknown"
        _v("i", "close", "front", "unrounded", "\u0650", "ي"),
        _v("iː", "close", "front", "unrounded", "ي"),
        _v("u", "close", "back", "rounded", "\u064f", "و"),
        _v("uː", "close", "back", "rounded", "و"),
        _v("a", "open", "front", "unrounded", "\u064e"),
        _v("aː", "open", "front", "unrounded", "ا"),
    ],
}

BUILTIN_LANGUAGES: tuple[dict[str, Any], ...] = (INDONESIAN, KOREAN, ARABIC)
